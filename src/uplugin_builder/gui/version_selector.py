# src/uplugin_builder/gui/version_selector.py
from typing import Iterable, List

from PySide6.QtWidgets import QGroupBox, QGridLayout, QCheckBox, QLabel
from PySide6.QtCore import Qt

from uplugin_builder.config import MAX_GRID_COLUMNS
from .components import Colors, Typography


class VersionSelector(QGroupBox):
    """A grid of checkboxes, one per detected engine version."""

    def __init__(self, parent=None):
        super().__init__("Engine Versions", parent)
        self.setFont(Typography.heading_small())
        self.setStyleSheet(f"""
            QGroupBox {{
                color: {Colors.TEXT_SECONDARY.name()};
                border: 1px solid {Colors.BORDER_DEFAULT.name()};
                border-radius: 6px;
                margin-top: 12px;
                padding: 8px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 4px;
            }}
            QCheckBox {{
                color: {Colors.TEXT_PRIMARY.name()};
            }}
        """)
        self.grid_layout = QGridLayout(self)
        self.checkboxes: List[QCheckBox] = []
        self._show_placeholder()

    def set_versions(self, versions: Iterable[str]):
        """Replaces the current checkboxes with one per version."""
        self._clear()

        row, col = 0, 0
        for version in versions:
            checkbox = QCheckBox(version, self)
            checkbox.setFont(Typography.body())
            self.grid_layout.addWidget(checkbox, row, col, Qt.AlignmentFlag.AlignCenter)
            self.checkboxes.append(checkbox)

            col += 1
            if col >= MAX_GRID_COLUMNS:
                col = 0
                row += 1

        if not self.checkboxes:
            self._show_placeholder("No engine versions found under the selected path.")

    def selected_versions(self) -> List[str]:
        return [checkbox.text() for checkbox in self.checkboxes if checkbox.isChecked()]

    def _clear(self):
        while (item := self.grid_layout.takeAt(0)) is not None:
            widget = item.widget()
            if widget:
                widget.deleteLater()
        self.checkboxes = []

    def _show_placeholder(self, text: str = "Select a UE path to detect installed versions."):
        label = QLabel(text)
        label.setFont(Typography.body())
        label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY.name()}; border: none;")
        self.grid_layout.addWidget(label, 0, 0, 1, MAX_GRID_COLUMNS, Qt.AlignmentFlag.AlignCenter)
