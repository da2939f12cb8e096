from PySide6.QtGui import QColor, QFont
from PySide6.QtWidgets import QPushButton
from PySide6.QtCore import Qt

from uplugin_builder.services.output_formatter import OutputColor


class Colors:
    """
    A dark, dev-tool color palette shared by every widget in the application.
    """
    PRIMARY_BG = QColor("#0d1117")  # Near-black, for the console and main background
    SECONDARY_BG = QColor("#161b22")  # Dark grey, for panels
    ELEVATED_BG = QColor("#21262d")  # Lighter grey, for buttons and inputs
    BORDER_DEFAULT = QColor("#30363d")

    TEXT_PRIMARY = QColor("#f0f6fc")
    TEXT_SECONDARY = QColor("#8b949e")

    # --- Accent Colors ---
    ACCENT_BLUE = QColor("#58a6ff")
    ACCENT_GREEN = QColor("#3fb950")  # For success states
    ACCENT_RED = QColor("#f85149")  # For error states
    ACCENT_AMBER = QColor("#d29922")  # For warnings

    # Scrollbar pieces
    SCROLL_TRACK = QColor("#2d2d2d")
    SCROLL_HANDLE = QColor("#555555")


OUTPUT_COLORS = {
    OutputColor.DEFAULT: Colors.TEXT_PRIMARY,
    OutputColor.RED: Colors.ACCENT_RED,
    OutputColor.AMBER: Colors.ACCENT_AMBER,
    OutputColor.GREEN: Colors.ACCENT_GREEN,
}


def qcolor_for(color: OutputColor) -> QColor:
    return OUTPUT_COLORS.get(color, Colors.TEXT_PRIMARY)


class Typography:
    """A central place for defining font styles."""

    @staticmethod
    def get_font(size=12, weight=QFont.Weight.Normal, family="Segoe UI"):
        return QFont(family, size, weight)

    @staticmethod
    def heading_small():
        return Typography.get_font(12, QFont.Weight.Bold)

    @staticmethod
    def body():
        return Typography.get_font(11, QFont.Weight.Normal)

    @staticmethod
    def monospace(size=10):
        return Typography.get_font(size, family="JetBrains Mono")


class ModernButton(QPushButton):
    """A custom-styled button that fits the application's theme."""

    def __init__(self, text="", button_type="primary"):
        super().__init__(text)
        self.setMinimumHeight(32)
        self.setFont(Typography.body())
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        bg_color = Colors.ACCENT_BLUE.darker(150) if button_type == "primary" else Colors.ELEVATED_BG
        hover_color = bg_color.lighter(120) if button_type == "primary" else Colors.BORDER_DEFAULT

        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {bg_color.name()};
                color: {Colors.TEXT_PRIMARY.name()};
                border: 1px solid {Colors.BORDER_DEFAULT.name()};
                border-radius: 6px;
                padding: 5px 15px;
            }}
            QPushButton:hover {{
                background-color: {hover_color.name()};
                border-color: {Colors.ACCENT_BLUE.name()};
            }}
            QPushButton:pressed {{
                background-color: {Colors.ACCENT_GREEN.darker(110).name()};
            }}
            QPushButton:disabled {{
                background-color: {Colors.SECONDARY_BG.name()};
                color: {Colors.TEXT_SECONDARY.name()};
            }}
        """)
