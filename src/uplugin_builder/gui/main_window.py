# src/uplugin_builder/gui/main_window.py
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QFileDialog, QMessageBox, QApplication
)
from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent, QPalette
import qtawesome as qta

from uplugin_builder.config import (
    APP_NAME, DEFAULT_DOCUMENTS_DIR, DEFAULT_ENGINE_ROOT, PLUGIN_FILE_FILTER
)
from uplugin_builder.core.event_bus import EventBus
from uplugin_builder.core.build_models import BuildRequest
from uplugin_builder.services.output_formatter import OutputColor
from .build_console import BuildConsole
from .components import Colors, Typography, ModernButton
from .status_bar import StatusBar
from .version_selector import VersionSelector

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Path pickers, the engine version grid, the Build button and the build console.
    The window only collects input and displays output; all work is requested
    through the event bus.
    """

    def __init__(self, event_bus: EventBus):
        super().__init__()
        self.event_bus = event_bus
        self._closing = False

        self.setWindowTitle(APP_NAME)
        self.resize(900, 700)
        self.setMinimumSize(640, 480)

        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Window, Colors.SECONDARY_BG)
        self.setPalette(palette)

        self.setup_ui()

        self.status_bar = StatusBar(self.event_bus)
        self.setStatusBar(self.status_bar)

        self._connect_events()

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(10)

        paths_layout = QGridLayout()
        paths_layout.setHorizontalSpacing(8)

        self.edit_ue_path = self._create_path_field("Unreal Engine installation path")
        self.btn_select_ue_path = ModernButton("Select UE Path", "secondary")
        self.btn_select_ue_path.setIcon(qta.icon("fa5s.folder-open", color=Colors.TEXT_PRIMARY.name()))
        self.btn_select_ue_path.clicked.connect(self.on_select_ue_path)

        self.edit_plugin_file = self._create_path_field(".uplugin file")
        self.btn_select_plugin_file = ModernButton("Select Plugin File", "secondary")
        self.btn_select_plugin_file.setIcon(qta.icon("fa5s.puzzle-piece", color=Colors.TEXT_PRIMARY.name()))
        self.btn_select_plugin_file.clicked.connect(self.on_select_plugin_file)

        self.edit_package_folder = self._create_path_field("Package output folder")
        self.btn_select_package_folder = ModernButton("Select Package Folder", "secondary")
        self.btn_select_package_folder.setIcon(qta.icon("fa5s.box-open", color=Colors.TEXT_PRIMARY.name()))
        self.btn_select_package_folder.clicked.connect(self.on_select_package_folder)

        for row, (label_text, edit, button) in enumerate([
            ("UE Path", self.edit_ue_path, self.btn_select_ue_path),
            ("Plugin", self.edit_plugin_file, self.btn_select_plugin_file),
            ("Output", self.edit_package_folder, self.btn_select_package_folder),
        ]):
            label = QLabel(label_text)
            label.setFont(Typography.body())
            label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY.name()};")
            paths_layout.addWidget(label, row, 0)
            paths_layout.addWidget(edit, row, 1)
            paths_layout.addWidget(button, row, 2)

        self.version_selector = VersionSelector()

        build_row = QHBoxLayout()
        build_row.addStretch()
        self.btn_build = ModernButton("Build", "primary")
        self.btn_build.setIcon(qta.icon("fa5s.hammer", color=Colors.TEXT_PRIMARY.name()))
        self.btn_build.setMinimumWidth(140)
        self.btn_build.clicked.connect(self.on_build_clicked)
        build_row.addWidget(self.btn_build)

        self.console = BuildConsole()

        main_layout.addLayout(paths_layout)
        main_layout.addWidget(self.version_selector)
        main_layout.addLayout(build_row)
        main_layout.addWidget(self.console, 1)

    def _create_path_field(self, placeholder: str) -> QLineEdit:
        edit = QLineEdit()
        edit.setReadOnly(True)
        edit.setPlaceholderText(placeholder)
        edit.setFont(Typography.body())
        edit.setStyleSheet(f"""
            QLineEdit {{
                background-color: {Colors.ELEVATED_BG.name()};
                color: {Colors.TEXT_PRIMARY.name()};
                border: 1px solid {Colors.BORDER_DEFAULT.name()};
                border-radius: 6px;
                padding: 5px;
            }}
        """)
        return edit

    def _connect_events(self):
        self.event_bus.subscribe("build_output_received", self.console.append_output)
        self.event_bus.subscribe("engine_versions_detected", self.version_selector.set_versions)
        self.event_bus.subscribe("build_launch_started", lambda: self.btn_build.setEnabled(False))
        self.event_bus.subscribe("build_launch_ended", lambda: self.btn_build.setEnabled(True))
        self.event_bus.subscribe("build_request_rejected", self.show_missing_input)

    # --- Path Pickers ---
    def on_select_ue_path(self):
        path = QFileDialog.getExistingDirectory(self, "Select Unreal Engine Installation Path", DEFAULT_ENGINE_ROOT)
        if path:
            self.edit_ue_path.setText(path)
            self.event_bus.emit("engine_root_selected", path)

    def on_select_plugin_file(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Select .uplugin File", DEFAULT_DOCUMENTS_DIR, PLUGIN_FILE_FILTER
        )
        if file_path:
            self.edit_plugin_file.setText(file_path)

    def on_select_package_folder(self):
        path = QFileDialog.getExistingDirectory(self, "Select Package Output Folder", DEFAULT_DOCUMENTS_DIR)
        if path:
            self.edit_package_folder.setText(path)

    # --- Build ---
    def current_request(self) -> BuildRequest:
        return BuildRequest(
            engine_root=self.edit_ue_path.text(),
            plugin_file=self.edit_plugin_file.text(),
            package_root=self.edit_package_folder.text(),
            versions=tuple(self.version_selector.selected_versions()),
        )

    def on_build_clicked(self):
        self.event_bus.emit("build_requested", self.current_request())

    def show_missing_input(self, message: str):
        self.console.append_output(f"{message}\n", OutputColor.RED)
        QMessageBox.critical(self, "Error", message)

    def closeEvent(self, event: QCloseEvent):
        if self._closing:
            event.accept()
            return

        self._closing = True
        logger.info("Close event triggered - starting graceful shutdown...")
        self.event_bus.emit("application_shutdown")

        event.ignore()
        QTimer.singleShot(500, QApplication.instance().quit)
