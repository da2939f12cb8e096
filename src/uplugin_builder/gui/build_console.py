# src/uplugin_builder/gui/build_console.py
from PySide6.QtWidgets import QTextEdit, QMenu
from PySide6.QtGui import QTextCursor, QTextCharFormat
from PySide6.QtCore import Qt

from uplugin_builder.services.output_formatter import OutputColor
from .components import Colors, Typography, qcolor_for


class BuildConsole(QTextEdit):
    """Read-only, auto-scrolling view that shows build output in its display color."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setFont(Typography.monospace())
        self.setStyleSheet(f"""
            QTextEdit {{
                background-color: {Colors.PRIMARY_BG.name()};
                color: {Colors.TEXT_PRIMARY.name()};
                border: 1px solid {Colors.BORDER_DEFAULT.name()};
                border-radius: 6px;
                padding: 5px;
            }}
            QScrollBar:vertical {{
                border: none;
                background: {Colors.SCROLL_TRACK.name()};
                width: 12px;
                margin: 0px;
            }}
            QScrollBar::handle:vertical {{
                background: {Colors.SCROLL_HANDLE.name()};
                min-height: 20px;
                border-radius: 6px;
            }}
            QScrollBar:horizontal {{
                border: none;
                background: {Colors.SCROLL_TRACK.name()};
                height: 12px;
                margin: 0px;
            }}
            QScrollBar::handle:horizontal {{
                background: {Colors.SCROLL_HANDLE.name()};
                min-width: 20px;
                border-radius: 6px;
            }}
            QScrollBar::add-line, QScrollBar::sub-line {{
                border: none;
                background: none;
                width: 0px;
                height: 0px;
            }}
            QScrollBar::add-page, QScrollBar::sub-page {{
                background: none;
            }}
        """)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.customContextMenuRequested.connect(self.show_context_menu)

    def append_output(self, text: str, color: OutputColor = OutputColor.DEFAULT):
        cursor = self.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        char_format = QTextCharFormat()
        char_format.setForeground(qcolor_for(color))
        cursor.insertText(text, char_format)
        self.setTextCursor(cursor)
        self.ensureCursorVisible()

    def show_context_menu(self, pos):
        menu = QMenu(self)
        copy_action = menu.addAction("Copy")
        copy_action.triggered.connect(self.copy)
        menu.addSeparator()
        clear_action = menu.addAction("Clear Log")
        clear_action.triggered.connect(self.clear)
        menu.exec(self.viewport().mapToGlobal(pos))
