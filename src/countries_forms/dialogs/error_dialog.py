"""Error dialog with detailed stack trace display.

This module provides a user-friendly error dialog that:
- Displays full exception details and stack trace
- Provides copy-to-clipboard functionality for easy error reporting
- Uses a scrollable text area for long stack traces

The dialog is shown by the global exception hook when an uncaught
exception reaches the event loop.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import traceback
from types import TracebackType

from PySide6.QtGui import QFont, QKeySequence, QTextCursor
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QDialogButtonBox,
    QLabel,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from ..core.ui_loader import load_ui, require_child

_UI_FILE = "error_dialog.ui"


class ErrorDialog(QDialog):
    """Dialog showing error details with copy-to-clipboard functionality."""

    def __init__(
        self,
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Unhandled Exception")
        self.setMinimumSize(600, 400)

        self._ui = load_ui(_UI_FILE, self)
        main_layout = QVBoxLayout(self)
        main_layout.addWidget(self._ui)

        message_label = require_child(self._ui, QLabel, "messageLabel", _UI_FILE)
        self.text_edit = require_child(self._ui, QTextEdit, "errorDetailsTextEdit", _UI_FILE)
        button_box = require_child(self._ui, QDialogButtonBox, "buttonBox", _UI_FILE)

        message_label.setText(
            "An unexpected error occurred.\n\n"
            "Error details are shown below. Click 'Copy to Clipboard' to copy them."
        )

        self.details = "".join(traceback.format_exception(exc_type, exc, tb))
        self.text_edit.setPlainText(self.details)
        self.text_edit.setFont(QFont("Courier"))
        self.text_edit.moveCursor(QTextCursor.MoveOperation.End)

        self.copy_button = QPushButton("Copy to Clipboard")
        self.copy_button.setShortcut(QKeySequence.StandardKey.Copy)
        self.copy_button.clicked.connect(self.copy_details)
        button_box.addButton(self.copy_button, QDialogButtonBox.ButtonRole.ActionRole)
        button_box.accepted.connect(self.accept)

    def copy_details(self) -> None:
        QApplication.clipboard().setText(f"Error Details:\n\n{self.details}")
        self.copy_button.setText("Copied!")
        self.copy_button.setEnabled(False)
