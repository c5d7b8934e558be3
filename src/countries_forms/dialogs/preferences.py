"""Preferences dialog for application settings.

This dialog allows users to modify application preferences:
- Theme selection (light/dark)
- Footnote shown in information dialogs
- Reset all settings to defaults

Settings are validated before saving, and the dialog emits a signal
when the theme changes so the application can update immediately.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..core.settings import THEMES, Settings
from ..core.ui_loader import load_ui, require_child

logger = logging.getLogger(__name__)

_UI_FILE = "preferences_dialog.ui"


class PreferencesDialog(QDialog):
    """Dialog for editing user preferences with validation and theme switching."""

    theme_changed = Signal(str)  # Emitted when theme changes

    def __init__(self, settings: Settings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Preferences")
        self._settings = settings

        self._ui = load_ui(_UI_FILE, self)
        main_layout = QVBoxLayout(self)
        main_layout.addWidget(self._ui)

        self.theme_combo = require_child(self._ui, QComboBox, "themeComboBox", _UI_FILE)
        self.theme_combo.addItems(list(THEMES))
        self.footnote_edit = require_child(self._ui, QLineEdit, "footnoteLineEdit", _UI_FILE)
        self._load_values()

        reset_button = require_child(self._ui, QPushButton, "resetToDefaultsButton", _UI_FILE)
        reset_button.clicked.connect(self._on_reset_defaults)

        self.button_box = require_child(self._ui, QDialogButtonBox, "buttonBox", _UI_FILE)
        self.button_box.accepted.connect(self.accept)
        self.button_box.rejected.connect(self.reject)

    def _load_values(self) -> None:
        self.theme_combo.setCurrentText(self._settings.get_theme())
        self.footnote_edit.setText(self._settings.get_footnote())

    def _on_reset_defaults(self) -> None:
        reply = QMessageBox.question(
            self,
            "Reset to Defaults",
            "This will reset all preferences to their default values.\n\n"
            "This action cannot be undone. Continue?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply == QMessageBox.StandardButton.Yes:
            self._settings.reset_to_defaults()
            logger.info("Preferences reset to defaults")
            self._load_values()

    def accept(self) -> None:
        """Validate and save preferences."""
        new_theme = self.theme_combo.currentText()
        if not self._settings.validate_theme(new_theme):
            QMessageBox.warning(self, "Invalid Theme", f"Invalid theme selected: {new_theme}")
            return

        old_theme = self._settings.get_theme()
        self._settings.set_theme(new_theme)
        self._settings.set_footnote(self.footnote_edit.text().strip())

        if old_theme != new_theme:
            logger.info("Theme changed from %s to %s", old_theme, new_theme)
            self.theme_changed.emit(new_theme)

        super().accept()
