"""About dialog with name, version and icon."""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from PySide6.QtCore import QSize, Qt
from PySide6.QtWidgets import QDialog, QLabel, QPushButton, QStyle, QVBoxLayout, QWidget

from ..core.paths import APP_DISPLAY_NAME
from ..core.ui_loader import load_ui, require_child

_UI_FILE = "about_dialog.ui"


class AboutDialog(QDialog):
    """About dialog showing the application name and version."""

    def __init__(self, version: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"About {APP_DISPLAY_NAME}")
        self.setMinimumWidth(320)
        self.setMaximumWidth(400)
        self.setWindowFlags(Qt.WindowType.Dialog)

        self._ui = load_ui(_UI_FILE, self)
        main_layout = QVBoxLayout(self)
        main_layout.addWidget(self._ui)

        icon_label = require_child(self._ui, QLabel, "iconLabel", _UI_FILE)
        self.name_label = require_child(self._ui, QLabel, "nameLabel", _UI_FILE)
        self.version_label = require_child(self._ui, QLabel, "versionLabel", _UI_FILE)
        ok_button = require_child(self._ui, QPushButton, "okButton", _UI_FILE)

        icon = self.style().standardIcon(QStyle.StandardPixmap.SP_MessageBoxInformation)
        self.setWindowIcon(icon)
        icon_label.setPixmap(icon.pixmap(QSize(48, 48)))

        self.name_label.setText(f"<h2>{APP_DISPLAY_NAME}</h2>")
        self.version_label.setText(f"Version {version}")

        ok_button.clicked.connect(self.accept)
