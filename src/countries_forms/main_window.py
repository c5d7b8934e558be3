"""Main application window implementation.

The window shows two lists of countries side by side:
- country records (immutable CountryRecord values)
- country classes (mutable Country objects)

Both lists are bound to a CountryListModel and populated the first time
the window is shown. Each list has a button that shows the selected
country's key in an information dialog.

The UI layout is loaded from a Qt Designer .ui file, and widgets are
accessed programmatically for signal/slot connections.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QModelIndex, Slot
from PySide6.QtGui import QAction, QKeySequence, QShowEvent
from PySide6.QtWidgets import QApplication, QListView, QMainWindow, QMessageBox, QPushButton

from .core.binding import CountryListModel
from .core.countries import Country, CountryRecord, Records, References
from .core.extensions import last, yes_no
from .core.paths import APP_DISPLAY_NAME, qss_text
from .core.settings import Settings
from .core.ui_loader import load_ui, require_child
from .core.window_state import WindowStateManager
from .dialogs import information as info_dialog
from .dialogs.preferences import PreferencesDialog

logger = logging.getLogger(__name__)

_UI_FILE = "main_window.ui"


class MainWindow(QMainWindow):
    """Form listing country records and country classes."""

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings
        self.window_state = WindowStateManager(settings, self)
        self.country_records_source = CountryListModel("name", self)
        self.country_class_source = CountryListModel("name", self)
        self._populated = False

        self.setWindowTitle(APP_DISPLAY_NAME)

        self._build_actions()
        self._build_menus()
        self._load_ui()

        self.current_country_record_button.clicked.connect(self.on_country_record_clicked)
        self.country_class_button.clicked.connect(self.on_country_class_clicked)
        self.country_record_list.doubleClicked.connect(self._on_record_double_clicked)
        self.country_class_list.doubleClicked.connect(self._on_class_double_clicked)

        self.window_state.restore_state()

    def _build_actions(self) -> None:
        self.action_prefs = QAction("Preferences", self)
        self.action_prefs.setShortcut(QKeySequence.StandardKey.Preferences)
        self.action_prefs.triggered.connect(self.on_open_prefs)

        self.action_quit = QAction("Quit", self)
        self.action_quit.setShortcut(QKeySequence.StandardKey.Quit)
        self.action_quit.triggered.connect(self.close)

        self.action_about = QAction("About", self)
        # On macOS, this makes the action appear in the app menu
        self.action_about.setMenuRole(QAction.MenuRole.AboutRole)
        self.action_about.triggered.connect(self.on_about)

    def _build_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.action_prefs)
        file_menu.addSeparator()
        file_menu.addAction(self.action_quit)

        help_menu = self.menuBar().addMenu("&Help")
        help_menu.addAction(self.action_about)

    def _load_ui(self) -> None:
        self.ui = load_ui(_UI_FILE, self)
        self.setCentralWidget(self.ui)

        self.country_record_list = require_child(
            self.ui, QListView, "countryRecordListView", _UI_FILE
        )
        self.current_country_record_button = require_child(
            self.ui, QPushButton, "currentCountryRecordButton", _UI_FILE
        )
        self.country_class_list = require_child(
            self.ui, QListView, "countryClassListView", _UI_FILE
        )
        self.country_class_button = require_child(
            self.ui, QPushButton, "countryClassButton", _UI_FILE
        )

    def showEvent(self, event: QShowEvent) -> None:  # type: ignore[override]
        super().showEvent(event)
        if not self._populated:
            self._populated = True
            self.populate()

    def populate(self) -> None:
        """Bind both lists to freshly loaded country collections."""
        self.country_records_source.set_data_source(Records.countries())
        self.country_record_list.setModel(self.country_records_source)

        self.country_class_source.set_data_source(References.countries())
        self.country_class_list.setModel(self.country_class_source)

        for view, source in (
            (self.country_record_list, self.country_records_source),
            (self.country_class_list, self.country_class_source),
        ):
            if source.rowCount() > 0:
                view.setCurrentIndex(source.index(0, 0))

        records = self.country_records_source.data_source
        logger.info(
            "Loaded %d country records and %d country classes",
            len(records),
            self.country_class_source.rowCount(),
        )
        if records:
            self._set_status(
                f"Loaded {len(records)} countries ({records[0].name} to {last(records).name})"
            )
        else:
            self._set_status("No countries available.")

    def _set_status(self, message: str, timeout_ms: int = 0) -> None:
        self.statusBar().showMessage(message, timeout_ms)

    def _selected(self, view: QListView, source: CountryListModel) -> Any | None:
        index = view.currentIndex()
        if not index.isValid():
            return None
        return source.item_at(index.row())

    def selected_country_record(self) -> CountryRecord | None:
        return self._selected(self.country_record_list, self.country_records_source)

    def selected_country_class(self) -> Country | None:
        return self._selected(self.country_class_list, self.country_class_source)

    def _show_key(self, button: QPushButton, current: CountryRecord | Country | None) -> None:
        logger.debug(
            "%s clicked, selection present: %s",
            button.objectName(),
            yes_no(current is not None),
        )
        if current is None:
            logger.warning("%s clicked with no country selected", button.objectName())
            self._set_status("Select a country first.", 3000)
            return
        info_dialog.information(button, f"Key: {current.id}")

    @Slot()
    def on_country_record_clicked(self) -> None:
        self._show_key(self.current_country_record_button, self.selected_country_record())

    @Slot()
    def on_country_class_clicked(self) -> None:
        self._show_key(self.country_class_button, self.selected_country_class())

    def _on_record_double_clicked(self, _index: QModelIndex) -> None:
        self.on_country_record_clicked()

    def _on_class_double_clicked(self, _index: QModelIndex) -> None:
        self.on_country_class_clicked()

    @Slot()
    def on_open_prefs(self) -> None:
        """Open the preferences dialog and handle theme changes."""
        dlg = PreferencesDialog(settings=self.settings, parent=self)
        dlg.theme_changed.connect(self._on_theme_changed)
        dlg.exec()

    def _on_theme_changed(self, theme: str) -> None:
        """Apply a new theme to the whole application so dialogs inherit it."""
        try:
            qss = qss_text(theme)
        except FileNotFoundError:
            QMessageBox.warning(self, "Theme", f"Stylesheet not found for theme: {theme}")
            return
        app = QApplication.instance()
        if isinstance(app, QApplication):
            app.setStyleSheet(qss)
        self._set_status(f"Theme changed to {theme}", 2000)

    @Slot()
    def on_about(self) -> None:
        from .core.paths import app_version
        from .dialogs.about import AboutDialog

        dlg = AboutDialog(version=app_version(), parent=self)
        dlg.exec()

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Save window state before closing."""
        self.window_state.save_state()
        super().closeEvent(event)
