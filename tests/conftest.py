"""Shared fixtures: isolated settings and a constructed main window."""

from __future__ import annotations

import os

# Must be set before pytest-qt creates the QApplication
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings, QStandardPaths

from countries_forms.core.settings import Settings
from countries_forms.main_window import MainWindow


@pytest.fixture(autouse=True)
def isolated_settings(qapp, tmp_path):
    """Point QSettings and app data paths away from the real user profile."""
    qapp.setOrganizationName("countries-forms-tests")
    qapp.setApplicationName("countries-forms-tests")
    QStandardPaths.setTestModeEnabled(True)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)
    QSettings.setPath(QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(tmp_path))
    yield
    QSettings().clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def main_window(qtbot, settings) -> MainWindow:
    win = MainWindow(settings=settings)
    qtbot.addWidget(win)
    return win


@pytest.fixture
def shown_window(main_window) -> MainWindow:
    main_window.show()
    return main_window
