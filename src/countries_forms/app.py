"""Application entry point and initialization.

This module provides the main application startup logic, including:
- Logging setup
- QApplication creation and configuration
- Exception handling setup
- Theme loading
- Main window creation and event loop execution
"""
# Author: Rich Lewis - GitHub: @RichLewis007
# Version: 0.1.0

from __future__ import annotations

import logging
import sys
from contextlib import suppress

from PySide6.QtWidgets import QApplication, QStyle

from .core.exceptions import install_exception_hook
from .core.logging_setup import configure_logging
from .core.paths import APP_DISPLAY_NAME, APP_NAME, APP_ORG, app_version, qss_text
from .core.settings import Settings
from .main_window import MainWindow

logger = logging.getLogger(__name__)


def run(theme: str | None = None, log_level: str = "INFO") -> int:
    """Create the QApplication, wire services, and start the event loop.

    Args:
        theme: Theme to use for this session instead of the saved one.
        log_level: Name of the logging level for the package logger.

    Returns:
        Exit code from the application event loop (typically 0 for normal exit).
    """
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_DISPLAY_NAME)
    app.setOrganizationName(APP_ORG)

    log_path = configure_logging(log_level)
    logger.info("Starting %s %s (log file: %s)", APP_NAME, app_version(), log_path)

    # Dialog factory is passed in so core/exceptions does not import dialogs
    from .dialogs.error_dialog import ErrorDialog

    def create_error_dialog(exc_type, exc, tb, parent):
        return ErrorDialog(exc_type, exc, tb, parent)

    install_exception_hook(error_dialog_factory=create_error_dialog)

    settings = Settings()
    if theme is not None:
        settings.override_theme(theme)

    with suppress(FileNotFoundError):
        app.setStyleSheet(qss_text(settings.get_theme()))
    app.setWindowIcon(app.style().standardIcon(QStyle.StandardPixmap.SP_FileDialogListView))

    win = MainWindow(settings=settings)
    win.show()
    code = app.exec()
    logger.info("Exiting with code %d", code)
    return code
