"""Global exception handling.

Installs a sys.excepthook that logs uncaught exceptions and, when a
QApplication is running, shows them in an error dialog. The dialog
factory is passed in by the caller so this module does not import the
dialogs package.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from types import TracebackType

from PySide6.QtWidgets import QApplication, QDialog, QWidget

logger = logging.getLogger(__name__)

ErrorDialogFactory = Callable[
    [type[BaseException], BaseException, TracebackType | None, QWidget | None], QDialog
]


def install_exception_hook(error_dialog_factory: ErrorDialogFactory | None = None) -> None:
    """Replace sys.excepthook with one that logs and reports to the user."""
    previous = sys.excepthook

    def hook(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            previous(exc_type, exc, tb)
            return
        logger.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        if error_dialog_factory is None or QApplication.instance() is None:
            return
        parent = QApplication.activeWindow()
        dialog = error_dialog_factory(exc_type, exc, tb, parent)
        dialog.exec()

    sys.excepthook = hook
