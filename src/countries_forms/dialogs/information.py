"""Modal information dialog.

information() shows a one-line heading in a message box with a single
button whose text can be changed. The box is parented to the owner's
window, so Qt centres it over the control that triggered it.

The dialog is described by an InformationPage first and only then turned
into a QMessageBox, so its content can be checked without running a
modal event loop.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
from dataclasses import dataclass

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMessageBox, QSizePolicy, QWidget

from ..core.settings import DEFAULT_FOOTNOTE, Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InformationPage:
    """Content of an information dialog."""

    heading: str
    footnote: str = DEFAULT_FOOTNOTE
    button_text: str = "Ok"
    caption: str = "Information"
    icon: QMessageBox.Icon = QMessageBox.Icon.Information


def information_page(
    heading: str,
    button_text: str = "Ok",
    footnote: str | None = None,
) -> InformationPage:
    """Build the page for an information dialog.

    Args:
        heading: What to display
        button_text: Text of the single accept button
        footnote: Small print under the heading; defaults to the configured footnote
    """
    if footnote is None:
        footnote = Settings().get_footnote()
    return InformationPage(heading=heading, footnote=footnote, button_text=button_text)


def build_message_box(owner: QWidget | None, page: InformationPage) -> QMessageBox:
    parent = owner.window() if owner is not None else None
    box = QMessageBox(parent)
    box.setWindowModality(Qt.WindowModality.WindowModal)
    box.setWindowTitle(page.caption)
    box.setIcon(page.icon)
    box.setText(page.heading)
    if page.footnote:
        box.setInformativeText(page.footnote)
    button = box.addButton(page.button_text, QMessageBox.ButtonRole.AcceptRole)
    box.setDefaultButton(button)
    box.setEscapeButton(button)
    box.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred)
    box.adjustSize()
    return box


def information(owner: QWidget | None, heading: str, button_text: str = "Ok") -> int:
    """Display a message with the option to assign the button text.

    Centers on owner.

    Returns:
        The dialog result code from QMessageBox.exec().
    """
    page = information_page(heading, button_text=button_text)
    logger.info("Information: %s", heading)
    box = build_message_box(owner, page)
    return box.exec()
