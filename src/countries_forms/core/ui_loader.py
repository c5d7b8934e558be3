"""Qt Designer UI file loading.

UI files are packaged under assets/ui and loaded at runtime with
QUiLoader, so no generated Python code is needed and the files work
both from source and when installed from wheels.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from importlib.resources import files
from typing import TypeVar

from PySide6.QtCore import QBuffer, QIODevice, QObject
from PySide6.QtUiTools import QUiLoader
from PySide6.QtWidgets import QWidget

_UI_DIR = "ui"  # Subdirectory within assets containing .ui files

W = TypeVar("W", bound=QObject)


def ui_bytes(filename: str) -> bytes:
    """Return raw bytes for a packaged Qt Designer .ui file."""
    return (files("countries_forms") / "assets" / _UI_DIR / filename).read_bytes()


def load_ui(filename: str, parent: QWidget | None = None) -> QWidget:
    """Load a Qt Designer .ui file into a QWidget using QUiLoader."""
    data = ui_bytes(filename)
    buffer = QBuffer()
    buffer.setData(data)
    buffer.open(QIODevice.OpenModeFlag.ReadOnly)
    try:
        loader = QUiLoader()
        widget = loader.load(buffer, parent)
    finally:
        buffer.close()
    if widget is None:
        raise RuntimeError(f"Failed to load UI file: {filename}")
    return widget


def require_child(root: QWidget, kind: type[W], name: str, source: str) -> W:
    """Find a named child widget or raise if the .ui file lacks it."""
    child = root.findChild(kind, name)
    if child is None:
        raise RuntimeError(f"{name} not found in {source}")
    return child
