"""Window state persistence management.

Saves and restores a QMainWindow's geometry (position, size) and state
(toolbars, docks) through Settings.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from PySide6.QtWidgets import QMainWindow

from .settings import Settings

_DEFAULT_SIZE = (640, 420)


class WindowStateManager:
    """Manages window state persistence for QMainWindow."""

    def __init__(self, settings: Settings, window: QMainWindow) -> None:
        self.settings = settings
        self.window = window

    def restore_state(self) -> bool:
        """Restore window geometry and state from settings.

        On first run (no saved geometry) the window gets a default size
        instead.

        Returns:
            True if saved geometry was restored.
        """
        restored = False
        geometry = self.settings.get_window_geometry()
        if geometry is not None:
            restored = bool(self.window.restoreGeometry(geometry))
        if not restored:
            self.window.resize(*_DEFAULT_SIZE)

        state = self.settings.get_window_state()
        if state is not None:
            self.window.restoreState(state)
        return restored

    def save_state(self) -> None:
        """Save current window geometry and state to settings."""
        geometry = self.window.saveGeometry()
        state = self.window.saveState()
        self.settings.set_window_geometry(bytes(geometry))  # type: ignore[arg-type]
        self.settings.set_window_state(bytes(state))  # type: ignore[arg-type]
