"""Settings management using QSettings.

This module provides a typed wrapper around Qt's QSettings for persistent
application settings. It centralizes setting keys and provides convenience
methods for common data types (strings, window state, etc.).

Settings are automatically persisted to platform-appropriate locations:
- macOS: ~/Library/Preferences/
- Windows: Registry
- Linux: ~/.config/
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QSettings

THEMES = ("light", "dark")
DEFAULT_FOOTNOTE = "Countries Forms sample"


@dataclass(frozen=True)
class SettingsKeys:
    """Centralize QSettings keys used by the application."""

    theme: str = "ui/theme"
    window_geometry: str = "window/geometry"
    window_state: str = "window/state"
    footnote: str = "dialogs/footnote"


class Settings:
    """Wrapper around QSettings with convenience getters/setters."""

    def __init__(self) -> None:
        self._qs = QSettings()
        self.keys = SettingsKeys()
        self._theme_override: str | None = None

    def get_str(self, key: str, default: str = "") -> str:
        value = self._qs.value(key, defaultValue=default)
        return str(value) if value is not None else default

    def set_str(self, key: str, value: str) -> None:
        self._qs.setValue(key, value)

    def get_theme(self) -> str:
        if self._theme_override is not None:
            return self._theme_override
        theme = self.get_str(self.keys.theme, "light")
        return theme if self.validate_theme(theme) else "light"

    def set_theme(self, theme: str) -> None:
        self._theme_override = None
        self.set_str(self.keys.theme, theme)

    def override_theme(self, theme: str) -> None:
        """Use a theme for this session only (command-line override)."""
        if not self.validate_theme(theme):
            raise ValueError(f"Unknown theme: {theme}")
        self._theme_override = theme

    def validate_theme(self, theme: str) -> bool:
        """Validate that theme is one of the supported themes."""
        return theme in THEMES

    def get_footnote(self) -> str:
        return self.get_str(self.keys.footnote, DEFAULT_FOOTNOTE)

    def set_footnote(self, text: str) -> None:
        self.set_str(self.keys.footnote, text)

    def _get_bytes(self, key: str) -> bytes | None:
        value = self._qs.value(key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value
        if isinstance(value, str):
            try:
                return value.encode("latin1")
            except UnicodeEncodeError:
                return None
        # QByteArray
        try:
            return bytes(value)
        except TypeError:
            return None

    def get_window_geometry(self) -> bytes | None:
        """Get saved window geometry as bytes, or None if not set."""
        return self._get_bytes(self.keys.window_geometry)

    def set_window_geometry(self, geometry: bytes) -> None:
        self._qs.setValue(self.keys.window_geometry, geometry)

    def get_window_state(self) -> bytes | None:
        """Get saved window state as bytes, or None if not set."""
        return self._get_bytes(self.keys.window_state)

    def set_window_state(self, state: bytes) -> None:
        self._qs.setValue(self.keys.window_state, state)

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values."""
        self._theme_override = None
        self._qs.clear()

    def sync(self) -> None:
        self._qs.sync()
