"""Application paths and resource management.

This module provides functions for accessing:
- Bundled assets (QSS themes) via importlib.resources
- The writable per-user data directory for logs
- Works both from source and when installed from wheels

Author: Rich Lewis - GitHub: @RichLewis007
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from importlib.resources import files
from pathlib import Path

from PySide6.QtCore import QStandardPaths

# Application metadata constants
APP_NAME = "countries-forms"
APP_DISPLAY_NAME = "Countries Forms"
APP_ORG = "RichLewis.com"
_PACKAGE = "countries_forms"
_ASSETS_DIR = "assets"  # Directory name within package for assets
_DEFAULT_VERSION = "0.1.0"  # Fallback version if unable to determine


def app_version() -> str:
    """Get the application version.

    Tries multiple approaches:
    1. importlib.metadata.version() (works when installed)
    2. Reading pyproject.toml from source tree (development mode)
    3. Returns default version as fallback

    Returns:
        Version string (e.g., "0.1.0")
    """
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        pass

    # Navigate from src/countries_forms/core/paths.py to project root
    pyproject_path = Path(__file__).resolve().parents[3] / "pyproject.toml"
    if pyproject_path.exists():
        import tomllib

        try:
            with pyproject_path.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            return _DEFAULT_VERSION
        project = data.get("project", {})
        if "version" in project:
            return str(project["version"])

    return _DEFAULT_VERSION


def qss_text(theme: str = "light") -> str:
    """Return the bundled QSS stylesheet as text for the given theme."""
    filename = "styles_dark.qss" if theme == "dark" else "styles.qss"
    return (files(_PACKAGE) / _ASSETS_DIR / filename).read_text(encoding="utf-8")


def app_data_dir() -> Path:
    """Return the writable per-user application data directory."""
    return Path(QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation))
