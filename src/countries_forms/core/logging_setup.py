"""Logging configuration.

Logs go to stderr and to a rotating file in the per-user application
data directory. Modules log through logging.getLogger(__name__).
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .paths import APP_NAME, app_data_dir

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_MAX_BYTES = 512 * 1024
_BACKUP_COUNT = 3


def log_file_path() -> Path:
    return app_data_dir() / f"{APP_NAME}.log"


def configure_logging(level: int | str = logging.INFO, log_file: Path | None = None) -> Path | None:
    """Install console and rotating file handlers on the package logger.

    Calling this again replaces the handlers installed by the previous call.

    Returns:
        The log file path, or None if the file handler could not be created.
    """
    logger = logging.getLogger("countries_forms")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    path = log_file or log_file_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError as e:
        logger.warning("File logging disabled (%s): %s", path, e)
        return None
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    return path
