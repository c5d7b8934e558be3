"""Package entry point for command-line execution.

This module provides the console script entry point for the application.
When run as `python -m countries_forms` or via the console script,
it calls the main run() function from the app module.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .core.settings import THEMES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Countries Forms Application")
    parser.add_argument(
        "--theme",
        choices=THEMES,
        help="Use this theme for the session (overrides settings)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        type=str.upper,
        help="Logging level for console and log file (default: INFO)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the console script.

    Parses command-line arguments and runs the application.

    Returns:
        Exit code from the application (0 for success).
    """
    args = build_parser().parse_args(argv)

    from .app import run

    return run(theme=args.theme, log_level=args.log_level)


if __name__ == "__main__":
    raise SystemExit(main())
