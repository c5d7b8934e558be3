from __future__ import annotations

import logging

import pytest

from countries_forms import __main__ as cli
from countries_forms import app
from countries_forms.core.logging_setup import configure_logging


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.theme is None
    assert args.log_level == "INFO"


def test_parser_options():
    args = cli.build_parser().parse_args(["--theme", "dark", "--log-level", "debug"])
    assert args.theme == "dark"
    assert args.log_level == "DEBUG"


def test_parser_rejects_unknown_theme():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--theme", "neon"])


def test_main_passes_options_to_run(monkeypatch):
    received = {}

    def fake_run(**kwargs):
        received.update(kwargs)
        return 7

    monkeypatch.setattr(app, "run", fake_run)
    assert cli.main(["--theme", "light"]) == 7
    assert received == {"theme": "light", "log_level": "INFO"}


def test_configure_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    assert configure_logging(logging.DEBUG, log_file=log_file) == log_file

    logging.getLogger("countries_forms.test").debug("hello log")
    for handler in logging.getLogger("countries_forms").handlers:
        handler.flush()

    assert "hello log" in log_file.read_text(encoding="utf-8")
    configure_logging(logging.WARNING, log_file=log_file)
    assert len(logging.getLogger("countries_forms").handlers) == 2
    logger = logging.getLogger("countries_forms")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
