"""Tests for the logging setup."""

import logging

import pytest

from spirit_emeraude_api.app.core.logging_config import (
    CONSOLE_HANDLER,
    FILE_HANDLER,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    urllib3_level = logging.getLogger("urllib3").level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logging.getLogger("urllib3").setLevel(urllib3_level)


def _named(root, name):
    return [h for h in root.handlers if h.get_name() == name]


@pytest.mark.parametrize("name, level", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("verbose", logging.INFO)])
def test_resolve_level(name, level):
    assert resolve_level(name) == level


def test_repeated_setup_installs_one_console_handler(root_logger):
    setup_logging("INFO")
    setup_logging("DEBUG")
    assert len(_named(root_logger, CONSOLE_HANDLER)) == 1
    assert root_logger.level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_log_file_receives_records(root_logger, tmp_path):
    logfile = tmp_path / "api.log"
    setup_logging("INFO", str(logfile))
    setup_logging("INFO", str(logfile))
    assert len(_named(root_logger, FILE_HANDLER)) == 1

    logging.getLogger("spirit_emeraude_api.test").info("catalogue chargé")
    for handler in _named(root_logger, FILE_HANDLER):
        handler.flush()
    assert "[INFO] spirit_emeraude_api.test: catalogue chargé" in logfile.read_text(encoding="utf-8")
