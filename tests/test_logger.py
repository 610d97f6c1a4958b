# File: tests/test_logger.py
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from appcast_scout.logger import LOGGER_NAME, configure, init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    init_logging(level="WARNING")


def test_console_handler_writes_to_stderr():
    lg = init_logging(level="DEBUG")
    assert lg.name == LOGGER_NAME
    assert lg.level == logging.DEBUG
    assert len(lg.handlers) == 1
    assert lg.handlers[0].stream is sys.stderr
    assert lg.propagate is False


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "scout.log"
    lg = init_logging(level="INFO", log_file=log_file, log_format="%(levelname)s %(message)s")
    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
    logging.getLogger(f"{LOGGER_NAME}.collector").info("hello")
    for handler in lg.handlers:
        handler.flush()
    assert "INFO hello" in log_file.read_text(encoding="utf-8")


def test_replaced_handlers_are_closed(tmp_path):
    lg = init_logging(level="INFO", log_file=tmp_path / "a.log")
    old_file = next(h for h in lg.handlers if isinstance(h, RotatingFileHandler))
    init_logging(level="INFO")
    assert old_file not in lg.handlers
    assert old_file.stream is None


def test_configure_can_append_handlers():
    lg = init_logging(level="INFO")
    configure(level="INFO", replace_handlers=False)
    assert len(lg.handlers) == 2
