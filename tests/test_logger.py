# File: tests/test_logger.py
"""Тесты настройки логгера (`link_scout/logger.py`)."""
import logging
from logging.handlers import RotatingFileHandler

from link_scout.logger import init_logging, logger


def test_init_logging_writes_to_file(tmp_path):
    log_path = tmp_path / "scout.log"
    lg = init_logging(level="DEBUG", log_file=log_path, log_format="%(levelname)s %(message)s")

    assert lg is logger
    assert lg.level == logging.DEBUG
    assert lg.propagate is False

    logger.debug("checking %s", "https://site.test/")
    for handler in logger.handlers:
        handler.flush()

    assert log_path.read_text(encoding="utf-8").strip() == "DEBUG checking https://site.test/"


def test_init_logging_replaces_handlers(tmp_path):
    init_logging(log_file=tmp_path / "first.log")
    init_logging(level="WARNING")

    assert len(logger.handlers) == 1
    assert not any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    assert logger.level == logging.WARNING
