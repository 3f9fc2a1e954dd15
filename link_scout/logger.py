# link_scout/logger.py
"""
Логгер проекта LinkScout.

Модули пишут в общий :data:`logger`; CLI настраивает его один раз через
:func:`init_logging`. Консольный вывод идёт в stderr, чтобы отчёт в stdout
оставался чистым; файл логов (если задан) ротируется.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

__all__ = ["logger", "init_logging"]

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger: logging.Logger = logging.getLogger("LinkScout")


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Заменяет обработчики :data:`logger`: stderr и, при *log_file*, файл с ротацией."""
    formatter = logging.Formatter(log_format)
    logger.setLevel(level)
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file is not None:
        # 5 МБ на файл, три архивных копии
        file_handler = RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
