#!/usr/bin/env python3
"""
Logging configuration module for the cargo tools front-ends.

Writes one JSON object per line to a size-rotated file.
"""

import datetime
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "CargoTools"


class JsonFormatter(logging.Formatter):
    """One JSON object per record. Structured fields come from extra={'extra_data': {...}}."""

    CORE_FIELDS = ("timestamp", "level", "name", "message")

    def format(self, record):
        entry = dict(zip(self.CORE_FIELDS, (
            self.formatTime(record, self.datefmt),
            record.levelname,
            record.name,
            record.getMessage(),
        )))
        # Core fields win over extra_data
        for key, value in (getattr(record, 'extra_data', None) or {}).items():
            entry.setdefault(key, value)
        if record.exc_info:
            entry['exc_info'] = self.formatException(record.exc_info)
        if record.stack_info:
            entry['stack_info'] = self.formatStack(record.stack_info)
        return json.dumps(entry, default=str)


def setup_logging(logs_dir: Optional[Path] = None, level: Union[int, str] = logging.INFO):
    """
    Configure and return the project logger.

    Calling it again returns the logger untouched once its file handler is installed.

    Args:
        logs_dir: Directory to store log files. If None, uses "./logs"
        level: Logging level name or number

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger

    if logs_dir is None:
        logs_dir = Path("./logs")
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger.setLevel(level)
    logger.propagate = False

    handler = RotatingFileHandler(
        logs_dir / f"{datetime.date.today()}.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger
