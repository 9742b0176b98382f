"""
Logging setup for the ``rekompenco`` logger tree.

Library modules only create loggers; handlers are installed here, and only
by applications that ask for them (the CLI does at startup).
"""

from __future__ import annotations

import json
import logging
import sys
from typing import TextIO

ROOT_LOGGER = "rekompenco"
_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(
    level: str = "WARNING", fmt: str = "text", stream: TextIO | None = None
) -> logging.Logger:
    """Attach a single stream handler to the ``rekompenco`` logger and return it."""
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
