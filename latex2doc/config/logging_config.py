"""Logging setup for the latex2doc package logger."""

from __future__ import annotations

import json
import logging
import sys

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: str = "info", fmt: str = "text") -> logging.Logger:
    """Install a single stderr handler on the ``latex2doc`` logger.

    Calling it again replaces the previous handler, so the CLI callback can
    reconfigure after the config file has been read.
    """
    logger = logging.getLogger("latex2doc")
    logger.setLevel(_LEVELS.get(level, logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_latex2doc", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler._latex2doc = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
