"""
packset Logger

Thin wrapper around the standard library ``logging`` module that accepts
keyword context on every call:

    logger = get_logger(__name__)
    logger.info("Cloning repository", url=url, path=str(path))

Context is rendered as ``key=value`` pairs in text mode, or as fields of a
JSON object when ``configure_logging(json_format=True)`` is used.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from .constants import DEFAULT_LOG_LEVEL

_ROOT_LOGGER_NAME = "packset"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class _TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context: Dict[str, Any] = getattr(record, "context", {}) or {}
        if not context:
            return base
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        return f"{base} {pairs}"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "context", {}) or {})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class PacksetLogger:
    """
    Logger that accepts structured keyword context.

    Args:
        name: Logger name, nested under the ``packset`` root logger
    """

    def __init__(self, name: str):
        if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
            name = f"{_ROOT_LOGGER_NAME}.{name}"
        self.name = name
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, exc_info: bool = False, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, message, exc_info=exc_info, extra={"context": context})

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, exc_info: bool = False, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **context)

    def exception(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **context)

    def is_enabled_for(self, level: str) -> bool:
        return self._logger.isEnabledFor(_LEVELS.get(level.lower(), logging.INFO))


def get_logger(name: str) -> PacksetLogger:
    """
    Get a structured logger.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        PacksetLogger instance
    """
    return PacksetLogger(name)


def configure_logging(
    level: Optional[str] = None,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the ``packset`` root logger.

    Calling this again replaces the previously installed handler.

    Args:
        level: One of debug, info, warn, error (defaults to info)
        json_format: Emit one JSON object per line instead of text
        stream: Output stream (defaults to stderr)
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(_LEVELS.get((level or DEFAULT_LOG_LEVEL).lower(), logging.INFO))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_format:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(_TextFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.propagate = False
