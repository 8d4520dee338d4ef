from __future__ import annotations

import logging
import sys
from typing import Optional, Dict, Union

from fluent_collection.Support.Config import settings

LogContext = Dict[str, Union[str, int, float, bool, None]]


def _configured_level() -> int:
    """Resolve COLLECTION_LOG_LEVEL, falling back to WARNING for unknown names."""
    level = logging.getLevelName(settings.LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def _stdout_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT, datefmt=settings.LOG_DATE_FORMAT))
    return handler


class LaravelStyleLogger:
    """Logger for collection operations.

    Records are written as ``message | key=value | ...`` so rejected
    arguments and skipped items can be traced back to their values.
    """

    def __init__(self, name: str = __name__) -> None:
        self.name = name
        self.logger = logging.getLogger(name)

        if not self.logger.handlers:
            self.logger.addHandler(_stdout_handler())
            self.logger.setLevel(_configured_level())

    def log(self, level: int, message: str, context: Optional[LogContext] = None) -> None:
        """Log a message at ``level``; context is only formatted when the level is enabled."""
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._format_message(message, context))

    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        self.log(logging.DEBUG, message, context)

    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        self.log(logging.INFO, message, context)

    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        self.log(logging.WARNING, message, context)

    def error(self, message: str, context: Optional[LogContext] = None) -> None:
        self.log(logging.ERROR, message, context)

    def _format_message(self, message: str, context: Optional[LogContext] = None) -> str:
        parts = [message]
        parts.extend(f"{key}={value}" for key, value in (context or {}).items())
        return " | ".join(parts)


def get_logger(name: Optional[str] = None) -> LaravelStyleLogger:
    """Get a collection logger by name."""
    return LaravelStyleLogger(name or __name__)
