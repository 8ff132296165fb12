"""Registry of logger creators and factory functions for loggers."""

from __future__ import annotations

import sys
import threading
from typing import Any, Callable, Dict, Iterable, Optional, TextIO

from crawlkit.logbase import LogFormat, LoggerType, LogLevel
from crawlkit.stdlogger import new_logger

LoggerCreator = Callable[[Any, Any, Optional[TextIO], Optional[Iterable[Any]]], Any]

_creators: Dict[Any, LoggerCreator] = {}
_lock = threading.RLock()


def register_logger(logger_type: Any, creator: Optional[LoggerCreator], cover: bool) -> None:
    """Register a creator for a logger type.

    Raises ValueError for an empty type, a missing creator, a type that is
    already registered, or when ``cover`` is false.
    """
    if not logger_type:
        raise ValueError("logger register error: invalid logger type")
    if creator is None:
        raise ValueError(
            "logger register error: invalid logger creator "
            f"(logger type: {logger_type})"
        )
    with _lock:
        if logger_type in _creators or not cover:
            raise ValueError(
                "logger register error: already existing logger for type "
                f"{str(logger_type)!r}"
            )
        _creators[logger_type] = creator


def default_logger() -> Any:
    """Return a new info-level text logger writing to standard output."""
    return logger(LoggerType.LOGRUS, LogLevel.INFO, LogFormat.TEXT, sys.stdout, None)


def logger(
    logger_type: Any,
    level: Any,
    format: Any,
    writer: Optional[TextIO],
    options: Optional[Iterable[Any]],
) -> Any:
    """Create a logger with the registered creator, or the standard one."""
    with _lock:
        creator = _creators.get(logger_type)
    if creator is not None:
        return creator(level, format, writer, options)
    return new_logger(level, format, writer, options)