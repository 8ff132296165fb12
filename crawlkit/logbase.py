"""Shared logging definitions: levels, formats, logger types and options."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

TIMESTAMP_FORMAT = "2006-01-02T15:04:05.999"
"""Layout of timestamps written by loggers (millisecond precision)."""


class LogLevel(IntEnum):
    """Log output levels, from the lowest to the highest."""

    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    PANIC = 6


class LogFormat(str, Enum):
    """Formats a logger can write records in."""

    TEXT = "text"
    JSON = "json"

    def __str__(self) -> str:
        return self.value


class LoggerType(str, Enum):
    """Kinds of logger that can be created."""

    LOGRUS = "logrus"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptWithLocation:
    """Option telling a logger to record the caller's code location."""

    value: bool = False

    def name(self) -> str:
        """Return the option name."""
        return "with location"


def get_invoker_location(skip_number: int) -> Tuple[str, str, int]:
    """Return (function path, file name, line) of a frame on the call stack.

    A ``skip_number`` of 0 names this function itself, 1 its caller and so
    on. When there is no such frame, ``("", "", -1)`` is returned.
    """
    if skip_number < 0:
        return "", "", -1
    try:
        frame = sys._getframe(skip_number)
    except ValueError:
        return "", "", -1
    code = frame.f_code
    file_name = os.path.basename(code.co_filename)
    module = os.path.splitext(file_name)[0]
    qualname = getattr(code, "co_qualname", code.co_name)
    func_path = f"{module}.{qualname}" if module else qualname
    return func_path, file_name, frame.f_lineno