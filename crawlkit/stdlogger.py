"""A structured logger writing text or JSON records to a stream."""

from __future__ import annotations

import copy
import json
import re
import sys
import threading
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, TextIO

from crawlkit.logbase import LogFormat, LogLevel, OptWithLocation, get_invoker_location
from crawlkit.logfield import Field

_LEVEL_NAMES = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
    LogLevel.PANIC: "panic",
}

_RESERVED_KEYS = ("time", "level", "msg")
_PLAIN_VALUE = re.compile(r"[A-Za-z0-9\-._/@^+]*\Z")
# Frames between the location lookup and the code calling the logger.
_LOCATION_SKIP = 3


class LoggerPanic(Exception):
    """Raised after a record is written at panic level."""


def _format_timestamp(moment: datetime) -> str:
    millis = f"{moment.microsecond // 1000:03d}".rstrip("0")
    base = moment.strftime("%Y-%m-%dT%H:%M:%S")
    return f"{base}.{millis}" if millis else base


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, dict):
        inner = " ".join(
            f"{_to_text(key)}:{_to_text(value[key])}"
            for key in sorted(value, key=str)
        )
        return f"map[{inner}]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_to_text(item) for item in value) + "]"
    return str(value)


def _join_operands(args: Iterable[Any]) -> str:
    """Join operands, adding a space only between two non-string operands."""
    parts: List[str] = []
    previous_is_str = True
    for position, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if position > 0 and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(_to_text(arg))
        previous_is_str = is_str
    return "".join(parts)


def _text_value(value: Any) -> str:
    text = _to_text(value)
    if _PLAIN_VALUE.match(text):
        return text
    return json.dumps(text, ensure_ascii=False)


def _normalize_level(level: Any) -> LogLevel:
    try:
        return LogLevel(level)
    except (ValueError, TypeError):
        return LogLevel.INFO


def _normalize_format(fmt: Any) -> Any:
    try:
        return LogFormat(fmt)
    except (ValueError, TypeError):
        return fmt


class StdLogger:
    """A leveled logger that writes one record per line to a stream.

    Records carry a timestamp, the level, the message and any extra fields.
    Fatal records end the process with exit code 1; panic records raise
    LoggerPanic.
    """

    def __init__(
        self,
        level: Any = LogLevel.INFO,
        format: Any = LogFormat.TEXT,
        writer: Optional[TextIO] = None,
        options: Optional[Iterable[Any]] = None,
    ) -> None:
        self._level = _normalize_level(level)
        self._format = _normalize_format(format)
        self._writer = writer
        self._opt_with_location = OptWithLocation()
        for opt in options or ():
            if opt.name() == "with location":
                self._opt_with_location = (
                    opt if isinstance(opt, OptWithLocation) else OptWithLocation()
                )
        self._fields: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def name(self) -> str:
        """Return the logger name."""
        return "logrus"

    def level(self) -> LogLevel:
        """Return the lowest level that is written."""
        return self._level

    def format(self) -> Any:
        """Return the record format."""
        return self._format

    def options(self) -> List[OptWithLocation]:
        """Return the options in effect."""
        return [self._opt_with_location]

    def debug(self, *args: Any) -> None:
        """Write a debug record."""
        self._emit(LogLevel.DEBUG, args)

    def info(self, *args: Any) -> None:
        """Write an info record."""
        self._emit(LogLevel.INFO, args)

    def warn(self, *args: Any) -> None:
        """Write a warning record."""
        self._emit(LogLevel.WARN, args)

    def error(self, *args: Any) -> None:
        """Write an error record."""
        self._emit(LogLevel.ERROR, args)

    def fatal(self, *args: Any) -> None:
        """Write a fatal record, then exit with code 1."""
        self._emit(LogLevel.FATAL, args)
        raise SystemExit(1)

    def panic(self, *args: Any) -> None:
        """Write a panic record, then raise LoggerPanic."""
        message = self._emit(LogLevel.PANIC, args)
        raise LoggerPanic(message)

    def with_fields(self, *args: Field) -> "StdLogger":
        """Return a logger that adds the given fields to every record."""
        if not args:
            return self
        derived = copy.copy(self)
        derived._fields = dict(self._fields)
        for item in args:
            derived._fields[item.name] = item.value
        return derived

    def _emit(self, level: LogLevel, args: Iterable[Any]) -> str:
        message = _join_operands(args)
        fields = dict(self._fields)
        if self._opt_with_location.value:
            func_path, file_name, line = get_invoker_location(_LOCATION_SKIP)
            fields["location"] = {
                "func_path": func_path,
                "file_name": file_name,
                "line": line,
            }
        if level < self._level:
            return message
        for key in _RESERVED_KEYS:
            if key in fields:
                fields["fields." + key] = fields.pop(key)
        timestamp = _format_timestamp(datetime.now())
        if self._format == LogFormat.JSON:
            line_text = self._json_line(level, message, timestamp, fields)
        else:
            line_text = self._text_line(level, message, timestamp, fields)
        writer = self._writer if self._writer is not None else sys.stdout
        with self._lock:
            writer.write(line_text + "\n")
            flush = getattr(writer, "flush", None)
            if flush is not None:
                flush()
        return message

    @staticmethod
    def _json_line(
        level: LogLevel, message: str, timestamp: str, fields: Dict[str, Any]
    ) -> str:
        record = dict(fields)
        record["level"] = _LEVEL_NAMES[level]
        record["msg"] = message
        record["time"] = timestamp
        return json.dumps(
            record,
            sort_keys=True,
            separators=(",", ":"),
            default=_to_text,
            ensure_ascii=False,
        )

    @staticmethod
    def _text_line(
        level: LogLevel, message: str, timestamp: str, fields: Dict[str, Any]
    ) -> str:
        pairs = [("time", timestamp), ("level", _LEVEL_NAMES[level])]
        if message:
            pairs.append(("msg", message))
        pairs.extend((key, fields[key]) for key in sorted(fields))
        return " ".join(f"{key}={_text_value(value)}" for key, value in pairs)


def new_logger(
    level: Any = LogLevel.INFO,
    format: Any = LogFormat.TEXT,
    writer: Optional[TextIO] = None,
    options: Optional[Iterable[Any]] = None,
) -> StdLogger:
    """Create a logger; an unknown level falls back to INFO."""
    return StdLogger(level, format, writer, options)