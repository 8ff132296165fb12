import inspect
import io
import json
import re

import pytest

from crawlkit.logbase import LogFormat, LogLevel, OptWithLocation
from crawlkit.logfield import (
    bool_field,
    float64_field,
    int64_field,
    object_field,
    string_field,
)
from crawlkit.stdlogger import LoggerPanic, StdLogger, new_logger


def _with_sample_fields(log):
    return log.with_fields(
        bool_field("bool", False),
        int64_field("int64", 123456),
        float64_field("float64", 123.456),
        string_field("string", "logrus"),
        object_field("object", "1234abcd"),
    )


def _log_all(log):
    log.info("Info log (logrus)")
    log.error("Error log (logrus)")
    log.warn("Warn log (logrus)")


def test_default_text_logger_writes_to_stdout(capsys):
    log = _with_sample_fields(new_logger())
    _log_all(log)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    fields = "bool=false float64=123.456 int64=123456 object=1234abcd string=logrus"
    assert lines[0].startswith('time="')
    assert lines[0].endswith('level=info msg="Info log (logrus)" ' + fields)
    assert 'level=error msg="Error log (logrus)" ' + fields in lines[1]
    assert 'level=warning msg="Warn log (logrus)" ' + fields in lines[2]


def test_json_logger_with_location():
    stream = io.StringIO()
    log = _with_sample_fields(
        new_logger(
            LogLevel.DEBUG, LogFormat.JSON, stream, [OptWithLocation(value=True)]
        )
    )
    line = inspect.currentframe().f_lineno + 1
    log.info("Info log (logrus)")
    record = json.loads(stream.getvalue())
    assert record["msg"] == "Info log (logrus)"
    assert record["level"] == "info"
    assert record["bool"] is False
    assert record["int64"] == 123456
    assert record["float64"] == 123.456
    assert record["string"] == "logrus"
    assert record["object"] == "1234abcd"
    location = record["location"]
    assert location["file_name"] == "test_stdlogger.py"
    assert location["func_path"].endswith("test_json_logger_with_location")
    assert location["line"] == line
    assert re.fullmatch(
        r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,3})?", record["time"]
    )


def test_json_logger_logs_all_levels():
    stream = io.StringIO()
    log = _with_sample_fields(new_logger(LogLevel.DEBUG, LogFormat.JSON, stream, None))
    log.debug("Debug log (logrus)")
    _log_all(log)
    levels = [json.loads(item)["level"] for item in stream.getvalue().splitlines()]
    assert levels == ["debug", "info", "error", "warning"]


def test_level_filters_lower_records():
    stream = io.StringIO()
    log = new_logger(LogLevel.WARN, LogFormat.TEXT, stream, None)
    log.debug("hidden")
    log.info("hidden")
    log.warn("shown")
    output = stream.getvalue()
    assert "hidden" not in output
    assert output.count("\n") == 1
    assert "level=warning" in output


def test_fatal_exits_with_code_one():
    stream = io.StringIO()
    log = new_logger(LogLevel.INFO, LogFormat.TEXT, stream, None)
    with pytest.raises(SystemExit) as excinfo:
        log.fatal("Fatal log (logrus)")
    assert excinfo.value.code == 1
    assert "level=fatal" in stream.getvalue()


def test_panic_raises():
    stream = io.StringIO()
    log = new_logger(LogLevel.INFO, LogFormat.JSON, stream, None)
    with pytest.raises(LoggerPanic) as excinfo:
        log.panic("Panic log (logrus)")
    assert str(excinfo.value) == "Panic log (logrus)"
    assert json.loads(stream.getvalue())["level"] == "panic"


def test_unknown_level_falls_back_to_info():
    log = new_logger(99, LogFormat.TEXT, io.StringIO(), None)
    assert log.level() is LogLevel.INFO


def test_accessors_and_default_options():
    log = StdLogger()
    assert log.name() == "logrus"
    assert log.level() is LogLevel.INFO
    assert log.format() is LogFormat.TEXT
    assert log.options() == [OptWithLocation(False)]


def test_foreign_option_with_location_name_is_ignored():
    class _Other:
        def name(self):
            return "with location"

    log = new_logger(LogLevel.INFO, LogFormat.TEXT, io.StringIO(), [_Other()])
    assert log.options() == [OptWithLocation(False)]


def test_with_fields_without_args_returns_same_logger():
    log = new_logger()
    assert log.with_fields() is log


def test_with_fields_does_not_change_parent():
    stream = io.StringIO()
    parent = new_logger(LogLevel.INFO, LogFormat.JSON, stream, None)
    child = parent.with_fields(string_field("string", "logrus"))
    parent.info("parent")
    child.info("child")
    first, second = (json.loads(item) for item in stream.getvalue().splitlines())
    assert "string" not in first
    assert second["string"] == "logrus"