import io
import re
from datetime import datetime, timedelta

import pytest

from uscriptkit.logger import (
    LogBuffer,
    LogLevel,
    get_logger,
    level_color,
    level_name,
    log_deinit,
    log_init,
    log_print,
    set_logger,
)


@pytest.fixture
def plain():
    stream = io.StringIO()
    buf = LogBuffer(stream)
    buf.use_colors = False
    return buf, stream


@pytest.fixture
def shared(plain):
    previous = get_logger()
    set_logger(plain[0])
    yield plain
    set_logger(previous)


def test_level_names_from_source():
    assert level_name(LogLevel.VERBOSE) == "VERBOSE"
    assert level_name(LogLevel.DEBUG) == "  DEBUG"
    assert level_name(LogLevel.FIXED) == "  FIXED"
    assert all(len(level_name(lv)) == 7 for lv in LogLevel)


def test_level_colors():
    assert level_color(LogLevel.INFO) == "\033[32m"
    assert level_color(LogLevel.ERROR) == "\033[31m"


def test_levels_are_ordered_for_thresholds(plain):
    buf, stream = plain
    buf.console_threshold = LogLevel.WARNING
    buf.append("low")
    buf.emit(LogLevel.INFO)
    assert stream.getvalue() == ""
    buf.append("high")
    line = buf.emit(LogLevel.ERROR)
    assert stream.getvalue() == line
    assert "high" in stream.getvalue()


def test_append_kinds(plain):
    buf, _ = plain
    buf.append("hello")
    buf.append(5)
    buf.append(True)
    buf.append(None)
    buf.append("")
    assert buf.text == "hello 5 true "


def test_append_float_has_eight_decimals(plain):
    buf, _ = plain
    buf.append(0.5)
    assert buf.text == "0.50000000 "


def test_append_hex(plain):
    buf, _ = plain
    buf.append_hex(255)
    assert buf.text == "0xFF "


def test_append_hex_rejects_negative_and_non_int(plain):
    buf, _ = plain
    with pytest.raises(ValueError):
        buf.append_hex(-1)
    with pytest.raises(TypeError):
        buf.append_hex("12")


def test_buffer_is_bounded(plain):
    buf, _ = plain
    buf.append("x" * 5000)
    assert len(buf.text) == 1023


def test_emit_writes_line_and_resets(plain):
    buf, stream = plain
    buf.append("msg")
    line = buf.emit(LogLevel.WARNING)
    assert line.endswith("WARNING | msg \n")
    assert stream.getvalue() == line
    assert buf.text == ""
    assert buf.level == LogLevel.INFO


def test_emit_with_colors(plain):
    buf, stream = plain
    buf.use_colors = True
    buf.append("c")
    buf.emit(LogLevel.INFO)
    out = stream.getvalue()
    assert out.startswith(level_color(LogLevel.INFO))
    assert out.endswith("\033[0m")


def test_console_threshold_filters(plain):
    buf, stream = plain
    buf.console_threshold = LogLevel.ERROR
    buf.append("quiet")
    buf.emit(LogLevel.DEBUG)
    assert stream.getvalue() == ""


def test_timestamp_format(plain):
    buf, _ = plain
    stamp = buf.timestamp()
    assert len(stamp) == 29
    assert stamp[-3:] == " | "
    parsed = datetime.strptime(stamp[:-3], "%Y-%m-%d %H:%M:%S.%f")
    assert abs(parsed - datetime.now()) < timedelta(minutes=1)

    buf.include_date = False
    short = buf.timestamp()
    assert len(short) == 18
    assert short[-3:] == " | "
    parsed_time = datetime.strptime(short[:-3], "%H:%M:%S.%f")
    assert parsed_time.year == 1900


def test_file_logging(plain, tmp_path):
    buf, _ = plain
    path = buf.enable_file_logging(tmp_path)
    assert path.parent == tmp_path
    assert re.fullmatch(r"log_\d{8}_\d{6}\.txt", path.name)
    buf.append("to file")
    buf.emit(LogLevel.INFO)
    buf.file_threshold = LogLevel.FATAL
    buf.append("skipped")
    buf.emit(LogLevel.INFO)
    buf.disable_file_logging()
    content = path.read_text(encoding="utf-8")
    assert "to file" in content
    assert "skipped" not in content
    assert buf.file_logging_enabled is False


def test_set_and_get_logger(shared):
    buf, _ = shared
    assert get_logger() is buf


def test_log_print(shared):
    _, stream = shared
    log_print(LogLevel.ERROR, "a", 1, False)
    assert stream.getvalue().endswith("  ERROR | a 1 false \n")


def test_log_init_and_deinit(shared):
    buf, _ = shared
    log_init(LogLevel.WARNING, LogLevel.ERROR, False, False, False)
    assert buf.console_threshold == LogLevel.WARNING
    assert buf.file_threshold == LogLevel.ERROR
    assert buf.include_date is False
    log_deinit()
    assert buf.file_logging_enabled is False