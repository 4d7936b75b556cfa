from __future__ import annotations

from datetime import datetime
from io import StringIO

import pytest

from lib_log_colors.adapters.locked_stream import LockedStream
from lib_log_colors.adapters.time_formatter import TimeFormatter
from lib_log_colors.application.use_cases.format_line import LineFormatter, format_line, resolve_metadata
from lib_log_colors.domain import HandlerConfig, IconStyle, LogEvent, Severity


RAINBOW = HandlerConfig(label="label", icon_style=IconStyle.RAINBOW)


def test_default_pattern_line(fixed_instant: datetime) -> None:
    line = format_line(LogEvent(Severity.INFO, "Foo", instant=fixed_instant), RAINBOW, TimeFormatter())
    assert line == "2022-12-15T14:13:12+0100 🟦 info label : Foo"


def test_custom_pattern_line(fixed_instant: datetime) -> None:
    line = format_line(LogEvent(Severity.INFO, "Foo", instant=fixed_instant), RAINBOW, TimeFormatter("%H:%M:%S"))
    assert line == "14:13:12 🟦 info label : Foo"


def test_pattern_only_changes_the_timestamp_segment(fixed_instant: datetime) -> None:
    event = LogEvent(Severity.WARNING, "Foo", metadata={"k": "v"}, instant=fixed_instant)
    default = format_line(event, RAINBOW, TimeFormatter())
    custom = format_line(event, RAINBOW, TimeFormatter("%H:%M:%S"))
    assert default != custom
    assert default.split(" ", 1)[1] == custom.split(" ", 1)[1]


def test_line_has_no_trailing_newline(fixed_instant: datetime) -> None:
    line = format_line(LogEvent(Severity.INFO, "Foo", instant=fixed_instant), RAINBOW, TimeFormatter())
    assert not line.endswith("\n")


def test_instance_metadata_is_rendered_before_the_message(fixed_instant: datetime) -> None:
    line = format_line(
        LogEvent(Severity.ERROR, "boom", instant=fixed_instant),
        HandlerConfig(label="svc"),
        TimeFormatter("%H:%M:%S"),
        instance_metadata={"user": "a", "env": "prod"},
    )
    assert line == "14:13:12 ⚡ error svc : env=prod user=a boom"


def test_per_call_metadata_wins_over_instance_metadata(fixed_instant: datetime) -> None:
    line = format_line(
        LogEvent(Severity.INFO, "Foo", metadata={"user": "b", "req": "1"}, instant=fixed_instant),
        RAINBOW,
        TimeFormatter("%H:%M:%S"),
        instance_metadata={"user": "a"},
        pretty_metadata="user=a",
    )
    assert line == "14:13:12 🟦 info label : req=1 user=b Foo"


def test_cached_rendering_is_reused_without_per_call_metadata() -> None:
    event = LogEvent(Severity.INFO, "Foo")
    assert resolve_metadata(event, {"user": "a"}, "cached") == "cached"


def test_empty_label_and_message_are_valid(fixed_instant: datetime) -> None:
    line = format_line(
        LogEvent(Severity.TRACE, "", instant=fixed_instant),
        HandlerConfig(label="", icon_style=IconStyle.RAINBOW),
        TimeFormatter("%H:%M:%S"),
    )
    assert line == "14:13:12 ⬜️ trace  : "


@pytest.mark.parametrize("severity", list(Severity))
def test_severity_token_is_lowercase_name(fixed_instant: datetime, severity: Severity) -> None:
    line = format_line(LogEvent(severity, "m", instant=fixed_instant), HandlerConfig(label="l"), TimeFormatter("T"))
    assert line == f"T {IconStyle.COOL.icon(severity)} {severity.name.lower()} l : m"


def test_line_formatter_appends_newline_when_writing(fixed_instant: datetime) -> None:
    buffer = StringIO()
    formatter = LineFormatter(RAINBOW, TimeFormatter(), LockedStream(buffer))
    event = LogEvent(Severity.INFO, "Foo", instant=fixed_instant)

    assert formatter.emit(event) is True
    assert buffer.getvalue() == "2022-12-15T14:13:12+0100 🟦 info label : Foo\n"
    assert formatter.format(event) == "2022-12-15T14:13:12+0100 🟦 info label : Foo"
    assert formatter.config is RAINBOW
