from __future__ import annotations

from datetime import datetime

from lib_log_colors.application.ports import ClockPort, StreamPort, TimestampPort
from lib_log_colors.application.use_cases.format_line import LineFormatter
from lib_log_colors.domain import HandlerConfig, LogEvent, Severity
from tests.clock_helpers import FixedClock


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict]] = []

    def record(self, name: str, **payload) -> None:
        self.calls.append((name, payload))


class _FakeStream(StreamPort):
    def __init__(self, recorder: _Recorder) -> None:
        self.recorder = recorder

    def write(self, text: str) -> bool:
        self.recorder.record("write", text=text)
        return True

    def flush(self) -> None:
        self.recorder.record("flush")


class _FakeTimestamps(TimestampPort):
    def __init__(self, recorder: _Recorder) -> None:
        self.recorder = recorder

    def format(self, instant: datetime | None = None) -> str:
        self.recorder.record("format", instant=instant)
        return "TS"


def test_fakes_satisfy_runtime_checkable_ports(fixed_instant: datetime) -> None:
    recorder = _Recorder()
    assert isinstance(_FakeStream(recorder), StreamPort)
    assert isinstance(_FakeTimestamps(recorder), TimestampPort)
    assert isinstance(FixedClock(fixed_instant), ClockPort)


def test_line_formatter_drives_ports_in_order(fixed_instant: datetime) -> None:
    recorder = _Recorder()
    formatter = LineFormatter(HandlerConfig(label="svc"), _FakeTimestamps(recorder), _FakeStream(recorder))

    formatter.emit(LogEvent(Severity.NOTICE, "hello", instant=fixed_instant))

    assert recorder.calls == [
        ("format", {"instant": fixed_instant}),
        ("write", {"text": "TS 📖 notice svc : hello\n"}),
    ]


def test_missing_instant_is_forwarded_as_none() -> None:
    recorder = _Recorder()
    formatter = LineFormatter(HandlerConfig(label="svc"), _FakeTimestamps(recorder), _FakeStream(recorder))

    formatter.format(LogEvent(Severity.DEBUG, "hello"))

    assert recorder.calls == [("format", {"instant": None})]
