"""Timestamp rendering for console lines.

Purpose
-------
Turn an instant into text using a C ``strftime`` pattern. The instant is
"now" unless the caller passes a fixed one, which keeps tests reproducible
without touching a global clock.

Contents
--------
* :class:`SystemClock` - :class:`ClockPort` returning aware local time.
* :class:`TimeFormatter` - pattern holder with :meth:`TimeFormatter.format`.

Alignment Notes
---------------
:meth:`datetime.strftime` delegates to the platform C library for most
directives and renders ``%z`` itself (``+0100``), so output matches C
``strftime`` for the default pattern. Python strings grow as needed; nothing is
truncated.
"""

from __future__ import annotations

from datetime import datetime

from lib_log_colors.application.ports.time import ClockPort, TimestampPort
from lib_log_colors.domain.config import DEFAULT_TIME_FORMAT


class SystemClock(ClockPort):
    """Clock returning the current time in the local timezone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class TimeFormatter(TimestampPort):
    """Render instants with a fixed ``strftime`` pattern.

    Examples
    --------
    >>> from datetime import timedelta, timezone
    >>> instant = datetime(2022, 12, 15, 14, 13, 12, tzinfo=timezone(timedelta(hours=1)))
    >>> TimeFormatter().format(instant)
    '2022-12-15T14:13:12+0100'
    >>> TimeFormatter("%H:%M:%S").format(instant)
    '14:13:12'
    """

    def __init__(self, pattern: str = DEFAULT_TIME_FORMAT, *, clock: ClockPort | None = None) -> None:
        self._pattern = pattern
        self._clock: ClockPort = clock if clock is not None else SystemClock()

    @property
    def pattern(self) -> str:
        return self._pattern

    def format(self, instant: datetime | None = None) -> str:
        """Return the timestamp text for ``instant`` (defaults to now).

        Naive instants are read as local time. A pattern the platform refuses
        is returned verbatim instead of raising.
        """

        moment = instant if instant is not None else self._clock.now()
        if moment.tzinfo is None:
            moment = moment.astimezone()
        try:
            return moment.strftime(self._pattern)
        except ValueError:
            return self._pattern


__all__ = ["SystemClock", "TimeFormatter"]
