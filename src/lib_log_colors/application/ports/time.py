"""Ports for the wall clock and timestamp rendering."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current timezone-aware local time."""

    def now(self) -> datetime: ...


@runtime_checkable
class TimestampPort(Protocol):
    """Render an instant (or now, when ``None``) as timestamp text."""

    def format(self, instant: datetime | None = None) -> str: ...


__all__ = ["ClockPort", "TimestampPort"]
