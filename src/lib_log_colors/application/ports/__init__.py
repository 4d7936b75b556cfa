"""Protocols the application layer depends on."""

from __future__ import annotations

from .stream import StreamPort
from .time import ClockPort, TimestampPort

__all__ = ["ClockPort", "StreamPort", "TimestampPort"]
