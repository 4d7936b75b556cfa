"""Adapters binding the formatting pipeline to the clock and stdio."""

from __future__ import annotations

from .locked_stream import FlushMode, LockedStream, shared_stream
from .time_formatter import SystemClock, TimeFormatter

__all__ = ["FlushMode", "LockedStream", "SystemClock", "TimeFormatter", "shared_stream"]
