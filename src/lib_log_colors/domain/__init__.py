"""Domain entities and value objects used by the colored console handler."""

from __future__ import annotations

from .config import DEFAULT_TIME_FORMAT, Destination, HandlerConfig
from .events import LogEvent
from .icons import IconStyle, icon_for
from .levels import Severity, register_level_names
from .metadata import Metadata, merge_metadata, render_metadata

__all__ = [
    "DEFAULT_TIME_FORMAT",
    "Destination",
    "HandlerConfig",
    "IconStyle",
    "LogEvent",
    "Metadata",
    "Severity",
    "icon_for",
    "merge_metadata",
    "register_level_names",
    "render_metadata",
]
