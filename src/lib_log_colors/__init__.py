"""Public package surface of the colored console log handler.

Attach :class:`ColorStreamHandler` to any :mod:`logging` logger::

    import logging
    from lib_log_colors import ColorStreamHandler, IconStyle

    logging.getLogger().addHandler(ColorStreamHandler.standard_output("app", icon_style=IconStyle.RAINBOW))
"""

from __future__ import annotations

from .adapters import FlushMode, LockedStream, TimeFormatter, shared_stream
from .application.use_cases import LineFormatter, format_line
from .domain import DEFAULT_TIME_FORMAT, Destination, HandlerConfig, IconStyle, LogEvent, Severity, register_level_names
from .handler import METADATA_ATTRIBUTE, ColorStreamHandler
from .lib_log_colors import logdemo, summary_info

__all__ = [
    "DEFAULT_TIME_FORMAT",
    "METADATA_ATTRIBUTE",
    "ColorStreamHandler",
    "Destination",
    "FlushMode",
    "HandlerConfig",
    "IconStyle",
    "LineFormatter",
    "LockedStream",
    "LogEvent",
    "Severity",
    "TimeFormatter",
    "format_line",
    "logdemo",
    "register_level_names",
    "shared_stream",
    "summary_info",
]
