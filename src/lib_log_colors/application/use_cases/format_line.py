"""Use case assembling one console line from a log event.

Purpose
-------
Combine icon, timestamp, severity, label, metadata and message into the
single-line wire format::

    <timestamp> <icon> <severity> <label> :<space+metadata if any> <message>

Contents
--------
* :func:`format_line` - pure function producing the line (no newline).
* :class:`LineFormatter` - binds a :class:`HandlerConfig` and timestamp
  renderer, then formats and writes events.

System Role
-----------
Application-layer orchestrator called by the handler for every log call. The
newline is appended only by :meth:`LineFormatter.emit`, so the formatted value
stays directly comparable in tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_log_colors.application.ports import StreamPort, TimestampPort
from lib_log_colors.domain import HandlerConfig, LogEvent, merge_metadata, render_metadata


def resolve_metadata(
    event: LogEvent,
    instance_metadata: Mapping[str, Any] | None,
    pretty_metadata: str | None,
) -> str | None:
    """Return the rendered metadata segment for ``event``.

    Without per-call metadata the pre-rendered ``pretty_metadata`` is reused;
    otherwise the merged mapping is rendered afresh.
    """

    if not event.has_metadata:
        return pretty_metadata
    return render_metadata(merge_metadata(instance_metadata, event.metadata))


def format_line(
    event: LogEvent,
    config: HandlerConfig,
    timestamps: TimestampPort,
    *,
    instance_metadata: Mapping[str, Any] | None = None,
    pretty_metadata: str | None = None,
) -> str:
    """Return the console line for ``event`` without a trailing newline.

    Parameters
    ----------
    event:
        Severity, message, optional per-call metadata and optional fixed
        instant.
    config:
        Label, icon style and time pattern of the handler.
    timestamps:
        Renderer for the timestamp segment, usually a
        :class:`~lib_log_colors.adapters.time_formatter.TimeFormatter`.
    instance_metadata:
        Metadata attached to the handler.
    pretty_metadata:
        Cached rendering of ``instance_metadata``. When omitted it is computed
        here.

    Examples
    --------
    >>> from datetime import datetime, timedelta, timezone
    >>> from lib_log_colors.adapters.time_formatter import TimeFormatter
    >>> from lib_log_colors.domain import IconStyle, Severity
    >>> instant = datetime(2022, 12, 15, 14, 13, 12, tzinfo=timezone(timedelta(hours=1)))
    >>> config = HandlerConfig(label="label", icon_style=IconStyle.RAINBOW)
    >>> format_line(LogEvent(Severity.INFO, "Foo", instant=instant), config, TimeFormatter())
    '2022-12-15T14:13:12+0100 🟦 info label : Foo'
    """

    if pretty_metadata is None and instance_metadata:
        pretty_metadata = render_metadata(instance_metadata)
    metadata = resolve_metadata(event, instance_metadata, pretty_metadata)
    icon = config.icon_style.icon(event.severity)
    timestamp = timestamps.format(event.instant)
    metadata_segment = f" {metadata}" if metadata else ""
    return f"{timestamp} {icon} {event.severity.severity} {config.label} :{metadata_segment} {event.message}"


class LineFormatter:
    """Format events for one handler configuration and hand them to a stream."""

    def __init__(self, config: HandlerConfig, timestamps: TimestampPort, stream: StreamPort) -> None:
        self._config = config
        self._timestamps = timestamps
        self._stream = stream

    @property
    def config(self) -> HandlerConfig:
        return self._config

    @property
    def stream(self) -> StreamPort:
        return self._stream

    def format(
        self,
        event: LogEvent,
        *,
        instance_metadata: Mapping[str, Any] | None = None,
        pretty_metadata: str | None = None,
    ) -> str:
        """Return the line for ``event``; see :func:`format_line`."""

        return format_line(
            event,
            self._config,
            self._timestamps,
            instance_metadata=instance_metadata,
            pretty_metadata=pretty_metadata,
        )

    def emit(
        self,
        event: LogEvent,
        *,
        instance_metadata: Mapping[str, Any] | None = None,
        pretty_metadata: str | None = None,
    ) -> bool:
        """Format ``event`` and write it plus a newline in one call."""

        line = self.format(event, instance_metadata=instance_metadata, pretty_metadata=pretty_metadata)
        return self._stream.write(line + "\n")


__all__ = ["LineFormatter", "format_line", "resolve_metadata"]
