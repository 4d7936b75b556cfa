"""Colored, iconified console handler for :mod:`logging`.

Purpose
-------
Plug the formatting pipeline into the standard library logging framework as
a regular :class:`logging.Handler`. Loggers own routing and level filtering;
this handler turns each record into one line and writes it to stdout or
stderr.

Contents
--------
* :class:`ColorStreamHandler` with the :meth:`~ColorStreamHandler.standard_output`
  and :meth:`~ColorStreamHandler.standard_error` factories.

System Role
-----------
Outer shell of the package. Builds :class:`LogEvent` values, keeps the handler
metadata, and delegates to
:class:`~lib_log_colors.application.use_cases.format_line.LineFormatter`.

Thread Safety
-------------
One handler usually serves every thread of a process. Handler metadata is
copy-on-write: mutations run under an instance lock and publish a new
``(mapping, rendered)`` pair in a single assignment, so logging calls read a
consistent snapshot without taking the lock. The severity threshold is stored
through :meth:`logging.Handler.setLevel`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from threading import RLock
from types import MappingProxyType
from typing import Any

from lib_log_colors.adapters.locked_stream import shared_stream
from lib_log_colors.adapters.time_formatter import TimeFormatter
from lib_log_colors.application.ports import ClockPort, StreamPort
from lib_log_colors.application.use_cases.format_line import LineFormatter
from lib_log_colors.domain import (
    DEFAULT_TIME_FORMAT,
    Destination,
    HandlerConfig,
    IconStyle,
    LogEvent,
    Severity,
    register_level_names,
    render_metadata,
)


#: Attribute read from :class:`logging.LogRecord` for per-call metadata,
#: populated through ``logger.info("...", extra={"metadata": {...}})``.
METADATA_ATTRIBUTE = "metadata"

_EMPTY: Mapping[str, Any] = MappingProxyType({})

#: Escaped form of a line break inside a rendered record.
LINE_BREAK = "\\n"

register_level_names()


class ColorStreamHandler(logging.Handler):
    """Render records as ``<time> <icon> <severity> <label> : <message>`` lines.

    Examples
    --------
    >>> import logging
    >>> handler = ColorStreamHandler.standard_output("app", icon_style=IconStyle.RAINBOW)
    >>> handler.log_level
    <Severity.INFO: 20>
    >>> handler["request"] = "42"
    >>> handler.metadata
    {'request': '42'}
    """

    DEFAULT_TIME_FORMAT = DEFAULT_TIME_FORMAT

    def __init__(
        self,
        label: str,
        *,
        icon_style: IconStyle = IconStyle.COOL,
        time_format: str = DEFAULT_TIME_FORMAT,
        destination: Destination = Destination.STDOUT,
        stream: StreamPort | None = None,
        clock: ClockPort | None = None,
        level: Severity = Severity.INFO,
    ) -> None:
        """Create a handler; prefer the ``standard_*`` factories.

        Parameters
        ----------
        label:
            Text printed after the severity on every line.
        icon_style:
            Glyph family for the icon segment.
        time_format:
            C ``strftime`` pattern for the timestamp segment.
        destination:
            Shared stdio stream used when ``stream`` is not given.
        stream:
            Explicit :class:`StreamPort`; tests use it to capture output.
        clock:
            Source of "now" for the timestamp renderer.
        level:
            Initial severity threshold.
        """

        super().__init__(level=level.to_python_level())
        self._config = HandlerConfig(
            label=label,
            icon_style=icon_style,
            time_format=time_format,
            destination=destination,
        )
        self._stream: StreamPort = stream if stream is not None else shared_stream(destination)
        self._lines = LineFormatter(self._config, TimeFormatter(time_format, clock=clock), self._stream)
        self._metadata_lock = RLock()
        self._metadata_state: tuple[Mapping[str, Any], str | None] = (_EMPTY, None)

    @classmethod
    def standard_output(
        cls,
        label: str,
        icon_style: IconStyle = IconStyle.COOL,
        time_format: str = DEFAULT_TIME_FORMAT,
    ) -> "ColorStreamHandler":
        """Return a handler writing to the shared stdout stream."""

        return cls(label, icon_style=icon_style, time_format=time_format, destination=Destination.STDOUT)

    @classmethod
    def standard_error(
        cls,
        label: str,
        icon_style: IconStyle = IconStyle.COOL,
        time_format: str = DEFAULT_TIME_FORMAT,
    ) -> "ColorStreamHandler":
        """Return a handler writing to the shared stderr stream."""

        return cls(label, icon_style=icon_style, time_format=time_format, destination=Destination.STDERR)

    @property
    def config(self) -> HandlerConfig:
        return self._config

    @property
    def label(self) -> str:
        return self._config.label

    @property
    def stream(self) -> StreamPort:
        return self._stream

    @property
    def log_level(self) -> Severity:
        """Current severity threshold."""

        return Severity.from_python_level(self.level)

    @log_level.setter
    def log_level(self, severity: Severity | str) -> None:
        resolved = Severity.from_name(severity) if isinstance(severity, str) else severity
        self.setLevel(resolved.to_python_level())

    @property
    def metadata(self) -> dict[str, Any]:
        """Copy of the metadata attached to every line."""

        return dict(self._metadata_state[0])

    @metadata.setter
    def metadata(self, value: Mapping[str, Any]) -> None:
        with self._metadata_lock:
            self._publish(dict(value))

    def __getitem__(self, key: str) -> Any:
        return self._metadata_state[0][key]

    def __setitem__(self, key: str, value: Any) -> None:
        with self._metadata_lock:
            updated = dict(self._metadata_state[0])
            updated[key] = value
            self._publish(updated)

    def __delitem__(self, key: str) -> None:
        with self._metadata_lock:
            updated = dict(self._metadata_state[0])
            del updated[key]
            self._publish(updated)

    def __contains__(self, key: object) -> bool:
        return key in self._metadata_state[0]

    def merge_metadata(self, values: Mapping[str, Any]) -> None:
        """Overlay ``values`` on the handler metadata."""

        with self._metadata_lock:
            updated = dict(self._metadata_state[0])
            updated.update(values)
            self._publish(updated)

    def _publish(self, metadata: dict[str, Any]) -> None:
        self._metadata_state = (MappingProxyType(metadata), render_metadata(metadata))

    def log_entry(
        self,
        message: str,
        *,
        severity: Severity | None = None,
        metadata: Mapping[str, Any] | None = None,
        instant: datetime | None = None,
    ) -> str:
        """Return the line for one call without writing it.

        ``severity`` defaults to the current threshold. ``instant`` replaces
        "now" and exists for reproducible tests.
        """

        event = LogEvent(
            severity=severity if severity is not None else self.log_level,
            message=message,
            metadata=dict(metadata) if metadata else None,
            instant=instant,
        )
        instance_metadata, pretty = self._metadata_state
        return self._lines.format(event, instance_metadata=instance_metadata, pretty_metadata=pretty)

    def log(
        self,
        severity: Severity,
        message: str,
        metadata: Mapping[str, Any] | None = None,
        *,
        source: str | None = None,
        file: str | None = None,
        function: str | None = None,
        line: int | None = None,
    ) -> bool:
        """Format and write one line; return ``False`` when nothing was written.

        The threshold is not consulted here; callers decide what to log.
        ``source``, ``file``, ``function`` and ``line`` describe the call site
        and are accepted for interface parity only. Never raises: formatting
        errors go through :meth:`logging.Handler.handleError`.
        """

        event = LogEvent(severity=severity, message=message, metadata=dict(metadata) if metadata else None)
        try:
            return self._write(event)
        except RecursionError:
            raise
        except Exception:
            record = logging.makeLogRecord(
                {
                    "name": self.label,
                    "levelno": severity.to_python_level(),
                    "levelname": severity.name,
                    "msg": message,
                    "pathname": file or "",
                    "funcName": function,
                    "lineno": line or 0,
                }
            )
            self.handleError(record)
            return False

    def emit(self, record: logging.LogRecord) -> None:
        """Write ``record`` as one line.

        The message comes from the installed :class:`logging.Formatter`
        (``%(message)s`` by default) and per-call metadata from the record's
        ``metadata`` attribute. Line breaks in the formatted text, such as the
        traceback appended for ``exc_info`` or ``stack_info``, are escaped so
        the record stays on one line.
        """

        try:
            message = _single_line(self.format(record))
            event = LogEvent(
                severity=Severity.from_python_level(record.levelno),
                message=message,
                metadata=_record_metadata(record),
            )
            self._write(event)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        """Flush the destination stream."""

        self._stream.flush()

    def _write(self, event: LogEvent) -> bool:
        instance_metadata, pretty = self._metadata_state
        return self._lines.emit(event, instance_metadata=instance_metadata, pretty_metadata=pretty)


def _record_metadata(record: logging.LogRecord) -> dict[str, Any] | None:
    value = getattr(record, METADATA_ATTRIBUTE, None)
    if not value:
        return None
    if isinstance(value, Mapping):
        return dict(value)
    return {METADATA_ATTRIBUTE: value}


def _single_line(text: str) -> str:
    if "\n" not in text and "\r" not in text:
        return text
    return text.replace("\r\n", "\n").replace("\r", "\n").replace("\n", LINE_BREAK)


__all__ = ["LINE_BREAK", "METADATA_ATTRIBUTE", "ColorStreamHandler"]
