"""Domain event describing one log call.

Purpose
-------
Carry the inputs of a single log call through the formatting pipeline as an
immutable value.

Contents
--------
* :class:`LogEvent` dataclass.

System Role
-----------
Built by :class:`lib_log_colors.handler.ColorStreamHandler` for every call and
consumed by :func:`lib_log_colors.application.use_cases.format_line.format_line`.
Nothing is persisted; an event lives for the duration of one call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .levels import Severity


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log call payload.

    Attributes
    ----------
    severity:
        :class:`Severity` attached to the call.
    message:
        Rendered message text; empty strings are legal.
    metadata:
        Per-call metadata merged over the handler metadata, or ``None``.
    instant:
        Fixed time used instead of "now". Only tests supply it.
    """

    severity: Severity
    message: str
    metadata: dict[str, Any] | None = field(default=None)
    instant: datetime | None = None

    def __post_init__(self) -> None:
        if self.metadata is not None:
            object.__setattr__(self, "metadata", dict(self.metadata))

    @property
    def has_metadata(self) -> bool:
        """Return ``True`` when the call carries non-empty metadata."""

        return bool(self.metadata)


__all__ = ["LogEvent"]
