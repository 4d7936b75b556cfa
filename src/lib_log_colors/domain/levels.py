"""Severity abstraction shared by the handler and the formatting pipeline.

Purpose
-------
Offer a totally ordered severity enumeration covering the seven levels the
colored console handler renders, while staying interoperable with the integer
levels used by :mod:`logging`.

Contents
--------
* :class:`Severity` enum with conversion helpers.
* :func:`register_level_names` to teach :mod:`logging` about ``TRACE`` and
  ``NOTICE``.

System Role
-----------
Used by the icon table to pick glyphs, by the line formatter to render the
lowercase severity token, and by the handler to translate stdlib records.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering


@total_ordering
class Severity(Enum):
    """Enumerated severities, ordered from least to most serious."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    NOTICE = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value < other.value

    @property
    def severity(self) -> str:
        """Return the lowercase name rendered in console lines."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` integer matching this severity."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown severity: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "Severity":
        """Return the :class:`Severity` whose value is exactly ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported severity numeric: {level}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "Severity":
        """Map any stdlib level integer onto the closest severity at or below it.

        Custom levels between the known ones round down, anything below
        ``TRACE`` (including ``logging.NOTSET``) becomes ``TRACE``.

        Examples
        --------
        >>> Severity.from_python_level(logging.WARNING)
        <Severity.WARNING: 30>
        >>> Severity.from_python_level(27)
        <Severity.NOTICE: 25>
        >>> Severity.from_python_level(0)
        <Severity.TRACE: 5>
        """
        chosen = cls.TRACE
        for candidate in cls:
            if candidate.value <= level:
                chosen = candidate
        return chosen


def register_level_names() -> None:
    """Register ``TRACE`` and ``NOTICE`` with :func:`logging.addLevelName`."""

    for extra in (Severity.TRACE, Severity.NOTICE):
        logging.addLevelName(extra.value, extra.name)


__all__ = ["Severity", "register_level_names"]
