"""Icon styles and the per-severity glyph table.

Purpose
-------
Map each (:class:`IconStyle`, :class:`Severity`) pair onto the glyph that
prefixes a console line. The table is a fixed literal; adding a severity
means adding a row for every style.

Contents
--------
* :class:`IconStyle` enum (``COOL``, ``RAINBOW``).
* :func:`icon_for` lookup helper.
* ``_ICON_TABLE`` constant holding every glyph.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from .levels import Severity


class IconStyle(Enum):
    """Glyph families selectable when a handler is constructed."""

    #: Bug, lightning bolt, fire and friends.
    COOL = "cool"
    #: Coloured squares following the rainbow.
    RAINBOW = "rainbow"

    def icon(self, severity: Severity) -> str:
        """Return the glyph for ``severity`` in this style.

        Examples
        --------
        >>> IconStyle.RAINBOW.icon(Severity.INFO)
        '🟦'
        """

        return _ICON_TABLE[self][severity]

    @classmethod
    def from_name(cls, name: str) -> "IconStyle":
        normalized = name.strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown icon style: {name!r}") from exc


def icon_for(style: IconStyle, severity: Severity) -> str:
    """Functional alias of :meth:`IconStyle.icon`."""

    return style.icon(severity)


# Glyphs carrying U+FE0F keep the variation selector so terminals pick the
# emoji presentation.
_ICON_TABLE: Mapping[IconStyle, Mapping[Severity, str]] = {
    IconStyle.COOL: {
        Severity.TRACE: "📣",
        Severity.DEBUG: "🐛",
        Severity.INFO: "ℹ️",
        Severity.NOTICE: "📖",
        Severity.WARNING: "⚠️",
        Severity.ERROR: "⚡",
        Severity.CRITICAL: "🔥",
    },
    IconStyle.RAINBOW: {
        Severity.TRACE: "⬜️",
        Severity.DEBUG: "🟪",
        Severity.INFO: "🟦",
        Severity.NOTICE: "🟩",
        Severity.WARNING: "🟨",
        Severity.ERROR: "🟧",
        Severity.CRITICAL: "🟥",
    },
}


__all__ = ["IconStyle", "icon_for"]
