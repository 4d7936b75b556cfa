"""Convenience façade for demos and the CLI banner.

Purpose
-------
Offer turnkey helpers around :class:`~lib_log_colors.handler.ColorStreamHandler`
that the CLI and smoke tests call without wiring handlers themselves.

Contents
--------
* :func:`logdemo` - emit one line per severity through a real handler.
* :func:`summary_info` - metadata banner used by the CLI.
* :func:`icon_rows` - the icon table as plain rows for presentation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .domain import DEFAULT_TIME_FORMAT, Destination, IconStyle, Severity
from .handler import ColorStreamHandler

LOGGER = logging.getLogger(__name__)

_SAMPLES: tuple[tuple[Severity, str], ...] = (
    (Severity.TRACE, "Trace message"),
    (Severity.DEBUG, "Debug message"),
    (Severity.INFO, "Information message"),
    (Severity.NOTICE, "Notice message"),
    (Severity.WARNING, "Warning message"),
    (Severity.ERROR, "Error message"),
    (Severity.CRITICAL, "Critical message"),
)


def logdemo(
    *,
    style: str | IconStyle = IconStyle.COOL,
    destination: str | Destination = Destination.STDOUT,
    time_format: str = DEFAULT_TIME_FORMAT,
    label: str = "logdemo",
    metadata: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Emit one sample line per severity and report what happened.

    Parameters
    ----------
    style:
        Icon style name (``"cool"``/``"rainbow"``) or :class:`IconStyle`.
    destination:
        ``"stdout"``/``"stderr"`` or :class:`Destination`.
    time_format:
        ``strftime`` pattern for the timestamp segment.
    label:
        Label printed on every line.
    metadata:
        Handler metadata attached to every line.

    Returns
    -------
    dict[str, Any]
        Resolved ``style``, ``destination`` and ``label`` plus ``written``,
        one boolean per emitted line.

    Raises
    ------
    ValueError
        When ``style`` or ``destination`` is unknown.
    """

    resolved_style = style if isinstance(style, IconStyle) else IconStyle.from_name(style)
    resolved_destination = _coerce_destination(destination)
    factory = ColorStreamHandler.standard_error if resolved_destination is Destination.STDERR else ColorStreamHandler.standard_output
    handler = factory(label, icon_style=resolved_style, time_format=time_format)
    if metadata:
        handler.metadata = metadata

    written: list[bool] = []
    for severity, message in _SAMPLES:
        written.append(handler.log(severity, message))
    LOGGER.debug("logdemo emitted %d lines to %s", len(written), resolved_destination.value)
    return {
        "style": resolved_style.value,
        "destination": resolved_destination.value,
        "label": label,
        "written": written,
    }


def _coerce_destination(value: str | Destination) -> Destination:
    if isinstance(value, Destination):
        return value
    try:
        return Destination(value.strip().lower())
    except ValueError as exc:
        raise ValueError(f"Unknown destination: {value!r}") from exc


def icon_rows() -> list[tuple[str, str, str]]:
    """Return ``(severity, cool, rainbow)`` rows ordered by severity.

    Examples
    --------
    >>> icon_rows()[2]
    ('info', 'ℹ️', '🟦')
    """

    return [(severity.severity, IconStyle.COOL.icon(severity), IconStyle.RAINBOW.icon(severity)) for severity in Severity]


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["icon_rows", "logdemo", "summary_info"]
