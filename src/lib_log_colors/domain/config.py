"""Handler configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .icons import IconStyle


DEFAULT_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class Destination(Enum):
    """Standard OS stream a handler writes to."""

    STDOUT = "stdout"
    STDERR = "stderr"


@dataclass(slots=True, frozen=True)
class HandlerConfig:
    """Immutable per-handler settings fixed at construction.

    Attributes
    ----------
    label:
        Text printed after the severity; empty labels are allowed.
    icon_style:
        Glyph family used for the icon segment.
    time_format:
        C ``strftime`` pattern for the timestamp segment.
    destination:
        Stream receiving the rendered lines.
    """

    label: str
    icon_style: IconStyle = IconStyle.COOL
    time_format: str = DEFAULT_TIME_FORMAT
    destination: Destination = Destination.STDOUT


__all__ = ["DEFAULT_TIME_FORMAT", "Destination", "HandlerConfig"]
