from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from io import StringIO

import pytest

from lib_log_colors.adapters.locked_stream import LockedStream
from lib_log_colors.domain import IconStyle
from lib_log_colors.handler import ColorStreamHandler
from tests.clock_helpers import FIFTEENTH_OF_DEC_2022, FixedClock


@pytest.fixture
def fixed_instant() -> datetime:
    return FIFTEENTH_OF_DEC_2022


@pytest.fixture
def buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def locked_buffer(buffer: StringIO) -> LockedStream:
    return LockedStream(buffer, name="buffer")


@pytest.fixture
def make_handler(locked_buffer: LockedStream) -> Callable[..., ColorStreamHandler]:
    """Build handlers writing into the shared test buffer at a fixed time."""

    def factory(label: str = "label", **overrides: object) -> ColorStreamHandler:
        options: dict[str, object] = {
            "icon_style": IconStyle.RAINBOW,
            "stream": locked_buffer,
            "clock": FixedClock(FIFTEENTH_OF_DEC_2022),
        }
        options.update(overrides)
        return ColorStreamHandler(label, **options)  # type: ignore[arg-type]

    return factory
