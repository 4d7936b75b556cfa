"""Stream port describing line emission contracts.

Purpose
-------
Define the abstraction for adapters that append rendered lines to an output
stream, letting the handler depend on a narrow protocol.

Contents
--------
* :class:`StreamPort` – runtime-checkable protocol with ``write`` and
  ``flush``.

System Role
-----------
Separates the formatting pipeline from the locked stdio adapter so tests can
plug in recording fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StreamPort(Protocol):
    """Append text to a destination atomically."""

    def write(self, text: str) -> bool:
        """Write ``text`` in one piece; return ``False`` when the write failed."""

    def flush(self) -> None:
        """Flush buffered output, best effort."""


__all__ = ["StreamPort"]
