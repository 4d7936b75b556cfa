"""Application use cases."""

from __future__ import annotations

from .format_line import LineFormatter, format_line

__all__ = ["LineFormatter", "format_line"]
