"""Canonical rendering of log metadata.

Metadata mappings are unordered; rendering sorts by key so two mappings with
the same pairs always produce the same text, whatever order they were built
in. Keys compare by code point, which matches UTF-8 byte order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


Metadata = Mapping[str, Any]


def render_value(value: Any) -> str:
    """Stringify a metadata value.

    Strings pass through unchanged. Sequences render as ``[a, b]`` and
    mappings as ``[k: v]`` with sorted keys, recursively.

    Examples
    --------
    >>> render_value("plain")
    'plain'
    >>> render_value(["a", 1])
    '[a, 1]'
    >>> render_value({"b": 2, "a": [1]})
    '[a: [1], b: 2]'
    """

    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        inner = ", ".join(f"{key}: {render_value(item)}" for key, item in sorted(value.items(), key=lambda pair: str(pair[0])))
        return f"[{inner}]"
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return "[" + ", ".join(render_value(item) for item in value) + "]"
    return str(value)


def render_metadata(metadata: Metadata | None) -> str | None:
    """Return ``key=value`` pairs sorted by key, or ``None`` when empty.

    Examples
    --------
    >>> render_metadata({"user": "b", "req": "1"})
    'req=1 user=b'
    >>> render_metadata({}) is None
    True
    """

    if not metadata:
        return None
    return " ".join(f"{key}={render_value(value)}" for key, value in sorted(metadata.items()))


def merge_metadata(instance: Metadata | None, per_call: Metadata | None) -> dict[str, Any]:
    """Overlay ``per_call`` on ``instance``; per-call keys win on collision."""

    merged: dict[str, Any] = dict(instance or {})
    if per_call:
        merged.update(per_call)
    return merged


__all__ = ["Metadata", "merge_metadata", "render_metadata", "render_value"]
