"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

import sys
from collections.abc import Callable

name = "lib_log_colors"
title = "Colored, iconified console handler for Python logging"
version = "1.0.0"
shell_command = "lib_log_colors"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer``, one line per call.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_colors:\\n'
    """

    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    )
    emit = writer if writer is not None else sys.stdout.write
    width = max(len(key) for key, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for key, value in fields:
        emit(f"    {key:<{width}} = {value}\n")
