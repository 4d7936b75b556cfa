"""Lock-guarded stdio adapter implementing :class:`StreamPort`.

Purpose
-------
Serialize writes from many threads onto one output stream so every line
reaches the destination as one contiguous chunk.

Contents
--------
* :class:`FlushMode` - flush policy applied after each write.
* :class:`LockedStream` - lock-guarded writer.
* :func:`shared_stream` - accessor for the process-wide stdout/stderr writers.

System Role
-----------
Last stage of the pipeline. Every handler writing to the same
:class:`Destination` shares one :class:`LockedStream` and therefore one lock;
the two destinations never contend with each other.

Alignment Notes
---------------
Writes are best effort. A failing stream (closed file, broken pipe) never
raises into the caller; the failure is counted and reported to the optional
diagnostic hook.
"""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Callable
from enum import Enum
from typing import Any, TextIO

from lib_log_colors.application.ports.stream import StreamPort
from lib_log_colors.domain.config import Destination


LOGGER = logging.getLogger(__name__)

DiagnosticHook = Callable[[str, dict[str, Any]], None]


class FlushMode(Enum):
    """Flush strategy applied by :meth:`LockedStream.write`."""

    NEVER = "never"
    ALWAYS = "always"


class LockedStream(StreamPort):
    """Write whole strings to a text stream under a mutex.

    ``target`` is either a stream or a zero-argument callable returning the
    stream. The callable form is resolved on every write, which lets the shared
    stdio writers follow ``sys.stdout`` / ``sys.stderr`` reassignment.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> stream = LockedStream(buffer)
    >>> stream.write("hello\\n")
    True
    >>> buffer.getvalue()
    'hello\\n'
    """

    def __init__(
        self,
        target: TextIO | Callable[[], TextIO | None],
        *,
        name: str = "stream",
        flush_mode: FlushMode = FlushMode.ALWAYS,
        diagnostic: DiagnosticHook | None = None,
    ) -> None:
        if hasattr(target, "write"):
            fixed = target
            self._resolve: Callable[[], TextIO | None] = lambda: fixed  # type: ignore[assignment,return-value]
        else:
            self._resolve = target  # type: ignore[assignment]
        self._name = name
        self._flush_mode = flush_mode
        self._diagnostic = diagnostic
        self._lock = threading.Lock()
        self._failures = 0
        self._reporting = threading.local()

    @property
    def name(self) -> str:
        return self._name

    @property
    def flush_mode(self) -> FlushMode:
        return self._flush_mode

    @flush_mode.setter
    def flush_mode(self, mode: FlushMode) -> None:
        with self._lock:
            self._flush_mode = mode

    @property
    def failures(self) -> int:
        """Number of writes or flushes that failed since creation."""

        return self._failures

    def set_diagnostic(self, diagnostic: DiagnosticHook | None) -> None:
        """Install or remove the hook notified about failed writes."""

        self._diagnostic = diagnostic

    def write(self, text: str) -> bool:
        """Append ``text`` atomically with respect to other writes.

        Returns ``False`` when the underlying stream rejected the write.
        """

        error: BaseException | None = None
        with self._lock:
            try:
                stream = self._current()
                stream.write(text)
                if self._flush_mode is FlushMode.ALWAYS:
                    stream.flush()
            except (OSError, ValueError) as exc:
                self._failures += 1
                error = exc
        if error is not None:
            self._emit_diagnostic("stream_write_failed", {"stream": self._name, "error": repr(error)})
            return False
        return True

    def flush(self) -> None:
        """Flush the underlying stream; failures are reported, not raised."""

        error: BaseException | None = None
        with self._lock:
            try:
                self._current().flush()
            except (OSError, ValueError) as exc:
                self._failures += 1
                error = exc
        if error is not None:
            self._emit_diagnostic("stream_flush_failed", {"stream": self._name, "error": repr(error)})

    def _current(self) -> TextIO:
        stream = self._resolve()
        if stream is None:
            raise ValueError(f"{self._name} is not available")
        return stream

    def _emit_diagnostic(self, name: str, payload: dict[str, Any]) -> None:
        """Invoke the diagnostic hook while guarding against callback failures."""

        if self._diagnostic is None:
            return
        # A hook that logs may route back into this stream; report only once.
        if getattr(self._reporting, "active", False):
            return
        self._reporting.active = True
        try:
            self._diagnostic(name, payload)
        except Exception as diagnostic_exc:  # noqa: BLE001
            LOGGER.error("Stream diagnostic hook raised while reporting %s", name, exc_info=diagnostic_exc)
        finally:
            self._reporting.active = False


_RESOLVERS: dict[Destination, Callable[[], TextIO | None]] = {
    Destination.STDOUT: lambda: sys.stdout,
    Destination.STDERR: lambda: sys.stderr,
}

_SHARED: dict[Destination, LockedStream] = {}
_SHARED_LOCK = threading.RLock()


def shared_stream(destination: Destination) -> LockedStream:
    """Return the process-wide :class:`LockedStream` for ``destination``.

    The writer is created on first use and lives until the process exits, so
    all handlers targeting the same destination share one lock.

    Examples
    --------
    >>> shared_stream(Destination.STDOUT) is shared_stream(Destination.STDOUT)
    True
    """

    with _SHARED_LOCK:
        stream = _SHARED.get(destination)
        if stream is None:
            stream = LockedStream(_RESOLVERS[destination], name=destination.value)
            _SHARED[destination] = stream
        return stream


__all__ = ["DiagnosticHook", "FlushMode", "LockedStream", "shared_stream"]
