# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Diagnostic sinks that receive self-reported error records.

A sink is anything with a ``write_line(text)`` method. The library keeps one
process-wide sink (standard error unless configured otherwise); every
:class:`~safeguards.exceptions.LoggedError` writes to it on construction
unless an explicit sink is passed.

Tests substitute a :class:`CollectingSink` to assert on emitted records::

    with use_diagnostic_sink(CollectingSink()) as sink:
        InvalidStateError("boom")
    assert sink.records[0][0] == "[ERROR CREATED] InvalidStateError: boom"
"""

from __future__ import annotations

import contextlib
import logging
import sys
import threading
from typing import IO, Iterator, List, Optional, Protocol, Tuple, runtime_checkable

from .config import get_settings

logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticSink(Protocol):
    """Destination that accepts one line of diagnostic text at a time."""

    def write_line(self, text: str) -> None:  # pragma: no cover - protocol
        ...


class StreamSink:
    """Write lines to a text stream (``sys.stderr`` when none is given).

    The default stream is looked up on every write so that redirected or
    captured stderr is honoured.
    """

    def __init__(self, stream: Optional[IO[str]] = None):
        self._stream = stream

    def write_line(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(text + "\n")
        stream.flush()


class LoggingSink:
    """Forward diagnostic lines to a stdlib logger at ERROR level."""

    def __init__(self, target: Optional[logging.Logger] = None):
        self._logger = target or logging.getLogger("safeguards.diagnostics")

    def write_line(self, text: str) -> None:
        self._logger.error("%s", text)


class CollectingSink:
    """Keep every line in memory."""

    def __init__(self):
        self.lines: List[str] = []
        self._lock = threading.Lock()

    def write_line(self, text: str) -> None:
        with self._lock:
            self.lines.append(text)

    @property
    def records(self) -> List[Tuple[str, ...]]:
        """Lines grouped into (header, stack) pairs, one per created error."""

        with self._lock:
            lines = list(self.lines)
        return [tuple(lines[i : i + 2]) for i in range(0, len(lines), 2)]

    def clear(self) -> None:
        with self._lock:
            self.lines.clear()


class NullSink:
    """Discard everything."""

    def write_line(self, text: str) -> None:
        return None


def _build_default_sink() -> DiagnosticSink:
    name = get_settings().diagnostic_sink
    if name == "logging":
        return LoggingSink()
    if name == "none":
        return NullSink()
    return StreamSink()


_lock = threading.Lock()
_active_sink: Optional[DiagnosticSink] = None


def get_diagnostic_sink() -> DiagnosticSink:
    """Return the process-wide sink, creating the configured default lazily."""

    global _active_sink
    with _lock:
        if _active_sink is None:
            _active_sink = _build_default_sink()
            logger.debug("Using %s as diagnostic sink", type(_active_sink).__name__)
        return _active_sink


def set_diagnostic_sink(sink: DiagnosticSink) -> Optional[DiagnosticSink]:
    """Replace the process-wide sink and return the previous one."""

    if not isinstance(sink, DiagnosticSink):
        raise TypeError(f"diagnostic sink must define write_line(), got {type(sink).__name__}")

    global _active_sink
    with _lock:
        previous, _active_sink = _active_sink, sink
    return previous


def reset_diagnostic_sink() -> None:
    """Drop any override so the next lookup rebuilds the configured default."""

    global _active_sink
    with _lock:
        _active_sink = None


@contextlib.contextmanager
def use_diagnostic_sink(sink: DiagnosticSink) -> Iterator[DiagnosticSink]:
    """Temporarily route diagnostics to *sink*."""

    global _active_sink
    previous = set_diagnostic_sink(sink)
    try:
        yield sink
    finally:
        with _lock:
            _active_sink = previous


__all__ = [
    "CollectingSink",
    "DiagnosticSink",
    "LoggingSink",
    "NullSink",
    "StreamSink",
    "get_diagnostic_sink",
    "reset_diagnostic_sink",
    "set_diagnostic_sink",
    "use_diagnostic_sink",
]
