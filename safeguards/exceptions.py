# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Self-reporting error hierarchy.

Every error in this module writes a diagnostic record to a
:class:`~safeguards.diagnostics.DiagnosticSink` the moment it is
constructed, before the constructor returns. The record is two lines::

    [ERROR CREATED] InvalidParameterError: limit must be positive
    Traceback (most recent call last):
      File "...", line 12, in configure
        ...

so the failure stays diagnosable even if a caller later swallows the
exception. The specialised classes differ only in their :class:`ErrorKind`.
"""

from __future__ import annotations

import logging
import os
import threading
import traceback
from enum import Enum
from typing import ClassVar, Optional

from .diagnostics import DiagnosticSink, get_diagnostic_sink
from .telemetry import error_created_total, safe_add

logger = logging.getLogger(__name__)

_HERE = os.path.dirname(os.path.abspath(__file__))

# Frames from these files are library plumbing, not the caller's stack.
_REPORTING_FILES = frozenset(
    os.path.normcase(os.path.join(_HERE, name)) for name in ("exceptions.py", "asserts.py")
)

# Held across both lines of a record so concurrent errors never interleave.
_report_lock = threading.RLock()


class ErrorKind(str, Enum):
    """Closed set of logged error kinds; the value is the reported name."""

    LOGGED = "LoggedError"
    INVALID_PARAMETER = "InvalidParameterError"
    INVALID_OPERATION = "InvalidOperationError"
    CONNECTION = "ConnectionError"
    INVALID_STATE = "InvalidStateError"
    REFERENCE_VIOLATION = "ReferenceViolationError"

    def __str__(self) -> str:
        return self.value


def _format_creation_stack() -> str:
    """Format the current call stack without the library's reporting frames."""

    frames = [
        frame
        for frame in traceback.extract_stack()
        if os.path.normcase(os.path.abspath(frame.filename)) not in _REPORTING_FILES
    ]
    return "Traceback (most recent call last):\n" + "".join(traceback.format_list(frames)).rstrip("\n")


def report_error_created(kind: ErrorKind, message: str, sink: Optional[DiagnosticSink] = None) -> None:
    """Write the ``[ERROR CREATED]`` record for an error of *kind*.

    A broken sink is logged and ignored so that it can never replace the
    error being constructed.
    """

    target = sink if sink is not None else get_diagnostic_sink()
    header = f"[ERROR CREATED] {kind.value}: {message}"
    stack = _format_creation_stack()
    try:
        with _report_lock:
            target.write_line(header)
            target.write_line(stack)
    except Exception:
        logger.debug("Diagnostic sink %r failed while reporting %s", target, kind.value, exc_info=True)

    safe_add(error_created_total, 1, {"kind": kind.value})


def _restore_error(cls: type, message: str) -> "LoggedError":
    error = Exception.__new__(cls)
    error.args = (message,)
    error.message = message
    return error


class LoggedError(Exception):
    """Base class for errors that report themselves when created."""

    kind: ClassVar[ErrorKind] = ErrorKind.LOGGED

    def __init__(self, message: str = "", *, sink: Optional[DiagnosticSink] = None):
        super().__init__(message)
        self.message = message
        report_error_created(self.kind, message, sink)

    def __reduce__(self):
        # Rebuild copies and unpickled errors without reporting them again.
        return (_restore_error, (type(self), self.message), self.__dict__)

    @property
    def name(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        return f"{self.name}({self.message!r})"


class InvalidParameterError(LoggedError):
    """The caller supplied an unacceptable argument."""

    kind = ErrorKind.INVALID_PARAMETER


class InvalidOperationError(LoggedError):
    """The requested action is not valid in the current context."""

    kind = ErrorKind.INVALID_OPERATION


class ConnectionError(LoggedError):  # noqa: A001 - mirrors the public error name
    """A transport or connectivity failure occurred."""

    kind = ErrorKind.CONNECTION


class InvalidStateError(LoggedError):
    """Internal state is inconsistent or illegal."""

    kind = ErrorKind.INVALID_STATE


class ReferenceViolationError(LoggedError):
    """A required value was absent or null, or a required condition was false."""

    kind = ErrorKind.REFERENCE_VIOLATION


__all__ = [
    "ConnectionError",
    "ErrorKind",
    "InvalidOperationError",
    "InvalidParameterError",
    "InvalidStateError",
    "LoggedError",
    "ReferenceViolationError",
    "report_error_created",
]
