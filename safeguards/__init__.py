# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""safeguards - runtime guards, self-reporting errors and text sanitization."""

__version__ = "0.1.0"

from .asserts import (
    UNDEFINED,
    require_defined,
    require_non_null,
    require_true,
    throw_if_false,
    throw_if_null,
    throw_if_undefined,
)
from .decorator import sanitized_output
from .diagnostics import (
    CollectingSink,
    DiagnosticSink,
    LoggingSink,
    NullSink,
    StreamSink,
    get_diagnostic_sink,
    reset_diagnostic_sink,
    set_diagnostic_sink,
    use_diagnostic_sink,
)
from .exceptions import (
    ConnectionError,
    ErrorKind,
    InvalidOperationError,
    InvalidParameterError,
    InvalidStateError,
    LoggedError,
    ReferenceViolationError,
)
from .sanitization import (
    OutputSanitizer,
    SanitizationResult,
    sanitize_input_string,
    sanitize_output_string,
)

__all__ = [
    "UNDEFINED",
    "CollectingSink",
    "ConnectionError",
    "DiagnosticSink",
    "ErrorKind",
    "InvalidOperationError",
    "InvalidParameterError",
    "InvalidStateError",
    "LoggedError",
    "LoggingSink",
    "NullSink",
    "OutputSanitizer",
    "ReferenceViolationError",
    "SanitizationResult",
    "StreamSink",
    "get_diagnostic_sink",
    "require_defined",
    "require_non_null",
    "require_true",
    "reset_diagnostic_sink",
    "sanitize_input_string",
    "sanitize_output_string",
    "sanitized_output",
    "set_diagnostic_sink",
    "throw_if_false",
    "throw_if_null",
    "throw_if_undefined",
    "use_diagnostic_sink",
]
