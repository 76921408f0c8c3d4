# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""One-line precondition guards.

Each guard either returns the validated value or raises
:class:`~safeguards.exceptions.ReferenceViolationError`. Bind the return
value to a new name to treat it as validated afterwards::

    user = require_non_null(lookup_user(user_id))
"""

from __future__ import annotations

from typing import Any, Final, Optional, TypeVar, Union

from .exceptions import ReferenceViolationError
from .telemetry import guard_failure_total, safe_add

T = TypeVar("T")


class _Undefined:
    """Type of the :data:`UNDEFINED` sentinel."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


# Marks "no value was ever supplied", as opposed to an explicit None.
UNDEFINED: Final[Any] = _Undefined()


def _fail(guard: str, message: str) -> ReferenceViolationError:
    safe_add(guard_failure_total, 1, {"guard": guard})
    return ReferenceViolationError(message)


def require_defined(value: Union[T, _Undefined]) -> T:
    """Return *value*, or raise if it is the :data:`UNDEFINED` sentinel.

    Falsy values such as ``0``, ``""`` and ``None`` are defined.
    """

    if value is UNDEFINED:
        raise _fail("require_defined", "Value is undefined.")
    return value  # type: ignore[return-value]


def require_non_null(value: Optional[T]) -> T:
    """Return *value*, or raise if it is ``None``."""

    if value is None:
        raise _fail("require_non_null", "Value is null.")
    return value


def require_true(condition: bool) -> None:
    """Raise unless *condition* holds."""

    if not condition:
        raise _fail("require_true", "Value is false.")


throw_if_undefined = require_defined
throw_if_null = require_non_null
throw_if_false = require_true


__all__ = [
    "UNDEFINED",
    "require_defined",
    "require_non_null",
    "require_true",
    "throw_if_false",
    "throw_if_null",
    "throw_if_undefined",
]
