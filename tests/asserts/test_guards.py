# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for the narrowing guards.

Guards return the value they validated so callers can bind it to a new,
non-optional name; on failure they raise ReferenceViolationError, which
reports itself like every other LoggedError.
"""

from __future__ import annotations

import copy
import pickle

import pytest

from safeguards import asserts as asserts_module
from safeguards.asserts import (
    UNDEFINED,
    require_defined,
    require_non_null,
    require_true,
    throw_if_false,
    throw_if_null,
    throw_if_undefined,
)
from safeguards.exceptions import LoggedError, ReferenceViolationError


def test_require_defined_rejects_sentinel(sink):
    with pytest.raises(ReferenceViolationError, match="Value is undefined."):
        require_defined(UNDEFINED)

    assert sink.records[0][0] == "[ERROR CREATED] ReferenceViolationError: Value is undefined."


@pytest.mark.parametrize("value", [0, "", False, None, [], "value"])
def test_require_defined_accepts_falsy_values(value):
    assert require_defined(value) is value


def test_require_non_null_rejects_none(sink):
    with pytest.raises(ReferenceViolationError, match="Value is null."):
        require_non_null(None)

    assert len(sink.records) == 1


@pytest.mark.parametrize("value", [0, "", False, UNDEFINED, {"k": 1}])
def test_require_non_null_accepts_everything_else(value):
    assert require_non_null(value) is value


@pytest.mark.parametrize("condition", [False, 0, None, ""])
def test_require_true_rejects_false(sink, condition):
    with pytest.raises(ReferenceViolationError, match="Value is false."):
        require_true(condition)


def test_require_true_returns_none_when_condition_holds(sink):
    assert require_true(True) is None
    assert require_true(1 < 2) is None
    assert sink.lines == []


def test_guard_errors_are_logged_errors(sink):
    with pytest.raises(LoggedError):
        require_non_null(None)


def test_historical_aliases():
    assert throw_if_undefined is require_defined
    assert throw_if_null is require_non_null
    assert throw_if_false is require_true


def test_undefined_is_a_singleton():
    assert repr(UNDEFINED) == "UNDEFINED"
    assert not UNDEFINED
    assert UNDEFINED is not None
    assert copy.deepcopy(UNDEFINED) is UNDEFINED
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


def test_guard_stack_starts_at_the_caller(sink):
    def load_user():
        return require_non_null(None)

    with pytest.raises(ReferenceViolationError):
        load_user()

    _, stack = sink.records[0]
    assert "load_user" in stack
    assert "in _fail" not in stack
    assert "in require_non_null" not in stack
    assert asserts_module.__file__ not in stack
