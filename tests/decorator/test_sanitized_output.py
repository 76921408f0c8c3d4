# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for @sanitized_output - output sanitization of function results."""
from __future__ import annotations

import pytest

from safeguards import sanitized_output


def test_bare_decorator_sanitizes_string_results():
    @sanitized_output
    def describe():
        return "  <b>Bob</b> bob@example.com\n"

    assert describe() == "Bob [EMAIL]"
    assert describe.__name__ == "describe"


def test_decorator_with_options_keeps_line_feeds():
    @sanitized_output(preserve_line_feeds=True)
    def report():
        return "line 1\nline 2 call 555-123-4567"

    assert report() == "line 1\nline 2 call [PHONE]"


def test_non_string_results_pass_through():
    @sanitized_output
    def numbers():
        return {"card": "4111111111111111"}

    assert numbers() == {"card": "4111111111111111"}


def test_arguments_are_forwarded():
    @sanitized_output()
    def echo(value, *, suffix=""):
        return value + suffix

    assert echo("me@example.com", suffix=" ok") == "[EMAIL] ok"


@pytest.mark.anyio
async def test_async_functions_are_sanitized():
    @sanitized_output
    async def fetch():
        return "card 4111111111111111 ok"

    assert await fetch() == "card [CARD] ok"


def test_exceptions_propagate():
    @sanitized_output
    def broken():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        broken()
