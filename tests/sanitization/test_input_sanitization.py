# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unit tests for input sanitization (inbound user-entered fields).

Input sanitization removes:
- ASCII/C1 control characters (0x00-0x1F, 0x7F-0x9F), tab/LF/CR included
- script/style elements together with their content
- anything shaped like a ``<tag>``
and trims the result. It never masks data and never raises.
"""

from __future__ import annotations

import pytest

from safeguards.sanitization import INPUT_RULES, sanitize_input_string


@pytest.mark.parametrize("value", [None, "", 0, False])
def test_absent_input_becomes_empty_string(value):
    assert sanitize_input_string(value) == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("<script>alert(1)</script>hello", "hello"),
        ("<SCRIPT type='text/javascript'>alert(1)</SCRIPT>hello", "hello"),
        ("<style>body { color: red }</style>text", "text"),
        ("<b>bold</b> text", "bold text"),
        ("<p>Hello <em>world</em></p>", "Hello world"),
        ('<a href="https://example.com">link</a>', "link"),
        ("<img src=x onerror=alert(1)>caption", "caption"),
    ],
)
def test_markup_is_stripped(value, expected):
    assert sanitize_input_string(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("  hi\x00there\x1f  ", "hithere"),
        ("a\tb\nc\rd", "abcd"),
        ("\x7fdel\x9f", "del"),
        ("bell\x07escape\x1b", "bellescape"),
    ],
)
def test_control_characters_are_removed(value, expected):
    assert sanitize_input_string(value) == expected


def test_control_characters_cannot_split_a_script_block():
    assert sanitize_input_string("<script>\nalert(1)\n</script>ok") == "ok"


def test_whitespace_is_trimmed():
    assert sanitize_input_string("   padded value   ") == "padded value"


def test_unicode_text_is_preserved():
    text = "Café résumé 北京 Москва 😀"
    assert sanitize_input_string(text) == text


def test_input_sanitization_does_not_mask_sensitive_values():
    text = "mail me@example.com or call 555-123-4567"
    assert sanitize_input_string(text) == text


def test_unmatched_angle_brackets_are_heuristic():
    assert sanitize_input_string("x < y") == "x < y"
    # Not a parser: a stray '<' ... '>' pair is treated as a tag.
    assert sanitize_input_string("1 < 2 and 3 > 2") == "1  2"


def test_non_string_values_are_stringified():
    assert sanitize_input_string(12345) == "12345"


@pytest.mark.parametrize(
    "value",
    [
        "plain text",
        "<div>\x00nested <span>tags</span></div>  ",
        "<script>x</script><b>kept</b>",
    ],
)
def test_input_sanitization_is_idempotent(value):
    once = sanitize_input_string(value)
    assert sanitize_input_string(once) == once


def test_input_rule_order():
    assert [rule.name for rule in INPUT_RULES] == ["control_characters", "script_blocks", "markup"]


def test_byte_order_marks_are_trimmed():
    assert sanitize_input_string("\ufeff  <b>name</b>\ufeff") == "name"
