# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""String sanitization for untrusted input and for display/log output.

Both entry points are total: ``None``, empty strings and other falsy values
become ``""``, anything else that is not a ``str`` goes through ``str()``
first, and no input ever raises.

Markup stripping is a heuristic, not an HTML parser. Adversarial input with
unmatched or split ``<``/``>`` delimiters may leave fragments behind.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence

from ..telemetry import safe_add, sanitize_replacement_total
from .rules import INPUT_RULES, SanitizationRule, output_rules

logger = logging.getLogger(__name__)

# Leading/trailing whitespace, BOM included.
_EDGE_WHITESPACE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


@dataclass
class SanitizationResult:
    """Outcome of an output sanitization pass."""

    value: str
    modified: bool = False
    replacements: Dict[str, int] = field(default_factory=dict)


def _coerce(text: Any) -> str:
    if not text:
        return ""
    if isinstance(text, str):
        return text
    return str(text)


def _run(rules: Sequence[SanitizationRule], text: str, replacements: Dict[str, int]) -> str:
    for rule in rules:
        text, count = rule.apply(text)
        if count and rule.masks:
            replacements[rule.name] = replacements.get(rule.name, 0) + count
    return _EDGE_WHITESPACE.sub("", text)


class OutputSanitizer:
    """Strip control characters and markup, then mask sensitive values.

    Masking replaces email addresses with ``[EMAIL]``, 16-19 digit runs with
    ``[CARD]`` and North American or UK phone numbers with ``[PHONE]``, in
    that order.

    Example:
        ```python
        result = OutputSanitizer().sanitize("mail bob@example.com")
        assert result.value == "mail [EMAIL]"
        assert result.replacements == {"email": 1}
        ```
    """

    def __init__(self, *, preserve_line_feeds: bool = False):
        self.preserve_line_feeds = preserve_line_feeds
        self._rules = output_rules(preserve_line_feeds)

    @property
    def rules(self) -> Sequence[SanitizationRule]:
        return self._rules

    def sanitize(self, text: Any) -> SanitizationResult:
        source = _coerce(text)
        if not source:
            return SanitizationResult(value="")

        replacements: Dict[str, int] = {}
        value = _run(self._rules, source, replacements)

        for rule_name, count in replacements.items():
            safe_add(sanitize_replacement_total, count, {"rule": rule_name})
        if replacements:
            logger.debug("Masked sensitive values in output: %s", replacements)

        return SanitizationResult(value=value, modified=value != source, replacements=replacements)


_OUTPUT_SANITIZERS = {
    False: OutputSanitizer(preserve_line_feeds=False),
    True: OutputSanitizer(preserve_line_feeds=True),
}


def sanitize_input_string(text: Any) -> str:
    """Clean an inbound user-entered field.

    Removes control characters (0x00-0x1F, 0x7F-0x9F), script/style
    elements, anything shaped like ``<tag>``, then trims whitespace.
    """

    source = _coerce(text)
    if not source:
        return ""
    return _run(INPUT_RULES, source, {})


def sanitize_output_string(text: Any, preserve_line_feeds: bool = False) -> str:
    """Clean text bound for display or logs.

    With *preserve_line_feeds* tab, LF and CR survive the control character
    pass; otherwise they are removed with the rest.
    """

    return _OUTPUT_SANITIZERS[bool(preserve_line_feeds)].sanitize(text).value


__all__ = [
    "OutputSanitizer",
    "SanitizationResult",
    "sanitize_input_string",
    "sanitize_output_string",
]
