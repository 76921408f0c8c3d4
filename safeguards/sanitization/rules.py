# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Ordered rewrite rules used by the sanitizers.

Order is part of the contract: a rule only sees what earlier rules left
behind. Control characters go first so stray bytes cannot split a pattern,
markup goes before masking so tags cannot hide digits, and the card rule
runs before the phone rules so a 16-19 digit run is always ``[CARD]``.

Digit classes and word boundaries are ASCII-only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Tuple

EMAIL_TOKEN: Final[str] = "[EMAIL]"
CARD_TOKEN: Final[str] = "[CARD]"
PHONE_TOKEN: Final[str] = "[PHONE]"

# ASCII word boundaries
_B: Final[str] = r"(?<![0-9A-Za-z_])"
_E: Final[str] = r"(?![0-9A-Za-z_])"


@dataclass(frozen=True)
class SanitizationRule:
    """A single regex rewrite step.

    ``masks`` marks rules that replace sensitive data with a placeholder;
    only those are counted in :class:`SanitizationResult.replacements`.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""
    masks: bool = False

    def apply(self, text: str) -> Tuple[str, int]:
        return self.pattern.subn(self.replacement, text)


CONTROL_CHARACTERS = SanitizationRule(
    name="control_characters",
    pattern=re.compile(r"[\x00-\x1f\x7f-\x9f]"),
)

# Same ranges minus tab, LF and CR.
CONTROL_CHARACTERS_EXCEPT_LINE_FEEDS = SanitizationRule(
    name="control_characters",
    pattern=re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]"),
)

SCRIPT_BLOCKS = SanitizationRule(
    name="script_blocks",
    pattern=re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL),
)

MARKUP = SanitizationRule(
    name="markup",
    pattern=re.compile(r"<[^>]*>"),
)

EMAIL = SanitizationRule(
    name="email",
    pattern=re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"),
    replacement=EMAIL_TOKEN,
    masks=True,
)

ESCAPED_EMAIL = SanitizationRule(
    name="escaped_email",
    pattern=re.compile(r"[a-zA-Z0-9._%+-]+\\@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"),
    replacement=EMAIL_TOKEN,
    masks=True,
)

CARD = SanitizationRule(
    name="card",
    pattern=re.compile(_B + r"[0-9]{16,19}" + _E),
    replacement=CARD_TOKEN,
    masks=True,
)

# Optional +1/1 country code, optional (area code), 3-3-4 groups split by
# '-', '.' or whitespace, optional "ext"/"x"/"extension" suffix.
US_PHONE = SanitizationRule(
    name="us_phone",
    pattern=re.compile(
        r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}"
        r"(?:\s?(?:ext|x|extension)\.?\s?[0-9]+)?"
    ),
    replacement=PHONE_TOKEN,
    masks=True,
)

# 0758 4323 309
UK_PHONE_4_4_3 = SanitizationRule(
    name="uk_phone_4_4_3",
    pattern=re.compile(_B + r"0[0-9]{3}\s[0-9]{4}\s[0-9]{3}" + _E),
    replacement=PHONE_TOKEN,
    masks=True,
)

# 020 4576 2064
UK_PHONE_3_4_4 = SanitizationRule(
    name="uk_phone_3_4_4",
    pattern=re.compile(_B + r"0[0-9]{2}\s[0-9]{4}\s[0-9]{4}" + _E),
    replacement=PHONE_TOKEN,
    masks=True,
)

# 01246 866275
UK_PHONE_5_6 = SanitizationRule(
    name="uk_phone_5_6",
    pattern=re.compile(_B + r"0[0-9]{4}\s[0-9]{6}" + _E),
    replacement=PHONE_TOKEN,
    masks=True,
)

MASKING_RULES: Final[Tuple[SanitizationRule, ...]] = (
    EMAIL,
    ESCAPED_EMAIL,
    CARD,
    US_PHONE,
    UK_PHONE_4_4_3,
    UK_PHONE_3_4_4,
    UK_PHONE_5_6,
)

INPUT_RULES: Final[Tuple[SanitizationRule, ...]] = (
    CONTROL_CHARACTERS,
    SCRIPT_BLOCKS,
    MARKUP,
)

OUTPUT_RULES: Final[Tuple[SanitizationRule, ...]] = (
    CONTROL_CHARACTERS,
    SCRIPT_BLOCKS,
    MARKUP,
) + MASKING_RULES

OUTPUT_RULES_PRESERVING_LINE_FEEDS: Final[Tuple[SanitizationRule, ...]] = (
    CONTROL_CHARACTERS_EXCEPT_LINE_FEEDS,
    SCRIPT_BLOCKS,
    MARKUP,
) + MASKING_RULES


def output_rules(preserve_line_feeds: bool = False) -> Tuple[SanitizationRule, ...]:
    """Return the ordered output pipeline for the given line-feed policy."""

    return OUTPUT_RULES_PRESERVING_LINE_FEEDS if preserve_line_feeds else OUTPUT_RULES


__all__ = [
    "CARD",
    "CARD_TOKEN",
    "CONTROL_CHARACTERS",
    "CONTROL_CHARACTERS_EXCEPT_LINE_FEEDS",
    "EMAIL",
    "EMAIL_TOKEN",
    "ESCAPED_EMAIL",
    "INPUT_RULES",
    "MARKUP",
    "MASKING_RULES",
    "OUTPUT_RULES",
    "OUTPUT_RULES_PRESERVING_LINE_FEEDS",
    "PHONE_TOKEN",
    "SCRIPT_BLOCKS",
    "SanitizationRule",
    "UK_PHONE_3_4_4",
    "UK_PHONE_4_4_3",
    "UK_PHONE_5_6",
    "US_PHONE",
    "output_rules",
]
