"""Sanitization package - text cleaning and masking.

This package strips control characters and markup from untrusted input,
and additionally masks emails, card numbers and phone numbers in text bound
for display or logs.
"""

from .rules import CARD_TOKEN, EMAIL_TOKEN, INPUT_RULES, OUTPUT_RULES, PHONE_TOKEN, SanitizationRule
from .text import OutputSanitizer, SanitizationResult, sanitize_input_string, sanitize_output_string

__all__ = [
    "CARD_TOKEN",
    "EMAIL_TOKEN",
    "INPUT_RULES",
    "OUTPUT_RULES",
    "PHONE_TOKEN",
    "OutputSanitizer",
    "SanitizationResult",
    "SanitizationRule",
    "sanitize_input_string",
    "sanitize_output_string",
]
