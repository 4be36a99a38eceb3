"""Quantity parsing and display formatting."""

import math
import re
from typing import Any

# =============================================================================
# Quantity Tables
# =============================================================================

UNICODE_FRACTIONS: dict[str, float] = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

# Imprecise amounts mapped to a representative number
VAGUE_QUANTITIES: dict[str, float] = {
    "a few": 3.0,
    "few": 3.0,
    "a couple": 2.0,
    "a couple of": 2.0,
    "couple": 2.0,
    "several": 4.0,
    "a pinch": 0.125,
    "a dash": 0.125,
    "a handful": 0.5,
    "heaping": 1.25,
    "scant": 0.875,
}

FRACTION_CHARS = "".join(UNICODE_FRACTIONS)

_UNICODE_MIXED_RE = re.compile(rf"^(\d+)\s*([{FRACTION_CHARS}])$")
_MIXED_RE = re.compile(r"^(\d+)(?:\s+|-)(\d+)\s*/\s*(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+)\s*/\s*(\d+)$")
_RANGE_RE = re.compile(r"^(.+?)\s*(?:-|–|—|\bto\b|\bor\b)\s*(.+)$")
_NUMBER_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")


# =============================================================================
# Parsing
# =============================================================================


def parse_quantity(value: Any) -> float | None:
    """
    Parse a quantity into a float.

    Handles formats like:
    - "a few", "several", "a pinch" (vague amounts)
    - "½", "1½", "1 ½" (unicode fractions)
    - "1 1/2", "1-1/2" (mixed fraction)
    - "1/2"
    - "2-3", "2 to 3", "1 1/2 - 2" (range, returns the mean)
    - "2", "1.5"

    Returns None for anything it does not recognise. Never raises.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) or math.isinf(number) else number

    if not isinstance(value, str):
        return None

    text = " ".join(value.split()).lower()
    if not text:
        return None

    if text in VAGUE_QUANTITIES:
        return VAGUE_QUANTITIES[text]

    single = _parse_single_quantity(text)
    if single is not None:
        return single

    range_match = _RANGE_RE.match(text)
    if range_match:
        low = _parse_single_quantity(range_match.group(1))
        high = _parse_single_quantity(range_match.group(2))
        if low is not None and high is not None:
            return (low + high) / 2

    return None


def _parse_single_quantity(text: str) -> float | None:
    """Parse one number in unicode, mixed, fraction or decimal form."""
    if any(char in UNICODE_FRACTIONS for char in text):
        mixed = _UNICODE_MIXED_RE.match(text)
        if mixed:
            return int(mixed.group(1)) + UNICODE_FRACTIONS[mixed.group(2)]
        if text in UNICODE_FRACTIONS:
            return UNICODE_FRACTIONS[text]
        return None

    mixed = _MIXED_RE.match(text)
    if mixed:
        denominator = int(mixed.group(3))
        if denominator == 0:
            return None
        return int(mixed.group(1)) + int(mixed.group(2)) / denominator

    fraction = _FRACTION_RE.match(text)
    if fraction:
        denominator = int(fraction.group(2))
        if denominator == 0:
            return None
        return int(fraction.group(1)) / denominator

    if _NUMBER_RE.match(text):
        return float(text)

    return None


# =============================================================================
# Formatting
# =============================================================================


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' ("2", "2.5", "0.333")."""
    if value == int(value):
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


def format_quantity_display(value: float | None) -> str:
    """
    Render a quantity for people, preferring vulgar fractions.

    Examples:
        1.5 -> "1 ½"
        0.333 -> "⅓"
        2.0 -> "2"
        1.06 -> "1.06"
    """
    if value is None:
        return ""

    whole = int(value)
    remainder = value - whole

    if remainder < 0.05:
        return str(whole)
    if remainder > 0.95:
        return str(whole + 1)

    char, fraction = min(UNICODE_FRACTIONS.items(), key=lambda item: abs(item[1] - remainder))
    if abs(fraction - remainder) <= 0.05:
        return f"{whole} {char}" if whole else char

    return f"{value:.2f}".rstrip("0").rstrip(".")
