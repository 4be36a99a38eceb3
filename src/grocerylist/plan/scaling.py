"""Serving-size parsing and quantity scaling for recipe ingredient lines."""

import re
from typing import Any, TypeVar

from grocerylist.logging_config import get_logger
from grocerylist.normalize.parsing import parse_ingredient_line
from grocerylist.schemas import IngredientLine

logger = get_logger(__name__)

LineT = TypeVar("LineT", bound=IngredientLine)

# Tried in order; group 1 is the serving count
SERVINGS_PATTERNS = [
    re.compile(r"^(\d+)$"),
    re.compile(r"^(\d+)\s*servings?$"),
    re.compile(r"^serves?\s*(\d+)"),
    re.compile(r"^makes?\s*(\d+)"),
    re.compile(r"^(\d+)\s*(?:-|–|to)\s*\d+"),
    re.compile(r"(\d+)\s*serving"),
]


def parse_servings(value: Any) -> int | None:
    """
    Extract a serving count from a recipe's servings field.

    Handles "4", "4 servings", "serves 4", "makes 12", "4-6" and
    "4 to 6 servings"; ranges use their first number.

    Returns:
        A positive integer, or None when no count can be found.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value) if value >= 1 else None

    text = str(value).strip().lower()
    if not text:
        return None

    for pattern in SERVINGS_PATTERNS:
        match = pattern.search(text)
        if match:
            servings = int(match.group(1))
            if servings > 0:
                return servings

    return None


def scale_factor(original_servings: Any, target_servings: int | float | None) -> float | None:
    """Ratio target/original, or None when either side is unusable."""
    if not target_servings or target_servings <= 0:
        return None

    original = parse_servings(original_servings)
    if original is None:
        logger.debug(f"Cannot scale: unparseable servings {original_servings!r}")
        return None

    return target_servings / original


def scale_line(line: LineT, factor: float | None) -> LineT:
    """
    Copy of the line with its quantity multiplied by factor.

    A line without a quantity field takes its quantity and unit from the text
    first, so text-only lines scale too. Lines with no quantity at all are
    returned unchanged.
    """
    if factor is None or factor == 1:
        return line

    quantity = line.quantity
    unit = line.unit
    if quantity is None and line.original_text:
        parsed = parse_ingredient_line(line.original_text)
        quantity = parsed.quantity
        unit = unit or parsed.unit

    if quantity is None:
        return line
    return line.model_copy(update={"quantity": quantity * factor, "unit": unit})
