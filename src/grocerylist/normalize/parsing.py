"""Free-text ingredient line parsing."""

import re
from dataclasses import dataclass

from grocerylist.logging_config import get_logger
from grocerylist.normalize.quantities import FRACTION_CHARS, parse_quantity
from grocerylist.normalize.units import normalize_unit

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParsedIngredient:
    """An ingredient line split into quantity, unit, name and notes."""

    original_text: str
    quantity: float | None = None
    unit: str | None = None
    name: str = ""
    preparation: str | None = None
    notes: str | None = None
    group: str | None = None
    recipe_id: str | None = None


# =============================================================================
# Parsing Tables
# =============================================================================

# Phrase pattern -> note recorded on the parsed line
TO_TASTE_PHRASES: list[tuple[re.Pattern, str]] = [
    (re.compile(r",?\s*\(?\bto taste\b\)?", re.IGNORECASE), "to taste"),
    (re.compile(r",?\s*\(?\bas needed\b\)?", re.IGNORECASE), "as needed"),
    (re.compile(r",?\s*\(?\bto your (?:liking|preference)\b\)?", re.IGNORECASE), "to taste"),
    (re.compile(r",?\s*\(?\boptional\b\)?", re.IGNORECASE), "optional"),
    (re.compile(r",?\s*\(?\b(?:for|to) garnish\b\)?", re.IGNORECASE), "for garnish"),
    (re.compile(r",?\s*\(?\bfor serving\b\)?", re.IGNORECASE), "for serving"),
]

# Nouns bought by the piece; a bare count of these implies "piece"
# fmt: off
COUNTABLE_INGREDIENTS: frozenset[str] = frozenset(
    {
        "egg", "eggs", "banana", "bananas", "apple", "apples", "orange",
        "oranges", "lemon", "lemons", "lime", "limes", "onion", "onions",
        "potato", "potatoes", "tomato", "tomatoes", "carrot", "carrots",
        "avocado", "avocados", "cucumber", "cucumbers", "zucchini",
        "zucchinis", "bell pepper", "bell peppers", "jalapeño", "jalapeños",
        "jalapeno", "jalapenos", "shallot", "shallots", "peach", "peaches",
        "pear", "pears", "mango", "mangoes", "tortilla", "tortillas",
    }
)
# fmt: on

# Words between a number and its unit that do not change the amount
QUANTITY_QUALIFIERS = ("heaping", "heaped", "scant", "level", "generous", "rounded")

_NUMBER = rf"(?:\d+(?:\s+|-)\d+\s*/\s*\d+|\d+\s*/\s*\d+|\d+(?:\.\d+)?\s*[{FRACTION_CHARS}]|[{FRACTION_CHARS}]|\d*\.?\d+)"
_QUANTITY_RE = re.compile(rf"^({_NUMBER}(?:\s*(?:-|–|\bto\b|\bor\b)\s*{_NUMBER})?)\s*", re.IGNORECASE)
_VAGUE_PREFIX_RE = re.compile(
    r"^(a few|a couple(?: of)?|several|a pinch|a dash|a handful|couple|few)\b\s*",
    re.IGNORECASE,
)
_ARTICLE_RE = re.compile(r"^an?\s+", re.IGNORECASE)
_QUALIFIER_RE = re.compile(rf"^(?:{'|'.join(QUANTITY_QUALIFIERS)})\b\s*", re.IGNORECASE)
_FLUID_OUNCE_RE = re.compile(r"^(?:fl\.?\s*oz\.?|fluid\s+ounces?)(?=\s|$|,)\s*", re.IGNORECASE)
_FIRST_WORD_RE = re.compile(r"^([^\s,]+)\s*")
_PARENTHETICAL_RE = re.compile(r"\s*\(([^)]*)\)")
_LEADING_OF_RE = re.compile(r"^of\s+", re.IGNORECASE)

# Size words and "whole" only count as units after a number
_UNITS_NEEDING_QUANTITY = {"whole", "large", "medium", "small"}


# =============================================================================
# Parsing Functions
# =============================================================================


def parse_ingredient_line(
    text: str | None,
    recipe_id: str | None = None,
    group: str | None = None,
) -> ParsedIngredient:
    """
    Split a free-text ingredient line into structured fields.

    Examples:
        "2 cups all-purpose flour, sifted" -> 2.0, "cup", "all-purpose flour", prep "sifted"
        "3 eggs" -> 3.0, "piece", "eggs"
        "a few cloves of garlic" -> 3.0, "clove", "garlic"
        "salt, to taste" -> None, None, "salt", notes "to taste"

    Never raises; unusable input returns an empty ParsedIngredient.
    """
    if not isinstance(text, str) or not text.strip():
        original_text = text if isinstance(text, str) else ""
        return ParsedIngredient(original_text=original_text, recipe_id=recipe_id, group=group)

    original = " ".join(text.split())

    for pattern, note in TO_TASTE_PHRASES:
        if pattern.search(original):
            remainder = pattern.sub("", original).strip().strip(",").strip()
            named = parse_ingredient_line(remainder) if remainder else None
            return ParsedIngredient(
                original_text=original,
                name=named.name if named else original,
                preparation=named.preparation if named else None,
                notes=note,
                recipe_id=recipe_id,
                group=group,
            )

    working, preparation = _split_preparation(original)
    quantity, working = _take_quantity(working)

    unit = None
    if working:
        unit, working = _take_unit(working, has_quantity=quantity is not None)

    name = _LEADING_OF_RE.sub("", working).strip()
    if not name:
        name = original

    if quantity is not None and unit is None and _is_countable(name):
        unit = "piece"

    logger.debug(f"Parsed {original!r} -> qty={quantity} unit={unit} name={name!r}")

    return ParsedIngredient(
        original_text=original,
        quantity=quantity,
        unit=unit,
        name=name,
        preparation=preparation,
        recipe_id=recipe_id,
        group=group,
    )


def _split_preparation(text: str) -> tuple[str, str | None]:
    """Move parentheticals and a trailing comma clause into a preparation note."""
    parts = [inner.strip() for inner in _PARENTHETICAL_RE.findall(text) if inner.strip()]
    working = _PARENTHETICAL_RE.sub("", text).strip()

    if "," in working:
        head, tail = working.split(",", 1)
        working = head.strip()
        if tail.strip():
            parts.append(tail.strip())

    return working, ", ".join(parts) or None


def _take_quantity(text: str) -> tuple[float | None, str]:
    """Consume a leading quantity token, returning (quantity, rest)."""
    vague = _VAGUE_PREFIX_RE.match(text)
    if vague:
        key = " ".join(vague.group(1).lower().split())
        return parse_quantity(key), text[vague.end() :]

    match = _QUANTITY_RE.match(text)
    if match:
        quantity = parse_quantity(match.group(1))
        if quantity is not None:
            rest = _QUALIFIER_RE.sub("", text[match.end() :], count=1)
            return quantity, rest

    # "a cup of milk" -> 1 cup
    article = _ARTICLE_RE.match(text)
    if article:
        rest = text[article.end() :]
        word = _FIRST_WORD_RE.match(rest)
        if word and normalize_unit(word.group(1)):
            return 1.0, rest
        if _is_countable(rest):
            return 1.0, rest

    return None, text


def _take_unit(text: str, has_quantity: bool) -> tuple[str | None, str]:
    """Consume a leading unit word, returning (canonical unit, rest)."""
    fluid = _FLUID_OUNCE_RE.match(text)
    if fluid:
        return "fl oz", text[fluid.end() :]

    word = _FIRST_WORD_RE.match(text)
    if not word:
        return None, text

    unit = normalize_unit(word.group(1))
    if unit is None:
        return None, text
    if unit in _UNITS_NEEDING_QUANTITY and not has_quantity:
        return None, text

    return unit, text[word.end() :]


def _is_countable(name: str) -> bool:
    words = name.lower().split()
    if not words:
        return False
    return (
        " ".join(words) in COUNTABLE_INGREDIENTS
        or words[-1] in COUNTABLE_INGREDIENTS
        or " ".join(words[-2:]) in COUNTABLE_INGREDIENTS
    )
