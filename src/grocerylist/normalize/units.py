"""Unit normalization and conversion utilities."""

from dataclasses import dataclass

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Spelling Tables
# =============================================================================

# Spelling variant (lowercase) -> canonical token
UNIT_ALIASES: dict[str, str] = {
    # Teaspoon
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tsp": "tsp",
    "tsps": "tsp",
    "t": "tsp",
    "tspn": "tsp",
    # Tablespoon
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tablespoonful": "tbsp",
    "tablespoonfuls": "tbsp",
    "tbsp": "tbsp",
    "tbsps": "tbsp",
    "tbs": "tbsp",
    "tbl": "tbsp",
    "tbls": "tbsp",
    # Cup
    "cup": "cup",
    "cups": "cup",
    "c": "cup",
    # Fluid ounce
    "fluid ounce": "fl oz",
    "fluid ounces": "fl oz",
    "fl oz": "fl oz",
    "fl. oz": "fl oz",
    "floz": "fl oz",
    # Pint / quart / gallon
    "pint": "pint",
    "pints": "pint",
    "pt": "pint",
    "pts": "pint",
    "quart": "quart",
    "quarts": "quart",
    "qt": "quart",
    "qts": "quart",
    "gallon": "gallon",
    "gallons": "gallon",
    "gal": "gallon",
    "gals": "gallon",
    # Metric volume
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "ml": "ml",
    "mls": "ml",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    "l": "l",
    # Weight
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "lbs": "lb",
    "ounce": "oz",
    "ounces": "oz",
    "oz": "oz",
    "gram": "g",
    "grams": "g",
    "gramme": "g",
    "grammes": "g",
    "g": "g",
    "gr": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "kilo": "kg",
    "kilos": "kg",
    "kg": "kg",
    "kgs": "kg",
    # Count / container
    "piece": "piece",
    "pieces": "piece",
    "pc": "piece",
    "pcs": "piece",
    "whole": "whole",
    "large": "large",
    "medium": "medium",
    "small": "small",
    "can": "can",
    "cans": "can",
    "tin": "can",
    "tins": "can",
    "package": "package",
    "packages": "package",
    "pkg": "package",
    "pkgs": "package",
    "packet": "package",
    "packets": "package",
    "jar": "jar",
    "jars": "jar",
    "bottle": "bottle",
    "bottles": "bottle",
    "box": "box",
    "boxes": "box",
    "bag": "bag",
    "bags": "bag",
    "bunch": "bunch",
    "bunches": "bunch",
    "head": "head",
    "heads": "head",
    "clove": "clove",
    "cloves": "clove",
    "slice": "slice",
    "slices": "slice",
    "stalk": "stalk",
    "stalks": "stalk",
    "stick": "stick",
    "sticks": "stick",
    "sprig": "sprig",
    "sprigs": "sprig",
    "pinch": "pinch",
    "pinches": "pinch",
    "dash": "dash",
    "dashes": "dash",
    "handful": "handful",
    "handfuls": "handful",
}

# Case-sensitive spellings checked before lowercasing
CASE_SENSITIVE_UNITS: dict[str, str] = {
    "T": "tbsp",
    "Tbsp": "tbsp",
    "Tbs": "tbsp",
    "TB": "tbsp",
    "C": "cup",
    "L": "l",
    "mL": "ml",
}

# Descriptive words that sit where a unit would and must never become one
# fmt: off
NON_UNIT_WORDS: frozenset[str] = frozenset(
    {
        "and", "or", "of", "to", "for", "with",
        "fresh", "dried", "ground", "chopped", "minced", "diced", "sliced",
        "grated", "shredded", "crushed", "melted", "softened", "room",
        "temperature", "cold", "warm", "hot", "cooked", "raw", "ripe",
        "unripe", "peeled", "seeded", "pitted", "boneless", "skinless",
        "lean", "extra", "virgin", "light", "dark", "sweet", "unsweetened",
        "salted", "unsalted", "plain", "all", "purpose", "self", "rising",
        "active", "dry", "instant", "quick", "rolled", "steel", "cut", "old",
        "fashioned", "taste",
    }
)
# fmt: on


# =============================================================================
# Unit Conversion Tables
# =============================================================================


@dataclass(frozen=True)
class UnitConversion:
    """Conversion group and factor into the group's base unit."""

    group: str
    to_base: float


UNIT_CONVERSIONS: dict[str, UnitConversion] = {
    # Small volume (base: tsp)
    "tsp": UnitConversion("volume-small", 1.0),
    "tbsp": UnitConversion("volume-small", 3.0),
    # Large volume (base: cup)
    "cup": UnitConversion("volume-large", 1.0),
    "fl oz": UnitConversion("volume-large", 0.125),
    "pint": UnitConversion("volume-large", 2.0),
    "quart": UnitConversion("volume-large", 4.0),
    "gallon": UnitConversion("volume-large", 16.0),
    # Metric volume (base: ml)
    "ml": UnitConversion("volume-metric", 1.0),
    "l": UnitConversion("volume-metric", 1000.0),
    # Metric weight (base: g)
    "g": UnitConversion("weight-metric", 1.0),
    "kg": UnitConversion("weight-metric", 1000.0),
    # Imperial weight (base: oz)
    "oz": UnitConversion("weight-imperial", 1.0),
    "lb": UnitConversion("weight-imperial", 16.0),
    # Loose counts
    "piece": UnitConversion("count-piece", 1.0),
    # Size words sum with each other but not with plain pieces
    "large": UnitConversion("count-size", 1.0),
    "medium": UnitConversion("count-size", 1.0),
    "small": UnitConversion("count-size", 1.0),
}

# Containers and produce units are only summable with themselves
# fmt: off
COUNT_UNITS: tuple[str, ...] = (
    "whole", "can", "package", "jar", "bottle", "box", "bag", "bunch", "head",
    "clove", "slice", "stalk", "stick", "sprig", "pinch", "dash", "handful",
)
# fmt: on

for _unit in COUNT_UNITS:
    UNIT_CONVERSIONS[_unit] = UnitConversion(f"count-{_unit}", 1.0)


# =============================================================================
# Normalization Functions
# =============================================================================


def normalize_unit(raw: str | None) -> str | None:
    """
    Map a unit spelling onto its canonical token.

    Examples:
        "Tablespoons" -> "tbsp"
        "T" -> "tbsp", "t" -> "tsp"
        "lbs." -> "lb"
        "chopped" -> None
    """
    if not raw or not isinstance(raw, str):
        return None

    unit = raw.strip()
    if unit.endswith(".") and len(unit) > 1:
        unit = unit[:-1]

    if unit in CASE_SENSITIVE_UNITS:
        return CASE_SENSITIVE_UNITS[unit]

    lowered = " ".join(unit.lower().split())
    if lowered in NON_UNIT_WORDS:
        return None

    return UNIT_ALIASES.get(lowered)


def unit_conversion(unit: str | None) -> UnitConversion | None:
    """Look up the conversion group for a unit in any spelling."""
    if not unit:
        return None
    canonical = normalize_unit(unit) or unit.strip().lower()
    return UNIT_CONVERSIONS.get(canonical)


def are_units_compatible(unit1: str | None, unit2: str | None) -> bool:
    """
    Check if quantities in two units can be summed.

    Two missing units are compatible; a missing and a present unit are not.
    Otherwise the units must be the same token or share a conversion group.
    """
    if not unit1 and not unit2:
        return True
    if not unit1 or not unit2:
        return False

    norm1 = normalize_unit(unit1) or unit1.strip().lower()
    norm2 = normalize_unit(unit2) or unit2.strip().lower()
    if norm1 == norm2:
        return True

    conv1 = UNIT_CONVERSIONS.get(norm1)
    conv2 = UNIT_CONVERSIONS.get(norm2)
    if conv1 is None or conv2 is None:
        return False

    return conv1.group == conv2.group


def convert_quantity(quantity: float, from_unit: str | None, to_unit: str | None) -> float:
    """
    Convert a quantity between units of the same group.

    Returns the quantity unchanged when either unit is unknown or the units
    are not in the same group.
    """
    conv_from = unit_conversion(from_unit)
    conv_to = unit_conversion(to_unit)
    if conv_from is None or conv_to is None or conv_from.group != conv_to.group:
        logger.debug(f"Cannot convert {from_unit!r} to {to_unit!r}, keeping quantity")
        return quantity
    return quantity * conv_from.to_base / conv_to.to_base
