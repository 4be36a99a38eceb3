"""Normalize free-text ingredient lines into canonical, summable parts."""

from grocerylist.normalize.families import FAMILY_RULES, FamilyRule, match_ingredient_family
from grocerylist.normalize.names import (
    FuzzyFamilyMatch,
    NameNormalization,
    SpellingCorrection,
    capitalize_first,
    correct_misspelling,
    detect_bell_pepper,
    fuzzy_match_ingredient_family,
    normalize_ingredient_name,
    singularize,
    strip_modifiers,
    strip_preparation_modifiers,
)
from grocerylist.normalize.parsing import ParsedIngredient, parse_ingredient_line
from grocerylist.normalize.quantities import (
    format_number,
    format_quantity_display,
    parse_quantity,
)
from grocerylist.normalize.units import (
    UnitConversion,
    are_units_compatible,
    convert_quantity,
    normalize_unit,
    unit_conversion,
)

__all__ = [
    "FAMILY_RULES",
    "FamilyRule",
    "FuzzyFamilyMatch",
    "NameNormalization",
    "ParsedIngredient",
    "SpellingCorrection",
    "UnitConversion",
    "are_units_compatible",
    "capitalize_first",
    "convert_quantity",
    "correct_misspelling",
    "detect_bell_pepper",
    "format_number",
    "format_quantity_display",
    "fuzzy_match_ingredient_family",
    "match_ingredient_family",
    "normalize_ingredient_name",
    "normalize_unit",
    "parse_ingredient_line",
    "parse_quantity",
    "singularize",
    "strip_modifiers",
    "strip_preparation_modifiers",
    "unit_conversion",
]
