"""Recipe auto-tagging: cuisines, meal types and dietary labels."""

from grocerylist.tagging.cache import CategoryIdCache, CategoryIds, SqlLabelLookup
from grocerylist.tagging.tagger import (
    AutoTagger,
    TagResult,
    contains_keyword,
    detect_cuisines,
    detect_dietary_labels,
    detect_meal_types,
)

__all__ = [
    "AutoTagger",
    "CategoryIdCache",
    "CategoryIds",
    "SqlLabelLookup",
    "TagResult",
    "contains_keyword",
    "detect_cuisines",
    "detect_dietary_labels",
    "detect_meal_types",
]
