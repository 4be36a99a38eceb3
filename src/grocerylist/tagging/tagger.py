"""Keyword-based auto-tagging of recipes with cuisines, meal types and dietary labels."""

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from grocerylist.config import Settings, get_settings
from grocerylist.logging_config import get_logger
from grocerylist.schemas import RecipeText
from grocerylist.tagging.cache import CategoryIdCache
from grocerylist.tagging.keywords import (
    ANIMAL_BROTH_KEYWORDS,
    CUISINE_KEYWORDS,
    DAIRY_EXCLUSIONS,
    DAIRY_KEYWORDS,
    EGG_EXCLUSIONS,
    EGG_KEYWORDS,
    FISH_EXCLUSIONS,
    FISH_KEYWORDS,
    GLUTEN_EXCLUSIONS,
    GLUTEN_KEYWORDS,
    HIGH_CARB_KEYWORDS,
    MEAL_TYPE_KEYWORDS,
    MEAT_EXCLUSIONS,
    MEAT_KEYWORDS,
    NUT_EXCLUSIONS,
    NUT_KEYWORDS,
    PROTEIN_KEYWORDS,
)

logger = get_logger(__name__)

CUISINE_TITLE_POINTS = 3
CUISINE_INGREDIENT_POINTS = 1
MEAL_TYPE_TITLE_POINTS = 5
MEAL_TYPE_DESCRIPTION_POINTS = 2

LOW_SODIUM_PHRASES = ("low sodium", "low-sodium", "no salt")


@dataclass
class TagResult:
    """Label ids to attach to a recipe."""

    cuisine_ids: list[str] = field(default_factory=list)
    meal_type_ids: list[str] = field(default_factory=list)
    dietary_label_ids: list[str] = field(default_factory=list)


# =============================================================================
# Keyword Matching
# =============================================================================


@lru_cache(maxsize=2048)
def keyword_pattern(keyword: str) -> re.Pattern:
    """Whole-word pattern for a keyword, allowing a plural suffix."""
    return re.compile(rf"(?<!\w){re.escape(keyword)}(?:e?s)?(?!\w)")


def contains_keyword(text: str, keyword: str) -> bool:
    return keyword_pattern(keyword).search(text) is not None


def _count_keyword_hits(texts: Sequence[str], keywords: Iterable[str]) -> int:
    """Number of distinct keywords found in any of the texts."""
    return sum(1 for keyword in keywords if any(contains_keyword(text, keyword) for text in texts))


def _has_class(ingredients: Sequence[str], keywords: Sequence[str], exclusions: Sequence[str] = ()) -> bool:
    candidates = [name for name in ingredients if not any(phrase in name for phrase in exclusions)]
    return _count_keyword_hits(candidates, keywords) > 0


def _top_scores(scores: dict[str, int], min_score: int, limit: int) -> list[str]:
    """Names scoring at least min_score, best first, ties in table order."""
    ranked = sorted(
        ((name, score) for name, score in scores.items() if score >= min_score),
        key=lambda pair: -pair[1],
    )
    return [name for name, _ in ranked[:limit]]


def _lower(text: str | None) -> str:
    return (text or "").lower()


def _lower_all(names: Iterable[str | None] | None) -> list[str]:
    return [name.lower() for name in (names or []) if name and name.strip()]


# =============================================================================
# Detection
# =============================================================================


def detect_cuisines(
    title: str | None,
    ingredients: Iterable[str | None] | None,
    settings: Settings | None = None,
) -> list[str]:
    """Score each cuisine on title and ingredient keywords; return the best names."""
    settings = settings or get_settings()
    title_lower = _lower(title)
    names = _lower_all(ingredients)

    scores: dict[str, int] = {}
    for cuisine, keywords in CUISINE_KEYWORDS.items():
        score = CUISINE_TITLE_POINTS * _count_keyword_hits([title_lower], keywords["title"])
        score += CUISINE_INGREDIENT_POINTS * _count_keyword_hits(names, keywords["ingredients"])
        scores[cuisine] = score

    return _top_scores(scores, settings.cuisine_min_score, settings.max_cuisines)


def detect_meal_types(
    title: str | None,
    description: str | None,
    settings: Settings | None = None,
) -> list[str]:
    """Score each meal type on title and description keywords; return the best names."""
    settings = settings or get_settings()
    title_lower = _lower(title)
    description_lower = _lower(description)

    scores: dict[str, int] = {}
    for meal_type, keywords in MEAL_TYPE_KEYWORDS.items():
        score = MEAL_TYPE_TITLE_POINTS * _count_keyword_hits([title_lower], keywords["title"])
        score += MEAL_TYPE_DESCRIPTION_POINTS * _count_keyword_hits([description_lower], keywords["description"])
        scores[meal_type] = score

    return _top_scores(scores, settings.meal_type_min_score, settings.max_meal_types)


def detect_dietary_labels(
    title: str | None,
    description: str | None,
    ingredients: Iterable[str | None] | None,
    settings: Settings | None = None,
) -> list[str]:
    """
    Derive dietary label names from the ingredient list.

    Most labels are granted by the absence of a keyword class, so nothing is
    returned for a recipe without ingredients.
    """
    settings = settings or get_settings()
    names = _lower_all(ingredients)
    if not names:
        return []

    title_lower = _lower(title)
    text = f"{title_lower} {_lower(description)}"

    has_meat = _has_class(names, MEAT_KEYWORDS, MEAT_EXCLUSIONS)
    has_fish = _has_class(names, FISH_KEYWORDS, FISH_EXCLUSIONS)
    has_animal_broth = _has_class(names, ANIMAL_BROTH_KEYWORDS, MEAT_EXCLUSIONS)
    has_dairy = _has_class(names, DAIRY_KEYWORDS, DAIRY_EXCLUSIONS)
    has_eggs = _has_class(names, EGG_KEYWORDS, EGG_EXCLUSIONS)
    has_gluten = _has_class(names, GLUTEN_KEYWORDS, GLUTEN_EXCLUSIONS)
    has_nuts = _has_class(names, NUT_KEYWORDS, NUT_EXCLUSIONS)
    has_high_carb = _has_class(names, HIGH_CARB_KEYWORDS)

    labels = []
    vegetarian = not (has_meat or has_fish or has_animal_broth)
    if vegetarian:
        labels.append("Vegetarian")
    if vegetarian and not (has_dairy or has_eggs):
        labels.append("Vegan")
    if not has_gluten:
        labels.append("Gluten-Free")
    if not has_dairy:
        labels.append("Dairy-Free")
    if not has_nuts:
        labels.append("Nut-Free")

    protein_hits = _count_keyword_hits(names, PROTEIN_KEYWORDS)
    if protein_hits >= settings.high_protein_min_hits or "protein" in title_lower:
        labels.append("High-Protein")

    if any(phrase in text for phrase in LOW_SODIUM_PHRASES):
        labels.append("Low-Sodium")

    if not has_high_carb and (has_meat or has_dairy or has_eggs):
        labels.extend(["Keto", "Low-Carb"])

    return labels


# =============================================================================
# Tagger
# =============================================================================


class AutoTagger:
    """
    Tags recipes by keyword scoring and resolves label names to ids.

    Label names missing from the id cache are dropped. If the ids cannot be
    loaded the recipe is left untagged instead of failing the caller.
    """

    def __init__(self, cache: CategoryIdCache, settings: Settings | None = None):
        self.cache = cache
        self.settings = settings or get_settings()

    def tag(
        self,
        title: str | None,
        description: str | None = None,
        ingredients: Iterable[str | None] | None = None,
    ) -> TagResult:
        try:
            ids = self.cache.get()
        except Exception as e:
            logger.error(f"Auto-tagging failed, label ids unavailable: {e}")
            return TagResult()

        ingredient_names = list(ingredients or [])
        cuisines = detect_cuisines(title, ingredient_names, self.settings)
        meal_types = detect_meal_types(title, description, self.settings)
        dietary_labels = detect_dietary_labels(title, description, ingredient_names, self.settings)

        logger.debug(
            f"Tagged {title!r}: cuisines={cuisines}, meal_types={meal_types}, dietary={dietary_labels}"
        )

        return TagResult(
            cuisine_ids=_resolve(cuisines, ids.cuisines),
            meal_type_ids=_resolve(meal_types, ids.meal_types),
            dietary_label_ids=_resolve(dietary_labels, ids.dietary_labels),
        )

    def tag_recipe(self, recipe: RecipeText | Mapping[str, Any]) -> TagResult:
        """Tag a recipe record (title, description, ingredients)."""
        if not isinstance(recipe, RecipeText):
            recipe = RecipeText.model_validate(recipe)
        return self.tag(recipe.title, recipe.description, recipe.ingredients)


def _resolve(names: list[str], ids: Mapping[str, str]) -> list[str]:
    return [ids[name] for name in names if name in ids]
