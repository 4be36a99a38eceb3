"""Ingredient name canonicalization.

Turns a free-text ingredient name into a canonical key used to group
shopping items, plus a display name for people. The pipeline tries, in
order: compound names, the bell pepper special case, the ingredient family
table (on the raw text, then with preparation words removed, then with all
modifiers removed), misspelling correction, and finally plain
singularization of whatever is left.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from grocerylist.config import get_settings
from grocerylist.logging_config import get_logger
from grocerylist.normalize.families import match_ingredient_family

logger = get_logger(__name__)


@dataclass(frozen=True)
class NameNormalization:
    """Canonical identity of an ingredient name."""

    canonical_key: str
    display_name: str
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SpellingCorrection:
    """Result of correcting misspelled words in an ingredient name."""

    corrected: str
    was_corrected: bool
    original: str | None = None
    distance: int = 0


@dataclass(frozen=True)
class FuzzyFamilyMatch:
    """A canonical name reached through misspelling correction."""

    canonical: str
    display: str
    corrected_from: str
    distance: int
    family_matched: bool


# =============================================================================
# Compound Names
# =============================================================================

COMPOUND_NAMES: dict[str, str] = {
    "salt and pepper": "salt & pepper",
    "salt & pepper": "salt & pepper",
    "salt n pepper": "salt & pepper",
    "salt 'n pepper": "salt & pepper",
    "salt pepper": "salt & pepper",
    "oil and vinegar": "oil & vinegar",
    "oil & vinegar": "oil & vinegar",
    "bread and butter": "bread & butter",
    "bread & butter": "bread & butter",
    "peanut butter and jelly": "peanut butter & jelly",
    "peanut butter & jelly": "peanut butter & jelly",
    "macaroni and cheese": "macaroni & cheese",
    "macaroni & cheese": "macaroni & cheese",
    "mac and cheese": "macaroni & cheese",
    "mac & cheese": "macaroni & cheese",
    "mac n cheese": "macaroni & cheese",
}

_AND_PAIR_RE = re.compile(r"^(\w{2,12})\s+and\s+(\w{2,12})$")
_TRAILING_PUNCTUATION_RE = re.compile(r"[.,;:!?]+$")


# =============================================================================
# Bell Peppers
# =============================================================================

BELL_PEPPER_KEY = "bell pepper"
BELL_PEPPER_DISPLAY = "Bell peppers"

_BELL_PEPPER_RE = re.compile(r"^(?:(red|green|yellow|orange)\s+)?bell\s+peppers?$")
_COLOR_PEPPER_RE = re.compile(r"^(red|green|yellow|orange)\s+peppers?$")


def detect_bell_pepper(text: str) -> NameNormalization | None:
    """
    Detect bell pepper variants, capturing the colour when present.

    The whole name must be the pepper: "red bell pepper", "bell peppers" and
    "green peppers" match, "roasted red peppers" and "bell pepper sauce" do not.
    "pepper", "black pepper", "cayenne pepper" and hot peppers never do.
    """
    if not text:
        return None

    lower = text.lower().strip()
    match = _BELL_PEPPER_RE.match(lower) or _COLOR_PEPPER_RE.match(lower)
    if not match:
        return None

    return NameNormalization(
        canonical_key=BELL_PEPPER_KEY,
        display_name=BELL_PEPPER_DISPLAY,
        attributes={"is_bell_pepper": True, "color": match.group(1)},
    )


# =============================================================================
# Modifier Stripping
# =============================================================================

# Cutting, cooking state and preparation actions
# fmt: off
PREPARATION_MODIFIERS: list[str] = [
    "roughly chopped", "finely chopped", "coarsely chopped", "rough chopped",
    "finely diced", "thinly sliced", "finely grated", "freshly grated",
    "freshly ground", "freshly squeezed", "room temperature", "cut into pieces",
    "shredded", "grated", "sliced", "diced", "chopped", "minced", "crushed",
    "ground", "halved", "quartered", "cubed", "julienned", "chiffonade",
    "melted", "softened", "cold", "chilled", "thawed", "warm",
    "toasted", "roasted", "sautéed", "sauteed", "fried", "baked", "grilled",
    "smoked", "cured", "dehydrated", "blanched", "steamed", "poached",
    "braised", "caramelized", "charred", "cooked", "uncooked",
    "peeled", "unpeeled", "seeded", "unseeded", "deseeded", "cored", "pitted",
    "trimmed", "cleaned", "rinsed", "drained", "washed",
    "beaten", "whisked", "whipped", "creamed", "mashed", "pureed", "puréed",
    "blended", "packed", "loosely packed", "tightly packed", "lightly packed",
    "finely", "roughly", "coarsely", "thinly", "freshly", "lightly",
]

# Grade, dietary, size, texture, freshness and packaging descriptors
QUALITY_MODIFIERS: list[str] = [
    "extra sharp", "extra virgin", "extra large", "low fat", "reduced fat",
    "fat free", "full fat", "part skim", "low sodium", "reduced sodium",
    "sodium free", "no salt added", "sugar free", "no sugar added",
    "lightly salted", "bone in", "skin on",
    "sharp", "mild", "aged", "young", "mature", "vintage",
    "virgin", "pure", "refined", "unrefined", "raw", "organic", "natural",
    "fresh", "dried", "dry", "canned", "jarred", "frozen", "preserved",
    "lowfat", "skim", "whole", "2%", "1%",
    "unsweetened", "sweetened", "lite", "heavy", "thick", "thin", "regular",
    "large", "medium", "small", "jumbo", "baby", "mini", "petite",
    "big", "little", "tiny", "ripe", "unripe",
    "unsalted", "salted", "boneless", "skinless",
]
# fmt: on


def _modifier_pattern(words: list[str]) -> re.Pattern:
    alternatives = "|".join(
        r"[\s-]?".join(re.escape(part) for part in word.split())
        for word in sorted(words, key=len, reverse=True)
    )
    return re.compile(rf"(?<![\w%])(?:{alternatives})(?![\w%])", re.IGNORECASE)


_PREPARATION_RE = _modifier_pattern(PREPARATION_MODIFIERS)
_ALL_MODIFIERS_RE = _modifier_pattern(PREPARATION_MODIFIERS + QUALITY_MODIFIERS)


def _collapse(text: str) -> str:
    return " ".join(text.replace(",", " ").split())


def strip_preparation_modifiers(text: str) -> str:
    """Remove preparation words: "shredded cheddar cheese" -> "cheddar cheese"."""
    return _collapse(_PREPARATION_RE.sub(" ", text))


def strip_modifiers(text: str) -> str:
    """Remove preparation and quality words: "extra sharp cheddar" -> "cheddar"."""
    return _collapse(_ALL_MODIFIERS_RE.sub(" ", text))


# =============================================================================
# Singularization
# =============================================================================

IRREGULAR_SINGULARS: dict[str, str] = {
    "tomatoes": "tomato",
    "potatoes": "potato",
    "leaves": "leaf",
    "halves": "half",
    "loaves": "loaf",
    "knives": "knife",
    "shelves": "shelf",
    "calves": "calf",
    "berries": "berry",
    "cherries": "cherry",
    "strawberries": "strawberry",
    "blueberries": "blueberry",
    "raspberries": "raspberry",
    "blackberries": "blackberry",
    "cranberries": "cranberry",
    "mangoes": "mango",
    "anchovies": "anchovy",
    "chilies": "chili",
    "chillies": "chilli",
    "cookies": "cookie",
    "avocadoes": "avocado",
}

KEEP_PLURAL: frozenset[str] = frozenset(
    {
        "oats",
        "lentils",
        "chickpeas",
        "breadcrumbs",
        "grits",
        "molasses",
        "greens",
        "noodles",
        "sprinkles",
        "peas",
        "brussels sprouts",
        "hummus",
        "couscous",
        "asparagus",
        "citrus",
        "swiss",
        "series",
        "species",
        "hops",
        "schnapps",
    }
)


def singularize(text: str) -> str:
    """
    Singularize the last word of an ingredient name.

    Irregular forms are looked up first, then words that are always plural
    are kept, then the -ies / -es / -s suffix rules apply.
    """
    if not text:
        return ""

    if text in IRREGULAR_SINGULARS:
        return IRREGULAR_SINGULARS[text]
    if text in KEEP_PLURAL:
        return text

    head, _, word = text.rpartition(" ")
    prefix = f"{head} " if head else ""

    if word in IRREGULAR_SINGULARS:
        return prefix + IRREGULAR_SINGULARS[word]
    if word in KEEP_PLURAL:
        return text

    if word.endswith(("ss", "us", "is")):
        return text
    if word.endswith("ies") and len(word) > 4:
        return prefix + word[:-3] + "y"
    if word.endswith(("sses", "shes", "ches", "xes")):
        return prefix + word[:-2]
    if word.endswith("s") and len(word) > 3:
        return prefix + word[:-1]

    return text


def capitalize_first(text: str) -> str:
    """Uppercase the first character only: "salt & pepper" -> "Salt & pepper"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


# =============================================================================
# Misspelling Correction
# =============================================================================

COMMON_MISSPELLINGS: dict[str, str] = {
    # Proteins
    "chiken": "chicken",
    "chicen": "chicken",
    "chickin": "chicken",
    "beaf": "beef",
    "salman": "salmon",
    "samon": "salmon",
    "shripm": "shrimp",
    "shrimps": "shrimp",
    "srimp": "shrimp",
    "porc": "pork",
    "turky": "turkey",
    "sausauge": "sausage",
    "sasuage": "sausage",
    # Vegetables
    "oinon": "onion",
    "onoin": "onion",
    "garlik": "garlic",
    "garlick": "garlic",
    "tomatoe": "tomato",
    "tomatos": "tomatoes",
    "potatoe": "potato",
    "potatos": "potatoes",
    "brocoli": "broccoli",
    "brocolli": "broccoli",
    "broccolli": "broccoli",
    "avacado": "avocado",
    "avocato": "avocado",
    "zuchini": "zucchini",
    "zucchinni": "zucchini",
    "zuccini": "zucchini",
    "spinich": "spinach",
    "cucmber": "cucumber",
    "cucumbr": "cucumber",
    "letuce": "lettuce",
    "lettuse": "lettuce",
    "cabage": "cabbage",
    "carot": "carrot",
    "carrott": "carrot",
    "celary": "celery",
    "asparagas": "asparagus",
    "mushroon": "mushroom",
    "mushrom": "mushroom",
    "jalepeno": "jalapeno",
    "brussel": "brussels",
    "eggplnt": "eggplant",
    # Herbs
    "parsely": "parsley",
    "parsly": "parsley",
    "basle": "basil",
    "basel": "basil",
    "oregeno": "oregano",
    "origano": "oregano",
    "rosemery": "rosemary",
    "rosmary": "rosemary",
    "cilanto": "cilantro",
    "corriander": "coriander",
    "tyme": "thyme",
    "thym": "thyme",
    # Dairy
    "chese": "cheese",
    "cheeze": "cheese",
    "chedder": "cheddar",
    "parmesean": "parmesan",
    "parmasan": "parmesan",
    "parmasean": "parmesan",
    "mozarella": "mozzarella",
    "mozzarela": "mozzarella",
    "mozerella": "mozzarella",
    "buuter": "butter",
    "buter": "butter",
    "yoghurt": "yogurt",
    "yogert": "yogurt",
    "ricota": "ricotta",
    # Spices
    "cinamon": "cinnamon",
    "cinammon": "cinnamon",
    "peper": "pepper",
    "pepperr": "pepper",
    "tumeric": "turmeric",
    "cummin": "cumin",
    "paprica": "paprika",
    "nutmg": "nutmeg",
    "cardamon": "cardamom",
    # Pantry
    "vinager": "vinegar",
    "vineger": "vinegar",
    "suger": "sugar",
    "sirracha": "sriracha",
    "siracha": "sriracha",
    "worchestershire": "worcestershire",
    "worstershire": "worcestershire",
    "mayonaise": "mayonnaise",
    "mayonase": "mayonnaise",
    "ketchep": "ketchup",
    "spagetti": "spaghetti",
    "fettucini": "fettuccine",
    "linguini": "linguine",
    "quinao": "quinoa",
    "quiona": "quinoa",
    "tortila": "tortilla",
    "tortillia": "tortilla",
    "bannana": "banana",
    "banan": "banana",
    "lemmon": "lemon",
    "rasberry": "raspberry",
    "rasberries": "raspberries",
    "strawbery": "strawberry",
    "pinapple": "pineapple",
}

# Correct spellings the Levenshtein fallback may snap to
_VOCABULARY: frozenset[str] = frozenset(
    word for value in COMMON_MISSPELLINGS.values() for word in value.split()
)
_MODIFIER_WORDS: frozenset[str] = frozenset(
    word for phrase in PREPARATION_MODIFIERS + QUALITY_MODIFIERS for word in phrase.split()
)
_WORD_RE = re.compile(r"[a-zà-ÿ']+")


def _closest_spelling(word: str) -> tuple[str, int] | None:
    """Find a vocabulary word within a small edit distance of the input."""
    if len(word) < 5 or word in _MODIFIER_WORDS:
        return None
    if word in _VOCABULARY or singularize(word) in _VOCABULARY:
        return None

    max_distance = 2 if len(word) >= 8 else 1
    candidates = [candidate for candidate in _VOCABULARY if candidate[0] == word[0]]
    if not candidates:
        return None

    result = process.extractOne(
        word,
        candidates,
        scorer=Levenshtein.distance,
        score_cutoff=max_distance,
    )
    if result is None:
        return None

    candidate, distance, _ = result
    return candidate, int(distance)


def correct_misspelling(text: str) -> SpellingCorrection:
    """
    Correct common ingredient misspellings word by word.

    Dictionary hits have distance 0; the edit-distance fallback reports
    the largest distance it needed.
    """
    if not text:
        return SpellingCorrection(corrected="", was_corrected=False)

    lower = text.lower()
    max_distance = 0
    was_corrected = False

    def replace(match: re.Match) -> str:
        nonlocal max_distance, was_corrected
        word = match.group(0)
        if word in COMMON_MISSPELLINGS:
            was_corrected = True
            return COMMON_MISSPELLINGS[word]

        closest = _closest_spelling(word)
        if closest is None:
            return word

        was_corrected = True
        max_distance = max(max_distance, closest[1])
        return closest[0]

    corrected = _WORD_RE.sub(replace, lower)
    if not was_corrected:
        return SpellingCorrection(corrected=lower, was_corrected=False)

    logger.debug(f"Corrected ingredient spelling {lower!r} -> {corrected!r}")
    return SpellingCorrection(
        corrected=corrected,
        was_corrected=True,
        original=lower,
        distance=max_distance,
    )


def fuzzy_match_ingredient_family(text: str) -> FuzzyFamilyMatch | None:
    """
    Resolve a misspelled ingredient name to a canonical family.

    Returns None for very short input or when no word needed correcting.
    When the corrected text matches no family, the singularized correction
    is returned with family_matched=False.
    """
    if not text or len(text.strip()) < 4:
        return None

    correction = correct_misspelling(text.strip())
    if not correction.was_corrected:
        return None

    corrected = correction.corrected
    for variant in (corrected, strip_preparation_modifiers(corrected), strip_modifiers(corrected)):
        if not variant:
            continue
        rule = match_ingredient_family(variant)
        if rule:
            return FuzzyFamilyMatch(
                canonical=rule.canonical,
                display=rule.display,
                corrected_from=correction.original,
                distance=correction.distance,
                family_matched=True,
            )

    fallback = singularize(strip_modifiers(corrected) or corrected)
    return FuzzyFamilyMatch(
        canonical=fallback,
        display=capitalize_first(fallback),
        corrected_from=correction.original,
        distance=correction.distance,
        family_matched=False,
    )


# =============================================================================
# Normalization Pipeline
# =============================================================================


def _family_normalization(text: str, **attributes: Any) -> NameNormalization | None:
    rule = match_ingredient_family(text)
    if rule:
        return NameNormalization(
            canonical_key=rule.canonical,
            display_name=rule.display,
            attributes={"family_matched": True, **attributes},
        )
    return None


def _fuzzy_normalization(lower: str) -> NameNormalization | None:
    match = fuzzy_match_ingredient_family(lower)
    if match is None:
        return None

    attributes: dict[str, Any] = {"fuzzy_matched": True, "corrected_from": match.corrected_from}

    bell_pepper = detect_bell_pepper(correct_misspelling(lower).corrected)
    if bell_pepper:
        return NameNormalization(
            bell_pepper.canonical_key,
            bell_pepper.display_name,
            {**bell_pepper.attributes, **attributes},
        )

    if match.family_matched:
        attributes["family_matched"] = True
    logger.debug(f"Fuzzy matched {lower!r} -> {match.canonical!r} (distance {match.distance})")
    return NameNormalization(match.canonical, match.display, attributes)


def normalize_ingredient_name(text: str | None, *, fuzzy: bool | None = None) -> NameNormalization:
    """
    Produce the canonical key and display name for an ingredient name.

    Args:
        text: Ingredient name or raw ingredient text.
        fuzzy: Enable misspelling correction. Defaults to the
            ``fuzzy_matching_enabled`` setting.

    Examples:
        "Salt and Pepper" -> "salt & pepper" / "Salt & pepper"
        "green bell peppers" -> "bell pepper" / "Bell peppers" (color green)
        "shredded sharp cheddar" -> "cheddar cheese" / "Cheddar cheese"
        "carrots" -> "carrot" / "Carrots"
        "chiken breast" -> "chicken breast" (fuzzy_matched)
    """
    if not text or not isinstance(text, str):
        return NameNormalization(canonical_key="", display_name="")

    lower = _TRAILING_PUNCTUATION_RE.sub("", " ".join(text.split())).lower()
    if not lower:
        return NameNormalization(canonical_key="", display_name="")

    if lower in COMPOUND_NAMES:
        canonical = COMPOUND_NAMES[lower]
        return NameNormalization(canonical, capitalize_first(canonical), {"compound": True})

    bell_pepper = detect_bell_pepper(lower)
    if bell_pepper:
        return bell_pepper

    result = _family_normalization(lower)
    if result:
        return result

    # Stripped retries only consult the family table

    prep_stripped = strip_preparation_modifiers(lower)
    if prep_stripped and prep_stripped != lower:
        result = _family_normalization(prep_stripped, prep_modifiers_stripped=True)
        if result:
            return result

    stripped = strip_modifiers(lower)
    if stripped and stripped != lower:
        result = _family_normalization(stripped, all_modifiers_stripped=True)
        if result:
            return result

    if fuzzy is None:
        fuzzy = get_settings().fuzzy_matching_enabled
    if fuzzy:
        result = _fuzzy_normalization(lower)
        if result:
            return result

    and_pair = _AND_PAIR_RE.match(lower)
    if and_pair:
        canonical = f"{and_pair.group(1)} & {and_pair.group(2)}"
        return NameNormalization(canonical, capitalize_first(canonical), {"compound": True})

    canonical = singularize(stripped or lower)
    attributes = {"all_modifiers_stripped": True} if stripped != lower else {}
    return NameNormalization(canonical, capitalize_first(canonical), attributes)
