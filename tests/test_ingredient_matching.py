"""Tests for ingredient name canonicalization."""

import pytest

from grocerylist.normalize.families import FAMILY_RULES, match_ingredient_family
from grocerylist.normalize.names import (
    correct_misspelling,
    detect_bell_pepper,
    fuzzy_match_ingredient_family,
    normalize_ingredient_name,
    singularize,
    strip_modifiers,
    strip_preparation_modifiers,
)


class TestModifierStripping:
    """Tests for removing preparation and quality words."""

    def test_strip_preparation_only(self):
        """Test preparation words go while quality words stay."""
        assert strip_preparation_modifiers("shredded cheddar cheese") == "cheddar cheese"
        assert strip_preparation_modifiers("finely chopped fresh parsley") == "fresh parsley"

    def test_strip_all_modifiers(self):
        """Test quality words are removed as well."""
        assert strip_modifiers("extra sharp cheddar") == "cheddar"
        assert strip_modifiers("finely chopped fresh parsley") == "parsley"
        assert strip_modifiers("large eggs") == "eggs"

    def test_words_containing_modifiers_survive(self):
        """Test modifiers only match as whole words."""
        assert strip_modifiers("groundnut oil") == "groundnut oil"


class TestSingularize:
    """Tests for last-word singularization."""

    def test_suffix_rules(self):
        """Test the -s, -es and -ies rules."""
        assert singularize("carrots") == "carrot"
        assert singularize("boxes") == "box"
        assert singularize("peaches") == "peach"
        assert singularize("cherry tomatoes") == "cherry tomato"

    def test_irregulars(self):
        """Test irregular plurals."""
        assert singularize("berries") == "berry"
        assert singularize("bay leaves") == "bay leaf"
        assert singularize("potatoes") == "potato"

    def test_words_kept_as_is(self):
        """Test always-plural words and -ss/-us endings are kept."""
        assert singularize("oats") == "oats"
        assert singularize("red lentils") == "red lentils"
        assert singularize("hummus") == "hummus"
        assert singularize("asparagus") == "asparagus"
        assert singularize("gas") == "gas"


class TestIngredientFamilies:
    """Tests for the ordered family table."""

    def test_specific_products_win_over_generic_words(self):
        """Test rules for products sit above the word they contain."""
        assert match_ingredient_family("garlic powder").canonical == "garlic powder"
        assert match_ingredient_family("peanut butter").canonical == "peanut butter"
        assert match_ingredient_family("egg noodles").canonical == "egg noodles"
        assert match_ingredient_family("garlic").canonical == "garlic"

    def test_plural_forms_match(self):
        """Test family terms accept plurals."""
        assert match_ingredient_family("chicken breasts").canonical == "chicken breast"
        assert match_ingredient_family("tomatoes").canonical == "tomato"

    def test_anchored_generic_rules(self):
        """Test bare generic words map to their everyday product."""
        assert match_ingredient_family("flour").display == "All-purpose flour"
        assert match_ingredient_family("sugar").canonical == "sugar"

    def test_no_match(self):
        """Test unknown names and empty input."""
        assert match_ingredient_family("dragon fruit extract") is None
        assert match_ingredient_family("") is None

    def test_rules_are_ordered_tuples(self):
        """Test the table is a flat ordered list of rules."""
        assert len(FAMILY_RULES) > 100
        assert all(rule.canonical and rule.display for rule in FAMILY_RULES)


class TestBellPepperDetection:
    """Tests for bell pepper variants."""

    @pytest.mark.parametrize(
        "text,color",
        [
            ("red bell pepper", "red"),
            ("Orange Bell Peppers", "orange"),
            ("bell peppers", None),
            ("yellow peppers", "yellow"),
        ],
    )
    def test_detects_bell_peppers(self, text, color):
        """Test colours are captured when present."""
        result = detect_bell_pepper(text)
        assert result.canonical_key == "bell pepper"
        assert result.attributes == {"is_bell_pepper": True, "color": color}

    @pytest.mark.parametrize(
        "text",
        [
            "pepper",
            "black pepper",
            "cayenne pepper",
            "jalapeno pepper",
            "red pepper flakes",
            "roasted red peppers",
            "bell pepper sauce",
            "2 green bell peppers",
        ],
    )
    def test_other_peppers_never_match(self, text):
        """Test other peppers and names that only contain a bell pepper."""
        assert detect_bell_pepper(text) is None


class TestSpellingCorrection:
    """Tests for misspelling correction and fuzzy family matching."""

    def test_dictionary_correction(self):
        """Test dictionary misspellings have distance 0."""
        result = correct_misspelling("chiken breast")
        assert result.was_corrected
        assert result.corrected == "chicken breast"
        assert result.original == "chiken breast"
        assert result.distance == 0

    def test_edit_distance_correction(self):
        """Test the Levenshtein fallback snaps to a close known word."""
        result = correct_misspelling("spinnach")
        assert result.corrected == "spinach"
        assert result.distance == 1

    def test_correct_words_are_untouched(self):
        """Test correctly spelled names are not changed."""
        result = correct_misspelling("garlic")
        assert not result.was_corrected
        assert result.corrected == "garlic"

    def test_fuzzy_family_match(self):
        """Test a corrected name resolves to its family."""
        match = fuzzy_match_ingredient_family("chiken")
        assert match.canonical == "chicken"
        assert match.family_matched
        assert match.corrected_from == "chiken"
        assert match.distance == 0

    @pytest.mark.parametrize("text", ["table", "computer", "berries", "egg", ""])
    def test_fuzzy_family_no_match(self, text):
        """Test words with nothing to correct return None."""
        assert fuzzy_match_ingredient_family(text) is None


class TestNormalizeIngredientName:
    """Tests for the full normalization pipeline."""

    @pytest.mark.parametrize("text", ["salt and pepper", "salt & pepper", "Salt and Pepper", "salt n pepper"])
    def test_salt_and_pepper_compound(self, text):
        """Test salt and pepper variants share one key."""
        result = normalize_ingredient_name(text)
        assert result.canonical_key == "salt & pepper"
        assert result.display_name == "Salt & pepper"

    def test_unknown_and_pair(self):
        """Test other 'X and Y' names become 'X & Y'."""
        result = normalize_ingredient_name("zorp and blip")
        assert result.canonical_key == "zorp & blip"
        assert result.attributes == {"compound": True}

    def test_bell_pepper_collapse(self):
        """Test coloured bell peppers share one key and keep their colour."""
        red = normalize_ingredient_name("red bell pepper")
        green = normalize_ingredient_name("green peppers")
        assert red.canonical_key == green.canonical_key == "bell pepper"
        assert red.attributes["color"] == "red"
        assert green.attributes["color"] == "green"

    def test_peppers_stay_apart(self):
        """Test black pepper and plain pepper are not bell peppers."""
        assert normalize_ingredient_name("black pepper").canonical_key == "black pepper"
        assert normalize_ingredient_name("freshly ground black pepper").canonical_key == "black pepper"
        assert normalize_ingredient_name("pepper").canonical_key == "pepper"

    def test_bell_pepper_products_stay_apart(self):
        """Test prepared pepper products are not merged into fresh bell peppers."""
        assert normalize_ingredient_name("bell pepper sauce").canonical_key != "bell pepper"
        assert normalize_ingredient_name("roasted red peppers").canonical_key != "bell pepper"
        assert normalize_ingredient_name("diced green peppers").canonical_key != "bell pepper"

    def test_modifiers_are_stripped_before_family_lookup(self):
        """Test prepared and graded names reach their family."""
        assert normalize_ingredient_name("shredded sharp cheddar").canonical_key == "cheddar cheese"
        assert normalize_ingredient_name("freshly grated parmesan cheese").canonical_key == "parmesan cheese"
        assert normalize_ingredient_name("extra virgin olive oil").canonical_key == "olive oil"

    @pytest.mark.parametrize("text", ["milk", "2% milk", "whole milk", "skim milk"])
    def test_milk_family(self, text):
        """Test milk grades share one key."""
        assert normalize_ingredient_name(text).canonical_key == "milk"

    def test_onion_family(self):
        """Test plain onions merge while red onions stay separate."""
        for text in ("yellow onion", "white onions", "sweet onion"):
            assert normalize_ingredient_name(text).canonical_key == "onion"
        assert normalize_ingredient_name("red onion").canonical_key == "red onion"

    def test_garlic_cloves(self):
        """Test clove phrasing resolves to garlic."""
        assert normalize_ingredient_name("cloves of garlic").canonical_key == "garlic"

    def test_family_match_attributes(self):
        """Test a direct family hit is flagged and not fuzzy."""
        result = normalize_ingredient_name("chicken breast")
        assert result.canonical_key == "chicken breast"
        assert result.attributes.get("family_matched") is True
        assert "fuzzy_matched" not in result.attributes

    def test_singularized_fallback(self):
        """Test names outside the family table are singularized."""
        result = normalize_ingredient_name("berries")
        assert result.canonical_key == "berry"
        assert result.display_name == "Berry"
        assert "fuzzy_matched" not in result.attributes

    def test_fuzzy_matching(self):
        """Test misspelled names are corrected and flagged."""
        result = normalize_ingredient_name("chiken breast")
        assert result.canonical_key == "chicken breast"
        assert result.attributes["fuzzy_matched"] is True
        assert result.attributes["corrected_from"] == "chiken breast"
        assert result.attributes["family_matched"] is True

    def test_fuzzy_matching_can_be_disabled(self):
        """Test the fuzzy flag turns correction off."""
        assert normalize_ingredient_name("spinnach", fuzzy=True).canonical_key == "spinach"
        assert normalize_ingredient_name("spinnach", fuzzy=False).canonical_key == "spinnach"

    def test_fuzzy_default_follows_settings(self, monkeypatch):
        """Test the default comes from the fuzzy_matching_enabled setting."""
        from grocerylist.config import get_settings

        monkeypatch.setenv("FUZZY_MATCHING_ENABLED", "false")
        get_settings.cache_clear()
        assert normalize_ingredient_name("spinnach").canonical_key == "spinnach"

    def test_trailing_punctuation_and_case(self):
        """Test whitespace, case and trailing punctuation are ignored."""
        assert normalize_ingredient_name("  Carrots. ").canonical_key == "carrot"

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_input(self, text):
        """Test empty names give an empty key."""
        result = normalize_ingredient_name(text)
        assert result.canonical_key == ""
        assert result.display_name == ""
