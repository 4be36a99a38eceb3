"""Tests for recipe auto-tagging."""

import threading
import time
from unittest.mock import MagicMock

import pytest

from grocerylist.config import Settings
from grocerylist.tagging import (
    AutoTagger,
    CategoryIdCache,
    CategoryIds,
    SqlLabelLookup,
    TagResult,
    contains_keyword,
    detect_cuisines,
    detect_dietary_labels,
    detect_meal_types,
)

LABEL_IDS = CategoryIds(
    cuisines={"Italian": "c-ita", "Mexican": "c-mex", "Chinese": "c-chi"},
    meal_types={"Breakfast": "m-bre", "Dinner": "m-din"},
    dietary_labels={"Vegetarian": "d-veg", "Vegan": "d-vgn", "Gluten-Free": "d-gf", "Keto": "d-keto"},
)


@pytest.fixture
def tagger():
    """AutoTagger backed by a fixed set of label ids."""
    return AutoTagger(CategoryIdCache(lambda: LABEL_IDS))


# =============================================================================
# Keyword Matching Tests
# =============================================================================


class TestContainsKeyword:
    """Tests for whole-word keyword matching."""

    def test_plural_suffixes(self):
        """Test singular keywords match their plurals."""
        assert contains_keyword("2 eggs", "egg")
        assert contains_keyword("cherry tomatoes", "tomato")
        assert contains_keyword("fish tacos", "taco")

    def test_no_partial_words(self):
        """Test keywords inside longer words do not match."""
        assert not contains_keyword("eggplant", "egg")
        assert not contains_keyword("nutmeg", "nut")
        assert not contains_keyword("butternut squash", "nut")
        assert not contains_keyword("blueberry pancakes", "cake")


# =============================================================================
# Detection Tests
# =============================================================================


class TestDetectCuisines:
    """Tests for cuisine scoring."""

    def test_title_and_ingredient_keywords(self):
        """Test title and ingredient hits add up for one cuisine."""
        ingredients = ["spaghetti", "eggs", "pancetta", "pecorino romano", "black pepper"]
        assert detect_cuisines("Spaghetti Carbonara", ingredients) == ["Italian"]

    def test_ties_keep_table_order(self):
        """Test equal scores are returned in table order."""
        assert detect_cuisines("Pizza Tacos", []) == ["Italian", "Mexican"]

    def test_ingredients_alone_can_reach_threshold(self):
        """Test three ingredient hits are enough."""
        ingredients = ["soy sauce", "sesame oil", "rice vinegar"]
        assert detect_cuisines("Weeknight Bowl", ingredients) == ["Chinese"]

    def test_limited_to_top_two(self):
        """Test at most two cuisines are returned."""
        assert detect_cuisines("Italian Mexican Thai Fusion", None) == ["Italian", "Mexican"]

    def test_no_match(self):
        """Test keywords hidden inside other words score nothing."""
        assert detect_cuisines("Bunny Cake", ["flour", "sugar"]) == []
        assert detect_cuisines(None, None) == []

    def test_thresholds_from_settings(self):
        """Test a lower minimum score lets single ingredient hits through."""
        settings = Settings(cuisine_min_score=1, max_cuisines=3)
        assert detect_cuisines("Weeknight Bowl", ["sesame oil"], settings) == ["Chinese", "Korean"]


class TestDetectMealTypes:
    """Tests for meal type scoring."""

    def test_title_keyword(self):
        """Test a single title hit is enough."""
        assert detect_meal_types("Blueberry Pancakes", None) == ["Breakfast"]

    def test_description_keywords(self):
        """Test two description hits reach the threshold."""
        assert detect_meal_types("Lemon Chicken", "An easy weeknight dinner") == ["Dinner"]

    def test_single_description_hit_is_not_enough(self):
        """Test one description hit stays below the threshold."""
        assert detect_meal_types("Quinoa Bowl", "Great for lunch") == []


class TestDetectDietaryLabels:
    """Tests for dietary label detection."""

    def test_plant_based_recipe(self):
        """Test a recipe without any restricted class gets every absence label."""
        labels = detect_dietary_labels("Tomato Basil Sauce", None, ["olive oil", "garlic", "tomatoes", "basil"])
        assert labels == ["Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "Nut-Free"]

    def test_meat_and_dairy_without_carbs(self):
        """Test keto recipes with meat and butter."""
        labels = detect_dietary_labels("Butter Chicken", None, ["chicken breast", "butter", "salt"])
        assert labels == ["Gluten-Free", "Nut-Free", "Keto", "Low-Carb"]

    def test_nut_butter_is_not_dairy(self):
        """Test exclusion phrases keep nut butters out of the dairy class."""
        labels = detect_dietary_labels("PB Toast", None, ["peanut butter", "bread"])
        assert labels == ["Vegetarian", "Vegan", "Dairy-Free"]

    def test_gluten_free_flour(self):
        """Test gluten-free products do not count as gluten."""
        labels = detect_dietary_labels("GF Cookies", None, ["gluten-free flour", "sugar", "eggs"])
        assert labels == ["Vegetarian", "Gluten-Free", "Dairy-Free", "Nut-Free"]

    def test_animal_broth_is_not_vegetarian(self):
        """Test fish sauce rules out vegetarian while rice noodles stay gluten-free."""
        labels = detect_dietary_labels("Noodle Salad", None, ["fish sauce", "rice noodles", "lime"])
        assert "Vegetarian" not in labels
        assert "Gluten-Free" in labels

    def test_words_containing_nut(self):
        """Test nutmeg, butternut and coconut are not tree nuts."""
        labels = detect_dietary_labels("Squash Soup", None, ["nutmeg", "butternut squash", "coconut", "water chestnuts"])
        assert "Nut-Free" in labels
        assert "Dairy-Free" in labels

    def test_vegan_substitutes(self):
        """Test ingredients marked vegan are not dairy."""
        labels = detect_dietary_labels("Vegan Mac", None, ["vegan cheese", "oat milk", "macaroni"])
        assert labels[:2] == ["Vegetarian", "Vegan"]
        assert "Dairy-Free" in labels

    def test_high_protein(self):
        """Test enough protein sources or a protein title."""
        labels = detect_dietary_labels("Power Bowl", None, ["chicken breast", "black beans", "quinoa", "brown rice"])
        assert "High-Protein" in labels
        assert "High-Protein" in detect_dietary_labels("Protein Pancakes", None, ["banana", "oats"])
        assert "High-Protein" not in detect_dietary_labels("Omelette", None, ["eggs", "spinach"])

    def test_protein_title_substring(self):
        """Test "protein" anywhere in the title counts, even inside a word."""
        labels = detect_dietary_labels("Peanut Butter Proteinbars", None, ["oats", "honey"])
        assert "High-Protein" in labels

    def test_oyster_mushrooms_are_vegetarian(self):
        """Test mushrooms named after shellfish are not fish."""
        labels = detect_dietary_labels("Mushroom Stir Fry", None, ["oyster mushrooms", "king oyster mushroom", "garlic"])
        assert labels[:2] == ["Vegetarian", "Vegan"]
        assert "Vegetarian" not in detect_dietary_labels("Oyster Stew", None, ["oysters", "potatoes"])

    def test_low_sodium(self):
        """Test low sodium phrases in the title or description."""
        labels = detect_dietary_labels("Lentil Soup", "A low-sodium take on a classic", ["lentils", "carrots"])
        assert "Low-Sodium" in labels

    def test_no_ingredients(self):
        """Test nothing is derived without ingredients."""
        assert detect_dietary_labels("Low Sodium Protein Salad", "no salt", []) == []
        assert detect_dietary_labels("Salad", None, None) == []


# =============================================================================
# Tagger Tests
# =============================================================================


class TestAutoTagger:
    """Tests for AutoTagger."""

    def test_tag_resolves_ids(self, tagger):
        """Test detected names are turned into ids."""
        result = tagger.tag(
            "Spaghetti Carbonara",
            "A classic weeknight dinner",
            ["spaghetti", "eggs", "pancetta", "pecorino"],
        )
        assert result == TagResult(cuisine_ids=["c-ita"], meal_type_ids=["m-din"], dietary_label_ids=["d-keto"])

    def test_names_without_ids_are_dropped(self, tagger):
        """Test labels missing from the id maps are skipped."""
        result = tagger.tag("Tomato Basil Sauce", None, ["olive oil", "garlic", "tomatoes", "basil"])
        assert result.cuisine_ids == []
        assert result.dietary_label_ids == ["d-veg", "d-vgn", "d-gf"]

    def test_tag_recipe_accepts_records(self, tagger):
        """Test recipe mappings with ingredient records."""
        recipe = {
            "title": "Pizza Tacos",
            "description": None,
            "ingredients": [{"name": "tortilla"}, {"rawText": "shredded mozzarella"}, "salsa"],
        }
        result = tagger.tag_recipe(recipe)
        assert result.cuisine_ids == ["c-ita", "c-mex"]

    def test_loader_failure_returns_empty_result(self):
        """Test recipes are left untagged when ids cannot be loaded."""
        loader = MagicMock(side_effect=[RuntimeError("database is down"), LABEL_IDS])
        tagger = AutoTagger(CategoryIdCache(loader))

        assert tagger.tag("Pizza", None, ["mozzarella"]) == TagResult()
        assert not tagger.cache.is_loaded

        assert tagger.tag("Pizza", None, ["mozzarella"]).cuisine_ids == ["c-ita"]
        assert loader.call_count == 2


class TestCategoryIdCache:
    """Tests for the shared label id cache."""

    def test_loads_once_across_threads(self):
        """Test concurrent first calls trigger a single load."""
        calls = []

        def loader():
            calls.append(1)
            time.sleep(0.05)
            return LABEL_IDS

        cache = CategoryIdCache(loader)
        results = []
        threads = [threading.Thread(target=lambda: results.append(cache.get())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(result is LABEL_IDS for result in results)

    def test_invalidate_reloads(self):
        """Test invalidation drops the ids until the next get."""
        loader = MagicMock(return_value=LABEL_IDS)
        cache = CategoryIdCache(loader)

        assert not cache.is_loaded
        cache.get()
        cache.get()
        assert loader.call_count == 1

        cache.invalidate()
        assert not cache.is_loaded
        cache.get()
        assert loader.call_count == 2


@pytest.mark.integration
class TestSqlLabelLookup:
    """Tests for loading label ids from the database."""

    def test_loads_ids_in_sort_order(self, seeded_labels):
        """Test every table is read in sort order."""
        ids = SqlLabelLookup(seeded_labels)()

        assert list(ids.cuisines.items()) == [("Italian", "c-ita"), ("Mexican", "c-mex")]
        assert list(ids.meal_types.items()) == [("Breakfast", "m-bre"), ("Dinner", "m-din")]
        assert list(ids.dietary_labels.items()) == [("Vegetarian", "d-veg"), ("Gluten-Free", "d-gf")]

    def test_tagger_with_database_ids(self, seeded_labels):
        """Test end-to-end tagging against stored labels."""
        tagger = AutoTagger(CategoryIdCache(SqlLabelLookup(seeded_labels)))
        result = tagger.tag("Blueberry Pancakes", None, ["flour", "blueberries", "maple syrup"])

        assert result.meal_type_ids == ["m-bre"]
        assert result.dietary_label_ids == ["d-veg"]
