"""Tests for grocery category assignment."""

from unittest.mock import MagicMock

import pytest

from grocerylist.categories import (
    BEVERAGES,
    CATEGORIES,
    DAIRY,
    FROZEN,
    INGREDIENT_CATEGORY_MAP,
    MEAT,
    OTHER,
    PANTRY,
    PRODUCE,
    SPICES,
    Categorizer,
    SqlCategoryOverrideLookup,
    categorize_ingredient,
)
from grocerylist.models import IngredientCategoryOverride


class TestCategorizeIngredient:
    """Tests for the static category table."""

    @pytest.mark.parametrize(
        "name,category",
        [
            ("onion", PRODUCE),
            ("Milk", DAIRY),
            ("  salmon ", MEAT),
            ("salt & pepper", SPICES),
            ("all-purpose flour", PANTRY),
        ],
    )
    def test_exact_matches(self, name, category):
        """Test names present in the table, ignoring case and whitespace."""
        assert categorize_ingredient(name) == category

    def test_longest_contained_key_wins(self):
        """Test substring matching prefers the most specific key."""
        assert categorize_ingredient("cheddar cheese") == DAIRY
        assert categorize_ingredient("low sodium chicken broth") == BEVERAGES
        assert categorize_ingredient("frozen peas and carrots") == FROZEN

    def test_unknown_and_empty(self):
        """Test unmatched names fall back to Other."""
        assert categorize_ingredient("dragon fruit extract") == OTHER
        assert categorize_ingredient("") == OTHER
        assert categorize_ingredient(None) == OTHER

    def test_table_only_uses_known_categories(self):
        """Test every table entry maps to a known category."""
        assert set(INGREDIENT_CATEGORY_MAP.values()) <= set(CATEGORIES)


class TestCategorizer:
    """Tests for the categorizer with override lookups."""

    def test_without_overrides(self):
        """Test the static table is used directly."""
        assert Categorizer().categorize("butter") == DAIRY
        assert Categorizer().categorize(None) == OTHER

    def test_valid_override_wins(self):
        """Test a known override category replaces the table result."""
        overrides = MagicMock()
        overrides.get_category.return_value = FROZEN

        assert Categorizer(overrides).categorize("  Spinach ") == FROZEN
        overrides.get_category.assert_called_once_with("spinach")

    def test_missing_override_falls_back(self):
        """Test no override means the table result."""
        overrides = MagicMock()
        overrides.get_category.return_value = None
        assert Categorizer(overrides).categorize("spinach") == PRODUCE

    def test_unknown_override_category_is_ignored(self):
        """Test override values outside the category set are ignored."""
        overrides = MagicMock()
        overrides.get_category.return_value = "Garden Stuff"
        assert Categorizer(overrides).categorize("spinach") == PRODUCE

    def test_failing_lookup_falls_back(self):
        """Test lookup errors do not break categorization."""
        overrides = MagicMock()
        overrides.get_category.side_effect = RuntimeError("database is down")
        assert Categorizer(overrides).categorize("spinach") == PRODUCE


@pytest.mark.integration
class TestSqlCategoryOverrideLookup:
    """Tests for reading overrides from the database."""

    def test_reads_stored_override(self, session_factory):
        """Test stored overrides are returned and used by the categorizer."""
        with session_factory() as session:
            session.add(IngredientCategoryOverride(ingredient_name="spinach", category=FROZEN, override_count=3))
            session.commit()

        lookup = SqlCategoryOverrideLookup(session_factory)
        assert lookup.get_category("spinach") == FROZEN
        assert lookup.get_category("kale") is None

        categorizer = Categorizer(lookup)
        assert categorizer.categorize("Spinach") == FROZEN
        assert categorizer.categorize("kale") == PRODUCE
