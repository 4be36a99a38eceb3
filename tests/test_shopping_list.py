"""Unit tests for shopping list generation."""

from unittest.mock import MagicMock

from grocerylist.categories import DAIRY, FROZEN, MEAT, OTHER, PANTRY, Categorizer
from grocerylist.plan.aggregation import Component
from grocerylist.plan.shopping_list import (
    ShoppingItem,
    ShoppingList,
    ShoppingListGenerator,
)


def _by_key(shopping_list: ShoppingList) -> dict[str, ShoppingItem]:
    return {item.canonical_key: item for item in shopping_list.items}


# =============================================================================
# Shopping Item Tests
# =============================================================================


class TestShoppingItem:
    """Tests for ShoppingItem model."""

    def test_quantity_display(self):
        """Test quantity and unit are shown together."""
        item = ShoppingItem(
            ingredient_name="all-purpose flour",
            display_name="All-purpose flour",
            canonical_key="all-purpose flour",
            quantity=1.5,
            unit="cup",
        )
        assert item.quantity_display == "1 ½ cup"

    def test_quantity_display_without_unit_or_quantity(self):
        """Test missing parts are left out."""
        eggs = ShoppingItem(
            ingredient_name="eggs", display_name="Eggs", canonical_key="egg", quantity=3.0, unit=None
        )
        salt = ShoppingItem(
            ingredient_name="salt", display_name="Salt", canonical_key="salt", quantity=None, unit=None
        )
        assert eggs.quantity_display == "3"
        assert salt.quantity_display == ""

    def test_defaults(self):
        """Test default values for optional fields."""
        item = ShoppingItem(
            ingredient_name="lemons", display_name="Lemons", canonical_key="lemon", quantity=2.0, unit="piece"
        )
        assert item.category == OTHER
        assert item.recipe_id is None
        assert item.components is None
        assert item.source_lines == []
        assert item.recipe_ids == []


class TestShoppingList:
    """Tests for ShoppingList model."""

    def test_add_item_groups_by_category(self):
        """Test items are indexed under their category."""
        shopping_list = ShoppingList(list_id="list-1")
        flour = ShoppingItem(
            ingredient_name="flour", display_name="Flour", canonical_key="flour",
            quantity=2.0, unit="cup", category=PANTRY,
        )
        milk = ShoppingItem(
            ingredient_name="milk", display_name="Milk", canonical_key="milk",
            quantity=None, unit=None, category=DAIRY,
        )
        shopping_list.add_item(flour)
        shopping_list.add_item(milk)

        assert shopping_list.items == [flour, milk]
        assert shopping_list.items_by_category == {PANTRY: [flour], DAIRY: [milk]}
        assert shopping_list.unquantified_items_count == 1

    def test_empty_category_goes_to_other(self):
        """Test an item without a category lands in Other."""
        shopping_list = ShoppingList(list_id="list-1")
        item = ShoppingItem(
            ingredient_name="zorp", display_name="Zorp", canonical_key="zorp",
            quantity=None, unit=None, category="",
        )
        shopping_list.add_item(item)
        assert shopping_list.items_by_category == {OTHER: [item]}


# =============================================================================
# Generator Tests
# =============================================================================


class TestShoppingListGenerator:
    """Tests for ShoppingListGenerator."""

    def test_generate_merges_recipes(self, ingredient_rows):
        """Test rows from different recipes are merged and categorized."""
        shopping_list = ShoppingListGenerator().generate("list-1", ingredient_rows)

        assert shopping_list.list_id == "list-1"
        assert [item.display_name for item in shopping_list.items] == [
            "All-purpose flour",
            "Chicken breast",
            "Eggs",
        ]

        by_key = _by_key(shopping_list)
        flour = by_key["all-purpose flour"]
        assert flour.quantity == 3
        assert flour.unit == "cup"
        assert flour.recipe_id is None
        assert flour.recipe_ids == ["r1", "r2"]
        assert flour.ingredient_name == "all-purpose flour"

        assert flour.category == PANTRY
        assert by_key["egg"].category == DAIRY
        assert by_key["chicken breast"].category == MEAT

        assert set(shopping_list.items_by_category) == {PANTRY, DAIRY, MEAT}

    def test_generate_scales_recipes(self, ingredient_rows):
        """Test a target serving count scales that recipe only."""
        shopping_list = ShoppingListGenerator().generate("list-1", ingredient_rows, scaled_servings={"r1": 8})

        by_key = _by_key(shopping_list)
        assert by_key["all-purpose flour"].quantity == 5
        assert by_key["all-purpose flour"].quantity_display == "5 cup"
        assert by_key["egg"].quantity == 4
        assert by_key["chicken breast"].quantity == 1
        assert by_key["chicken breast"].unit == "lb"

    def test_generate_scales_down(self, ingredient_rows):
        """Test scaling below the written servings."""
        shopping_list = ShoppingListGenerator().generate("list-1", ingredient_rows, scaled_servings={"r2": 1})

        by_key = _by_key(shopping_list)
        assert by_key["all-purpose flour"].quantity == 2.5
        assert by_key["chicken breast"].quantity == 0.5

    def test_unscalable_recipe_is_used_as_written(self, ingredient_rows):
        """Test rows whose servings cannot be parsed are not scaled."""
        for row in ingredient_rows:
            row["recipe_servings"] = "a crowd"

        shopping_list = ShoppingListGenerator().generate(
            "list-1", ingredient_rows, scaled_servings={"r1": 8, "r2": 4}
        )
        assert _by_key(shopping_list)["all-purpose flour"].quantity == 3

    def test_keep_recipe_separate(self, ingredient_rows):
        """Test each recipe keeps its own items."""
        shopping_list = ShoppingListGenerator().generate("list-1", ingredient_rows, keep_recipe_separate=True)

        assert [(item.recipe_id, item.canonical_key) for item in shopping_list.items] == [
            ("r1", "all-purpose flour"),
            ("r1", "egg"),
            ("r2", "all-purpose flour"),
            ("r2", "chicken breast"),
        ]
        assert [item.quantity for item in shopping_list.items_by_category[PANTRY]] == [2, 1]

    def test_text_only_lines_are_parsed_and_scaled(self):
        """Test rows without quantity columns use the ingredient text."""
        rows = [
            {"recipeId": "r1", "originalText": "1 cup milk", "servings": "2"},
            {"recipeId": "r1", "originalText": "1 red bell pepper", "servings": "2"},
            {"recipeId": "r2", "originalText": "1 green bell pepper", "servings": "4"},
        ]
        shopping_list = ShoppingListGenerator().generate("list-1", rows, scaled_servings={"r1": 4})

        by_key = _by_key(shopping_list)
        assert by_key["milk"].quantity == 2
        assert by_key["milk"].unit == "cup"

        peppers = by_key["bell pepper"]
        assert peppers.quantity == 3
        assert peppers.components == [
            Component(label="red", quantity=2.0),
            Component(label="green", quantity=1.0),
        ]
        assert peppers.notes == "Breakdown: 2 red, 1 green"

    def test_invalid_rows_are_skipped(self, ingredient_rows):
        """Test non-record rows are logged and skipped."""
        shopping_list = ShoppingListGenerator().generate("list-1", ["junk", None, *ingredient_rows])
        assert len(shopping_list.items) == 3

    def test_empty_input(self):
        """Test no rows produce an empty list."""
        shopping_list = ShoppingListGenerator().generate("list-1", [])
        assert shopping_list.items == []
        assert shopping_list.items_by_category == {}

    def test_custom_categorizer(self, ingredient_rows):
        """Test overrides from the categorizer are applied to every item."""
        overrides = MagicMock()
        overrides.get_category.return_value = FROZEN

        generator = ShoppingListGenerator(categorizer=Categorizer(overrides=overrides))
        shopping_list = generator.generate("list-1", ingredient_rows)

        assert list(shopping_list.items_by_category) == [FROZEN]
        overrides.get_category.assert_any_call("all-purpose flour")
