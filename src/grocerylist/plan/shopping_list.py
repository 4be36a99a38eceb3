"""Shopping list generation from recipe ingredient rows."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from grocerylist.categories import OTHER, Categorizer
from grocerylist.logging_config import LoggingContext, get_logger
from grocerylist.normalize.quantities import format_quantity_display
from grocerylist.plan.aggregation import (
    AggregatedItem,
    Component,
    SourceLine,
    aggregate_by_recipe,
    aggregate_ingredients,
)
from grocerylist.plan.scaling import scale_factor, scale_line
from grocerylist.schemas import IngredientRow

logger = get_logger(__name__)


@dataclass
class ShoppingItem:
    """A single item in the shopping list."""

    ingredient_name: str
    display_name: str
    canonical_key: str
    quantity: float | None
    unit: str | None
    category: str = OTHER
    recipe_id: str | None = None
    components: list[Component] | None = None
    notes: str | None = None
    source_lines: list[SourceLine] = field(default_factory=list)

    @property
    def quantity_display(self) -> str:
        """Quantity and unit as shown on the list, e.g. "1 ½ cup"."""
        quantity = format_quantity_display(self.quantity)
        return " ".join(part for part in (quantity, self.unit) if part)

    @property
    def recipe_ids(self) -> list[str]:
        return list(dict.fromkeys(line.recipe_id for line in self.source_lines))


@dataclass
class ShoppingList:
    """Complete shopping list built from a set of recipes."""

    list_id: str
    items: list[ShoppingItem] = field(default_factory=list)

    # Grouped view
    items_by_category: dict[str, list[ShoppingItem]] = field(default_factory=dict)

    def add_item(self, item: ShoppingItem) -> None:
        """Add an item and update the category grouping."""
        self.items.append(item)

        category = item.category or OTHER
        if category not in self.items_by_category:
            self.items_by_category[category] = []
        self.items_by_category[category].append(item)

    @property
    def unquantified_items_count(self) -> int:
        return sum(1 for item in self.items if item.quantity is None)


class ShoppingListGenerator:
    """
    Generates shopping lists from recipe ingredient rows with:
    - Serving-size scaling per recipe
    - Quantity aggregation across recipes (or within each recipe)
    - Grocery category assignment
    """

    def __init__(self, categorizer: Categorizer | None = None):
        self.categorizer = categorizer or Categorizer()

    def generate(
        self,
        list_id: str,
        rows: Iterable[IngredientRow | Mapping[str, Any]],
        scaled_servings: Mapping[str, int] | None = None,
        keep_recipe_separate: bool = False,
    ) -> ShoppingList:
        """
        Generate a shopping list from ingredient rows.

        Args:
            list_id: The shopping list ID.
            rows: Ingredient records, each optionally carrying its recipe's
                servings field.
            scaled_servings: Target serving count per recipe ID. Recipes
                without an entry, or whose servings cannot be parsed, are
                used as written.
            keep_recipe_separate: Aggregate within each recipe only instead
                of merging across recipes.

        Returns:
            ShoppingList with items in aggregation order.
        """
        with LoggingContext(shopping_list_id=list_id):
            logger.info(f"Generating shopping list {list_id}")

            # Step 1: Validate and scale rows
            lines = self._scaled_rows(rows, scaled_servings or {})

            # Step 2: Aggregate
            if keep_recipe_separate:
                grouped = aggregate_by_recipe(lines)
            else:
                grouped = [(None, aggregate_ingredients(lines))]

            # Step 3: Build items
            shopping_list = ShoppingList(list_id=list_id)
            for recipe_id, aggregated in grouped:
                for agg_item in aggregated:
                    shopping_list.add_item(self._create_shopping_item(agg_item, recipe_id))

            logger.info(
                f"Generated shopping list: {len(shopping_list.items)} items, "
                f"{len(shopping_list.items_by_category)} categories, "
                f"{shopping_list.unquantified_items_count} without a total"
            )

            return shopping_list

    def _scaled_rows(
        self,
        rows: Iterable[IngredientRow | Mapping[str, Any]],
        scaled_servings: Mapping[str, int],
    ) -> list[IngredientRow]:
        """Validate rows and scale those whose recipe has a target serving count."""
        scaled: list[IngredientRow] = []
        unscalable: set[str] = set()

        for row in rows:
            if not isinstance(row, IngredientRow):
                try:
                    row = IngredientRow.model_validate(row)
                except ValidationError as e:
                    logger.warning(f"Skipping invalid ingredient row {row!r}: {e}")
                    continue

            target = scaled_servings.get(row.recipe_id)
            if target:
                factor = scale_factor(row.recipe_servings, target)
                if factor is None and row.recipe_id not in unscalable:
                    unscalable.add(row.recipe_id)
                    logger.warning(
                        f"Recipe {row.recipe_id} cannot be scaled: servings {row.recipe_servings!r}"
                    )
                row = scale_line(row, factor)

            scaled.append(row)

        return scaled

    def _create_shopping_item(self, agg_item: AggregatedItem, recipe_id: str | None) -> ShoppingItem:
        return ShoppingItem(
            ingredient_name=agg_item.display_name.lower(),
            display_name=agg_item.display_name,
            canonical_key=agg_item.canonical_key,
            quantity=agg_item.total_quantity,
            unit=agg_item.unit,
            category=self.categorizer.categorize(agg_item.canonical_key),
            recipe_id=recipe_id,
            components=agg_item.components,
            notes=agg_item.notes,
            source_lines=agg_item.source_lines,
        )
