"""Shopping list aggregation, scaling and generation."""

from grocerylist.plan.aggregation import (
    AggregatedItem,
    Component,
    SourceLine,
    aggregate_by_recipe,
    aggregate_ingredients,
)
from grocerylist.plan.scaling import parse_servings, scale_factor, scale_line
from grocerylist.plan.shopping_list import (
    ShoppingItem,
    ShoppingList,
    ShoppingListGenerator,
)

__all__ = [
    "AggregatedItem",
    "Component",
    "ShoppingItem",
    "ShoppingList",
    "ShoppingListGenerator",
    "SourceLine",
    "aggregate_by_recipe",
    "aggregate_ingredients",
    "parse_servings",
    "scale_factor",
    "scale_line",
]
