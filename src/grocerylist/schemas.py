"""Pydantic schemas for validating ingredient and recipe input records."""

from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from grocerylist.normalize.quantities import parse_quantity

_RECIPE_INGREDIENT_KEYS = (
    "name",
    "ingredient",
    "ingredientName",
    "ingredient_name",
    "rawText",
    "raw_text",
    "original_text",
)


class IngredientLine(BaseModel):
    """One ingredient mention from one recipe, as supplied by the caller."""

    recipe_id: str = Field(
        default="unknown",
        validation_alias=AliasChoices("recipe_id", "recipeId"),
    )
    original_text: str = Field(
        default="",
        validation_alias=AliasChoices("original_text", "originalText", "raw_text", "rawText"),
    )
    quantity: float | None = None
    unit: str | None = None
    name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("name", "ingredientName", "ingredient_name", "ingredient"),
    )

    @field_validator("recipe_id", mode="before")
    @classmethod
    def coerce_recipe_id(cls, v: Any) -> str:
        """Database ids may arrive as integers or UUIDs."""
        if v is None or v == "":
            return "unknown"
        return str(v)

    @field_validator("original_text", mode="before")
    @classmethod
    def default_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return " ".join(str(v).split())

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v: Any) -> float | None:
        """Handle NUMERIC columns, numeric strings and fractions."""
        if isinstance(v, Decimal):
            return float(v)
        return parse_quantity(v)

    @field_validator("unit", "name", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> str | None:
        if v is None:
            return None
        text = str(v).strip()
        return text or None


class IngredientRow(IngredientLine):
    """An ingredient line joined with its recipe's serving information."""

    recipe_servings: str | None = Field(
        default=None,
        validation_alias=AliasChoices("recipe_servings", "recipeServings", "servings"),
    )

    @field_validator("recipe_servings", mode="before")
    @classmethod
    def coerce_servings(cls, v: Any) -> str | None:
        if v is None or v == "":
            return None
        return str(v).strip()


class RecipeText(BaseModel):
    """The text of a recipe that the auto-tagger reads."""

    title: str = ""
    description: str = ""
    ingredients: list[str] = Field(default_factory=list)

    @field_validator("title", "description", mode="before")
    @classmethod
    def default_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)

    @field_validator("ingredients", mode="before")
    @classmethod
    def ingredient_names(cls, v: Any) -> list[str]:
        """Accept plain strings or ingredient records with a name."""
        if not v:
            return []
        names = []
        for item in v:
            if isinstance(item, dict):
                item = next((item[key] for key in _RECIPE_INGREDIENT_KEYS if item.get(key)), None)
            if item:
                names.append(str(item))
        return names
