"""Aggregation of ingredient lines from many recipes into shopping items."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from grocerylist.logging_config import get_logger
from grocerylist.normalize.names import normalize_ingredient_name
from grocerylist.normalize.parsing import parse_ingredient_line
from grocerylist.normalize.quantities import format_number
from grocerylist.normalize.units import are_units_compatible, convert_quantity, normalize_unit
from grocerylist.schemas import IngredientLine

logger = get_logger(__name__)

# Bell pepper components are listed in this order
COLOR_ORDER = ("red", "green", "yellow", "orange", "any color")
ANY_COLOR = "any color"


@dataclass(frozen=True)
class SourceLine:
    """Provenance of one ingredient line inside an aggregated item."""

    recipe_id: str
    original_text: str
    parsed: dict[str, Any]


@dataclass(frozen=True)
class Component:
    """Per-variant quantity breakdown (bell pepper colours)."""

    label: str
    quantity: float | None
    unit: str | None = None


@dataclass
class AggregatedItem:
    """A single shopping entry summed across recipes."""

    display_name: str
    canonical_key: str
    total_quantity: float | None
    unit: str | None
    source_lines: list[SourceLine] = field(default_factory=list)
    components: list[Component] | None = None
    notes: str | None = None

    @property
    def recipe_ids(self) -> list[str]:
        """Recipes contributing to this item, in source line order."""
        return list(dict.fromkeys(line.recipe_id for line in self.source_lines))


@dataclass
class _GroupItem:
    recipe_id: str
    original_text: str
    quantity: float | None
    unit: str | None
    attributes: dict[str, Any]


@dataclass
class _CanonicalGroup:
    canonical_key: str
    display_name: str
    attributes: dict[str, Any]
    items: list[_GroupItem] = field(default_factory=list)


# =============================================================================
# Public API
# =============================================================================


def aggregate_ingredients(
    lines: Iterable[IngredientLine | Mapping[str, Any]] | None,
) -> list[AggregatedItem]:
    """
    Aggregate ingredient lines into a deduplicated shopping list.

    Lines are grouped by canonical ingredient key. Bell peppers are summed
    across colours with a per-colour breakdown; everything else is summed
    when all units share a conversion group, using the first line's unit,
    and otherwise reported as a "Mixed: ..." note with no total.

    Args:
        lines: IngredientLine objects or mappings with the same fields
            (camelCase aliases accepted).

    Returns:
        Aggregated items sorted by display name.
    """
    if not lines:
        return []

    groups: dict[str, _CanonicalGroup] = {}
    line_count = 0

    for line in _coerce_lines(lines):
        line_count += 1
        raw_name = line.name or parse_ingredient_line(line.original_text).name
        normalized = normalize_ingredient_name(raw_name)

        if not normalized.canonical_key:
            logger.debug(f"Dropping ingredient line without a usable name: {line.original_text!r}")
            continue

        group = groups.get(normalized.canonical_key)
        if group is None:
            group = _CanonicalGroup(
                canonical_key=normalized.canonical_key,
                display_name=normalized.display_name,
                attributes=dict(normalized.attributes),
            )
            groups[normalized.canonical_key] = group

        quantity, unit = _resolve_quantity(line)
        group.items.append(
            _GroupItem(
                recipe_id=line.recipe_id,
                original_text=line.original_text or raw_name,
                quantity=quantity,
                unit=unit,
                attributes=dict(normalized.attributes),
            )
        )

    results = [_process_group(group) for group in groups.values()]
    results.sort(key=lambda item: (item.display_name.casefold(), item.display_name, item.canonical_key))

    logger.info(f"Aggregated {line_count} ingredient lines into {len(results)} items")
    return results


def aggregate_by_recipe(
    lines: Iterable[IngredientLine | Mapping[str, Any]] | None,
) -> list[tuple[str, list[AggregatedItem]]]:
    """Aggregate each recipe's lines on their own, in first-seen recipe order."""
    if not lines:
        return []

    by_recipe: dict[str, list[IngredientLine]] = {}
    for line in _coerce_lines(lines):
        by_recipe.setdefault(line.recipe_id, []).append(line)

    return [(recipe_id, aggregate_ingredients(recipe_lines)) for recipe_id, recipe_lines in by_recipe.items()]


# =============================================================================
# Line Handling
# =============================================================================


def _coerce_lines(lines: Iterable[IngredientLine | Mapping[str, Any]]) -> Iterable[IngredientLine]:
    for line in lines:
        if isinstance(line, IngredientLine):
            yield line
            continue
        try:
            yield IngredientLine.model_validate(line)
        except ValidationError as e:
            logger.warning(f"Skipping invalid ingredient line {line!r}: {e}")


def _resolve_quantity(line: IngredientLine) -> tuple[float | None, str | None]:
    """Take quantity and unit from the record, parsing the text for gaps."""
    unit = normalize_unit(line.unit) or line.unit
    quantity = line.quantity

    if quantity is None and line.original_text:
        parsed = parse_ingredient_line(line.original_text)
        quantity = parsed.quantity
        if not unit and parsed.unit:
            unit = normalize_unit(parsed.unit) or parsed.unit

    return quantity, unit


# =============================================================================
# Group Processing
# =============================================================================


def _process_group(group: _CanonicalGroup) -> AggregatedItem:
    # Ordered by recipe, then text
    source_lines = [
        SourceLine(
            recipe_id=item.recipe_id,
            original_text=item.original_text,
            parsed={"quantity": item.quantity, "unit": item.unit, "name": group.display_name},
        )
        for item in sorted(group.items, key=lambda item: (item.recipe_id, item.original_text))
    ]

    if group.attributes.get("is_bell_pepper"):
        return _process_bell_pepper_group(group, source_lines)

    total_quantity, unit, can_sum = _sum_quantities(group.items)

    notes = None
    if not can_sum and len(group.items) > 1:
        notes = _mixed_notes(group.items)

    return AggregatedItem(
        display_name=group.display_name,
        canonical_key=group.canonical_key,
        total_quantity=total_quantity,
        unit=unit,
        source_lines=source_lines,
        notes=notes,
    )


def _process_bell_pepper_group(group: _CanonicalGroup, source_lines: list[SourceLine]) -> AggregatedItem:
    """Sum bell peppers across colours and keep a per-colour breakdown."""
    buckets: dict[str, dict[str, Any]] = {}
    total_quantity = 0.0
    has_quantity = False

    for item in group.items:
        color = item.attributes.get("color") or ANY_COLOR
        bucket = buckets.setdefault(color, {"quantity": 0.0, "count": 0, "has_quantity": False})
        bucket["count"] += 1
        if item.quantity is not None:
            bucket["quantity"] += item.quantity
            bucket["has_quantity"] = True
            total_quantity += item.quantity
            has_quantity = True

    components = [
        Component(
            label=color,
            quantity=buckets[color]["quantity"] if buckets[color]["has_quantity"] else buckets[color]["count"],
        )
        for color in COLOR_ORDER
        if color in buckets
    ]

    notes = None
    if len(components) > 1 or (components and components[0].label != ANY_COLOR):
        breakdown = ", ".join(f"{format_number(c.quantity)} {c.label}" for c in components)
        notes = f"Breakdown: {breakdown}"

    return AggregatedItem(
        display_name=group.display_name,
        canonical_key=group.canonical_key,
        total_quantity=total_quantity if has_quantity else None,
        unit=None,
        source_lines=source_lines,
        components=components,
        notes=notes,
    )


def _sum_quantities(items: list[_GroupItem]) -> tuple[float | None, str | None, bool]:
    """Sum quantities in the first item's unit; (None, None, False) if units clash."""
    if not items:
        return None, None, True

    target_unit = items[0].unit
    if not all(are_units_compatible(target_unit, item.unit) for item in items):
        return None, None, False

    total = 0.0
    has_quantity = False
    for item in items:
        if item.quantity is None:
            continue
        if item.unit == target_unit:
            total += item.quantity
        else:
            total += convert_quantity(item.quantity, item.unit, target_unit)
        has_quantity = True

    return (total if has_quantity else None), target_unit, True


def _mixed_notes(items: list[_GroupItem]) -> str:
    """Note for unsummable units, parts ordered by unit then quantity."""
    ordered = sorted(
        items,
        key=lambda item: (
            item.unit or "",
            item.quantity if item.quantity is not None else -1.0,
            item.original_text,
        ),
    )
    parts = []
    for item in ordered:
        if item.quantity is not None and item.unit:
            parts.append(f"{format_number(item.quantity)} {item.unit}")
        elif item.quantity is not None:
            parts.append(format_number(item.quantity))
        else:
            parts.append(item.original_text)
    return f"Mixed: {' + '.join(parts)}"
