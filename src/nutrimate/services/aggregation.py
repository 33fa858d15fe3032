"""Merge recipe ingredients into grocery list items."""

import logging
import re
from collections.abc import Sequence
from dataclasses import replace
from uuid import uuid4

from nutrimate.domain.grocery import Ingredient, MergePolicy, RecipeIngredient
from nutrimate.services.categories import categorize

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_DEFAULT_UNIT = "item"

_logger = logging.getLogger(__name__)


def aggregate(
    new_ingredients: Sequence[RecipeIngredient],
    recipe_label: str,
    existing: Sequence[Ingredient],
    policy: MergePolicy = MergePolicy.KEEP_EXISTING,
) -> list[Ingredient]:
    """Merge incoming recipe ingredients with the existing grocery items.

    New items come first, in input order, followed by the existing items.
    ``KEEP_EXISTING`` folds duplicates into the matching item by name and only
    records the recipe label; the first quantity wins. ``SUM_QUANTITIES``
    groups the incoming batch by name and unit and adds up the quantities.
    """
    if not new_ingredients:
        return list(existing)
    if policy == MergePolicy.SUM_QUANTITIES:
        merged = sum_quantities(new_ingredients, recipe_label)
        return merged + list(existing)
    return keep_existing(new_ingredients, recipe_label, existing)


def keep_existing(
    new_ingredients: Sequence[RecipeIngredient],
    recipe_label: str,
    existing: Sequence[Ingredient],
) -> list[Ingredient]:
    """Add ingredients, attaching the recipe to items that already exist."""
    current = list(existing)
    created: list[Ingredient] = []
    index: dict[str, tuple[list[Ingredient], int]] = {}
    for position, item in enumerate(current):
        index.setdefault(item.key, (current, position))

    for ingredient in new_ingredients:
        key = dedup_key(ingredient.name)
        label = ingredient.recipe or recipe_label
        match = index.get(key)
        if match is None:
            created.append(_new_item(ingredient, (label,)))
            index[key] = (created, len(created) - 1)
            continue
        bucket, position = match
        item = bucket[position]
        if label not in item.source_recipes:
            bucket[position] = replace(
                item, source_recipes=(*item.source_recipes, label)
            )
    return created + current


def sum_quantities(
    new_ingredients: Sequence[RecipeIngredient], recipe_label: str
) -> list[Ingredient]:
    """Group a batch by name and unit, adding up numeric quantities."""
    grouped: dict[tuple[str, str], Ingredient] = {}
    for ingredient in new_ingredients:
        key = (dedup_key(ingredient.name), ingredient.unit or _DEFAULT_UNIT)
        label = ingredient.recipe or recipe_label
        current = grouped.get(key)
        if current is None:
            grouped[key] = _new_item(ingredient, (label,))
            continue
        total = parse_quantity(current.quantity) + parse_quantity(ingredient.quantity)
        sources = current.source_recipes
        if label not in sources:
            sources = (*sources, label)
        grouped[key] = replace(
            current, quantity=format_quantity(total), source_recipes=sources
        )
    _logger.debug(
        "Grouped %s ingredients into %s items", len(new_ingredients), len(grouped)
    )
    return list(grouped.values())


def dedup_key(name: str) -> str:
    """Return the case-insensitive identity of an ingredient name."""
    return name.strip().lower()


def parse_quantity(raw: str | None) -> float:
    """Parse the leading number of a quantity, defaulting to 1."""
    if raw is None:
        return 1.0
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return 1.0
    value = float(match.group(1))
    return value or 1.0


def format_quantity(value: float) -> str:
    """Render a summed quantity without a trailing ``.0``."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _new_item(ingredient: RecipeIngredient, sources: tuple[str, ...]) -> Ingredient:
    return Ingredient(
        id=uuid4(),
        name=ingredient.name,
        quantity=ingredient.quantity,
        unit=ingredient.unit,
        source_recipes=sources,
        checked=False,
        recipe_id=ingredient.recipe_id,
        category=categorize(ingredient.name),
    )
