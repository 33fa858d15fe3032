"""Grocery list application service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID, uuid4

from nutrimate.domain.grocery import GroceryList, Ingredient, MergePolicy
from nutrimate.services.aggregation import aggregate
from nutrimate.services.categories import categorize, group_by_category
from nutrimate.services.recipes import RecipeCatalog

EDITABLE_FIELDS = frozenset({"name", "quantity", "unit", "category", "checked"})
REQUIRED_FIELDS = frozenset({"name", "checked"})

_logger = logging.getLogger(__name__)


class NoIngredientsError(LookupError):
    """Raised when a recipe or meal plan has no ingredients to add."""


class GroceryRepository(Protocol):
    """Persistence interface for grocery lists and their items."""

    def get_list(self, user_id: UUID) -> GroceryList | None:
        """Return the user's grocery list without items, if present."""

    def create_list(self, user_id: UUID, name: str) -> GroceryList:
        """Create and return an empty grocery list."""

    def list_items(self, list_id: UUID) -> list[Ingredient]:
        """Return the list's items, newest first."""

    def insert_items(self, list_id: UUID, items: list[Ingredient]) -> list[Ingredient]:
        """Insert items and return the stored rows."""

    def update_item(
        self, item_id: UUID, payload: dict[str, object]
    ) -> Ingredient | None:
        """Update an item and return it, or None if it does not exist."""

    def delete_item(self, item_id: UUID) -> None:
        """Delete an item by id."""

    def delete_checked(self, list_id: UUID) -> int:
        """Delete the list's checked items and return how many were removed."""


@dataclass
class GroceryListService:
    """Keeps a user's grocery list in sync with the recipes they pick."""

    repository: GroceryRepository
    recipe_catalog: RecipeCatalog
    default_list_name: str = "My Grocery List"

    def get_list(self, user_id: UUID) -> GroceryList:
        """Return the user's list, creating it on first use."""
        grocery_list = self.repository.get_list(user_id)
        if grocery_list is None:
            grocery_list = self.repository.create_list(user_id, self.default_list_name)
            _logger.info("Created grocery list: user_id=%s", user_id)
        return replace(grocery_list, items=self.repository.list_items(grocery_list.id))

    def grouped(self, grocery_list: GroceryList) -> dict[str, list[Ingredient]]:
        """Return the list's items grouped by grocery category."""
        return group_by_category(grocery_list.items)

    def add_item(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        quantity: str | None = None,
        unit: str | None = None,
        category: str | None = None,
        recipe_label: str | None = None,
    ) -> Ingredient:
        """Add a single manual item to the top of the list."""
        grocery_list = self.get_list(user_id)
        item = Ingredient(
            id=uuid4(),
            name=name,
            quantity=quantity,
            unit=unit,
            source_recipes=(recipe_label,) if recipe_label else (),
            checked=False,
            category=category or categorize(name),
        )
        stored = self.repository.insert_items(grocery_list.id, [item])
        return stored[0]

    def update_item(
        self, item_id: UUID, changes: dict[str, object]
    ) -> Ingredient | None:
        """Apply editable field changes to an item."""
        payload = {
            key: value
            for key, value in changes.items()
            if key in EDITABLE_FIELDS
            and not (value is None and key in REQUIRED_FIELDS)
        }
        if not payload:
            raise ValueError("No editable fields in update")
        return self.repository.update_item(item_id, payload)

    def delete_item(self, item_id: UUID) -> None:
        """Remove an item from its list."""
        self.repository.delete_item(item_id)

    def clear_checked(self, user_id: UUID) -> GroceryList:
        """Remove every checked item from the user's list."""
        grocery_list = self.get_list(user_id)
        removed = self.repository.delete_checked(grocery_list.id)
        _logger.info(
            "Cleared checked items: list_id=%s removed=%s", grocery_list.id, removed
        )
        return replace(
            grocery_list,
            items=[item for item in grocery_list.items if not item.checked],
        )

    def add_recipe_ingredients(
        self,
        user_id: UUID,
        recipe_id: UUID,
        selected_ids: Iterable[UUID] | None = None,
    ) -> GroceryList:
        """Add a recipe's ingredients, attaching it to items already listed."""
        ingredients = self.recipe_catalog.ingredients_for_recipe(recipe_id)
        if not ingredients:
            raise NoIngredientsError("No ingredients found for this recipe")
        if selected_ids is not None:
            selected = set(selected_ids)
            ingredients = [item for item in ingredients if item.id in selected]

        grocery_list = self.get_list(user_id)
        label = self.recipe_catalog.recipe_label(recipe_id)
        merged = aggregate(
            ingredients, label, grocery_list.items, MergePolicy.KEEP_EXISTING
        )
        return self._persist(grocery_list, merged)

    def add_meal_plan_ingredients(
        self, user_id: UUID, meal_plan_id: UUID
    ) -> GroceryList:
        """Add every ingredient of a meal plan, summing repeated lines."""
        ingredients = self.recipe_catalog.ingredients_for_meal_plan(meal_plan_id)
        if not ingredients:
            raise NoIngredientsError("No ingredients found for this meal plan")

        grocery_list = self.get_list(user_id)
        merged = aggregate(
            ingredients,
            str(meal_plan_id),
            grocery_list.items,
            MergePolicy.SUM_QUANTITIES,
        )
        return self._persist(grocery_list, merged)

    def _persist(
        self, grocery_list: GroceryList, merged: list[Ingredient]
    ) -> GroceryList:
        """Write the difference between the stored and merged items."""
        stored = {item.id: item for item in grocery_list.items}
        created = [item for item in merged if item.id not in stored]
        inserted = (
            self.repository.insert_items(grocery_list.id, created) if created else []
        )

        kept: list[Ingredient] = []
        for item in merged:
            previous = stored.get(item.id)
            if previous is None:
                continue
            if previous.source_recipes != item.source_recipes:
                updated = self.repository.update_item(
                    item.id, {"source_recipes": list(item.source_recipes)}
                )
                kept.append(updated or item)
            else:
                kept.append(previous)

        _logger.info(
            "Grocery list updated: list_id=%s inserted=%s updated=%s",
            grocery_list.id,
            len(inserted),
            sum(1 for item in kept if stored[item.id] is not item),
        )
        return replace(grocery_list, items=inserted + kept)
