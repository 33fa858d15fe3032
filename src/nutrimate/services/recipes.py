"""Recipe ingredient lookups."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from nutrimate.domain.grocery import RecipeIngredient
from nutrimate.services.cache import Cache

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes and meal plans."""

    def list_ingredients(self, recipe_ids: list[UUID]) -> list[RecipeIngredient]:
        """Return ingredient lines for the given recipes."""

    def get_recipe_title(self, recipe_id: UUID) -> str | None:
        """Return a recipe title, if the recipe exists."""

    def list_meal_plan_recipe_ids(self, meal_plan_id: UUID) -> list[UUID]:
        """Return the recipe ids scheduled in a meal plan."""


@dataclass
class RecipeCatalog:
    """Recipe-data collaborator with cached ingredient lookups."""

    repository: RecipeRepository
    cache: Cache
    ttl_seconds: int = 600

    def ingredients_for_recipe(self, recipe_id: UUID) -> list[RecipeIngredient]:
        """Return a recipe's ingredients labelled with its title."""
        cache_key = f"recipe:ingredients:{recipe_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        label = self.recipe_label(recipe_id)
        ingredients = [
            replace(ingredient, recipe=label)
            for ingredient in self.repository.list_ingredients([recipe_id])
        ]
        self.cache.set(cache_key, ingredients, ttl_seconds=self.ttl_seconds)
        return ingredients

    def ingredients_for_meal_plan(self, meal_plan_id: UUID) -> list[RecipeIngredient]:
        """Return every ingredient line of the recipes in a meal plan."""
        recipe_ids = self.repository.list_meal_plan_recipe_ids(meal_plan_id)
        if not recipe_ids:
            return []
        unique_ids = list(dict.fromkeys(recipe_ids))
        labels = {recipe_id: self.recipe_label(recipe_id) for recipe_id in unique_ids}
        ingredients = self.repository.list_ingredients(unique_ids)
        _logger.info(
            "Loaded meal plan ingredients: meal_plan_id=%s recipes=%s ingredients=%s",
            meal_plan_id,
            len(unique_ids),
            len(ingredients),
        )
        return [
            replace(
                ingredient,
                recipe=labels.get(ingredient.recipe_id) or ingredient.recipe,
            )
            for ingredient in ingredients
        ]

    def recipe_label(self, recipe_id: UUID) -> str:
        """Return the recipe title, falling back to its id."""
        return self.repository.get_recipe_title(recipe_id) or str(recipe_id)
