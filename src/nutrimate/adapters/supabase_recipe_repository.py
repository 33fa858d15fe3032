"""Supabase repository for recipes and meal plans."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrimate.domain.grocery import RecipeIngredient
from nutrimate.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Reads recipe ingredients and meal plan contents from Supabase."""

    client: Client

    def list_ingredients(self, recipe_ids: list[UUID]) -> list[RecipeIngredient]:
        """Return ingredient lines for the given recipes."""
        if not recipe_ids:
            return []
        response = (
            self.client.table("recipe_ingredients")
            .select("*")
            .in_("recipe_id", [str(recipe_id) for recipe_id in recipe_ids])
            .execute()
        )
        return [
            RecipeIngredient(
                id=UUID(row["id"]),
                recipe_id=UUID(row["recipe_id"]),
                name=str(row.get("name", "")),
                quantity=row.get("quantity"),
                unit=row.get("unit"),
            )
            for row in response.data or []
        ]

    def get_recipe_title(self, recipe_id: UUID) -> str | None:
        """Return the recipe title, if present."""
        response = (
            self.client.table("recipes")
            .select("title")
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("title")

    def list_meal_plan_recipe_ids(self, meal_plan_id: UUID) -> list[UUID]:
        """Return recipe ids for the meals in a plan."""
        response = (
            self.client.table("meal_plan_meals")
            .select("recipe_id")
            .eq("meal_plan_id", str(meal_plan_id))
            .execute()
        )
        return [
            UUID(row["recipe_id"])
            for row in response.data or []
            if row.get("recipe_id")
        ]
