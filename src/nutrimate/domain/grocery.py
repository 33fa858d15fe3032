"""Domain models for grocery lists."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class MergePolicy(StrEnum):
    """How incoming ingredients merge with matching grocery items."""

    KEEP_EXISTING = "keep_existing"
    SUM_QUANTITIES = "sum_quantities"


@dataclass(frozen=True)
class RecipeIngredient:
    """Ingredient line supplied by a recipe."""

    name: str
    quantity: str | None = None
    unit: str | None = None
    recipe: str | None = None
    id: UUID | None = None
    recipe_id: UUID | None = None


@dataclass(frozen=True)
class Ingredient:
    """Grocery list item with the recipes it came from."""

    id: UUID
    name: str
    quantity: str | None
    unit: str | None
    source_recipes: tuple[str, ...] = ()
    checked: bool = False
    recipe_id: UUID | None = None
    category: str | None = None

    @property
    def key(self) -> str:
        """Case-insensitive identity used for deduplication."""
        return self.name.strip().lower()


@dataclass(frozen=True)
class GroceryList:
    """A user's grocery list with its items, newest first."""

    id: UUID
    user_id: UUID
    name: str
    items: list[Ingredient] = field(default_factory=list)
    updated_at: datetime | None = None
