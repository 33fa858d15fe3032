"""Pydantic request models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field


class CalorieEstimateRequest(BaseModel):
    """Biometric inputs for a calorie estimate."""

    gender: str
    age: int
    weight: float
    height: float
    activity_level: str = "sedentary"
    goal: str = "maintain"
    weight_unit: str = "kg"
    height_unit: str = "cm"
    formula: str | None = None


class MealDistributionRequest(BaseModel):
    """Daily total to split across meals."""

    total: int
    include_snack: bool = False


class GroceryItemCreate(BaseModel):
    """Manual grocery list item."""

    name: str = Field(min_length=1)
    quantity: str | None = None
    unit: str | None = None
    category: str | None = None
    recipe_label: str | None = None


class GroceryItemUpdate(BaseModel):
    """Editable fields of a grocery list item."""

    name: str | None = None
    quantity: str | None = None
    unit: str | None = None
    category: str | None = None
    checked: bool | None = None


class RecipeIngredientsRequest(BaseModel):
    """Optional subset of a recipe's ingredient ids to add."""

    ingredient_ids: list[UUID] | None = None


class PreferencesUpdate(BaseModel):
    """Onboarding answers; unset fields keep their stored value."""

    age: int | None = None
    gender: str | None = None
    height: float | None = None
    weight: float | None = None
    weight_unit: str = "kg"
    height_unit: str = "cm"
    activity_level: str | None = None
    health_goal: str | None = None
    calorie_target: int | None = None
    include_snacks: bool | None = None
    dietary_preferences: list[str] | None = None
    excluded_ingredients: list[str] | None = None
    allergies: list[str] | None = None


class EntitlementCheckRequest(BaseModel):
    """Feature to check against a subscription and usage counts."""

    feature: str
    plan: str = "free"
    status: str = "active"
    saved_recipes: int = 0
    meal_plans: int = 0
    custom_recipes: int = 0
    exports: int = 0
