"""Calorie, meal split and categorization endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from nutrimate.api.models import CalorieEstimateRequest, MealDistributionRequest
from nutrimate.domain.profile import BiometricProfile
from nutrimate.services.calories import calorie_target, get_formula, to_metric
from nutrimate.services.categories import categorize
from nutrimate.services.meals import distribute_calories

if TYPE_CHECKING:
    from nutrimate.containers import AppContainer

router = APIRouter(tags=["calculator"])


@router.post("/calories/estimate")
async def estimate_calories(
    body: CalorieEstimateRequest, request: Request
) -> dict[str, object]:
    """Estimate daily calories with the requested or default formula."""
    container: AppContainer = request.app.state.container
    if body.formula is None:
        formula = container.default_formula
    else:
        try:
            formula = get_formula(body.formula)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
    weight, height = to_metric(
        body.weight, body.height, body.weight_unit, body.height_unit
    )
    profile = BiometricProfile(
        gender=body.gender,
        age=body.age,
        weight=weight,
        height=height,
        activity_level=body.activity_level,
        goal=body.goal,
    )
    target = calorie_target(profile, formula)
    return {"daily_calories": target.daily_calories, "formula": target.formula}


@router.post("/meals/distribution")
async def meal_distribution(body: MealDistributionRequest) -> dict[str, object]:
    """Split a daily total across meal slots."""
    distribution = distribute_calories(body.total, include_snack=body.include_snack)
    return {
        "total": distribution.total,
        "slots": distribution.slots,
        "drift": distribution.drift,
    }


@router.get("/ingredients/category")
async def ingredient_category(name: str) -> dict[str, str]:
    """Return the grocery category for an ingredient name."""
    return {"name": name, "category": categorize(name)}
