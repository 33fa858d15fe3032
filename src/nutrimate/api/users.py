"""User preference and meal target endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from nutrimate.api.models import PreferencesUpdate
from nutrimate.services.calories import to_metric

if TYPE_CHECKING:
    from nutrimate.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/preferences")
async def get_preferences(user_id: UUID, request: Request) -> dict[str, object]:
    """Return stored preferences, null when the user has none."""
    container: AppContainer = request.app.state.container
    preferences = container.preferences_service.get(user_id)
    return {"preferences": preferences}


@router.put("/{user_id}/preferences")
async def save_preferences(
    user_id: UUID, body: PreferencesUpdate, request: Request
) -> dict[str, object]:
    """Save onboarding answers and return the stored preferences."""
    container: AppContainer = request.app.state.container
    payload = body.model_dump(
        exclude_unset=True, exclude={"weight_unit", "height_unit"}
    )
    if body.weight is not None:
        payload["weight"], _ = to_metric(body.weight, 0, weight_unit=body.weight_unit)
    if body.height is not None:
        _, payload["height"] = to_metric(0, body.height, height_unit=body.height_unit)
    preferences = container.preferences_service.save(user_id, payload)
    return {"preferences": preferences}


@router.get("/{user_id}/meal-targets")
async def meal_targets(user_id: UUID, request: Request) -> dict[str, object]:
    """Split the stored calorie target across meal slots."""
    container: AppContainer = request.app.state.container
    distribution = container.preferences_service.meal_targets(user_id)
    if distribution is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No calorie target stored for this user",
        )
    return {
        "total": distribution.total,
        "slots": distribution.slots,
        "drift": distribution.drift,
    }
