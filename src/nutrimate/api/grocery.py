"""Grocery list endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, Response, status

from nutrimate.api.models import (
    GroceryItemCreate,
    GroceryItemUpdate,
    RecipeIngredientsRequest,
)
from nutrimate.services.grocery import NoIngredientsError

if TYPE_CHECKING:
    from nutrimate.containers import AppContainer
    from nutrimate.domain.grocery import GroceryList

router = APIRouter(tags=["grocery"])


@router.get("/users/{user_id}/grocery-list")
async def get_grocery_list(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's grocery list grouped by category."""
    container: AppContainer = request.app.state.container
    grocery_list = container.grocery_service.get_list(user_id)
    return _list_payload(container, grocery_list)


@router.post("/users/{user_id}/grocery-list/items", status_code=status.HTTP_201_CREATED)
async def add_grocery_item(
    user_id: UUID, body: GroceryItemCreate, request: Request
) -> dict[str, object]:
    """Add a manual item to the user's grocery list."""
    container: AppContainer = request.app.state.container
    item = container.grocery_service.add_item(
        user_id,
        name=body.name,
        quantity=body.quantity,
        unit=body.unit,
        category=body.category,
        recipe_label=body.recipe_label,
    )
    return {"item": item}


@router.patch("/grocery-list/items/{item_id}")
async def update_grocery_item(
    item_id: UUID, body: GroceryItemUpdate, request: Request
) -> dict[str, object]:
    """Update an item, e.g. to check it off."""
    container: AppContainer = request.app.state.container
    try:
        item = container.grocery_service.update_item(
            item_id, body.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"item": item}


@router.delete(
    "/grocery-list/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_grocery_item(item_id: UUID, request: Request) -> Response:
    """Delete an item from its list."""
    container: AppContainer = request.app.state.container
    container.grocery_service.delete_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/users/{user_id}/grocery-list/checked")
async def clear_checked_items(user_id: UUID, request: Request) -> dict[str, object]:
    """Remove checked-off items from the user's grocery list."""
    container: AppContainer = request.app.state.container
    grocery_list = container.grocery_service.clear_checked(user_id)
    return _list_payload(container, grocery_list)


@router.post("/users/{user_id}/grocery-list/recipes/{recipe_id}")
async def add_recipe_ingredients(
    user_id: UUID,
    recipe_id: UUID,
    request: Request,
    body: RecipeIngredientsRequest | None = None,
) -> dict[str, object]:
    """Add a recipe's ingredients to the user's grocery list."""
    container: AppContainer = request.app.state.container
    selected = body.ingredient_ids if body else None
    try:
        grocery_list = container.grocery_service.add_recipe_ingredients(
            user_id, recipe_id, selected_ids=selected
        )
    except NoIngredientsError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return _list_payload(container, grocery_list)


@router.post("/users/{user_id}/grocery-list/meal-plans/{meal_plan_id}")
async def add_meal_plan_ingredients(
    user_id: UUID, meal_plan_id: UUID, request: Request
) -> dict[str, object]:
    """Add every ingredient of a meal plan to the user's grocery list."""
    container: AppContainer = request.app.state.container
    try:
        grocery_list = container.grocery_service.add_meal_plan_ingredients(
            user_id, meal_plan_id
        )
    except NoIngredientsError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return _list_payload(container, grocery_list)


def _list_payload(
    container: AppContainer, grocery_list: GroceryList
) -> dict[str, object]:
    return {
        "id": grocery_list.id,
        "name": grocery_list.name,
        "items": grocery_list.items,
        "categories": container.grocery_service.grouped(grocery_list),
    }
