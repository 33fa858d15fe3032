"""Tests for the grocery list service."""

from uuid import uuid4

import pytest

from nutrimate.services.grocery import GroceryListService, NoIngredientsError
from tests.conftest import InMemoryGroceryRepository, InMemoryRecipeRepository


def test_get_list_creates_default_list_once(
    grocery_service: GroceryListService,
    grocery_repository: InMemoryGroceryRepository,
) -> None:
    user_id = uuid4()

    first = grocery_service.get_list(user_id)
    second = grocery_service.get_list(user_id)

    assert first.id == second.id
    assert first.name == "My Grocery List"
    assert len(grocery_repository.lists) == 1


def test_add_item_prepends_and_categorizes(
    grocery_service: GroceryListService,
) -> None:
    user_id = uuid4()
    grocery_service.add_item(user_id, "Bread", quantity="1", unit="loaf")
    item = grocery_service.add_item(user_id, "Greek yogurt", quantity="500", unit="g")

    grocery_list = grocery_service.get_list(user_id)

    assert item.category == "dairy"
    assert [entry.name for entry in grocery_list.items] == ["Greek yogurt", "Bread"]


def test_update_item_checks_off(grocery_service: GroceryListService) -> None:
    user_id = uuid4()
    item = grocery_service.add_item(user_id, "Apples")

    updated = grocery_service.update_item(item.id, {"checked": True, "id": "ignored"})

    assert updated is not None
    assert updated.checked is True
    assert updated.id == item.id


def test_update_item_rejects_empty_changes(grocery_service: GroceryListService) -> None:
    with pytest.raises(ValueError, match="No editable fields"):
        grocery_service.update_item(uuid4(), {"source_recipes": ["x"]})


def test_update_missing_item_returns_none(grocery_service: GroceryListService) -> None:
    assert grocery_service.update_item(uuid4(), {"checked": True}) is None


def test_delete_item(grocery_service: GroceryListService) -> None:
    user_id = uuid4()
    item = grocery_service.add_item(user_id, "Apples")

    grocery_service.delete_item(item.id)

    assert grocery_service.get_list(user_id).items == []


def test_add_recipe_ingredients_merges_by_name(
    grocery_service: GroceryListService,
    grocery_repository: InMemoryGroceryRepository,
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    user_id = uuid4()
    soup = recipe_repository.add_recipe(
        "Tomato soup", [("Tomato", "4", "pcs"), ("Onion", "1", "pcs")]
    )
    salad = recipe_repository.add_recipe(
        "Salad", [("tomato", "2", "pcs"), ("Lettuce", "1", "head")]
    )

    grocery_service.add_recipe_ingredients(user_id, soup)
    grocery_list = grocery_service.add_recipe_ingredients(user_id, salad)

    by_name = {item.name.lower(): item for item in grocery_list.items}
    assert set(by_name) == {"tomato", "onion", "lettuce"}
    assert by_name["tomato"].quantity == "4"
    assert by_name["tomato"].source_recipes == ("Tomato soup", "Salad")
    assert grocery_list.items[0].name == "Lettuce"
    assert len(grocery_repository.updates) == 1

    stored = grocery_service.get_list(user_id)
    stored_tomato = next(item for item in stored.items if item.name == "Tomato")
    assert stored_tomato.source_recipes == ("Tomato soup", "Salad")


def test_add_recipe_ingredients_with_selection(
    grocery_service: GroceryListService,
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    user_id = uuid4()
    recipe_id = recipe_repository.add_recipe(
        "Pancakes", [("Flour", "200", "g"), ("Milk", "300", "ml"), ("Egg", "2", None)]
    )
    milk = recipe_repository.ingredients[recipe_id][1]

    grocery_list = grocery_service.add_recipe_ingredients(
        user_id, recipe_id, selected_ids=[milk.id]
    )

    assert [item.name for item in grocery_list.items] == ["Milk"]
    assert grocery_list.items[0].recipe_id == recipe_id


def test_add_recipe_without_ingredients_raises(
    grocery_service: GroceryListService,
) -> None:
    with pytest.raises(NoIngredientsError, match="this recipe"):
        grocery_service.add_recipe_ingredients(uuid4(), uuid4())


def test_add_meal_plan_ingredients_sums_quantities(
    grocery_service: GroceryListService,
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    user_id = uuid4()
    breakfast = recipe_repository.add_recipe(
        "Scrambled eggs", [("egg", "2", "pcs"), ("Butter", "10", "g")]
    )
    dinner = recipe_repository.add_recipe(
        "Fried rice", [("Egg", "3", "pcs"), ("Rice", "1", "cup")]
    )
    meal_plan_id = uuid4()
    recipe_repository.meal_plans[meal_plan_id] = [breakfast, dinner]

    grocery_list = grocery_service.add_meal_plan_ingredients(user_id, meal_plan_id)

    eggs = [item for item in grocery_list.items if item.name.lower() == "egg"]
    assert len(eggs) == 1
    assert eggs[0].quantity == "5"
    assert eggs[0].source_recipes == ("Scrambled eggs", "Fried rice")
    assert len(grocery_list.items) == 3


def test_add_empty_meal_plan_raises(grocery_service: GroceryListService) -> None:
    with pytest.raises(NoIngredientsError, match="meal plan"):
        grocery_service.add_meal_plan_ingredients(uuid4(), uuid4())


def test_grouped_returns_categories(
    grocery_service: GroceryListService,
) -> None:
    user_id = uuid4()
    grocery_service.add_item(user_id, "Carrots")
    grocery_service.add_item(user_id, "Honey")
    grocery_service.add_item(user_id, "Batteries")

    grouped = grocery_service.grouped(grocery_service.get_list(user_id))

    assert list(grouped) == ["produce", "pantry", "other"]


def test_clear_checked_keeps_unchecked_items(
    grocery_service: GroceryListService,
    grocery_repository: InMemoryGroceryRepository,
) -> None:
    user_id = uuid4()
    milk = grocery_service.add_item(user_id, "Milk")
    grocery_service.add_item(user_id, "Bread")
    grocery_service.update_item(milk.id, {"checked": True})

    grocery_list = grocery_service.clear_checked(user_id)

    assert [item.name for item in grocery_list.items] == ["Bread"]
    assert [item.name for item in grocery_repository.items[grocery_list.id]] == [
        "Bread"
    ]


def test_update_item_ignores_null_for_required_fields(
    grocery_service: GroceryListService,
    grocery_repository: InMemoryGroceryRepository,
) -> None:
    item = grocery_service.add_item(uuid4(), "Apples", quantity="3")

    updated = grocery_service.update_item(
        item.id, {"checked": None, "name": None, "quantity": None}
    )

    assert updated is not None
    assert updated.checked is False
    assert updated.name == "Apples"
    assert updated.quantity is None
    assert grocery_repository.updates[-1] == (item.id, {"quantity": None})


def test_update_item_with_only_null_checked_is_rejected(
    grocery_service: GroceryListService,
) -> None:
    item = grocery_service.add_item(uuid4(), "Apples")

    with pytest.raises(ValueError, match="No editable fields"):
        grocery_service.update_item(item.id, {"checked": None})
