"""Tests for container wiring."""

from nutrimate.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.grocery_service.default_list_name == "My Grocery List"
    assert container.preferences_service.formula is container.default_formula
    assert container.recipe_catalog.ttl_seconds == 600
