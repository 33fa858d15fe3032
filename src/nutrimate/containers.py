"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrimate.adapters.supabase_grocery_repository import SupabaseGroceryRepository
from nutrimate.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from nutrimate.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from nutrimate.config import Settings
from nutrimate.services.cache import InMemoryCache
from nutrimate.services.calories import CalorieFormula, get_formula
from nutrimate.services.grocery import GroceryListService
from nutrimate.services.preferences import PreferencesService
from nutrimate.services.recipes import RecipeCatalog


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    default_formula: CalorieFormula
    recipe_catalog: RecipeCatalog
    grocery_service: GroceryListService
    preferences_service: PreferencesService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    formula = get_formula(resolved_settings.default_formula)
    recipe_catalog = RecipeCatalog(
        repository=SupabaseRecipeRepository(supabase_client),
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.recipe_cache_ttl_seconds,
    )
    grocery_service = GroceryListService(
        repository=SupabaseGroceryRepository(supabase_client),
        recipe_catalog=recipe_catalog,
        default_list_name=resolved_settings.grocery_list_name,
    )
    preferences_service = PreferencesService(
        repository=SupabasePreferencesRepository(supabase_client),
        formula=formula,
    )
    return AppContainer(
        settings=resolved_settings,
        default_formula=formula,
        recipe_catalog=recipe_catalog,
        grocery_service=grocery_service,
        preferences_service=preferences_service,
    )
