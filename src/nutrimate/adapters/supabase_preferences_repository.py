"""Supabase repository for user preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrimate.domain.preferences import UserPreferences
from nutrimate.services.preferences import PreferencesRepository


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Supabase implementation for user preferences."""

    client: Client

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        """Return stored preferences for a user."""
        response = (
            self.client.table("user_preferences")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_preferences(response.data[0])

    def upsert_preferences(self, preferences: UserPreferences) -> UserPreferences:
        """Insert or replace the user's preferences row."""
        response = (
            self.client.table("user_preferences")
            .upsert(
                {
                    "user_id": str(preferences.user_id),
                    "age": preferences.age,
                    "gender": preferences.gender,
                    "height": preferences.height,
                    "weight": preferences.weight,
                    "activity_level": preferences.activity_level,
                    "health_goal": preferences.health_goal,
                    "calorie_target": preferences.calorie_target,
                    "include_snacks": preferences.include_snacks,
                    "dietary_preferences": preferences.dietary_preferences,
                    "excluded_ingredients": preferences.excluded_ingredients,
                    "allergies": preferences.allergies,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save user preferences")
        return _parse_preferences(response.data[0])


def _parse_preferences(row: dict[str, object]) -> UserPreferences:
    """Parse a preferences row into a domain model."""
    return UserPreferences(
        user_id=UUID(row["user_id"]),
        age=row.get("age"),
        gender=row.get("gender"),
        height=row.get("height"),
        weight=row.get("weight"),
        activity_level=row.get("activity_level"),
        health_goal=row.get("health_goal"),
        calorie_target=row.get("calorie_target"),
        include_snacks=bool(row.get("include_snacks") or False),
        dietary_preferences=list(row.get("dietary_preferences") or []),
        excluded_ingredients=list(row.get("excluded_ingredients") or []),
        allergies=list(row.get("allergies") or []),
    )
