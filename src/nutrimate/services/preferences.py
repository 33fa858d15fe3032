"""User nutrition preferences."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from nutrimate.domain.preferences import UserPreferences
from nutrimate.domain.profile import MealDistribution
from nutrimate.services.calories import MIFFLIN_ST_JEOR, CalorieFormula
from nutrimate.services.meals import distribute_calories

BIOMETRIC_FIELDS = frozenset(
    {"age", "gender", "height", "weight", "activity_level", "health_goal"}
)

_logger = logging.getLogger(__name__)


class PreferencesRepository(Protocol):
    """Persistence interface for user preferences."""

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        """Return stored preferences for a user, if any."""

    def upsert_preferences(self, preferences: UserPreferences) -> UserPreferences:
        """Insert or replace preferences and return the stored row."""


@dataclass
class PreferencesService:
    """Stores onboarding answers and derives calorie targets from them."""

    repository: PreferencesRepository
    formula: CalorieFormula = MIFFLIN_ST_JEOR

    def get(self, user_id: UUID) -> UserPreferences | None:
        """Return the user's preferences."""
        return self.repository.get_preferences(user_id)

    def save(self, user_id: UUID, payload: dict[str, object]) -> UserPreferences:
        """Merge a payload into stored preferences and persist them.

        Without an explicit calorie target, a complete biometric profile
        recomputes the target whenever biometrics change or none is stored.
        """
        current = self.repository.get_preferences(user_id) or UserPreferences(
            user_id=user_id
        )
        fields = {
            key: value
            for key, value in payload.items()
            if key in UserPreferences.__dataclass_fields__ and key != "user_id"
        }
        updated = replace(current, **fields)
        biometrics_changed = not BIOMETRIC_FIELDS.isdisjoint(fields)
        if payload.get("calorie_target") is None and (
            biometrics_changed or updated.calorie_target is None
        ):
            profile = updated.biometric_profile()
            if profile is not None:
                updated = replace(
                    updated, calorie_target=self.formula.estimate(profile)
                )
                _logger.info(
                    "Computed calorie target: user_id=%s target=%s",
                    user_id,
                    updated.calorie_target,
                )
        return self.repository.upsert_preferences(updated)

    def meal_targets(self, user_id: UUID) -> MealDistribution | None:
        """Split the stored calorie target across meal slots."""
        preferences = self.repository.get_preferences(user_id)
        if preferences is None or preferences.calorie_target is None:
            return None
        return distribute_calories(
            preferences.calorie_target, include_snack=preferences.include_snacks
        )
