"""Domain models for stored nutrition preferences."""

from dataclasses import dataclass, field
from uuid import UUID

from nutrimate.domain.profile import BiometricProfile


@dataclass(frozen=True)
class UserPreferences:
    """Onboarding answers and the resulting calorie target."""

    user_id: UUID
    age: int | None = None
    gender: str | None = None
    height: float | None = None
    weight: float | None = None
    activity_level: str | None = None
    health_goal: str | None = None
    calorie_target: int | None = None
    include_snacks: bool = False
    dietary_preferences: list[str] = field(default_factory=list)
    excluded_ingredients: list[str] = field(default_factory=list)
    allergies: list[str] = field(default_factory=list)

    def biometric_profile(self) -> BiometricProfile | None:
        """Return a profile when every biometric field is present."""
        if (
            self.age is None
            or self.gender is None
            or self.height is None
            or self.weight is None
        ):
            return None
        return BiometricProfile(
            gender=self.gender,
            age=self.age,
            weight=self.weight,
            height=self.height,
            activity_level=self.activity_level or "sedentary",
            goal=self.health_goal or "maintain",
        )
