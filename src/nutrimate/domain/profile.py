"""Domain models for calorie estimation and meal targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BiometricProfile:
    """Biometric inputs for a calorie estimate.

    Weight is in kilograms and height in centimeters. Activity level and goal
    are kept as free text so that unknown values fall back instead of failing.
    """

    gender: str
    age: int
    weight: float
    height: float
    activity_level: str = "sedentary"
    goal: str = "maintain"


@dataclass(frozen=True)
class CalorieTarget:
    """Daily calorie target produced by a formula."""

    daily_calories: int
    formula: str


@dataclass(frozen=True)
class MealDistribution:
    """Calorie allotments per meal slot."""

    total: int
    slots: dict[str, int]

    @property
    def allotted(self) -> int:
        """Sum of all slot allotments."""
        return sum(self.slots.values())

    @property
    def drift(self) -> int:
        """Difference between the allotted sum and the requested total."""
        return self.allotted - self.total
