"""Daily calorie estimation formulas."""

import logging
from dataclasses import dataclass, field
from decimal import ROUND_FLOOR, Decimal
from typing import Protocol

from nutrimate.domain.profile import BiometricProfile, CalorieTarget

DEFAULT_ACTIVITY_FACTOR = 1.2
POUNDS_TO_KG = 0.453592
FEET_TO_CM = 30.48

_logger = logging.getLogger(__name__)


class CalorieFormula(Protocol):
    """Strategy that turns a biometric profile into a daily calorie target."""

    name: str

    def bmr(self, profile: BiometricProfile) -> float:
        """Return the basal metabolic rate for the profile."""

    def estimate(self, profile: BiometricProfile) -> int:
        """Return the goal-adjusted daily calories for the profile."""


@dataclass(frozen=True)
class MifflinStJeor:
    """Mifflin-St Jeor BMR with a multiplicative goal adjustment.

    TDEE is rounded before the goal multiplier is applied and the adjusted
    value is rounded again, as the onboarding flow does.
    """

    name: str = "mifflin_st_jeor"
    activity_factors: dict[str, float] = field(
        default_factory=lambda: {
            "sedentary": 1.2,
            "light": 1.375,
            "moderate": 1.55,
            "active": 1.725,
            "very_active": 1.9,
        }
    )
    goal_multipliers: dict[str, float] = field(
        default_factory=lambda: {
            "weight_loss": 0.8,
            "muscle_gain": 1.1,
        }
    )

    def bmr(self, profile: BiometricProfile) -> float:
        """Return BMR in kcal/day."""
        base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
        if profile.gender == "male":
            return base + 5
        return base - 161

    def tdee(self, profile: BiometricProfile) -> int:
        """Return BMR scaled by activity, rounded."""
        factor = activity_factor(self.activity_factors, profile.activity_level)
        return round_half_up(self.bmr(profile) * factor)

    def estimate(self, profile: BiometricProfile) -> int:
        """Return TDEE adjusted for the profile goal."""
        tdee = self.tdee(profile)
        multiplier = self.goal_multipliers.get(profile.goal)
        if multiplier is None:
            return tdee
        return round_half_up(tdee * multiplier)


@dataclass(frozen=True)
class HarrisBenedict:
    """Harris-Benedict BMR with a flat calorie offset for the goal."""

    name: str = "harris_benedict"
    activity_factors: dict[str, float] = field(
        default_factory=lambda: {
            "sedentary": 1.2,
            "light": 1.375,
            "ligero": 1.375,
            "moderate": 1.55,
            "moderado": 1.55,
            "intense": 1.725,
            "intenso": 1.725,
            "very_intense": 1.9,
            "muy_intenso": 1.9,
        }
    )
    goal_offsets: dict[str, int] = field(
        default_factory=lambda: {
            "lose": -400,
            "bajar": -400,
            "gain": 400,
            "subir": 400,
        }
    )

    def bmr(self, profile: BiometricProfile) -> float:
        """Return BMR in kcal/day."""
        if profile.gender == "male":
            return (
                88.36
                + 13.4 * profile.weight
                + 4.8 * profile.height
                - 5.7 * profile.age
            )
        return 447.6 + 9.2 * profile.weight + 3.1 * profile.height - 4.3 * profile.age

    def estimate(self, profile: BiometricProfile) -> int:
        """Return activity-scaled BMR plus the goal offset, rounded once."""
        factor = activity_factor(self.activity_factors, profile.activity_level)
        calories = self.bmr(profile) * factor
        calories += self.goal_offsets.get(profile.goal, 0)
        return round_half_up(calories)


MIFFLIN_ST_JEOR = MifflinStJeor()
HARRIS_BENEDICT = HarrisBenedict()

FORMULAS: dict[str, CalorieFormula] = {
    MIFFLIN_ST_JEOR.name: MIFFLIN_ST_JEOR,
    HARRIS_BENEDICT.name: HARRIS_BENEDICT,
}


def get_formula(name: str) -> CalorieFormula:
    """Resolve a formula by name."""
    try:
        return FORMULAS[name]
    except KeyError:
        raise ValueError(f"Unknown calorie formula: {name}") from None


def estimate_daily_calories(
    profile: BiometricProfile, formula: CalorieFormula = MIFFLIN_ST_JEOR
) -> int:
    """Estimate daily calories for a profile with the given formula."""
    return formula.estimate(profile)


def calorie_target(
    profile: BiometricProfile, formula: CalorieFormula = MIFFLIN_ST_JEOR
) -> CalorieTarget:
    """Return the daily target tagged with the formula that produced it."""
    return CalorieTarget(
        daily_calories=formula.estimate(profile), formula=formula.name
    )


def activity_factor(factors: dict[str, float], activity_level: str) -> float:
    """Look up an activity multiplier, falling back to sedentary."""
    factor = factors.get(activity_level)
    if factor is None:
        _logger.debug(
            "Unknown activity level %r, using %s",
            activity_level,
            DEFAULT_ACTIVITY_FACTOR,
        )
        return DEFAULT_ACTIVITY_FACTOR
    return factor


def to_metric(
    weight: float, height: float, weight_unit: str = "kg", height_unit: str = "cm"
) -> tuple[float, float]:
    """Convert weight to kilograms and height to centimeters."""
    weight_kg = weight if weight_unit == "kg" else weight * POUNDS_TO_KG
    height_cm = height if height_unit == "cm" else height * FEET_TO_CM
    return weight_kg, height_cm


def round_half_up(value: float | Decimal) -> int:
    """Round to the nearest integer with halves going up, like Math.round."""
    decimal_value = value if isinstance(value, Decimal) else Decimal(str(value))
    return int((decimal_value + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))
