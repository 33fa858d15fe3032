"""Split a daily calorie target across meal slots."""

from decimal import Decimal

from nutrimate.domain.profile import MealDistribution
from nutrimate.services.calories import round_half_up

MEAL_WEIGHTS: dict[str, Decimal] = {
    "breakfast": Decimal("0.30"),
    "lunch": Decimal("0.40"),
    "dinner": Decimal("0.30"),
}

MEAL_WEIGHTS_WITH_SNACK: dict[str, Decimal] = {
    "breakfast": Decimal("0.25"),
    "lunch": Decimal("0.35"),
    "dinner": Decimal("0.35"),
    "snack": Decimal("0.05"),
}


def distribute_calories(total: int, include_snack: bool = False) -> MealDistribution:
    """Allot a share of the daily total to each meal slot.

    Each slot is rounded on its own, so the allotments may not add up to the
    total exactly; the difference is exposed as ``MealDistribution.drift``.
    """
    weights = MEAL_WEIGHTS_WITH_SNACK if include_snack else MEAL_WEIGHTS
    slots = {
        slot: round_half_up(Decimal(total) * weight) for slot, weight in weights.items()
    }
    return MealDistribution(total=total, slots=slots)
