"""Subscription and usage-limit domain models."""

from dataclasses import dataclass, field, replace
from enum import StrEnum


class Plan(StrEnum):
    """Subscription plan tiers."""

    FREE = "free"
    PREMIUM = "premium"


class SubscriptionStatus(StrEnum):
    """Billing state of a subscription."""

    ACTIVE = "active"
    CANCELLED = "cancelled"
    PAST_DUE = "past_due"
    TRIALING = "trialing"


@dataclass(frozen=True)
class Subscription:
    """A user's subscription as reported by billing."""

    plan: str = Plan.FREE
    status: str = SubscriptionStatus.ACTIVE

    @property
    def is_premium(self) -> bool:
        """Premium counts only while active or trialing."""
        return self.plan == Plan.PREMIUM and self.status in {
            SubscriptionStatus.ACTIVE,
            SubscriptionStatus.TRIALING,
        }


@dataclass(frozen=True)
class UsageCounter:
    """How much of a metered feature has been used against its cap."""

    used: int = 0
    limit: int = 0

    @property
    def exhausted(self) -> bool:
        return self.used >= self.limit

    def incremented(self) -> "UsageCounter":
        return replace(self, used=self.used + 1)


@dataclass(frozen=True)
class UsageLimits:
    """Usage counters for a user; defaults are the free-tier caps."""

    saved_recipes: UsageCounter = field(default_factory=lambda: UsageCounter(limit=10))
    meal_plans: UsageCounter = field(default_factory=lambda: UsageCounter(limit=1))
    custom_recipes: UsageCounter = field(default_factory=UsageCounter)
    exports: UsageCounter = field(default_factory=UsageCounter)


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of a feature access check."""

    allowed: bool
    reason: str | None = None
    upgrade_required: bool = False
