"""Free and premium feature gating over usage counters."""

import logging
from dataclasses import replace

from nutrimate.domain.entitlements import AccessDecision, Subscription, UsageLimits

PREMIUM_ONLY_FEATURES = frozenset(
    {
        "export_meal_plans",
        "priority_support",
        "advanced_nutrition_analysis",
        "unlimited_meal_plans",
        "unlimited_custom_recipes",
        "unlimited_saved_recipes",
        "advanced_meal_planning",
        "smart_grocery_lists",
    }
)

FREE_FEATURES = frozenset(
    {
        "browse_recipes",
        "basic_search",
        "view_nutrition_info",
        "basic_meal_planning",
        "basic_grocery_lists",
    }
)

# feature -> (UsageLimits field, noun for messages, upgrade pitch)
METERED_FEATURES: dict[str, tuple[str, str, str]] = {
    "save_recipes": ("saved_recipes", "saved recipes", "unlimited saves"),
    "create_meal_plans": ("meal_plans", "meal plans", "unlimited meal plans"),
    "create_custom_recipes": (
        "custom_recipes",
        "custom recipes",
        "unlimited custom recipes",
    ),
}

_PREMIUM_ONLY_REASONS = {
    "export_meal_plans": "Export functionality is available for Premium users only",
    "priority_support": "Priority support is available for Premium users only",
}

_USAGE_FIELDS = {
    **{feature: entry[0] for feature, entry in METERED_FEATURES.items()},
    "export_meal_plans": "exports",
}

_logger = logging.getLogger(__name__)


def check_access(
    feature: str,
    subscription: Subscription | None = None,
    usage: UsageLimits | None = None,
) -> AccessDecision:
    """Decide whether a user may use a feature, with a reason when not.

    Active or trialing premium subscriptions unlock everything. Free users
    get the basic features, metered features until their counter reaches its
    cap, and nothing else. Missing usage means the free-tier caps with zero
    usage.
    """
    if subscription is not None and subscription.is_premium:
        return AccessDecision(allowed=True)

    if feature in FREE_FEATURES:
        return AccessDecision(allowed=True)

    if feature in PREMIUM_ONLY_FEATURES:
        reason = _PREMIUM_ONLY_REASONS.get(
            feature,
            f"{feature.replace('_', ' ').capitalize()} is available for Premium "
            "users only",
        )
        return _deny(feature, reason, upgrade_required=True)

    metered = METERED_FEATURES.get(feature)
    if metered is None:
        return _deny(feature, f"Unknown feature: {feature}", upgrade_required=False)

    field_name, noun, pitch = metered
    counter = getattr(usage or UsageLimits(), field_name)
    if counter.exhausted:
        return _deny(
            feature,
            f"You've reached the limit of {counter.limit} {noun}. "
            f"Upgrade to Premium for {pitch}.",
            upgrade_required=True,
        )
    return AccessDecision(allowed=True)


def can_access(
    feature: str,
    subscription: Subscription | None = None,
    usage: UsageLimits | None = None,
) -> bool:
    """Return only the yes/no part of ``check_access``."""
    return check_access(feature, subscription, usage).allowed


def record_usage(usage: UsageLimits, feature: str) -> UsageLimits:
    """Return counters with one more use of a metered feature."""
    field_name = _USAGE_FIELDS.get(feature)
    if field_name is None:
        return usage
    counter = getattr(usage, field_name)
    return replace(usage, **{field_name: counter.incremented()})


def _deny(feature: str, reason: str, *, upgrade_required: bool) -> AccessDecision:
    _logger.debug("Feature access denied: feature=%s reason=%s", feature, reason)
    return AccessDecision(
        allowed=False, reason=reason, upgrade_required=upgrade_required
    )
