"""Feature gating endpoint."""

from dataclasses import replace

from fastapi import APIRouter

from nutrimate.api.models import EntitlementCheckRequest
from nutrimate.domain.entitlements import Subscription, UsageLimits
from nutrimate.services.entitlements import check_access

router = APIRouter(tags=["entitlements"])


@router.post("/entitlements/check")
async def check_entitlement(body: EntitlementCheckRequest) -> dict[str, object]:
    """Check a feature against free-tier caps unless the plan is premium."""
    limits = UsageLimits()
    usage = UsageLimits(
        saved_recipes=replace(limits.saved_recipes, used=body.saved_recipes),
        meal_plans=replace(limits.meal_plans, used=body.meal_plans),
        custom_recipes=replace(limits.custom_recipes, used=body.custom_recipes),
        exports=replace(limits.exports, used=body.exports),
    )
    decision = check_access(
        body.feature, Subscription(plan=body.plan, status=body.status), usage
    )
    return {
        "feature": body.feature,
        "allowed": decision.allowed,
        "reason": decision.reason,
        "upgrade_required": decision.upgrade_required,
    }
