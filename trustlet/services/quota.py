"""Plan-based review collection quota."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from trustlet.core.errors import StoreError
from trustlet.models.subscription import PLAN_FREE, PLAN_PAID, Subscription

logger = logging.getLogger(__name__)

FREE_PLAN_REVIEW_LIMIT = 5


def plan_of(subscription: Subscription | None) -> str:
    """Owners without a subscription row are on the free plan."""
    if subscription is None or not subscription.plan:
        return PLAN_FREE
    return subscription.plan


def review_limit(subscription: Subscription | None, free_limit: int = FREE_PLAN_REVIEW_LIMIT) -> int | None:
    """Total reviews the plan may collect, or None when unlimited."""
    if plan_of(subscription) == PLAN_PAID:
        return None
    return free_limit


def can_collect(
    subscription: Subscription | None,
    current_total: int,
    free_limit: int = FREE_PLAN_REVIEW_LIMIT,
) -> bool:
    """Whether one more review may be collected on top of current_total."""
    limit = review_limit(subscription, free_limit)
    return limit is None or current_total < limit


def get_subscription(db: Session, user_id: str) -> Subscription | None:
    try:
        return db.execute(
            select(Subscription).where(Subscription.owner_user_id == user_id)
        ).scalar_one_or_none()
    except SQLAlchemyError as exc:
        logger.exception("Subscription fetch failed for user %s", user_id)
        raise StoreError("Failed to fetch subscription") from exc


def default_subscription(user_id: str) -> Subscription:
    """Unsaved free subscription used when the owner has none on record."""
    return Subscription(owner_user_id=user_id, plan=PLAN_FREE, status="active")
