"""Review listing for owners and the public review submission path."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from trustlet.core.errors import BusinessNotFound, QuotaExceeded, StoreError, ValidationError
from trustlet.models.business import Business
from trustlet.models.review import Review
from trustlet.services.quota import FREE_PLAN_REVIEW_LIMIT, can_collect, get_subscription

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
# Largest offset a 32-bit signed integer column can take.
MAX_OFFSET = 2**31 - 1
MIN_RATING = 1
MAX_RATING = 5


def parse_page_param(value: Any, default: int, maximum: int | None = None) -> int:
    """Coerce a limit/offset query value to a non-negative int.

    Missing or non-numeric values fall back to default; negatives clamp to 0.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    number = max(number, 0)
    if maximum is not None:
        number = min(number, maximum)
    return number


def count_reviews(db: Session, business_id: int) -> int:
    try:
        return db.execute(
            select(func.count(Review.id)).where(Review.business_id == business_id)
        ).scalar_one()
    except SQLAlchemyError as exc:
        logger.exception("Review count failed for business %s", business_id)
        raise StoreError("Failed to fetch reviews") from exc


def list_reviews(
    db: Session,
    business_id: int | None,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
) -> tuple[list[Review], int]:
    """Return one page of a business's reviews, newest first, and the total.

    Reviews created at the same instant keep their insertion order.
    """
    if business_id is None:
        return [], 0
    total = count_reviews(db, business_id)
    if total == 0 or limit == 0 or offset >= total:
        return [], total
    stmt = (
        select(Review)
        .where(Review.business_id == business_id)
        .order_by(Review.created_at.desc(), Review.id.asc())
        .offset(offset)
        .limit(limit)
    )
    try:
        items = list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as exc:
        logger.exception("Review list failed for business %s", business_id)
        raise StoreError("Failed to fetch reviews") from exc
    return items, total


def submit_review(
    db: Session,
    business_id: int,
    customer_name: str | None,
    rating: Any,
    comment: str | None = "",
    free_limit: int = FREE_PLAN_REVIEW_LIMIT,
) -> Review:
    """Store a customer review if the owner's plan still allows collecting one."""
    customer_name = (customer_name or "").strip()
    if not customer_name:
        raise ValidationError("Customer name is required")
    if isinstance(rating, bool) or not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}")

    try:
        # Row lock serializes concurrent submissions for one business until commit.
        business = db.get(Business, business_id, with_for_update=True)
    except SQLAlchemyError as exc:
        logger.exception("Business lookup failed for id %s", business_id)
        raise StoreError("Failed to fetch business info") from exc
    if business is None:
        raise BusinessNotFound()

    subscription = get_subscription(db, business.owner_user_id)
    current_total = count_reviews(db, business_id)
    if not can_collect(subscription, current_total, free_limit):
        logger.info(
            "Review rejected for business %s: plan limit reached (%d reviews)",
            business_id,
            current_total,
        )
        db.rollback()
        raise QuotaExceeded()

    review = Review(
        business_id=business_id,
        customer_name=customer_name,
        rating=rating,
        comment=(comment or "").strip(),
        is_published=False,
    )
    try:
        db.add(review)
        db.commit()
        db.refresh(review)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Review insert failed for business %s", business_id)
        raise StoreError("Failed to save review") from exc
    return review
