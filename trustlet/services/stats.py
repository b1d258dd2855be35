"""Aggregate statistics over a single business's reviews."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from trustlet.core.errors import StoreError
from trustlet.models.review import Review
from trustlet.schemas.stats import ReviewStats

logger = logging.getLogger(__name__)

STARS = (5, 4, 3, 2, 1)


def round_half_up(value: Decimal, places: int = 1) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def aggregate_reviews(rows: Iterable[tuple[int, bool]]) -> ReviewStats:
    """Build stats from (rating, is_published) pairs in a single pass.

    Ratings outside 1..5 are still counted in the total and the average but
    cannot appear in the distribution; the store's check constraint keeps
    them out in practice.
    """
    total = 0
    rating_sum = 0
    published = 0
    distribution = {star: 0 for star in STARS}

    for rating, is_published in rows:
        total += 1
        rating_sum += rating
        if is_published:
            published += 1
        if rating in distribution:
            distribution[rating] += 1

    average = round_half_up(Decimal(rating_sum) / Decimal(total)) if total else 0
    return ReviewStats(
        total_reviews=total,
        average_rating=average,
        published_reviews=published,
        pending_reviews=total - published,
        rating_distribution={str(star): count for star, count in distribution.items()},
    )


def compute_stats(db: Session, business_id: int | None) -> ReviewStats:
    """Return stats for one business; zeroed when there is no business."""
    if business_id is None:
        return ReviewStats()
    stmt = select(Review.rating, Review.is_published).where(Review.business_id == business_id)
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        logger.exception("Review stats query failed for business %s", business_id)
        raise StoreError("Failed to fetch reviews") from exc
    return aggregate_reviews(rows)
