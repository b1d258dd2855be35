"""Schemas for dashboard statistics."""

from pydantic import BaseModel, Field


def _empty_distribution() -> dict[str, int]:
    return {str(star): 0 for star in range(5, 0, -1)}


class ReviewStats(BaseModel):
    total_reviews: int = 0
    average_rating: float = 0
    published_reviews: int = 0
    pending_reviews: int = 0
    rating_distribution: dict[str, int] = Field(default_factory=_empty_distribution)


class ReviewStatsResponse(BaseModel):
    stats: ReviewStats
