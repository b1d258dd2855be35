"""Pydantic schemas for reviews."""

from datetime import datetime

from pydantic import BaseModel, Field


class ReviewOut(BaseModel):
    id: int
    business_id: int
    customer_name: str
    rating: int
    comment: str
    is_published: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class ReviewListResponse(BaseModel):
    reviews: list[ReviewOut] = Field(default_factory=list)
    total: int = 0
    limit: int
    offset: int


class ReviewSubmit(BaseModel):
    """Body of the public review form."""

    customer_name: str
    rating: int = Field(..., description="Star rating, 1 to 5")
    comment: str = ""


class ReviewResponse(BaseModel):
    review: ReviewOut
