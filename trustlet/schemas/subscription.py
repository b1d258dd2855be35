"""Schemas for plan and quota status."""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class SubscriptionOut(BaseModel):
    user_id: str = Field(..., validation_alias=AliasChoices("owner_user_id", "user_id"))
    plan: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SubscriptionResponse(BaseModel):
    subscription: SubscriptionOut
    can_collect: bool
    review_limit: Optional[int] = Field(None, description="None when the plan is unlimited")
    total_reviews: int
