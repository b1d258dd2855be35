"""Pydantic schemas for business profiles."""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class BusinessIn(BaseModel):
    # Presence of name is checked by the service so the caller gets a clear message.
    name: Optional[str] = Field(None, description="Business display name")
    website: Optional[str] = Field(None, description="Absolute http(s) URL")
    logo_url: Optional[str] = Field(None, description="Absolute http(s) URL")


class BusinessOut(BaseModel):
    id: int
    user_id: str = Field(..., validation_alias=AliasChoices("owner_user_id", "user_id"))
    name: str
    website: Optional[str] = None
    logo_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BusinessResponse(BaseModel):
    business: Optional[BusinessOut] = None
