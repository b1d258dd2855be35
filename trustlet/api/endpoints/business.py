"""Business profile endpoints."""

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session

from trustlet.core.errors import ValidationError
from trustlet.core.security import get_current_user
from trustlet.db.session import get_db
from trustlet.schemas.business import BusinessIn, BusinessOut, BusinessResponse
from trustlet.services.business import get_business, upsert_business

router = APIRouter(prefix="/business-info", tags=["business"])


async def read_business_payload(
    request: Request,
    user_id: str = Depends(get_current_user),
) -> BusinessIn:
    """Parse the profile body only once the caller is authenticated."""
    try:
        data = await request.json()
    except ValueError as exc:
        raise ValidationError("Request body must be valid JSON") from exc
    try:
        return BusinessIn.model_validate(data)
    except SchemaError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(f"{field}: {first.get('msg')}" if field else str(first.get("msg"))) from exc


@router.get("", response_model=BusinessResponse)
def read_business(
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> BusinessResponse:
    """Return the caller's business profile, or null if none exists yet."""
    business = get_business(db, user_id)
    return BusinessResponse(business=BusinessOut.model_validate(business) if business else None)


@router.post(
    "",
    response_model=BusinessResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": BusinessIn.model_json_schema()}},
        }
    },
)
def save_business(
    user_id: str = Depends(get_current_user),
    payload: BusinessIn = Depends(read_business_payload),
    db: Session = Depends(get_db),
) -> BusinessResponse:
    """Create the caller's business profile or update the existing one."""
    business = upsert_business(
        db,
        user_id,
        name=payload.name,
        website=payload.website,
        logo_url=payload.logo_url,
    )
    return BusinessResponse(business=BusinessOut.model_validate(business))
