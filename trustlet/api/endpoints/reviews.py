"""Review listing and public submission endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from trustlet.api.deps import get_app_settings
from trustlet.core.config import Settings
from trustlet.core.security import get_current_user
from trustlet.db.session import get_db
from trustlet.schemas.review import ReviewListResponse, ReviewOut, ReviewResponse, ReviewSubmit
from trustlet.services.business import get_business
from trustlet.services.reviews import MAX_OFFSET, list_reviews, parse_page_param, submit_review

router = APIRouter(tags=["reviews"])


@router.get("/recent-reviews", response_model=ReviewListResponse)
def recent_reviews(
    limit: str | None = None,
    offset: str | None = None,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> ReviewListResponse:
    """Return the caller's reviews, newest first."""
    page_limit = parse_page_param(limit, settings.default_page_size, settings.max_page_size)
    page_offset = parse_page_param(offset, 0, MAX_OFFSET)

    business = get_business(db, user_id)
    items, total = list_reviews(db, business.id if business else None, page_limit, page_offset)
    return ReviewListResponse(
        reviews=[ReviewOut.model_validate(r) for r in items],
        total=total,
        limit=page_limit,
        offset=page_offset,
    )


@router.post(
    "/reviews/{business_id}",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_review(
    business_id: int,
    payload: ReviewSubmit,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> ReviewResponse:
    """Public review form target; enforces the owner's plan quota."""
    review = submit_review(
        db,
        business_id,
        customer_name=payload.customer_name,
        rating=payload.rating,
        comment=payload.comment,
        free_limit=settings.free_plan_review_limit,
    )
    return ReviewResponse(review=ReviewOut.model_validate(review))
