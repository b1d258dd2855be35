"""Dashboard statistics endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from trustlet.core.security import get_current_user
from trustlet.db.session import get_db
from trustlet.schemas.stats import ReviewStatsResponse
from trustlet.services.business import get_business
from trustlet.services.stats import compute_stats

router = APIRouter(prefix="/review-stats", tags=["reviews"])


@router.get("", response_model=ReviewStatsResponse)
def review_stats(
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ReviewStatsResponse:
    business = get_business(db, user_id)
    return ReviewStatsResponse(stats=compute_stats(db, business.id if business else None))
