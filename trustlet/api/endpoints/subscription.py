"""Plan and quota status for the dashboard."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from trustlet.api.deps import get_app_settings
from trustlet.core.config import Settings
from trustlet.core.security import get_current_user
from trustlet.db.session import get_db
from trustlet.schemas.subscription import SubscriptionOut, SubscriptionResponse
from trustlet.services.business import get_business
from trustlet.services.quota import can_collect, default_subscription, get_subscription, review_limit
from trustlet.services.reviews import count_reviews

router = APIRouter(prefix="/subscription", tags=["subscription"])


@router.get("", response_model=SubscriptionResponse)
def read_subscription(
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> SubscriptionResponse:
    subscription = get_subscription(db, user_id) or default_subscription(user_id)
    business = get_business(db, user_id)
    total = count_reviews(db, business.id) if business else 0
    return SubscriptionResponse(
        subscription=SubscriptionOut.model_validate(subscription),
        can_collect=can_collect(subscription, total, settings.free_plan_review_limit),
        review_limit=review_limit(subscription, settings.free_plan_review_limit),
        total_reviews=total,
    )
