"""Expose schemas for easier import."""

from trustlet.schemas.business import BusinessIn, BusinessOut, BusinessResponse  # noqa: F401
from trustlet.schemas.review import (  # noqa: F401
    ReviewListResponse,
    ReviewOut,
    ReviewResponse,
    ReviewSubmit,
)
from trustlet.schemas.stats import ReviewStats, ReviewStatsResponse  # noqa: F401
from trustlet.schemas.subscription import SubscriptionOut, SubscriptionResponse  # noqa: F401
