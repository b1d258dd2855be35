"""Root API router."""

from fastapi import APIRouter

from trustlet.api.endpoints import business, reviews, stats, subscription

router = APIRouter()

router.include_router(business.router)
router.include_router(stats.router)
router.include_router(reviews.router)
router.include_router(subscription.router)
