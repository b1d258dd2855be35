"""Expose API endpoint routers."""

from trustlet.api.endpoints import business, reviews, stats, subscription

__all__ = ["business", "reviews", "stats", "subscription"]
