"""Subscription model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from trustlet.db.base import Base

PLAN_FREE = "free"
PLAN_PAID = "paid"


class Subscription(Base):
    """Billing plan for an owner. Rows are written by the billing integration."""

    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    owner_user_id = Column(String(64), nullable=False, unique=True, index=True)
    plan = Column(String(20), nullable=False, default=PLAN_FREE)  # free | paid
    status = Column(String(50), nullable=False, default="active")
    stripe_customer_id = Column(String(100))
    stripe_subscription_id = Column(String(100))
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now)
