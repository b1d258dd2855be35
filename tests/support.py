"""Shared fixtures: an app wired to in-memory SQLite and a fake identity provider."""

from datetime import datetime, timedelta

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from trustlet.core.config import Settings
from trustlet.main import create_app
from trustlet.models.business import Business
from trustlet.models.review import Review
from trustlet.models.subscription import Subscription

ALICE_TOKEN = "token-alice"
BOB_TOKEN = "token-bob"
ALICE = "user-alice"
BOB = "user-bob"


class FakeIdentityProvider:
    """Accepts a fixed set of tokens and records every lookup."""

    def __init__(self, tokens=None):
        self.tokens = tokens or {ALICE_TOKEN: ALICE, BOB_TOKEN: BOB}
        self.calls = []

    def get_user_id(self, token):
        self.calls.append(token)
        return self.tokens.get(token)


def make_settings(**overrides):
    values = {
        "database_url": "sqlite://",
        "auth_api_key": "test-anon-key",
        "auth_url": "http://auth.test",
        "create_tables": True,
        "log_level": "WARNING",
        "free_plan_review_limit": 5,
    }
    values.update(overrides)
    return Settings(**values)


def make_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def make_app(**settings_overrides):
    """Return (app, client, identity_provider) sharing one in-memory database."""
    provider = FakeIdentityProvider()
    app = create_app(make_settings(**settings_overrides), identity_provider=provider, engine=make_engine())
    return app, TestClient(app), provider


def auth(token=ALICE_TOKEN):
    return {"Authorization": f"Bearer {token}"}


def add_business(db, owner=ALICE, name="Corner Bakery"):
    business = Business(owner_user_id=owner, name=name)
    db.add(business)
    db.commit()
    db.refresh(business)
    return business


def add_subscription(db, owner=ALICE, plan="free", status="active"):
    subscription = Subscription(owner_user_id=owner, plan=plan, status=status)
    db.add(subscription)
    db.commit()
    return subscription


def add_reviews(db, business_id, ratings, start=None, published=False):
    """Insert one review per rating, each a minute newer than the previous one."""
    start = start or datetime(2024, 1, 1, 9, 0, 0)
    reviews = []
    for index, rating in enumerate(ratings):
        review = Review(
            business_id=business_id,
            customer_name=f"Customer {index + 1}",
            rating=rating,
            comment="",
            is_published=published,
            created_at=start + timedelta(minutes=index),
        )
        db.add(review)
        reviews.append(review)
    db.commit()
    return reviews
