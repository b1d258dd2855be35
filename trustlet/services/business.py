"""Business profile management: one profile per owner."""

from __future__ import annotations

import logging
from datetime import datetime
from urllib.parse import urlparse

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from trustlet.core.errors import StoreError, ValidationError
from trustlet.models.business import Business

logger = logging.getLogger(__name__)


def normalize_url(value: str | None, field: str) -> str | None:
    """Strip a URL field, map blanks to None and reject non-http(s) values."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Please enter a valid URL for {field}")
    return value


def get_business(db: Session, user_id: str) -> Business | None:
    """Return the owner's business, or None when they have not created one."""
    try:
        return db.execute(
            select(Business).where(Business.owner_user_id == user_id)
        ).scalar_one_or_none()
    except SQLAlchemyError as exc:
        logger.exception("Business fetch failed for user %s", user_id)
        raise StoreError("Failed to fetch business info") from exc


def upsert_business(
    db: Session,
    user_id: str,
    name: str | None,
    website: str | None = None,
    logo_url: str | None = None,
) -> Business:
    """Insert the owner's business, or update it in place when it exists."""
    name = (name or "").strip()
    if not name:
        raise ValidationError("Business name is required")
    fields = {
        "name": name,
        "website": normalize_url(website, "website"),
        "logo_url": normalize_url(logo_url, "logo_url"),
    }

    business = get_business(db, user_id)
    try:
        if business is None:
            business = Business(owner_user_id=user_id, **fields)
            db.add(business)
            try:
                db.commit()
            except IntegrityError:
                # Another request inserted the row first; update that one instead.
                db.rollback()
                logger.info("Concurrent business insert for user %s, updating existing row", user_id)
                business = get_business(db, user_id)
                if business is None:
                    raise
                _apply(business, fields)
                db.commit()
        else:
            _apply(business, fields)
            db.commit()
        db.refresh(business)
        return business
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Business upsert failed for user %s", user_id)
        raise StoreError("Failed to save business") from exc


def _apply(business: Business, fields: dict) -> None:
    for key, value in fields.items():
        setattr(business, key, value)
    business.updated_at = datetime.now()
