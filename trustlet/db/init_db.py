"""Database initialization utilities."""

from sqlalchemy.engine import Engine

from trustlet.db.base import Base


def init_db(engine: Engine) -> None:
    """Create tables for every registered model."""
    from trustlet import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
