"""FastAPI application entry point."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from trustlet.api.errors import register_error_handlers
from trustlet.api.routes import router
from trustlet.core.config import Settings, get_settings
from trustlet.core.logging import configure_logging
from trustlet.core.security import IdentityProvider, SupabaseIdentityProvider
from trustlet.db.init_db import init_db
from trustlet.db.session import create_engine_from_settings, make_session_factory

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    identity_provider: IdentityProvider | None = None,
    engine: Engine | None = None,
) -> FastAPI:
    """Build the application with its store and identity provider wired in."""
    settings = settings or get_settings()
    configure_logging(settings)

    engine = engine or create_engine_from_settings(settings)
    if settings.create_tables:
        init_db(engine)

    app = FastAPI(title=settings.project_name)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.identity_provider = identity_provider or SupabaseIdentityProvider(settings)

    register_error_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)

    @app.get("/", tags=["root"])
    async def root() -> dict[str, str]:
        """Basic sanity endpoint."""
        return {"message": f"{settings.project_name} is running"}

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        """Health check endpoint for Docker."""
        return {"status": "healthy"}

    logger.info("%s ready (api prefix %s)", settings.project_name, settings.api_prefix)
    return app


def build_default_app() -> FastAPI:
    """Factory for `uvicorn trustlet.main:build_default_app --factory`."""
    # Load environment variables from .env file before settings are read
    load_dotenv()
    return create_app()
