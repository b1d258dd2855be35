"""Bearer credential resolution against the external identity provider."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests
from fastapi import Header, Request

from trustlet.core.config import Settings
from trustlet.core.errors import Unauthorized

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer"


class IdentityProvider(Protocol):
    def get_user_id(self, token: str) -> Optional[str]:
        """Return the user id the token belongs to, or None if rejected."""


class SupabaseIdentityProvider:
    """Resolves access tokens with the Supabase auth `/user` endpoint."""

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        if not settings.auth_api_key:
            raise RuntimeError("SUPABASE_ANON_KEY is not configured.")
        self._user_url = settings.auth_url.rstrip("/") + "/auth/v1/user"
        self._api_key = settings.auth_api_key
        self._timeout = settings.auth_timeout_seconds
        self._http = session or requests.Session()

    def get_user_id(self, token: str) -> Optional[str]:
        try:
            response = self._http.get(
                self._user_url,
                headers={
                    "apikey": self._api_key,
                    "Authorization": f"Bearer {token}",
                },
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Identity provider request failed: %s", exc)
            return None

        if response.status_code != 200:
            logger.info("Identity provider rejected token (status %s)", response.status_code)
            return None
        try:
            user_id = response.json().get("id")
        except ValueError:
            logger.warning("Identity provider returned a non-JSON body")
            return None
        return str(user_id) if user_id else None


def extract_bearer_token(credential: str | None) -> str:
    """Return the token from an `Authorization: Bearer <token>` value."""
    if not credential:
        raise Unauthorized("Missing authorization header")
    parts = credential.strip().split()
    if len(parts) != 2 or parts[0].lower() != BEARER_PREFIX:
        raise Unauthorized("Malformed authorization header")
    return parts[1]


def authenticate(credential: str | None, provider: IdentityProvider) -> str:
    """Resolve a bearer credential to a user id or raise Unauthorized."""
    token = extract_bearer_token(credential)
    user_id = provider.get_user_id(token)
    if not user_id:
        raise Unauthorized()
    return user_id


def get_current_user(
    request: Request,
    authorization: str | None = Header(None),
) -> str:
    """FastAPI dependency returning the authenticated user's id."""
    return authenticate(authorization, request.app.state.identity_provider)
