from unittest import TestCase
from unittest.mock import Mock

import requests

from trustlet.core.errors import Unauthorized
from trustlet.core.security import SupabaseIdentityProvider, authenticate, extract_bearer_token
from trustlet.models.business import Business

from tests.support import ALICE, ALICE_TOKEN, FakeIdentityProvider, make_app, make_settings


class BearerTokenTests(TestCase):
    def test_extracts_token(self):
        self.assertEqual(extract_bearer_token("Bearer abc.def"), "abc.def")
        self.assertEqual(extract_bearer_token("bearer abc"), "abc")

    def test_rejects_missing_or_malformed_headers(self):
        for credential in (None, "", "   ", "Bearer", "Basic abc", "Bearer a b", "abc"):
            with self.assertRaises(Unauthorized):
                extract_bearer_token(credential)

    def test_authenticate_resolves_user(self):
        provider = FakeIdentityProvider()
        self.assertEqual(authenticate(f"Bearer {ALICE_TOKEN}", provider), ALICE)

    def test_authenticate_rejected_token(self):
        provider = FakeIdentityProvider()
        with self.assertRaises(Unauthorized):
            authenticate("Bearer nope", provider)

    def test_malformed_header_never_reaches_provider(self):
        provider = FakeIdentityProvider()
        with self.assertRaises(Unauthorized):
            authenticate("Token abc", provider)
        self.assertEqual(provider.calls, [])


class SupabaseIdentityProviderTests(TestCase):
    def setUp(self):
        self.http = Mock()
        self.provider = SupabaseIdentityProvider(make_settings(auth_url="http://auth.test/"), session=self.http)

    def _response(self, status_code=200, body=None):
        response = Mock(status_code=status_code)
        response.json.return_value = body if body is not None else {}
        return response

    def test_returns_user_id(self):
        self.http.get.return_value = self._response(200, {"id": "abc-123", "email": "a@b.c"})

        self.assertEqual(self.provider.get_user_id("tok"), "abc-123")
        args, kwargs = self.http.get.call_args
        self.assertEqual(args[0], "http://auth.test/auth/v1/user")
        self.assertEqual(kwargs["headers"]["apikey"], "test-anon-key")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer tok")
        self.assertEqual(kwargs["timeout"], 5.0)

    def test_rejected_token(self):
        self.http.get.return_value = self._response(401, {"msg": "invalid JWT"})
        self.assertIsNone(self.provider.get_user_id("tok"))

    def test_missing_id(self):
        self.http.get.return_value = self._response(200, {})
        self.assertIsNone(self.provider.get_user_id("tok"))

    def test_non_json_body(self):
        response = Mock(status_code=200)
        response.json.side_effect = ValueError("no json")
        self.http.get.return_value = response
        self.assertIsNone(self.provider.get_user_id("tok"))

    def test_network_failure(self):
        self.http.get.side_effect = requests.ConnectionError("down")
        self.assertIsNone(self.provider.get_user_id("tok"))

    def test_requires_api_key(self):
        with self.assertRaises(RuntimeError):
            SupabaseIdentityProvider(make_settings(auth_api_key=None))


class AuthenticatedEndpointTests(TestCase):
    """Every owner endpoint answers 401 before touching the store."""

    def setUp(self):
        self.app, self.client, self.provider = make_app()

    def test_missing_header(self):
        for path in ("/api/business-info", "/api/review-stats", "/api/recent-reviews", "/api/subscription"):
            response = self.client.get(path)
            self.assertEqual(response.status_code, 401, path)
            self.assertEqual(response.json(), {"error": "Missing authorization header"})

    def test_invalid_token(self):
        response = self.client.get("/api/review-stats", headers={"Authorization": "Bearer forged"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Unauthorized"})

    def test_unauthorized_post_does_not_write(self):
        response = self.client.post(
            "/api/business-info",
            json={"name": "Sneaky"},
            headers={"Authorization": "Bearer forged"},
        )
        self.assertEqual(response.status_code, 401)

        db = self.app.state.session_factory()
        try:
            self.assertEqual(db.query(Business).count(), 0)
        finally:
            db.close()
