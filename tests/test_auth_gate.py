"""Tests for the authorization gate: bearer parsing, token validation, and admin role checks."""

from datetime import UTC, datetime, timedelta

from app.core.security import TokenService
from tests.helpers import ApiTestCase, bearer

PROTECTED = "/api/payments/my-history"
ADMIN_ONLY = "/api/admin/students"


class TestAuthenticate(ApiTestCase):
    def test_missing_header(self) -> None:
        resp = self.client.get(PROTECTED)
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Authorization header required"})
        self.assertEqual(resp.headers["www-authenticate"], "Bearer")

    def test_wrong_scheme(self) -> None:
        resp = self.client.get(PROTECTED, headers={"Authorization": "Token abc"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Invalid Authorization format"})

    def test_bearer_without_space_is_bad_format(self) -> None:
        token = self.login_admin()
        resp = self.client.get(PROTECTED, headers={"Authorization": f"Bearer{token}"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Invalid Authorization format"})

    def test_garbage_token(self) -> None:
        resp = self.client.get(PROTECTED, headers=bearer("not.a.jwt"))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Invalid token"})

    def test_expired_token_rejected(self) -> None:
        tokens: TokenService = self.app.state.token_service
        token = tokens.issue(1, "admin", now=datetime.now(UTC) - timedelta(days=2))
        resp = self.client.get(PROTECTED, headers=bearer(token))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Invalid token"})

    def test_token_from_other_secret_rejected(self) -> None:
        token = TokenService(secret="a-different-secret").issue(1, "admin")
        resp = self.client.get(PROTECTED, headers=bearer(token))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Invalid token"})

    def test_valid_token_passes(self) -> None:
        resp = self.client.get(PROTECTED, headers=bearer(self.login_admin()))
        self.assertEqual(resp.status_code, 200)


class TestRequireAdmin(ApiTestCase):
    def test_student_forbidden(self) -> None:
        admin = self.login_admin()
        self.create_student(admin, nis="2001", password="murid123")
        student = self.login_student("2001", "murid123")

        resp = self.client.get(ADMIN_ONLY, headers=bearer(student))
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"error": "Admin access required"})

    def test_admin_allowed(self) -> None:
        resp = self.client.get(ADMIN_ONLY, headers=bearer(self.login_admin()))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_unauthenticated_is_401_not_403(self) -> None:
        self.assertEqual(self.client.get(ADMIN_ONLY).status_code, 401)


class TestGateMessagesLocalized(ApiTestCase):
    settings_overrides = {"LOCALE": "id"}

    def test_indonesian_messages(self) -> None:
        resp = self.client.get(PROTECTED)
        self.assertEqual(resp.json(), {"error": "Header Authorization diperlukan"})
        resp = self.client.get(PROTECTED, headers={"Authorization": "Basic abc"})
        self.assertEqual(resp.json(), {"error": "Format Authorization tidak valid"})
        resp = self.client.get(PROTECTED, headers=bearer("x"))
        self.assertEqual(resp.json(), {"error": "Token tidak valid"})
