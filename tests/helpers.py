"""Shared test setup: an app on in-memory SQLite plus login and account helpers."""

import unittest
from typing import Any

from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

TEST_SECRET = "test-secret-for-unit-tests"
ADMIN_PASSWORD = "admin123"


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from the environment's .env; cheap bcrypt rounds for speed."""
    values: dict[str, Any] = {
        "ENVIRONMENT": "development",
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": TEST_SECRET,
        "BCRYPT_ROUNDS": 4,
        "ALLOWED_ORIGINS": "http://localhost:3000,http://x.com",
        "LOCALE": "en",
        "DEFAULT_ADMIN_USERNAME": "admin",
        "DEFAULT_ADMIN_PASSWORD": ADMIN_PASSWORD,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class ApiTestCase(unittest.TestCase):
    """Starts a fresh app (and database) per test with the default admin seeded."""

    settings_overrides: dict[str, Any] = {}

    def setUp(self) -> None:
        self.settings = make_settings(**self.settings_overrides)
        self.app = create_app(self.settings)
        self.client = TestClient(self.app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def login_admin(self, username: str = "admin", password: str = ADMIN_PASSWORD) -> str:
        resp = self.client.post(
            "/api/auth/admin/login",
            json={"username": username, "password": password},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["token"]

    def login_student(self, nis: str, password: str) -> str:
        resp = self.client.post(
            "/api/auth/student/login",
            json={"nis": nis, "password": password},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["token"]

    def create_student(
        self,
        admin_token: str,
        nis: str = "1001",
        name: str = "Budi Santoso",
        password: str = "rahasia1",
        virtual_account: str | None = None,
    ) -> dict[str, Any]:
        resp = self.client.post(
            "/api/admin/students",
            json={
                "nis": nis,
                "virtual_account": virtual_account or f"VA-{nis}",
                "name": name,
                "password": password,
            },
            headers=bearer(admin_token),
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def create_payment(
        self,
        admin_token: str,
        user_id: int,
        tanggal: str = "2024-01-15",
        nominal: int = 50000,
        keterangan: str | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"user_id": user_id, "tanggal": tanggal, "nominal": nominal}
        if keterangan is not None:
            body["keterangan"] = keterangan
        resp = self.client.post("/api/admin/payments", json=body, headers=bearer(admin_token))
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()
