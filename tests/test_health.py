"""Tests for root and health endpoints and the generic error bodies."""

import unittest

from fastapi.testclient import TestClient

from app import __version__
from app.main import create_app
from tests.helpers import ApiTestCase, make_settings


class TestHealth(ApiTestCase):
    def test_root(self) -> None:
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Komite Sekolah API", "version": __version__})

    def test_health_reports_database(self) -> None:
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {"status": "OK", "environment": "development", "database": "connected"},
        )

    def test_unknown_route_uses_error_body(self) -> None:
        resp = self.client.get("/api/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Not found"})


class TestUnexpectedError(unittest.TestCase):
    def _client_for_failing_route(self, **overrides) -> TestClient:
        app = create_app(make_settings(**overrides))

        @app.get("/api/explode")
        def explode() -> None:
            raise RuntimeError("unexpected failure")

        client = TestClient(app, raise_server_exceptions=False)
        client.__enter__()
        self.addCleanup(client.__exit__, None, None, None)
        return client

    def test_unhandled_exception_renders_json(self) -> None:
        with self.assertLogs("app.core.errors", level="ERROR"):
            resp = self._client_for_failing_route().get("/api/explode")
        self.assertEqual(resp.status_code, 500)
        self.assertTrue(resp.headers["content-type"].startswith("application/json"))
        self.assertEqual(resp.json(), {"error": "Internal server error"})

    def test_unhandled_exception_is_localized(self) -> None:
        with self.assertLogs("app.core.errors", level="ERROR"):
            resp = self._client_for_failing_route(LOCALE="id").get("/api/explode")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Terjadi kesalahan pada server"})


class TestSeededAdmin(ApiTestCase):
    def test_seed_runs_once(self) -> None:
        from app.services.users import seed_default_admin

        db = self.app.state.session_factory()
        try:
            self.assertIsNone(seed_default_admin(db, self.settings))
        finally:
            db.close()
