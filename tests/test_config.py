"""Unit tests for app.core.config.Settings validation."""

import unittest

from pydantic import ValidationError

from tests.helpers import make_settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = make_settings()
        self.assertFalse(settings.is_production)
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 24 * 60)
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")

    def test_production_flag(self) -> None:
        self.assertTrue(make_settings(ENVIRONMENT="production").is_production)

    def test_unknown_environment_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(ENVIRONMENT="staging")

    def test_mysql_url_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://root@localhost/komite_sekolah")

    def test_empty_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_SECRET="  ")

    def test_expiry_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            make_settings(JWT_EXPIRE_MINUTES=10081)

    def test_allowed_origins_stripped(self) -> None:
        self.assertEqual(make_settings(ALLOWED_ORIGINS="  *  ").ALLOWED_ORIGINS, "*")


if __name__ == "__main__":
    unittest.main()
