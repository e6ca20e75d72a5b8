"""Unit tests for app.core.security: bcrypt helpers and TokenService issue/validate."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.security import (
    InvalidTokenError,
    TokenExpiredError,
    TokenService,
    hash_password,
    verify_password,
)
from tests.helpers import make_settings

SECRET = "unit-test-secret"


class TestPasswordHashing(unittest.TestCase):
    """hash_password salts every call; verify_password never raises on bad input."""

    def test_hash_verifies(self) -> None:
        hashed = hash_password("admin123", rounds=4)
        self.assertNotEqual(hashed, "admin123")
        self.assertTrue(verify_password("admin123", hashed))
        self.assertFalse(verify_password("admin124", hashed))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("same", rounds=4), hash_password("same", rounds=4))

    def test_malformed_hash_is_false(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))


class TestTokenIssueValidate(unittest.TestCase):
    def setUp(self) -> None:
        self.tokens = TokenService(secret=SECRET)

    def test_round_trip(self) -> None:
        identity = self.tokens.validate(self.tokens.issue(7, "admin"))
        self.assertEqual(identity.user_id, 7)
        self.assertEqual(identity.role, "admin")
        self.assertTrue(identity.is_admin)

    def test_claims_expire_after_24_hours(self) -> None:
        now = datetime.now(UTC).replace(microsecond=0)
        token = self.tokens.issue(3, "student", now=now)
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        self.assertEqual(payload["user_id"], 3)
        self.assertEqual(payload["role"], "student")
        self.assertEqual(payload["iat"], int(now.timestamp()))
        self.assertEqual(payload["exp"] - payload["iat"], 24 * 60 * 60)

    def test_from_settings_uses_configured_expiry(self) -> None:
        tokens = TokenService.from_settings(make_settings(JWT_EXPIRE_MINUTES=30))
        payload = jwt.decode(tokens.issue(1, "admin"), options={"verify_signature": False})
        self.assertEqual(payload["exp"] - payload["iat"], 30 * 60)

    def test_empty_secret_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TokenService(secret="")


class TestTokenRejection(unittest.TestCase):
    def setUp(self) -> None:
        self.tokens = TokenService(secret=SECRET)

    def test_expired_token(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=25)
        token = self.tokens.issue(1, "admin", now=issued)
        with self.assertRaises(TokenExpiredError):
            self.tokens.validate(token)

    def test_expired_is_an_invalid_token(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=24, seconds=1)
        token = self.tokens.issue(1, "admin", now=issued)
        with self.assertRaises(InvalidTokenError):
            self.tokens.validate(token)

    def test_other_secret(self) -> None:
        token = TokenService(secret="someone-else").issue(1, "admin")
        with self.assertRaises(InvalidTokenError) as ctx:
            self.tokens.validate(token)
        self.assertNotIsInstance(ctx.exception, TokenExpiredError)

    def test_malformed(self) -> None:
        for token in ("", "abc", "a.b.c"):
            with self.subTest(token=token):
                with self.assertRaises(InvalidTokenError):
                    self.tokens.validate(token)

    def test_missing_role_claim(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"user_id": 1, "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            self.tokens.validate(token)

    def test_unknown_role(self) -> None:
        token = self.tokens.issue(1, "superuser")
        with self.assertRaises(InvalidTokenError):
            self.tokens.validate(token)

    def test_non_integer_user_id(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"user_id": "1", "role": "admin", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            self.tokens.validate(token)


if __name__ == "__main__":
    unittest.main()
