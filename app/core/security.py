"""Password hashing and JWT issuance/validation for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import Settings
from app.schemas.auth import USER_ROLES, Identity

# Bcrypt cost (rounds); overridable through Settings.BCRYPT_ROUNDS.
BCRYPT_ROUNDS = 12

# Minimum length for a password chosen by the account owner.
PASSWORD_MIN_LEN = 6

REQUIRED_CLAIMS = ("user_id", "role", "iat", "exp")


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class InvalidTokenError(Exception):
    """Token is malformed, carries a bad signature, or lacks required claims."""

    def __init__(self, message: str = "Invalid token") -> None:
        self.message = message
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Token signature is valid but the expiry instant has passed."""

    def __init__(self, message: str = "Token expired") -> None:
        super().__init__(message)


class TokenService:
    """
    Issues and validates signed, time-bound identity assertions (JWT).

    Stateless: validation needs only the secret and the clock, never the
    database. There is no revocation list; expiry is the only invalidation.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24) -> None:
        if not secret:
            raise ValueError("Token secret must be non-empty")
        self._secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def issue(self, user_id: int, role: str, now: datetime | None = None) -> str:
        """Create a token asserting user_id and role, valid for expire_minutes from now."""
        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "user_id": int(user_id),
            "role": role,
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def validate(self, token: str) -> Identity:
        """
        Verify signature and expiry and return the asserted identity.

        Raises TokenExpiredError when now >= exp, InvalidTokenError for any
        other failure (bad signature, malformed token, missing or bad claims).
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e

        user_id = payload.get("user_id")
        role = payload.get("role")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise InvalidTokenError("Invalid token payload")
        if role not in USER_ROLES:
            raise InvalidTokenError("Invalid token payload")
        return Identity(user_id=user_id, role=role)
