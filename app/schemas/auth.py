"""Request/response schemas for auth endpoints and the authenticated identity."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.user import UserOut

UserRole = Literal["admin", "student"]

USER_ROLES: frozenset[str] = frozenset({"admin", "student"})


class Identity(BaseModel):
    """Verified caller identity taken from a bearer token; injected into handlers."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


# Empty-string defaults let handlers report which field is missing instead of a generic 400.
class AdminLoginRequest(BaseModel):
    """Admin credentials."""

    username: str = Field(default="", description="Admin username")
    password: str = Field(default="", description="Password")


class StudentLoginRequest(BaseModel):
    """Student credentials."""

    nis: str = Field(default="", description="Nomor Induk Siswa")
    password: str = Field(default="", description="Password")


class LoginResponse(BaseModel):
    """JWT plus the signed-in account. Include the token as: Authorization: Bearer <token>"""

    token: str = Field(..., description="JWT access token")
    user: UserOut
    must_change_password: bool = Field(
        ...,
        description="When true the client must force a password change before anything else.",
    )


class ChangePasswordRequest(BaseModel):
    old_password: str = ""
    new_password: str = ""


class MessageResponse(BaseModel):
    """Plain confirmation message (localized)."""

    message: str
