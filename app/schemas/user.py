"""Schemas for user accounts as exposed by the API (never includes the password hash)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import INT64_MAX, INT64_MIN


class UserOut(BaseModel):
    """Sanitized user record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str | None = None
    nis: str | None = None
    virtual_account: str | None = None
    name: str
    role: str
    must_change_password: bool
    created_at: datetime
    updated_at: datetime


class CreateStudentRequest(BaseModel):
    """New student account; password is the initial one handed out by the admin."""

    nis: str = ""
    virtual_account: str = ""
    name: str = ""
    password: str = ""


class ResetPasswordRequest(BaseModel):
    user_id: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX, description="Target student id")
    new_password: str = ""
