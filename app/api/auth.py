"""Login (admin by username, student by NIS) and self-service password change."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependencies import AppSettings, CurrentIdentity, get_token_service
from app.core.errors import BadRequestError, InternalError, NotFoundError, UnauthorizedError
from app.core.i18n import translate
from app.core.security import PASSWORD_MIN_LEN, TokenService, hash_password, verify_password
from app.models import ROLE_ADMIN, ROLE_STUDENT, User
from app.schemas.auth import (
    AdminLoginRequest,
    ChangePasswordRequest,
    Identity,
    LoginResponse,
    MessageResponse,
    StudentLoginRequest,
)
from app.schemas.user import UserOut
from app.services import users as user_store

logger = logging.getLogger(__name__)
router = APIRouter()


def hash_or_fail(plain_password: str, rounds: int) -> str:
    try:
        return hash_password(plain_password, rounds=rounds)
    except (ValueError, TypeError) as e:
        logger.error("Password hashing failed: %s", e)
        raise InternalError("Failed to hash password") from e


def _login(
    user: User | None,
    password: str,
    role: str,
    tokens: TokenService,
    login_key: str,
) -> LoginResponse:
    """
    Shared credential check. Unknown account, wrong role and wrong password all
    produce the same 401 so callers cannot tell which one failed.
    """
    if user is None or user.role != role or not verify_password(password, user.password_hash):
        logger.warning("Failed %s login for %r", role, login_key)
        raise UnauthorizedError("Invalid credentials")

    token = tokens.issue(user.id, user.role)
    logger.info("User id=%s logged in as %s", user.id, role)
    return LoginResponse(
        token=token,
        user=UserOut.model_validate(user),
        must_change_password=user.must_change_password,
    )


@router.post("/admin/login", response_model=LoginResponse)
def login_admin(
    body: AdminLoginRequest,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    """Authenticate an admin with username and password; returns a JWT."""
    if not body.username or not body.password:
        raise BadRequestError("Username and password are required")
    user = user_store.get_user_by_username(db, body.username)
    return _login(user, body.password, ROLE_ADMIN, tokens, body.username)


@router.post("/student/login", response_model=LoginResponse)
def login_student(
    body: StudentLoginRequest,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    """Authenticate a student with NIS and password; returns a JWT."""
    if not body.nis or not body.password:
        raise BadRequestError("NIS and password are required")
    user = user_store.get_user_by_nis(db, body.nis)
    return _login(user, body.password, ROLE_STUDENT, tokens, body.nis)


async def read_change_password_body(
    identity: CurrentIdentity,
    request: Request,
) -> tuple[Identity, ChangePasswordRequest]:
    """
    Authenticate first, then read the body, so an anonymous caller gets 401
    whatever it sent.
    """
    try:
        body = ChangePasswordRequest.model_validate(await request.json())
    except ValueError:  # bad JSON and pydantic ValidationError alike
        raise BadRequestError("Invalid request body")
    return identity, body


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    caller: Annotated[tuple[Identity, ChangePasswordRequest], Depends(read_change_password_body)],
    db: Annotated[Session, Depends(get_db)],
    settings: AppSettings,
) -> MessageResponse:
    """Change the caller's own password and clear the must-change-password flag."""
    identity, body = caller
    if not body.old_password or not body.new_password:
        raise BadRequestError("Old password and new password are required")
    if len(body.new_password) < PASSWORD_MIN_LEN:
        raise BadRequestError("New password must be at least 6 characters")

    user = user_store.get_user_by_id(db, identity.user_id)
    if user is None:
        raise NotFoundError("User not found")
    if not verify_password(body.old_password, user.password_hash):
        raise BadRequestError("Old password is incorrect")

    user_store.update_password(db, user, hash_or_fail(body.new_password, settings.BCRYPT_ROUNDS))
    logger.info("User id=%s changed password", user.id)
    return MessageResponse(message=translate("Password changed successfully", settings.LOCALE))
