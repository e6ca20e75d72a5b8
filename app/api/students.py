"""Admin management of student accounts."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.auth import hash_or_fail
from app.api.params import parse_id
from app.core.database import get_db
from app.core.dependencies import AdminIdentity, AppSettings
from app.core.errors import BadRequestError, ConflictError, NotFoundError
from app.core.i18n import translate
from app.schemas.auth import MessageResponse
from app.schemas.user import CreateStudentRequest, ResetPasswordRequest, UserOut
from app.services import users as user_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[UserOut])
def list_students(
    _admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> list[UserOut]:
    """All students ordered by name."""
    return [UserOut.model_validate(u) for u in user_store.list_students(db)]


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_student(
    body: CreateStudentRequest,
    admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
    settings: AppSettings,
) -> UserOut:
    """
    Create a student account with an admin-issued initial password.

    The student must change that password after the first login.
    """
    nis = body.nis.strip()
    virtual_account = body.virtual_account.strip()
    name = body.name.strip()
    if not nis or not virtual_account or not name or not body.password:
        raise BadRequestError("NIS, virtual account, name, and password are required")

    try:
        user = user_store.create_student(
            db,
            nis=nis,
            virtual_account=virtual_account,
            name=name,
            password_hash=hash_or_fail(body.password, settings.BCRYPT_ROUNDS),
        )
    except user_store.DuplicateUserError as e:
        logger.warning("Duplicate student nis=%r: %s", nis, e)
        raise ConflictError("Student with this NIS or virtual account already exists") from e

    logger.info("Admin id=%s created student id=%s", admin.user_id, user.id)
    return UserOut.model_validate(user)


@router.post("/reset-password", response_model=MessageResponse)
def reset_student_password(
    body: ResetPasswordRequest,
    admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
    settings: AppSettings,
) -> MessageResponse:
    """Set a new password for a student and force them to change it at next login."""
    if not body.user_id or not body.new_password:
        raise BadRequestError("User ID and new password are required")

    user = user_store.get_user_by_id(db, body.user_id)
    if user is None:
        raise NotFoundError("User not found")
    if not user.is_student:
        raise BadRequestError("Can only reset student passwords")

    user_store.reset_password(db, user, hash_or_fail(body.new_password, settings.BCRYPT_ROUNDS))
    logger.info("Admin id=%s reset password of student id=%s", admin.user_id, user.id)
    return MessageResponse(message=translate("Password reset successfully", settings.LOCALE))


@router.delete("/delete", response_model=MessageResponse)
def delete_student(
    admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
    settings: AppSettings,
    user_id: Annotated[str | None, Query()] = None,
) -> MessageResponse:
    """Delete a student account together with all of its payments."""
    student_id = parse_id(user_id, "user_id")
    user = user_store.get_user_by_id(db, student_id)
    if user is None:
        raise NotFoundError("User not found")
    if not user.is_student:
        raise BadRequestError("Can only delete student accounts")

    user_store.delete_user(db, user)
    logger.info("Admin id=%s deleted student id=%s", admin.user_id, student_id)
    return MessageResponse(message=translate("Student deleted successfully", settings.LOCALE))
