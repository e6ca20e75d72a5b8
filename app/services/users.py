"""User store: lookups, account creation, password updates, and default admin seeding."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.models import ROLE_ADMIN, ROLE_STUDENT, User

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class DuplicateUserError(Exception):
    """A unique key (username, NIS or virtual account) is already taken."""


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def get_user_by_nis(db: Session, nis: str) -> User | None:
    return db.query(User).filter(User.nis == nis).first()


def list_students(db: Session) -> list[User]:
    return db.query(User).filter(User.role == ROLE_STUDENT).order_by(User.name, User.id).all()


def admin_exists(db: Session) -> bool:
    return db.query(User.id).filter(User.role == ROLE_ADMIN).first() is not None


def _insert_user(db: Session, user: User) -> User:
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateUserError(str(e.orig)) from e
    db.refresh(user)
    return user


def create_student(
    db: Session,
    nis: str,
    virtual_account: str,
    name: str,
    password_hash: str,
) -> User:
    """Insert a student that must change the admin-issued password on first login."""
    return _insert_user(
        db,
        User(
            nis=nis,
            virtual_account=virtual_account,
            name=name,
            password_hash=password_hash,
            role=ROLE_STUDENT,
            must_change_password=True,
        ),
    )


def create_admin(
    db: Session,
    username: str,
    name: str,
    password_hash: str,
    must_change_password: bool = False,
) -> User:
    return _insert_user(
        db,
        User(
            username=username,
            name=name,
            password_hash=password_hash,
            role=ROLE_ADMIN,
            must_change_password=must_change_password,
        ),
    )


def update_password(db: Session, user: User, password_hash: str) -> User:
    """Owner-initiated change: store the new hash and clear the must-change flag."""
    user.password_hash = password_hash
    user.must_change_password = False
    db.commit()
    db.refresh(user)
    return user


def reset_password(db: Session, user: User, password_hash: str) -> User:
    """Admin-initiated reset: store the new hash and force a change at next login."""
    user.password_hash = password_hash
    user.must_change_password = True
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user: User) -> None:
    """Delete a user; the database cascades the delete to their payments."""
    db.delete(user)
    db.commit()


def seed_default_admin(db: Session, settings: "Settings") -> User | None:
    """Create the default admin when no admin exists. Returns the new user, or None."""
    if admin_exists(db):
        return None
    user = create_admin(
        db,
        username=settings.DEFAULT_ADMIN_USERNAME,
        name="Administrator",
        password_hash=hash_password(
            settings.DEFAULT_ADMIN_PASSWORD.get_secret_value(),
            rounds=settings.BCRYPT_ROUNDS,
        ),
    )
    logger.info("Default admin created (username: %s)", user.username)
    return user
