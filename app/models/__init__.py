"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.payment import Payment
from app.models.user import ROLE_ADMIN, ROLE_STUDENT, User

__all__ = ["Base", "Payment", "ROLE_ADMIN", "ROLE_STUDENT", "User"]
