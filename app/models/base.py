"""SQLAlchemy declarative Base and columns shared by every table."""

from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import DeclarativeBase

# BIGINT range; request ids and amounts are bounded to it.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """created_at/updated_at maintained by the database; updated_at moves on every UPDATE."""

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
