"""ORM model for application users (admins and students)."""

from sqlalchemy import Boolean, CheckConstraint, Column, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin

ROLE_ADMIN = "admin"
ROLE_STUDENT = "student"


class User(TimestampMixin, Base):
    """
    Account used for JWT authentication and role-based access control.

    Admins log in with username, students with NIS (Nomor Induk Siswa).
    Role is fixed at creation.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('admin', 'student')", name="ck_users_role"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=True, unique=True, index=True)
    nis = Column(String(255), nullable=True, unique=True, index=True)
    virtual_account = Column(String(255), nullable=True, unique=True)
    name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False)
    must_change_password = Column(Boolean, nullable=False, default=True)

    # Rows are removed by the database's ON DELETE CASCADE, not loaded and deleted one by one.
    payments = relationship(
        "Payment",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @property
    def is_student(self) -> bool:
        return self.role == ROLE_STUDENT
