"""ORM model for recorded dues payments."""

from sqlalchemy import BigInteger, CheckConstraint, Column, Date, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin


class Payment(TimestampMixin, Base):
    """
    One dues payment owned by exactly one user.

    nominal is in the smallest currency unit (Rupiah) and always positive.
    """

    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("nominal > 0", name="ck_payments_nominal_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tanggal = Column(Date, nullable=False, index=True)
    nominal = Column(BigInteger, nullable=False)
    keterangan = Column(Text, nullable=True)

    user = relationship("User", back_populates="payments")
