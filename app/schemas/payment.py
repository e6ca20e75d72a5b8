"""Schemas for payment records, payment history and admin payment operations."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.base import INT64_MAX, INT64_MIN
from app.schemas.user import UserOut


class PaymentOwner(BaseModel):
    """Short form of the user a payment belongs to."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str | None = None
    nis: str | None = None
    name: str
    role: str


class PaymentOut(BaseModel):
    """One payment as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    tanggal: date = Field(..., description="Payment date (YYYY-MM-DD)")
    nominal: int = Field(..., gt=0, description="Amount in Rupiah")
    keterangan: str = Field(default="", description="Optional note")
    created_at: datetime
    updated_at: datetime
    user: PaymentOwner | None = None

    @field_validator("keterangan", mode="before")
    @classmethod
    def none_note_as_empty(cls, v: str | None) -> str:
        return v or ""


class CreatePaymentRequest(BaseModel):
    user_id: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    tanggal: str = Field(default="", description="Payment date (YYYY-MM-DD)")
    nominal: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    keterangan: str | None = None


class UpdatePaymentRequest(BaseModel):
    """Partial update: only the fields that are present are changed."""

    payment_id: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    tanggal: str | None = None
    nominal: int | None = Field(default=None, ge=INT64_MIN, le=INT64_MAX)
    keterangan: str | None = None


class PaymentSummary(BaseModel):
    """Dues balance for one student."""

    total_tagihan: int = Field(..., description="Total dues billed")
    total_pembayaran: int = Field(..., description="Sum of recorded payments")
    sisa_tagihan: int = Field(..., description="Outstanding balance (billed minus paid)")
    jumlah_transaksi: int = Field(..., ge=0, description="Number of payments")


class PaymentHistoryResponse(BaseModel):
    virtual_account: str = ""
    summary: PaymentSummary
    payments: list[PaymentOut] = Field(default_factory=list)
    user: UserOut | None = None
