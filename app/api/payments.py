"""Payment history for students and payment bookkeeping for admins."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.params import parse_id, parse_tanggal
from app.core.database import get_db
from app.core.dependencies import AdminIdentity, AppSettings, CurrentIdentity
from app.core.errors import BadRequestError, NotFoundError
from app.core.i18n import translate
from app.models import User
from app.schemas.auth import MessageResponse
from app.schemas.payment import (
    CreatePaymentRequest,
    PaymentHistoryResponse,
    PaymentOut,
    UpdatePaymentRequest,
)
from app.schemas.user import UserOut
from app.services import payments as payment_store
from app.services import users as user_store

logger = logging.getLogger(__name__)
router = APIRouter()


def _validate_nominal(nominal: int) -> int:
    if nominal <= 0:
        raise BadRequestError("Nominal must be greater than 0")
    return nominal


def _history(db: Session, user: User, total_dues: int) -> PaymentHistoryResponse:
    payments = payment_store.list_payments_for_user(db, user.id)
    return PaymentHistoryResponse(
        virtual_account=user.virtual_account or "",
        summary=payment_store.summarize_payments(db, user.id, total_dues),
        payments=[PaymentOut.model_validate(p) for p in payments],
        user=UserOut.model_validate(user),
    )


@router.get("/payments/my-history", response_model=PaymentHistoryResponse)
def get_my_payment_history(
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
    settings: AppSettings,
) -> PaymentHistoryResponse:
    """Payment history, balance summary and virtual account of the caller."""
    user = user_store.get_user_by_id(db, identity.user_id)
    if user is None:
        raise NotFoundError("User not found")
    return _history(db, user, settings.DUES_TOTAL)


@router.get("/admin/payments", response_model=list[PaymentOut])
def list_all_payments(
    _admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> list[PaymentOut]:
    """Every payment with its owner, newest first."""
    return [PaymentOut.model_validate(p) for p in payment_store.list_all_payments(db)]


@router.post("/admin/payments", response_model=PaymentOut, status_code=status.HTTP_201_CREATED)
def create_payment(
    body: CreatePaymentRequest,
    admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> PaymentOut:
    """Record a payment for an existing user."""
    if not body.user_id:
        raise BadRequestError("user_id is required")
    tanggal = parse_tanggal(body.tanggal)
    nominal = _validate_nominal(body.nominal)

    if user_store.get_user_by_id(db, body.user_id) is None:
        raise NotFoundError("User not found")

    payment = payment_store.create_payment(
        db,
        user_id=body.user_id,
        tanggal=tanggal,
        nominal=nominal,
        keterangan=body.keterangan,
    )
    logger.info(
        "Admin id=%s recorded payment id=%s for user id=%s nominal=%s",
        admin.user_id,
        payment.id,
        payment.user_id,
        payment.nominal,
    )
    return PaymentOut.model_validate(payment)


@router.get("/admin/payments/by-user", response_model=list[PaymentOut])
def get_payments_by_user(
    _admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
    user_id: Annotated[str | None, Query()] = None,
) -> list[PaymentOut]:
    """Payments of one user id; an unknown or deleted user simply has none."""
    owner_id = parse_id(user_id, "user_id")
    payments = payment_store.list_payments_for_user(db, owner_id)
    logger.debug("by-user user_id=%s returns %d payments", owner_id, len(payments))
    return [PaymentOut.model_validate(p) for p in payments]


@router.get("/admin/payments/by-nis", response_model=PaymentHistoryResponse)
def get_payments_by_nis(
    _admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
    settings: AppSettings,
    nis: Annotated[str | None, Query()] = None,
) -> PaymentHistoryResponse:
    """Payment history of the student identified by NIS."""
    nis = (nis or "").strip()
    if not nis:
        raise BadRequestError("nis is required")
    user = user_store.get_user_by_nis(db, nis)
    if user is None:
        logger.info("by-nis: no user for nis=%r", nis)
        raise NotFoundError("User not found")
    return _history(db, user, settings.DUES_TOTAL)


@router.delete("/admin/payments/delete", response_model=MessageResponse)
def delete_payment(
    admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
    settings: AppSettings,
    payment_id: Annotated[str | None, Query()] = None,
) -> MessageResponse:
    pid = parse_id(payment_id, "payment_id")
    payment = payment_store.get_payment_by_id(db, pid)
    if payment is None:
        raise NotFoundError("Payment not found")
    payment_store.delete_payment(db, payment)
    logger.info("Admin id=%s deleted payment id=%s", admin.user_id, pid)
    return MessageResponse(message=translate("Payment deleted successfully", settings.LOCALE))


@router.put("/admin/payments/edit", response_model=PaymentOut)
def update_payment(
    body: UpdatePaymentRequest,
    admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> PaymentOut:
    """Partial update: only tanggal, nominal and keterangan that are present change."""
    if not body.payment_id:
        raise BadRequestError("payment_id is required")

    payment = payment_store.get_payment_by_id(db, body.payment_id)
    if payment is None:
        raise NotFoundError("Payment not found")

    if body.tanggal is None and body.nominal is None and body.keterangan is None:
        raise BadRequestError("No fields to update")
    tanggal = parse_tanggal(body.tanggal) if body.tanggal is not None else None
    nominal = _validate_nominal(body.nominal) if body.nominal is not None else None

    updated = payment_store.update_payment(
        db,
        payment,
        tanggal=tanggal,
        nominal=nominal,
        keterangan=body.keterangan,
    )
    logger.info("Admin id=%s updated payment id=%s", admin.user_id, updated.id)
    return PaymentOut.model_validate(updated)
