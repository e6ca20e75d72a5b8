"""Payment store: create, list, update, delete, and per-student summaries."""

from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.models import Payment
from app.schemas.payment import PaymentSummary

_NEWEST_FIRST = (Payment.tanggal.desc(), Payment.created_at.desc(), Payment.id.desc())


def create_payment(
    db: Session,
    user_id: int,
    tanggal: date,
    nominal: int,
    keterangan: str | None = None,
) -> Payment:
    payment = Payment(user_id=user_id, tanggal=tanggal, nominal=nominal, keterangan=keterangan)
    db.add(payment)
    db.commit()
    db.refresh(payment)
    return payment


def get_payment_by_id(db: Session, payment_id: int) -> Payment | None:
    return db.get(Payment, payment_id)


def list_payments_for_user(db: Session, user_id: int) -> list[Payment]:
    """Payments owned by user_id, newest first, with the owner loaded."""
    return (
        db.query(Payment)
        .options(joinedload(Payment.user))
        .filter(Payment.user_id == user_id)
        .order_by(*_NEWEST_FIRST)
        .all()
    )


def list_all_payments(db: Session) -> list[Payment]:
    return db.query(Payment).options(joinedload(Payment.user)).order_by(*_NEWEST_FIRST).all()


def update_payment(
    db: Session,
    payment: Payment,
    tanggal: date | None = None,
    nominal: int | None = None,
    keterangan: str | None = None,
) -> Payment:
    """Change only the given fields; updated_at is bumped by the database."""
    if tanggal is not None:
        payment.tanggal = tanggal
    if nominal is not None:
        payment.nominal = nominal
    if keterangan is not None:
        payment.keterangan = keterangan
    db.commit()
    db.refresh(payment)
    return payment


def delete_payment(db: Session, payment: Payment) -> None:
    db.delete(payment)
    db.commit()


def summarize_payments(db: Session, user_id: int, total_dues: int) -> PaymentSummary:
    total_paid, count = (
        db.query(func.coalesce(func.sum(Payment.nominal), 0), func.count(Payment.id))
        .filter(Payment.user_id == user_id)
        .one()
    )
    return PaymentSummary(
        total_tagihan=total_dues,
        total_pembayaran=int(total_paid),
        sisa_tagihan=total_dues - int(total_paid),
        jumlah_transaksi=int(count),
    )
