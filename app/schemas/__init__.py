"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AdminLoginRequest,
    ChangePasswordRequest,
    Identity,
    LoginResponse,
    MessageResponse,
    StudentLoginRequest,
    USER_ROLES,
    UserRole,
)
from app.schemas.health import HealthResponse, RootResponse
from app.schemas.payment import (
    CreatePaymentRequest,
    PaymentHistoryResponse,
    PaymentOut,
    PaymentOwner,
    PaymentSummary,
    UpdatePaymentRequest,
)
from app.schemas.user import CreateStudentRequest, ResetPasswordRequest, UserOut

__all__ = [
    "AdminLoginRequest",
    "ChangePasswordRequest",
    "CreatePaymentRequest",
    "CreateStudentRequest",
    "HealthResponse",
    "Identity",
    "LoginResponse",
    "MessageResponse",
    "PaymentHistoryResponse",
    "PaymentOut",
    "PaymentOwner",
    "PaymentSummary",
    "ResetPasswordRequest",
    "RootResponse",
    "StudentLoginRequest",
    "USER_ROLES",
    "UpdatePaymentRequest",
    "UserOut",
    "UserRole",
]
