"""Reusable FastAPI dependencies: settings, token service, and the authorization gate."""

import logging
from typing import Annotated

from fastapi import Depends, Header, Request

from app.core.config import Settings
from app.core.errors import ForbiddenError, UnauthorizedError
from app.core.security import InvalidTokenError, TokenExpiredError, TokenService
from app.schemas.auth import Identity

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_app_settings(request: Request) -> Settings:
    """Settings built once at startup and attached to the app by create_app()."""
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_current_identity(
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> Identity:
    """
    Authenticate: require "Authorization: Bearer <token>" and return the verified identity.

    The token is checked in-process only (signature and expiry); the user row is
    not loaded. Expired and otherwise invalid tokens get the same 401 message.
    """
    if not authorization:
        raise UnauthorizedError("Authorization header required")
    if not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Invalid Authorization format")

    token = authorization[len(BEARER_PREFIX):].strip()
    try:
        return tokens.validate(token)
    except TokenExpiredError:
        logger.info("Rejected expired token")
        raise UnauthorizedError("Invalid token")
    except InvalidTokenError as e:
        logger.info("Rejected invalid token: %s", e.message)
        raise UnauthorizedError("Invalid token")


def require_admin(
    identity: Annotated[Identity, Depends(get_current_identity)],
) -> Identity:
    """RequireRole(admin): authenticate, then reject non-admin callers with 403."""
    if not identity.is_admin:
        raise ForbiddenError("Admin access required")
    return identity


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
AdminIdentity = Annotated[Identity, Depends(require_admin)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
