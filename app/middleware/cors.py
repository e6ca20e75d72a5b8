"""
CORS origin negotiation.

Single policy for every route: exact-match allow-list, "*" only outside
production, and credentials only when a concrete origin is echoed back.
"""

import logging
from dataclasses import dataclass

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.core.config import Settings
from app.core.errors import ApiError, ForbiddenError, InternalError, error_response

logger = logging.getLogger(__name__)

ALLOW_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
ALLOW_HEADERS = "Content-Type,Authorization"
WILDCARD = "*"


@dataclass(frozen=True)
class CorsDecision:
    """Outcome for a browser request whose origin is allowed."""

    allowed_origin: str

    @property
    def allow_credentials(self) -> bool:
        # Browsers refuse credentials together with a wildcard origin.
        return self.allowed_origin != WILDCARD


def negotiate_origin(request_origin: str, allowed_origins: str, environment: str) -> CorsDecision:
    """
    Decide whether request_origin may use the API.

    allowed_origins is the raw configured value: comma-separated exact origins
    or "*". Raises InternalError for a misconfigured allow-list and
    ForbiddenError when the origin is not listed.
    """
    allowed = allowed_origins.strip()
    if not allowed:
        raise InternalError("CORS misconfiguration: ALLOWED_ORIGINS is empty")

    if allowed == WILDCARD:
        if environment == "production":
            raise InternalError("CORS misconfiguration: ALLOWED_ORIGINS cannot be * in production")
        return CorsDecision(allowed_origin=WILDCARD)

    for origin in allowed.split(","):
        origin = origin.strip()
        if origin and origin == request_origin:
            return CorsDecision(allowed_origin=origin)

    raise ForbiddenError("CORS: Origin not allowed")


def apply_cors_headers(response: Response, decision: CorsDecision | None) -> None:
    """Set CORS headers; decision is None for requests without an Origin header."""
    if decision is not None:
        response.headers["Vary"] = "Origin"
        response.headers["Access-Control-Allow-Origin"] = decision.allowed_origin
        if decision.allow_credentials:
            response.headers["Access-Control-Allow-Credentials"] = "true"
    response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
    response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS


class CORSNegotiatorMiddleware(BaseHTTPMiddleware):
    """Apply negotiate_origin() to every request and answer preflight OPTIONS requests."""

    def __init__(self, app: ASGIApp, settings: Settings) -> None:
        super().__init__(app)
        self.allowed_origins = settings.ALLOWED_ORIGINS
        self.environment = settings.ENVIRONMENT
        self.locale = settings.LOCALE

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_origin = request.headers.get("origin", "")

        decision: CorsDecision | None = None
        # Non-browser clients (curl, server-to-server) send no Origin; CORS does not apply.
        if request_origin:
            try:
                decision = negotiate_origin(request_origin, self.allowed_origins, self.environment)
            except ApiError as e:
                logger.warning(
                    "CORS rejected %s %s from origin=%r: %s",
                    request.method,
                    request.url.path,
                    request_origin,
                    e.message,
                )
                return error_response(e.status_code, e.message, self.locale)
            logger.debug("CORS allowed origin=%r", decision.allowed_origin)

        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_200_OK)
        else:
            response = await call_next(request)
        apply_cors_headers(response, decision)
        return response
