"""ASGI middleware."""

from app.middleware.cors import CORSNegotiatorMiddleware, CorsDecision, negotiate_origin

__all__ = ["CORSNegotiatorMiddleware", "CorsDecision", "negotiate_origin"]
