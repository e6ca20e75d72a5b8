"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from app import __version__
from app.api import router as api_router
from app.api import health
from app.core.config import DEFAULT_JWT_SECRET, Settings, get_settings
from app.core.database import build_engine, build_session_factory
from app.core.errors import register_exception_handlers
from app.core.security import TokenService
from app.middleware.cors import CORSNegotiatorMiddleware
from app.models import Base
from app.services.users import seed_default_admin

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=app.state.engine)

    db = app.state.session_factory()
    try:
        seed_default_admin(db, settings)
    finally:
        db.close()

    try:
        yield
    finally:
        app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application around one Settings instance.

    Settings, the database engine/session factory and the token service are
    created here once and shared read-only through app.state.
    """
    settings = settings or get_settings()
    if settings.is_production and settings.JWT_SECRET.get_secret_value() == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is the built-in default; set JWT_SECRET in production")

    app = FastAPI(
        title="Komite Sekolah API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_service = TokenService.from_settings(settings)

    register_exception_handlers(app)
    app.add_middleware(CORSNegotiatorMiddleware, settings=settings)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix="/api")
    return app


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    settings = get_settings()
    logger.info("Server starting on port %s (%s)", settings.SERVER_PORT, settings.ENVIRONMENT)
    uvicorn.run(create_app(settings), host=settings.SERVER_HOST, port=settings.SERVER_PORT)


if __name__ == "__main__":
    main()
