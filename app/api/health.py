"""Root discovery and health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app import __version__
from app.core.database import check_db_connected, get_db
from app.core.dependencies import AppSettings
from app.schemas.health import HealthResponse, RootResponse

router = APIRouter()


@router.get("/", response_model=RootResponse)
def root() -> RootResponse:
    """Root route; minimal payload for discovery."""
    return RootResponse(message="Komite Sekolah API", version=__version__)


@router.get("/health", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    settings: AppSettings,
) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        environment=settings.ENVIRONMENT,
        database=db_status,
    )
