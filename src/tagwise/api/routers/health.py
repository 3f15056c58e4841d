"""Health check endpoint."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tagwise import __version__
from tagwise.api.deps import get_db
from tagwise.api.schemas.responses import ApiResponse

logger = logging.getLogger(__name__)


class HealthStatus(BaseModel):
    """Application health status."""

    model_config = ConfigDict(strict=True)

    status: str  # "healthy", "unhealthy"
    version: str
    database: str  # "connected", "disconnected"
    database_latency_ms: Optional[int] = None
    timestamp: datetime


class HealthResponse(ApiResponse[HealthStatus]):
    """Response for health check endpoint."""

    pass


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(session: AsyncSession = Depends(get_db)) -> HealthResponse:
    """Report application version and database connectivity."""
    db_status = "disconnected"
    db_latency_ms: Optional[int] = None
    try:
        start = time.monotonic()
        await session.execute(text("SELECT 1"))
        db_latency_ms = int((time.monotonic() - start) * 1000)
        db_status = "connected"
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check database query failed: %s", e)
        await session.rollback()

    return HealthResponse(
        data=HealthStatus(
            status="healthy" if db_status == "connected" else "unhealthy",
            version=__version__,
            database=db_status,
            database_latency_ms=db_latency_ms,
            timestamp=datetime.now(timezone.utc),
        )
    )
