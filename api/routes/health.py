"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings
from api.dependencies import get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Runs a trivial query against the products table.
    """
    try:
        get_container().db.table("products").select("id").limit(1).execute()
        database = "connected"
    except Exception as e:
        logger.warning(f"Readiness check failed: {e}")
        database = "unavailable"

    return ReadinessResponse(
        status="ready" if database == "connected" else "degraded",
        database=database,
    )
