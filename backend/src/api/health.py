"""
Liveness endpoint for the analysis backend.

The engine runs in-process with no database or cache behind it, so the
service is healthy whenever it can answer.
"""

from typing import Any

import structlog
from fastapi import APIRouter, Depends

from ..core.config import Settings, get_settings

logger = structlog.get_logger()

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Report status with the running environment and version."""
    logger.debug("Health check", environment=settings.environment)
    return {
        "status": "ok",
        "environment": settings.environment,
        "version": settings.app_version,
    }
