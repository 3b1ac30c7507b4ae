"""
Analysis API package.

Mounts the technical analysis endpoints under `/api/analysis`: the asset
list, analysis of a posted price series and analysis of a mock history.
"""

from fastapi import APIRouter

from .shared import ANALYSIS_ASSETS
from .technical import router as technical_router

router = APIRouter(prefix="/api/analysis", tags=["Technical Analysis"])
router.include_router(technical_router)

__all__ = [
    "router",
    "ANALYSIS_ASSETS",
]
