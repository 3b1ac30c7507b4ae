"""
Technical analysis endpoints.

Provides Fibonacci retracement/extension, Gann angle and PRZ confluence
analysis for the dashboard's chart overlay, either over a caller-supplied
price series or over a synthesized history for a dashboard asset.
"""

import time

import structlog
from fastapi import APIRouter, Depends, Query

from ...core.analysis.technical import TechnicalAnalyzer, calculate_support_resistance
from ...core.config import Settings, get_settings
from ...core.data.price_history import generate_mock_history
from ..models import (
    AssetListResponse,
    MockAnalysisResponse,
    TechnicalAnalysisRequest,
    TechnicalAnalysisResponse,
)
from .shared import ANALYSIS_ASSETS, get_analyzer, get_asset, validate_days

logger = structlog.get_logger()
router = APIRouter()


@router.get("/assets", response_model=AssetListResponse)
async def list_assets() -> AssetListResponse:
    """List the assets available on the analysis dashboard."""
    return AssetListResponse(data=ANALYSIS_ASSETS)


@router.post("/technical", response_model=TechnicalAnalysisResponse)
async def technical_analysis(
    request: TechnicalAnalysisRequest,
    analyzer: TechnicalAnalyzer = Depends(get_analyzer),
) -> TechnicalAnalysisResponse:
    """
    Analyse a caller-supplied price series.

    The series must be sorted oldest first. Support/resistance is measured
    against ``current_price``, which defaults to the last close.
    """
    request_start_time = time.time()
    logger.info(
        "Technical analysis request received",
        bars_count=len(request.prices),
        tolerance=request.tolerance,
    )

    analysis = analyzer.analyze(request.prices, tolerance=request.tolerance)
    current_price = request.current_price or request.prices[-1].price
    support_resistance = calculate_support_resistance(request.prices, current_price)

    logger.info(
        "Technical analysis request completed",
        trend=analysis.trend,
        prz_zones=len(analysis.prz),
        total_duration_ms=round((time.time() - request_start_time) * 1000, 2),
    )
    return TechnicalAnalysisResponse(
        current_price=current_price,
        analysis=analysis,
        support_resistance=support_resistance,
    )


@router.get("/technical/{slug}/mock", response_model=MockAnalysisResponse)
async def mock_technical_analysis(
    slug: str,
    current_price: float = Query(..., gt=0, description="Live price of the asset"),
    days: int | None = Query(default=None, description="History length in days"),
    seed: int | None = Query(default=None, description="Seed for reproducible history"),
    analyzer: TechnicalAnalyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_settings),
) -> MockAnalysisResponse:
    """
    Analyse a synthesized history for a dashboard asset.

    The history is a random walk seeded from ``current_price``; it stands in
    for a historical price feed.
    """
    asset = get_asset(slug)
    days = settings.analysis_default_days if days is None else days
    validate_days(days, settings)
    seed = settings.mock_history_seed if seed is None else seed

    logger.info(
        "Mock technical analysis request received",
        slug=slug,
        current_price=current_price,
        days=days,
    )

    history = generate_mock_history(current_price, days=days, seed=seed)
    analysis = analyzer.analyze(history)
    support_resistance = calculate_support_resistance(history, current_price)

    return MockAnalysisResponse(
        asset=asset,
        days=days,
        current_price=current_price,
        historical_prices=history,
        analysis=analysis,
        support_resistance=support_resistance,
    )
