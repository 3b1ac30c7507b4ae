"""
Main technical analysis engine.
Orchestrates swing location, trend classification, Fibonacci/Gann level calculation and PRZ detection.
"""

from collections.abc import Sequence

import structlog

from ....api.models import (
    FibonacciLevels,
    PricePoint,
    SwingSummary,
    TechnicalAnalysis,
)
from ...exceptions import ValidationError
from .config import PRZConstants, TrendConstants
from .gann_projector import GannProjector
from .level_calculator import LevelCalculator
from .prz_detector import PRZDetector
from .swing_locator import find_swing_points
from .trend_detector import TrendDetector

logger = structlog.get_logger()


class TechnicalAnalyzer:
    """Fibonacci/Gann/PRZ analyzer over a date-ascending price series."""

    def __init__(
        self,
        tolerance: float = PRZConstants.DEFAULT_TOLERANCE,
        neutral_band: float = TrendConstants.NEUTRAL_BAND,
    ):
        """Initialize analyzer with modular components."""
        self.trend_detector = TrendDetector(neutral_band)
        self.level_calculator = LevelCalculator()
        self.gann_projector = GannProjector()
        self.prz_detector = PRZDetector(tolerance)

    def analyze(
        self, prices: Sequence[PricePoint], tolerance: float | None = None
    ) -> TechnicalAnalysis:
        """
        Perform the full technical analysis of a price series.

        The series must be sorted oldest first; ordering is not verified.

        Args:
            prices: Non-empty, date-ascending price series
            tolerance: PRZ tolerance override (defaults to the detector's)

        Returns:
            TechnicalAnalysis with Fibonacci, Gann and PRZ results

        Raises:
            ValidationError: If the series is empty
        """
        if not prices:
            raise ValidationError("Technical analysis requires a non-empty price series")

        swing = find_swing_points(prices)
        trend = self.trend_detector.determine_trend(prices, swing.high, swing.low)

        # A later swing high anchors levels as an uptrend even when the label is neutral
        is_uptrend = trend == "bullish" or swing.high_index > swing.low_index

        retracement = self.level_calculator.calculate_fibonacci_retracement(
            swing.high, swing.low, is_uptrend
        )
        extension = self.level_calculator.calculate_fibonacci_extension(
            swing.high, swing.low, is_uptrend
        )
        gann_levels = self.gann_projector.calculate_gann_levels(
            swing.high, swing.low, len(prices), is_uptrend
        )
        prz_zones = self.prz_detector.find_prz(
            retracement, extension, gann_levels, tolerance=tolerance
        )

        logger.info(
            "Technical analysis completed",
            bars_count=len(prices),
            trend=trend,
            is_uptrend=is_uptrend,
            swing_high=swing.high,
            swing_low=swing.low,
            prz_zones=len(prz_zones),
            strong_zones=sum(1 for zone in prz_zones if zone.strength == "strong"),
        )

        return TechnicalAnalysis(
            fibonacci=FibonacciLevels(retracement=retracement, extension=extension),
            gann=gann_levels,
            prz=prz_zones,
            swing=SwingSummary(
                high=swing.high,
                low=swing.low,
                high_date=swing.high_date,
                low_date=swing.low_date,
            ),
            trend=trend,
        )


def perform_technical_analysis(
    prices: Sequence[PricePoint],
    tolerance: float = PRZConstants.DEFAULT_TOLERANCE,
) -> TechnicalAnalysis:
    """Run a one-off analysis with the given PRZ tolerance."""
    return TechnicalAnalyzer(tolerance=tolerance).analyze(prices)
