"""
Trend classification for technical analysis.
Labels a series bullish, bearish or neutral from where its latest price sits inside the swing range.
"""

from collections.abc import Sequence

from ....api.models import PricePoint, Trend
from .config import TrendConstants


class TrendDetector:
    """Classifies trend using a neutral band around the swing midpoint."""

    def __init__(self, neutral_band: float = TrendConstants.NEUTRAL_BAND):
        """Initialize with the neutral band as a fraction of the swing range."""
        self.neutral_band = neutral_band

    def determine_trend(
        self, prices: Sequence[PricePoint], swing_high: float, swing_low: float
    ) -> Trend:
        """
        Label the series from its last price.

        Bullish above ``midpoint + band * range``, bearish below
        ``midpoint - band * range``, neutral in between (and for series shorter
        than two points). The band keeps the label from flipping on small moves
        around the midpoint.
        """
        if len(prices) < 2:
            return "neutral"

        current_price = prices[-1].price
        midpoint = (swing_high + swing_low) / 2
        band = (swing_high - swing_low) * self.neutral_band

        if current_price > midpoint + band:
            return "bullish"
        if current_price < midpoint - band:
            return "bearish"
        return "neutral"
