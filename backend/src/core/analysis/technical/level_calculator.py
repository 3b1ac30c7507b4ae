"""
Fibonacci level calculation.
Handles computation of retracement levels inside a swing and extension levels projected beyond it.
"""

from typing import Literal

import structlog

from ....api.models import FibonacciLevel
from .config import FibonacciConstants, round_price

logger = structlog.get_logger()


class LevelCalculator:
    """Calculates Fibonacci retracement and extension levels."""

    def __init__(self):
        """Initialize calculator with standard Fibonacci constants."""
        self.constants = FibonacciConstants()

    def calculate_fibonacci_retracement(
        self, swing_high: float, swing_low: float, is_uptrend: bool
    ) -> list[FibonacciLevel]:
        """
        Calculate retracement levels for a swing.

        Uptrends retrace down from the high, downtrends retrace up from the low.
        """
        price_range = swing_high - swing_low

        prices = [
            # For uptrends, retracements are levels below the high
            swing_high - price_range * level
            if is_uptrend
            # For downtrends, retracements are levels above the low
            else swing_low + price_range * level
            for level in self.constants.RETRACEMENT_LEVELS
        ]
        levels = self._build_levels(
            self.constants.RETRACEMENT_LEVELS, prices, "retracement"
        )

        logger.debug(
            "Calculated Fibonacci retracement",
            is_uptrend=is_uptrend,
            price_range=price_range,
            levels_count=len(levels),
        )
        return levels

    def calculate_fibonacci_extension(
        self, swing_high: float, swing_low: float, is_uptrend: bool
    ) -> list[FibonacciLevel]:
        """
        Calculate extension levels for a swing.

        Uptrends extend up from the low past the high, downtrends extend down
        from the high past the low.
        """
        price_range = swing_high - swing_low

        prices = [
            swing_low + price_range * level
            if is_uptrend
            else swing_high - price_range * level
            for level in self.constants.EXTENSION_LEVELS
        ]
        levels = self._build_levels(self.constants.EXTENSION_LEVELS, prices, "extension")

        logger.debug(
            "Calculated Fibonacci extension",
            is_uptrend=is_uptrend,
            price_range=price_range,
            levels_count=len(levels),
        )
        return levels

    @staticmethod
    def _build_levels(
        ratios: list[float],
        prices: list[float],
        level_type: Literal["retracement", "extension"],
    ) -> list[FibonacciLevel]:
        return [
            FibonacciLevel(
                level=ratio,
                price=round_price(price),
                label=f"{ratio * 100:.1f}%",
                type=level_type,
            )
            for ratio, price in zip(ratios, prices, strict=True)
        ]
