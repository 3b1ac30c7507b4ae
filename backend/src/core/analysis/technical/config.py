"""
Technical analysis configuration and constants.
Contains the Fibonacci ratios, Gann angle table and confluence parameters used across the analysis engine.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class GannAngle:
    """One entry of the fixed Gann angle table."""

    ratio: float  # Price units per time unit
    label: str
    angle: float  # Geometric angle in degrees (informational)


class FibonacciConstants:
    """Standard Fibonacci ratios used for retracement and extension levels."""

    # Pullback levels inside the swing (0% = anchor, 100% = opposite extreme)
    RETRACEMENT_LEVELS: list[float] = [0.0, 0.236, 0.382, 0.5, 0.618, 0.786, 1.0]

    # Projection levels beyond the swing
    EXTENSION_LEVELS: list[float] = [1.0, 1.272, 1.414, 1.618, 2.0, 2.618, 3.618]


class GannConstants:
    """Gann angle table, ordered from steepest (1×8) to flattest (8×1)."""

    ANGLES: list[GannAngle] = [
        GannAngle(1 / 8, "1×8", 82.5),
        GannAngle(1 / 4, "1×4", 75.0),
        GannAngle(1 / 3, "1×3", 71.25),
        GannAngle(1 / 2, "1×2", 63.75),
        GannAngle(1.0, "1×1", 45.0),
        GannAngle(2.0, "2×1", 26.25),
        GannAngle(3.0, "3×1", 18.75),
        GannAngle(4.0, "4×1", 15.0),
        GannAngle(8.0, "8×1", 7.5),
    ]

    # Square of 9: each 45° step is 1/8 of a full rotation around the square root
    SQUARE_OF_9_STEP: float = 0.125
    SQUARE_OF_9_STEPS: int = 8


class TrendConstants:
    """Midpoint band used to label a series bullish/bearish/neutral."""

    NEUTRAL_BAND: float = 0.1  # Fraction of swing range on each side of the midpoint


class PRZConstants:
    """Potential Reversal Zone clustering parameters."""

    DEFAULT_TOLERANCE: float = 0.02  # 2% of the anchor (lowest) price in a cluster

    MIN_CONFLUENCES: int = 2
    MEDIUM_CONFLUENCES: int = 3
    STRONG_CONFLUENCES: int = 4

    # Source prefixes shown on the dashboard next to each confluent level
    RETRACEMENT_PREFIX: str = "فیبو"
    EXTENSION_PREFIX: str = "اکستنشن"
    GANN_PREFIX: str = "گن"


def round_price(value: float) -> int:
    """Round to the nearest integer unit, halves rounding up (toward +inf)."""
    return math.floor(value + 0.5)
