"""
Pivot-point support and resistance.
Classic floor-trader pivots computed from the high, low and last close of a series.
"""

from collections.abc import Sequence

from ....api.models import PricePoint, SupportResistance
from ...exceptions import ValidationError
from .config import round_price


def calculate_support_resistance(
    prices: Sequence[PricePoint], current_price: float
) -> SupportResistance:
    """
    Calculate pivot support/resistance relative to the current price.

    Pivot ``P = (H + L + C) / 3`` over closing prices, with ``R1 = 2P - L``,
    ``R2 = P + (H - L)``, ``S1 = 2P - H``, ``S2 = P - (H - L)``. Only
    resistances above and supports below ``current_price`` are kept, each list
    ordered nearest first.

    Raises:
        ValidationError: If the series is empty
    """
    if not prices:
        raise ValidationError("Support/resistance requires a non-empty price series")

    closes = [point.price for point in prices]
    high = max(closes)
    low = min(closes)
    close = closes[-1]

    pivot = (high + low + close) / 3
    r1 = 2 * pivot - low
    r2 = pivot + (high - low)
    s1 = 2 * pivot - high
    s2 = pivot - (high - low)

    resistance = [round_price(level) for level in (r1, r2) if level > current_price]
    support = [round_price(level) for level in (s1, s2) if level < current_price]

    return SupportResistance(
        support=sorted(support, reverse=True),
        resistance=sorted(resistance),
    )
