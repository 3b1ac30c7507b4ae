"""
Gann level projection.

Projects one static price level per Gann angle from the swing anchor. The
projection is a snapshot at the current bar count: ``price_per_bar`` is the
swing range spread over the series length and is multiplied back by the same
bar count, so each level moves ``price_range * ratio`` away from the anchor.
This differs from a classical Gann fan, where each angle is a line whose price
grows per elapsed bar from a fixed pivot.
"""

import math

import structlog

from ....api.models import GannLevel
from ...exceptions import ValidationError
from .config import GannConstants, round_price

logger = structlog.get_logger()


class GannProjector:
    """Calculates Gann angle levels and Square of 9 levels."""

    def __init__(self):
        """Initialize projector with the fixed Gann angle table."""
        self.constants = GannConstants()

    def calculate_gann_levels(
        self,
        swing_high: float,
        swing_low: float,
        bars_count: int,
        is_uptrend: bool,
    ) -> list[GannLevel]:
        """
        Calculate one level per Gann angle.

        Uptrends project up from the swing low, downtrends down from the swing high.

        Raises:
            ValidationError: If bars_count is not positive
        """
        if bars_count <= 0:
            raise ValidationError(
                "Gann projection requires at least one bar", bars_count=bars_count
            )

        price_range = swing_high - swing_low
        base_price = swing_low if is_uptrend else swing_high
        price_per_bar = price_range / bars_count

        levels = []
        for gann_angle in self.constants.ANGLES:
            price_move = price_per_bar * bars_count * gann_angle.ratio
            price = base_price + price_move if is_uptrend else base_price - price_move
            levels.append(
                GannLevel(
                    angle=gann_angle.angle,
                    price=round_price(price),
                    label=gann_angle.label,
                )
            )

        logger.debug(
            "Calculated Gann levels",
            is_uptrend=is_uptrend,
            bars_count=bars_count,
            base_price=base_price,
            levels_count=len(levels),
        )
        return levels

    def calculate_square_of_9(self, base_price: float) -> list[int]:
        """
        Calculate Gann Square of 9 levels around a price.

        Steps the square root of the price by 1/8 of a rotation (45°) up to a
        full turn in both directions and squares back. Duplicates are removed
        and levels are returned ascending.

        Raises:
            ValidationError: If base_price is not positive
        """
        if base_price <= 0:
            raise ValidationError(
                "Square of 9 requires a positive base price", base_price=base_price
            )

        root = math.sqrt(base_price)
        levels: set[int] = set()
        for step in range(1, self.constants.SQUARE_OF_9_STEPS + 1):
            increment = step * self.constants.SQUARE_OF_9_STEP
            levels.add(round_price((root + increment) ** 2))
            levels.add(round_price((root - increment) ** 2))

        return sorted(levels)
