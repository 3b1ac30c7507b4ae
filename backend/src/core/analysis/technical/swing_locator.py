"""
Swing point location for technical analysis.
Finds the global high and low of a price series, used as anchors by every level calculator.
"""

from collections.abc import Sequence

import structlog

from ....api.models import PricePoint, SwingPoints

logger = structlog.get_logger()


def find_swing_points(prices: Sequence[PricePoint]) -> SwingPoints:
    """
    Locate the swing high and swing low of a date-ascending series.

    Intraday ``high``/``low`` are used where present, otherwise ``price``.
    Only strictly greater/lower values replace the running extreme, so on ties
    the earliest occurrence wins. The series is not sorted here.

    An empty series yields a zero-valued swing with empty dates.
    """
    if not prices:
        logger.warning("Swing detection on empty price series")
        return SwingPoints(
            high=0.0, low=0.0, high_date="", low_date="", high_index=0, low_index=0
        )

    first = prices[0]
    high = low = first.price
    high_date = low_date = first.date
    high_index = low_index = 0

    for index, point in enumerate(prices):
        candidate_high = point.high if point.high is not None else point.price
        candidate_low = point.low if point.low is not None else point.price

        if candidate_high > high:
            high = candidate_high
            high_date = point.date
            high_index = index
        if candidate_low < low:
            low = candidate_low
            low_date = point.date
            low_index = index

    return SwingPoints(
        high=high,
        low=low,
        high_date=high_date,
        low_date=low_date,
        high_index=high_index,
        low_index=low_index,
    )
