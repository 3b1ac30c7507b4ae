"""
Price history utilities for the analysis dashboard.

Builds date-ascending PricePoint series with Jalali dates, either synthesized
as a random walk around a live price or converted from an OHLC DataFrame.
"""

from datetime import date, timedelta

import jdatetime
import numpy as np
import pandas as pd
import structlog

from ...api.models import PricePoint
from ..analysis.technical.config import round_price
from ..exceptions import ValidationError

logger = structlog.get_logger()

JALALI_DATE_FORMAT = "%Y/%m/%d"

# Random walk parameters for synthesized history
MOCK_START_RATIO = 0.95  # Walk starts 5% below the current price
MOCK_VOLATILITY = 0.02  # Daily step scale: 2% of the current price
MOCK_DRIFT_CENTER = 0.45  # Step = (u - 0.45) * volatility, a slight upward bias
MOCK_WICK_RATIO = 0.5  # Intraday high/low spread up to half the volatility


def to_jalali(value: date) -> str:
    """Format a Gregorian date as a Jalali YYYY/MM/DD string."""
    return jdatetime.date.fromgregorian(date=value).strftime(JALALI_DATE_FORMAT)


def jalali_dates(days: int, end: date | None = None) -> list[str]:
    """
    Build consecutive Jalali date strings, oldest first.

    Args:
        days: Number of dates
        end: Last Gregorian date of the window (defaults to today)

    Returns:
        List of YYYY/MM/DD Jalali dates ending at ``end``
    """
    end = end or date.today()
    return [to_jalali(end - timedelta(days=offset)) for offset in range(days - 1, -1, -1)]


def generate_mock_history(
    current_price: float,
    days: int = 30,
    seed: int | None = None,
    end: date | None = None,
) -> list[PricePoint]:
    """
    Synthesize a daily price history that walks toward the current price.

    Stands in for a historical feed: the walk starts 5% below the current
    price and takes one random step per day with a slight upward bias.

    Args:
        current_price: Live price the history is seeded from
        days: Number of daily points
        seed: Seed for reproducible output
        end: Date of the last point (defaults to today)

    Returns:
        Date-ascending price series with intraday high/low

    Raises:
        ValidationError: If days < 1 or current_price is not positive
    """
    if days < 1:
        raise ValidationError("Mock history needs at least one day", days=days)
    if current_price <= 0:
        raise ValidationError(
            "Mock history needs a positive current price", current_price=current_price
        )

    rng = np.random.default_rng(seed)
    volatility = current_price * MOCK_VOLATILITY
    price = current_price * MOCK_START_RATIO

    history = []
    for day in jalali_dates(days, end):
        price += (rng.random() - MOCK_DRIFT_CENTER) * volatility
        high = price + rng.random() * volatility * MOCK_WICK_RATIO
        low = price - rng.random() * volatility * MOCK_WICK_RATIO

        # Prices are whole currency units and must stay positive
        history.append(
            PricePoint(
                date=day,
                price=max(round_price(price), 1),
                high=max(round_price(high), 1),
                low=max(round_price(low), 1),
            )
        )

    logger.info(
        "Generated mock price history",
        current_price=current_price,
        days=days,
        seed=seed,
        first_date=history[0].date,
        last_date=history[-1].date,
    )
    return history


def price_points_from_dataframe(data: pd.DataFrame) -> list[PricePoint]:
    """
    Convert an OHLC DataFrame with a DatetimeIndex into a price series.

    Uses ``Close`` as the price and ``High``/``Low`` when those columns exist.
    Rows without a close are dropped and the result is sorted oldest first.

    Raises:
        ValidationError: If the Close column is missing
    """
    if "Close" not in data.columns:
        raise ValidationError("Missing required column: Close", columns=list(data.columns))

    frame = data.dropna(subset=["Close"]).sort_index()
    has_high = "High" in frame.columns
    has_low = "Low" in frame.columns

    points = []
    for timestamp, row in frame.iterrows():
        high = row["High"] if has_high and pd.notna(row["High"]) else None
        low = row["Low"] if has_low and pd.notna(row["Low"]) else None
        points.append(
            PricePoint(
                date=to_jalali(pd.Timestamp(timestamp).date()),
                price=float(row["Close"]),
                high=float(high) if high is not None else None,
                low=float(low) if low is not None else None,
            )
        )

    logger.debug(
        "Converted OHLC frame to price series",
        rows=len(data),
        points=len(points),
    )
    return points
