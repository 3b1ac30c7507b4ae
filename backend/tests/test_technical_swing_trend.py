"""
Unit tests for swing point location and trend classification.

Tests the two leaf components of the technical analysis engine:
- Global swing high/low detection with first-occurrence tie-break
- Intraday high/low fields taking precedence over the close
- Midpoint-band trend labelling
"""

import pytest

from src.api.models import PricePoint
from src.core.analysis.technical import TrendDetector, find_swing_points


def make_series(*prices: float) -> list[PricePoint]:
    """Build a date-ascending close-only series."""
    return [
        PricePoint(date=f"1404/10/{day:02d}", price=price)
        for day, price in enumerate(prices, start=1)
    ]


# ===== Fixtures =====


@pytest.fixture
def detector():
    """Trend detector with the default 10% neutral band"""
    return TrendDetector()


# ===== Swing Locator Tests =====


class TestFindSwingPoints:
    """Test swing high/low detection"""

    def test_three_point_series(self):
        """Test swing bounds, dates and indices of a simple series"""
        # Act
        swing = find_swing_points(make_series(100, 90, 120))

        # Assert
        assert swing.high == 120
        assert swing.high_index == 2
        assert swing.high_date == "1404/10/03"
        assert swing.low == 90
        assert swing.low_index == 1
        assert swing.low_date == "1404/10/02"

    def test_ties_keep_first_occurrence(self):
        """Test that equal extremes do not replace the earliest one"""
        # Act
        swing = find_swing_points(make_series(100, 120, 120, 90, 90))

        # Assert
        assert swing.high_index == 1
        assert swing.high_date == "1404/10/02"
        assert swing.low_index == 3
        assert swing.low_date == "1404/10/04"

    def test_intraday_bounds_take_precedence(self):
        """Test that high/low fields are used instead of the close when present"""
        # Arrange
        prices = [
            PricePoint(date="1404/10/01", price=100, high=105, low=95),
            PricePoint(date="1404/10/02", price=102, high=110, low=99),
            PricePoint(date="1404/10/03", price=101),
        ]

        # Act
        swing = find_swing_points(prices)

        # Assert
        assert swing.high == 110
        assert swing.high_index == 1
        assert swing.low == 95
        assert swing.low_index == 0

    def test_matches_max_and_min_of_series(self):
        """Test swing bounds equal max/min of (high or price) and (low or price)"""
        # Arrange
        closes = [310, 298, 305, 330, 290, 299, 320, 301]
        prices = make_series(*closes)

        # Act
        swing = find_swing_points(prices)

        # Assert
        assert swing.high == max(closes)
        assert swing.low == min(closes)
        assert swing.high_index == closes.index(max(closes))
        assert swing.low_index == closes.index(min(closes))

    def test_single_point_has_zero_range(self):
        """Test that a single point yields high == low"""
        # Act
        swing = find_swing_points(make_series(250))

        # Assert
        assert swing.high == swing.low == 250
        assert swing.high_index == swing.low_index == 0

    def test_empty_series_is_degenerate(self):
        """Test zero-valued swing for an empty series"""
        # Act
        swing = find_swing_points([])

        # Assert
        assert swing.high == 0
        assert swing.low == 0
        assert swing.high_date == ""
        assert swing.low_date == ""

    def test_input_is_not_sorted(self):
        """Test that indices refer to input order, not date order"""
        # Arrange
        prices = [
            PricePoint(date="1404/10/03", price=90),
            PricePoint(date="1404/10/01", price=120),
        ]

        # Act
        swing = find_swing_points(prices)

        # Assert
        assert swing.low_index == 0
        assert swing.high_index == 1


# ===== Trend Classifier Tests =====


class TestDetermineTrend:
    """Test midpoint-band trend classification"""

    def test_short_series_is_neutral(self, detector):
        """Test that fewer than two points is always neutral"""
        assert detector.determine_trend(make_series(150), 150, 100) == "neutral"
        assert detector.determine_trend([], 150, 100) == "neutral"

    def test_bullish_above_band(self, detector):
        """Test bullish when last price is above midpoint + 10% of range"""
        # High 120, Low 80 → midpoint 100, band 4
        assert detector.determine_trend(make_series(90, 105), 120, 80) == "bullish"

    def test_bearish_below_band(self, detector):
        """Test bearish when last price is below midpoint - 10% of range"""
        assert detector.determine_trend(make_series(110, 95), 120, 80) == "bearish"

    def test_band_edges_are_neutral(self, detector):
        """Test that prices exactly on the band edge stay neutral"""
        assert detector.determine_trend(make_series(90, 104), 120, 80) == "neutral"
        assert detector.determine_trend(make_series(90, 96), 120, 80) == "neutral"

    def test_midpoint_is_neutral(self, detector):
        """Test that the exact swing midpoint is neutral"""
        assert detector.determine_trend(make_series(80, 120, 100), 120, 80) == "neutral"

    def test_flat_series_is_neutral(self, detector):
        """Test zero-range series"""
        assert detector.determine_trend(make_series(100, 100, 100), 100, 100) == "neutral"

    def test_custom_band(self):
        """Test that a zero band labels any move off the midpoint"""
        # Arrange
        detector = TrendDetector(neutral_band=0.0)

        # Assert
        assert detector.determine_trend(make_series(90, 101), 120, 80) == "bullish"
        assert detector.determine_trend(make_series(90, 99), 120, 80) == "bearish"
