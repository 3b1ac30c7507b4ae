"""
Unit tests for Gann level projection.

Tests:
- Static angle levels for uptrends and downtrends
- The 1×1 level matching the 100% Fibonacci extension
- Rejection of a zero bar count
- Square of 9 levels
"""

import pytest

from src.core.analysis.technical import GannProjector, LevelCalculator
from src.core.exceptions import ValidationError

# ===== Fixtures =====


@pytest.fixture
def projector():
    """Gann projector instance"""
    return GannProjector()


def price_for(levels, label):
    return next(level.price for level in levels if level.label == label)


# ===== Gann Level Tests =====


class TestCalculateGannLevels:
    """Test Gann angle level calculation"""

    def test_angle_table(self, projector):
        """Test labels and angles of the nine fixed Gann angles"""
        # Act
        levels = projector.calculate_gann_levels(120, 90, 3, is_uptrend=True)

        # Assert
        assert [level.label for level in levels] == [
            "1×8",
            "1×4",
            "1×3",
            "1×2",
            "1×1",
            "2×1",
            "3×1",
            "4×1",
            "8×1",
        ]
        assert [level.angle for level in levels] == [
            82.5,
            75.0,
            71.25,
            63.75,
            45.0,
            26.25,
            18.75,
            15.0,
            7.5,
        ]

    def test_uptrend_projects_from_low(self, projector):
        """Test uptrend levels are low + range * ratio"""
        # Act
        levels = projector.calculate_gann_levels(120, 90, 3, is_uptrend=True)

        # Assert
        # Range = 30 → 1×8 = 93.75 → 94, 1×4 = 97.5 → 98
        assert [level.price for level in levels] == [94, 98, 100, 105, 120, 150, 180, 210, 330]

    def test_downtrend_projects_from_high(self, projector):
        """Test downtrend levels are high - range * ratio"""
        # Act
        levels = projector.calculate_gann_levels(120, 90, 3, is_uptrend=False)

        # Assert
        assert price_for(levels, "1×1") == 90
        assert price_for(levels, "2×1") == 60
        assert price_for(levels, "8×1") == -120

    def test_bar_count_does_not_change_levels(self, projector):
        """Test static snapshot: levels depend on the range, not the bar count"""
        # Act
        short = projector.calculate_gann_levels(48_360, 45_120, 7, is_uptrend=True)
        long = projector.calculate_gann_levels(48_360, 45_120, 90, is_uptrend=True)

        # Assert
        assert [level.price for level in short] == [level.price for level in long]

    @pytest.mark.parametrize("is_uptrend", [True, False])
    def test_one_by_one_matches_full_extension(self, projector, is_uptrend):
        """Test that the 1×1 level equals the 100% Fibonacci extension"""
        # Arrange
        extension = LevelCalculator().calculate_fibonacci_extension(
            1_840, 1_615, is_uptrend=is_uptrend
        )

        # Act
        levels = projector.calculate_gann_levels(1_840, 1_615, 21, is_uptrend=is_uptrend)

        # Assert
        full_extension = next(level.price for level in extension if level.level == 1.0)
        assert price_for(levels, "1×1") == full_extension

    def test_zero_range(self, projector):
        """Test that a flat swing puts every level on the anchor"""
        levels = projector.calculate_gann_levels(100, 100, 5, is_uptrend=False)
        assert {level.price for level in levels} == {100}

    @pytest.mark.parametrize("bars_count", [0, -3])
    def test_non_positive_bar_count_rejected(self, projector, bars_count):
        """Test that an empty series cannot be projected"""
        with pytest.raises(ValidationError) as exc_info:
            projector.calculate_gann_levels(120, 90, bars_count, is_uptrend=True)

        assert exc_info.value.context == {"bars_count": bars_count}
        assert exc_info.value.status_code == 400


# ===== Square of 9 Tests =====


class TestCalculateSquareOf9:
    """Test Gann Square of 9 level calculation"""

    def test_levels_around_100(self, projector):
        """Test eight 45° steps either side of sqrt(100) = 10"""
        # Act
        levels = projector.calculate_square_of_9(100)

        # Assert
        # (10 + 0.125)² = 102.52 → 103, (10 - 0.125)² = 97.52 → 98, ..., 11² = 121, 9² = 81
        assert levels == [81, 83, 86, 88, 90, 93, 95, 98, 103, 105, 108, 110, 113, 116, 118, 121]

    def test_levels_sorted_and_unique(self, projector):
        """Test that duplicate squares collapse for small prices"""
        # Act
        levels = projector.calculate_square_of_9(1)

        # Assert
        assert levels == sorted(set(levels))
        assert len(levels) < 16

    def test_non_positive_base_rejected(self, projector):
        """Test that a non-positive base price is rejected"""
        with pytest.raises(ValidationError):
            projector.calculate_square_of_9(0)
