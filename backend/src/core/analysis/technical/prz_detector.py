"""
Potential Reversal Zone (PRZ) detection.
Clusters Fibonacci and Gann levels that fall within a small tolerance of each other.
"""

from typing import NamedTuple

import structlog

from ....api.models import FibonacciLevel, GannLevel, PRZZone, ZoneStrength
from ...exceptions import ValidationError
from .config import PRZConstants

logger = structlog.get_logger()


class _SourcedLevel(NamedTuple):
    price: float
    source: str


class PRZDetector:
    """Finds confluence zones with a greedy, anchor-relative sweep."""

    def __init__(self, tolerance: float = PRZConstants.DEFAULT_TOLERANCE):
        """Initialize with the default tolerance as a fraction of the anchor price."""
        self.constants = PRZConstants()
        self.tolerance = tolerance

    def find_prz(
        self,
        fib_retracement: list[FibonacciLevel],
        fib_extension: list[FibonacciLevel],
        gann_levels: list[GannLevel],
        tolerance: float | None = None,
    ) -> list[PRZZone]:
        """
        Cluster levels into Potential Reversal Zones.

        Algorithm:
        1. Tag every level with its source and sort ascending by price
        2. Take the lowest unclustered level as the anchor
        3. Collect following levels while ``price - anchor <= anchor * tolerance``
           (the window stays anchored to the first level, it is never re-centred)
        4. Two or more collected levels form a zone and are consumed; a lone
           anchor is skipped and its neighbour becomes the next anchor

        Raises:
            ValidationError: If tolerance is negative
        """
        tolerance = self.tolerance if tolerance is None else tolerance
        if tolerance < 0:
            raise ValidationError("PRZ tolerance cannot be negative", tolerance=tolerance)

        all_levels = self._collect_levels(fib_retracement, fib_extension, gann_levels)
        all_levels.sort(key=lambda item: item.price)

        zones: list[PRZZone] = []
        i = 0
        while i < len(all_levels):
            base_price = all_levels[i].price
            tolerance_range = base_price * tolerance

            j = i + 1
            while (
                j < len(all_levels)
                and all_levels[j].price - base_price <= tolerance_range
            ):
                j += 1

            cluster = all_levels[i:j]
            if len(cluster) >= self.constants.MIN_CONFLUENCES:
                cluster_prices = [item.price for item in cluster]
                zones.append(
                    PRZZone(
                        low=min(cluster_prices),
                        high=max(cluster_prices),
                        strength=self._strength(len(cluster)),
                        confluences=[item.source for item in cluster],
                    )
                )
                i = j
            else:
                i += 1

        logger.debug(
            "Detected PRZ zones",
            levels_count=len(all_levels),
            zones_count=len(zones),
            tolerance=tolerance,
        )
        return zones

    def _collect_levels(
        self,
        fib_retracement: list[FibonacciLevel],
        fib_extension: list[FibonacciLevel],
        gann_levels: list[GannLevel],
    ) -> list[_SourcedLevel]:
        return [
            *(
                _SourcedLevel(level.price, f"{self.constants.RETRACEMENT_PREFIX} {level.label}")
                for level in fib_retracement
            ),
            *(
                _SourcedLevel(level.price, f"{self.constants.EXTENSION_PREFIX} {level.label}")
                for level in fib_extension
            ),
            *(
                _SourcedLevel(level.price, f"{self.constants.GANN_PREFIX} {level.label}")
                for level in gann_levels
            ),
        ]

    def _strength(self, confluence_count: int) -> ZoneStrength:
        if confluence_count >= self.constants.STRONG_CONFLUENCES:
            return "strong"
        if confluence_count >= self.constants.MEDIUM_CONFLUENCES:
            return "medium"
        return "weak"
