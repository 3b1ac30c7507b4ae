"""
Pydantic models for the technical analysis API.
Shared by the analysis engine (as its result types) and the HTTP layer (as request/response schemas).
"""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Trend = Literal["bullish", "bearish", "neutral"]
ZoneStrength = Literal["weak", "medium", "strong"]


# Base models for common structures
class PricePoint(BaseModel):
    """One observation of a date-ascending price series."""

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Date identifier, e.g. Jalali 1404/10/01")
    price: float = Field(..., gt=0, description="Closing/reference price")
    high: float | None = Field(default=None, gt=0, description="Intraday high")
    low: float | None = Field(default=None, gt=0, description="Intraday low")


class SwingPoints(BaseModel):
    """Global swing high/low of a series and where they occurred."""

    model_config = ConfigDict(frozen=True)

    high: float = Field(..., description="Highest observed value")
    low: float = Field(..., description="Lowest observed value")
    high_date: str = Field(..., description="Date of the swing high")
    low_date: str = Field(..., description="Date of the swing low")
    high_index: int = Field(..., ge=0, description="Position of the swing high")
    low_index: int = Field(..., ge=0, description="Position of the swing low")


class FibonacciLevel(BaseModel):
    """Fibonacci retracement or extension level."""

    model_config = ConfigDict(frozen=True)

    level: float = Field(..., ge=0, description="Fibonacci ratio (e.g., 0.618)")
    price: float = Field(..., description="Price at this level, rounded")
    label: str = Field(..., description="Percentage string (e.g., '61.8%')")
    type: Literal["retracement", "extension"] = Field(
        ..., description="Whether the level is a pullback or a projection"
    )


class GannLevel(BaseModel):
    """Static price level for one Gann angle."""

    model_config = ConfigDict(frozen=True)

    angle: float = Field(..., description="Geometric angle in degrees")
    price: float = Field(..., description="Projected price, rounded")
    label: str = Field(..., description="Angle ratio (e.g., '1×1')")


class PRZZone(BaseModel):
    """Potential Reversal Zone: a cluster of confluent levels."""

    model_config = ConfigDict(frozen=True)

    low: float = Field(..., description="Lowest level price in the cluster")
    high: float = Field(..., description="Highest level price in the cluster")
    strength: ZoneStrength = Field(..., description="weak (2), medium (3), strong (4+)")
    confluences: list[str] = Field(
        ..., description="Source labels of the clustered levels, ascending by price"
    )


class FibonacciLevels(BaseModel):
    """Retracement and extension levels of one swing."""

    model_config = ConfigDict(frozen=True)

    retracement: list[FibonacciLevel] = Field(..., description="Pullback levels")
    extension: list[FibonacciLevel] = Field(..., description="Projection levels")


class SwingSummary(BaseModel):
    """Swing bounds exposed in the analysis result (indices omitted)."""

    model_config = ConfigDict(frozen=True)

    high: float = Field(..., description="Swing high")
    low: float = Field(..., description="Swing low")
    high_date: str = Field(..., description="Date of the swing high")
    low_date: str = Field(..., description="Date of the swing low")


class TechnicalAnalysis(BaseModel):
    """Complete Fibonacci/Gann/PRZ analysis of a price series."""

    model_config = ConfigDict(frozen=True)

    fibonacci: FibonacciLevels = Field(..., description="Fibonacci levels")
    gann: list[GannLevel] = Field(..., description="Gann angle levels")
    prz: list[PRZZone] = Field(..., description="Confluence zones, ascending by price")
    swing: SwingSummary = Field(..., description="Swing bounds used as anchors")
    trend: Trend = Field(..., description="Trend label of the series")


class SupportResistance(BaseModel):
    """Pivot-point support and resistance relative to the current price."""

    model_config = ConfigDict(frozen=True)

    support: list[float] = Field(..., description="Support levels, nearest first")
    resistance: list[float] = Field(..., description="Resistance levels, nearest first")


class AnalysisAsset(BaseModel):
    """Asset available on the analysis dashboard."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., description="Upstream price-feed identifier")
    name: str = Field(..., description="Persian display name")
    icon: str = Field(..., description="Emoji icon")


# Response models
class AssetListResponse(BaseModel):
    """List of analysable assets."""

    success: bool = Field(default=True)
    data: list[AnalysisAsset] = Field(..., description="Available assets")


class TechnicalAnalysisResponse(BaseModel):
    """Analysis of a caller-supplied price series."""

    success: bool = Field(default=True)
    current_price: float = Field(..., description="Price the pivots are compared against")
    analysis_date: str = Field(
        default_factory=lambda: datetime.now(UTC).isoformat(),
        description="Analysis date in ISO format",
    )
    analysis: TechnicalAnalysis = Field(..., description="Fibonacci/Gann/PRZ analysis")
    support_resistance: SupportResistance = Field(
        ..., description="Pivot-point support and resistance"
    )


class MockAnalysisResponse(TechnicalAnalysisResponse):
    """Analysis of a synthesized price history for a dashboard asset."""

    asset: AnalysisAsset = Field(..., description="Analysed asset")
    days: int = Field(..., description="Length of the synthesized history")
    historical_prices: list[PricePoint] = Field(
        ..., description="Synthesized history, oldest first"
    )


# Request models
class TechnicalAnalysisRequest(BaseModel):
    """Request model for technical analysis of a price series."""

    prices: list[PricePoint] = Field(
        ..., min_length=1, description="Date-ascending price series (oldest first)"
    )
    tolerance: float | None = Field(
        default=None, ge=0, lt=1, description="PRZ tolerance override (e.g., 0.02)"
    )
    current_price: float | None = Field(
        default=None, gt=0, description="Current price (defaults to last close)"
    )
