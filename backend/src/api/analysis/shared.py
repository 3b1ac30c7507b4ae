"""
Shared utilities and dependencies for analysis API endpoints.

Provides the asset registry, engine dependency and validation functions used
across the analysis endpoints.
"""

from fastapi import Depends

from ...core.analysis.technical import TechnicalAnalyzer
from ...core.config import Settings, get_settings
from ...core.exceptions import NotFoundError, ValidationError
from ...shared.formatters import format_persian_number
from ..models import AnalysisAsset

# Main assets offered on the analysis dashboard
ANALYSIS_ASSETS: list[AnalysisAsset] = [
    AnalysisAsset(slug="USD", name="دلار آمریکا", icon="💵"),
    AnalysisAsset(slug="EUR", name="یورو", icon="💶"),
    AnalysisAsset(slug="GBP", name="پوند انگلیس", icon="💷"),
    AnalysisAsset(slug="AED", name="درهم امارات", icon="🇦🇪"),
    AnalysisAsset(slug="geram18", name="طلای ۱۸ عیار", icon="🥇"),
    AnalysisAsset(slug="geram24", name="طلای ۲۴ عیار", icon="🏆"),
    AnalysisAsset(slug="SEKE_EMAMI", name="سکه امامی", icon="🪙"),
    AnalysisAsset(slug="SEKE_BAHAR", name="سکه بهار آزادی", icon="🌸"),
    AnalysisAsset(slug="ONS", name="انس جهانی طلا", icon="📊"),
    AnalysisAsset(slug="TETHER", name="تتر", icon="₮"),
]

_ASSETS_BY_SLUG = {asset.slug: asset for asset in ANALYSIS_ASSETS}


def get_asset(slug: str) -> AnalysisAsset:
    """
    Look up a dashboard asset by slug.

    Raises:
        NotFoundError: If the slug is not an analysable asset
    """
    asset = _ASSETS_BY_SLUG.get(slug)
    if asset is None:
        raise NotFoundError("دارایی یافت نشد", slug=slug)
    return asset


def get_analyzer(settings: Settings = Depends(get_settings)) -> TechnicalAnalyzer:
    """Dependency to build the analysis engine from settings."""
    return TechnicalAnalyzer(
        tolerance=settings.prz_tolerance,
        neutral_band=settings.trend_neutral_band,
    )


def validate_days(days: int, settings: Settings) -> None:
    """
    Validate the requested history length against configured bounds.

    Raises:
        ValidationError: If days is outside [analysis_min_days, analysis_max_days]
    """
    if not settings.analysis_min_days <= days <= settings.analysis_max_days:
        raise ValidationError(
            f"تعداد روز باید بین {format_persian_number(settings.analysis_min_days)}"
            f" و {format_persian_number(settings.analysis_max_days)} باشد",
            days=days,
        )
