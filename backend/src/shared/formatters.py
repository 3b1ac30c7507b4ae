"""
Shared formatting utilities.

Provides number formatting and Persian display helpers used by the analysis
API and the dashboard's chart labels.
"""

import math

# ASCII digit → Persian (Extended Arabic-Indic) digit
_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")

# Thousands separator used by the fa-IR locale
PERSIAN_THOUSANDS_SEPARATOR = "٬"


def format_analysis_price(price: float) -> str:
    """
    Format a level price compactly for chart labels.

    Args:
        price: Price to format

    Returns:
        Formatted string with M/K suffix

    Examples:
        >>> format_analysis_price(1_250_000)
        "1.25 M"
        >>> format_analysis_price(98_400)
        "98.4 K"
        >>> format_analysis_price(512.4)
        "512"
    """
    if price >= 1_000_000:
        return f"{price / 1_000_000:.2f} M"
    if price >= 1_000:
        return f"{price / 1_000:.1f} K"
    return f"{price:.0f}"


def to_persian_digits(value: str | int | float) -> str:
    """
    Replace ASCII digits with Persian digits; other characters are kept.

    Examples:
        >>> to_persian_digits("1404/10/01")
        "۱۴۰۴/۱۰/۰۱"
    """
    return str(value).translate(_PERSIAN_DIGITS)


def format_persian_number(value: float | int) -> str:
    """
    Format a number the way the dashboard shows prices: rounded, grouped, Persian digits.

    Examples:
        >>> format_persian_number(1234567.6)
        "۱٬۲۳۴٬۵۶۸"
    """
    rounded = math.floor(value + 0.5)
    grouped = f"{rounded:,}".replace(",", PERSIAN_THOUSANDS_SEPARATOR)
    return to_persian_digits(grouped)
