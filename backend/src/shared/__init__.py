"""
Shared utilities module.

Provides common utility functions used across the backend codebase.
"""

from .formatters import (
    format_analysis_price,
    format_persian_number,
    to_persian_digits,
)

__all__ = [
    "format_analysis_price",
    "format_persian_number",
    "to_persian_digits",
]
