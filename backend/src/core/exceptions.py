"""
Error types raised by the analysis engine and API.

Each error carries the HTTP status the API answers with, so engine code can
raise without knowing about FastAPI:
- Bad input (400/404): empty price series, negative tolerance, unknown asset
- Misconfiguration (500): settings that would make the engine misbehave

Usage:
    from src.core.exceptions import ValidationError

    raise ValidationError("Gann projection requires at least one bar", bars_count=0)
"""

from typing import Any


class AppError(Exception):
    """
    Base error with an HTTP status and structured context.

    Keyword context is kept for logs only; clients see the message and type.
    """

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str, **context: Any):
        """
        Args:
            message: Message shown to the dashboard user (may be Persian)
            **context: Offending values for logging (e.g., slug, days, tolerance)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        """Flatten for structured logging."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "status_code": self.status_code,
            **self.context,
        }

    def to_response(self) -> dict[str, Any]:
        """JSON body in the dashboard's `{success, message}` envelope."""
        return {
            "success": False,
            "message": self.message,
            "error_type": self.error_type,
        }


# ===== Bad input =====


class ValidationError(AppError):
    """A precondition on prices, tolerance or history length does not hold."""

    status_code = 400
    error_type = "validation_error"


class NotFoundError(AppError):
    """The requested asset is not on the analysis dashboard."""

    status_code = 404
    error_type = "not_found_error"


# ===== Misconfiguration =====


class ConfigurationError(AppError):
    """Settings outside the range the engine accepts; raised at startup."""

    status_code = 500
    error_type = "configuration_error"
