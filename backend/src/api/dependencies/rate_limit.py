"""
Rate limiting for the analysis API.

A single global limit per client address, enforced by SlowAPIMiddleware.
Storage is in-process by default; point `rate_limit_storage_uri` at Redis when
running more than one replica.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ...core.config import get_settings

# Hint sent with 429 responses; matches the per-minute window of the default limit
RETRY_AFTER_SECONDS = 60


def create_limiter() -> Limiter:
    """Build the limiter from the current settings."""
    settings = get_settings()
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        storage_uri=settings.rate_limit_storage_uri,
    )


limiter = create_limiter()
