"""Rate limiting configuration for the application."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import get_global_settings

# key_func determines the key for rate limiting (client IP)
limiter = Limiter(
    key_func=get_remote_address,
    enabled=get_global_settings().rate_limit_enabled,
)
