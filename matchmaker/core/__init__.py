"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import (
    MatchmakingConfig,
    Settings,
    get_global_settings,
    get_settings,
)
from .database import db_manager, get_session_factory
from .exceptions import DatabaseError, SeedDataError, ServiceException
from .models import Base
from .validation import is_empty_or_none

__all__ = [
    # Config
    "MatchmakingConfig",
    "Settings",
    "get_settings",
    "get_global_settings",
    # Database
    "get_session_factory",
    "db_manager",
    # Exceptions
    "ServiceException",
    "DatabaseError",
    "SeedDataError",
    # Models
    "Base",
    # Validation
    "is_empty_or_none",
]
