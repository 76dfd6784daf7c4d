"""Validation utility functions shared across features."""

from typing import Any


def is_empty_or_none(value: Any) -> bool:
    """
    Check if value is None or empty (blank string, list, dict, etc.).

    Args:
        value: Value to check

    Returns:
        True if value is None or empty, False otherwise
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, set, tuple)):
        return len(value) == 0
    return False
