"""Environment variable parsing helpers shared by config modules."""

from __future__ import annotations

import os


def get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_bool_env(key: str, default: bool) -> bool:
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_str_env(key: str, default: str | None = None) -> str | None:
    """Get a string environment variable; blank values count as unset."""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()
