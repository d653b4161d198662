"""Common utility functions."""

from typing import Any


def get_nested(data: Any, *keys: str, default: Any = "") -> Any:
    """Walk nested dicts by key, returning ``default`` when any level is missing."""
    value = data
    for key in keys:
        if not isinstance(value, dict) or value.get(key) is None:
            return default
        value = value[key]
    return value
