"""Small helpers shared across the pipeline."""

from __future__ import annotations

from typing import Any


def is_empty(value: Any) -> bool:
    """Check whether a value counts as "no value".

    ``None``, empty strings and empty collections are empty. ``0`` and
    ``False`` are values.

    Args:
        value: Value to check

    Returns:
        True if the value is empty
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False
