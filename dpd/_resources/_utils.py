"""Shared helpers for resource modules."""

from typing import Any


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _encode(value: Any) -> Any:
    if isinstance(value, bool):
        return "1" if value else "0"
    return value


def _build_params(**kwargs: Any) -> dict:
    """Build query params dict, omitting None and empty-string values."""
    return {k: _encode(v) for k, v in kwargs.items() if not _is_empty(v)}


def _first_filter(**kwargs: Any) -> dict:
    """Keep only the first non-empty filter, in keyword order.

    The list endpoints take a single filter per request; when several are
    given, earlier keywords take precedence and the rest are dropped.
    """
    for key, value in kwargs.items():
        if not _is_empty(value):
            return {key: _encode(value)}
    return {}
