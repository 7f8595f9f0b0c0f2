"""Field-survival rules for merging API responses into persisted state.

The API does not echo every attribute it accepts: secrets and passwords are
write-only, and the membership role is only sometimes returned. These helpers
decide what ends up in state when the response is silent.
"""
from __future__ import annotations
from typing import Iterable, List, Optional


def merge_preserved(response_value: Optional[str], prior_value: Optional[str]) -> Optional[str]:
    """Three-state merge for partially echoed or write-only strings.

    - the response carries a non-empty value: take it
    - otherwise the prior (state or desired) value is non-empty: keep it
    - otherwise: None (truly absent)
    """
    if response_value:
        return response_value
    if prior_value:
        return prior_value
    return None


def string_or_null(value: Optional[str]) -> Optional[str]:
    """Collapse an empty string to None."""
    return value if value else None


def set_or_null(values: Optional[Iterable[str]]) -> Optional[List[str]]:
    """Normalize an unordered collection to a sorted list, or None when empty."""
    if values is None:
        return None
    normalized = sorted({v for v in values if v})
    return normalized or None


def list_or_empty(values: Optional[Iterable[str]]) -> List[str]:
    """Normalize a possibly-absent list to a concrete (possibly empty) list."""
    return list(values) if values else []
