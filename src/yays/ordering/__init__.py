"""Ordering subpackage: key ranking and in-place node sorting.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from yays.ordering import SortMode, rank_key

    rank_key("kind", SortMode.HUMAN)          # 1
    rank_key("kind", SortMode.ALPHANUMERIC)   # 9 (same for every key)
"""

from __future__ import annotations

from yays.ordering.config import HUMAN_PRIORITY_KEYS, SortConfig, SortMode
from yays.ordering.ranker import UNRANKED, rank_key
from yays.ordering.sort import (
    comparable_string,
    first_field_comparable_value,
    sort_mapping,
    sort_sequence_by_first_field,
)

__all__ = [
    "HUMAN_PRIORITY_KEYS",
    "UNRANKED",
    "SortConfig",
    "SortMode",
    "comparable_string",
    "first_field_comparable_value",
    "rank_key",
    "sort_mapping",
    "sort_sequence_by_first_field",
]
