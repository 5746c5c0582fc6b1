"""Key ranking for mapping sorts.

``rank_key`` assigns each key an integer weight; lower weights sort first and
equal weights fall back to the key text.  The result is a total preorder that,
combined with the lexicographic tie-break, gives a deterministic total order.
"""

from __future__ import annotations

from yays.ordering.config import HUMAN_PRIORITY_KEYS, SortMode

__all__ = ["UNRANKED", "rank_key"]

# Rank of every key outside the priority table (one past its last entry).
UNRANKED = len(HUMAN_PRIORITY_KEYS)

_HUMAN_RANKS: dict[str, int] = {key: i for i, key in enumerate(HUMAN_PRIORITY_KEYS)}


def rank_key(key: str, mode: SortMode) -> int:
    """Return the ordering rank of ``key`` under ``mode``.

    Args:
        key:  The mapping key text.
        mode: The sort mode of the run.

    Returns:
        ``UNRANKED`` for every key in alphanumeric mode.  In human mode, the
        key's position in HUMAN_PRIORITY_KEYS, or ``UNRANKED`` if absent.
    """
    if mode == SortMode.HUMAN:
        return _HUMAN_RANKS.get(key, UNRANKED)
    return UNRANKED
