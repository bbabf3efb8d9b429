"""Solutions to assorted daily puzzles on arrays and walks on a grid."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def partition_array(nums: Iterable[int], k: int) -> int:
    """Fewest groups such that each group's max and min differ by at most ``k``."""
    groups = 0
    group_min: int | None = None
    for x in sorted(nums):
        if group_min is None or x - group_min > k:
            groups += 1
            group_min = x
    return groups


def minimize_max(nums: Sequence[int], p: int) -> int:
    """Smallest possible largest difference over ``p`` disjoint pairs taken from ``nums``.

    Raises ValueError when ``nums`` is empty.
    """
    values = sorted(nums)
    if not values:
        raise ValueError("nums must not be empty")

    def enough_pairs(limit: int) -> bool:
        pairs = 0
        i = 0
        while i + 1 < len(values):
            if values[i + 1] - values[i] <= limit:
                pairs += 1
                i += 2
            else:
                i += 1
        return pairs >= p

    low, high = -1, values[-1] - values[0]
    while low + 1 < high:
        mid = (low + high) // 2
        if enough_pairs(mid):
            high = mid
        else:
            low = mid
    return high


def _balance(a: int, b: int, budget: int) -> tuple[int, int]:
    """Distance along one axis after flipping up to ``budget`` moves, and the budget left."""
    flips = min(a, b, budget)
    return abs(a - b) + 2 * flips, budget - flips


def max_distance(s: str, k: int) -> int:
    """Largest Manhattan distance reached along the walk ``s`` after changing at most ``k`` moves.

    Moves are the letters N, S, E and W; other characters are ignored.
    """
    counts: Counter[str] = Counter()
    best = 0
    for ch in s:
        counts[ch] += 1
        vertical, left = _balance(counts["N"], counts["S"], k)
        horizontal, _ = _balance(counts["E"], counts["W"], left)
        best = max(best, vertical + horizontal)
    return best