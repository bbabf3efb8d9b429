"""Greedy solutions to classic array, interval and string puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from unlimited buy/sell transactions, holding at most one share."""
    free, holding = 0, float("-inf")
    for price in prices:
        free, holding = max(free, holding + price), max(holding, free - price)
    return int(free)


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Whether ``n`` new flowers fit into ``flowerbed`` with no two adjacent."""
    bed = [0, *flowerbed, 0]
    remaining = n
    for i in range(1, len(bed) - 1):
        if bed[i - 1] == 0 and bed[i] == 0 and bed[i + 1] == 0:
            bed[i] = 1
            remaining -= 1
    return remaining <= 0


def find_min_arrow_shots(points: Iterable[Sequence[int]]) -> int:
    """Minimum number of vertical arrows needed to burst every balloon interval."""
    arrows = 0
    last_shot: float = float("-inf")
    for start, end in sorted(points, key=lambda p: p[1]):
        if start > last_shot:
            arrows += 1
            last_shot = end
    return arrows


def check_possibility(nums: Sequence[int]) -> bool:
    """Whether ``nums`` can become non-decreasing by changing at most one element."""
    values = list(nums)
    changes = 0
    for i, (x, y) in enumerate(zip(values, values[1:])):
        if x > y:
            changes += 1
            if changes > 1:
                return False
            if i > 0 and y < values[i - 1]:
                values[i + 1] = x
    return True


def partition_labels(s: str) -> list[int]:
    """Sizes of the most parts ``s`` splits into with each letter in one part only."""
    last = {ch: i for i, ch in enumerate(s)}
    sizes: list[int] = []
    start = end = 0
    for i, ch in enumerate(s):
        end = max(end, last[ch])
        if end == i:
            sizes.append(end - start + 1)
            start = i + 1
    return sizes


def reconstruct_queue(people: Iterable[Sequence[int]]) -> list[list[int]]:
    """Rebuild a queue from ``[height, taller_or_equal_in_front]`` pairs.

    Raises ValueError when a pair's count cannot be satisfied.
    """
    ordered = sorted((list(p) for p in people), key=lambda p: (-p[0], p[1]))
    queue: list[list[int]] = []
    for person in ordered:
        position = person[1]
        if not 0 <= position <= len(queue):
            raise ValueError(f"no valid position for person {person}")
        queue.insert(position, person)
    return queue


def assign_cookies(children: Iterable[int], cookies: Iterable[int]) -> int:
    """Most children satisfied when each child needs a cookie at least their greed."""
    greed = sorted(children)
    satisfied = 0
    for size in sorted(cookies):
        if satisfied == len(greed):
            break
        if greed[satisfied] <= size:
            satisfied += 1
    return satisfied


def candy(ratings: Sequence[int]) -> int:
    """Fewest candies so each child gets one and outranks lower-rated neighbours."""
    size = len(ratings)
    if size < 2:
        return size
    counts = [1] * size
    for i in range(1, size):
        if ratings[i] > ratings[i - 1]:
            counts[i] = counts[i - 1] + 1
    for i in range(size - 1, 0, -1):
        if ratings[i] < ratings[i - 1]:
            counts[i - 1] = max(counts[i - 1], counts[i] + 1)
    return sum(counts)