"""Two-pointer and sliding-window solutions to array, string and list puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence
from math import isqrt


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: int, next: ListNode | None = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def judge_square_sum(c: int) -> bool:
    """Whether ``c`` is the sum of two squares of non-negative integers."""
    if c < 0:
        raise ValueError("c must be non-negative")
    low, high = 0, isqrt(c)
    while low <= high:
        remainder = c - high * high
        square = low * low
        if square == remainder:
            return True
        if square < remainder:
            low += 1
        else:
            high -= 1
    return False


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Node where the cycle in a linked list begins, or None if there is none.

    Uses Floyd's tortoise-and-hare method.
    """
    slow = fast = head
    while True:
        if fast is None or fast.next is None:
            return None
        fast = fast.next.next
        slow = slow.next  # type: ignore[union-attr]
        if fast is slow:
            break
    fast = head
    while fast is not slow:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[union-attr]
    return fast


def merge(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place.

    Both prefixes must be sorted and ``nums1`` must hold at least ``m + n`` slots.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must be non-negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 is too short to hold the merged result")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n elements")
    pos = m + n - 1
    i, j = m - 1, n - 1
    while i >= 0 and j >= 0:
        if nums1[i] > nums2[j]:
            nums1[pos] = nums1[i]
            i -= 1
        else:
            nums1[pos] = nums2[j]
            j -= 1
        pos -= 1
    while j >= 0:
        nums1[pos] = nums2[j]
        j -= 1
        pos -= 1


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` containing every character of ``t`` with multiplicity.

    Returns an empty string when no such substring exists or ``t`` is empty.
    """
    missing = Counter(t)
    found = 0
    left = 0
    best_start, best_size = 0, len(s) + 1
    for right, ch in enumerate(s):
        if ch not in missing:
            continue
        missing[ch] -= 1
        if missing[ch] >= 0:
            found += 1
        while found == len(t):
            if right - left + 1 < best_size:
                best_start, best_size = left, right - left + 1
            dropped = s[left]
            if dropped in missing:
                missing[dropped] += 1
                if missing[dropped] > 0:
                    found -= 1
            left += 1
    if best_size > len(s):
        return ""
    return s[best_start:best_start + best_size]


def two_sum(numbers: Sequence[int], target: int) -> list[int]:
    """One-based indices of two entries of sorted ``numbers`` adding up to ``target``.

    Raises ValueError when no such pair exists.
    """
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total == target:
            return [low + 1, high + 1]
        if total < target:
            low += 1
        else:
            high -= 1
    raise ValueError(f"no two numbers add up to {target}")