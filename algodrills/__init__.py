"""Greedy, two-pointer and daily-puzzle algorithm exercises."""

__version__ = "0.1.0"
__all__ = ["greedy", "two_pointer", "daily"]