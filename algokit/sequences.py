"""Small sequence utilities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise
from typing import TypeVar

T = TypeVar("T")


def unique_adjacent(values: Iterable[T]) -> list[T]:
    """Return ``values`` with runs of equal adjacent items collapsed to one."""
    return [key for key, _ in groupby(values)]


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the minimum of a rotated ascending sequence (duplicates allowed)."""
    if not nums:
        raise ValueError("find_min_rotated() arg is an empty sequence")
    for previous, current in pairwise(nums):
        if current < previous:
            return current
    return nums[0]