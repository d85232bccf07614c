"""A binary indexed (Fenwick) tree and a count of smaller elements to the right."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


class FenwickTree:
    """Prefix sums over positions 1..size with point updates."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return len(self._tree) - 1

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` at 1-based position ``index``."""
        if not 1 <= index <= len(self):
            raise IndexError(f"index {index} out of range 1..{len(self)}")
        while index < len(self._tree):
            self._tree[index] += delta
            index += index & -index

    def query(self, index: int) -> int:
        """Return the sum of positions 1 through ``index``; 0 gives 0."""
        if not 0 <= index <= len(self):
            raise IndexError(f"index {index} out of range 0..{len(self)}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


def count_smaller(nums: Sequence[int]) -> list[int]:
    """For each element, count the strictly smaller elements to its right."""
    ranks = sorted(nums)
    tree = FenwickTree(len(nums))
    counts = [0] * len(nums)
    for position in reversed(range(len(nums))):
        rank = bisect_left(ranks, nums[position]) + 1
        tree.update(rank, 1)
        counts[position] = tree.query(rank - 1)
    return counts