"""Binary search variants over sorted sequences, and a threshold search on grids."""

from __future__ import annotations

from collections.abc import Sequence

NOT_FOUND = -1
MAX_EFFORT = 1_000_000


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums`` (closed interval), or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] > target:
            right = mid - 1
        elif nums[mid] < target:
            left = mid + 1
        else:
            return mid
    return NOT_FOUND


def search_half_open(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums`` (half-open interval), or -1."""
    left, right = 0, len(nums)
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid] > target:
            right = mid
        elif nums[mid] < target:
            left = mid + 1
        else:
            return mid
    return NOT_FOUND


def search_half_open_checked(nums: Sequence[int], target: int) -> int:
    """Half-open search that checks the final boundary before giving up."""
    left, right = 0, len(nums)
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid] > target:
            right = mid
        elif nums[mid] < target:
            left = mid + 1
        else:
            return mid
    if left < len(nums) and nums[left] == target:
        return left
    return NOT_FOUND


def _lower_bound(nums: Sequence[int], target: int) -> int:
    left, right = 0, len(nums)
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid
    return left


def _upper_bound(nums: Sequence[int], target: int) -> int:
    left, right = 0, len(nums)
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid] > target:
            right = mid
        else:
            left = mid + 1
    return left


def count_less(nums: Sequence[int], target: int) -> int:
    """Return how many elements of sorted ``nums`` are smaller than ``target``."""
    return _lower_bound(nums, target)


def leftmost_half_open(nums: Sequence[int], target: int) -> int:
    """Return the first index of ``target`` (half-open interval), or -1."""
    left = _lower_bound(nums, target)
    if left == len(nums):
        return NOT_FOUND
    return left if nums[left] == target else NOT_FOUND


def leftmost_closed(nums: Sequence[int], target: int) -> int:
    """Return the first index of ``target`` (closed interval), or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    if left == len(nums):
        return NOT_FOUND
    return left if nums[left] == target else NOT_FOUND


def count_at_most(nums: Sequence[int], target: int) -> int:
    """Return how many elements of sorted ``nums`` are less than or equal to ``target``."""
    return _upper_bound(nums, target)


def rightmost_half_open(nums: Sequence[int], target: int) -> int:
    """Return the last index of ``target`` (half-open interval), or -1."""
    left = _upper_bound(nums, target)
    if left == 0:
        return NOT_FOUND
    return left - 1 if nums[left - 1] == target else NOT_FOUND


def rightmost_closed(nums: Sequence[int], target: int) -> int:
    """Return the last index of ``target`` (closed interval), or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    if right < 0 or nums[right] != target:
        return NOT_FOUND
    return right


def _reachable(heights: Sequence[Sequence[int]], threshold: int) -> bool:
    rows, cols = len(heights), len(heights[0])
    seen = {(0, 0)}
    stack = [(0, 0)]
    while stack:
        x, y = stack.pop()
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if not (0 <= nx < rows and 0 <= ny < cols) or (nx, ny) in seen:
                continue
            if abs(heights[x][y] - heights[nx][ny]) <= threshold:
                seen.add((nx, ny))
                stack.append((nx, ny))
    return (rows - 1, cols - 1) in seen


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Return the smallest maximum step height needed to cross the grid.

    The path runs from the top-left to the bottom-right cell, moving up,
    down, left or right. The effort is searched between 0 and 1,000,000.
    """
    if not heights or not heights[0]:
        raise ValueError("heights must be a non-empty grid")
    if len(heights) == 1 and len(heights[0]) == 1:
        return 0

    low, high = 0, MAX_EFFORT
    best: int | None = None
    while low <= high:
        mid = (low + high) // 2
        if _reachable(heights, mid):
            best = mid if best is None else min(best, mid)
            high = mid - 1
        else:
            low = mid + 1
    if best is None:
        raise ValueError(f"no path within the maximum effort of {MAX_EFFORT}")
    return best