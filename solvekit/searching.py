"""Binary-search puzzles."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated ascending list of distinct values."""
    if not nums:
        raise ValueError("no values given")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] < nums[hi]:
            hi = mid
        else:
            lo = mid + 1
    return nums[lo]


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending list of distinct values, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if target > nums[mid] or target < nums[lo]:
                lo = mid + 1
            else:
                hi = mid - 1
        elif target < nums[mid] or target > nums[hi]:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in order, ascend."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    lo, hi = 0, len(matrix) * cols - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        value = matrix[mid // cols][mid % cols]
        if target > value:
            lo = mid + 1
        elif target < value:
            hi = mid - 1
        else:
            return True
    return False


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the first index of ``target`` in an ascending list, or -1."""
    index = bisect_left(nums, target)
    return index if index < len(nums) and nums[index] == target else -1


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes every pile within ``h`` hours.

    When no speed is fast enough, the largest pile size is returned.
    """
    if not piles:
        raise ValueError("no piles given")
    top = max(piles)

    def finishes(speed: int) -> bool:
        return sum(-(-pile // speed) for pile in piles) <= h

    index = bisect_left(range(1, top + 1), True, key=finishes)
    return 1 + min(index, top - 1)