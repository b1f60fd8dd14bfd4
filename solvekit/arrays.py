"""Puzzles over arrays of integers and strings."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise
from operator import mul


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``i < j`` whose values add to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        j = seen.get(target - value)
        if j is not None:
            return [j, i]
        seen[value] = i
    return []


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    values = list(nums)
    return len(set(values)) != len(values)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for every position, the product of all the other values."""
    if not nums:
        return []
    prefix = list(accumulate(nums[:-1], mul, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, larger values first on equal counts."""
    counts = Counter(nums)
    return heapq.nlargest(k, counts, key=lambda value: (counts[value], value))


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among ``nums``."""
    best = run = 0
    previous: int | None = None
    for value in sorted(set(nums)):
        run = run + 1 if previous is not None and value == previous + 1 else 1
        best = max(best, run)
        previous = value
    return best


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether the filled cells of a 9x9 board break no row, column or box rule."""
    seen: set[tuple[str, int, str]] = set()
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell == ".":
                continue
            keys = (("row", i, cell), ("col", j, cell), ("box", i // 3 * 3 + j // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the running totals of ``nums``."""
    return list(accumulate(nums))


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals of a square matrix, counting the centre once."""
    n = len(mat)
    total = sum(row[i] + row[n - 1 - i] for i, row in enumerate(mat))
    if n % 2 == 1:
        total -= mat[n // 2][n // 2]
    return total


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in a list of ``n + 1`` values drawn from ``1..n``."""
    values = list(nums)
    while values[0] != values[values[0]]:
        j = values[0]
        values[0], values[j] = values[j], values[0]
    return values[0]


def max_chunks_to_sorted(arr: Iterable[int]) -> int:
    """Count the most chunks a permutation of ``0..n-1`` splits into so sorting each sorts all."""
    return sum(1 for i, highest in enumerate(accumulate(arr, max)) if highest == i)


def find_score(nums: Sequence[int]) -> int:
    """Score an array by repeatedly taking the smallest unmarked value and marking its neighbours."""
    marked = math.inf
    values: list[float] = list(nums)
    n = len(values)
    score = 0
    for i in range(n - 1):
        if values[i] <= values[i + 1]:
            score += values[i]
            values[i + 1] = values[i] = values[max(i - 1, 0)] = marked
    for i in range(n - 1, 0, -1):
        if values[i] < values[i - 1]:
            score += values[i]
            values[i - 1] = marked
    if values and values[0] != marked:
        score += values[0]
    return int(score)


def is_array_special(nums: Iterable[int]) -> bool:
    """Tell whether every pair of neighbours differs in parity."""
    return all(a % 2 != b % 2 for a, b in pairwise(nums))


def special_array_queries(
    nums: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[bool]:
    """Answer, for each ``[from, to]`` query, whether that slice is special."""
    bad = [0, *accumulate(int(a % 2 == b % 2) for a, b in pairwise(nums))]
    return [x == y or bad[y] == bad[x] for x, y in queries]


def find_median_sorted_arrays(nums1: Iterable[int], nums2: Iterable[int]) -> float:
    """Return the median of the values of both arrays together."""
    merged = sorted([*nums1, *nums2])
    if not merged:
        raise ValueError("median of no values")
    mid, odd = divmod(len(merged), 2)
    if odd:
        return float(merged[mid])
    return (merged[mid - 1] + merged[mid]) / 2


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the greatest average of any ``k`` contiguous values."""
    if not 0 < k <= len(nums):
        raise ValueError(f"window size {k} does not fit {len(nums)} values")
    window = sum(nums[:k])
    best = window
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k