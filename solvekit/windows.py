"""Two-pointer and sliding-window puzzles over arrays and strings."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold between them."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] <= height[right]:
            left += 1
        else:
            right -= 1
    return best


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sale, or 0."""
    it = iter(prices)
    try:
        lowest = next(it)
    except StopIteration:
        raise ValueError("no prices given") from None
    best = 0
    for price in it:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triple of values that adds to zero, in ascending order."""
    values = sorted(nums)
    triples: list[list[int]] = []
    for i, first in enumerate(values):
        if first > 0:
            break
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                triples.append([first, values[left], values[right]])
                left += 1
                right -= 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
    return triples


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based positions ``[i, j]`` of two values of a sorted list adding to ``target``, or ``[]``."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        else:
            return [left + 1, right + 1]
    return []


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    if not height:
        return 0
    left, right = 0, len(height) - 1
    left_max, right_max = height[left], height[right]
    water = 0
    while left < right:
        if left_max < right_max:
            left += 1
            left_max = max(left_max, height[left])
            water += left_max - height[left]
        else:
            right -= 1
            right_max = max(right_max, height[right])
            water += right_max - height[right]
    return water


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    left = best = 0
    for right, ch in enumerate(s):
        if last_seen.get(ch, -1) >= left:
            left = last_seen[ch] + 1
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one character reachable by replacing at most ``k`` characters."""
    counts: Counter[str] = Counter()
    left = best = top = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        top = max(top, counts[ch])
        if right - left + 1 - top > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of ``s1`` is a substring of ``s2``."""
    size = len(s1)
    if size > len(s2):
        return False
    need = Counter(s1)
    window = Counter(s2[:size])
    if window == need:
        return True
    for leaving, entering in zip(s2, s2[size:]):
        window[entering] += 1
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
        if window == need:
            return True
    return False


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``, or ``""``."""
    if not t:
        return ""
    need = Counter(t)
    window: Counter[str] = Counter()
    have, required = 0, len(need)
    best: tuple[int, int] | None = None
    left = 0
    for right, ch in enumerate(s):
        window[ch] += 1
        if ch in need and window[ch] == need[ch]:
            have += 1
        while have == required:
            if best is None or right + 1 - left < best[1] - best[0]:
                best = (left, right + 1)
            out = s[left]
            window[out] -= 1
            if out in need and window[out] < need[out]:
                have -= 1
            left += 1
    return "" if best is None else s[best[0]:best[1]]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("window size must be positive")
    candidates: deque[int] = deque()
    maxima: list[int] = []
    for i, value in enumerate(nums):
        while candidates and candidates[0] < i - k + 1:
            candidates.popleft()
        while candidates and nums[candidates[-1]] <= value:
            candidates.pop()
        candidates.append(i)
        if i + 1 >= k:
            maxima.append(nums[candidates[0]])
    return maxima