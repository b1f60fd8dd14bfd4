"""Monotonic-stack puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Return, for each day, how many days until a warmer one, or 0 if none comes."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temp in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temp:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Return the area of the largest rectangle inside the histogram."""
    bars = [*heights, 0]
    best = 0
    stack: list[int] = []
    for i, height in enumerate(bars):
        while stack and height <= bars[stack[-1]]:
            top = bars[stack.pop()]
            left = stack[-1] if stack else -1
            best = max(best, (i - left - 1) * top)
        stack.append(i)
    return best


def car_fleet(target: int, position: Iterable[int], speed: Iterable[int]) -> int:
    """Count the fleets of cars that arrive at ``target``."""
    cars = sorted(zip(position, speed, strict=True), reverse=True)
    fleets = 0
    lead_time = -math.inf
    for pos, spd in cars:
        time = (target - pos) / spd
        if time > lead_time:
            fleets += 1
            lead_time = time
    return fleets