"""Cheapest way to make a valid path through a grid of arrows."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

# Indexed by sign - 1: 1 right, 2 left, 3 down, 4 up.
_MOVES = ((0, 1), (0, -1), (1, 0), (-1, 0))


def min_cost(grid: Sequence[Sequence[int]]) -> int:
    """Return how many arrows must change so that following them leads from top left to bottom right."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    cost: list[list[float]] = [[math.inf] * cols for _ in range(rows)]
    cost[0][0] = 0
    queue: deque[tuple[int, int]] = deque([(0, 0)])
    while queue:
        r, c = queue.popleft()
        for sign, (dr, dc) in enumerate(_MOVES, start=1):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            follows = grid[r][c] == sign
            new_cost = cost[r][c] + (0 if follows else 1)
            if new_cost < cost[nr][nc]:
                cost[nr][nc] = new_cost
                if follows:
                    queue.appendleft((nr, nc))
                else:
                    queue.append((nr, nc))
    return int(cost[-1][-1])