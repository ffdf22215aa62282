"""Hoof It: counting hiking trails from 0 up to 9."""

from __future__ import annotations

from collections import deque

from .grid import Grid, Position


def parse(text: str) -> Grid[int]:
    """A grid of heights, one digit per cell."""
    return Grid.from_str(text).map(int)


def count_trails(grid: Grid[int], start: Position) -> int:
    """How many climbs in steps of one from ``start`` reach a height of 9."""
    queue = deque([start])
    visited: set[Position] = set()
    peaks = 0
    while queue:
        current = queue.popleft()
        value = grid[current]
        if value == 9:
            peaks += 1
            continue
        visited.add(current)
        for adj in grid.adjacent_cells(current):
            if grid.get(adj) != value + 1 or adj in visited:
                continue
            queue.append(adj)
    return peaks


def solve(text: str) -> int:
    grid = parse(text)
    return sum(
        count_trails(grid, pos) for pos, height in grid.cells_enumerate() if height == 0
    )