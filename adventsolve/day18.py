"""RAM Run: escaping a memory space as bytes fall into it."""

from __future__ import annotations

from collections import deque

from .grid import Grid, Position


def parse_points(text: str) -> list[Position]:
    """One ``x,y`` pair per line."""
    points = []
    for line in text.splitlines():
        parts = line.split(",")
        if len(parts) != 2:
            raise ValueError(f"expected 'x,y', got {line!r}")
        points.append((int(parts[0]), int(parts[1])))
    return points


def _room(points: list[Position], size: int) -> Grid[bool]:
    grid = Grid.filled(size + 1, size + 1, False)
    for point in points:
        grid[point] = True
    return grid


def shortest_path(grid: Grid[bool]) -> int | None:
    """Fewest steps from the top-left to the bottom-right, or ``None``."""
    target = (grid.width - 1, grid.height - 1)
    start = (0, 0)
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        current, dist = queue.popleft()
        if current == target:
            return dist
        for adj in grid.adjacent_cells(current):
            if adj in seen or not grid.contains(adj) or grid[adj]:
                continue
            seen.add(adj)
            queue.append((adj, dist + 1))
    return None


def can_exit(grid: Grid[bool]) -> bool:
    return shortest_path(grid) is not None


def first_blocking_byte(
    points: list[Position], size: int, skip: int = 0
) -> Position | None:
    """Drop the bytes after the first ``skip`` into an empty room one by one;
    return the first that cuts off the exit."""
    grid = Grid.filled(size + 1, size + 1, False)
    for point in points[skip:]:
        grid[point] = True
        if not can_exit(grid):
            return point
    return None


def solve(text: str, size: int = 70, take: int = 1024) -> tuple[int | None, Position | None]:
    points = parse_points(text)
    return (
        shortest_path(_room(points[:take], size)),
        first_blocking_byte(points, size, take),
    )