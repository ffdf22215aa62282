"""Ceres Search: counting XMAS words and X-shaped MAS crosses."""

from __future__ import annotations

from .grid import Grid, Position

_DIRECTIONS: tuple[Position, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)

# Corners in clockwise order: top-left, top-right, bottom-right, bottom-left.
_CORNERS: tuple[Position, ...] = ((-1, -1), (1, -1), (1, 1), (-1, 1))
_CROSS_PATTERNS = frozenset({"MMSS", "SMMS", "SSMM", "MSSM"})


def has_mas(grid: Grid[str], start: Position, direction: Position) -> bool:
    """Whether ``M``, ``A``, ``S`` follow ``start`` in ``direction``."""
    x, y = start
    dx, dy = direction
    for step, letter in enumerate("MAS", start=1):
        if grid.get((x + dx * step, y + dy * step)) != letter:
            return False
    return True


def is_xmas_center(grid: Grid[str], pos: Position) -> bool:
    """Whether two diagonal ``MAS`` words cross at ``pos``."""
    if grid.get(pos) != "A":
        return False
    x, y = pos
    corners = [grid.get((x + dx, y + dy)) for dx, dy in _CORNERS]
    if any(corner is None for corner in corners):
        return False
    return "".join(corners) in _CROSS_PATTERNS


def count_xmas(text: str) -> int:
    grid = Grid.from_str(text)
    return sum(
        has_mas(grid, pos, direction)
        for pos, letter in grid.cells_enumerate()
        if letter == "X"
        for direction in _DIRECTIONS
    )


def count_x_mas(text: str) -> int:
    grid = Grid.from_str(text)
    return sum(is_xmas_center(grid, pos) for pos in grid.coords())


def solve(text: str) -> tuple[int, int]:
    return count_xmas(text), count_x_mas(text)