"""Resonant Collinearity: antinodes of antenna pairs."""

from __future__ import annotations

from itertools import combinations

from .grid import Grid, Position


def find_antinodes(grid: Grid[str]) -> tuple[set[Position], set[Position]]:
    """Antinodes at double distance, and all in-line antinodes."""
    frequencies = dict.fromkeys(c for c in grid if not c.isspace() and c != ".")
    near: set[Position] = set()
    in_line: set[Position] = set()
    for frequency in frequencies:
        towers = [pos for pos, c in grid.cells_enumerate() if c == frequency]
        for (ax, ay), (bx, by) in combinations(towers, 2):
            dx, dy = ax - bx, ay - by
            for antinode in ((ax + dx, ay + dy), (bx - dx, by - dy)):
                if grid.contains(antinode):
                    near.add(antinode)
            pointer = (ax, ay)
            while grid.contains(pointer):
                in_line.add(pointer)
                pointer = (pointer[0] - dx, pointer[1] - dy)
            pointer = (bx, by)
            while grid.contains(pointer):
                in_line.add(pointer)
                pointer = (pointer[0] + dx, pointer[1] + dy)
    return near, in_line


def solve(text: str) -> tuple[int, int]:
    near, in_line = find_antinodes(Grid.from_str(text))
    return len(near), len(in_line)