"""Race Condition: shortcuts through the walls of a racetrack."""

from __future__ import annotations

from collections import deque

from .grid import Grid, Position


def distances_to_exit(grid: Grid[str]) -> dict[Position, int]:
    """Steps from every reachable track cell to the exit ``E``."""
    exit_pos = grid.find_first(lambda cell: cell == "E")
    if exit_pos is None:
        raise ValueError("the track has no exit")
    distances = {exit_pos: 0}
    queue = deque([(exit_pos, 0)])
    while queue:
        current, dist = queue.popleft()
        for adj in grid.adjacent_cells(current):
            if adj in distances:
                continue
            cell = grid.get(adj)
            if cell in (".", "S"):
                distances[adj] = dist + 1
                queue.append((adj, dist + 1))
            elif cell is not None and cell != "#":
                raise ValueError(f"unexpected tile {cell!r} at {adj}")
    return distances


def cheat_savings(
    distances: dict[Position, int], max_cheat: int = 20
) -> dict[tuple[Position, Position], int]:
    """Time saved by each cheat of at most ``max_cheat`` steps that saves any."""
    deltas = [
        (dx, dy)
        for dx in range(-max_cheat, max_cheat + 1)
        for dy in range(-max_cheat, max_cheat + 1)
        if abs(dx) + abs(dy) <= max_cheat
    ]
    savings: dict[tuple[Position, Position], int] = {}
    for start, d_start in distances.items():
        x, y = start
        for dx, dy in deltas:
            end = (x + dx, y + dy)
            d_end = distances.get(end)
            if d_end is None:
                continue
            saved = d_start - d_end - (abs(dx) + abs(dy))
            if saved > 0:
                savings[(start, end)] = saved
    return savings


def count_cheats(text: str, max_cheat: int = 20, min_saving: int = 100) -> int:
    """How many cheats save at least ``min_saving`` steps."""
    distances = distances_to_exit(Grid.from_str(text))
    return sum(
        1 for saved in cheat_savings(distances, max_cheat).values() if saved >= min_saving
    )