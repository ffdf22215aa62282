"""Reindeer Maze: the cheapest path where turning costs a thousand."""

from __future__ import annotations

import heapq

Cell = tuple[int, int]
State = tuple[int, int, int, int]

STEP_COST = 1
TURN_COST = 1000


def parse_maze(text: str) -> tuple[frozenset[Cell], State, Cell]:
    """Walls as ``(row, col)``, the start facing east, and the end cell."""
    walls: set[Cell] = set()
    start: State | None = None
    end: Cell | None = None
    for r, line in enumerate(text.splitlines()):
        for c, ch in enumerate(line):
            if ch == "#":
                walls.add((r, c))
            elif ch == "S":
                start = (r, c, 0, 1)
            elif ch == "E":
                end = (r, c)
    if start is None:
        raise ValueError("the maze has no start")
    if end is None:
        raise ValueError("the maze has no end")
    return frozenset(walls), start, end


def neighbors(state: tuple[int, State]) -> list[tuple[int, State]]:
    """Step forward, or turn either way on the spot, with their costs."""
    dist, (r, c, dr, dc) = state
    return [
        (dist + STEP_COST, (r + dr, c + dc, dr, dc)),
        (dist + TURN_COST, (r, c, -dc, dr)),
        (dist + TURN_COST, (r, c, dc, -dr)),
    ]


def lowest_score(text: str) -> int:
    """The cheapest score from the start to the end."""
    walls, start, end = parse_maze(text)
    lines = text.splitlines()

    def is_open(r: int, c: int) -> bool:
        return 0 <= r < len(lines) and 0 <= c < len(lines[r]) and (r, c) not in walls

    heap: list[tuple[int, State]] = [(0, start)]
    seen: set[State] = set()
    while heap:
        dist, state = heapq.heappop(heap)
        if state in seen:
            continue
        seen.add(state)
        if state[:2] == end:
            return dist
        for next_dist, next_state in neighbors((dist, state)):
            if next_state in seen or not is_open(next_state[0], next_state[1]):
                continue
            heapq.heappush(heap, (next_dist, next_state))
    raise ValueError("the end cannot be reached")