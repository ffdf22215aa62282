"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from collections import deque
from itertools import takewhile
from typing import Callable

from .grid import Grid, Position

_DIRECTIONS: dict[str, Position] = {
    "^": (0, -1),
    "v": (0, 1),
    ">": (1, 0),
    "<": (-1, 0),
}

_WIDE_CELLS = {"@": "@.", "O": "[]"}

Pusher = Callable[[Grid[str], Position, Position], Position]


def parse_warehouse(text: str) -> tuple[str, str]:
    """Split the input into the map text and the joined move string."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("expected a map, a blank line and a list of moves") from None
    moves = "".join(takewhile(bool, lines[blank + 1:]))
    return "\n".join(lines[:blank]), moves


def parse_moves(moves: str) -> list[Position]:
    """Turn ``^v<>`` characters into direction vectors."""
    try:
        return [_DIRECTIONS[ch] for ch in moves]
    except KeyError as err:
        raise ValueError(f"not a direction: {err.args[0]!r}") from None


def widen(map_text: str) -> str:
    """Double every tile horizontally; boxes become ``[]``."""
    return "\n".join(
        "".join(_WIDE_CELLS.get(ch, ch * 2) for ch in line)
        for line in map_text.splitlines()
    )


def _step(pos: Position, direction: Position) -> Position:
    return pos[0] + direction[0], pos[1] + direction[1]


def _shift(grid: Grid[str], cells: list[Position], direction: Position) -> None:
    for pos in reversed(cells):
        grid[_step(pos, direction)] = grid[pos]
        grid[pos] = "."


def push_narrow(grid: Grid[str], robot: Position, direction: Position) -> Position:
    """Move the robot one step, pushing a line of ``O`` boxes; return its new spot."""
    affected: list[Position] = []
    pressure = robot
    while True:
        affected.append(pressure)
        pressure = _step(pressure, direction)
        cell = grid[pressure]
        if cell == ".":
            break
        if cell == "#":
            return robot
        if cell != "O":
            raise ValueError(f"unexpected tile {cell!r} at {pressure}")
    _shift(grid, affected, direction)
    return _step(robot, direction)


def push_wide(grid: Grid[str], robot: Position, direction: Position) -> Position:
    """Move the robot one step among two-cell ``[]`` boxes; return its new spot."""
    queue = deque([robot])
    seen: set[Position] = set()
    may_push: list[Position] = []
    while queue:
        pos = queue.popleft()
        if pos in seen:
            continue
        cell = grid[pos]
        if cell == "#":
            return robot
        if cell == ".":
            continue
        x, y = pos
        if cell == "[":
            queue.append((x + 1, y))
        elif cell == "]":
            queue.append((x - 1, y))
        elif cell not in {"@", "O"}:
            raise ValueError(f"unexpected tile {cell!r} at {pos}")
        seen.add(pos)
        may_push.append(pos)
        queue.append(_step(pos, direction))
    _shift(grid, may_push, direction)
    return _step(robot, direction)


def gps_sum(grid: Grid[str]) -> int:
    """Sum of ``x + 100 * y`` over every box (its left edge when wide)."""
    return sum(x + 100 * y for (x, y), cell in grid.cells_enumerate() if cell in "O[")


def _run(grid: Grid[str], moves: str, push: Pusher) -> None:
    robot = grid.find_first(lambda cell: cell == "@")
    if robot is None:
        raise ValueError("no robot")
    for direction in parse_moves(moves):
        robot = push(grid, robot, direction)


def solve(text: str) -> int:
    map_text, moves = parse_warehouse(text)
    grid = Grid.from_str(map_text)
    _run(grid, moves, push_narrow)
    return gps_sum(grid)


def solve_wide(text: str) -> int:
    map_text, moves = parse_warehouse(text)
    grid = Grid.from_str(widen(map_text))
    _run(grid, moves, push_wide)
    return gps_sum(grid)