"""Guard Gallivant: following a patrolling guard around a lab."""

from __future__ import annotations

from dataclasses import dataclass

from .grid import Position

_UP: Position = (0, -1)


@dataclass(frozen=True)
class TraverseResult:
    """Where a walk ended: the tiles seen if the guard left, else ``None``."""

    visited: frozenset[Position] | None = None

    def escaped(self) -> bool:
        return self.visited is not None


def parse(text: str) -> tuple[Position, set[Position], Position]:
    """The guard's start, the obstacle positions and the room size."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty map")
    start: Position = (0, 0)
    obstacles: set[Position] = set()
    for y, line in enumerate(lines):
        for x, c in enumerate(line):
            if c == "#":
                obstacles.add((x, y))
            elif c == "^":
                start = (x, y)
    return start, obstacles, (len(lines[0]), len(lines))


def traverse(
    start: Position, obstacles: set[Position] | frozenset[Position], size: Position
) -> TraverseResult:
    """Walk the guard until it leaves the room or repeats a step."""
    width, height = size
    x, y = start
    dx, dy = _UP
    seen: dict[Position, set[Position]] = {}
    while True:
        seen.setdefault((x, y), set()).add((dx, dy))
        if (x + dx, y + dy) in obstacles:
            dx, dy = -dy, dx
        x, y = x + dx, y + dy
        if not (0 <= x < width and 0 <= y < height):
            return TraverseResult(frozenset(seen))
        if (dx, dy) in seen.get((x, y), ()):
            return TraverseResult()


def solve(text: str) -> tuple[int, int]:
    """Tiles the guard covers, and obstacle spots that trap it in a loop."""
    start, obstacles, size = parse(text)
    result = traverse(start, obstacles, size)
    if result.visited is None:
        raise ValueError("the guard never leaves the room")
    loops = sum(
        not traverse(start, obstacles | {space}, size).escaped()
        for space in result.visited
    )
    return len(result.visited), loops