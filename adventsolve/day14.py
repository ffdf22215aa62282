"""Restroom Redoubt: robots wrapping around a rectangular room."""

from __future__ import annotations

import re
from collections import Counter
from math import prod

from .grid import Position

Robot = tuple[Position, Position]
BATHROOM: Position = (101, 103)

_NUMBER = re.compile(r"-?\d+")


def parse_robots(text: str) -> list[Robot]:
    """Positions and velocities from ``p=x,y v=dx,dy`` lines."""
    numbers = [int(n) for n in _NUMBER.findall(text)]
    if len(numbers) % 4:
        raise ValueError("each robot needs a position and a velocity")
    return [
        ((x, y), (dx, dy))
        for x, y, dx, dy in zip(*[iter(numbers)] * 4)
    ]


def position_after(robot: Robot, seconds: int, size: Position = BATHROOM) -> Position:
    (x, y), (dx, dy) = robot
    width, height = size
    return (x + dx * seconds) % width, (y + dy * seconds) % height


def safety_factor(
    robots: list[Robot], size: Position = BATHROOM, seconds: int = 100
) -> int:
    """Product of robot counts per quadrant, ignoring the middle lines."""
    mid_x, mid_y = size[0] // 2, size[1] // 2
    quadrants = Counter(
        (x > mid_x, y > mid_y)
        for x, y in (position_after(robot, seconds, size) for robot in robots)
        if x != mid_x and y != mid_y
    )
    return prod(quadrants.values())


def render(robots: list[Robot], size: Position = BATHROOM, seconds: int = 0) -> str:
    """The room with ``#`` wherever a robot stands after ``seconds``."""
    width, height = size
    occupied = {position_after(robot, seconds, size) for robot in robots}
    return "\n".join(
        "".join("#" if (x, y) in occupied else "." for x in range(width))
        for y in range(height)
    )