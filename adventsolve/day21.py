"""Keypad Conundrum: robots typing codes on keypads through other robots."""

from __future__ import annotations

from typing import Sequence

from .grid import Position

NUMERIC: tuple[str, ...] = ("789", "456", "123", "p0A")
DIRECTIONAL: tuple[str, ...] = ("p^A", "<v>")
GAP = "p"

_MOVES: dict[str, Position] = {
    "<": (-1, 0),
    ">": (1, 0),
    "^": (0, -1),
    "v": (0, 1),
}

Layout = Sequence[str]


def _locate(layout: Layout, key: str) -> Position | None:
    for y, row in enumerate(layout):
        x = row.find(key)
        if x >= 0:
            return x, y
    return None


def get_delta(layout: Layout, start: str, end: str) -> str:
    """Arrow presses that move from ``start`` to ``end`` and press it,
    horizontal first unless that would cross the gap."""
    from_pos = _locate(layout, start)
    to_pos = _locate(layout, end)
    if from_pos is None or to_pos is None:
        raise ValueError(f"{start!r} or {end!r} is not on the layout")
    avoid = _locate(layout, GAP)
    if avoid is None:
        raise ValueError("the layout has no gap")
    (fx, fy), (tx, ty) = from_pos, to_pos
    dx, dy = tx - fx, ty - fy
    step = 1 if dx > 0 else -1
    x_first = all((fx + step * i, fy) != avoid for i in range(1, abs(dx) + 1))
    horizontal = (">" if dx > 0 else "<") * abs(dx)
    vertical = ("v" if dy > 0 else "^") * abs(dy)
    return (horizontal + vertical if x_first else vertical + horizontal) + "A"


def to_instructions(layout: Layout, code: str) -> str:
    """Arrow presses that type ``code``, starting from ``A``."""
    return "".join(get_delta(layout, a, b) for a, b in zip("A" + code, code))


def from_instructions(layout: Layout, instructions: str) -> str:
    """The keys typed by following ``instructions`` from ``A``."""
    pos = _locate(layout, "A")
    if pos is None:
        raise ValueError("the layout has no A key")
    x, y = pos
    out = []
    for ch in instructions:
        if ch == "A":
            out.append(layout[y][x])
            continue
        try:
            dx, dy = _MOVES[ch]
        except KeyError:
            raise ValueError(f"not an instruction: {ch!r}") from None
        x, y = x + dx, y + dy
        if not (0 <= y < len(layout) and 0 <= x < len(layout[y])):
            raise ValueError(f"moved off the layout to {(x, y)}")
    return "".join(out)


def complexity(text: str, robots: int = 2) -> int:
    """Sum over codes of presses needed times the code's numeric part."""
    total = 0
    for code in text.splitlines():
        if not code:
            continue
        presses = to_instructions(NUMERIC, code)
        for _ in range(robots):
            presses = to_instructions(DIRECTIONAL, presses)
        digits = "".join(ch for ch in code if ch.isdigit())
        if not digits:
            raise ValueError(f"code has no digits: {code!r}")
        total += len(presses) * int(digits)
    return total