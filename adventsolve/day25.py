"""Code Chronicle: which keys fit which locks."""

from __future__ import annotations

from itertools import product

Heights = tuple[int, ...]

MAX_HEIGHT = 5
_FILLED_ROW = "#####"


def parse_schematics(text: str) -> tuple[list[Heights], list[Heights]]:
    """Column heights of the locks and of the keys (keys have a filled top row)."""
    blocks: list[list[str]] = [[]]
    for line in text.splitlines():
        if line.strip():
            blocks[-1].append(line.strip())
        elif blocks[-1]:
            blocks.append([])
    blocks = [block for block in blocks if block]
    if not blocks:
        raise ValueError("no schematics")
    locks: list[Heights] = []
    keys: list[Heights] = []
    for block in blocks:
        width = len(block[0])
        heights = tuple(
            sum(1 for row in block if row[col] == "#") - 1 for col in range(width)
        )
        (keys if block[0] == _FILLED_ROW else locks).append(heights)
    return locks, keys


def can_fit(lock: Heights, key: Heights) -> bool:
    """No column of the pair overlaps."""
    return max(a + b for a, b in zip(lock, key)) <= MAX_HEIGHT


def count_fits(text: str) -> int:
    """How many lock and key pairs fit together."""
    locks, keys = parse_schematics(text)
    return sum(can_fit(lock, key) for lock, key in product(locks, keys))