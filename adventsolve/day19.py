"""Linen Layout: arranging striped towels into requested designs."""

from __future__ import annotations

from functools import lru_cache


def parse(text: str) -> tuple[list[str], list[str]]:
    """Towel patterns sorted by length, and the designs to make."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("expected a line of towel patterns")
    towels = sorted(lines[0].split(", "), key=len)
    return towels, lines[2:]


def count_ways(towels: list[str], design: str) -> int:
    """How many towel sequences join to exactly ``design``."""
    patterns = tuple(towels)

    @lru_cache(maxsize=None)
    def ways(rest: str) -> int:
        if not rest:
            return 1
        return sum(ways(rest[len(t):]) for t in patterns if rest.startswith(t))

    return ways(design)


def solve(text: str) -> tuple[int, int]:
    """Designs that can be made, and the total number of ways to make them."""
    towels, designs = parse(text)
    counts = [count_ways(towels, design) for design in designs]
    return sum(1 for c in counts if c > 0), sum(counts)