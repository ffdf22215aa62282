"""Plutonian Pebbles: stones that change every time you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def blink(stone: int) -> list[int]:
    """What one stone becomes after a single blink."""
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * 2024]


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """How many stones there are after ``blinks`` blinks."""
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for engraving, occurrences in counts.items():
            for child in blink(engraving):
                following[child] += occurrences
        counts = following
    return sum(counts.values())


def solve(text: str, blinks: int = 75) -> int:
    return count_stones((int(word) for word in text.split()), blinks)