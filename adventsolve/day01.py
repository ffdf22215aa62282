"""Historian Hysteria: comparing two location lists."""

from __future__ import annotations

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated numbers into two lists."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        words = line.split()
        if len(words) < 2:
            raise ValueError(f"expected two numbers on line: {line!r}")
        left.append(int(words[0]))
        right.append(int(words[1]))
    return left, right


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum of differences between the sorted lists, pair by pair."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: list[int], right: list[int]) -> int:
    """Each left number times how often it appears on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def solve(text: str) -> tuple[int, int]:
    left, right = parse_lists(text)
    return total_distance(left, right), similarity_score(left, right)