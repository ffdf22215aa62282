"""Print Queue: checking and fixing page orders against rules."""

from __future__ import annotations

from functools import cmp_to_key

Rules = dict[int, set[int]]


def parse(text: str) -> tuple[Rules, list[list[int]]]:
    """Rules map a page to the pages that must precede it."""
    rules: Rules = {}
    updates: list[list[int]] = []
    for line in text.splitlines():
        if "|" in line:
            first, second = (int(part) for part in line.split("|", 1))
            rules.setdefault(second, set()).add(first)
        elif line:
            updates.append([int(page) for page in line.split(",")])
    return rules, updates


def is_ordered(rules: Rules, pages: list[int]) -> bool:
    """Every page is listed as a predecessor of the page after it."""
    return all(left in rules.get(right, ()) for left, right in zip(pages, pages[1:]))


def reorder(rules: Rules, pages: list[int]) -> list[int]:
    """The pages sorted so that each rule is respected."""

    def compare(a: int, b: int) -> int:
        if a in rules.get(b, ()):
            return -1
        if b in rules.get(a, ()):
            return 1
        return 0

    return sorted(pages, key=cmp_to_key(compare))


def solve(text: str) -> tuple[int, int]:
    rules, updates = parse(text)
    ordered = sum(u[len(u) // 2] for u in updates if is_ordered(rules, u))
    fixed = sum(
        reorder(rules, u)[len(u) // 2] for u in updates if not is_ordered(rules, u)
    )
    return ordered, fixed