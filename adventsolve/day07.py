"""Bridge Repair: which equations can be made true with + and *."""

from __future__ import annotations


def parse(text: str) -> list[tuple[int, list[int]]]:
    equations = []
    for line in text.splitlines():
        sections = line.split(":")
        if len(sections) != 2:
            raise ValueError(f"expected 'target: operands', got {line!r}")
        target, operands = sections
        equations.append((int(target), [int(n) for n in operands.split()]))
    return equations


def is_reachable(target: int, operands: list[int]) -> bool:
    """Whether adding or multiplying left to right can give ``target``."""
    if not operands:
        raise ValueError("an equation needs at least one operand")
    if len(operands) == 1:
        return target == operands[0]
    *rest, last = operands
    if target > last and is_reachable(target - last, rest):
        return True
    return target % last == 0 and is_reachable(target // last, rest)


def solve(text: str) -> int:
    return sum(
        target for target, operands in parse(text) if is_reachable(target, operands)
    )