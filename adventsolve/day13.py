"""Claw Contraption: the cheapest button presses to win each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction

_MACHINE = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\r?\n"
    r"Button B: X\+(\d+), Y\+(\d+)\r?\n"
    r"Prize: X=(\d+), Y=(\d+)"
)

A_COST = 3
B_COST = 1


@dataclass(frozen=True)
class ClawMachine:
    ax: int
    ay: int
    bx: int
    by: int
    prize_x: int
    prize_y: int


def parse_machines(text: str, offset: int = 0) -> list[ClawMachine]:
    """Read every machine, moving each prize by ``offset`` on both axes."""
    machines = []
    for match in _MACHINE.finditer(text):
        ax, ay, bx, by, px, py = (int(group) for group in match.groups())
        machines.append(ClawMachine(ax, ay, bx, by, px + offset, py + offset))
    return machines


def solve_machine(machine: ClawMachine) -> tuple[int, int] | None:
    """Presses of A and B that land on the prize, or ``None`` if not whole."""
    det = machine.ax * machine.by - machine.bx * machine.ay
    if det == 0:
        raise ValueError(f"buttons are not independent: {machine}")
    a = Fraction(machine.prize_x * machine.by - machine.bx * machine.prize_y, det)
    b = Fraction(machine.ax * machine.prize_y - machine.prize_x * machine.ay, det)
    if a.denominator != 1 or b.denominator != 1:
        return None
    return int(a), int(b)


def total_cost(text: str, offset: int = 0) -> int:
    """Tokens needed to win every prize that can be won."""
    cost = 0
    for machine in parse_machines(text, offset):
        presses = solve_machine(machine)
        if presses is not None:
            a, b = presses
            cost += A_COST * a + B_COST * b
    return cost