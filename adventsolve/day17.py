"""Chronospatial Computer: a three-bit machine with three registers."""

from __future__ import annotations

from itertools import count
from typing import Iterable

_DIGITS = "0123456789"


def parse_computer(text: str) -> tuple[int, int, int, list[int]]:
    """Registers A, B and C and the program, from the puzzle text."""
    sections = ["".join(ch for ch in line if ch in _DIGITS) for line in text.splitlines()]
    if len(sections) < 5:
        raise ValueError("expected three registers, a blank line and a program")
    a, b, c = (int(section) for section in sections[:3])
    return a, b, c, [int(ch) for ch in sections[4]]


def _combo(operand: int, a: int, b: int, c: int) -> int:
    if operand <= 3:
        return operand
    if operand == 7:
        raise ValueError("combo operand 7 is reserved")
    return (a, b, c)[operand - 4]


def run_program(a: int, b: int, c: int, program: list[int]) -> list[int]:
    """Run until the instruction pointer leaves the program; return the output."""
    out: list[int] = []
    ip = 0
    while ip < len(program) - 1:
        opcode, operand = program[ip], program[ip + 1]
        if not 0 <= opcode <= 7:
            raise ValueError(f"opcode {opcode} is not three bits")
        if not 0 <= operand <= 7:
            raise ValueError(f"operand {operand} is not three bits")
        if opcode == 3:
            if a != 0:
                ip = operand
                continue
        elif opcode == 1:
            b ^= operand
        elif opcode == 4:
            b ^= c
        else:
            value = _combo(operand, a, b, c)
            if opcode == 0:
                a >>= value
            elif opcode == 2:
                b = value % 8
            elif opcode == 5:
                out.append(value % 8)
            elif opcode == 6:
                b = a >> value
            else:
                c = a >> value
        ip += 2
    return out


def find_self_output(
    program: list[int],
    target: Iterable[int] | None = None,
    start: int = 0,
    limit: int | None = None,
) -> int | None:
    """The smallest A from ``start`` whose output is ``target`` (the program itself).

    At most ``limit`` values are tried; ``None`` searches without end.
    """
    wanted = list(program if target is None else target)
    candidates = count(start) if limit is None else range(start, start + limit)
    for a in candidates:
        if run_program(a, 0, 0, program) == wanted:
            return a
    return None