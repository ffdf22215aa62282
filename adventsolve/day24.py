"""Crossed Wires: simulating a circuit of logic gates."""

from __future__ import annotations

import operator
from collections import deque
from typing import Callable

Gate = tuple[str, str, str, str]

_OPERATIONS: dict[str, Callable[[bool, bool], bool]] = {
    "AND": operator.and_,
    "OR": operator.or_,
    "XOR": operator.xor,
}


def parse_circuit(text: str) -> tuple[dict[str, bool], list[Gate]]:
    """Initial wire values and gates as ``(in1, op, in2, out)``."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("expected wire values, a blank line and gates") from None
    wires: dict[str, bool] = {}
    for line in lines[:blank]:
        name, sep, value = line.partition(": ")
        if not sep:
            raise ValueError(f"expected 'wire: value', got {line!r}")
        wires[name] = value.strip() != "0"
    gates: list[Gate] = []
    for line in lines[blank + 1:]:
        if not line.strip():
            continue
        words = line.split()
        if len(words) != 5:
            raise ValueError(f"expected 'a OP b -> c', got {line!r}")
        wire1, gate, wire2, _arrow, wire_out = words
        gates.append((wire1, gate, wire2, wire_out))
    return wires, gates


def simulate(wires: dict[str, bool], gates: list[Gate]) -> dict[str, bool]:
    """Every wire's value once all gates have fired."""
    values = dict(wires)
    queue = deque(gates)
    stalled = 0
    while queue:
        wire1, gate, wire2, wire_out = queue.popleft()
        if wire1 in values and wire2 in values:
            try:
                operation = _OPERATIONS[gate]
            except KeyError:
                raise ValueError(f"unknown gate {gate!r}") from None
            values[wire_out] = operation(values[wire1], values[wire2])
            stalled = 0
        else:
            queue.append((wire1, gate, wire2, wire_out))
            stalled += 1
            if stalled > len(queue):
                raise ValueError("some gates can never receive their inputs")
    return values


def register_values(wires: dict[str, bool]) -> tuple[int, int, int]:
    """The numbers on the ``x``, ``y`` and ``z`` wires, ``00`` the lowest bit."""
    registers = {"x": 0, "y": 0, "z": 0}
    for name in sorted(wires, reverse=True):
        prefix = name[:1]
        if prefix in registers:
            registers[prefix] = (registers[prefix] << 1) | int(wires[name])
    return registers["x"], registers["y"], registers["z"]


def solve(text: str) -> tuple[int, int, int]:
    return register_values(simulate(*parse_circuit(text)))