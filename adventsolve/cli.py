"""Command line entry point: solve one day's puzzle from an input file."""

from __future__ import annotations

import argparse
import sys
from typing import Callable

from . import (
    day01,
    day02,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    day22,
    day23,
    day24,
    day25,
)


def _day14(text: str) -> int:
    return day14.safety_factor(day14.parse_robots(text))


def _day15(text: str) -> tuple[int, int]:
    return day15.solve(text), day15.solve_wide(text)


def _day17(text: str) -> str:
    a, b, c, program = day17.parse_computer(text)
    return ",".join(str(value) for value in day17.run_program(a, b, c, program))


SOLVERS: dict[int, Callable[[str], object]] = {
    1: day01.solve,
    2: day02.solve,
    4: day04.solve,
    5: day05.solve,
    6: day06.solve,
    7: day07.solve,
    8: day08.solve,
    9: day09.solve,
    10: day10.solve,
    11: day11.solve,
    12: day12.fencing_price,
    13: day13.total_cost,
    14: _day14,
    15: _day15,
    16: day16.lowest_score,
    17: _day17,
    18: day18.solve,
    19: day19.solve,
    20: day20.count_cheats,
    21: day21.complexity,
    22: day22.solve,
    23: day23.solve,
    24: day24.solve,
    25: day25.count_fits,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adventsolve", description="Solve a day's puzzle from its input."
    )
    parser.add_argument("day", type=int, choices=sorted(SOLVERS), help="puzzle day")
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or '-' for standard input"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as err:
            parser.error(f"cannot read {args.input}: {err}")
    try:
        result = SOLVERS[args.day](text)
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    if isinstance(result, tuple):
        for part, value in enumerate(result, start=1):
            print(f"p{part}: {value}")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())