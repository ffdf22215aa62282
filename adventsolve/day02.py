"""Red-Nosed Reports: checking level sequences for safety."""

from __future__ import annotations


def parse_reports(text: str) -> list[list[int]]:
    return [[int(level) for level in line.split()] for line in text.splitlines()]


def is_safe(report: list[int]) -> bool:
    """Strictly monotonic with every step between 1 and 3."""
    if len(report) < 2:
        raise ValueError("a report needs at least two levels")
    if report[0] == report[1]:
        return False
    increasing = report[0] < report[1]
    return all(
        1 <= abs(lhs - rhs) <= 3 and (lhs < rhs) == increasing
        for lhs, rhs in zip(report, report[1:])
    )


def is_safe_with_dampener(report: list[int]) -> bool:
    """Safe as is, or safe once any single level is removed."""
    if is_safe(report):
        return True
    return any(
        is_safe(report[:skip] + report[skip + 1:]) for skip in range(len(report))
    )


def solve(text: str) -> tuple[int, int]:
    reports = parse_reports(text)
    return (
        sum(is_safe(report) for report in reports),
        sum(is_safe_with_dampener(report) for report in reports),
    )