import pytest

from adventsolve.day02 import is_safe, is_safe_with_dampener, parse_reports, solve

EXAMPLE = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9"


def test_example():
    assert solve(EXAMPLE) == (2, 4)


def test_parse_reports():
    assert parse_reports(EXAMPLE)[0] == [7, 6, 4, 2, 1]


@pytest.mark.parametrize(
    "report, safe",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_safe(report, safe):
    assert is_safe(report) is safe


def test_dampener_rescues_one_bad_level():
    assert is_safe_with_dampener([1, 3, 2, 4, 5]) is True
    assert is_safe_with_dampener([8, 6, 4, 4, 1]) is True
    assert is_safe_with_dampener([1, 2, 7, 8, 9]) is False


def test_safe_implies_dampened_safe():
    for report in parse_reports(EXAMPLE):
        if is_safe(report):
            assert is_safe_with_dampener(report)


def test_short_report_rejected():
    with pytest.raises(ValueError):
        is_safe([4])