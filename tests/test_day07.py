import pytest

from adventsolve.day07 import is_reachable, parse, solve

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20"""


def test_example():
    assert solve(EXAMPLE) == 3749


def test_parse():
    equations = parse(EXAMPLE)
    assert equations[0] == (190, [10, 19])
    assert len(equations) == 9


def test_parse_rejects_missing_colon():
    with pytest.raises(ValueError):
        parse("190 10 19")


@pytest.mark.parametrize(
    "target, operands, expected",
    [
        (190, [10, 19], True),
        (3267, [81, 40, 27], True),
        (292, [11, 6, 16, 20], True),
        (83, [17, 5], False),
        (7290, [6, 8, 6, 15], False),
    ],
)
def test_is_reachable(target, operands, expected):
    assert is_reachable(target, operands) is expected


def test_single_operand_must_equal_target():
    assert is_reachable(7, [7]) is True
    assert is_reachable(8, [7]) is False


def test_empty_operands_rejected():
    with pytest.raises(ValueError):
        is_reachable(1, [])