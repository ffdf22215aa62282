import pytest

from adventsolve.day21 import (
    DIRECTIONAL,
    NUMERIC,
    complexity,
    from_instructions,
    get_delta,
    to_instructions,
)

CODES = ["029A", "980A", "179A", "456A", "379A"]


def test_same_key_just_presses():
    assert get_delta(NUMERIC, "5", "5") == "A"


def test_numeric_avoids_gap():
    assert get_delta(NUMERIC, "A", "1") == "^<<A"


def test_directional_avoids_gap():
    assert get_delta(DIRECTIONAL, "A", "<") == "v<<A"


def test_unknown_key_raises():
    with pytest.raises(ValueError):
        get_delta(NUMERIC, "A", "x")


@pytest.mark.parametrize("code", CODES)
def test_round_trip_numeric(code):
    assert from_instructions(NUMERIC, to_instructions(NUMERIC, code)) == code


@pytest.mark.parametrize("code", CODES)
def test_round_trip_through_robots(code):
    first = to_instructions(NUMERIC, code)
    second = to_instructions(DIRECTIONAL, first)
    human = to_instructions(DIRECTIONAL, second)
    back = from_instructions(DIRECTIONAL, from_instructions(DIRECTIONAL, human))
    assert from_instructions(NUMERIC, back) == code


@pytest.mark.parametrize("code", CODES)
def test_one_press_per_key(code):
    assert to_instructions(NUMERIC, code).count("A") == len(code)


def test_never_presses_gap():
    for code in CODES:
        presses = to_instructions(DIRECTIONAL, to_instructions(NUMERIC, code))
        assert "p" not in from_instructions(DIRECTIONAL, presses)


def test_moving_off_layout_raises():
    with pytest.raises(ValueError):
        from_instructions(DIRECTIONAL, "^")


def test_unknown_instruction_raises():
    with pytest.raises(ValueError):
        from_instructions(NUMERIC, "x")


def test_complexity_adds_over_codes():
    assert complexity("029A\n029A") == 2 * complexity("029A")
    assert complexity("\n".join(CODES)) == sum(complexity(c) for c in CODES)


def test_complexity_without_robots():
    assert complexity("029A", 0) == len(to_instructions(NUMERIC, "029A")) * 29


def test_more_robots_cost_more():
    assert complexity("379A", 3) > complexity("379A", 2)