import pytest

from adventsolve.day11 import blink, count_stones, solve


@pytest.mark.parametrize(
    "stone, expected",
    [(0, [1]), (1, [2024]), (17, [1, 7]), (1000, [10, 0])],
)
def test_blink_rules(stone, expected):
    assert blink(stone) == expected


def test_zero_blinks_counts_input():
    assert solve("125 17", 0) == 2


def test_one_blink_matches_blink_results():
    stones = [125, 17, 0]
    assert count_stones(stones, 1) == sum(len(blink(s)) for s in stones)


@pytest.mark.parametrize("blinks", [1, 5, 12])
def test_counts_compose(blinks):
    stones = [125, 17]
    children = [child for stone in stones for child in blink(stone)]
    assert count_stones(stones, blinks + 1) == count_stones(children, blinks)


def test_count_never_shrinks():
    assert count_stones([125, 17], 10) <= count_stones([125, 17], 11)