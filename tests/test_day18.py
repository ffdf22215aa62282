import pytest

from adventsolve.day18 import (
    can_exit,
    first_blocking_byte,
    parse_points,
    shortest_path,
    solve,
)
from adventsolve.grid import Grid

EXAMPLE = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_example_shortest_path():
    steps, _ = solve(EXAMPLE, size=6, take=12)
    assert steps == 22


def test_example_first_blocking_byte():
    assert first_blocking_byte(parse_points(EXAMPLE), 6, 0) == (6, 1)


def test_blocking_byte_invariant():
    points = parse_points(EXAMPLE)
    blocker = first_blocking_byte(points, 6, 0)
    index = points.index(blocker)
    before = Grid.filled(7, 7, False)
    for point in points[:index]:
        before[point] = True
    assert can_exit(before)
    before[blocker] = True
    assert not can_exit(before)


def test_parse_points():
    assert parse_points("3,4\n10,0") == [(3, 4), (10, 0)]


def test_parse_points_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_points("3;4")


@pytest.mark.parametrize("width,height", [(1, 1), (3, 3), (5, 2)])
def test_empty_room_is_manhattan(width, height):
    assert shortest_path(Grid.filled(width, height, False)) == width + height - 2


def test_wall_blocks_exit():
    grid = Grid([[False, False, False], [True, True, True], [False, False, False]])
    assert shortest_path(grid) is None
    assert not can_exit(grid)


def test_no_blocking_byte():
    assert first_blocking_byte([(1, 1)], 3, 0) is None


def test_byte_outside_room():
    with pytest.raises(IndexError):
        first_blocking_byte([(9, 9)], 3, 0)