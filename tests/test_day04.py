from adventsolve.day04 import count_x_mas, count_xmas, has_mas, is_xmas_center, solve
from adventsolve.grid import Grid

EXAMPLE = "\n".join(
    [
        "MMMSXXMASM",
        "MSAMXMSMSA",
        "AMXSXMAAMM",
        "MSAMASMSMX",
        "XMASAMXAMM",
        "XXAMMXXAMA",
        "SMSMSASXSS",
        "SAXAMASAAA",
        "MAMMMXMMMM",
        "MXMXAXMASX",
    ]
)


def _mirror(text):
    return "\n".join(line[::-1] for line in text.splitlines())


def _transpose(text):
    return "\n".join("".join(column) for column in zip(*text.splitlines()))


def test_example():
    assert solve(EXAMPLE) == (18, 9)


def test_has_mas_directions():
    grid = Grid.from_str("XMAS")
    assert has_mas(grid, (0, 0), (1, 0)) is True
    assert has_mas(grid, (0, 0), (0, 1)) is False
    assert has_mas(grid, (3, 0), (-1, 0)) is False


def test_word_counts_are_mirror_invariant():
    assert count_xmas(_mirror(EXAMPLE)) == count_xmas(EXAMPLE)
    assert count_x_mas(_mirror(EXAMPLE)) == count_x_mas(EXAMPLE)


def test_word_counts_are_transpose_invariant():
    assert count_xmas(_transpose(EXAMPLE)) == count_xmas(EXAMPLE)
    assert count_x_mas(_transpose(EXAMPLE)) == count_x_mas(EXAMPLE)


def test_cross_needs_matching_diagonals():
    assert is_xmas_center(Grid.from_str("M.S\n.A.\nM.S"), (1, 1)) is True
    assert is_xmas_center(Grid.from_str("M.M\n.A.\nM.M"), (1, 1)) is False


def test_cross_on_edge_is_rejected():
    assert is_xmas_center(Grid.from_str("A.\n.."), (0, 0)) is False