"""A rectangular grid of cells addressed by ``(x, y)`` positions."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
B = TypeVar("B")

Position = tuple[int, int]

_FOUR_NEIGHBOURS: tuple[Position, ...] = (
    (0, -1),
    (-1, 0),
    (1, 0),
    (0, 1),
)

_EIGHT_NEIGHBOURS: tuple[Position, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


def _cell_text(value: object) -> str:
    if isinstance(value, bool):
        return "#" if value else "."
    return str(value)


class Grid(Generic[T]):
    """Rows of cells; ``x`` is the column and ``y`` the row."""

    def __init__(self, rows: Iterable[Iterable[T]]) -> None:
        self.rows: list[list[T]] = [list(row) for row in rows]

    @classmethod
    def from_str(cls, text: str) -> Grid[str]:
        """Build a grid of characters, one row per line."""
        return cls(list(line) for line in text.splitlines())

    @classmethod
    def from_flat(cls, items: Iterable[T], width: int) -> Grid[T]:
        """Cut a flat sequence into rows of ``width`` cells."""
        if width <= 0:
            raise ValueError("width must be positive")
        flat = list(items)
        return cls(flat[start:start + width] for start in range(0, len(flat), width))

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> Grid[T]:
        """A ``width`` by ``height`` grid with every cell set to ``value``."""
        return cls([value] * width for _ in range(height))

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def size(self) -> Position:
        return (self.width, self.height)

    def cells(self) -> Iterator[T]:
        """Every cell value, row by row."""
        for row in self.rows:
            yield from row

    def cells_enumerate(self) -> Iterator[tuple[Position, T]]:
        """Every ``(position, value)`` pair, row by row."""
        for y, row in enumerate(self.rows):
            for x, value in enumerate(row):
                yield (x, y), value

    def coords(self) -> Iterator[Position]:
        """Every position inside the grid, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def find_first(self, predicate: Callable[[T], bool]) -> Position | None:
        """The first position, in reading order, whose value matches."""
        for pos, value in self.cells_enumerate():
            if predicate(value):
                return pos
        return None

    def contains(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, pos: Position) -> T | None:
        """The value at ``pos``, or ``None`` outside the grid."""
        if not self.contains(pos):
            return None
        x, y = pos
        return self.rows[y][x]

    def __getitem__(self, pos: Position) -> T:
        if not self.contains(pos):
            raise IndexError(f"position {pos} is outside the grid")
        x, y = pos
        return self.rows[y][x]

    def __setitem__(self, pos: Position, value: T) -> None:
        if not self.contains(pos):
            raise IndexError(f"tried to set out of bounds: {pos}")
        x, y = pos
        self.rows[y][x] = value

    def __iter__(self) -> Iterator[T]:
        return self.cells()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Grid({self.rows!r})"

    def map(self, func: Callable[[T], B]) -> Grid[B]:
        """A new grid holding ``func(value)`` for every cell."""
        return Grid([func(value) for value in row] for row in self.rows)

    def map_enumerate(self, func: Callable[[Position, T], B]) -> Grid[B]:
        """A new grid holding ``func(position, value)`` for every cell."""
        return Grid(
            [func((x, y), value) for x, value in enumerate(row)]
            for y, row in enumerate(self.rows)
        )

    def adjacent_cells(self, pos: Position) -> Iterator[Position]:
        """The four orthogonal neighbours of ``pos``, in or out of bounds."""
        x, y = pos
        for dx, dy in _FOUR_NEIGHBOURS:
            yield (x + dx, y + dy)

    def adjacent_eight_cells(self, pos: Position) -> Iterator[Position]:
        """The eight surrounding neighbours of ``pos``, in or out of bounds."""
        x, y = pos
        for dx, dy in _EIGHT_NEIGHBOURS:
            yield (x + dx, y + dy)

    def render(self) -> str:
        """Text form: booleans as ``#``/``.``, other values as ``str``."""
        return "\n".join("".join(_cell_text(value) for value in row) for row in self.rows)