"""Garden Groups: fencing regions of garden plots."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from .grid import Grid, Position


@dataclass(frozen=True)
class Region:
    """A connected set of plots sharing one label."""

    label: str
    plots: frozenset[Position]
    perimeter: int

    @property
    def area(self) -> int:
        return len(self.plots)

    @property
    def price(self) -> int:
        return self.area * self.perimeter


def find_regions(grid: Grid[str]) -> list[Region]:
    """Every region, in reading order of its first plot."""
    assigned: set[Position] = set()
    regions: list[Region] = []
    for plot in grid.coords():
        if plot in assigned:
            continue
        label = grid[plot]
        queue = deque([plot])
        queued = {plot}
        plots: set[Position] = set()
        perimeter = 0
        while queue:
            current = queue.popleft()
            queued.discard(current)
            assigned.add(current)
            plots.add(current)
            for adj in grid.adjacent_cells(current):
                if adj in queued:
                    continue
                if grid.get(adj) != label:
                    perimeter += 1
                elif adj not in assigned:
                    queue.append(adj)
                    queued.add(adj)
        regions.append(Region(label, frozenset(plots), perimeter))
    return regions


def fencing_price(text: str) -> int:
    return sum(region.price for region in find_regions(Grid.from_str(text)))