from adventsolve.day12 import Region, fencing_price, find_regions
from adventsolve.grid import Grid

EXAMPLE = "AAAA\nBBCD\nBBCC\nEEEC"


def test_example_price():
    assert fencing_price(EXAMPLE) == 140


def test_square_block():
    (region,) = find_regions(Grid.from_str("AA\nAA"))
    assert region.label == "A"
    assert region.area == 4
    assert region.perimeter == 8


def test_checkerboard_has_separate_regions():
    regions = find_regions(Grid.from_str("AB\nBA"))
    assert len(regions) == 4
    assert all(region.perimeter == 4 for region in regions)


def test_regions_partition_grid():
    grid = Grid.from_str(EXAMPLE)
    regions = find_regions(grid)
    assert sum(region.area for region in regions) == grid.width * grid.height
    union = frozenset().union(*(region.plots for region in regions))
    assert union == set(grid.coords())
    for region in regions:
        assert all(grid[plot] == region.label for plot in region.plots)
        assert region.perimeter % 2 == 0


def test_region_price_is_area_times_perimeter():
    region = Region("Z", frozenset({(0, 0), (1, 0)}), 6)
    assert region.price == region.area * region.perimeter