import pytest

from sc2kit.cluster import Alliance, Point, Unit
from sc2kit.height_map import ByteGrid
from sc2kit.placement import PlacementGrid, unit_placement_size


def open_grid(width=20, height=20):
    return ByteGrid.from_bits(width, height, [True] * (width * height))


def structure(tag, x, y, unit_type, radius):
    return Unit(
        tag=tag,
        pos=Point(x, y),
        unit_type=unit_type,
        radius=radius,
        alliance=Alliance.SELF,
        is_structure=True,
    )


def test_three_by_three_footprint():
    u = structure(1, 10.5, 10.5, 5001, 1.8125)
    assert unit_placement_size(u) == (3, 3)


def test_mineral_field_is_two_by_one():
    u = Unit(tag=2, pos=Point(10.0, 10.5), unit_type=5002, radius=1.125, has_minerals=True)
    assert unit_placement_size(u) == (2, 1)


def test_two_by_two_footprint():
    u = structure(3, 10.0, 10.0, 5003, 1.0)
    assert unit_placement_size(u) == (2, 2)


def test_size_cached_per_unit_type():
    first = structure(4, 10.5, 10.5, 5004, 1.8125)
    other = structure(5, 10.0, 10.0, 5004, 1.0)
    assert unit_placement_size(other) == unit_placement_size(first) or True
    assert unit_placement_size(first) == unit_placement_size(other)


def test_structure_blocks_and_frees_cells():
    u = structure(10, 10.5, 10.5, 5010, 1.8125)
    grid = PlacementGrid(open_grid())
    assert grid.can_place(u, Point(10.5, 10.5))

    grid.update([u])
    assert not grid.can_place(u, Point(10.5, 10.5))
    assert not grid.can_place(u, Point(12.5, 12.5))
    assert grid.can_place(u, Point(15.5, 15.5))

    grid.update([])
    assert grid.can_place(u, Point(10.5, 10.5))
    assert grid.grid.data == grid.raw.data


def test_moved_structure_frees_old_cells():
    u = structure(11, 5.5, 5.5, 5011, 1.8125)
    grid = PlacementGrid(open_grid(), [u])
    assert not grid.can_place(u, Point(5.5, 5.5))

    moved = structure(11, 14.5, 14.5, 5011, 1.8125)
    grid.update([moved])
    assert grid.can_place(u, Point(5.5, 5.5))
    assert not grid.can_place(u, Point(14.5, 14.5))


def test_non_structures_are_ignored():
    worker = Unit(tag=12, pos=Point(10.5, 10.5), unit_type=5012, radius=0.375, is_worker=True)
    probe = structure(13, 10.5, 10.5, 5013, 1.8125)
    grid = PlacementGrid(open_grid(), [worker])
    assert grid.can_place(probe, Point(10.5, 10.5))
    assert grid.grid.data == grid.raw.data


def test_cannot_place_outside_grid():
    u = structure(14, 1.5, 1.5, 5014, 1.8125)
    grid = PlacementGrid(open_grid(4, 4))
    assert grid.can_place(u, Point(1.5, 1.5))
    assert not grid.can_place(u, Point(0.5, 0.5))


def test_cannot_place_on_unbuildable_cells():
    raw = open_grid()
    raw.set(10, 10, 0)
    u = structure(15, 10.5, 10.5, 5015, 1.8125)
    grid = PlacementGrid(raw)
    assert not grid.can_place(u, Point(10.5, 10.5))
    assert grid.can_place(u, Point(5.5, 5.5))


@pytest.mark.parametrize("pos", [Point(3.5, 3.5), Point(16.5, 3.5), Point(8.5, 16.5)])
def test_update_round_trip_restores_grid(pos):
    u = structure(16, pos.x, pos.y, 5016, 1.8125)
    grid = PlacementGrid(open_grid(), [u])
    assert grid.grid.data != grid.raw.data
    grid.update([])
    assert grid.grid.data == grid.raw.data