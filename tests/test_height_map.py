import pytest

from sc2kit.height_map import ByteGrid, HeightMap


def test_new_grid_is_zeroed():
    grid = ByteGrid(3, 2)
    assert all(grid.get(x, y) == 0 for x in range(3) for y in range(2))


def test_set_and_get():
    grid = ByteGrid(3, 2)
    grid.set(2, 1, 42)
    assert grid.get(2, 1) == 42
    assert grid.get(1, 2) == 0


def test_out_of_bounds_reads_zero_and_writes_ignored():
    grid = ByteGrid.from_rows([[9, 9], [9, 9]])
    assert grid.get(-1, 0) == 0
    assert grid.get(0, 2) == 0
    grid.set(5, 5, 1)
    assert grid.data == bytearray([9, 9, 9, 9])


def test_in_bounds():
    grid = ByteGrid(2, 3)
    assert grid.in_bounds(1, 2)
    assert not grid.in_bounds(2, 0)
    assert not grid.in_bounds(0, -1)


def test_copy_is_independent():
    grid = ByteGrid.from_rows([[1, 2], [3, 4]])
    clone = grid.copy()
    clone.set(0, 0, 200)
    assert grid.get(0, 0) == 1
    assert clone.get(0, 0) == 200


def test_from_bits():
    grid = ByteGrid.from_bits(2, 1, [True, False])
    assert grid.get(0, 0) == 255
    assert grid.get(1, 0) == 0


def test_from_rows_orientation():
    grid = ByteGrid.from_rows([[1, 2, 3], [4, 5, 6]])
    assert (grid.width, grid.height) == (3, 2)
    assert grid.get(2, 0) == 3
    assert grid.get(0, 1) == 4


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        ByteGrid(2, 2, bytearray(3))


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        ByteGrid.from_rows([[1, 2], [3]])


def test_value_out_of_byte_range_raises():
    with pytest.raises(ValueError):
        ByteGrid(1, 1).set(0, 0, 256)


def test_height_map_dimensions_one_larger():
    hm = HeightMap(ByteGrid(4, 3))
    assert hm.width() == 5
    assert hm.height() == 4
    assert hm.in_bounds(4, 3)
    assert not hm.in_bounds(5, 0)


def test_height_decoding():
    hm = HeightMap(ByteGrid.from_rows([[127, 135]]))
    assert hm.get(0, 0) == 0
    assert hm.get(1, 0) == 1
    assert hm.get(9, 9) == -127 / 8


def test_interpolate_on_grid_points_matches_get():
    hm = HeightMap(ByteGrid.from_rows([[100, 140], [160, 200]]))
    for x in range(2):
        for y in range(2):
            assert hm.interpolate(float(x), float(y)) == pytest.approx(hm.get(x, y))


def test_interpolate_flat_terrain():
    hm = HeightMap(ByteGrid.from_rows([[135, 135], [135, 135]]))
    assert hm.interpolate(0.5, 0.5) == pytest.approx(hm.get(0, 0))


def test_interpolate_midpoint_is_average():
    hm = HeightMap(ByteGrid.from_rows([[127, 143], [127, 143]]))
    mid = hm.interpolate(0.5, 0.0)
    assert mid == pytest.approx((hm.get(0, 0) + hm.get(1, 0)) / 2)