"""Tests for elevation grid validation and indexing."""

import numpy as np
import pytest

from py_isthmus.core.elevation_grid import ElevationGrid


class TestValidation:
    """Test grid validation."""

    def test_nested_lists(self):
        grid = ElevationGrid([[0, 1, 0], [0, 2, 0]])

        assert grid.width == 2
        assert grid.height == 3
        assert grid.shape == (2, 3)
        assert grid.heights.dtype == np.int64

    def test_numpy_array(self):
        arr = np.array([[0, 3], [1, 0], [0, 0]], dtype=np.uint8)
        grid = ElevationGrid(arr)

        assert (grid.width, grid.height) == (3, 2)
        assert grid.elevation(0, 1) == 3

    def test_tuples_of_tuples(self):
        grid = ElevationGrid(((0, 1), (1, 0)))
        assert grid.shape == (2, 2)

    def test_copy_is_read_only(self):
        """The validated grid is a read-only copy of the caller's data."""
        source = [[0, 1], [1, 0]]
        grid = ElevationGrid(source)
        source[0][1] = 9

        assert grid.elevation(0, 1) == 1
        with pytest.raises(ValueError):
            grid.heights[0, 0] = 5

    def test_numpy_input_not_aliased(self):
        arr = np.array([[0, 1], [1, 0]])
        grid = ElevationGrid(arr)
        arr[0, 1] = 7

        assert grid.elevation(0, 1) == 1

    @pytest.mark.parametrize(
        "bad",
        [
            None,
            [],
            [[]],
            [[], []],
            [[0, 1], [0]],
            [[0, 1, 2], [0, 1], [0, 1, 2]],
            [0, 1, 2],
            "0101",
            [[0, 1], None],
            [[0, -1], [0, 0]],
            [[0.5, 1], [0, 0]],
            [[0, "1"], [0, 0]],
            [[[0], [1]], [[0], [1]]],
            np.zeros((0, 3), dtype=int),
            np.zeros(4, dtype=int),
            np.array([[True, False], [False, True]]),
        ],
    )
    def test_invalid_grids_rejected(self, bad):
        """Missing, empty, jagged, non-integer and negative grids raise ValueError."""
        with pytest.raises(ValueError):
            ElevationGrid(bad)

    def test_non_iterable_rejected(self):
        with pytest.raises(ValueError):
            ElevationGrid(42)

    def test_unsigned_beyond_int64_rejected(self):
        """Unsigned elevations that would wrap negative in int64 are rejected."""
        arr = np.array([[0, 2**63, 0]], dtype=np.uint64)

        with pytest.raises(ValueError):
            ElevationGrid(arr)

    def test_unsigned_at_int64_max_accepted(self):
        top = np.iinfo(np.int64).max
        grid = ElevationGrid(np.array([[0, top, 0]], dtype=np.uint64))

        assert grid.elevation(0, 1) == top
        assert grid.is_land(0, 1)


class TestIndexing:
    """Test linear index conversion and neighbourhoods."""

    @pytest.fixture
    def grid(self):
        return ElevationGrid(np.arange(12).reshape(3, 4))

    def test_sentinel_follows_last_cell(self, grid):
        assert grid.cells == 12
        assert grid.sentinel == 12

    def test_index_is_x_major(self, grid):
        """Index is x * height + y."""
        assert grid.to_index(0, 0) == 0
        assert grid.to_index(0, 3) == 3
        assert grid.to_index(1, 0) == 4
        assert grid.to_index(2, 3) == 11

    def test_encode_decode_symmetric(self, grid):
        for x in range(grid.width):
            for y in range(grid.height):
                assert grid.to_cell(grid.to_index(x, y)) == (x, y)

    def test_non_square_index_is_unique(self):
        grid = ElevationGrid(np.zeros((7, 9), dtype=int))
        indices = {grid.to_index(x, y) for x in range(7) for y in range(9)}

        assert indices == set(range(63))

    def test_corner_neighbors(self, grid):
        assert sorted(grid.neighbors(0, 0)) == [(0, 1), (1, 0)]
        assert sorted(grid.neighbors(2, 3)) == [(1, 3), (2, 2)]

    def test_interior_neighbors(self, grid):
        assert sorted(grid.neighbors(1, 1)) == [(0, 1), (1, 0), (1, 2), (2, 1)]

    def test_single_cell_has_no_neighbors(self):
        assert list(ElevationGrid([[0]]).neighbors(0, 0)) == []

    def test_bounds(self, grid):
        assert grid.in_bounds(2, 3)
        assert not grid.in_bounds(3, 0)
        assert not grid.in_bounds(0, -1)
        with pytest.raises(IndexError):
            grid.check_bounds(-1, 0)

    def test_sea_and_land(self):
        grid = ElevationGrid([[0, 4], [1, 0]])

        assert grid.is_sea(0, 0)
        assert grid.is_land(0, 1)
        assert grid.land_mask().tolist() == [[False, True], [True, False]]
