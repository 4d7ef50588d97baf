"""
Elevation grid validation and cell indexing.

A grid is indexed as grid[x][y]: x runs over the outer sequence (width),
y over each row (height). Elevation 0 is sea, anything higher is land.

Cells are numbered linearly as x * height + y. Index width * height is
reserved for the sea sentinel of a disjoint-set structure and never maps
back to a cell.
"""

from typing import Iterator, Sequence, Tuple, Union

import numpy as np

SEA_LEVEL = 0

# 4-connected neighbourhood: left, right, up, down
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))

GridLike = Union[np.ndarray, Sequence[Sequence[int]]]


def _as_array(grid: GridLike) -> np.ndarray:
    if grid is None:
        raise ValueError("Elevation grid is required")

    if isinstance(grid, np.ndarray):
        return grid

    if isinstance(grid, (str, bytes)):
        raise ValueError("Elevation grid must be a 2D sequence of integers")

    try:
        rows = list(grid)
    except TypeError:
        raise ValueError("Elevation grid must be a 2D sequence of integers") from None

    if not rows:
        raise ValueError("Elevation grid has no rows")

    lengths = set()
    for row in rows:
        if row is None or isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
            raise ValueError("Every grid row must be a sequence of integers")
        lengths.add(len(row))

    if len(lengths) != 1:
        raise ValueError(
            f"Elevation grid is not rectangular, row lengths: {sorted(lengths)}"
        )

    return np.array([list(row) for row in rows])


class ElevationGrid:
    """Validated, read-only elevation grid with linear cell indexing."""

    def __init__(self, grid: GridLike):
        """
        Validate and copy a grid.

        Args:
            grid: Nested sequences or a 2D numpy array of non-negative integers

        Raises:
            ValueError: If the grid is missing, empty, jagged, not integer
                valued or contains negative elevations
        """
        arr = _as_array(grid)

        if arr.ndim != 2:
            raise ValueError(f"Elevation grid must be 2D, got {arr.ndim} dimension(s)")
        if arr.size == 0:
            raise ValueError(f"Elevation grid is empty, shape {arr.shape}")
        if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Elevations must be integers, got dtype {arr.dtype}")
        if np.any(arr < SEA_LEVEL):
            raise ValueError("Elevations must be non-negative")
        if arr.dtype.kind == "u" and arr.max() > np.uint64(np.iinfo(np.int64).max):
            raise ValueError(
                f"Elevations must not exceed {np.iinfo(np.int64).max}, got {arr.max()}"
            )

        self.heights = arr.astype(np.int64, copy=True)
        self.heights.setflags(write=False)
        self.width, self.height = self.heights.shape

    @property
    def cells(self) -> int:
        """Number of real cells."""
        return self.width * self.height

    @property
    def sentinel(self) -> int:
        """Reserved linear index standing for 'connected to the sea'."""
        return self.width * self.height

    @property
    def shape(self) -> Tuple[int, int]:
        return self.heights.shape

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the {self.width}x{self.height} grid"
            )

    def to_index(self, x: int, y: int) -> int:
        return x * self.height + y

    def to_cell(self, i: int) -> Tuple[int, int]:
        return i // self.height, i % self.height

    def elevation(self, x: int, y: int) -> int:
        return int(self.heights[x, y])

    def is_sea(self, x: int, y: int) -> bool:
        return self.heights[x, y] == SEA_LEVEL

    def is_land(self, x: int, y: int) -> bool:
        return self.heights[x, y] > SEA_LEVEL

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Yield the in-bounds 4-connected neighbours of (x, y)."""
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield nx, ny

    def land_mask(self) -> np.ndarray:
        return self.heights > SEA_LEVEL
