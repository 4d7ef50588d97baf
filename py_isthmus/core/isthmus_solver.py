"""
Isthmus peak detection.

Finds the land cells from which a river could flow all the way down to
both seas bounding an isthmus. The west sea is entered at cell (0, 0) and
the east sea at (width - 1, height - 1).

For each side this module:
- Floods the sea reachable from the seed corner (4-connected, elevation 0)
- On every land cell touching that sea, floods uphill over neighbours of
  greater or equal elevation, joining each cell to the side's sea sentinel
- Keeps the result in a dedicated WeightedUnionFind of width * height + 1
  elements, the last one being the sentinel

A peak is a land cell joined to both sentinels. Both floods use explicit
stacks, so traversal depth does not depend on the recursion limit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Tuple

import numpy as np
import structlog

from .disjoint_set import WeightedUnionFind
from .elevation_grid import ElevationGrid, GridLike

logger = structlog.get_logger()


class Side(str, Enum):
    """The two seas bounding the isthmus."""

    WEST = "west"
    EAST = "east"


@dataclass(frozen=True, order=True)
class Peak:
    """Zero-based coordinates of a peak."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class IsthmusSolver:
    """Solves the isthmus on construction and keeps the peaks."""

    def __init__(self, grid: GridLike):
        """
        Validate the grid and compute its peaks.

        Args:
            grid: Rectangular grid of non-negative integer elevations,
                indexed grid[x][y]

        Raises:
            ValueError: If the grid is missing, empty or malformed
        """
        self._grid = ElevationGrid(grid)

        logger.info("Solving isthmus", width=self._grid.width, height=self._grid.height)

        self._sides: Dict[Side, WeightedUnionFind] = {}
        self._sea_cells: Dict[Side, int] = {}
        for side in Side:
            self._sides[side] = self._drain_side(side)

        self._peaks = self._collect_peaks()

        logger.info("Isthmus solved", peaks=len(self._peaks))

    def seed(self, side: Side) -> Tuple[int, int]:
        """Corner cell where the given side's sea is entered."""
        if Side(side) is Side.WEST:
            return 0, 0
        return self._grid.width - 1, self._grid.height - 1

    def _drain_side(self, side: Side) -> WeightedUnionFind:
        grid = self._grid
        land = WeightedUnionFind(grid.cells + 1)
        visited = np.zeros(grid.shape, dtype=bool)

        sx, sy = self.seed(side)
        if grid.is_land(sx, sy):
            logger.warning(
                "Seed corner is land, treating it as sea",
                side=side.value,
                x=sx,
                y=sy,
                elevation=grid.elevation(sx, sy),
            )

        visited[sx, sy] = True
        stack = [(sx, sy)]
        sea_cells = 0

        while stack:
            x, y = stack.pop()
            sea_cells += 1

            for nx, ny in grid.neighbors(x, y):
                if grid.is_sea(nx, ny):
                    if not visited[nx, ny]:
                        visited[nx, ny] = True
                        stack.append((nx, ny))
                else:
                    self._drain_land(nx, ny, land)

        self._sea_cells[side] = sea_cells
        logger.info(
            "Sea side drained",
            side=side.value,
            sea_cells=sea_cells,
            land_cells=self._drained_count(land),
        )
        return land

    def _drain_land(self, x: int, y: int, land: WeightedUnionFind) -> None:
        """Join (x, y) and everything uphill of it to the sea sentinel."""
        grid = self._grid
        sentinel = grid.sentinel

        start = grid.to_index(x, y)
        if land.connected(start, sentinel):
            return

        land.union(start, sentinel)
        stack = [(x, y)]

        while stack:
            cx, cy = stack.pop()
            current = grid.heights[cx, cy]

            for nx, ny in grid.neighbors(cx, cy):
                if grid.heights[nx, ny] < current:
                    continue
                i = grid.to_index(nx, ny)
                if not land.connected(i, sentinel):
                    land.union(i, sentinel)
                    stack.append((nx, ny))

    def _drained_count(self, land: WeightedUnionFind) -> int:
        # sentinel's class minus the sentinel itself
        return land.size_of(self._grid.sentinel) - 1

    def _collect_peaks(self) -> FrozenSet[Peak]:
        grid = self._grid
        sentinel = grid.sentinel
        west = self._sides[Side.WEST]
        east = self._sides[Side.EAST]

        peaks = set()
        for i in range(grid.cells):
            if west.connected(i, sentinel) and east.connected(i, sentinel):
                x, y = grid.to_cell(i)
                peaks.add(Peak(x, y))

        return frozenset(peaks)

    @property
    def grid(self) -> np.ndarray:
        """Validated read-only elevation array, shape (width, height)."""
        return self._grid.heights

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def peaks(self) -> FrozenSet[Peak]:
        return self._peaks

    def sorted_peaks(self) -> List[Peak]:
        return sorted(self._peaks)

    def is_peak(self, x: int, y: int) -> bool:
        self._grid.check_bounds(x, y)
        return Peak(x, y) in self._peaks

    def drains_to(self, side: Side, x: int, y: int) -> bool:
        """Check whether water from land cell (x, y) can reach the given sea."""
        grid = self._grid
        grid.check_bounds(x, y)
        return self._sides[Side(side)].connected(grid.to_index(x, y), grid.sentinel)

    def drainage_mask(self, side: Side) -> np.ndarray:
        """Boolean (width, height) array of land cells draining to the given sea."""
        grid = self._grid
        land = self._sides[Side(side)]
        root = land.find(grid.sentinel)

        mask = np.zeros(grid.shape, dtype=bool)
        for i in range(grid.cells):
            if land.find(i) == root:
                mask[grid.to_cell(i)] = True
        return mask

    def summary(self) -> Dict[str, int]:
        """Cell counts describing the solved isthmus."""
        return {
            "width": self.width,
            "height": self.height,
            "land_cells": int(np.count_nonzero(self._grid.land_mask())),
            "west_sea_cells": self._sea_cells[Side.WEST],
            "east_sea_cells": self._sea_cells[Side.EAST],
            "west_drained": self._drained_count(self._sides[Side.WEST]),
            "east_drained": self._drained_count(self._sides[Side.EAST]),
            "peak_count": len(self._peaks),
        }

    def __len__(self) -> int:
        return len(self._peaks)

    def __iter__(self) -> Iterator[Peak]:
        return iter(self.sorted_peaks())

    def __contains__(self, item) -> bool:
        if isinstance(item, tuple):
            item = Peak(*item)
        return item in self._peaks

    def __str__(self) -> str:
        return "\n".join(str(peak) for peak in self.sorted_peaks())
