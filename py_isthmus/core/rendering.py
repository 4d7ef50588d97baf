"""Plain-text rendering of isthmus results."""

from typing import Iterable

import numpy as np

from .isthmus_solver import Peak


def format_peaks(peaks: Iterable[Peak]) -> str:
    """One "(x, y)" per line, sorted by coordinates."""
    return "\n".join(str(peak) for peak in sorted(peaks))


def render_grid(grid, peaks: Iterable[Peak], *, peak_marker: str = "*") -> str:
    """
    Draw the grid as text with peaks replaced by a marker.

    Each line is one x, cells along y are separated by a space and right
    aligned to the widest elevation.

    Args:
        grid: 2D elevation array or nested sequences, indexed grid[x][y]
        peaks: Peaks to mark
        peak_marker: Text drawn in place of a peak's elevation

    Returns:
        Multi-line string, no trailing newline
    """
    heights = np.asarray(grid)
    if heights.size == 0:
        return ""
    marked = {(peak.x, peak.y) for peak in peaks}
    cell_width = max(len(str(int(heights.max()))), len(peak_marker))

    lines = []
    for x in range(heights.shape[0]):
        cells = []
        for y in range(heights.shape[1]):
            text = peak_marker if (x, y) in marked else str(int(heights[x, y]))
            cells.append(text.rjust(cell_width))
        lines.append(" ".join(cells))

    return "\n".join(lines)
