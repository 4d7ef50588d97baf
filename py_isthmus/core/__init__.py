"""
Core isthmus peak detection.
"""

from .disjoint_set import WeightedUnionFind
from .elevation_grid import ElevationGrid, SEA_LEVEL
from .isthmus_solver import IsthmusSolver, Peak, Side
from .rendering import format_peaks, render_grid

__all__ = ['WeightedUnionFind', 'ElevationGrid', 'SEA_LEVEL',
           'IsthmusSolver', 'Peak', 'Side',
           'format_peaks', 'render_grid']
