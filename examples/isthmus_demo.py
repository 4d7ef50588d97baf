#!/usr/bin/env python3
"""
Demo script solving a small isthmus and printing its peaks.
"""

from py_isthmus.config import settings
from py_isthmus.core import IsthmusSolver, Side, format_peaks, render_grid
from py_isthmus.utils.log_config import configure_logging

# Two seas along the long edges, a ring of low land with a hub of
# elevation 2 at each end, and an enclosed lagoon in the middle.
ISTHMUS = [
    [0, 1, 1, 1, 2, 1, 1, 1, 0],
    [0, 1, 0, 0, 0, 0, 0, 1, 0],
    [0, 1, 0, 1, 1, 1, 0, 1, 0],
    [0, 1, 0, 1, 0, 1, 0, 1, 0],
    [0, 1, 0, 1, 1, 1, 0, 1, 0],
    [0, 1, 0, 0, 0, 0, 0, 1, 0],
    [0, 1, 1, 1, 2, 1, 1, 1, 0],
]


def main():
    """Solve the sample isthmus."""
    configure_logging("WARNING", settings.log_format)

    print("Isthmus Peaks Demo")
    print("=" * 40)

    solver = IsthmusSolver(ISTHMUS)
    summary = solver.summary()

    print(f"\nGrid: {solver.width}x{solver.height}, {summary['land_cells']} land cells")
    print(f"  Draining west: {summary['west_drained']}")
    print(f"  Draining east: {summary['east_drained']}")

    print("\nWest drainage:")
    for row in solver.drainage_mask(Side.WEST):
        print("  " + "".join("#" if cell else "." for cell in row))

    print("\nEast drainage:")
    for row in solver.drainage_mask(Side.EAST):
        print("  " + "".join("#" if cell else "." for cell in row))

    print(f"\nPeaks ({len(solver)}):")
    print(format_peaks(solver.peaks))

    print("\nGrid with peaks marked:")
    print(render_grid(solver.grid, solver.peaks))


if __name__ == "__main__":
    main()
