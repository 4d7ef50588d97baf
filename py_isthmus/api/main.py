"""FastAPI main application."""

from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, conint
import structlog

from ..config import settings
from ..core.isthmus_solver import IsthmusSolver
from ..core.rendering import format_peaks, render_grid
from ..utils.log_config import configure_logging

# Configure logging
configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Isthmus Peaks API",
    description="Finds the land cells that drain to both seas of an isthmus",
    version="0.1.0"
)


# Request/Response models
class IsthmusRequest(BaseModel):
    """Elevation grid to solve, indexed grid[x][y]."""

    grid: List[List[conint(ge=0)]] = Field(
        ..., min_length=1, description="Rectangular grid of non-negative elevations, 0 is sea"
    )


class PeakModel(BaseModel):
    """A single peak."""

    x: int
    y: int


class PeaksResponse(BaseModel):
    """Peaks found for a grid, sorted by coordinates."""

    width: int
    height: int
    peak_count: int
    peaks: List[PeakModel]
    land_cells: int
    west_drained: int
    east_drained: int


class RenderResponse(BaseModel):
    """Text rendering of the peaks and of the grid with peaks marked."""

    text: str
    grid: str


def _solve(request: IsthmusRequest) -> IsthmusSolver:
    """Solve a request's grid or raise an HTTP error."""
    width = len(request.grid)
    height = len(request.grid[0]) if request.grid else 0
    if width * height > settings.max_grid_cells:
        logger.warning("Grid too large", width=width, height=height,
                       max_grid_cells=settings.max_grid_cells)
        raise HTTPException(
            status_code=413,
            detail=f"Grid has {width * height} cells, limit is {settings.max_grid_cells}"
        )

    try:
        return IsthmusSolver(request.grid)
    except ValueError as e:
        logger.warning("Invalid grid rejected", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Isthmus Peaks API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/peaks", response_model=PeaksResponse)
def find_peaks(request: IsthmusRequest):
    """Find every land cell that drains to both seas."""
    logger.info("Peaks requested", rows=len(request.grid))

    solver = _solve(request)
    summary = solver.summary()

    return PeaksResponse(
        width=solver.width,
        height=solver.height,
        peak_count=summary["peak_count"],
        peaks=[PeakModel(x=peak.x, y=peak.y) for peak in solver.sorted_peaks()],
        land_cells=summary["land_cells"],
        west_drained=summary["west_drained"],
        east_drained=summary["east_drained"],
    )


@app.post("/peaks/render", response_model=RenderResponse)
def render_peaks(request: IsthmusRequest):
    """Render the peaks as text, one "(x, y)" per line, plus the marked grid."""
    solver = _solve(request)

    return RenderResponse(
        text=format_peaks(solver.peaks),
        grid=render_grid(solver.grid, solver.peaks),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
