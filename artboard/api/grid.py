"""POST /api/grid-lines: artboard grid geometry for the renderer."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from artboard.config import Settings
from artboard.dependencies import get_settings
from artboard.geometry.grid_lines import GridLine, compute_grid_lines
from artboard.geometry.pixel_snap import ViewState, snap_world_to_device_half_pixel
from artboard.models.requests import GridLinesRequest
from artboard.models.responses import GridLineModel, GridLinesModel, GridLinesResponse

router = APIRouter()


def _to_model(line: GridLine, view: ViewState | None) -> GridLineModel:
    points = list(line.points)
    position = line.position
    if view is not None:
        if line.orientation == "vertical":
            position = snap_world_to_device_half_pixel(position, "x", view)
            points[0] = points[2] = position
        else:
            position = snap_world_to_device_half_pixel(position, "y", view)
            points[1] = points[3] = position
    return GridLineModel(orientation=line.orientation, position=position, key=line.key, points=points)


@router.post("/grid-lines", response_model=GridLinesResponse)
async def grid_lines(req: GridLinesRequest, cfg: Settings = Depends(get_settings)) -> GridLinesResponse:
    grid = compute_grid_lines(
        req.art_w,
        req.art_h,
        req.spacing_x,
        req.spacing_y,
        cfg.grid_line_width_px if req.line_width is None else req.line_width,
        cfg.grid_color if req.color is None else req.color,
        cfg.grid_max_lines if req.max_lines is None else req.max_lines,
    )
    if grid is None:
        return GridLinesResponse(grid=None)

    view = None if req.view is None else ViewState(x=req.view.x, y=req.view.y, scale=req.view.scale)
    return GridLinesResponse(
        grid=GridLinesModel(
            stroke=grid.stroke,
            stroke_width=grid.stroke_width,
            stride=grid.stride,
            lines=[_to_model(line, view) for line in grid.lines],
        )
    )
