"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Hard ceiling on a client-requested line budget.
MAX_GRID_LINES_REQUEST = 10_000


class SerializeImageStateRequest(BaseModel):
    x_px_u: int | str | None = Field(default=None, description="µpx; omit for no explicit position")
    y_px_u: int | str | None = Field(default=None, description="µpx; omit for no explicit position")
    width_px_u: int | str = Field(..., description="µpx")
    height_px_u: int | str = Field(..., description="µpx")
    rotation_deg: float = Field(default=0.0, description="Degrees, unnormalized")


class ViewStateModel(BaseModel):
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0


class GridLinesRequest(BaseModel):
    art_w: float = Field(..., description="Artboard width in px")
    art_h: float = Field(..., description="Artboard height in px")
    spacing_x: float = Field(..., description="Grid spacing along x in px")
    spacing_y: float = Field(..., description="Grid spacing along y in px")
    line_width: float | None = Field(default=None, description="Stroke width in px (default from settings)")
    color: str | None = Field(default=None, description="Stroke color (default from settings)")
    max_lines: int | None = Field(
        default=None, ge=1, le=MAX_GRID_LINES_REQUEST, description="Line budget (default from settings)"
    )
    view: ViewStateModel | None = Field(default=None, description="Snap lines to device half-pixels for this view")


class ImageRef(BaseModel):
    id: str


class RecoverSelectionRequest(BaseModel):
    nav_id: str | None = Field(default=None, description="Currently selected nav id")
    images: list[ImageRef] = Field(default_factory=list, description="Current image catalog")
    active_master_image_id: str | None = None


class FilterLayerModel(BaseModel):
    filter_id: str
    label: str


class ImageLayerModel(BaseModel):
    image_id: str
    label: str
    filters: list[FilterLayerModel] = Field(default_factory=list)


class LayersRequest(BaseModel):
    images: list[ImageLayerModel] = Field(default_factory=list)
    expanded: list[str] = Field(default_factory=list, description="Nav ids of expanded nodes")


class ConvertUnitRequest(BaseModel):
    value: str = Field(..., description="Decimal value as typed by the user")
    from_unit: str = Field(..., description="mm, cm, pt or px")
    to_unit: str = Field(..., description="mm, cm, pt or px")
    dpi: int | None = Field(default=None, description="DPI (default from settings)")
