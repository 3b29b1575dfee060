"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    grid_max_lines: int = 0


class GridLineModel(BaseModel):
    orientation: str
    position: float
    key: str
    points: list[float]


class GridLinesModel(BaseModel):
    stroke: str
    stroke_width: float
    stride: int = 1
    lines: list[GridLineModel] = Field(default_factory=list)


class GridLinesResponse(BaseModel):
    grid: GridLinesModel | None = None


class RecoverSelectionResponse(BaseModel):
    nav_id: str | None = None


class LayerRowModel(BaseModel):
    id: str
    kind: str
    label: str
    parent_id: str | None = None
    depth: int = 0
    has_children: bool = False
    is_expanded: bool = False


class LayersResponse(BaseModel):
    rows: list[LayerRowModel] = Field(default_factory=list)


class ConvertUnitResponse(BaseModel):
    value: str
    px_u: str
