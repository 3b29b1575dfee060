"""Artboard geometry: µpx fixed-point units, serialization, grid lines."""

from artboard.geometry.micro_px import (
    MAX_PX_U,
    MIN_PX_U,
    PX_U_SCALE,
    MicroPx,
    ParseError,
    clamp_micro_px,
    clamp_position_px_u,
    parse_integer_string,
)
from artboard.geometry.serialize import GeometryRecord, from_wire_geometry, to_wire_geometry
from artboard.geometry.grid_lines import GridLine, GridLines, compute_grid_lines

__all__ = [
    "MAX_PX_U",
    "MIN_PX_U",
    "PX_U_SCALE",
    "MicroPx",
    "ParseError",
    "clamp_micro_px",
    "clamp_position_px_u",
    "parse_integer_string",
    "GeometryRecord",
    "from_wire_geometry",
    "to_wire_geometry",
    "GridLine",
    "GridLines",
    "compute_grid_lines",
]
