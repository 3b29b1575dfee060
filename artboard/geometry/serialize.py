"""In-memory geometry ↔ persistence wire form.

Save/persist never applies another rounding pass: rounding happens once,
at bake-in (``units.unit_to_px_u`` / ``bakein.number_to_micro_px``).
This layer only clamps and stringifies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from artboard.geometry.micro_px import (
    MicroPx,
    clamp_micro_px,
    clamp_position_px_u,
    parse_integer_string,
)
from artboard.models.image_state import SaveImageStateBody


@dataclass(frozen=True)
class GeometryRecord:
    """Master-image geometry in µpx. ``None`` x/y means "no explicit position"."""

    width_px_u: MicroPx
    height_px_u: MicroPx
    rotation_deg: float = 0.0
    x_px_u: MicroPx | None = None
    y_px_u: MicroPx | None = None


def to_wire_geometry(record: GeometryRecord) -> SaveImageStateBody:
    return SaveImageStateBody(
        role="master",
        x_px_u=None if record.x_px_u is None else str(clamp_position_px_u(record.x_px_u)),
        y_px_u=None if record.y_px_u is None else str(clamp_position_px_u(record.y_px_u)),
        width_px_u=str(clamp_micro_px(record.width_px_u)),
        height_px_u=str(clamp_micro_px(record.height_px_u)),
        rotation_deg=float(record.rotation_deg),
    )


def _optional_px_u(value: Any) -> MicroPx | None:
    if value is None:
        return None
    return parse_integer_string(value)


def from_wire_geometry(body: BaseModel | Mapping[str, Any]) -> GeometryRecord:
    """Parse a wire/row payload back into µpx. Raises ParseError on bad strings."""
    data = body.model_dump() if isinstance(body, BaseModel) else dict(body)
    return GeometryRecord(
        x_px_u=_optional_px_u(data.get("x_px_u")),
        y_px_u=_optional_px_u(data.get("y_px_u")),
        width_px_u=parse_integer_string(data.get("width_px_u")),
        height_px_u=parse_integer_string(data.get("height_px_u")),
        rotation_deg=float(data.get("rotation_deg", 0.0)),
    )
