"""Image-state wire contracts.

``*_px_u`` fields are base-10 integer strings in µpx. Transport types stay
decoupled from the in-memory ``int`` geometry (see ``artboard.geometry.serialize``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ImageStateRow(BaseModel):
    """Geometry as stored by the persistence layer."""

    x_px_u: str | None = None
    y_px_u: str | None = None
    width_px_u: str
    height_px_u: str
    rotation_deg: float


class SaveImageStateBody(BaseModel):
    """Geometry as sent to the persistence layer. Absent x/y mean "unset"."""

    role: Literal["master"] = "master"
    x_px_u: str | None = None
    y_px_u: str | None = None
    width_px_u: str
    height_px_u: str
    rotation_deg: float = Field(..., description="Degrees, unnormalized")

    def to_wire(self) -> dict:
        """Dump without unset positions, so absent x/y never read as "0"."""
        return self.model_dump(exclude_none=True)


class ValidatedImageStateUpsert(BaseModel):
    role: Literal["master", "working"]
    x_px_u: str | None
    y_px_u: str | None
    width_px_u: str
    height_px_u: str
    rotation_deg: float
