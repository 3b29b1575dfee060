"""POST /api/image-state/*: validate incoming upserts, serialize in-memory geometry."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException

from artboard.geometry.micro_px import MicroPx, ParseError, parse_integer_string
from artboard.geometry.serialize import GeometryRecord, to_wire_geometry
from artboard.geometry.validate import validate_incoming_image_state_upsert
from artboard.models.image_state import SaveImageStateBody, ValidatedImageStateUpsert
from artboard.models.requests import SerializeImageStateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/image-state")


def _px_u(value: int | str | None) -> MicroPx | None:
    if value is None or isinstance(value, int):
        return value
    return parse_integer_string(value)


@router.post("/validate", response_model=ValidatedImageStateUpsert)
async def validate_image_state(payload: dict[str, Any] = Body(...)) -> ValidatedImageStateUpsert:
    validated = validate_incoming_image_state_upsert(payload)
    if validated is None:
        raise HTTPException(status_code=422, detail="Invalid image-state payload")
    return validated


@router.post("/serialize", response_model=SaveImageStateBody, response_model_exclude_none=True)
async def serialize_image_state(req: SerializeImageStateRequest) -> SaveImageStateBody:
    try:
        record = GeometryRecord(
            x_px_u=_px_u(req.x_px_u),
            y_px_u=_px_u(req.y_px_u),
            width_px_u=_px_u(req.width_px_u),
            height_px_u=_px_u(req.height_px_u),
            rotation_deg=req.rotation_deg,
        )
    except ParseError as e:
        logger.warning("Serialize image-state: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return to_wire_geometry(record)
