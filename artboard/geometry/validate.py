"""Validation of incoming image-state upserts.

Unlike serialization, this is the trust boundary for external input:
out-of-range or malformed values are rejected (``None``), not clamped.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from artboard.geometry.micro_px import MAX_PX_U, MIN_PX_U, MicroPx, ParseError, parse_integer_string
from artboard.models.image_state import ValidatedImageStateUpsert

logger = logging.getLogger(__name__)


def _parse_or_none(value: Any) -> MicroPx | None:
    try:
        return parse_integer_string(value)
    except ParseError:
        return None


def _finite_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    return f if math.isfinite(f) else None


def validate_incoming_image_state_upsert(payload: Mapping[str, Any]) -> ValidatedImageStateUpsert | None:
    role = "working" if payload.get("role") == "working" else "master"
    rotation_deg = _finite_float(payload.get("rotation_deg"))

    width = _parse_or_none(payload.get("width_px_u"))
    height = _parse_or_none(payload.get("height_px_u"))

    raw_x = payload.get("x_px_u")
    raw_y = payload.get("y_px_u")
    x = None if raw_x is None else _parse_or_none(raw_x)
    y = None if raw_y is None else _parse_or_none(raw_y)

    problems: list[str] = []
    if width is None or not MIN_PX_U <= width <= MAX_PX_U:
        problems.append("width_px_u")
    if height is None or not MIN_PX_U <= height <= MAX_PX_U:
        problems.append("height_px_u")
    if raw_x is not None and (x is None or not -MAX_PX_U <= x <= MAX_PX_U):
        problems.append("x_px_u")
    if raw_y is not None and (y is None or not -MAX_PX_U <= y <= MAX_PX_U):
        problems.append("y_px_u")
    if rotation_deg is None:
        problems.append("rotation_deg")

    if problems:
        logger.warning("Rejected image-state upsert: invalid %s", ", ".join(problems))
        return None

    return ValidatedImageStateUpsert(
        role=role,
        x_px_u=None if x is None else str(x),
        y_px_u=None if y is None else str(y),
        width_px_u=str(width),
        height_px_u=str(height),
        rotation_deg=rotation_deg,
    )
