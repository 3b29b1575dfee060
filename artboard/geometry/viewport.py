"""Canvas view transform: fit, pan and pointer-anchored zoom.

Produces the ``ViewState`` (screen = offset + world * scale) that grid
snapping consumes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from artboard.geometry.pixel_snap import ViewState

MIN_SCALE = 0.01
MAX_SCALE = 8.0


@dataclass(frozen=True)
class Size:
    w: float
    h: float


@dataclass(frozen=True)
class Pointer:
    x: float
    y: float


def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


def fit_to_world(view_size: Size, world_size: Size, padding: float = 0.0) -> ViewState:
    """Largest scale that shows the whole world inside the view, centred.

    Degenerate sizes (or padding that leaves no room) give the identity view.
    """
    avail_w = view_size.w - 2 * padding
    avail_h = view_size.h - 2 * padding
    if min(avail_w, avail_h, world_size.w, world_size.h) <= 0:
        return ViewState()

    scale = min(avail_w / world_size.w, avail_h / world_size.h)
    x = padding + (avail_w - world_size.w * scale) / 2
    y = padding + (avail_h - world_size.h * scale) / 2
    return ViewState(x=x, y=y, scale=scale)


def zoom_around(
    view: ViewState,
    pointer: Pointer,
    factor: float,
    min_scale: float = MIN_SCALE,
    max_scale: float = MAX_SCALE,
) -> ViewState:
    """Zoom by ``factor`` keeping the world point under ``pointer`` fixed on screen."""
    old_scale = view.scale or 1.0
    new_scale = clamp(old_scale * factor, min_scale, max_scale)
    if new_scale == view.scale:
        return view

    world_x = (pointer.x - view.x) / old_scale
    world_y = (pointer.y - view.y) / old_scale
    return ViewState(x=pointer.x - world_x * new_scale, y=pointer.y - world_y * new_scale, scale=new_scale)


def pan_by(view: ViewState, dx: float, dy: float) -> ViewState:
    # Drag deltas move the content the opposite way.
    return replace(view, x=view.x - dx, y=view.y - dy)


def _is_positive(v: float | None) -> bool:
    return v is not None and math.isfinite(v) and v > 0


def scale_to_match_aspect(
    img_w: float, img_h: float, target_w: float | None = None, target_h: float | None = None
) -> float | None:
    """Uniform scale that brings the image to ``target_w`` (preferred) or ``target_h``."""
    if not (_is_positive(img_w) and _is_positive(img_h)):
        return None
    if _is_positive(target_w):
        return target_w / img_w
    if _is_positive(target_h):
        return target_h / img_h
    return None
