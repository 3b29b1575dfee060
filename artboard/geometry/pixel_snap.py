"""Pixel-snap for crisp 1px strokes.

A 1px line looks sharpest when its centre lands on N + 0.5 device pixels
in screen space.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ViewState:
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0


def snap_world_to_device_half_pixel(world_coord: float, axis: Literal["x", "y"], view: ViewState) -> float:
    scale = view.scale or 1.0
    offset = view.x if axis == "x" else view.y
    screen = offset + world_coord * scale
    # Nearest N + 0.5, ties toward +inf.
    snapped = math.floor(screen) + 0.5
    return (snapped - offset) / scale
