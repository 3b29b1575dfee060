"""Bake transient canvas-node transforms into canonical µpx."""

from __future__ import annotations

import math
from typing import Protocol

from artboard.geometry.micro_px import PX_U_SCALE, MicroPx, clamp_micro_px
from artboard.geometry.units import px_u_to_px


class SizeNode(Protocol):
    width: float
    height: float
    scale_x: float
    scale_y: float


class PositionNode(Protocol):
    x: float
    y: float


def number_to_micro_px(px: float) -> MicroPx:
    # Float → µpx is a quantization boundary. Ties round up (toward +inf).
    return math.floor(px * PX_U_SCALE + 0.5)


def bake_in_size_to_micro_px(node: SizeNode) -> tuple[MicroPx, MicroPx]:
    """Fold node scale into width/height.

    Computes ``floor(width * scale_x * 1e6 + 0.5)`` (same for height), clamps to
    [1px, MAX_PX_U], writes the px size back and resets scale to 1.
    """
    width_px_u = clamp_micro_px(number_to_micro_px(node.width * node.scale_x))
    height_px_u = clamp_micro_px(number_to_micro_px(node.height * node.scale_y))

    node.width = px_u_to_px(width_px_u)
    node.height = px_u_to_px(height_px_u)
    node.scale_x = 1.0
    node.scale_y = 1.0
    return width_px_u, height_px_u


def apply_micro_px_to_node(node: SizeNode, width_px_u: MicroPx, height_px_u: MicroPx) -> None:
    """Apply canonical size (steady state). Scale is forced back to 1."""
    node.width = px_u_to_px(clamp_micro_px(width_px_u))
    node.height = px_u_to_px(clamp_micro_px(height_px_u))
    node.scale_x = 1.0
    node.scale_y = 1.0


def read_micro_px_position(node: PositionNode) -> tuple[MicroPx, MicroPx]:
    return number_to_micro_px(node.x), number_to_micro_px(node.y)


def apply_micro_px_position_to_node(node: PositionNode, x_px_u: MicroPx, y_px_u: MicroPx) -> None:
    node.x = px_u_to_px(x_px_u)
    node.y = px_u_to_px(y_px_u)
