"""Artboard grid-line geometry (pure).

Lines are emitted axis-major (all verticals ascending, then all
horizontals ascending) so a renderer can draw them without sorting.
When the naive count would exceed the line budget, every ``stride``-th
line is kept; the final boundary line is always kept as well.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Literal

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# One extra boundary line per axis may be emitted on top of max_lines.
GRID_BOUNDARY_SLACK = 2

_INT64_MAX = np.iinfo(np.int64).max

Orientation = Literal["vertical", "horizontal"]


@dataclass(frozen=True)
class GridLine:
    orientation: Orientation
    position: float
    key: str
    # [x0, y0, x1, y1] in artboard px
    points: tuple[float, float, float, float]


@dataclass
class GridLines:
    stroke: str
    stroke_width: float
    lines: list[GridLine] = field(default_factory=list)
    stride: int = 1


def _axis_count(n: int, stride: int) -> int:
    """Lines emitted for indices 0..n at ``stride``, final index n included."""
    return -(-n // stride) + 1


def _choose_stride(nx: int, ny: int, max_lines: int) -> int:
    """Smallest stride whose emitted total fits max_lines + slack.

    ``_axis_count`` is non-increasing in stride, so binary search is exact.
    """
    budget = max_lines + GRID_BOUNDARY_SLACK
    lo, hi = 1, max(nx, ny, 1)
    if _axis_count(nx, hi) + _axis_count(ny, hi) > budget:
        return hi
    while lo < hi:
        mid = (lo + hi) // 2
        if _axis_count(nx, mid) + _axis_count(ny, mid) <= budget:
            hi = mid
        else:
            lo = mid + 1
    return lo


def _axis_indices(n: int, stride: int) -> NDArray:
    if n < _INT64_MAX:
        idx = np.arange(0, n + 1, stride, dtype=np.int64)
    else:
        # n can exceed int64 for huge artboards with tiny spacing.
        idx = np.array(list(range(0, n + 1, stride)), dtype=object)
    if idx[-1] != n:
        idx = np.append(idx, np.array([n], dtype=idx.dtype))
    return idx


def _axis_positions(idx: NDArray, spacing: float, extent: float) -> NDArray[np.float64]:
    return np.minimum(idx.astype(np.float64) * spacing, extent)


def _is_positive(v: float) -> bool:
    return math.isfinite(v) and v > 0


def compute_grid_lines(
    art_w: float,
    art_h: float,
    spacing_x: float,
    spacing_y: float,
    line_width: float,
    color: str,
    max_lines: int,
) -> GridLines | None:
    """Compute grid lines for an artboard, or ``None`` when no grid should be drawn."""
    if not all(_is_positive(v) for v in (art_w, art_h, spacing_x, spacing_y, line_width)):
        return None

    ratio_x = art_w / spacing_x
    ratio_y = art_h / spacing_y
    if not (math.isfinite(ratio_x) and math.isfinite(ratio_y)):
        return None

    nx = math.floor(ratio_x)
    ny = math.floor(ratio_y)
    naive_total = (nx + 1) + (ny + 1)

    stride = 1
    if naive_total > max_lines:
        stride = _choose_stride(nx, ny, max_lines)
        logger.debug(
            "Grid %gx%g @ %gx%g: %d lines over budget %d, stride %d",
            art_w, art_h, spacing_x, spacing_y, naive_total, max_lines, stride,
        )

    ix = _axis_indices(nx, stride)
    iy = _axis_indices(ny, stride)
    xs = _axis_positions(ix, spacing_x, art_w)
    ys = _axis_positions(iy, spacing_y, art_h)

    lines: list[GridLine] = []
    for i, x in zip(ix.tolist(), xs.tolist()):
        lines.append(GridLine("vertical", x, f"vx:{i}", (x, 0.0, x, float(art_h))))
    for j, y in zip(iy.tolist(), ys.tolist()):
        lines.append(GridLine("horizontal", y, f"hy:{j}", (0.0, y, float(art_w), y)))

    return GridLines(stroke=color, stroke_width=line_width, lines=lines, stride=stride)
