"""Tests for grid-line generation and stride behavior under large counts."""

from __future__ import annotations

import math

import pytest

from artboard.geometry.grid_lines import GRID_BOUNDARY_SLACK, compute_grid_lines
from tests.conftest import GRID_COLOR


def _grid(art_w=100.0, art_h=100.0, sx=10.0, sy=10.0, lw=1.0, color="#000", max_lines=600):
    return compute_grid_lines(art_w, art_h, sx, sy, lw, color, max_lines)


def _positions(grid, orientation):
    return [line.position for line in grid.lines if line.orientation == orientation]


@pytest.mark.parametrize(
    "overrides",
    [
        {"art_w": 0},
        {"art_h": 0},
        {"sx": 0},
        {"sy": 0},
        {"lw": 0},
        {"art_w": -10},
        {"sy": -1},
        {"sx": math.nan},
        {"lw": math.inf},
        {"art_h": math.inf},
    ],
)
def test_degenerate_inputs_return_none(overrides):
    assert _grid(**overrides) is None


def test_exact_count_for_small_artboard():
    grid = _grid(color=GRID_COLOR)
    assert grid is not None
    assert len(grid.lines) == 22  # 11 vertical + 11 horizontal (inclusive endpoints)
    assert grid.stride == 1
    assert grid.stroke_width == 1
    assert grid.stroke == GRID_COLOR


def test_axis_major_ascending_order():
    grid = _grid()
    orientations = [line.orientation for line in grid.lines]
    assert orientations == ["vertical"] * 11 + ["horizontal"] * 11
    assert _positions(grid, "vertical") == [float(10 * i) for i in range(11)]
    assert _positions(grid, "horizontal") == [float(10 * i) for i in range(11)]


def test_line_descriptors():
    grid = _grid(art_w=100, art_h=50)
    first_v = grid.lines[0]
    assert first_v.key == "vx:0"
    assert first_v.points == (0.0, 0.0, 0.0, 50.0)
    first_h = next(line for line in grid.lines if line.orientation == "horizontal")
    assert first_h.key == "hy:0"
    assert first_h.points == (0.0, 0.0, 100.0, 0.0)


def test_last_line_sits_on_last_whole_step():
    grid = _grid(art_w=105.0)
    assert _positions(grid, "vertical")[-1] == 100.0
    assert len(grid.lines) == 22


def test_stride_caps_huge_grids():
    grid = _grid(art_w=20_000, art_h=20_000, sx=1, sy=1)
    assert grid is not None
    assert len(grid.lines) <= 650
    assert grid.stride == 67
    assert len(grid.lines) == 600


def test_stride_keeps_both_boundaries():
    grid = _grid(art_w=20_000, art_h=20_000, sx=1, sy=1)
    vertical = _positions(grid, "vertical")
    horizontal = _positions(grid, "horizontal")
    assert vertical[0] == 0.0 and vertical[-1] == 20_000.0
    assert horizontal[0] == 0.0 and horizontal[-1] == 20_000.0
    assert vertical == sorted(vertical)
    assert len(set(vertical)) == len(vertical)


def test_stride_is_smallest_that_fits():
    max_lines = 100
    grid = _grid(art_w=1000, art_h=10, sx=1, sy=1, max_lines=max_lines)
    assert len(grid.lines) <= max_lines + GRID_BOUNDARY_SLACK
    assert _positions(grid, "vertical")[-1] == 1000.0
    assert _positions(grid, "horizontal")[-1] == 10.0

    smaller = grid.stride - 1
    if smaller >= 1:
        over = (-(-1000 // smaller) + 1) + (-(-10 // smaller) + 1)
        assert over > max_lines + GRID_BOUNDARY_SLACK


def test_tiny_budget_still_draws_the_frame():
    grid = _grid(sx=1, sy=1, max_lines=1)
    assert grid is not None
    assert _positions(grid, "vertical") == [0.0, 100.0]
    assert _positions(grid, "horizontal") == [0.0, 100.0]


def test_extreme_inputs_terminate_bounded():
    grid = _grid(art_w=1e9, art_h=1e9, sx=1e-3, sy=1e-3, max_lines=600)
    assert grid is not None
    assert len(grid.lines) <= 600 + GRID_BOUNDARY_SLACK
    assert _positions(grid, "vertical")[-1] == pytest.approx(1e9, rel=1e-9)


def test_indices_beyond_int64():
    grid = _grid(art_w=1e9, art_h=1e9, sx=1e-12, sy=1e-12, max_lines=600)
    assert grid is not None
    n = math.floor(1e9 / 1e-12)
    assert n > 2**63
    verticals = [line for line in grid.lines if line.orientation == "vertical"]
    assert verticals[0].key == "vx:0"
    assert verticals[-1].key == f"vx:{n}"
    assert verticals[-1].position == pytest.approx(1e9, rel=1e-9)
    assert len(grid.lines) <= 600 + GRID_BOUNDARY_SLACK


def test_keys_are_plain_integers():
    grid = _grid(art_w=30, art_h=20, sx=10, sy=10)
    assert [line.key for line in grid.lines] == ["vx:0", "vx:1", "vx:2", "vx:3", "hy:0", "hy:1", "hy:2"]
    assert all(type(line.position) is float for line in grid.lines)


def test_referentially_transparent():
    assert _grid(art_w=777, art_h=333, sx=3, sy=7, max_lines=50) == _grid(art_w=777, art_h=333, sx=3, sy=7, max_lines=50)
