"""Shared test fixtures."""

from __future__ import annotations

import pytest

from artboard.geometry.serialize import GeometryRecord


# Image catalog as handed over by the project data layer
IMAGES = [{"id": "img-1"}, {"id": "img-2"}]

# 100mm @ 300dpi, baked once
MASTER_100MM_PX_U = 1_181_102_362

GRID_COLOR = "rgba(0,0,0,0.2)"


@pytest.fixture
def images() -> list[dict[str, str]]:
    return [dict(img) for img in IMAGES]


@pytest.fixture
def master_geometry() -> GeometryRecord:
    return GeometryRecord(
        x_px_u=0,
        y_px_u=-12_500_000,
        width_px_u=MASTER_100MM_PX_U,
        height_px_u=2_000_000,
        rotation_deg=15.0,
    )


@pytest.fixture
def centered_geometry() -> GeometryRecord:
    """Geometry without an explicit position."""
    return GeometryRecord(width_px_u=640_000_000, height_px_u=480_000_000, rotation_deg=0.0)
