"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from artboard.config import Settings
from artboard.dependencies import get_settings
from artboard.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        grid_max_lines=cfg.grid_max_lines,
    )
