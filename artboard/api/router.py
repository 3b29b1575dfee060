"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from artboard.api import grid, health, image_state, navigation, units

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(image_state.router)
api_router.include_router(grid.router)
api_router.include_router(navigation.router)
api_router.include_router(units.router)
