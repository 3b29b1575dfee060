"""POST /api/units/convert: unit toggles via canonical µpx."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from artboard.config import Settings
from artboard.dependencies import get_settings
from artboard.geometry.micro_px import ParseError
from artboard.geometry.units import convert_unit, typed_value_to_px_u
from artboard.models.requests import ConvertUnitRequest
from artboard.models.responses import ConvertUnitResponse

router = APIRouter(prefix="/units")


@router.post("/convert", response_model=ConvertUnitResponse)
async def convert(req: ConvertUnitRequest, cfg: Settings = Depends(get_settings)) -> ConvertUnitResponse:
    dpi = cfg.default_dpi if req.dpi is None else req.dpi
    try:
        value = convert_unit(req.value, req.from_unit, req.to_unit, dpi)
        px_u = typed_value_to_px_u(req.value, req.from_unit, dpi)
    except ParseError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ConvertUnitResponse(value=value, px_u=str(px_u))
