"""Stateless water-demand calculation routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from cropwater.config import Settings, get_settings
from cropwater.schemas.crops import EtcResponse
from cropwater.services.crop_water_service import CropWaterService

router = APIRouter(prefix="/calculations", tags=["calculations"])


@router.get("/etc", response_model=EtcResponse)
async def calculate_etc(
	et0: float = Query(ge=0, allow_inf_nan=False, description="Reference ET₀ in mm/day"),
	kc: float = Query(ge=0, allow_inf_nan=False, description="Crop coefficient"),
	settings: Settings = Depends(get_settings),
) -> EtcResponse:
	return CropWaterService(settings).etc(et0, kc)
