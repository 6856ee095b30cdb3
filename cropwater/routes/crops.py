"""Crop catalog & water-demand routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from cropwater.config import Settings, get_settings
from cropwater.models.crops import CropRecord
from cropwater.schemas.crops import (
	CategoryListResponse,
	CropListResponse,
	CropWaterReportResponse,
	KcCurveResponse,
	KcForDayResponse,
)
from cropwater.services.crop_water_service import CropWaterService

router = APIRouter(prefix="/crops", tags=["crops"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="crop service failure")


@router.get("", response_model=CropListResponse)
async def list_crops(
	category: str | None = Query(default=None, description="Category label, e.g. 'Fruits'"),
	settings: Settings = Depends(get_settings),
) -> CropListResponse:
	return CropWaterService(settings).list_crops(category)


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(settings: Settings = Depends(get_settings)) -> CategoryListResponse:
	return CropWaterService(settings).list_categories()


@router.get("/{crop_id}", response_model=CropRecord)
async def get_crop(crop_id: str, settings: Settings = Depends(get_settings)) -> CropRecord:
	try:
		return CropWaterService(settings).require_crop(crop_id)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/{crop_id}/kc", response_model=KcForDayResponse)
async def get_kc_for_day(
	crop_id: str,
	day: float = Query(allow_inf_nan=False, description="Days since planting (fractional allowed)"),
	settings: Settings = Depends(get_settings),
) -> KcForDayResponse:
	try:
		return CropWaterService(settings).kc_for_day(crop_id, day)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/{crop_id}/kc-curve", response_model=KcCurveResponse)
async def get_kc_curve(
	crop_id: str,
	step_days: float | None = Query(default=None, gt=0, allow_inf_nan=False),
	settings: Settings = Depends(get_settings),
) -> KcCurveResponse:
	try:
		return CropWaterService(settings).kc_curve(crop_id, step_days)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/{crop_id}/water-requirement", response_model=CropWaterReportResponse)
async def get_water_requirement(
	crop_id: str,
	et0: float | None = Query(default=None, ge=0, allow_inf_nan=False, description="Reference ET₀ in mm/day"),
	settings: Settings = Depends(get_settings),
) -> CropWaterReportResponse:
	try:
		return CropWaterService(settings).water_report(crop_id, et0)
	except Exception as exc:
		raise _map_error(exc) from exc
