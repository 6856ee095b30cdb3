"""Crop water-demand service — composes the catalog and calculator for the API."""

from __future__ import annotations

import logging

from cropwater.config import Settings
from cropwater.models.crops import CropRecord
from cropwater.models.enums import CropCategoryEnum, GrowthStageEnum
from cropwater.schemas.crops import (
	CategoryListResponse,
	CropListResponse,
	CropWaterReportResponse,
	EtcResponse,
	KcCurvePoint,
	KcCurveResponse,
	KcForDayResponse,
	StageWaterNeed,
)
from cropwater.services import catalog, water_demand

_logger = logging.getLogger("cropwater.crop_water_service")


class CropWaterService:
	def __init__(self, settings: Settings):
		self.settings = settings

	def require_crop(self, crop_id: str) -> CropRecord:
		crop = catalog.get_crop_by_id(crop_id)
		if crop is None:
			raise LookupError(f"Crop {crop_id!r} not found")
		return crop

	def list_categories(self) -> CategoryListResponse:
		return CategoryListResponse(categories=catalog.get_all_categories())

	def list_crops(self, category: CropCategoryEnum | str | None = None) -> CropListResponse:
		if category is None:
			items = list(catalog.CROPS)
		else:
			items = catalog.get_crops_by_category(category)
		label = None if category is None else str(category)
		return CropListResponse(category=label, count=len(items), items=items)

	def kc_for_day(self, crop_id: str, day_of_season: float) -> KcForDayResponse:
		crop = self.require_crop(crop_id)
		return KcForDayResponse(
			crop_id=crop.id,
			day_of_season=day_of_season,
			stage=water_demand.get_growth_stage_for_day(crop, day_of_season),
			kc=water_demand.get_kc_for_day(crop, day_of_season),
		)

	def kc_curve(self, crop_id: str, step_days: float | None = None) -> KcCurveResponse:
		crop = self.require_crop(crop_id)
		step = self.settings.kc_curve_step_days if step_days is None else step_days
		points = water_demand.build_kc_curve(crop, step)
		_logger.debug("kc curve built", extra={"crop_id": crop.id, "points": len(points)})
		return KcCurveResponse(
			crop_id=crop.id,
			step_days=step,
			total_days=crop.total_days,
			points=[KcCurvePoint(day=day, kc=kc) for day, kc in points],
		)

	def water_report(self, crop_id: str, et0: float | None = None) -> CropWaterReportResponse:
		crop = self.require_crop(crop_id)
		et0_is_default = et0 is None
		et0_value = self.settings.default_et0_mm_day if et0 is None else et0
		if et0_is_default:
			_logger.info(
				"no ET0 supplied, using default",
				extra={"crop_id": crop.id, "et0_mm_day": et0_value},
			)

		averages = water_demand.stage_average_kc(crop)
		stage_etc = water_demand.calculate_stage_etc(crop, et0_value)
		durations = {
			GrowthStageEnum.initial: crop.growth_stages.initial,
			GrowthStageEnum.development: crop.growth_stages.development,
			GrowthStageEnum.mid_season: crop.growth_stages.mid_season,
			GrowthStageEnum.late_season: crop.growth_stages.late_season,
		}
		stages = [
			StageWaterNeed(
				stage=stage,
				duration_days=durations[stage],
				average_kc=averages[stage],
				etc_mm_day=stage_etc[stage],
			)
			for stage in GrowthStageEnum
		]

		seasonal = water_demand.calculate_seasonal_water_requirement(crop, et0_value)
		_logger.debug(
			"seasonal water requirement computed",
			extra={"crop_id": crop.id, "total_water_mm": seasonal.total_water_mm},
		)
		return CropWaterReportResponse(
			crop_id=crop.id,
			et0_mm_day=et0_value,
			et0_is_default=et0_is_default,
			etc_initial=water_demand.calculate_etc(et0_value, crop.kc_initial),
			etc_mid=water_demand.calculate_etc(et0_value, crop.kc_mid),
			etc_end=water_demand.calculate_etc(et0_value, crop.kc_end),
			stages=stages,
			seasonal=seasonal,
		)

	def etc(self, et0: float, kc: float) -> EtcResponse:
		return EtcResponse(et0_mm_day=et0, kc=kc, etc_mm_day=water_demand.calculate_etc(et0, kc))
