"""Pydantic response schemas for crop and water-demand endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cropwater.models.crops import CropRecord, SeasonalWaterResult
from cropwater.models.enums import CropCategoryEnum, GrowthStageEnum


class CategoryListResponse(BaseModel):
	categories: list[CropCategoryEnum] = Field(default_factory=list)


class CropListResponse(BaseModel):
	category: str | None = None
	count: int
	items: list[CropRecord] = Field(default_factory=list)


class KcForDayResponse(BaseModel):
	crop_id: str
	day_of_season: float
	stage: GrowthStageEnum | None = None
	kc: float


class KcCurvePoint(BaseModel):
	day: float
	kc: float


class KcCurveResponse(BaseModel):
	crop_id: str
	step_days: float
	total_days: int
	points: list[KcCurvePoint] = Field(default_factory=list)


class StageWaterNeed(BaseModel):
	stage: GrowthStageEnum
	duration_days: int
	average_kc: float
	etc_mm_day: float


class CropWaterReportResponse(BaseModel):
	"""Water needs for one crop at a given ET₀.

	``etc_initial``/``etc_mid``/``etc_end`` are the instantaneous demand at
	each crop coefficient; ``stages`` averages each stage over its ramp.
	"""

	crop_id: str
	et0_mm_day: float
	et0_is_default: bool
	etc_initial: float
	etc_mid: float
	etc_end: float
	stages: list[StageWaterNeed] = Field(default_factory=list)
	seasonal: SeasonalWaterResult


class EtcResponse(BaseModel):
	et0_mm_day: float
	kc: float
	etc_mm_day: float
