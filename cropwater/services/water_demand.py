"""FAO-56 single crop-coefficient water-demand calculations.

Pure functions over ``CropRecord``; ET₀ always comes from the caller
(mm/day). Nothing here validates its inputs: negative values propagate
arithmetically and a crop record with no season length yields ``nan``.
"""

from __future__ import annotations

import math

from cropwater.models.crops import CropRecord, SeasonalWaterResult
from cropwater.models.enums import GrowthStageEnum

MAX_CURVE_POINTS = 10_000


def _divide(numerator: float, denominator: float) -> float:
	# IEEE-754 semantics for ad-hoc records built with model_construct().
	if denominator == 0:
		if numerator == 0 or math.isnan(numerator):
			return math.nan
		return math.copysign(math.inf, numerator)
	return numerator / denominator


def calculate_etc(et0: float, kc: float) -> float:
	"""Crop evapotranspiration, ETc = Kc × ET₀ (mm/day)."""
	return et0 * kc


def get_growth_stage_for_day(crop: CropRecord, day_of_season: float) -> GrowthStageEnum | None:
	"""Stage owning ``day_of_season``; each stage includes its upper boundary.

	Returns ``None`` before planting or after harvest.
	"""
	b1, b2, b3, b4 = crop.growth_stages.boundaries()
	if day_of_season < 0 or day_of_season > b4:
		return None
	if day_of_season <= b1:
		return GrowthStageEnum.initial
	if day_of_season <= b2:
		return GrowthStageEnum.development
	if day_of_season <= b3:
		return GrowthStageEnum.mid_season
	return GrowthStageEnum.late_season


def get_kc_for_day(crop: CropRecord, day_of_season: float) -> float:
	"""Kc on a given day, linearly interpolated across the ramp stages.

	Flat ``kc_initial`` through the initial stage, ramp to ``kc_mid`` over
	development, flat ``kc_mid`` through mid-season, ramp to ``kc_end`` over
	the late season. Days outside ``[0, total_days]`` return ``kc_end``.
	"""
	stages = crop.growth_stages
	stage = get_growth_stage_for_day(crop, day_of_season)
	b1, _, b3, b4 = stages.boundaries()

	if stage is None:
		return crop.kc_end
	if stage is GrowthStageEnum.initial:
		return crop.kc_initial
	if stage is GrowthStageEnum.development:
		progress = (day_of_season - b1) / stages.development
		return crop.kc_initial + progress * (crop.kc_mid - crop.kc_initial)
	if stage is GrowthStageEnum.mid_season:
		return crop.kc_mid

	# Harvest day returns kc_end exactly, free of interpolation rounding.
	if day_of_season == b4:
		return crop.kc_end
	progress = (day_of_season - b3) / stages.late_season
	return crop.kc_mid + progress * (crop.kc_end - crop.kc_mid)


def stage_average_kc(crop: CropRecord) -> dict[GrowthStageEnum, float]:
	"""Mean Kc over each stage.

	Ramp stages are linear, so their mean is the mean of the endpoints. This
	only holds while ``get_kc_for_day`` interpolates linearly; a curved ramp
	would need numerical integration here.
	"""
	return {
		GrowthStageEnum.initial: crop.kc_initial,
		GrowthStageEnum.development: (crop.kc_initial + crop.kc_mid) / 2,
		GrowthStageEnum.mid_season: crop.kc_mid,
		GrowthStageEnum.late_season: (crop.kc_mid + crop.kc_end) / 2,
	}


def calculate_stage_etc(crop: CropRecord, et0: float) -> dict[GrowthStageEnum, float]:
	"""Average ETc (mm/day) within each growth stage at a constant ET₀."""
	return {stage: calculate_etc(et0, kc) for stage, kc in stage_average_kc(crop).items()}


def calculate_seasonal_water_requirement(crop: CropRecord, average_et0: float) -> SeasonalWaterResult:
	"""Season-long water requirement from duration-weighted stage Kc."""
	stages = crop.growth_stages
	total_days = stages.total_days
	averages = stage_average_kc(crop)

	weighted_sum = (
		averages[GrowthStageEnum.initial] * stages.initial
		+ averages[GrowthStageEnum.development] * stages.development
		+ averages[GrowthStageEnum.mid_season] * stages.mid_season
		+ averages[GrowthStageEnum.late_season] * stages.late_season
	)
	weighted_kc = _divide(weighted_sum, total_days)
	total_water_mm = weighted_kc * average_et0 * total_days

	return SeasonalWaterResult(
		total_days=total_days,
		average_kc=weighted_kc,
		total_water_mm=total_water_mm,
		daily_average_water_mm=_divide(total_water_mm, total_days),
	)


def build_kc_curve(crop: CropRecord, step_days: float = 1.0) -> list[tuple[float, float]]:
	"""Sample ``(day, kc)`` pairs from planting to harvest, both inclusive.

	Raises ``ValueError`` for a non-finite or non-positive step, or one so
	small the curve would exceed ``MAX_CURVE_POINTS``.
	"""
	if not math.isfinite(step_days) or step_days <= 0:
		raise ValueError("step_days must be a positive finite number")

	total_days = crop.total_days
	samples = math.ceil(total_days / step_days)
	if samples + 1 > MAX_CURVE_POINTS:
		raise ValueError(
			f"step_days={step_days} yields more than {MAX_CURVE_POINTS} points "
			f"over a {total_days}-day season"
		)

	points: list[tuple[float, float]] = []
	for index in range(samples):
		day = float(index * step_days)
		if day >= total_days:
			break
		points.append((day, get_kc_for_day(crop, day)))
	points.append((float(total_days), get_kc_for_day(crop, total_days)))
	return points
