from __future__ import annotations

import math

import pytest

from cropwater.models.crops import CropRecord, GrowthStages
from cropwater.models.enums import CropCategoryEnum, GrowthStageEnum
from cropwater.services import catalog
from cropwater.services.water_demand import (
	MAX_CURVE_POINTS,
	build_kc_curve,
	calculate_etc,
	calculate_seasonal_water_requirement,
	calculate_stage_etc,
	get_growth_stage_for_day,
	get_kc_for_day,
	stage_average_kc,
)


def test_calculate_etc_examples() -> None:
	assert calculate_etc(5.0, 1.15) == 5.75
	assert calculate_etc(4.0, 0.4) == pytest.approx(1.6)
	assert calculate_etc(6.0, 1.2) == pytest.approx(7.2)
	assert calculate_etc(3.5, 0.75) == pytest.approx(2.625)


def test_calculate_etc_zero_inputs() -> None:
	assert calculate_etc(0, 1.15) == 0
	assert calculate_etc(5.0, 0) == 0


def test_calculate_etc_does_not_validate() -> None:
	assert calculate_etc(-2.0, 1.0) == -2.0


def test_kc_development_interpolation(soy_like_crop: CropRecord) -> None:
	# 5 days into a 25-day development stage
	assert get_kc_for_day(soy_like_crop, 20) == pytest.approx(0.4 + (5 / 25) * (1.15 - 0.4))
	assert get_kc_for_day(soy_like_crop, 20) == pytest.approx(0.55)


def test_kc_stage_boundaries_belong_to_earlier_stage(soy_like_crop: CropRecord) -> None:
	assert get_kc_for_day(soy_like_crop, 0) == soy_like_crop.kc_initial
	assert get_kc_for_day(soy_like_crop, 15) == soy_like_crop.kc_initial
	assert get_kc_for_day(soy_like_crop, 40) == pytest.approx(soy_like_crop.kc_mid)
	assert get_kc_for_day(soy_like_crop, 90) == soy_like_crop.kc_mid
	assert get_kc_for_day(soy_like_crop, 120) == soy_like_crop.kc_end


def test_kc_fractional_day(soy_like_crop: CropRecord) -> None:
	assert get_kc_for_day(soy_like_crop, 15.5) == pytest.approx(0.4 + (0.5 / 25) * 0.75)


def test_kc_late_season_between_mid_and_end(soy_like_crop: CropRecord) -> None:
	kc = get_kc_for_day(soy_like_crop, 100)
	assert soy_like_crop.kc_end < kc < soy_like_crop.kc_mid


@pytest.mark.parametrize("crop", catalog.CROPS, ids=lambda crop: crop.id)
def test_kc_for_day_properties_hold_for_catalog(crop: CropRecord) -> None:
	total = crop.total_days
	assert get_kc_for_day(crop, 0) == crop.kc_initial
	assert get_kc_for_day(crop, crop.growth_stages.initial) == crop.kc_initial
	assert get_kc_for_day(crop, total) == crop.kc_end
	assert get_kc_for_day(crop, -1) == crop.kc_end
	assert get_kc_for_day(crop, total + 1) == crop.kc_end
	_, _, b3, _ = crop.growth_stages.boundaries()
	assert get_kc_for_day(crop, b3) == crop.kc_mid


@pytest.mark.parametrize("crop", catalog.CROPS, ids=lambda crop: crop.id)
def test_kc_ramps_are_monotonic(crop: CropRecord) -> None:
	b1, b2, b3, b4 = crop.growth_stages.boundaries()

	development = [get_kc_for_day(crop, b1 + (b2 - b1) * i / 20) for i in range(21)]
	pairs = list(zip(development, development[1:]))
	if crop.kc_mid >= crop.kc_initial:
		assert all(a <= b + 1e-12 for a, b in pairs)
	else:
		assert all(a >= b - 1e-12 for a, b in pairs)

	late = [get_kc_for_day(crop, b3 + (b4 - b3) * i / 20) for i in range(21)]
	pairs = list(zip(late, late[1:]))
	if crop.kc_end >= crop.kc_mid:
		assert all(a <= b + 1e-12 for a, b in pairs)
	else:
		assert all(a >= b - 1e-12 for a, b in pairs)


def test_growth_stage_for_day(soy_like_crop: CropRecord) -> None:
	assert get_growth_stage_for_day(soy_like_crop, -0.1) is None
	assert get_growth_stage_for_day(soy_like_crop, 0) is GrowthStageEnum.initial
	assert get_growth_stage_for_day(soy_like_crop, 15) is GrowthStageEnum.initial
	assert get_growth_stage_for_day(soy_like_crop, 15.01) is GrowthStageEnum.development
	assert get_growth_stage_for_day(soy_like_crop, 40) is GrowthStageEnum.development
	assert get_growth_stage_for_day(soy_like_crop, 90) is GrowthStageEnum.mid_season
	assert get_growth_stage_for_day(soy_like_crop, 120) is GrowthStageEnum.late_season
	assert get_growth_stage_for_day(soy_like_crop, 120.5) is None


def test_seasonal_water_requirement_soy(soy_like_crop: CropRecord) -> None:
	result = calculate_seasonal_water_requirement(soy_like_crop, 5.0)
	expected_kc = (0.4 * 15 + 0.775 * 25 + 1.15 * 50 + 0.825 * 30) / 120
	assert result.total_days == 120
	assert result.average_kc == pytest.approx(expected_kc)
	assert result.total_water_mm == pytest.approx(expected_kc * 5.0 * 120)
	assert result.daily_average_water_mm == pytest.approx(expected_kc * 5.0)


@pytest.mark.parametrize("crop", catalog.CROPS, ids=lambda crop: crop.id)
def test_seasonal_water_requirement_properties(crop: CropRecord) -> None:
	result = calculate_seasonal_water_requirement(crop, 5.0)
	stages = crop.growth_stages
	assert result.total_days == stages.initial + stages.development + stages.mid_season + stages.late_season
	assert result.daily_average_water_mm == pytest.approx(result.total_water_mm / result.total_days)
	assert min(crop.kc_initial, crop.kc_mid, crop.kc_end) <= result.average_kc <= max(crop.kc_initial, crop.kc_mid, crop.kc_end)
	assert 0 < result.total_water_mm < 10000


@pytest.mark.parametrize("et0", [0.5, 4.0, 7.25])
def test_seasonal_water_requirement_is_linear_in_et0(et0: float) -> None:
	corn = catalog.get_crop_by_id("corn")
	assert corn is not None
	single = calculate_seasonal_water_requirement(corn, et0)
	double = calculate_seasonal_water_requirement(corn, 2 * et0)
	assert double.total_water_mm == pytest.approx(2 * single.total_water_mm)
	assert double.average_kc == pytest.approx(single.average_kc)


def test_seasonal_average_matches_integrated_curve(soy_like_crop: CropRecord) -> None:
	# Endpoint averaging is exact for the linear ramps; a fine trapezoid sum agrees.
	points = build_kc_curve(soy_like_crop, step_days=0.25)
	area = sum((d2 - d1) * (k1 + k2) / 2 for (d1, k1), (d2, k2) in zip(points, points[1:]))
	result = calculate_seasonal_water_requirement(soy_like_crop, 1.0)
	assert result.average_kc == pytest.approx(area / soy_like_crop.total_days, rel=1e-3)


def test_seasonal_water_requirement_degenerate_record_is_nan() -> None:
	stages = GrowthStages.model_construct(initial=0, development=0, mid_season=0, late_season=0)
	crop = CropRecord.model_construct(
		id="empty",
		name="Empty",
		local_name="Vazio",
		category=CropCategoryEnum.fruits,
		description="",
		kc_initial=0.5,
		kc_mid=1.0,
		kc_end=0.5,
		max_height=1.0,
		growth_stages=stages,
	)
	result = calculate_seasonal_water_requirement(crop, 5.0)
	assert result.total_days == 0
	assert math.isnan(result.average_kc)
	assert math.isnan(result.daily_average_water_mm)


def test_stage_average_and_etc(soy_like_crop: CropRecord) -> None:
	averages = stage_average_kc(soy_like_crop)
	assert list(averages) == list(GrowthStageEnum)
	assert averages[GrowthStageEnum.development] == pytest.approx(0.775)
	assert averages[GrowthStageEnum.late_season] == pytest.approx(0.825)

	etc = calculate_stage_etc(soy_like_crop, 4.0)
	assert etc[GrowthStageEnum.initial] == pytest.approx(1.6)
	assert etc[GrowthStageEnum.mid_season] == pytest.approx(4.6)


def test_build_kc_curve_covers_whole_season(soy_like_crop: CropRecord) -> None:
	points = build_kc_curve(soy_like_crop)
	assert len(points) == 121
	assert points[0] == (0.0, soy_like_crop.kc_initial)
	assert points[-1][0] == 120.0
	assert points[-1][1] == soy_like_crop.kc_end
	assert points[20][1] == pytest.approx(0.55)


def test_build_kc_curve_uneven_step_ends_on_harvest(soy_like_crop: CropRecord) -> None:
	points = build_kc_curve(soy_like_crop, step_days=7)
	days = [day for day, _ in points]
	assert days[:3] == [0.0, 7.0, 14.0]
	assert days[-2:] == [119.0, 120.0]


@pytest.mark.parametrize("step", [0, -1.0, math.nan, math.inf, -math.inf])
def test_build_kc_curve_rejects_invalid_step(soy_like_crop: CropRecord, step: float) -> None:
	with pytest.raises(ValueError):
		build_kc_curve(soy_like_crop, step_days=step)


@pytest.mark.parametrize("step", [1e-9, 0.001])
def test_build_kc_curve_rejects_step_exceeding_point_cap(step: float) -> None:
	corn = catalog.get_crop_by_id("corn")
	assert corn is not None
	with pytest.raises(ValueError, match="points"):
		build_kc_curve(corn, step_days=step)


def test_build_kc_curve_allows_step_at_point_cap() -> None:
	corn = catalog.get_crop_by_id("corn")
	assert corn is not None
	points = build_kc_curve(corn, step_days=corn.total_days / (MAX_CURVE_POINTS - 2))
	assert len(points) <= MAX_CURVE_POINTS
	assert points[-1] == (125.0, corn.kc_end)


def test_kc_at_harvest_is_exactly_kc_end() -> None:
	crop = CropRecord(
		id="ulp-check",
		name="Ulp Check",
		local_name="Verificação",
		category=CropCategoryEnum.vegetables,
		kc_initial=0.3,
		kc_mid=1.15,
		kc_end=0.1,
		max_height=1.0,
		growth_stages=GrowthStages(initial=7, development=11, mid_season=13, late_season=3),
	)
	assert get_kc_for_day(crop, crop.total_days) == 0.1
	assert get_kc_for_day(crop, crop.total_days - 1.5) == pytest.approx(1.15 + 0.5 * (0.1 - 1.15))
