"""Closed enumerations for the crop reference data.

Both are StrEnums so members compare equal to their plain labels; callers may
pass either ``CropCategoryEnum.grains`` or ``"Grains & Cereals"``.
"""

from enum import StrEnum


class CropCategoryEnum(StrEnum):
    """Crop grouping shown in catalog listings (declaration order is display order)."""

    grains = "Grains & Cereals"
    legumes = "Legumes & Pulses"
    fiber = "Fiber Crops"
    sugar = "Sugar Crops"
    beverages = "Beverage Crops"
    fruits = "Fruits"
    vegetables = "Vegetables"
    oilseeds = "Oilseeds"


class GrowthStageEnum(StrEnum):
    """FAO-56 growth stages, in seasonal order."""

    initial = "initial"
    development = "development"
    mid_season = "mid_season"
    late_season = "late_season"
