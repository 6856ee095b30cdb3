"""Crop reference value types.

``CropRecord`` carries the three FAO-56 crop coefficients and the four
growth-stage lengths used by the water-demand calculator:

    kc
    mid  ┤          ┌──────────┐
         │         ╱            ╲
    end  ┤        ╱              ╲
    ini  ┤───────╱
         └──────┴────┴──────────┴────── day
           ini   dev    mid      late

All models are frozen; the catalog hands out shared instances.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cropwater.models.enums import CropCategoryEnum


class GrowthStages(BaseModel):
    """Stage lengths in days; their sum is the growing-season length."""

    model_config = ConfigDict(frozen=True)

    initial: int = Field(gt=0)
    development: int = Field(gt=0)
    mid_season: int = Field(gt=0)
    late_season: int = Field(gt=0)

    @property
    def total_days(self) -> int:
        return self.initial + self.development + self.mid_season + self.late_season

    def boundaries(self) -> tuple[int, int, int, int]:
        """Cumulative end day of each stage."""
        b1 = self.initial
        b2 = b1 + self.development
        b3 = b2 + self.mid_season
        return b1, b2, b3, b3 + self.late_season


class CropRecord(BaseModel):
    """Agronomic reference: one crop with its Kc values and stage schedule."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$")
    name: str = Field(min_length=1)
    local_name: str = Field(min_length=1)
    category: CropCategoryEnum
    description: str = ""
    kc_initial: float = Field(gt=0)
    kc_mid: float = Field(gt=0)
    kc_end: float = Field(gt=0)
    max_height: float = Field(gt=0, description="Maximum crop height in meters")
    growth_stages: GrowthStages

    @property
    def total_days(self) -> int:
        return self.growth_stages.total_days

    def __repr__(self) -> str:
        return (
            f"<CropRecord id={self.id!r} category={self.category.value!r} "
            f"days={self.total_days}>"
        )


class SeasonalWaterResult(BaseModel):
    """Season-long water demand for one crop at a constant average ET₀."""

    model_config = ConfigDict(frozen=True)

    total_days: int
    average_kc: float
    total_water_mm: float
    daily_average_water_mm: float
