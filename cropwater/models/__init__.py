"""Value-type registry.  Application code can do::

    from cropwater.models import CropRecord, CropCategoryEnum, ...
"""

# ── Crop reference ──────────────────────────────────────────────────────────
from cropwater.models.crops import CropRecord, GrowthStages, SeasonalWaterResult

# ── Enums ───────────────────────────────────────────────────────────────────
from cropwater.models.enums import CropCategoryEnum, GrowthStageEnum

__all__ = [
    # Enums
    "CropCategoryEnum",
    # Crop reference
    "CropRecord",
    "GrowthStageEnum",
    "GrowthStages",
    "SeasonalWaterResult",
]
