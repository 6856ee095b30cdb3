"""Crop reference catalog — FAO-56 Kc values for common Brazilian crops.

Coefficients follow FAO-56 Table 12 (single crop coefficient, sub-humid
climate) adjusted with Brazilian agricultural research; stage lengths follow
FAO-56 Table 11. Local names are Portuguese.

The table is built once at import and never mutated.
"""

from __future__ import annotations

from types import MappingProxyType

from cropwater.models.crops import CropRecord, GrowthStages
from cropwater.models.enums import CropCategoryEnum as Cat


def _crop(
	crop_id: str,
	name: str,
	local_name: str,
	category: Cat,
	description: str,
	kc: tuple[float, float, float],
	max_height: float,
	stages: tuple[int, int, int, int],
) -> CropRecord:
	kc_initial, kc_mid, kc_end = kc
	initial, development, mid_season, late_season = stages
	return CropRecord(
		id=crop_id,
		name=name,
		local_name=local_name,
		category=category,
		description=description,
		kc_initial=kc_initial,
		kc_mid=kc_mid,
		kc_end=kc_end,
		max_height=max_height,
		growth_stages=GrowthStages(
			initial=initial,
			development=development,
			mid_season=mid_season,
			late_season=late_season,
		),
	)


# id, name, local name, category, description, (Kc ini, mid, end), height m, (ini, dev, mid, late) days
CROPS: tuple[CropRecord, ...] = (
	# ── Grains & Cereals ────────────────────────────────────────────────────
	_crop("corn", "Corn (Maize)", "Milho", Cat.grains, "Field corn for grain production", (0.3, 1.2, 0.35), 2.0, (20, 35, 40, 30)),
	_crop("rice", "Rice", "Arroz", Cat.grains, "Paddy rice cultivation", (1.05, 1.2, 0.9), 1.0, (30, 30, 60, 30)),
	_crop("wheat", "Wheat", "Trigo", Cat.grains, "Spring wheat for grain", (0.3, 1.15, 0.25), 1.0, (15, 30, 65, 40)),
	_crop("sorghum", "Sorghum", "Sorgo", Cat.grains, "Grain sorghum", (0.3, 1.0, 0.55), 1.2, (20, 35, 40, 30)),
	# ── Legumes & Oilseeds ──────────────────────────────────────────────────
	_crop("soybeans", "Soybeans", "Soja", Cat.oilseeds, "Most important Brazilian oilseed crop", (0.4, 1.15, 0.5), 0.8, (15, 25, 50, 30)),
	_crop("beans-dry", "Beans (Dry)", "Feijão", Cat.legumes, "Common dry beans", (0.4, 1.15, 0.35), 0.4, (20, 30, 40, 20)),
	_crop("peanuts", "Peanuts (Groundnuts)", "Amendoim", Cat.oilseeds, "Groundnut cultivation", (0.4, 1.15, 0.6), 0.4, (25, 35, 45, 25)),
	# ── Fiber Crops ─────────────────────────────────────────────────────────
	_crop("cotton", "Cotton", "Algodão", Cat.fiber, "Cotton for fiber production", (0.35, 1.15, 0.5), 1.5, (30, 50, 60, 55)),
	# ── Sugar Crops ─────────────────────────────────────────────────────────
	_crop("sugarcane-virgin", "Sugarcane (Virgin)", "Cana-de-açúcar (Virgem)", Cat.sugar, "First year sugarcane planting", (0.4, 1.25, 0.75), 3.0, (35, 60, 190, 120)),
	_crop("sugarcane-ratoon", "Sugarcane (Ratoon)", "Cana-de-açúcar (Soca)", Cat.sugar, "Regrowth sugarcane after harvest", (0.4, 1.25, 0.75), 3.0, (25, 35, 180, 150)),
	# ── Beverage Crops ──────────────────────────────────────────────────────
	_crop("coffee", "Coffee", "Café", Cat.beverages, "Coffee plantation (bare ground)", (0.9, 0.95, 0.95), 3.0, (60, 90, 120, 95)),
	# ── Fruits ──────────────────────────────────────────────────────────────
	_crop("banana", "Banana", "Banana", Cat.fruits, "Banana plantation (1st year)", (0.5, 1.1, 1.0), 4.0, (120, 90, 120, 60)),
	_crop("citrus", "Citrus (Orange)", "Laranja", Cat.fruits, "Orange trees with 70% canopy", (0.7, 0.65, 0.7), 4.0, (60, 90, 120, 95)),
	_crop("mango", "Mango", "Manga", Cat.fruits, "Mango orchard", (0.75, 0.8, 0.75), 5.0, (90, 90, 120, 60)),
	# ── Vegetables ──────────────────────────────────────────────────────────
	_crop("tomato", "Tomato", "Tomate", Cat.vegetables, "Fresh market tomato", (0.6, 1.15, 0.7), 0.6, (30, 40, 50, 30)),
	_crop("potato", "Potato", "Batata", Cat.vegetables, "Potato cultivation", (0.5, 1.15, 0.75), 0.6, (25, 30, 45, 30)),
	_crop("onion-dry", "Onion (Dry)", "Cebola", Cat.vegetables, "Dry bulb onion", (0.7, 1.05, 0.75), 0.4, (15, 25, 70, 40)),
	_crop("cassava", "Cassava (Manioc)", "Mandioca", Cat.vegetables, "Cassava root crop (1st year)", (0.3, 0.8, 0.3), 1.0, (20, 40, 90, 60)),
)

_CROPS_BY_ID = MappingProxyType({crop.id: crop for crop in CROPS})


def get_crop_by_id(crop_id: str) -> CropRecord | None:
	"""Exact-match lookup; ``None`` when the id is not in the catalog."""
	return _CROPS_BY_ID.get(crop_id)


def get_crops_by_category(category: Cat | str) -> list[CropRecord]:
	"""Crops in ``category``, in catalog order. Unknown labels give ``[]``."""
	return [crop for crop in CROPS if crop.category == category]


def get_all_categories() -> list[Cat]:
	"""Every declared category, in declaration order, whether or not it has crops."""
	return list(Cat)
