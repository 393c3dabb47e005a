# 📄 File: garden_care/modules/plant_care/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant care module: care guides, plant types, growth stages and climate zones.
#
# 🧪 Purpose (Technical Summary):
# Re-exports the pure domain functions most callers need.

"""
Plant Care Module
"""

from garden_care.modules.plant_care.domain.services.cache_key import derive_cache_key
from garden_care.modules.plant_care.domain.services.climate_zone_resolver import (
    describe_location,
    resolve_climate_zone,
)
from garden_care.modules.plant_care.domain.services.growth_stage_inferer import (
    infer_growth_stage,
    map_override_to_growth_stage,
)
from garden_care.modules.plant_care.domain.services.name_normalizer import normalize_plant_name
from garden_care.modules.plant_care.domain.services.task_window import (
    collect_routines,
    is_task_in_window,
    months_in_window,
)

__all__ = [
    "derive_cache_key",
    "describe_location",
    "resolve_climate_zone",
    "infer_growth_stage",
    "map_override_to_growth_stage",
    "normalize_plant_name",
    "collect_routines",
    "is_task_in_window",
    "months_in_window",
]
