# 📄 File: garden_care/modules/plant_care/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "question answerers" for plant care: do I already grow this type, what is my plant doing
# this month, which climate zone am I in, and which plant is this search phrase about.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers over the resolver, inferer and identification services. Read-only apart from
# the identification cache.
#
# 🔗 Dependencies:
# - garden_care.modules.plant_care.application.queries
# - garden_care.modules.plant_care.domain.services
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.dependencies (handler construction)
# - An outer HTTP layer

__all__ = [
    "CheckPlantTypeQueryHandler",
    "InferGrowthStageQueryHandler",
    "ResolveClimateZoneQueryHandler",
    "IdentifyPlantQueryHandler",
]

from datetime import date
from typing import Any, Callable, Dict, Optional

from garden_care.modules.plant_care.application.queries.check_plant_type import CheckPlantTypeQuery
from garden_care.modules.plant_care.application.queries.identify_plant import IdentifyPlantQuery
from garden_care.modules.plant_care.application.queries.infer_growth_stage import InferGrowthStageQuery
from garden_care.modules.plant_care.application.queries.resolve_climate_zone import ResolveClimateZoneQuery
from garden_care.modules.plant_care.domain.services.climate_zone_resolver import describe_location
from garden_care.modules.plant_care.domain.services.growth_stage_inferer import (
    infer_growth_stage,
    map_override_to_growth_stage,
)
from garden_care.modules.plant_care.domain.services.identification_service import PlantIdentificationService
from garden_care.modules.plant_care.domain.services.type_identity_resolver import TypeIdentityResolver


class CheckPlantTypeQueryHandler:
    """Handles merge candidate lookups."""

    def __init__(self, resolver: TypeIdentityResolver):
        self._resolver = resolver

    async def handle(self, query: CheckPlantTypeQuery) -> Dict[str, Any]:
        resolution = await self._resolver.resolve(query.top_level, query.middle_level, query.owner_id)
        return resolution.model_dump()


class InferGrowthStageQueryHandler:
    """
    Handles growth stage queries.

    A gardener's override (life_stage, plus seasonal_state for established
    plants) takes precedence over the seasonal inference, which is still
    returned for display.
    """

    def __init__(self, today: Optional[Callable[[], date]] = None):
        self._today = today or date.today

    async def handle(self, query: InferGrowthStageQuery) -> Dict[str, Any]:
        inferred = infer_growth_stage(
            query.top_level,
            query.middle_level,
            query.month,
            today=self._today(),
        )

        if query.life_stage:
            growth_stage = map_override_to_growth_stage(query.life_stage, query.seasonal_state).value
            source = "override"
        else:
            growth_stage = inferred.stage
            source = "inferred"

        return {
            "growth_stage": growth_stage,
            "source": source,
            "inferred": inferred.model_dump(),
        }


class ResolveClimateZoneQueryHandler:
    """Handles location to climate zone lookups."""

    async def handle(self, query: ResolveClimateZoneQuery) -> Dict[str, Any]:
        return describe_location(query.location)


class IdentifyPlantQueryHandler:
    """Handles free-text plant identification."""

    def __init__(self, identification_service: PlantIdentificationService):
        self._identification_service = identification_service

    async def handle(self, query: IdentifyPlantQuery) -> Dict[str, Any]:
        result = await self._identification_service.identify(query.query)
        return result.model_dump()
