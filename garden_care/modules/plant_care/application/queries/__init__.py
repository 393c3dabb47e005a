"""
Plant Care Queries

Read operations of the plant care module:
- CheckPlantTypeQuery: merge candidate lookup
- InferGrowthStageQuery: seasonal growth stage
- ResolveClimateZoneQuery: location to climate zone
- IdentifyPlantQuery: free-text plant identification
"""

from .check_plant_type import CheckPlantTypeQuery
from .identify_plant import IdentifyPlantQuery
from .infer_growth_stage import InferGrowthStageQuery
from .resolve_climate_zone import ResolveClimateZoneQuery

__all__ = [
    "CheckPlantTypeQuery",
    "IdentifyPlantQuery",
    "InferGrowthStageQuery",
    "ResolveClimateZoneQuery",
]
