"""
Plant care domain models.
"""

from .cache_entry import CacheContext, CacheEntry
from .care_profile import (
    CareProfile,
    CareTask,
    EffortLevel,
    PlantedIn,
    RecurrenceType,
    TaskCategory,
    month_in_window,
)
from .climate_zone import (
    DEFAULT_CLIMATE_ZONE,
    ClimateZone,
    get_zone_description,
    get_zone_temperature_range,
)
from .growth_stage import (
    GrowthStage,
    GrowthStageResult,
    LifeStage,
    SeasonalPattern,
    SeasonalState,
)
from .identification import IdentificationConfidence, IdentifiedPlant, PlantIdentification
from .plant import GenerationContext, HealthStatus, Plant, PlantEnvironment, PlantState
from .plant_type import IdentityResolution, PlantType, PlantTypeIdentity

__all__ = [
    "CacheContext",
    "CacheEntry",
    "CareProfile",
    "CareTask",
    "EffortLevel",
    "PlantedIn",
    "RecurrenceType",
    "TaskCategory",
    "month_in_window",
    "DEFAULT_CLIMATE_ZONE",
    "ClimateZone",
    "get_zone_description",
    "get_zone_temperature_range",
    "GrowthStage",
    "GrowthStageResult",
    "LifeStage",
    "SeasonalPattern",
    "SeasonalState",
    "IdentificationConfidence",
    "IdentifiedPlant",
    "PlantIdentification",
    "GenerationContext",
    "HealthStatus",
    "Plant",
    "PlantEnvironment",
    "PlantState",
    "IdentityResolution",
    "PlantType",
    "PlantTypeIdentity",
]
