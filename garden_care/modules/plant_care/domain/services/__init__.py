"""
Plant care domain services.
"""

from .cache_key import derive_cache_key
from .climate_zone_resolver import describe_location, resolve_climate_zone
from .content_generator import ContentGenerator
from .growth_stage_inferer import (
    infer_growth_stage,
    map_override_to_growth_stage,
    resolve_plant_category,
)
from .identification_service import PlantIdentificationService
from .name_normalizer import AliasRule, NameNormalizer, normalize_plant_name
from .plant_registration_service import PlantRegistrationService
from .profile_cache import ProfileCache
from .profile_generation_service import ProfileGenerationOrchestrator, TypeProfileResult
from .task_window import RoutineGroup, collect_routines, is_task_in_window, months_in_window
from .type_identity_resolver import TypeIdentityResolver

__all__ = [
    "derive_cache_key",
    "describe_location",
    "resolve_climate_zone",
    "ContentGenerator",
    "infer_growth_stage",
    "map_override_to_growth_stage",
    "resolve_plant_category",
    "PlantIdentificationService",
    "AliasRule",
    "NameNormalizer",
    "normalize_plant_name",
    "PlantRegistrationService",
    "ProfileCache",
    "ProfileGenerationOrchestrator",
    "TypeProfileResult",
    "RoutineGroup",
    "collect_routines",
    "is_task_in_window",
    "months_in_window",
    "TypeIdentityResolver",
]
