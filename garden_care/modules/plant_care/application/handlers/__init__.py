"""
Plant care command and query handlers.
"""

from .command_handlers import (
    GenerateCareProfileCommandHandler,
    GenerateTypeProfileCommandHandler,
    RegisterPlantCommandHandler,
)
from .query_handlers import (
    CheckPlantTypeQueryHandler,
    IdentifyPlantQueryHandler,
    InferGrowthStageQueryHandler,
    ResolveClimateZoneQueryHandler,
)

__all__ = [
    "GenerateCareProfileCommandHandler",
    "GenerateTypeProfileCommandHandler",
    "RegisterPlantCommandHandler",
    "CheckPlantTypeQueryHandler",
    "IdentifyPlantQueryHandler",
    "InferGrowthStageQueryHandler",
    "ResolveClimateZoneQueryHandler",
]
