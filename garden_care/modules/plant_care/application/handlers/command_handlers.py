# 📄 File: garden_care/modules/plant_care/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "action processors" for plant care: getting care guides (from memory or freshly written)
# and adding plants to a gardener's collection.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers delegating to the domain services. Handlers are constructor-injected and
# return plain dicts; domain exceptions propagate unchanged.
#
# 🔗 Dependencies:
# - garden_care.modules.plant_care.application.commands
# - garden_care.modules.plant_care.domain.services
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.dependencies (handler construction)
# - An outer HTTP layer

__all__ = [
    "GenerateCareProfileCommandHandler",
    "GenerateTypeProfileCommandHandler",
    "RegisterPlantCommandHandler",
]

from typing import Any, Dict

from garden_care.modules.plant_care.application.commands.generate_care_profile import GenerateCareProfileCommand
from garden_care.modules.plant_care.application.commands.generate_type_profile import GenerateTypeProfileCommand
from garden_care.modules.plant_care.application.commands.register_plant import RegisterPlantCommand
from garden_care.modules.plant_care.domain.services.plant_registration_service import PlantRegistrationService
from garden_care.modules.plant_care.domain.services.profile_generation_service import (
    ProfileGenerationOrchestrator,
)
from garden_care.shared.core.exceptions import GardenCareException
from garden_care.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)


class GenerateCareProfileCommandHandler:
    """
    Handles the per-request care profile command.
    """

    def __init__(self, orchestrator: ProfileGenerationOrchestrator):
        self._orchestrator = orchestrator

    async def handle(self, command: GenerateCareProfileCommand) -> Dict[str, Any]:
        try:
            profile = await self._orchestrator.get_or_generate_profile(
                command.plant_name,
                command.context,
                top_level_hint=command.top_level_hint,
            )
            return {"care_profile": profile.model_dump(mode="json")}

        except GardenCareException:
            raise
        except Exception as e:
            logger.error(f"Unexpected error generating care profile for {command.plant_name}: {e}")
            raise


class GenerateTypeProfileCommandHandler:
    """
    Handles the plant type care profile command.
    """

    def __init__(self, orchestrator: ProfileGenerationOrchestrator):
        self._orchestrator = orchestrator

    async def handle(self, command: GenerateTypeProfileCommand) -> Dict[str, Any]:
        result = await self._orchestrator.get_or_generate_type_profile(
            command.top_level,
            command.middle_level,
            command.context,
            growth_habit=command.growth_habit or None,
        )
        return {
            "plant_type_id": result.plant_type.plant_type_id if result.plant_type else None,
            "care_profile": result.care_profile.model_dump(mode="json"),
            "reused": result.reused,
        }


class RegisterPlantCommandHandler:
    """
    Handles plant registration: linked (merged) or separate entries.
    """

    def __init__(self, registration_service: PlantRegistrationService):
        self._registration_service = registration_service

    async def handle(self, command: RegisterPlantCommand) -> Dict[str, Any]:
        with log_context(owner_id=command.owner_id):
            logger.info(f"Registering plant '{command.name}'", link_to_type=command.link_to_type)
            plant = await self._registration_service.register_plant(
                owner_id=command.owner_id,
                name=command.name,
                top_level=command.top_level,
                middle_level=command.middle_level,
                cultivar_name=command.cultivar_name,
                link_to_type=command.link_to_type,
                growth_habit=command.growth_habit,
                planted_in=command.planted_in,
                area=command.area,
                growth_stage=command.growth_stage,
            )
        return {
            "plant_id": plant.plant_id,
            "plant_type_id": plant.plant_type_id,
            "linked": plant.is_linked,
            "plant": plant.model_dump(mode="json"),
        }
