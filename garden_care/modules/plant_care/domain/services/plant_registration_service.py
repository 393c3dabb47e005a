# 📄 File: garden_care/modules/plant_care/domain/services/plant_registration_service.py
# 🧭 Purpose (Layman Explanation):
# Adds a gardener's plant, either grouped under a shared plant type (sharing its care guide) or
# as a stand-alone entry, and stops them adding two unnamed plants of the same type.
# 🧪 Purpose (Technical Summary):
# The single place plant type records are created, through the repository's atomic
# insert-or-fetch; stores the plant instance linked or unlinked.
# 🔗 Dependencies:
# plant_type_repository.py, plant_repository.py, validators, helpers
# 🔄 Connected Modules / Calls From:
# command_handlers.py (RegisterPlantCommand), dependencies.py

import logging
from typing import List, Optional

from garden_care.shared.core.exceptions import ValidationError
from garden_care.shared.utils.helpers import generate_uuid, is_empty_or_whitespace
from garden_care.shared.utils.validators import require_text
from ..models.care_profile import PlantedIn
from ..models.growth_stage import GrowthStage
from ..models.plant import Plant
from ..repositories.plant_repository import PlantRepository
from ..repositories.plant_type_repository import PlantTypeRepository

logger = logging.getLogger(__name__)


class PlantRegistrationService:
    """
    Registers plant instances.

    Linking goes through PlantTypeRepository.get_or_create, which is a
    single conflict-aware insert-or-fetch; there is no separate
    check-then-insert here.
    """

    def __init__(
        self,
        plant_type_repository: PlantTypeRepository,
        plant_repository: PlantRepository
    ):
        self.plant_type_repository = plant_type_repository
        self.plant_repository = plant_repository

    async def register_plant(
        self,
        owner_id: str,
        name: str,
        top_level: Optional[str] = None,
        middle_level: Optional[str] = None,
        cultivar_name: Optional[str] = None,
        link_to_type: bool = True,
        growth_habit: Optional[List[str]] = None,
        planted_in: Optional[PlantedIn] = None,
        area: Optional[str] = None,
        growth_stage: Optional[GrowthStage] = None
    ) -> Plant:
        """
        Register a plant for an owner.

        Args:
            owner_id: Gardener ID
            name: Display name of the plant
            top_level / middle_level: Plant type pair; required when linking
            cultivar_name: Named variety, if any
            link_to_type: Link to the shared plant type record (merge) or
                store the plant unlinked (separate entry)
            growth_habit: Tags stored on a newly created plant type record

        Returns:
            The stored Plant

        Raises:
            ValidationError: On missing fields, or a second unnamed plant of
                the same type for the owner
        """
        owner_id = require_text(owner_id, "owner_id")
        name = require_text(name, "name")
        cultivar = None if is_empty_or_whitespace(cultivar_name) else cultivar_name.strip()

        plant_type_id = None
        if link_to_type:
            top_level = require_text(top_level, "top_level")
            middle_level = require_text(middle_level, "middle_level")

            plant_type = await self.plant_type_repository.get_or_create(
                top_level, middle_level, growth_habit=growth_habit
            )
            plant_type_id = plant_type.plant_type_id

            if cultivar is None:
                await self._ensure_single_generic_entry(owner_id, plant_type_id)

        plant = Plant(
            plant_id=generate_uuid(),
            owner_id=owner_id,
            name=name,
            cultivar_name=cultivar,
            plant_type_id=plant_type_id,
            planted_in=planted_in,
            area=area,
            growth_stage=growth_stage,
        )
        created = await self.plant_repository.create(plant)

        logger.info(
            f"Registered plant {created.plant_id} for owner {owner_id} "
            f"({'linked to ' + plant_type_id if plant_type_id else 'unlinked'})"
        )
        return created

    async def _ensure_single_generic_entry(self, owner_id: str, plant_type_id: str) -> None:
        linked = await self.plant_repository.list_linked(owner_id, plant_type_id)
        if any(is_empty_or_whitespace(p.cultivar_name) for p in linked):
            raise ValidationError(
                "You already have a generic entry for this plant type. "
                "Add a cultivar name to distinguish this plant.",
                field="cultivar_name",
                constraint="one_generic_entry_per_type",
            )
