# 📄 File: garden_care/modules/plant_care/domain/services/type_identity_resolver.py
# 🧭 Purpose (Layman Explanation):
# When a gardener adds a plant, checks whether they already own plants of that exact type (for
# example "Rose / Climbing Rose") and lists the varieties they have, so the app can offer to
# group the new plant with them.
# 🧪 Purpose (Technical Summary):
# Read-only identity lookup: exact match on (top_level, middle_level), then the owner's linked
# plant instances' distinct non-empty cultivar names. Does not create or enforce uniqueness.
# 🔗 Dependencies:
# plant_type_repository.py, plant_repository.py, validators, helpers
# 🔄 Connected Modules / Calls From:
# query_handlers.py (CheckPlantTypeQuery), dependencies.py

import logging

from garden_care.shared.utils.helpers import deduplicate_list
from garden_care.shared.utils.validators import require_text
from ..models.plant_type import IdentityResolution
from ..repositories.plant_repository import PlantRepository
from ..repositories.plant_type_repository import PlantTypeRepository

logger = logging.getLogger(__name__)


class TypeIdentityResolver:
    """
    Resolves whether a plant type pair already has a canonical record the
    owner's plants are linked to.

    A record with no plants linked for the owner resolves to exists=False:
    there is nothing of theirs to merge with.
    """

    def __init__(
        self,
        plant_type_repository: PlantTypeRepository,
        plant_repository: PlantRepository
    ):
        self.plant_type_repository = plant_type_repository
        self.plant_repository = plant_repository

    async def resolve(self, top_level: str, middle_level: str, owner_id: str) -> IdentityResolution:
        """
        Resolve a (top_level, middle_level) pair for an owner.

        Args:
            top_level: Broad plant type (e.g. "Rose")
            middle_level: Sub-type (e.g. "Climbing Rose")
            owner_id: Gardener whose plants are considered

        Returns:
            IdentityResolution with the record ID and existing cultivar names
            (distinct, non-empty, first-seen order) when found

        Raises:
            ValidationError: If any argument is blank
        """
        top_level = require_text(top_level, "top_level")
        middle_level = require_text(middle_level, "middle_level")
        owner_id = require_text(owner_id, "owner_id")

        plant_type = await self.plant_type_repository.get_by_identity(top_level, middle_level)
        if plant_type is None:
            logger.debug(f"No plant type record for {top_level} / {middle_level}")
            return IdentityResolution.not_found()

        linked = await self.plant_repository.list_linked(owner_id, plant_type.plant_type_id)
        if not linked:
            return IdentityResolution.not_found()

        cultivar_names = deduplicate_list(
            plant.cultivar_name.strip()
            for plant in linked
            if plant.cultivar_name and plant.cultivar_name.strip()
        )

        logger.info(
            f"Plant type {plant_type.plant_type_id} already has {len(linked)} linked plant(s) "
            f"for owner {owner_id}"
        )
        return IdentityResolution(
            exists=True,
            plant_type_id=plant_type.plant_type_id,
            existing_cultivar_names=cultivar_names,
        )
