# 📄 File: garden_care/modules/plant_care/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving a gardener's individual plants and listing which of them
# belong to a given plant type.
# 🧪 Purpose (Technical Summary):
# Repository interface for Plant (plant instance) records.
# 🔗 Dependencies:
# Domain models (Plant), typing, abc
# 🔄 Connected Modules / Calls From:
# type_identity_resolver.py, plant_registration_service.py, plant_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant import Plant


class PlantRepository(ABC):
    """Repository interface for a user's individual plants."""

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        """
        Store a new plant.

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        """Get a plant by ID."""
        pass

    @abstractmethod
    async def list_linked(self, owner_id: str, plant_type_id: str) -> List[Plant]:
        """
        List the owner's plants linked to a plant type, oldest first.
        """
        pass
