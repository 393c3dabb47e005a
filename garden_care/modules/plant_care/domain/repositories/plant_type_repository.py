# 📄 File: garden_care/modules/plant_care/domain/repositories/plant_type_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for finding and saving canonical plant types (like "Rose / Climbing Rose")
# and their shared care guides.
# 🧪 Purpose (Technical Summary):
# Repository interface for PlantType records keyed by the (top_level, middle_level) natural key.
# Record creation is only exposed as atomic conflict-aware operations.
# 🔗 Dependencies:
# Domain models (PlantType, CareProfile), typing, abc
# 🔄 Connected Modules / Calls From:
# type_identity_resolver.py, plant_registration_service.py, profile_generation_service.py,
# plant_type_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.care_profile import CareProfile
from ..models.plant_type import PlantType


class PlantTypeRepository(ABC):
    """
    Repository interface for canonical plant type records.

    Implementation Notes:
    - (top_level, middle_level) is unique; enforced by the store at write time
    - There is no plain "create": inserts are insert-or-fetch or upsert so that
      two concurrent callers never produce duplicate records
    - Records are never deleted
    """

    @abstractmethod
    async def get_by_identity(self, top_level: str, middle_level: str) -> Optional[PlantType]:
        """
        Get a plant type by exact match on both levels.

        Returns:
            PlantType if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_id(self, plant_type_id: str) -> Optional[PlantType]:
        """Get a plant type by ID."""
        pass

    @abstractmethod
    async def get_or_create(
        self,
        top_level: str,
        middle_level: str,
        growth_habit: Optional[List[str]] = None
    ) -> PlantType:
        """
        Atomically insert a record for the pair or fetch the existing one.

        An existing record is returned unchanged (its growth habit and
        care profile are kept).
        """
        pass

    @abstractmethod
    async def upsert_profile(
        self,
        top_level: str,
        middle_level: str,
        care_profile: CareProfile,
        growth_habit: Optional[List[str]] = None
    ) -> PlantType:
        """
        Insert a record carrying the profile, or update the existing record's
        profile (and growth habit, when given) on conflict.
        """
        pass
