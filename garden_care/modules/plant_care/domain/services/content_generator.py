# 📄 File: garden_care/modules/plant_care/domain/services/content_generator.py
# 🧭 Purpose (Layman Explanation):
# Describes what the core expects from the AI service: write a care guide for a plant, and say
# what plant a typed name refers to.
# 🧪 Purpose (Technical Summary):
# Abstract external content generator collaborator. Implementations raise GenerationError on
# any failure or malformed output.
# 🔗 Dependencies:
# abc, domain models
# 🔄 Connected Modules / Calls From:
# profile_generation_service.py, identification_service.py, anthropic_generator.py

from abc import ABC, abstractmethod
from typing import Optional

from ..models.care_profile import CareProfile
from ..models.identification import PlantIdentification
from ..models.plant import GenerationContext


class ContentGenerator(ABC):
    """External generative content provider."""

    provider_name: str = "generator"

    @abstractmethod
    async def generate_care_profile(
        self,
        plant_name: str,
        context: GenerationContext,
        top_level: Optional[str] = None
    ) -> CareProfile:
        """
        Generate a structured care profile.

        Args:
            plant_name: Normalized plant name (or middle level of a plant type)
            context: Planting context shaping the prompt
            top_level: Optional broad type hint (e.g. "Rose")

        Raises:
            GenerationError: On provider failure or unparseable output
        """
        pass

    @abstractmethod
    async def identify_plant(self, query: str) -> PlantIdentification:
        """
        Identify the plant a free-text query refers to.

        Raises:
            GenerationError: On provider failure or unparseable output
        """
        pass
