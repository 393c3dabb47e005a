# 📄 File: garden_care/modules/plant_care/domain/models/identification.py
# 🧭 Purpose (Layman Explanation):
# Describes the answer to "what plant is this name?": whether it was recognised, how sure we
# are, and the plant's details.
# 🧪 Purpose (Technical Summary):
# PlantIdentification response model returned by the content generator's identify call.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# identification_service.py, identification_cache.py, anthropic_generator.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IdentificationConfidence(str, Enum):
    VERIFIED = "verified"
    LIKELY = "likely"
    UNKNOWN = "unknown"


class IdentifiedPlant(BaseModel):
    common_name: str
    scientific_name: Optional[str] = None
    top_level: str
    middle_level: str
    cultivar_name: Optional[str] = None
    cycle: Optional[str] = None
    watering: Optional[str] = None
    sunlight: List[str] = Field(default_factory=list)
    growth_habit: List[str] = Field(default_factory=list)


class PlantIdentification(BaseModel):
    """Result of identifying a free-text plant query."""
    model_config = ConfigDict(use_enum_values=True)

    identified: bool
    confidence: IdentificationConfidence = IdentificationConfidence.UNKNOWN
    plant: Optional[IdentifiedPlant] = None
    reason: Optional[str] = None

    @classmethod
    def unknown(cls, reason: str) -> "PlantIdentification":
        return cls(identified=False, confidence=IdentificationConfidence.UNKNOWN, reason=reason)
