# 📄 File: garden_care/modules/plant_care/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Describes a gardener's own individual plant (its nickname, cultivar, where it is planted) and
# the extra details we pass to the AI when asking for a care guide.
# 🧪 Purpose (Technical Summary):
# Plant (plant instance) model, PlantState supplement and the GenerationContext passed to the
# content generator and the orchestrator.
# 🔗 Dependencies:
# pydantic, care_profile.py, growth_stage.py
# 🔄 Connected Modules / Calls From:
# plant_registration_service.py, profile_generation_service.py, prompts.py,
# plant_repository_impl.py

from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .care_profile import PlantedIn, coerce_unspecified_planted_in
from .climate_zone import coerce_default_zone
from .growth_stage import GrowthStage


class PlantEnvironment(str, Enum):
    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    GREENHOUSE = "greenhouse"
    COLD_FRAME = "cold_frame"


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    STRUGGLING = "struggling"
    DISEASED = "diseased"
    RECOVERING = "recovering"


class PlantState(BaseModel):
    """Current state of an individual plant, used to tailor a regenerated care profile."""
    model_config = ConfigDict(use_enum_values=True)

    growth_stage: GrowthStage
    environment: PlantEnvironment = PlantEnvironment.OUTDOOR
    health_status: HealthStatus = HealthStatus.HEALTHY
    health_notes: Optional[str] = None
    date_planted: Optional[date] = None


class GenerationContext(BaseModel):
    """
    Context for generating a care profile.

    Only planted_in and climate_zone take part in the cache key; the rest
    shapes the prompt.
    """
    model_config = ConfigDict(use_enum_values=True)

    planted_in: Optional[PlantedIn] = None
    area: Optional[str] = None
    location: Optional[str] = None
    climate_zone: Optional[int] = None
    current_month: Optional[int] = None
    plant_state: Optional[PlantState] = None

    @field_validator("planted_in", mode="before")
    @classmethod
    def _unspecified_planted_in(cls, value):
        return coerce_unspecified_planted_in(value)

    @field_validator("climate_zone", mode="before")
    @classmethod
    def _default_zone(cls, value):
        return coerce_default_zone(value)


class Plant(BaseModel):
    """A user's individual plant, optionally linked to a canonical plant type."""
    model_config = ConfigDict(use_enum_values=True)

    plant_id: str
    owner_id: str
    name: str
    cultivar_name: Optional[str] = None
    plant_type_id: Optional[str] = None
    planted_in: Optional[PlantedIn] = None
    area: Optional[str] = None
    growth_stage: Optional[GrowthStage] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_linked(self) -> bool:
        return self.plant_type_id is not None
