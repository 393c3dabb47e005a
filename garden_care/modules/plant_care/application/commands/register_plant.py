# 📄 File: garden_care/modules/plant_care/application/commands/register_plant.py
# 🧭 Purpose (Layman Explanation):
# The "add this plant to my garden" request, including whether it should share the care guide
# of an existing plant type or be kept as its own entry.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for plant instance registration with optional plant type linking.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.application.handlers.command_handlers

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from garden_care.modules.plant_care.domain.models.care_profile import PlantedIn
from garden_care.modules.plant_care.domain.models.growth_stage import GrowthStage


class RegisterPlantCommand(BaseModel):
    """
    Command for registering a gardener's plant.

    With link_to_type the plant joins the shared (top_level, middle_level)
    record, which is created on first use.
    """
    model_config = ConfigDict(use_enum_values=True)

    owner_id: str = Field(..., description="Gardener ID")
    name: str = Field(..., description="Display name", examples=["Front door rose"])
    top_level: Optional[str] = Field(default=None, examples=["Rose"])
    middle_level: Optional[str] = Field(default=None, examples=["Climbing Rose"])
    cultivar_name: Optional[str] = Field(default=None, examples=["Gertrude Jekyll"])
    link_to_type: bool = Field(default=True, description="Merge into the shared plant type record")
    growth_habit: List[str] = Field(default_factory=list)
    planted_in: Optional[PlantedIn] = None
    area: Optional[str] = None
    growth_stage: Optional[GrowthStage] = None
