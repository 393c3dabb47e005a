# 📄 File: garden_care/modules/plant_care/application/commands/generate_type_profile.py
# 🧭 Purpose (Layman Explanation):
# The "get the shared care guide for this kind of plant" request, e.g. every Climbing Rose a
# gardener owns shares one guide.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for the plant-type care profile flow (reuse stored profile, else generate and upsert).
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.application.handlers.command_handlers

from typing import List, Optional

from pydantic import BaseModel, Field

from garden_care.modules.plant_care.domain.models.plant import GenerationContext


class GenerateTypeProfileCommand(BaseModel):
    """Command for getting (or generating) the shared profile of a plant type."""

    top_level: str = Field(..., description="Broad plant type", examples=["Rose"])
    middle_level: str = Field(..., description="Plant sub-type", examples=["Climbing Rose"])
    context: Optional[GenerationContext] = Field(
        default=None,
        description="Planting context; a plant_state forces state-specific regeneration"
    )
    growth_habit: List[str] = Field(default_factory=list, description="Growth habit tags")
