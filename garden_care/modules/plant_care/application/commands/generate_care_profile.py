# 📄 File: garden_care/modules/plant_care/application/commands/generate_care_profile.py
# 🧭 Purpose (Layman Explanation):
# The "get me a care guide for this plant" request: the plant name as typed plus where and how
# it is planted.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for the per-request care profile flow (cache lookup, generate on miss).
#
# 🔗 Dependencies:
# - pydantic
# - garden_care.modules.plant_care.domain.models.plant (GenerationContext)
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.application.handlers.command_handlers

from typing import Optional

from pydantic import BaseModel, Field

from garden_care.modules.plant_care.domain.models.plant import GenerationContext


class GenerateCareProfileCommand(BaseModel):
    """Command for getting (or generating) the care profile of a named plant."""

    plant_name: str = Field(
        ...,
        description="Plant name as typed by the user",
        examples=["Lavender 'Hidcote'"]
    )
    context: GenerationContext = Field(
        default_factory=GenerationContext,
        description="Planting context; planted_in and climate_zone select the cache entry"
    )
    top_level_hint: Optional[str] = Field(
        default=None,
        description="Broad plant type passed to the generator",
        examples=["Lavender"]
    )
