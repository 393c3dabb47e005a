# 📄 File: garden_care/modules/plant_care/application/queries/identify_plant.py
# 🧭 Purpose (Layman Explanation):
# Asks "which real plant is this search phrase about?".
#
# 🧪 Purpose (Technical Summary):
# CQRS query for free-text plant identification (cached in process).
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.application.handlers.query_handlers

from pydantic import BaseModel, Field


class IdentifyPlantQuery(BaseModel):
    """Query for identifying a plant from a search phrase."""

    query: str = Field(..., examples=["Percy Wiseman"])
