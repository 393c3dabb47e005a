# 📄 File: garden_care/modules/plant_care/application/queries/check_plant_type.py
# 🧭 Purpose (Layman Explanation):
# Asks "do I already grow this kind of plant?" so the app can offer to group a new plant with
# the ones the gardener already has.
#
# 🧪 Purpose (Technical Summary):
# CQRS query for plant type identity resolution (merge candidate lookup).
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.application.handlers.query_handlers

from pydantic import BaseModel, Field


class CheckPlantTypeQuery(BaseModel):
    """Query for whether an owner already has plants of a (top_level, middle_level) type."""

    top_level: str = Field(..., examples=["Rose"])
    middle_level: str = Field(..., examples=["Climbing Rose"])
    owner_id: str
