# 📄 File: garden_care/modules/plant_care/application/queries/resolve_climate_zone.py
# 🧭 Purpose (Layman Explanation):
# Asks "which UK climate zone is this town or region in?".
#
# 🧪 Purpose (Technical Summary):
# CQRS query for location to climate zone resolution.
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.application.handlers.query_handlers

from typing import Optional

from pydantic import BaseModel, Field


class ResolveClimateZoneQuery(BaseModel):
    """Query for the climate zone of a free-text UK location."""

    location: Optional[str] = Field(default=None, examples=["Edinburgh", "Cornwall"])
