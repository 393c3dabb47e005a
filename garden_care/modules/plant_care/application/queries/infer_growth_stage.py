# 📄 File: garden_care/modules/plant_care/application/queries/infer_growth_stage.py
# 🧭 Purpose (Layman Explanation):
# Asks "what is this plant probably doing this month?", unless the gardener has told us
# themselves.
#
# 🧪 Purpose (Technical Summary):
# CQRS query for seasonal growth stage inference with an optional manual override.
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.application.handlers.query_handlers

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from garden_care.modules.plant_care.domain.models.growth_stage import LifeStage, SeasonalState


class InferGrowthStageQuery(BaseModel):
    """Query for a plant's likely growth stage in a month."""
    model_config = ConfigDict(use_enum_values=True)

    top_level: Optional[str] = None
    middle_level: Optional[str] = None
    month: Optional[int] = Field(default=None, description="1-12; None means the current month")
    life_stage: Optional[LifeStage] = Field(default=None, description="Gardener's override")
    seasonal_state: Optional[SeasonalState] = None
