# 📄 File: garden_care/modules/plant_care/domain/models/growth_stage.py
# 🧭 Purpose (Layman Explanation):
# Names the stages of a plant's life and year (seed, seedling, young, mature, dormant, in flower,
# fruiting) and the answer we give when guessing what a plant is doing this month.
# 🧪 Purpose (Technical Summary):
# GrowthStage enum, the user override enums, SeasonalPattern and GrowthStageResult models.
# 🔗 Dependencies:
# pydantic, enum
# 🔄 Connected Modules / Calls From:
# growth_stage_inferer.py, plant.py, query_handlers.py

from enum import Enum
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict


class GrowthStage(str, Enum):
    """Growth stage of an individual plant"""
    SEED = "seed"
    SEEDLING = "seedling"
    JUVENILE = "juvenile"
    MATURE = "mature"
    DORMANT = "dormant"
    FLOWERING = "flowering"
    FRUITING = "fruiting"


class LifeStage(str, Enum):
    """Life stage a gardener picks when overriding the inferred stage"""
    SEED = "seed"
    SEEDLING = "seedling"
    YOUNG = "young"
    ESTABLISHED = "established"


class SeasonalState(str, Enum):
    """Seasonal state a gardener picks for an established plant"""
    GROWING = "growing"
    FLOWERING = "flowering"
    FRUITING = "fruiting"
    DORMANT = "dormant"


class SeasonalPattern(BaseModel):
    """Months (1-12) in which a plant category is dormant, in flower or fruiting; sets may overlap."""
    model_config = ConfigDict(frozen=True)

    dormant: FrozenSet[int] = frozenset()
    flowering: FrozenSet[int] = frozenset()
    fruiting: FrozenSet[int] = frozenset()


class GrowthStageResult(BaseModel):
    """Inferred seasonal stage with a human-readable explanation."""
    model_config = ConfigDict(use_enum_values=True)

    stage: GrowthStage
    label: str
    explanation: str
    category: str
    month: int
