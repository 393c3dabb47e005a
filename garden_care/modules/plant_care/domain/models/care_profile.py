# 📄 File: garden_care/modules/plant_care/domain/models/care_profile.py
# 🧭 Purpose (Layman Explanation):
# Describes a plant's care guide: its names, how hardy it is in the UK, and the seasonal jobs
# (pruning, feeding, watering...) with the months each job should be done in.
# 🧪 Purpose (Technical Summary):
# Pydantic models for the structured care profile payload returned by the content generator,
# including the year-wraparound task window rule.
# 🔗 Dependencies:
# pydantic, datetime, enum
# 🔄 Connected Modules / Calls From:
# profile_cache.py, profile_generation_service.py, anthropic_generator.py, task_window.py

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PlantedIn(str, Enum):
    """Where the plant is growing"""
    GROUND = "ground"
    POT = "pot"
    RAISED_BED = "raised_bed"


UNSPECIFIED_PLANTED_IN = "unspecified"


def coerce_unspecified_planted_in(value: Any) -> Any:
    """Map the "unspecified" member (or an empty string) to None."""
    if isinstance(value, str) and value.strip().lower() in ("", UNSPECIFIED_PLANTED_IN):
        return None
    return value


class TaskCategory(str, Enum):
    """Care task categories"""
    PRUNING = "pruning"
    FEEDING = "feeding"
    PEST_CONTROL = "pest_control"
    PLANTING = "planting"
    WATERING = "watering"
    HARVESTING = "harvesting"
    WINTER_CARE = "winter_care"
    GENERAL = "general"


class RecurrenceType(str, Enum):
    """How often a task repeats inside its month window"""
    ONCE_PER_WINDOW = "once_per_window"
    WEEKLY_IN_WINDOW = "weekly_in_window"
    MONTHLY_IN_WINDOW = "monthly_in_window"


class EffortLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def month_in_window(month_start: int, month_end: int, month: int) -> bool:
    """
    Check whether a month falls inside an inclusive [start, end] window.

    A window whose start is after its end wraps the year boundary,
    so (11, 2) covers November, December, January and February.
    """
    if month_start <= month_end:
        return month_start <= month <= month_end
    return month >= month_start or month <= month_end


class CareTask(BaseModel):
    """A single seasonal care task inside a care profile."""
    model_config = ConfigDict(use_enum_values=True)

    key: str
    title: str
    category: TaskCategory
    month_start: int = Field(..., ge=1, le=12)
    month_end: int = Field(..., ge=1, le=12)
    recurrence_type: RecurrenceType
    effort_level: EffortLevel
    why_this_matters: str
    how_to: str

    def is_in_window(self, month: int) -> bool:
        """True when the task should be done in the given month."""
        return month_in_window(self.month_start, self.month_end, month)


class CareProfile(BaseModel):
    """
    Structured, AI-generated seasonal task calendar for a plant type.

    Stored verbatim in the profile cache and on plant type records;
    round-trips through ``model_dump(mode="json")`` unchanged.
    """
    model_config = ConfigDict(use_enum_values=True)

    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    common_name: str
    species: Optional[str] = None
    plant_type: str
    summary: str
    uk_hardiness: str
    tasks: List[CareTask] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)

    def tasks_in_window(self, month: int) -> List[CareTask]:
        """Tasks whose month window contains the given month."""
        return [task for task in self.tasks if task.is_in_window(month)]
