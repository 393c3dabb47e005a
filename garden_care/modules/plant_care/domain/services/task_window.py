# 📄 File: garden_care/modules/plant_care/domain/services/task_window.py
# 🧭 Purpose (Layman Explanation):
# Decides whether a care job belongs to a given month, including jobs like "Nov to Feb" that run
# over New Year, and gathers the everyday routines (watering, pest checks) for the month.
# 🧪 Purpose (Technical Summary):
# Month-window rule for routine task scheduling (with year wraparound) and the monthly routine
# grouping across a collection of plants' care profiles.
# 🔗 Dependencies:
# care_profile.py, plant.py, pydantic
# 🔄 Connected Modules / Calls From:
# query_handlers.py, garden_care.modules.plant_care (public API)

from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..models.care_profile import CareProfile, TaskCategory, month_in_window
from ..models.plant import Plant

ROUTINE_CATEGORIES: Tuple[TaskCategory, ...] = (TaskCategory.WATERING, TaskCategory.PEST_CONTROL)

ROUTINE_HINTS: Dict[str, str] = {
    TaskCategory.WATERING.value: "Check every few days",
    TaskCategory.PEST_CONTROL.value: "Weekly inspection",
}
DEFAULT_ROUTINE_HINT = "Regular care"


def is_task_in_window(month_start: int, month_end: int, month: int) -> bool:
    """
    True when month lies in [month_start, month_end] inclusive.

    A window with month_start > month_end spans the year boundary
    (e.g. 11..2 covers Nov, Dec, Jan, Feb).
    """
    return month_in_window(month_start, month_end, month)


def months_in_window(month_start: int, month_end: int) -> List[int]:
    """List the months covered by a window, in calendar order from month_start."""
    if month_start <= month_end:
        return list(range(month_start, month_end + 1))
    return list(range(month_start, 13)) + list(range(1, month_end + 1))


def get_routine_hint(category: str) -> str:
    return ROUTINE_HINTS.get(category, DEFAULT_ROUTINE_HINT)


class RoutinePlant(BaseModel):
    plant_id: str
    name: str


class RoutineGroup(BaseModel):
    """Plants needing one kind of routine care in a month."""
    category: str
    plants: List[RoutinePlant] = Field(default_factory=list)
    hint: str


def collect_routines(
    plants: Iterable[Tuple[Plant, Optional[CareProfile]]],
    month: int
) -> List[RoutineGroup]:
    """
    Group in-window routine tasks (watering, then pest control) by category.

    Args:
        plants: (plant, effective care profile) pairs; the profile is the
            plant's own or its plant type's, and may be None
        month: Month being viewed (1-12)

    Returns:
        One group per routine category with at least one plant; each plant
        is listed once per category, in first-seen order
    """
    routine_map: Dict[str, Dict[str, str]] = {}

    for plant, profile in plants:
        if profile is None:
            continue
        for task in profile.tasks:
            if task.category not in {c.value for c in ROUTINE_CATEGORIES}:
                continue
            if not is_task_in_window(task.month_start, task.month_end, month):
                continue
            routine_map.setdefault(task.category, {})[plant.plant_id] = plant.name

    groups: List[RoutineGroup] = []
    for category in ROUTINE_CATEGORIES:
        plant_map = routine_map.get(category.value)
        if plant_map:
            groups.append(RoutineGroup(
                category=category.value,
                plants=[RoutinePlant(plant_id=pid, name=name) for pid, name in plant_map.items()],
                hint=get_routine_hint(category.value),
            ))

    return groups
