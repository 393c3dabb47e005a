"""Tests for care task windows and monthly routines."""

import pytest

from garden_care.modules.plant_care.domain.models.care_profile import CareProfile
from garden_care.modules.plant_care.domain.models.plant import Plant
from garden_care.modules.plant_care.domain.services.task_window import (
    collect_routines,
    is_task_in_window,
    months_in_window,
)

from conftest import make_profile_data


@pytest.mark.parametrize(
    "start, end, month, expected",
    [
        (3, 5, 3, True),
        (3, 5, 5, True),
        (3, 5, 6, False),
        (11, 2, 11, True),
        (11, 2, 1, True),
        (11, 2, 2, True),
        (11, 2, 3, False),
        (11, 2, 10, False),
        (7, 7, 7, True),
    ],
)
def test_is_task_in_window(start, end, month, expected):
    assert is_task_in_window(start, end, month) is expected


def test_months_in_window():
    assert months_in_window(3, 5) == [3, 4, 5]
    assert months_in_window(11, 2) == [11, 12, 1, 2]


def test_profile_tasks_in_window(sample_profile):
    assert [t.key for t in sample_profile.tasks_in_window(1)] == ["prune_winter"]
    assert [t.key for t in sample_profile.tasks_in_window(7)] == ["water_summer"]


def _plant(plant_id, name):
    return Plant(plant_id=plant_id, owner_id="owner-1", name=name)


def test_collect_routines_groups_by_category():
    pest_task = {
        "key": "aphids",
        "title": "Check for aphids",
        "category": "pest_control",
        "month_start": 4,
        "month_end": 8,
        "recurrence_type": "weekly_in_window",
        "effort_level": "low",
        "why_this_matters": "Aphids weaken new growth.",
        "how_to": "Squash or spray.",
    }
    rose = CareProfile.model_validate(make_profile_data())
    with_pests = CareProfile.model_validate(
        make_profile_data(tasks=make_profile_data()["tasks"] + [pest_task])
    )

    groups = collect_routines(
        [
            (_plant("p1", "Front rose"), rose),
            (_plant("p2", "Back rose"), with_pests),
            (_plant("p3", "No profile"), None),
        ],
        month=7,
    )

    assert [g.category for g in groups] == ["watering", "pest_control"]
    assert [p.plant_id for p in groups[0].plants] == ["p1", "p2"]
    assert groups[0].hint == "Check every few days"
    assert [p.plant_id for p in groups[1].plants] == ["p2"]
    assert groups[1].hint == "Weekly inspection"


def test_collect_routines_out_of_window_is_empty(sample_profile):
    assert collect_routines([(_plant("p1", "Rose"), sample_profile)], month=12) == []
