"""Tests for seasonal growth stage inference."""

from datetime import date

import pytest

from garden_care.modules.plant_care.domain.models.growth_stage import GrowthStage
from garden_care.modules.plant_care.domain.services.growth_stage_inferer import (
    get_month_name,
    infer_growth_stage,
    map_override_to_growth_stage,
    resolve_plant_category,
)


def test_climbing_rose_in_december_is_dormant():
    result = infer_growth_stage("Rose", "Climbing Rose", 12)
    assert result.stage == GrowthStage.DORMANT.value
    assert result.label == "Dormant"
    assert result.category == "rose"
    assert result.explanation == "Your Climbing Rose is likely dormant right now — it's December."


def test_cherry_tomato_in_august_is_fruiting():
    result = infer_growth_stage("Tomato", "Cherry Tomato", 8)
    assert result.category == "vegetable"
    assert result.stage == GrowthStage.FRUITING.value
    assert result.label == "Fruiting"


def test_fruiting_checked_before_flowering():
    # July is in both vegetable sets
    assert infer_growth_stage("Bean", "Runner Bean", 7).stage == GrowthStage.FRUITING.value


def test_flowering():
    result = infer_growth_stage("Rose", "Shrub Rose", 6)
    assert result.stage == GrowthStage.FLOWERING.value
    assert "in flower" in result.explanation


def test_active_growth_default():
    result = infer_growth_stage("Rose", "Climbing Rose", 4)
    assert result.stage == GrowthStage.MATURE.value
    assert result.label == "Growing"
    assert "actively growing" in result.explanation


@pytest.mark.parametrize(
    "top, middle, category",
    [
        ("Rose", "Climbing Rose", "rose"),
        ("Tomato", "Cherry Tomato", "vegetable"),
        ("Apple", "Apple Tree", "fruit"),
        ("Hydrangea", "Mophead Hydrangea", "shrub"),
        ("Clematis", "Montana", "perennial"),
        ("Ornamental Grass", "Pampas", "grass"),
        ("Oak", "English Oak Tree", "tree"),
        ("Hosta", "Sum and Substance", "perennial"),
        (None, None, "perennial"),
    ],
)
def test_category_resolution(top, middle, category):
    assert resolve_plant_category(top, middle) == category


def test_override_only_looks_at_middle_level():
    # "Clematis" as top level is not an override match; no category name matches either
    assert resolve_plant_category("Clematis", "Montana") == "perennial"
    assert resolve_plant_category("Climber", "Clematis Montana") == "climber"


def test_display_name_falls_back_to_top_level_then_plant():
    assert "Your Rose is" in infer_growth_stage("Rose", "", 12).explanation
    assert "Your plant is" in infer_growth_stage(None, None, 12).explanation


def test_missing_month_uses_today():
    result = infer_growth_stage("Rose", "Climbing Rose", None, today=date(2024, 1, 15))
    assert result.month == 1
    assert result.stage == GrowthStage.DORMANT.value

    assert infer_growth_stage("Rose", "Climbing Rose", 0, today=date(2024, 7, 1)).month == 7


def test_out_of_range_month_is_total():
    result = infer_growth_stage("Rose", "Climbing Rose", 13)
    assert result.stage == GrowthStage.MATURE.value
    assert result.explanation.endswith("it's Unknown.")


def test_month_names():
    assert get_month_name(1) == "January"
    assert get_month_name(12) == "December"
    assert get_month_name(0) == "Unknown"


@pytest.mark.parametrize(
    "life, seasonal, expected",
    [
        ("seed", None, GrowthStage.SEED),
        ("seedling", "flowering", GrowthStage.SEEDLING),
        ("young", None, GrowthStage.JUVENILE),
        ("established", "flowering", GrowthStage.FLOWERING),
        ("established", "fruiting", GrowthStage.FRUITING),
        ("established", "dormant", GrowthStage.DORMANT),
        ("established", "growing", GrowthStage.MATURE),
        ("established", None, GrowthStage.MATURE),
    ],
)
def test_override_mapping(life, seasonal, expected):
    assert map_override_to_growth_stage(life, seasonal) == expected
