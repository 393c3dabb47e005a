# 📄 File: garden_care/modules/plant_care/domain/services/growth_stage_inferer.py
# 🧭 Purpose (Layman Explanation):
# Guesses what a plant is probably doing right now (resting for winter, flowering, fruiting or
# just growing) from what kind of plant it is and the month, using a UK seasonal calendar.
# 🧪 Purpose (Technical Summary):
# Stateless rule tables: ordered keyword overrides -> category, then ordered category name
# scan, default "perennial"; category month-sets resolved with strict priority
# dormant > fruiting > flowering > active growth. Total: never raises.
# 🔗 Dependencies:
# growth_stage.py, dataclasses, datetime
# 🔄 Connected Modules / Calls From:
# query_handlers.py, garden_care.modules.plant_care (public API)

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Tuple, Union

from ..models.growth_stage import (
    GrowthStage,
    GrowthStageResult,
    LifeStage,
    SeasonalPattern,
    SeasonalState,
)

DEFAULT_CATEGORY = "perennial"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _pattern(dormant=(), flowering=(), fruiting=()) -> SeasonalPattern:
    return SeasonalPattern(
        dormant=frozenset(dormant),
        flowering=frozenset(flowering),
        fruiting=frozenset(fruiting),
    )


# UK seasonal patterns by category, months 1-12. Declared order is the
# order of the category-name scan.
SEASONAL_PATTERNS: Tuple[Tuple[str, SeasonalPattern], ...] = (
    ("rose", _pattern(dormant=(11, 12, 1, 2), flowering=(6, 7, 8, 9, 10))),
    ("tree", _pattern(dormant=(11, 12, 1, 2, 3), flowering=(4, 5), fruiting=(8, 9, 10))),
    ("fruit", _pattern(dormant=(11, 12, 1, 2), flowering=(3, 4, 5), fruiting=(7, 8, 9, 10))),
    ("perennial", _pattern(dormant=(12, 1, 2), flowering=(5, 6, 7, 8, 9))),
    ("bulb", _pattern(dormant=(6, 7, 8, 9), flowering=(2, 3, 4, 5))),
    ("shrub", _pattern(dormant=(12, 1, 2), flowering=(4, 5, 6, 7), fruiting=(8, 9, 10))),
    ("climber", _pattern(dormant=(12, 1, 2), flowering=(5, 6, 7, 8, 9))),
    ("herb", _pattern(dormant=(11, 12, 1, 2), flowering=(6, 7, 8))),
    ("vegetable", _pattern(flowering=(6, 7), fruiting=(7, 8, 9, 10))),
    ("annual", _pattern(flowering=(6, 7, 8, 9))),
    ("grass", _pattern(dormant=(12, 1, 2), flowering=(6, 7, 8))),
)

_PATTERNS_BY_CATEGORY = dict(SEASONAL_PATTERNS)


@dataclass(frozen=True)
class CategoryRule:
    """Keyword found in the lowercased middle level -> category."""
    keyword: str
    category: str

    def matches(self, middle_lower: str) -> bool:
        return self.keyword in middle_lower


# Checked before the category-name scan; first match wins.
CATEGORY_OVERRIDE_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule("hybrid tea rose", "rose"),
    CategoryRule("floribunda rose", "rose"),
    CategoryRule("climbing rose", "rose"),
    CategoryRule("shrub rose", "rose"),
    CategoryRule("rambling rose", "rose"),
    CategoryRule("david austin rose", "rose"),
    CategoryRule("english rose", "rose"),
    CategoryRule("groundcover rose", "rose"),
    CategoryRule("miniature rose", "rose"),
    CategoryRule("patio rose", "rose"),
    CategoryRule("spring bulb", "bulb"),
    CategoryRule("summer bulb", "bulb"),
    CategoryRule("autumn bulb", "bulb"),
    CategoryRule("fruit tree", "fruit"),
    CategoryRule("apple tree", "fruit"),
    CategoryRule("pear tree", "fruit"),
    CategoryRule("plum tree", "fruit"),
    CategoryRule("cherry tree", "fruit"),
    CategoryRule("tomato", "vegetable"),
    CategoryRule("courgette", "vegetable"),
    CategoryRule("bean", "vegetable"),
    CategoryRule("pea", "vegetable"),
    CategoryRule("potato", "vegetable"),
    CategoryRule("carrot", "vegetable"),
    CategoryRule("lavender", "shrub"),
    CategoryRule("hydrangea", "shrub"),
    CategoryRule("clematis", "climber"),
    CategoryRule("wisteria", "climber"),
    CategoryRule("jasmine", "climber"),
)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def resolve_plant_category(top_level: Any, middle_level: Any) -> str:
    """
    Resolve the seasonal category of a plant type.

    Middle-level keyword overrides first, then category names found in
    either level, otherwise "perennial".
    """
    middle_lower = _as_text(middle_level).lower()
    top_lower = _as_text(top_level).lower()

    for rule in CATEGORY_OVERRIDE_RULES:
        if rule.matches(middle_lower):
            return rule.category

    for category, _ in SEASONAL_PATTERNS:
        if category in top_lower or category in middle_lower:
            return category

    return DEFAULT_CATEGORY


def get_month_name(month: Any) -> str:
    if isinstance(month, int) and not isinstance(month, bool) and 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return "Unknown"


def _resolve_month(month: Any, today: Optional[date]) -> int:
    if month is None or month == 0:
        return (today or date.today()).month
    if isinstance(month, int) and not isinstance(month, bool):
        return month
    # Anything else is unusable; 0 yields the active-growth default
    return 0


def infer_growth_stage(
    top_level: Any,
    middle_level: Any,
    month: Optional[int] = None,
    today: Optional[date] = None
) -> GrowthStageResult:
    """
    Infer a plant's likely seasonal stage from its type and the month.

    Args:
        top_level: Broad plant type (e.g. "Rose")
        middle_level: Sub-type (e.g. "Climbing Rose")
        month: 1-12; None or 0 means the current month
        today: Date used for the current month (defaults to date.today())

    Returns:
        GrowthStageResult; a month outside 1..12 yields the active-growth
        default with an "Unknown" month name
    """
    resolved_month = _resolve_month(month, today)
    category = resolve_plant_category(top_level, middle_level)
    pattern = _PATTERNS_BY_CATEGORY[category]
    month_name = get_month_name(resolved_month)
    plant_name = _as_text(middle_level).strip() or _as_text(top_level).strip() or "plant"

    def result(stage: GrowthStage, label: str, doing: str) -> GrowthStageResult:
        return GrowthStageResult(
            stage=stage,
            label=label,
            explanation=f"Your {plant_name} is likely {doing} right now — it's {month_name}.",
            category=category,
            month=resolved_month,
        )

    # Priority order: dormant, fruiting, flowering
    if resolved_month in pattern.dormant:
        return result(GrowthStage.DORMANT, "Dormant", "dormant")

    if resolved_month in pattern.fruiting:
        return result(GrowthStage.FRUITING, "Fruiting", "fruiting")

    if resolved_month in pattern.flowering:
        return result(GrowthStage.FLOWERING, "Flowering", "in flower")

    return result(GrowthStage.MATURE, "Growing", "actively growing")


def map_override_to_growth_stage(
    life_stage: Union[LifeStage, str],
    seasonal_state: Optional[Union[SeasonalState, str]] = None
) -> GrowthStage:
    """
    Map a gardener's manual override back to a stored growth stage.

    seed -> seed, seedling -> seedling, young -> juvenile; an established
    plant takes its seasonal state (flowering, fruiting, dormant) or mature.
    """
    life = getattr(life_stage, "value", life_stage)
    if life == LifeStage.SEED.value:
        return GrowthStage.SEED
    if life == LifeStage.SEEDLING.value:
        return GrowthStage.SEEDLING
    if life == LifeStage.YOUNG.value:
        return GrowthStage.JUVENILE

    state = getattr(seasonal_state, "value", seasonal_state)
    if state == SeasonalState.FLOWERING.value:
        return GrowthStage.FLOWERING
    if state == SeasonalState.FRUITING.value:
        return GrowthStage.FRUITING
    if state == SeasonalState.DORMANT.value:
        return GrowthStage.DORMANT
    return GrowthStage.MATURE
