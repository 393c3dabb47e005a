# 📄 File: garden_care/modules/plant_care/infrastructure/external/prompts.py
# 🧭 Purpose (Layman Explanation):
# Writes the instructions we send to the AI: one asking for a UK seasonal care guide for a plant,
# and one asking it to identify which real plant a search phrase refers to.
#
# 🧪 Purpose (Technical Summary):
# Pure prompt builders. The care profile prompt embeds planting context, climate zone guidance,
# optional plant state and the exact JSON schema the response must follow.
#
# 🔗 Dependencies:
# - garden_care.modules.plant_care.domain.models (GenerationContext, PlantState)
# - garden_care.modules.plant_care.domain.services.growth_stage_inferer (month names)
#
# 🔄 Connected Modules / Calls From:
# - anthropic_generator.py

from datetime import date
from typing import Optional

from garden_care.modules.plant_care.domain.models.plant import GenerationContext, PlantState
from garden_care.modules.plant_care.domain.services.growth_stage_inferer import get_month_name

STAGE_LABELS = {
    "seed": "Seeds (not yet germinated)",
    "seedling": "Seedling (recently sprouted)",
    "juvenile": "Juvenile (young but established)",
    "mature": "Mature (fully established)",
    "dormant": "Dormant (winter rest period)",
    "flowering": "Flowering",
    "fruiting": "Fruiting/producing",
}

ENVIRONMENT_LABELS = {
    "indoor": "Indoors (windowsill/grow light)",
    "outdoor": "Outdoors in the garden",
    "greenhouse": "In a greenhouse",
    "cold_frame": "In a cold frame",
}

HEALTH_LABELS = {
    "healthy": "Healthy",
    "struggling": "Struggling (needs attention)",
    "diseased": "Diseased",
    "recovering": "Recovering from issues",
}

CARE_PROFILE_SCHEMA = """{
  "common_name": "string - the standard UK common name for this plant",
  "species": "string or null - botanical/Latin name if known and applicable",
  "plant_type": "string - category like 'rose', 'shrub', 'perennial', 'bulb', 'fruit', 'vegetable', 'tree', 'climber', 'herb'",
  "summary": "string - 1-2 sentences describing the plant for a UK gardener",
  "uk_hardiness": "string - e.g., 'Hardy to -15°C' or 'Half-hardy, protect from frost'",
  "tasks": [
    {
      "key": "string - unique snake_case identifier like 'prune_winter' or 'feed_spring'",
      "title": "string - short action title like 'Winter pruning' or 'Spring feed'",
      "category": "pruning|feeding|pest_control|planting|watering|harvesting|winter_care|general",
      "month_start": 1-12,
      "month_end": 1-12,
      "recurrence_type": "once_per_window|weekly_in_window|monthly_in_window",
      "effort_level": "low|medium|high",
      "why_this_matters": "string - 1-2 sentences explaining the importance of this task",
      "how_to": "string - detailed step-by-step guidance, with alternative methods and common mistakes"
    }
  ],
  "tips": ["string - practical UK-specific care tips, 3-5 items"]
}"""

CARE_PROFILE_GUIDELINES = """IMPORTANT GUIDELINES:
- All timing and advice should be UK-specific, tailored to the specified climate zone
- Zone 7 (coldest): Scottish Highlands - later springs, earlier frosts, more winter protection needed
- Zone 8 (moderate): Most of UK - standard UK gardening calendar
- Zone 9 (mild): Southern/coastal - earlier springs, later frosts, less winter protection
- Zone 10 (warmest): Scilly Isles/SW Cornwall - very mild, almost frost-free
- Be practical and actionable, not generic
- For month windows that span year end (e.g., Nov-Feb), use month_start: 11, month_end: 2
- Generate 4-8 tasks covering the full year cycle
- Tasks should cover the main care activities: pruning, feeding, watering, pest control as appropriate
- Consider if the plant is in a pot vs ground (pots need more watering, winter protection)
- Tips should be genuinely useful and zone-appropriate, not obvious
- Return ONLY valid JSON, no markdown code blocks or explanation"""


def _plant_state_section(plant_state: Optional[PlantState]) -> str:
    if plant_state is None:
        return ""

    lines = [
        "",
        "CURRENT PLANT STATE:",
        f"- Growth stage: {STAGE_LABELS.get(plant_state.growth_stage, plant_state.growth_stage)}",
        f"- Environment: {ENVIRONMENT_LABELS.get(plant_state.environment, plant_state.environment)}",
        f"- Health: {HEALTH_LABELS.get(plant_state.health_status, plant_state.health_status)}",
    ]
    if plant_state.health_notes:
        lines.append(f"- Health notes: {plant_state.health_notes}")
    if plant_state.date_planted:
        lines.append(f"- Date planted: {plant_state.date_planted.isoformat()}")

    lines.extend([
        "",
        "CRITICAL: Tailor ALL tasks to this plant's CURRENT STATE. For example:",
        "- If the plant is a seedling indoors, focus on indoor care, hardening off and transplanting, "
        "NOT winter protection or outdoor pruning",
        "- If the plant is dormant, focus on winter care and preparation for spring",
        "- If the plant is diseased, prioritise treatment and recovery tasks",
        "- Consider the environment: indoor plants don't need frost protection",
    ])
    return "\n".join(lines)


def build_care_profile_prompt(
    middle_level: str,
    top_level: Optional[str] = None,
    context: Optional[GenerationContext] = None,
    today: Optional[date] = None
) -> str:
    """
    Build the care profile generation prompt.

    Args:
        middle_level: Specific plant name or sub-type (e.g. "Climbing Rose")
        top_level: Optional broad type shown in brackets (e.g. "Rose")
        context: Planting context; missing values render as "Not specified"
        today: Date used when the context carries no current month

    Returns:
        Prompt text asking for JSON matching CARE_PROFILE_SCHEMA
    """
    context = context or GenerationContext()
    plant_description = f"{middle_level} ({top_level})" if top_level else middle_level
    current_month = context.current_month or (today or date.today()).month
    zone_info = f"USDA Zone {context.climate_zone}" if context.climate_zone else "General UK (Zone 8-9)"
    subject = "this plant based on its current state" if context.plant_state else "this plant type"

    return (
        f"You are a UK gardening expert. Generate a comprehensive care profile for {subject}.\n\n"
        f"PLANT TYPE: {plant_description}\n"
        f"LOCATION: {context.area or 'Not specified'}\n"
        f"PLANTED IN: {context.planted_in or 'Not specified'}\n"
        f"CLIMATE ZONE: {zone_info}\n"
        f"CURRENT MONTH: {get_month_name(current_month)}"
        f"{_plant_state_section(context.plant_state)}\n\n"
        f"Respond with JSON matching this exact schema:\n{CARE_PROFILE_SCHEMA}\n\n"
        f"{CARE_PROFILE_GUIDELINES}"
    )


def build_plant_verification_prompt(query: str) -> str:
    """Prompt asking the model to identify a real plant, answering "unknown" when unsure."""
    return f"""You are a botanical identification expert. Your task is to determine if the search query refers to a REAL plant you can verify from your training data.

Search query: "{query}"

CRITICAL RULES:
1. ONLY identify plants you are certain exist. If you cannot recall specific details, return "unknown".
2. NEVER invent or combine plant names. Do not attach the search term to random plant types.
3. Cultivar names must be exact matches. Misspelled or unrecognised cultivars are "unknown".
4. When in doubt, say unknown.
5. Generic plant types such as "Rose", "Lavender" or "Tomato" are fine to identify generically.

Return a JSON object with this structure:
{{
  "identified": true/false,
  "confidence": "verified" | "likely" | "unknown",
  "plant": {{
    "common_name": "Full display name (e.g., Percy Wiseman Rhododendron)",
    "scientific_name": "Botanical name (e.g., Rhododendron 'Percy Wiseman')",
    "top_level": "Plant genus/family (e.g., Rhododendron, Rose, Hydrangea)",
    "middle_level": "Specific type (e.g., Yakushimanum Hybrid, English Rose, Mophead Hydrangea)",
    "cultivar_name": "The cultivar name if applicable, or null",
    "cycle": "Perennial | Annual | Biennial",
    "watering": "Average | Frequent | Minimum",
    "sunlight": ["Full sun", "Part shade", "Full shade"],
    "growth_habit": ["Shrub", "Climber", "Evergreen"]
  }},
  "reason": "Brief explanation of identification (optional)"
}}

IF UNKNOWN, return:
{{"identified": false, "confidence": "unknown", "reason": "Could not identify this as a known plant"}}

Return ONLY valid JSON, no additional text."""
