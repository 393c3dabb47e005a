# 📄 File: garden_care/modules/plant_care/domain/models/climate_zone.py
# 🧭 Purpose (Layman Explanation):
# Lists the four UK hardiness zones (from cold Scottish Highlands to the almost frost-free
# Scilly Isles) with a friendly description and winter temperature range for each.
# 🧪 Purpose (Technical Summary):
# ClimateZone IntEnum (USDA zones 7-10) with description/temperature lookups that fall back
# to the default zone 8 for any unknown value.
# 🔗 Dependencies:
# enum
# 🔄 Connected Modules / Calls From:
# climate_zone_resolver.py, cache_key.py, prompts.py

from enum import IntEnum
from typing import Any


class ClimateZone(IntEnum):
    """USDA hardiness zones found in the UK"""
    ZONE_7 = 7    # Scottish Highlands, northern areas
    ZONE_8 = 8    # Most of England and Wales
    ZONE_9 = 9    # Southern England, coastal areas
    ZONE_10 = 10  # Scilly Isles, far south-west Cornwall

    @property
    def description(self) -> str:
        return _ZONE_DESCRIPTIONS[self]

    @property
    def temperature_range(self) -> str:
        return _ZONE_TEMPERATURE_RANGES[self]


DEFAULT_CLIMATE_ZONE = ClimateZone.ZONE_8
MIN_CLIMATE_ZONE = int(ClimateZone.ZONE_7)
MAX_CLIMATE_ZONE = int(ClimateZone.ZONE_10)
DEFAULT_ZONE_LITERAL = "default"

_ZONE_DESCRIPTIONS = {
    ClimateZone.ZONE_7: "Cold winters - Scottish Highlands and northern areas",
    ClimateZone.ZONE_8: "Mild winters - Most of England and Wales",
    ClimateZone.ZONE_9: "Warm winters - Southern England and coastal areas",
    ClimateZone.ZONE_10: "Very mild winters - Scilly Isles and far southwest",
}

_ZONE_TEMPERATURE_RANGES = {
    ClimateZone.ZONE_7: "-17°C to -12°C",
    ClimateZone.ZONE_8: "-12°C to -6°C",
    ClimateZone.ZONE_9: "-6°C to -1°C",
    ClimateZone.ZONE_10: "-1°C to 4°C",
}


def coerce_zone(zone: Any) -> ClimateZone:
    """Return the matching ClimateZone, or the default zone for anything else."""
    if isinstance(zone, bool):
        return DEFAULT_CLIMATE_ZONE
    try:
        return ClimateZone(zone)
    except (ValueError, TypeError):
        return DEFAULT_CLIMATE_ZONE


def get_zone_description(zone: Any) -> str:
    """Friendly description of a zone; unknown zones describe zone 8."""
    return coerce_zone(zone).description


def get_zone_temperature_range(zone: Any) -> str:
    """Winter minimum temperature range of a zone; unknown zones use zone 8."""
    return coerce_zone(zone).temperature_range


def coerce_default_zone(value: Any) -> Any:
    """Map the "default" zone member (or an empty string) to None."""
    if isinstance(value, str) and value.strip().lower() in ("", DEFAULT_ZONE_LITERAL):
        return None
    return value
