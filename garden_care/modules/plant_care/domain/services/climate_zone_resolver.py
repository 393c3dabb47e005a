# 📄 File: garden_care/modules/plant_care/domain/services/climate_zone_resolver.py
# 🧭 Purpose (Layman Explanation):
# Works out how cold a gardener's winters are from the town or region they type, so care
# advice can be timed for Inverness rather than Penzance. Unknown places get the usual UK zone.
# 🧪 Purpose (Technical Summary):
# Total, pure location -> USDA hardiness zone resolver over two ordered tables (cities/towns,
# then regions): exact match first, then an in-order substring containment scan; default 8.
# 🔗 Dependencies:
# climate_zone.py
# 🔄 Connected Modules / Calls From:
# profile_generation_service.py, query_handlers.py, garden_care.modules.plant_care (public API)

from typing import Any, Dict, Optional, Tuple

from ..models.climate_zone import (
    DEFAULT_CLIMATE_ZONE,
    ClimateZone,
    get_zone_description,
    get_zone_temperature_range,
)

ZoneRule = Tuple[str, ClimateZone]

# Table order decides ties in the substring scan and must not change.
LOCATION_ZONE_RULES: Tuple[ZoneRule, ...] = (
    # Zone 10 (warmest - Scilly Isles, far SW)
    ("scilly isles", ClimateZone.ZONE_10),
    ("st mary's", ClimateZone.ZONE_10),
    ("tresco", ClimateZone.ZONE_10),

    # Zone 9 (southern England, coastal)
    ("penzance", ClimateZone.ZONE_9),
    ("falmouth", ClimateZone.ZONE_9),
    ("truro", ClimateZone.ZONE_9),
    ("plymouth", ClimateZone.ZONE_9),
    ("torquay", ClimateZone.ZONE_9),
    ("exeter", ClimateZone.ZONE_9),
    ("bournemouth", ClimateZone.ZONE_9),
    ("brighton", ClimateZone.ZONE_9),
    ("hastings", ClimateZone.ZONE_9),
    ("eastbourne", ClimateZone.ZONE_9),
    ("portsmouth", ClimateZone.ZONE_9),
    ("southampton", ClimateZone.ZONE_9),
    ("isle of wight", ClimateZone.ZONE_9),
    ("dover", ClimateZone.ZONE_9),
    ("margate", ClimateZone.ZONE_9),
    ("swansea", ClimateZone.ZONE_9),
    ("tenby", ClimateZone.ZONE_9),
    ("jersey", ClimateZone.ZONE_9),
    ("guernsey", ClimateZone.ZONE_9),

    # Zone 8 (most of England and Wales)
    ("london", ClimateZone.ZONE_8),
    ("birmingham", ClimateZone.ZONE_8),
    ("manchester", ClimateZone.ZONE_8),
    ("liverpool", ClimateZone.ZONE_8),
    ("leeds", ClimateZone.ZONE_8),
    ("sheffield", ClimateZone.ZONE_8),
    ("bristol", ClimateZone.ZONE_8),
    ("cardiff", ClimateZone.ZONE_8),
    ("nottingham", ClimateZone.ZONE_8),
    ("leicester", ClimateZone.ZONE_8),
    ("coventry", ClimateZone.ZONE_8),
    ("bradford", ClimateZone.ZONE_8),
    ("wolverhampton", ClimateZone.ZONE_8),
    ("newcastle", ClimateZone.ZONE_8),
    ("sunderland", ClimateZone.ZONE_8),
    ("norwich", ClimateZone.ZONE_8),
    ("cambridge", ClimateZone.ZONE_8),
    ("oxford", ClimateZone.ZONE_8),
    ("reading", ClimateZone.ZONE_8),
    ("northampton", ClimateZone.ZONE_8),
    ("milton keynes", ClimateZone.ZONE_8),
    ("peterborough", ClimateZone.ZONE_8),
    ("ipswich", ClimateZone.ZONE_8),
    ("colchester", ClimateZone.ZONE_8),
    ("canterbury", ClimateZone.ZONE_8),
    ("gloucester", ClimateZone.ZONE_8),
    ("bath", ClimateZone.ZONE_8),
    ("salisbury", ClimateZone.ZONE_8),
    ("winchester", ClimateZone.ZONE_8),
    ("guildford", ClimateZone.ZONE_8),
    ("maidstone", ClimateZone.ZONE_8),
    ("tunbridge wells", ClimateZone.ZONE_8),
    ("york", ClimateZone.ZONE_8),
    ("hull", ClimateZone.ZONE_8),
    ("derby", ClimateZone.ZONE_8),
    ("stoke-on-trent", ClimateZone.ZONE_8),
    ("wrexham", ClimateZone.ZONE_8),
    ("chester", ClimateZone.ZONE_8),
    ("warrington", ClimateZone.ZONE_8),
    ("preston", ClimateZone.ZONE_8),
    ("blackpool", ClimateZone.ZONE_8),
    ("lancaster", ClimateZone.ZONE_8),
    ("carlisle", ClimateZone.ZONE_8),
    ("durham", ClimateZone.ZONE_8),
    ("middlesbrough", ClimateZone.ZONE_8),
    ("lincoln", ClimateZone.ZONE_8),
    ("aberystwyth", ClimateZone.ZONE_8),
    ("bangor", ClimateZone.ZONE_8),
    ("newport", ClimateZone.ZONE_8),

    # Zone 7 (coldest - Scotland, northern areas)
    ("edinburgh", ClimateZone.ZONE_7),
    ("glasgow", ClimateZone.ZONE_7),
    ("aberdeen", ClimateZone.ZONE_7),
    ("dundee", ClimateZone.ZONE_7),
    ("inverness", ClimateZone.ZONE_7),
    ("perth", ClimateZone.ZONE_7),
    ("stirling", ClimateZone.ZONE_7),
    ("fort william", ClimateZone.ZONE_7),
    ("oban", ClimateZone.ZONE_7),
    ("wick", ClimateZone.ZONE_7),
    ("thurso", ClimateZone.ZONE_7),
    ("stornoway", ClimateZone.ZONE_7),
    ("lerwick", ClimateZone.ZONE_7),
    ("kirkwall", ClimateZone.ZONE_7),
    ("aviemore", ClimateZone.ZONE_7),
    ("braemar", ClimateZone.ZONE_7),
    ("pitlochry", ClimateZone.ZONE_7),
)

REGIONAL_ZONE_RULES: Tuple[ZoneRule, ...] = (
    ("scotland", ClimateZone.ZONE_7),
    ("scottish highlands", ClimateZone.ZONE_7),
    ("highlands", ClimateZone.ZONE_7),
    ("orkney", ClimateZone.ZONE_7),
    ("shetland", ClimateZone.ZONE_7),
    ("hebrides", ClimateZone.ZONE_7),

    ("cornwall", ClimateZone.ZONE_9),
    ("devon", ClimateZone.ZONE_9),
    ("dorset", ClimateZone.ZONE_9),
    ("kent", ClimateZone.ZONE_9),
    ("sussex", ClimateZone.ZONE_9),
    ("east sussex", ClimateZone.ZONE_9),
    ("west sussex", ClimateZone.ZONE_9),
    ("hampshire", ClimateZone.ZONE_9),

    ("england", ClimateZone.ZONE_8),
    ("wales", ClimateZone.ZONE_8),
    ("northern ireland", ClimateZone.ZONE_8),
    ("midlands", ClimateZone.ZONE_8),
    ("north west", ClimateZone.ZONE_8),
    ("north east", ClimateZone.ZONE_8),
    ("east anglia", ClimateZone.ZONE_8),
    ("yorkshire", ClimateZone.ZONE_8),
    ("lancashire", ClimateZone.ZONE_8),
)

_LOCATION_LOOKUP: Dict[str, ClimateZone] = dict(LOCATION_ZONE_RULES)
_REGIONAL_LOOKUP: Dict[str, ClimateZone] = dict(REGIONAL_ZONE_RULES)


def _scan(normalized: str, rules: Tuple[ZoneRule, ...]) -> Optional[ClimateZone]:
    for key, zone in rules:
        if key in normalized or normalized in key:
            return zone
    return None


def resolve_climate_zone(location: Any) -> ClimateZone:
    """
    Resolve a free-text UK location to a hardiness zone (7-10).

    Order: exact town/city, exact region, substring scan over towns/cities,
    substring scan over regions, then the default zone 8. Never raises.

    Args:
        location: Town, city or region name

    Returns:
        ClimateZone (an int subclass)
    """
    if not isinstance(location, str):
        return DEFAULT_CLIMATE_ZONE

    normalized = location.strip().lower()
    # A blank string is contained in every key
    if not normalized:
        return DEFAULT_CLIMATE_ZONE

    if normalized in _LOCATION_LOOKUP:
        return _LOCATION_LOOKUP[normalized]

    if normalized in _REGIONAL_LOOKUP:
        return _REGIONAL_LOOKUP[normalized]

    zone = _scan(normalized, LOCATION_ZONE_RULES)
    if zone is None:
        zone = _scan(normalized, REGIONAL_ZONE_RULES)

    return zone if zone is not None else DEFAULT_CLIMATE_ZONE


def describe_location(location: Any) -> Dict[str, Any]:
    """Resolve a location and describe its zone, ready to store on a gardener's profile."""
    zone = resolve_climate_zone(location)
    return {
        "location": location.strip() if isinstance(location, str) else None,
        "climate_zone": int(zone),
        "description": get_zone_description(zone),
        "temperature_range": get_zone_temperature_range(zone),
    }
