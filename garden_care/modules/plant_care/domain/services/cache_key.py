# 📄 File: garden_care/modules/plant_care/domain/services/cache_key.py
# 🧭 Purpose (Layman Explanation):
# Turns "which plant, planted where, in which climate zone, in which format version" into a
# fixed fingerprint, so the same question always finds the same remembered care guide.
# 🧪 Purpose (Technical Summary):
# Content-addressable cache key derivation: ordered fields joined by "|" (with the name
# percent-escaped so the delimiter never occurs inside a field), hashed with SHA-256.
# 🔗 Dependencies:
# garden_care.shared.utils.helpers (generate_hash), climate_zone.py
# 🔄 Connected Modules / Calls From:
# cache_entry.py (CacheContext.cache_key), profile_generation_service.py

from enum import Enum
from typing import Optional, Union

from garden_care.shared.core.exceptions import ValidationError
from garden_care.shared.utils.helpers import generate_hash
from ..models.care_profile import UNSPECIFIED_PLANTED_IN, PlantedIn, coerce_unspecified_planted_in
from ..models.climate_zone import (
    DEFAULT_CLIMATE_ZONE,
    MAX_CLIMATE_ZONE,
    MIN_CLIMATE_ZONE,
    coerce_default_zone,
)

KEY_DELIMITER = "|"
DEFAULT_ZONE_TOKEN = f"zone-{int(DEFAULT_CLIMATE_ZONE)}-default"


def _escape_field(value: str) -> str:
    return value.replace("%", "%25").replace(KEY_DELIMITER, "%7C")


def _planted_in_token(planted_in: Optional[Union[PlantedIn, str]]) -> str:
    planted_in = coerce_unspecified_planted_in(planted_in)
    if planted_in is None:
        return UNSPECIFIED_PLANTED_IN
    value = planted_in.value if isinstance(planted_in, Enum) else str(planted_in)
    try:
        return PlantedIn(value).value
    except ValueError:
        raise ValidationError(
            f"Invalid planted_in value: {value}",
            field="planted_in",
            value=value,
            constraint="ground|pot|raised_bed|unspecified",
        ) from None


def _zone_token(climate_zone: Optional[Union[int, str]]) -> str:
    climate_zone = coerce_default_zone(climate_zone)
    if climate_zone is None:
        return DEFAULT_ZONE_TOKEN
    if isinstance(climate_zone, bool) or not isinstance(climate_zone, int) \
            or not MIN_CLIMATE_ZONE <= climate_zone <= MAX_CLIMATE_ZONE:
        raise ValidationError(
            f"Climate zone must be between {MIN_CLIMATE_ZONE} and {MAX_CLIMATE_ZONE}",
            field="climate_zone",
            value=climate_zone,
            constraint="7..10",
        )
    return f"zone-{int(climate_zone)}"


def derive_cache_key(
    normalized_name: str,
    planted_in: Optional[Union[PlantedIn, str]],
    climate_zone: Optional[Union[int, str]],
    schema_version: int
) -> str:
    """
    Derive the deterministic cache key for a care profile request.

    Args:
        normalized_name: Output of the name normalizer (lowercased and trimmed here)
        planted_in: ground | pot | raised_bed; None or "unspecified" for the unspecified token
        climate_zone: 7..10; None or "default" for the default zone token
        schema_version: Positive cache schema version; bumping it changes every key

    Returns:
        64-character lowercase SHA-256 hex digest

    Raises:
        ValidationError: On a blank name, unknown planted_in, out-of-range zone
            or non-positive version
    """
    if not isinstance(normalized_name, str) or not normalized_name.strip():
        raise ValidationError("Plant name is required for cache key", field="normalized_name")
    if isinstance(schema_version, bool) or not isinstance(schema_version, int) or schema_version < 1:
        raise ValidationError(
            "Schema version must be a positive integer",
            field="schema_version",
            value=schema_version,
            constraint=">=1",
        )

    components = [
        _escape_field(normalized_name.lower().strip()),
        _planted_in_token(planted_in),
        _zone_token(climate_zone),
        f"v{schema_version}",
    ]
    return generate_hash(KEY_DELIMITER.join(components), algorithm="sha256")
