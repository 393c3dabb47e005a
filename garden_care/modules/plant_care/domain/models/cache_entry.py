# 📄 File: garden_care/modules/plant_care/domain/models/cache_entry.py
# 🧭 Purpose (Layman Explanation):
# Describes what makes two care guide requests "the same" (plant name, where it is planted,
# climate zone, format version) and what a remembered care guide looks like.
# 🧪 Purpose (Technical Summary):
# CacheContext value object (input of the content-addressable key) and CacheEntry record model.
# 🔗 Dependencies:
# pydantic, care_profile.py, cache_key.py
# 🔄 Connected Modules / Calls From:
# profile_cache.py, profile_generation_service.py, profile_cache_repository_impl.py

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .care_profile import CareProfile, PlantedIn, coerce_unspecified_planted_in
from .climate_zone import coerce_default_zone


class CacheContext(BaseModel):
    """Normalized inputs that identify a care profile in the content-addressable cache."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    normalized_name: str = Field(..., min_length=1)
    planted_in: Optional[PlantedIn] = None  # None means "unspecified"
    climate_zone: Optional[int] = Field(None, ge=7, le=10)  # None means "default"
    schema_version: int = Field(1, ge=1)

    @field_validator("planted_in", mode="before")
    @classmethod
    def _unspecified_planted_in(cls, value):
        return coerce_unspecified_planted_in(value)

    @field_validator("climate_zone", mode="before")
    @classmethod
    def _default_zone(cls, value):
        return coerce_default_zone(value)

    @property
    def cache_key(self) -> str:
        """Deterministic SHA-256 key for this context."""
        from garden_care.modules.plant_care.domain.services.cache_key import derive_cache_key

        return derive_cache_key(
            self.normalized_name,
            self.planted_in,
            self.climate_zone,
            self.schema_version,
        )


class CacheEntry(BaseModel):
    """A stored care profile; append-only apart from its hit counter."""

    entry_id: str
    cache_key: str
    plant_name: Optional[str] = None
    care_profile: CareProfile
    hit_count: int = Field(0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
