# 📄 File: garden_care/modules/plant_care/domain/models/plant_type.py
# 🧭 Purpose (Layman Explanation):
# Describes a canonical kind of plant (for example "Rose" / "Climbing Rose"), which many of a
# gardener's individual plants can share along with one care guide.
# 🧪 Purpose (Technical Summary):
# PlantTypeIdentity natural key, PlantType record model and the IdentityResolution result
# returned by the type identity resolver.
# 🔗 Dependencies:
# pydantic, care_profile.py, helpers.py
# 🔄 Connected Modules / Calls From:
# type_identity_resolver.py, plant_registration_service.py, profile_generation_service.py,
# plant_type_repository_impl.py

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from garden_care.shared.utils.helpers import deduplicate_list
from .care_profile import CareProfile


class PlantTypeIdentity(BaseModel):
    """Composite natural key (top_level, middle_level); a cultivar name is not part of it."""
    model_config = ConfigDict(frozen=True)

    top_level: str = Field(..., min_length=1)
    middle_level: str = Field(..., min_length=1)

    @field_validator("top_level", "middle_level")
    @classmethod
    def strip_levels(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Plant type level must not be blank")
        return v


class PlantType(BaseModel):
    """Canonical plant type record, optionally carrying a shared care profile."""

    plant_type_id: str
    top_level: str
    middle_level: str
    growth_habit: List[str] = Field(default_factory=list)
    care_profile: Optional[CareProfile] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("growth_habit")
    @classmethod
    def dedupe_growth_habit(cls, v: List[str]) -> List[str]:
        return deduplicate_list(tag.strip() for tag in v if tag and tag.strip())

    @property
    def identity(self) -> PlantTypeIdentity:
        return PlantTypeIdentity(top_level=self.top_level, middle_level=self.middle_level)


class IdentityResolution(BaseModel):
    """
    Whether a (top_level, middle_level) pair already has a record the owner can merge into.

    Purely informational: the caller decides whether to link to the existing record.
    """

    exists: bool
    plant_type_id: Optional[str] = None
    existing_cultivar_names: List[str] = Field(default_factory=list)

    @classmethod
    def not_found(cls) -> "IdentityResolution":
        return cls(exists=False)
