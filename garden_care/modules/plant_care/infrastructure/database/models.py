# 📄 File: garden_care/modules/plant_care/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Describes the database tables that hold remembered care guides, canonical plant types and
# gardeners' individual plants.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models: care_profile_cache (content-addressable, unique cache_key),
# plant_types (unique (top_level, middle_level)) and plants (optional FK to plant_types).
# JSON payloads use JSONB on PostgreSQL.
# 🔗 Dependencies:
# sqlalchemy, garden_care.shared.infrastructure.database.connection (Base)
# 🔄 Connected Modules / Calls From:
# *_repository_impl.py, DatabaseConnectionManager.create_tables

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB

from garden_care.shared.infrastructure.database.connection import Base
from garden_care.shared.utils.helpers import generate_uuid, utc_now

JSONType = JSON().with_variant(JSONB(), "postgresql")


# =============================================================================
# CARE PROFILE CACHE
# =============================================================================

class CareProfileCacheModel(Base):
    """
    Content-addressable care profile cache.

    Rows are append-only apart from hit_count; nothing expires them.
    """
    __tablename__ = "care_profile_cache"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    cache_key = Column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="SHA-256 hex digest of the normalized request context"
    )
    plant_name = Column(String(255), nullable=True, comment="Normalized plant name")
    care_profile = Column(JSONType, nullable=False)
    hit_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<CareProfileCacheModel(id={self.id}, cache_key={self.cache_key}, hits={self.hit_count})>"


# =============================================================================
# PLANT TYPES
# =============================================================================

class PlantTypeModel(Base):
    """Canonical plant type, unique per (top_level, middle_level)."""
    __tablename__ = "plant_types"
    __table_args__ = (
        UniqueConstraint("top_level", "middle_level", name="uq_plant_types_identity"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    top_level = Column(String(255), nullable=False, comment="Broad type, e.g. Rose")
    middle_level = Column(String(255), nullable=False, comment="Sub-type, e.g. Climbing Rose")
    growth_habit = Column(JSONType, nullable=False, default=list)
    care_profile = Column(JSONType, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<PlantTypeModel(id={self.id}, top_level={self.top_level}, middle_level={self.middle_level})>"


# =============================================================================
# PLANTS
# =============================================================================

class PlantModel(Base):
    """A gardener's individual plant."""
    __tablename__ = "plants"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    owner_id = Column(String(255), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    cultivar_name = Column(String(255), nullable=True)
    plant_type_id = Column(
        String(36),
        ForeignKey("plant_types.id"),
        nullable=True,
        index=True
    )
    planted_in = Column(String(20), nullable=True)
    area = Column(Text, nullable=True)
    growth_stage = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<PlantModel(id={self.id}, name={self.name}, plant_type_id={self.plant_type_id})>"
