"""
Shared test fixtures for the garden care core test suite.

Provides:
- A file-backed SQLite database (aiosqlite) with all tables created
- An AsyncSession wired through the session manager
- Fake content generator and in-memory / failing repositories
- Sample care profile payloads

Usage:
    async def test_example(session, fake_generator):
        orchestrator = create_orchestrator(session, fake_generator, test_settings)
"""

import logging
from typing import Dict, List, Optional

import pytest

from garden_care.modules.plant_care.domain.models.cache_entry import CacheEntry
from garden_care.modules.plant_care.domain.models.care_profile import CareProfile
from garden_care.modules.plant_care.domain.models.identification import PlantIdentification
from garden_care.modules.plant_care.domain.models.plant import GenerationContext
from garden_care.modules.plant_care.domain.models.plant_type import PlantType
from garden_care.modules.plant_care.domain.repositories.plant_type_repository import PlantTypeRepository
from garden_care.modules.plant_care.domain.repositories.profile_cache_repository import ProfileCacheRepository
from garden_care.modules.plant_care.domain.services.content_generator import ContentGenerator
from garden_care.shared.config.settings import Settings
from garden_care.shared.core.exceptions import NotFoundError, RepositoryError
from garden_care.shared.infrastructure.database.connection import DatabaseConnectionManager
from garden_care.shared.infrastructure.database.session import DatabaseSessionManager
from garden_care.shared.utils.helpers import generate_uuid

# ---------------------------------------------------------------------------
# Logging - keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("garden_care").setLevel(logging.WARNING)


# ========================== Sample Data =====================================


def make_profile_data(common_name: str = "Climbing Rose", **overrides) -> Dict:
    data = {
        "common_name": common_name,
        "species": "Rosa (Climbing Group)",
        "plant_type": "rose",
        "summary": "A vigorous climber for walls and pergolas.",
        "uk_hardiness": "Hardy to -15°C",
        "tasks": [
            {
                "key": "prune_winter",
                "title": "Winter pruning",
                "category": "pruning",
                "month_start": 11,
                "month_end": 2,
                "recurrence_type": "once_per_window",
                "effort_level": "medium",
                "why_this_matters": "Encourages flowering side shoots.",
                "how_to": "Tie in main stems horizontally and shorten side shoots.",
            },
            {
                "key": "water_summer",
                "title": "Summer watering",
                "category": "watering",
                "month_start": 6,
                "month_end": 8,
                "recurrence_type": "weekly_in_window",
                "effort_level": "low",
                "why_this_matters": "Wall-trained roses sit in a rain shadow.",
                "how_to": "Water deeply at the base once a week.",
            },
        ],
        "tips": ["Mulch in spring."],
    }
    data.update(overrides)
    return data


@pytest.fixture()
def sample_profile_data() -> Dict:
    return make_profile_data()


@pytest.fixture()
def sample_profile(sample_profile_data) -> CareProfile:
    return CareProfile.model_validate(sample_profile_data)


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'garden_care_test.db'}",
        ANTHROPIC_API_KEY="test-key",
    )


# ========================== Database Fixtures ===============================


@pytest.fixture()
async def db_manager(test_settings):
    """Fresh SQLite database with all tables created, one per test."""
    manager = DatabaseConnectionManager(settings=test_settings)
    await manager.initialize()
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture()
async def session(db_manager):
    """AsyncSession committed at the end of the test."""
    session_manager = DatabaseSessionManager(db_manager)
    session_manager.initialize()
    async with session_manager.get_session() as db_session:
        yield db_session


# ========================== Test Doubles ====================================


class FakeContentGenerator(ContentGenerator):
    """Records calls and answers from canned data."""

    provider_name = "fake"

    def __init__(self, profile_data: Optional[Dict] = None, identification: Optional[Dict] = None):
        self.profile_data = profile_data or make_profile_data()
        self.identification = identification or {
            "identified": True,
            "confidence": "verified",
            "plant": {
                "common_name": "Percy Wiseman Rhododendron",
                "scientific_name": "Rhododendron yakushimanum 'Percy Wiseman'",
                "top_level": "Rhododendron",
                "middle_level": "Yakushimanum Hybrid",
                "cultivar_name": "Percy Wiseman",
            },
        }
        self.error: Optional[Exception] = None
        self.raw_result = None
        self.profile_calls: List[tuple] = []
        self.identify_calls: List[str] = []

    async def generate_care_profile(self, plant_name: str, context: GenerationContext, top_level=None):
        self.profile_calls.append((plant_name, context, top_level))
        if self.error is not None:
            raise self.error
        if self.raw_result is not None:
            return self.raw_result
        return CareProfile.model_validate(self.profile_data)

    async def identify_plant(self, query: str) -> PlantIdentification:
        self.identify_calls.append(query)
        if self.error is not None:
            raise self.error
        return PlantIdentification.model_validate(self.identification)


class InMemoryProfileCacheRepository(ProfileCacheRepository):
    """Dict-backed cache store with switchable failures."""

    def __init__(self):
        self.entries: Dict[str, CacheEntry] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.fail_increments = False

    async def get_by_key(self, cache_key: str) -> Optional[CacheEntry]:
        if self.fail_reads:
            raise RepositoryError("read failed", operation="get_by_key")
        return self.entries.get(cache_key)

    async def create(self, cache_key, care_profile, plant_name=None) -> CacheEntry:
        if self.fail_writes:
            raise RepositoryError("write failed", operation="create")
        existing = self.entries.get(cache_key)
        entry = CacheEntry(
            entry_id=existing.entry_id if existing else generate_uuid(),
            cache_key=cache_key,
            plant_name=plant_name,
            care_profile=care_profile,
            hit_count=existing.hit_count if existing else 0,
        )
        self.entries[cache_key] = entry
        return entry

    async def increment_hit_count(self, entry_id: str) -> int:
        if self.fail_increments:
            raise RepositoryError("increment failed", operation="increment_hit_count")
        for key, entry in self.entries.items():
            if entry.entry_id == entry_id:
                self.entries[key] = entry.model_copy(update={"hit_count": entry.hit_count + 1})
                return entry.hit_count + 1
        raise NotFoundError(resource_type="care_profile_cache", resource_id=entry_id)


class FailingPlantTypeRepository(PlantTypeRepository):
    """Plant type store whose reads and writes always fail."""

    async def get_by_identity(self, top_level, middle_level) -> Optional[PlantType]:
        raise RepositoryError("read failed", operation="get_by_identity")

    async def get_by_id(self, plant_type_id) -> Optional[PlantType]:
        raise RepositoryError("read failed", operation="get_by_id")

    async def get_or_create(self, top_level, middle_level, growth_habit=None) -> PlantType:
        raise RepositoryError("write failed", operation="get_or_create")

    async def upsert_profile(self, top_level, middle_level, care_profile, growth_habit=None) -> PlantType:
        raise RepositoryError("write failed", operation="upsert_profile")


@pytest.fixture()
def fake_generator() -> FakeContentGenerator:
    return FakeContentGenerator()


@pytest.fixture()
def memory_cache_repo() -> InMemoryProfileCacheRepository:
    return InMemoryProfileCacheRepository()
