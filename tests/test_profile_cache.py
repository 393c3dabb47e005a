"""Tests for the profile cache service and its SQL repository."""

import pytest

from garden_care.modules.plant_care.domain.models.care_profile import CareProfile
from garden_care.modules.plant_care.domain.services.cache_key import derive_cache_key
from garden_care.modules.plant_care.domain.services.plant_registration_service import PlantRegistrationService
from garden_care.modules.plant_care.domain.services.profile_cache import ProfileCache
from garden_care.modules.plant_care.infrastructure.database.profile_cache_repository_impl import (
    ProfileCacheRepositoryImpl,
)
from garden_care.modules.plant_care.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from garden_care.modules.plant_care.infrastructure.database.plant_type_repository_impl import (
    PlantTypeRepositoryImpl,
)
from garden_care.shared.core.exceptions import NotFoundError, StorageError

from conftest import make_profile_data

KEY = derive_cache_key("Climbing Rose", "ground", 8, 1)


# ========================== SQL repository ==================================


async def test_round_trip_returns_profile_unmodified(session, sample_profile):
    cache = ProfileCache(ProfileCacheRepositoryImpl(session))

    stored = await cache.put(KEY, sample_profile, plant_name="Climbing Rose")
    fetched = await cache.get(KEY)

    assert fetched is not None
    assert fetched.entry_id == stored.entry_id
    assert fetched.care_profile == sample_profile
    assert fetched.care_profile.model_dump(mode="json") == sample_profile.model_dump(mode="json")
    assert fetched.hit_count == 0


async def test_sequential_hits_increment_by_one(session, sample_profile):
    cache = ProfileCache(ProfileCacheRepositoryImpl(session))
    await cache.put(KEY, sample_profile)

    first = await cache.fetch(KEY)
    second = await cache.fetch(KEY)

    assert first.hit_count == 1
    assert second.hit_count == 2
    assert (await cache.get(KEY)).hit_count == 2


async def test_get_miss_has_no_side_effects(session):
    repo = ProfileCacheRepositoryImpl(session)
    cache = ProfileCache(repo)

    assert await cache.get(KEY) is None
    assert await cache.fetch(KEY) is None
    assert await repo.get_by_key(KEY) is None


async def test_put_on_existing_key_overwrites_profile(session, sample_profile):
    cache = ProfileCache(ProfileCacheRepositoryImpl(session))
    first = await cache.put(KEY, sample_profile)
    await cache.fetch(KEY)

    replacement = CareProfile.model_validate(make_profile_data(common_name="Rambling Rose"))
    second = await cache.put(KEY, replacement)

    assert second.entry_id == first.entry_id
    assert second.care_profile.common_name == "Rambling Rose"
    assert second.hit_count == 1


async def test_schema_version_bump_leaves_old_entry_orphaned(session, sample_profile):
    cache = ProfileCache(ProfileCacheRepositoryImpl(session))
    old_key = derive_cache_key("Lavender", "pot", 9, 1)
    new_key = derive_cache_key("Lavender", "pot", 9, 2)

    await cache.put(old_key, sample_profile)

    assert await cache.get(new_key) is None
    assert (await cache.get(old_key)).care_profile == sample_profile


async def test_increment_unknown_entry_raises_not_found(session):
    repo = ProfileCacheRepositoryImpl(session)
    with pytest.raises(NotFoundError):
        await repo.increment_hit_count("missing")


# ========================== Failure handling ================================


async def test_read_failure_is_a_miss(memory_cache_repo, sample_profile):
    cache = ProfileCache(memory_cache_repo)
    await cache.put(KEY, sample_profile)
    memory_cache_repo.fail_reads = True

    assert await cache.get(KEY) is None


async def test_put_failure_raises_storage_error(memory_cache_repo, sample_profile):
    memory_cache_repo.fail_writes = True
    cache = ProfileCache(memory_cache_repo)

    with pytest.raises(StorageError) as exc_info:
        await cache.put(KEY, sample_profile)
    assert exc_info.value.details["operation"] == "put"


async def test_hit_count_failure_does_not_fail_read(memory_cache_repo, sample_profile):
    cache = ProfileCache(memory_cache_repo)
    await cache.put(KEY, sample_profile)
    memory_cache_repo.fail_increments = True

    entry = await cache.fetch(KEY)

    assert entry is not None
    assert entry.care_profile == sample_profile
    assert entry.hit_count == 0


async def test_increment_hit_wraps_failures(memory_cache_repo):
    cache = ProfileCache(memory_cache_repo)
    with pytest.raises(StorageError):
        await cache.increment_hit("missing")


# ========================== Shared session ==================================


async def register_rose(session):
    registration = PlantRegistrationService(PlantTypeRepositoryImpl(session), PlantRepositoryImpl(session))
    return await registration.register_plant("owner-1", "My rose", "Rose", "Climbing Rose")


async def test_failed_cache_write_keeps_other_pending_work(session, sample_profile):
    plant = await register_rose(session)
    cache = ProfileCache(ProfileCacheRepositoryImpl(session))

    with pytest.raises(StorageError):
        await cache.put(None, sample_profile)

    plants = PlantRepositoryImpl(session)
    assert await plants.get_by_id(plant.plant_id) is not None

    await session.commit()
    assert (await plants.get_by_id(plant.plant_id)).name == "My rose"
    assert (await cache.put(KEY, sample_profile)).cache_key == KEY


async def test_failed_hit_count_keeps_other_pending_work(session):
    plant = await register_rose(session)
    cache = ProfileCache(ProfileCacheRepositoryImpl(session))

    with pytest.raises(StorageError):
        await cache.increment_hit("missing")

    await session.commit()
    assert await PlantRepositoryImpl(session).get_by_id(plant.plant_id) is not None
