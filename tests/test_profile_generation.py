"""Tests for the care profile orchestrator."""

import pytest

from garden_care.modules.plant_care.domain.models.plant import GenerationContext, PlantState
from garden_care.modules.plant_care.domain.services.cache_key import derive_cache_key
from garden_care.modules.plant_care.domain.services.profile_cache import ProfileCache
from garden_care.modules.plant_care.domain.services.profile_generation_service import (
    ProfileGenerationOrchestrator,
)
from garden_care.modules.plant_care.infrastructure.database.plant_type_repository_impl import (
    PlantTypeRepositoryImpl,
)
from garden_care.modules.plant_care.infrastructure.database.profile_cache_repository_impl import (
    ProfileCacheRepositoryImpl,
)
from garden_care.shared.core.exceptions import GenerationError, ValidationError

from conftest import FailingPlantTypeRepository, make_profile_data


@pytest.fixture()
def orchestrator(memory_cache_repo, fake_generator):
    return ProfileGenerationOrchestrator(ProfileCache(memory_cache_repo), fake_generator)


# ========================== Per-request profiles ============================


async def test_miss_generates_and_caches(orchestrator, fake_generator, memory_cache_repo):
    context = GenerationContext(planted_in="ground", climate_zone=8)

    profile = await orchestrator.get_or_generate_profile("Climbing Rose 'New Dawn'", context, top_level_hint="Rose")

    assert profile.common_name == "Climbing Rose"
    assert len(fake_generator.profile_calls) == 1
    name, passed_context, hint = fake_generator.profile_calls[0]
    assert name == "Climbing Rose"
    assert hint == "Rose"
    assert derive_cache_key("Climbing Rose", "ground", 8, 1) in memory_cache_repo.entries


async def test_hit_skips_generator_and_counts(orchestrator, fake_generator, memory_cache_repo):
    context = {"planted_in": "pot"}

    first = await orchestrator.get_or_generate_profile("Climbing Rose", context)
    second = await orchestrator.get_or_generate_profile("  climbing rose ", context)

    assert second == first
    assert len(fake_generator.profile_calls) == 1
    entry = memory_cache_repo.entries[derive_cache_key("Climbing Rose", "pot", None, 1)]
    assert entry.hit_count == 1


async def test_different_context_is_a_different_entry(orchestrator, fake_generator):
    await orchestrator.get_or_generate_profile("Rose", GenerationContext(planted_in="pot"))
    await orchestrator.get_or_generate_profile("Rose", GenerationContext(planted_in="ground"))

    assert len(fake_generator.profile_calls) == 2


async def test_location_resolves_zone_before_key(orchestrator, fake_generator, memory_cache_repo):
    await orchestrator.get_or_generate_profile("Rose", GenerationContext(location="Penzance"))

    _, passed_context, _ = fake_generator.profile_calls[0]
    assert passed_context.climate_zone == 9
    assert derive_cache_key("Rose", None, 9, 1) in memory_cache_repo.entries


async def test_schema_version_bump_regenerates(memory_cache_repo, fake_generator):
    cache = ProfileCache(memory_cache_repo)
    v1 = ProfileGenerationOrchestrator(cache, fake_generator, schema_version=1)
    v2 = ProfileGenerationOrchestrator(cache, fake_generator, schema_version=2)

    await v1.get_or_generate_profile("Rose", GenerationContext())
    await v2.get_or_generate_profile("Rose", GenerationContext())

    assert len(fake_generator.profile_calls) == 2
    assert len(memory_cache_repo.entries) == 2


async def test_cache_write_failure_still_returns_profile(orchestrator, memory_cache_repo):
    memory_cache_repo.fail_writes = True

    profile = await orchestrator.get_or_generate_profile("Rose", GenerationContext())

    assert profile.common_name == "Climbing Rose"
    assert memory_cache_repo.entries == {}


async def test_cache_read_failure_is_treated_as_miss(orchestrator, fake_generator, memory_cache_repo):
    await orchestrator.get_or_generate_profile("Rose", GenerationContext())
    memory_cache_repo.fail_reads = True

    await orchestrator.get_or_generate_profile("Rose", GenerationContext())

    assert len(fake_generator.profile_calls) == 2


async def test_hit_count_failure_still_serves_hit(orchestrator, fake_generator, memory_cache_repo):
    await orchestrator.get_or_generate_profile("Rose", GenerationContext())
    memory_cache_repo.fail_increments = True

    profile = await orchestrator.get_or_generate_profile("Rose", GenerationContext())

    assert profile.common_name == "Climbing Rose"
    assert len(fake_generator.profile_calls) == 1


@pytest.mark.parametrize(
    "raw_name, context",
    [
        ("", GenerationContext()),
        ("   ", GenerationContext()),
        (None, GenerationContext()),
        ("Rose", None),
        ("Rose", {"current_month": 13}),
        ("Rose", {"climate_zone": 6}),
        ("Rose", {"planted_in": "window_box"}),
    ],
)
async def test_invalid_input_rejected_before_side_effects(orchestrator, fake_generator, memory_cache_repo, raw_name, context):
    with pytest.raises(ValidationError):
        await orchestrator.get_or_generate_profile(raw_name, context)

    assert fake_generator.profile_calls == []
    assert memory_cache_repo.entries == {}


async def test_generator_failure_is_not_cached(orchestrator, fake_generator, memory_cache_repo):
    fake_generator.error = RuntimeError("provider down")

    with pytest.raises(GenerationError) as exc_info:
        await orchestrator.get_or_generate_profile("Rose", GenerationContext())

    assert exc_info.value.details["provider"] == "fake"
    assert memory_cache_repo.entries == {}


async def test_generation_error_passes_through(orchestrator, fake_generator):
    fake_generator.error = GenerationError("bad json", reason="json")

    with pytest.raises(GenerationError) as exc_info:
        await orchestrator.get_or_generate_profile("Rose", GenerationContext())

    assert exc_info.value.message == "bad json"


async def test_malformed_generator_output_is_generation_error(orchestrator, fake_generator, memory_cache_repo):
    fake_generator.raw_result = {"common_name": "Rose"}

    with pytest.raises(GenerationError):
        await orchestrator.get_or_generate_profile("Rose", GenerationContext())

    assert memory_cache_repo.entries == {}


async def test_dict_output_is_validated(orchestrator, fake_generator):
    fake_generator.raw_result = make_profile_data(common_name="Rose")

    profile = await orchestrator.get_or_generate_profile("Rose", GenerationContext())

    assert profile.common_name == "Rose"


# ========================== Plant type profiles =============================


@pytest.fixture()
def type_orchestrator(session, fake_generator):
    return ProfileGenerationOrchestrator(
        ProfileCache(ProfileCacheRepositoryImpl(session)),
        fake_generator,
        plant_type_repository=PlantTypeRepositoryImpl(session),
    )


async def test_type_profile_generated_then_reused(type_orchestrator, fake_generator):
    first = await type_orchestrator.get_or_generate_type_profile("Rose", "Climbing Rose", growth_habit=["Climber"])
    second = await type_orchestrator.get_or_generate_type_profile("Rose", "Climbing Rose")

    assert first.reused is False
    assert first.plant_type is not None
    assert first.plant_type.growth_habit == ["Climber"]
    assert second.reused is True
    assert second.plant_type.plant_type_id == first.plant_type.plant_type_id
    assert second.care_profile == first.care_profile
    assert len(fake_generator.profile_calls) == 1
    assert fake_generator.profile_calls[0][0] == "Climbing Rose"
    assert fake_generator.profile_calls[0][2] == "Rose"


async def test_existing_record_without_profile_is_filled(type_orchestrator, session, fake_generator):
    record = await PlantTypeRepositoryImpl(session).get_or_create("Rose", "Climbing Rose")

    result = await type_orchestrator.get_or_generate_type_profile("Rose", "Climbing Rose")

    assert result.reused is False
    assert result.plant_type.plant_type_id == record.plant_type_id
    assert result.plant_type.care_profile is not None


async def test_plant_state_forces_regeneration(type_orchestrator, fake_generator):
    await type_orchestrator.get_or_generate_type_profile("Rose", "Climbing Rose")
    context = GenerationContext(plant_state=PlantState(growth_stage="seedling", environment="indoor"))
    fake_generator.profile_data = make_profile_data(common_name="Seedling Rose")

    result = await type_orchestrator.get_or_generate_type_profile("Rose", "Climbing Rose", context)

    assert result.reused is False
    assert result.care_profile.common_name == "Seedling Rose"
    assert result.plant_type.care_profile.common_name == "Seedling Rose"
    assert len(fake_generator.profile_calls) == 2


async def test_type_store_failure_still_returns_profile(memory_cache_repo, fake_generator):
    orchestrator = ProfileGenerationOrchestrator(
        ProfileCache(memory_cache_repo),
        fake_generator,
        plant_type_repository=FailingPlantTypeRepository(),
    )

    result = await orchestrator.get_or_generate_type_profile("Rose", "Climbing Rose")

    assert result.plant_type is None
    assert result.reused is False
    assert result.care_profile.common_name == "Climbing Rose"


async def test_type_profile_requires_both_levels(type_orchestrator, fake_generator):
    with pytest.raises(ValidationError):
        await type_orchestrator.get_or_generate_type_profile("Rose", " ")
    assert fake_generator.profile_calls == []


async def test_type_profile_without_repository_is_misconfigured(orchestrator):
    with pytest.raises(RuntimeError):
        await orchestrator.get_or_generate_type_profile("Rose", "Climbing Rose")
