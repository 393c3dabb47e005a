"""Tests for plant type identity resolution and plant registration."""

import pytest

from garden_care.modules.plant_care.domain.models.care_profile import CareProfile
from garden_care.modules.plant_care.domain.services.plant_registration_service import PlantRegistrationService
from garden_care.modules.plant_care.domain.services.type_identity_resolver import TypeIdentityResolver
from garden_care.modules.plant_care.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from garden_care.modules.plant_care.infrastructure.database.plant_type_repository_impl import (
    PlantTypeRepositoryImpl,
)
from garden_care.shared.core.exceptions import ValidationError

from conftest import make_profile_data

OWNER = "owner-1"


@pytest.fixture()
def type_repo(session):
    return PlantTypeRepositoryImpl(session)


@pytest.fixture()
def plant_repo(session):
    return PlantRepositoryImpl(session)


@pytest.fixture()
def resolver(type_repo, plant_repo):
    return TypeIdentityResolver(type_repo, plant_repo)


@pytest.fixture()
def registration(type_repo, plant_repo):
    return PlantRegistrationService(type_repo, plant_repo)


# ========================== Identity resolution =============================


async def test_never_seen_pair_does_not_exist(resolver):
    resolution = await resolver.resolve("Rose", "Climbing Rose", OWNER)
    assert resolution.exists is False
    assert resolution.plant_type_id is None
    assert resolution.existing_cultivar_names == []


async def test_linked_cultivar_is_reported(resolver, registration):
    plant = await registration.register_plant(
        OWNER, "Front wall rose", "Rose", "Climbing Rose", cultivar_name="X"
    )

    resolution = await resolver.resolve("Rose", "Climbing Rose", OWNER)

    assert resolution.exists is True
    assert resolution.plant_type_id == plant.plant_type_id
    assert resolution.existing_cultivar_names == ["X"]


async def test_cultivar_names_are_distinct_and_non_empty(resolver, registration):
    await registration.register_plant(OWNER, "Rose 1", "Rose", "Climbing Rose", cultivar_name="Gertrude Jekyll")
    await registration.register_plant(OWNER, "Rose 2", "Rose", "Climbing Rose", cultivar_name=" Gertrude Jekyll ")
    await registration.register_plant(OWNER, "Rose 3", "Rose", "Climbing Rose", cultivar_name="Iceberg")
    await registration.register_plant(OWNER, "Rose 4", "Rose", "Climbing Rose")

    resolution = await resolver.resolve("Rose", "Climbing Rose", OWNER)

    assert sorted(resolution.existing_cultivar_names) == ["Gertrude Jekyll", "Iceberg"]


async def test_other_owners_plants_are_not_merge_candidates(resolver, registration):
    await registration.register_plant("someone-else", "Rose", "Rose", "Climbing Rose", cultivar_name="X")

    resolution = await resolver.resolve("Rose", "Climbing Rose", OWNER)

    assert resolution.exists is False


async def test_resolver_rejects_blank_levels(resolver):
    with pytest.raises(ValidationError):
        await resolver.resolve("  ", "Climbing Rose", OWNER)


# ========================== Registration ====================================


async def test_linking_reuses_single_type_record(registration, type_repo):
    first = await registration.register_plant(OWNER, "A", "Rose", "Climbing Rose", cultivar_name="A")
    second = await registration.register_plant("owner-2", "B", " Rose ", "Climbing Rose", cultivar_name="B")

    assert first.plant_type_id == second.plant_type_id
    assert (await type_repo.get_by_id(first.plant_type_id)).top_level == "Rose"


async def test_unlinked_plant_has_no_type(registration, type_repo):
    plant = await registration.register_plant(OWNER, "Mystery shrub", link_to_type=False)

    assert plant.plant_type_id is None
    assert plant.is_linked is False


async def test_second_generic_entry_is_rejected(registration, plant_repo):
    first = await registration.register_plant(OWNER, "Lavender", "Lavender", "English Lavender")

    with pytest.raises(ValidationError) as exc_info:
        await registration.register_plant(OWNER, "More lavender", "Lavender", "English Lavender")

    assert exc_info.value.details["field"] == "cultivar_name"
    assert len(await plant_repo.list_linked(OWNER, first.plant_type_id)) == 1


async def test_generic_entry_allowed_alongside_cultivars(registration):
    await registration.register_plant(OWNER, "Hidcote", "Lavender", "English Lavender", cultivar_name="Hidcote")
    plant = await registration.register_plant(OWNER, "Lavender", "Lavender", "English Lavender")

    assert plant.cultivar_name is None


async def test_linking_requires_both_levels(registration):
    with pytest.raises(ValidationError):
        await registration.register_plant(OWNER, "Rose", top_level="Rose")


async def test_registered_plant_round_trips(registration, plant_repo):
    plant = await registration.register_plant(
        OWNER, "Patio tomato", "Tomato", "Cherry Tomato",
        cultivar_name="Sungold", planted_in="pot", area="Patio", growth_stage="seedling",
    )

    stored = await plant_repo.get_by_id(plant.plant_id)

    assert stored.name == "Patio tomato"
    assert stored.planted_in == "pot"
    assert stored.growth_stage == "seedling"
    assert stored.area == "Patio"


# ========================== Type repository =================================


async def test_get_or_create_keeps_existing_record(type_repo):
    profile = CareProfile.model_validate(make_profile_data())
    stored = await type_repo.upsert_profile("Rose", "Climbing Rose", profile, growth_habit=["Climber"])

    fetched = await type_repo.get_or_create("Rose", "Climbing Rose", growth_habit=["Shrub"])

    assert fetched.plant_type_id == stored.plant_type_id
    assert fetched.growth_habit == ["Climber"]
    assert fetched.care_profile == profile


async def test_upsert_profile_updates_existing_record(type_repo):
    created = await type_repo.get_or_create("Rose", "Climbing Rose", growth_habit=["Climber", "Climber"])
    assert created.care_profile is None
    assert created.growth_habit == ["Climber"]

    profile = CareProfile.model_validate(make_profile_data(common_name="Climbing Rose"))
    updated = await type_repo.upsert_profile("Rose", "Climbing Rose", profile)

    assert updated.plant_type_id == created.plant_type_id
    assert updated.care_profile.common_name == "Climbing Rose"
    assert updated.growth_habit == ["Climber"]


async def test_get_by_identity_is_exact(type_repo):
    await type_repo.get_or_create("Rose", "Climbing Rose")

    assert await type_repo.get_by_identity("Rose", "Climbing Rose") is not None
    assert await type_repo.get_by_identity("Rose", "Shrub Rose") is None
