"""End-to-end tests of the application handlers, wired through the dependency factories."""

from datetime import date

import pytest

from garden_care.modules.plant_care.application.commands import (
    GenerateCareProfileCommand,
    GenerateTypeProfileCommand,
    RegisterPlantCommand,
)
from garden_care.modules.plant_care.application.queries import (
    CheckPlantTypeQuery,
    IdentifyPlantQuery,
    InferGrowthStageQuery,
    ResolveClimateZoneQuery,
)
from garden_care.modules.plant_care.application.handlers import InferGrowthStageQueryHandler
from garden_care.modules.plant_care.dependencies import (
    create_care_profile_handler,
    create_check_plant_type_handler,
    create_climate_zone_handler,
    create_content_generator,
    create_growth_stage_handler,
    create_identification_cache,
    create_identify_plant_handler,
    create_register_plant_handler,
    create_type_profile_handler,
)
from garden_care.shared.core.exceptions import GenerationError, ValidationError


# ========================== Care profiles ===================================


async def test_care_profile_command_caches_between_calls(session, fake_generator, test_settings):
    handler = create_care_profile_handler(session, fake_generator, test_settings)
    command = GenerateCareProfileCommand(
        plant_name="English Lavender",
        context={"planted_in": "pot", "location": "Edinburgh"},
    )

    first = await handler.handle(command)
    second = await handler.handle(command)

    assert first["care_profile"]["common_name"] == "Climbing Rose"
    assert second == first
    assert len(fake_generator.profile_calls) == 1
    assert fake_generator.profile_calls[0][0] == "Lavender"


async def test_care_profile_command_surfaces_generation_error(session, fake_generator, test_settings):
    fake_generator.error = GenerationError("provider down", provider="fake")
    handler = create_care_profile_handler(session, fake_generator, test_settings)

    with pytest.raises(GenerationError):
        await handler.handle(GenerateCareProfileCommand(plant_name="Rose"))


async def test_type_profile_command_reuses_stored_profile(session, fake_generator, test_settings):
    handler = create_type_profile_handler(session, fake_generator, test_settings)
    command = GenerateTypeProfileCommand(top_level="Rose", middle_level="Climbing Rose", growth_habit=["Climber"])

    first = await handler.handle(command)
    second = await handler.handle(command)

    assert first["reused"] is False
    assert first["plant_type_id"] is not None
    assert second["reused"] is True
    assert second["plant_type_id"] == first["plant_type_id"]
    assert len(fake_generator.profile_calls) == 1


# ========================== Registration & merge check ======================


async def test_register_then_check_plant_type(session):
    register = create_register_plant_handler(session)
    check = create_check_plant_type_handler(session)

    before = await check.handle(CheckPlantTypeQuery(top_level="Rose", middle_level="Climbing Rose", owner_id="u1"))
    assert before["exists"] is False

    first = await register.handle(RegisterPlantCommand(
        owner_id="u1",
        name="Front door rose",
        top_level="Rose",
        middle_level="Climbing Rose",
        cultivar_name="New Dawn",
        planted_in="ground",
    ))
    second = await register.handle(RegisterPlantCommand(
        owner_id="u1",
        name="Arch rose",
        top_level=" Rose ",
        middle_level="Climbing Rose",
        cultivar_name="Gertrude Jekyll",
    ))

    assert first["linked"] is True
    assert second["plant_type_id"] == first["plant_type_id"]
    assert first["plant"]["planted_in"] == "ground"

    after = await check.handle(CheckPlantTypeQuery(top_level="Rose", middle_level="Climbing Rose", owner_id="u1"))
    assert after["exists"] is True
    assert after["plant_type_id"] == first["plant_type_id"]
    assert sorted(after["existing_cultivar_names"]) == ["Gertrude Jekyll", "New Dawn"]

    other_owner = await check.handle(CheckPlantTypeQuery(top_level="Rose", middle_level="Climbing Rose", owner_id="u2"))
    assert other_owner["exists"] is False


async def test_second_generic_entry_is_rejected(session):
    register = create_register_plant_handler(session)
    command = RegisterPlantCommand(owner_id="u1", name="Rose", top_level="Rose", middle_level="Shrub Rose")

    await register.handle(command)
    with pytest.raises(ValidationError) as exc_info:
        await register.handle(command.model_copy(update={"name": "Another rose"}))

    assert exc_info.value.details["field"] == "cultivar_name"


async def test_separate_entry_is_unlinked(session):
    register = create_register_plant_handler(session)

    result = await register.handle(RegisterPlantCommand(
        owner_id="u1",
        name="Mystery shrub",
        top_level="Shrub",
        middle_level="Unknown Shrub",
        link_to_type=False,
    ))

    assert result["linked"] is False
    assert result["plant_type_id"] is None


async def test_linked_registration_requires_type_levels(session):
    register = create_register_plant_handler(session)

    with pytest.raises(ValidationError):
        await register.handle(RegisterPlantCommand(owner_id="u1", name="Rose", top_level="Rose"))


# ========================== Stateless queries ===============================


async def test_growth_stage_is_inferred_for_month():
    handler = InferGrowthStageQueryHandler(today=lambda: date(2024, 3, 1))

    summer = await handler.handle(InferGrowthStageQuery(top_level="Rose", middle_level="Climbing Rose", month=7))
    winter = await handler.handle(InferGrowthStageQuery(top_level="Rose", middle_level="Climbing Rose", month=1))

    assert summer["growth_stage"] == "flowering"
    assert summer["source"] == "inferred"
    assert winter["growth_stage"] == "dormant"
    assert winter["inferred"]["category"] == "rose"


async def test_growth_stage_override_wins():
    handler = InferGrowthStageQueryHandler(today=lambda: date(2024, 7, 1))

    young = await handler.handle(InferGrowthStageQuery(top_level="Rose", middle_level="Climbing Rose", life_stage="young"))
    established = await handler.handle(InferGrowthStageQuery(
        top_level="Rose",
        middle_level="Climbing Rose",
        life_stage="established",
        seasonal_state="dormant",
    ))

    assert young["growth_stage"] == "juvenile"
    assert young["source"] == "override"
    assert young["inferred"]["stage"] == "flowering"
    assert established["growth_stage"] == "dormant"


async def test_climate_zone_query():
    handler = create_climate_zone_handler()

    result = await handler.handle(ResolveClimateZoneQuery(location="  Penzance "))
    unknown = await handler.handle(ResolveClimateZoneQuery(location=None))

    assert result["location"] == "Penzance"
    assert result["climate_zone"] == 9
    assert unknown["climate_zone"] == 8


async def test_identify_plant_query_uses_shared_cache(fake_generator, test_settings):
    cache = create_identification_cache(test_settings)
    handler = create_identify_plant_handler(fake_generator, cache)

    first = await handler.handle(IdentifyPlantQuery(query="Percy Wiseman"))
    second = await handler.handle(IdentifyPlantQuery(query="percy wiseman "))

    assert first["identified"] is True
    assert first["plant"]["top_level"] == "Rhododendron"
    assert second == first
    assert fake_generator.identify_calls == ["Percy Wiseman"]


async def test_growth_stage_handler_factory_defaults_to_today():
    result = await create_growth_stage_handler().handle(InferGrowthStageQuery(top_level="Herb", middle_level="Basil"))

    assert result["source"] == "inferred"
    assert result["inferred"]["month"] == date.today().month


def test_content_generator_factory_builds_anthropic_client(test_settings):
    generator = create_content_generator(test_settings)

    assert generator.provider_name == "anthropic"
    assert generator.model == test_settings.AI_MODEL
    assert generator._client.get_stats()["stats"]["total_requests"] == 0
