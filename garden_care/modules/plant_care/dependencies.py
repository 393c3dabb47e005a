# 📄 File: garden_care/modules/plant_care/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Puts the plant care pieces together: database stores, caches, the AI writer and the services
# that use them, so callers get ready-to-use handlers.
#
# 🧪 Purpose (Technical Summary):
# Explicit factory functions wiring repositories, caches, generator, domain services and
# application handlers from an AsyncSession and Settings. The only process-wide object is the
# identification cache, which callers create once and pass in.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession)
# - garden_care.shared.config.settings
# - plant_care domain, application and infrastructure packages
#
# 🔄 Connected Modules / Calls From:
# - An outer HTTP layer or worker, per request/unit of work
# - tests

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from garden_care.modules.plant_care.application.handlers.command_handlers import (
    GenerateCareProfileCommandHandler,
    GenerateTypeProfileCommandHandler,
    RegisterPlantCommandHandler,
)
from garden_care.modules.plant_care.application.handlers.query_handlers import (
    CheckPlantTypeQueryHandler,
    IdentifyPlantQueryHandler,
    InferGrowthStageQueryHandler,
    ResolveClimateZoneQueryHandler,
)
from garden_care.modules.plant_care.domain.services.content_generator import ContentGenerator
from garden_care.modules.plant_care.domain.services.identification_service import PlantIdentificationService
from garden_care.modules.plant_care.domain.services.plant_registration_service import PlantRegistrationService
from garden_care.modules.plant_care.domain.services.profile_cache import ProfileCache
from garden_care.modules.plant_care.domain.services.profile_generation_service import (
    ProfileGenerationOrchestrator,
)
from garden_care.modules.plant_care.domain.services.type_identity_resolver import TypeIdentityResolver
from garden_care.modules.plant_care.infrastructure.cache.identification_cache import PlantIdentificationCache
from garden_care.modules.plant_care.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from garden_care.modules.plant_care.infrastructure.database.plant_type_repository_impl import (
    PlantTypeRepositoryImpl,
)
from garden_care.modules.plant_care.infrastructure.database.profile_cache_repository_impl import (
    ProfileCacheRepositoryImpl,
)
from garden_care.modules.plant_care.infrastructure.external.anthropic_generator import AnthropicContentGenerator
from garden_care.shared.config.settings import Settings, get_settings


# =============================================================================
# INFRASTRUCTURE
# =============================================================================

def create_content_generator(settings: Optional[Settings] = None) -> ContentGenerator:
    return AnthropicContentGenerator.from_settings(settings or get_settings())


def create_identification_cache(settings: Optional[Settings] = None) -> PlantIdentificationCache:
    """Create the process-wide identification cache (call once, share the result)."""
    settings = settings or get_settings()
    return PlantIdentificationCache(
        ttl_seconds=settings.IDENTIFICATION_CACHE_TTL_SECONDS,
        max_size=settings.IDENTIFICATION_CACHE_MAX_SIZE,
    )


# =============================================================================
# DOMAIN SERVICES
# =============================================================================

def create_profile_cache(session: AsyncSession) -> ProfileCache:
    return ProfileCache(ProfileCacheRepositoryImpl(session))


def create_orchestrator(
    session: AsyncSession,
    generator: ContentGenerator,
    settings: Optional[Settings] = None
) -> ProfileGenerationOrchestrator:
    settings = settings or get_settings()
    return ProfileGenerationOrchestrator(
        profile_cache=create_profile_cache(session),
        generator=generator,
        plant_type_repository=PlantTypeRepositoryImpl(session),
        schema_version=settings.PROFILE_CACHE_SCHEMA_VERSION,
    )


def create_type_identity_resolver(session: AsyncSession) -> TypeIdentityResolver:
    return TypeIdentityResolver(PlantTypeRepositoryImpl(session), PlantRepositoryImpl(session))


def create_registration_service(session: AsyncSession) -> PlantRegistrationService:
    return PlantRegistrationService(PlantTypeRepositoryImpl(session), PlantRepositoryImpl(session))


# =============================================================================
# APPLICATION HANDLERS
# =============================================================================

def create_care_profile_handler(
    session: AsyncSession,
    generator: ContentGenerator,
    settings: Optional[Settings] = None
) -> GenerateCareProfileCommandHandler:
    return GenerateCareProfileCommandHandler(create_orchestrator(session, generator, settings))


def create_type_profile_handler(
    session: AsyncSession,
    generator: ContentGenerator,
    settings: Optional[Settings] = None
) -> GenerateTypeProfileCommandHandler:
    return GenerateTypeProfileCommandHandler(create_orchestrator(session, generator, settings))


def create_register_plant_handler(session: AsyncSession) -> RegisterPlantCommandHandler:
    return RegisterPlantCommandHandler(create_registration_service(session))


def create_check_plant_type_handler(session: AsyncSession) -> CheckPlantTypeQueryHandler:
    return CheckPlantTypeQueryHandler(create_type_identity_resolver(session))


def create_growth_stage_handler() -> InferGrowthStageQueryHandler:
    return InferGrowthStageQueryHandler()


def create_climate_zone_handler() -> ResolveClimateZoneQueryHandler:
    return ResolveClimateZoneQueryHandler()


def create_identify_plant_handler(
    generator: ContentGenerator,
    cache: PlantIdentificationCache
) -> IdentifyPlantQueryHandler:
    return IdentifyPlantQueryHandler(PlantIdentificationService(generator, cache))
