# 📄 File: garden_care/modules/plant_care/domain/services/profile_generation_service.py
# 🧭 Purpose (Layman Explanation):
# The conductor for getting a care guide: tidy the plant name, check whether we already have a
# matching guide, and only if not ask the AI to write one and remember it for next time. If
# remembering fails, the gardener still gets their guide.
# 🧪 Purpose (Technical Summary):
# ProfileGenerationOrchestrator: validate -> normalize -> derive key -> cache get (best-effort hit
# count) -> on miss, generate -> best-effort cache put -> return. Plus the plant-type variant
# with a pre-cache check on the type record and a conflict-aware upsert. No retry, no
# single-flight.
# 🔗 Dependencies:
# name_normalizer.py, cache_key.py, climate_zone_resolver.py, profile_cache.py,
# content_generator.py, plant_type_repository.py, validators, structured logging
# 🔄 Connected Modules / Calls From:
# command_handlers.py, dependencies.py

import time
from typing import Any, Callable, List, Optional, Union

from pydantic import BaseModel

from garden_care.shared.core.exceptions import (
    GenerationError,
    GardenCareException,
    StorageError,
    ValidationError,
)
from garden_care.shared.utils.logging import get_logger
from garden_care.shared.utils.validators import require_text, validate_model, validate_month
from ..models.care_profile import CareProfile
from ..models.climate_zone import MAX_CLIMATE_ZONE, MIN_CLIMATE_ZONE
from ..models.plant import GenerationContext
from ..models.plant_type import PlantType
from ..repositories.plant_type_repository import PlantTypeRepository
from .cache_key import derive_cache_key
from .climate_zone_resolver import resolve_climate_zone
from .content_generator import ContentGenerator
from .name_normalizer import NameNormalizer
from .profile_cache import ProfileCache

logger = get_logger(__name__)


class TypeProfileResult(BaseModel):
    """
    Outcome of getting a plant type's shared care profile.

    plant_type is None when the profile was generated but the record
    could not be saved.
    """

    plant_type: Optional[PlantType] = None
    care_profile: CareProfile
    reused: bool = False


class ProfileGenerationOrchestrator:
    """
    Composes normalization, key derivation, the profile cache and the
    external generator.

    Errors:
    - ValidationError: missing or malformed input, raised before any side effect
    - GenerationError: generator failure or malformed output; never cached
    - StorageError: logged and swallowed; a generated profile is still returned
    """

    def __init__(
        self,
        profile_cache: ProfileCache,
        generator: ContentGenerator,
        plant_type_repository: Optional[PlantTypeRepository] = None,
        normalizer: Optional[NameNormalizer] = None,
        schema_version: int = 1,
        zone_resolver: Callable[[Any], int] = resolve_climate_zone
    ):
        self.profile_cache = profile_cache
        self.generator = generator
        self.plant_type_repository = plant_type_repository
        self.normalizer = normalizer or NameNormalizer()
        self.schema_version = schema_version
        self.zone_resolver = zone_resolver

    # =========================================================================
    # PER-REQUEST PROFILES (content-addressable cache)
    # =========================================================================

    async def get_or_generate_profile(
        self,
        raw_name: str,
        context: Union[GenerationContext, dict, None],
        top_level_hint: Optional[str] = None
    ) -> CareProfile:
        """
        Return the care profile for a plant, generating it only on a cache miss.

        Args:
            raw_name: Plant name as typed by the user
            context: Planting context (GenerationContext or dict)
            top_level_hint: Optional broad type passed to the generator

        Returns:
            CareProfile (cached or freshly generated)

        Raises:
            ValidationError: If raw_name or context is missing or invalid
            GenerationError: If the generator fails on a cache miss
        """
        raw_name = require_text(raw_name, "plant_name")
        context = self._prepare_context(context)

        normalized_name = self.normalizer.normalize(raw_name)
        cache_key = derive_cache_key(
            normalized_name,
            context.planted_in,
            context.climate_zone,
            self.schema_version
        )

        entry = await self.profile_cache.get(cache_key)
        if entry is not None:
            await self.profile_cache.record_hit(entry)
            return entry.care_profile

        care_profile = await self._generate(normalized_name, context, top_level_hint)

        try:
            await self.profile_cache.put(cache_key, care_profile, plant_name=normalized_name)
        except StorageError as e:
            logger.warning(
                f"Generated care profile not cached: {e.message}",
                cache_key=cache_key,
                plant_name=normalized_name,
                exc_info=True
            )

        return care_profile

    # =========================================================================
    # PLANT TYPE PROFILES (shared per canonical type)
    # =========================================================================

    async def get_or_generate_type_profile(
        self,
        top_level: str,
        middle_level: str,
        context: Union[GenerationContext, dict, None] = None,
        growth_habit: Optional[List[str]] = None
    ) -> TypeProfileResult:
        """
        Return the shared care profile of a plant type.

        An existing record that already carries a profile is reused without
        calling the generator, unless the context carries a plant_state
        (state-specific regeneration). Otherwise the profile is generated
        and upserted on (top_level, middle_level).

        Raises:
            ValidationError: If either level is blank or the context is invalid
            GenerationError: If generation fails
        """
        if self.plant_type_repository is None:
            raise RuntimeError("Plant type repository not configured")

        top_level = require_text(top_level, "top_level")
        middle_level = require_text(middle_level, "middle_level")
        context = self._prepare_context(context if context is not None else GenerationContext())

        existing = await self._find_plant_type(top_level, middle_level)
        if existing is not None and existing.care_profile is not None and context.plant_state is None:
            logger.info(
                "Reusing plant type care profile",
                plant_type_id=existing.plant_type_id,
                top_level=top_level,
                middle_level=middle_level
            )
            return TypeProfileResult(plant_type=existing, care_profile=existing.care_profile, reused=True)

        care_profile = await self._generate(middle_level, context, top_level)

        plant_type: Optional[PlantType] = None
        try:
            plant_type = await self.plant_type_repository.upsert_profile(
                top_level, middle_level, care_profile, growth_habit=growth_habit
            )
        except Exception as e:
            error = StorageError(
                f"Failed to save plant type profile: {e}",
                operation="upsert_profile",
                key=f"{top_level}|{middle_level}"
            )
            logger.warning(error.message, extra=error.details, exc_info=True)

        return TypeProfileResult(plant_type=plant_type, care_profile=care_profile, reused=False)

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _prepare_context(self, context: Union[GenerationContext, dict, None]) -> GenerationContext:
        if context is None:
            raise ValidationError("Generation context is required", field="context", constraint="required")

        context = validate_model(GenerationContext, context)
        validate_month(context.current_month, field="current_month")

        if context.climate_zone is not None:
            zone = context.climate_zone
            if isinstance(zone, bool) or not MIN_CLIMATE_ZONE <= zone <= MAX_CLIMATE_ZONE:
                raise ValidationError(
                    f"Climate zone must be between {MIN_CLIMATE_ZONE} and {MAX_CLIMATE_ZONE}",
                    field="climate_zone",
                    value=zone,
                    constraint="7..10",
                )
        elif context.location and context.location.strip():
            context = context.model_copy(update={"climate_zone": int(self.zone_resolver(context.location))})

        return context

    async def _find_plant_type(self, top_level: str, middle_level: str) -> Optional[PlantType]:
        try:
            return await self.plant_type_repository.get_by_identity(top_level, middle_level)
        except Exception as e:
            logger.warning(
                f"Plant type lookup failed, treating as absent: {e}",
                top_level=top_level,
                middle_level=middle_level,
                exc_info=True
            )
            return None

    async def _generate(
        self,
        plant_name: str,
        context: GenerationContext,
        top_level: Optional[str]
    ) -> CareProfile:
        provider = getattr(self.generator, "provider_name", "generator")
        logger.info("Generating care profile", plant_name=plant_name, provider=provider)
        start = time.perf_counter()

        try:
            result = await self.generator.generate_care_profile(plant_name, context, top_level)
        except GenerationError:
            logger.performance.log_generation(provider, plant_name, (time.perf_counter() - start) * 1000, False)
            logger.error(f"Care profile generation failed for {plant_name}", provider=provider)
            raise
        except Exception as e:
            logger.performance.log_generation(provider, plant_name, (time.perf_counter() - start) * 1000, False)
            logger.error(f"Care profile generation failed for {plant_name}: {e}", provider=provider)
            raise GenerationError(
                f"Care profile generation failed for {plant_name}",
                plant_name=plant_name,
                provider=provider,
                reason=str(e)
            ) from e

        duration_ms = (time.perf_counter() - start) * 1000
        if isinstance(result, CareProfile):
            logger.performance.log_generation(provider, plant_name, duration_ms, True)
            return result

        try:
            profile = validate_model(CareProfile, result)
        except GardenCareException as e:
            logger.performance.log_generation(provider, plant_name, duration_ms, False, extra={'reason': 'malformed'})
            raise GenerationError(
                f"Generator returned a malformed care profile for {plant_name}",
                plant_name=plant_name,
                provider=provider,
                reason=e.message
            ) from e

        logger.performance.log_generation(provider, plant_name, duration_ms, True)
        return profile
