# 📄 File: garden_care/modules/plant_care/domain/services/identification_service.py
# 🧭 Purpose (Layman Explanation):
# Answers "what plant is this?" for a typed name, remembering recent answers for a day so the
# same search doesn't cost another AI call.
# 🧪 Purpose (Technical Summary):
# Identification lookups through the process-local PlantIdentificationCache; only successful
# identifications are cached, generator failures surface as GenerationError.
# 🔗 Dependencies:
# content_generator.py, identification_cache.py, validators, structured logging
# 🔄 Connected Modules / Calls From:
# query_handlers.py (IdentifyPlantQuery), dependencies.py

from garden_care.shared.core.exceptions import GenerationError
from garden_care.shared.utils.logging import get_logger
from garden_care.shared.utils.validators import require_text
from ..models.identification import PlantIdentification
from .content_generator import ContentGenerator

logger = get_logger(__name__)

MIN_QUERY_LENGTH = 2


class PlantIdentificationService:
    """Identifies free-text plant queries with a short-lived cache in front of the generator."""

    def __init__(self, generator: ContentGenerator, cache):
        """
        Args:
            generator: External content generator
            cache: PlantIdentificationCache (explicit, per-process instance)
        """
        self.generator = generator
        self.cache = cache

    async def identify(self, query: str) -> PlantIdentification:
        """
        Identify the plant a query refers to.

        Raises:
            ValidationError: If the trimmed query is shorter than 2 characters
            GenerationError: If the generator fails
        """
        query = require_text(query, "query", min_length=MIN_QUERY_LENGTH)

        cached = self.cache.get(query)
        if cached is not None:
            return cached

        provider = getattr(self.generator, "provider_name", "generator")
        try:
            result = await self.generator.identify_plant(query)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(
                f"Plant identification failed for '{query}'",
                plant_name=query,
                provider=provider,
                reason=str(e)
            ) from e

        if result.identified:
            self.cache.set(query, result)
        else:
            logger.info("Plant not identified; result not cached", query=query, reason=result.reason)

        return result
