# 📄 File: garden_care/modules/plant_care/infrastructure/external/anthropic_generator.py
# 🧭 Purpose (Layman Explanation):
# Asks Anthropic's Claude to write a plant's care guide (or identify a plant from a search
# phrase) and turns the reply into our structured format, refusing anything malformed.
#
# 🧪 Purpose (Technical Summary):
# ContentGenerator implementation over the Anthropic Messages API. Extracts the first text block,
# strips markdown code fences, parses JSON and validates it into CareProfile / PlantIdentification.
# Every failure (transport, status, empty reply, bad JSON, schema mismatch) becomes GenerationError.
#
# 🔗 Dependencies:
# - garden_care.shared.infrastructure.external_apis.api_client (aiohttp APIClient)
# - garden_care.modules.plant_care.infrastructure.external.prompts
# - pydantic (response validation)
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.dependencies (wiring)
# - ProfileGenerationOrchestrator, PlantIdentificationService

import json
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from garden_care.modules.plant_care.domain.models.care_profile import CareProfile
from garden_care.modules.plant_care.domain.models.identification import PlantIdentification
from garden_care.modules.plant_care.domain.models.plant import GenerationContext
from garden_care.modules.plant_care.domain.services.content_generator import ContentGenerator
from garden_care.modules.plant_care.infrastructure.external.prompts import (
    build_care_profile_prompt,
    build_plant_verification_prompt,
)
from garden_care.shared.config.settings import Settings, get_settings
from garden_care.shared.core.exceptions import ExternalAPIError, GenerationError
from garden_care.shared.infrastructure.external_apis.api_client import APIClient
from garden_care.shared.utils.helpers import strip_code_fences, utc_now
from garden_care.shared.utils.logging import get_logger

logger = get_logger(__name__)

MESSAGES_ENDPOINT = "messages"
IDENTIFICATION_MAX_TOKENS = 1024


class AnthropicContentGenerator(ContentGenerator):
    """
    Content generator backed by Anthropic's Messages API.

    No retries: one failed call is one GenerationError.
    """

    provider_name = "anthropic"

    def __init__(
        self,
        api_client: APIClient,
        model: str,
        max_tokens: int = 2048,
        timeout: Optional[int] = None
    ):
        self._client = api_client
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AnthropicContentGenerator":
        """Build a generator (and its API client) from application settings."""
        config = (settings or get_settings()).get_ai_api_config()
        client = APIClient(
            base_url=config["api_url"],
            api_key=config["api_key"],
            api_name="anthropic",
            timeout=config["timeout"],
            api_version=config["api_version"],
        )
        return cls(
            api_client=client,
            model=config["model"],
            max_tokens=config["max_tokens"],
            timeout=config["timeout"],
        )

    async def generate_care_profile(
        self,
        plant_name: str,
        context: GenerationContext,
        top_level: Optional[str] = None
    ) -> CareProfile:
        prompt = build_care_profile_prompt(plant_name, top_level, context)
        payload = await self._complete(prompt, self.max_tokens, plant_name)
        payload["generated_at"] = utc_now().isoformat()

        try:
            profile = CareProfile.model_validate(payload)
        except PydanticValidationError as e:
            raise GenerationError(
                f"Care profile for '{plant_name}' does not match the expected schema",
                plant_name=plant_name,
                provider=self.provider_name,
                reason=str(e),
            ) from e

        logger.info(
            f"Generated care profile for {plant_name}",
            provider=self.provider_name,
            task_count=len(profile.tasks),
        )
        return profile

    async def identify_plant(self, query: str) -> PlantIdentification:
        prompt = build_plant_verification_prompt(query)
        payload = await self._complete(prompt, IDENTIFICATION_MAX_TOKENS, query)

        try:
            return PlantIdentification.model_validate(payload)
        except PydanticValidationError as e:
            raise GenerationError(
                f"Identification for '{query}' does not match the expected schema",
                plant_name=query,
                provider=self.provider_name,
                reason=str(e),
            ) from e

    async def _complete(self, prompt: str, max_tokens: int, plant_name: str) -> Dict[str, Any]:
        """Send one user message and return the parsed JSON object from the reply."""
        request = {
            "model": self.model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            response = await self._client.post(MESSAGES_ENDPOINT, data=request, timeout=self.timeout)
        except ExternalAPIError as e:
            logger.error(f"Content generation request failed for {plant_name}: {e.message}")
            raise GenerationError(
                f"Content generation request failed: {e.message}",
                plant_name=plant_name,
                provider=self.provider_name,
                reason=e.error_code,
            ) from e

        text = self._extract_text(response)
        if text is None:
            raise GenerationError(
                "No text content in response",
                plant_name=plant_name,
                provider=self.provider_name,
                reason="empty_response",
            )

        try:
            parsed = json.loads(strip_code_fences(text))
        except json.JSONDecodeError as e:
            raise GenerationError(
                "Generated content is not valid JSON",
                plant_name=plant_name,
                provider=self.provider_name,
                reason=str(e),
            ) from e

        if not isinstance(parsed, dict):
            raise GenerationError(
                "Generated content is not a JSON object",
                plant_name=plant_name,
                provider=self.provider_name,
                reason="not_an_object",
            )
        return parsed

    @staticmethod
    def _extract_text(response: Dict[str, Any]) -> Optional[str]:
        for block in response.get("content") or []:
            if isinstance(block, dict) and block.get("type") == "text":
                return block.get("text") or ""
        return None

    async def close(self) -> None:
        await self._client.close()
