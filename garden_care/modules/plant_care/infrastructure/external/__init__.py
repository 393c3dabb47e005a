"""
Plant care external integrations (generative content provider).
"""

from .anthropic_generator import AnthropicContentGenerator
from .prompts import build_care_profile_prompt, build_plant_verification_prompt

__all__ = [
    "AnthropicContentGenerator",
    "build_care_profile_prompt",
    "build_plant_verification_prompt",
]
