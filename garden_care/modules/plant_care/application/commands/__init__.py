"""
Plant Care Commands

Write operations of the plant care module:
- GenerateCareProfileCommand: per-request care profile (content-addressable cache)
- GenerateTypeProfileCommand: shared plant type care profile
- RegisterPlantCommand: plant instance registration
"""

from .generate_care_profile import GenerateCareProfileCommand
from .generate_type_profile import GenerateTypeProfileCommand
from .register_plant import RegisterPlantCommand

__all__ = [
    "GenerateCareProfileCommand",
    "GenerateTypeProfileCommand",
    "RegisterPlantCommand",
]
