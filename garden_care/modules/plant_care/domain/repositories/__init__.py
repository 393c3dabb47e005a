"""
Plant care repository interfaces.
"""

from .plant_repository import PlantRepository
from .plant_type_repository import PlantTypeRepository
from .profile_cache_repository import ProfileCacheRepository

__all__ = [
    "PlantRepository",
    "PlantTypeRepository",
    "ProfileCacheRepository",
]
