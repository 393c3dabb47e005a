"""
Plant care SQLAlchemy models and repository implementations.
"""

from .models import CareProfileCacheModel, PlantModel, PlantTypeModel
from .plant_repository_impl import PlantRepositoryImpl
from .plant_type_repository_impl import PlantTypeRepositoryImpl
from .profile_cache_repository_impl import ProfileCacheRepositoryImpl

__all__ = [
    "CareProfileCacheModel",
    "PlantModel",
    "PlantTypeModel",
    "PlantRepositoryImpl",
    "PlantTypeRepositoryImpl",
    "ProfileCacheRepositoryImpl",
]
