"""
In-process caches.
"""

from .identification_cache import PlantIdentificationCache

__all__ = ["PlantIdentificationCache"]
