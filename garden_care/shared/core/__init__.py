"""
Core utilities package for the garden care core.
Provides the shared exception hierarchy.
"""

from .exceptions import (
    GardenCareException,
    ValidationError,
    NotFoundError,
    GenerationError,
    StorageError,
    RepositoryError,
    ExternalAPIError,
    APITimeoutError,
    APIAuthenticationError,
    RateLimitError,
)

__all__ = [
    "GardenCareException",
    "ValidationError",
    "NotFoundError",
    "GenerationError",
    "StorageError",
    "RepositoryError",
    "ExternalAPIError",
    "APITimeoutError",
    "APIAuthenticationError",
    "RateLimitError",
]
