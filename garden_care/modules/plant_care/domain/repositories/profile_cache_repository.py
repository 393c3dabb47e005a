# 📄 File: garden_care/modules/plant_care/domain/repositories/profile_cache_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for remembering generated care guides by their fingerprint, finding them
# again, and counting how often each one is reused.
# 🧪 Purpose (Technical Summary):
# Repository interface for the content-addressable care profile record store.
# 🔗 Dependencies:
# Domain models (CacheEntry, CareProfile), typing, abc
# 🔄 Connected Modules / Calls From:
# profile_cache.py, profile_cache_repository_impl.py

from abc import ABC, abstractmethod
from typing import Optional

from ..models.cache_entry import CacheEntry
from ..models.care_profile import CareProfile


class ProfileCacheRepository(ABC):
    """
    Repository interface for cached care profiles.

    Implementation Notes:
    - Entries are append-only; nothing here deletes or expires them
    - Methods return domain entities (CacheEntry), not database models
    - Backend failures raise RepositoryError
    """

    @abstractmethod
    async def get_by_key(self, cache_key: str) -> Optional[CacheEntry]:
        """
        Get a cache entry by its key. Has no side effects.

        Args:
            cache_key: Content-addressable key

        Returns:
            CacheEntry if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, cache_key: str, care_profile: CareProfile, plant_name: Optional[str] = None) -> CacheEntry:
        """
        Store a care profile under a key.

        When an entry already exists for the key its profile is overwritten
        (last write wins for concurrent misses).

        Returns:
            The stored CacheEntry
        """
        pass

    @abstractmethod
    async def increment_hit_count(self, entry_id: str) -> int:
        """
        Increment the hit counter of an entry (read-then-write, not atomic).

        Returns:
            The new hit count

        Raises:
            NotFoundError: If the entry does not exist
        """
        pass
