# 📄 File: garden_care/modules/plant_care/domain/services/profile_cache.py
# 🧭 Purpose (Layman Explanation):
# The memory for AI-written care guides: looks a guide up by its fingerprint, saves new ones, and
# keeps a rough count of how often each is reused, without ever letting a hiccup in that
# bookkeeping break a gardener's request.
# 🧪 Purpose (Technical Summary):
# Content-addressable profile cache over the ProfileCacheRepository: read failures degrade to a
# miss, writes raise StorageError, hit counting is best-effort. Entries are never deleted.
# 🔗 Dependencies:
# profile_cache_repository.py, garden_care.shared.core.exceptions, structured logging
# 🔄 Connected Modules / Calls From:
# profile_generation_service.py, dependencies.py

import time
from typing import Optional

from garden_care.shared.core.exceptions import StorageError
from garden_care.shared.utils.logging import get_logger
from ..models.cache_entry import CacheEntry
from ..models.care_profile import CareProfile
from ..repositories.profile_cache_repository import ProfileCacheRepository

logger = get_logger(__name__)

CACHE_TYPE = "care_profile"


class ProfileCache:
    """
    Get/put access to cached care profiles with best-effort hit counting.

    - get: no side effects; a storage read failure is logged and treated
      exactly like a clean miss
    - put: raises StorageError; callers holding a freshly generated profile
      log it and still return the profile
    - increment_hit: raises StorageError
    - record_hit / fetch: best-effort wrappers that never raise
    """

    def __init__(self, repository: ProfileCacheRepository):
        self.repository = repository

    async def get(self, cache_key: str) -> Optional[CacheEntry]:
        """
        Look up a cache entry.

        Returns:
            CacheEntry on hit, None on miss or read failure
        """
        start = time.perf_counter()
        try:
            entry = await self.repository.get_by_key(cache_key)
        except Exception as e:
            logger.warning(
                f"Profile cache read failed, treating as miss: {e}",
                cache_key=cache_key,
                exc_info=True
            )
            return None

        logger.performance.log_cache_operation(
            operation="get",
            cache_type=CACHE_TYPE,
            key=cache_key,
            hit=entry is not None,
            duration_ms=(time.perf_counter() - start) * 1000
        )
        if entry is None:
            logger.info("Profile cache miss", cache_key=cache_key)
        else:
            logger.info("Profile cache hit", cache_key=cache_key, hit_count=entry.hit_count)
        return entry

    async def put(self, cache_key: str, care_profile: CareProfile, plant_name: Optional[str] = None) -> CacheEntry:
        """
        Store a care profile under a key.

        Raises:
            StorageError: If the record store write fails for any reason
        """
        try:
            entry = await self.repository.create(cache_key, care_profile, plant_name=plant_name)
        except Exception as e:
            raise StorageError(
                f"Failed to cache care profile: {e}",
                operation="put",
                key=cache_key
            ) from e

        logger.performance.log_cache_operation(operation="put", cache_type=CACHE_TYPE, key=cache_key)
        logger.info("Care profile cached", cache_key=cache_key, plant_name=plant_name)
        return entry

    async def increment_hit(self, entry_id: str) -> int:
        """
        Increment an entry's hit counter.

        Raises:
            StorageError: If the counter update fails
        """
        try:
            return await self.repository.increment_hit_count(entry_id)
        except Exception as e:
            raise StorageError(
                f"Failed to increment cache hit count: {e}",
                operation="increment_hit",
                key=entry_id
            ) from e

    async def record_hit(self, entry: CacheEntry) -> CacheEntry:
        """
        Best-effort hit counting for a cache hit.

        Returns:
            The entry with the new hit count, or unchanged when counting failed
        """
        try:
            new_count = await self.increment_hit(entry.entry_id)
        except StorageError as e:
            logger.warning(
                f"Hit count not recorded: {e.message}",
                cache_key=entry.cache_key,
                exc_info=True
            )
            return entry
        return entry.model_copy(update={"hit_count": new_count})

    async def fetch(self, cache_key: str) -> Optional[CacheEntry]:
        """get() followed by a best-effort record_hit() on a hit."""
        entry = await self.get(cache_key)
        if entry is None:
            return None
        return await self.record_hit(entry)
