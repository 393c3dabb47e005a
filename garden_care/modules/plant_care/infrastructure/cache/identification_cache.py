# 📄 File: garden_care/modules/plant_care/infrastructure/cache/identification_cache.py
# 🧭 Purpose (Layman Explanation):
# A short-term memory (one day, up to a thousand answers) of which plant a typed name refers to,
# kept inside the running process so repeated searches are instant.
# 🧪 Purpose (Technical Summary):
# Process-local TTL cache with insertion-order eviction and an injectable clock. One explicit
# instance per process, passed by reference to its consumers; no module-level singleton.
# 🔗 Dependencies:
# collections.OrderedDict, time, structured logging
# 🔄 Connected Modules / Calls From:
# identification_service.py, dependencies.py

import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional

from garden_care.modules.plant_care.domain.models.identification import PlantIdentification
from garden_care.shared.utils.logging import get_logger

logger = get_logger(__name__)

CACHE_TYPE = "plant_identification"
DEFAULT_TTL_SECONDS = 24 * 60 * 60
DEFAULT_MAX_SIZE = 1000


@dataclass
class _CachedIdentification:
    result: PlantIdentification
    timestamp: float


class PlantIdentificationCache:
    """
    TTL-bounded, capacity-bounded identification cache.

    - Keys are the trimmed, lowercased query
    - An entry older than ttl_seconds is removed on read and reported as a miss
    - When full, setting a new key evicts the oldest inserted entry;
      re-setting an existing key refreshes it in place
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_size: int = DEFAULT_MAX_SIZE,
        clock: Callable[[], float] = time.monotonic
    ):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._clock = clock
        self._entries: "OrderedDict[str, _CachedIdentification]" = OrderedDict()

    @staticmethod
    def normalize_key(query: str) -> str:
        return query.lower().strip()

    def _is_expired(self, entry: _CachedIdentification, now: float) -> bool:
        return now - entry.timestamp > self.ttl_seconds

    def get(self, query: str) -> Optional[PlantIdentification]:
        """Return the cached result, or None on miss or expiry."""
        key = self.normalize_key(query)
        entry = self._entries.get(key)

        if entry is None:
            logger.performance.log_cache_operation("get", CACHE_TYPE, key, hit=False)
            return None

        if self._is_expired(entry, self._clock()):
            del self._entries[key]
            logger.performance.log_cache_operation("get", CACHE_TYPE, key, hit=False, extra={'expired': True})
            return None

        logger.performance.log_cache_operation("get", CACHE_TYPE, key, hit=True)
        return entry.result

    def set(self, query: str, result: PlantIdentification) -> None:
        """Store a result, evicting the oldest entry when full."""
        key = self.normalize_key(query)

        if key not in self._entries and len(self._entries) >= self.max_size:
            oldest_key, _ = self._entries.popitem(last=False)
            logger.debug(f"Identification cache full, evicted '{oldest_key}'")

        self._entries[key] = _CachedIdentification(result=result, timestamp=self._clock())
        logger.performance.log_cache_operation("set", CACHE_TYPE, key)

    def cleanup(self) -> int:
        """Remove expired entries; returns how many were removed."""
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if self._is_expired(entry, now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Identification cache cleanup removed {len(expired)} entries")
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
