# 📄 File: garden_care/modules/plant_care/infrastructure/database/profile_cache_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves generated care guides in the database under their fingerprint, finds them again, and
# counts how many times each one has been reused.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ProfileCacheRepository. Writes use a dialect-aware
# INSERT .. ON CONFLICT (cache_key) DO UPDATE so concurrent misses for the same key never fail
# on the unique constraint; the last writer's profile wins. Each operation runs in a SAVEPOINT, so a
# failed cache write only undoes itself and never the rest of the caller's unit of work.
#
# 🔗 Dependencies:
# - garden_care.modules.plant_care.domain.repositories.profile_cache_repository (interface)
# - garden_care.modules.plant_care.infrastructure.database.models (CareProfileCacheModel)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.domain.services.profile_cache (ProfileCache)
# - garden_care.modules.plant_care.dependencies (wiring)

import time
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from garden_care.modules.plant_care.domain.models.cache_entry import CacheEntry
from garden_care.modules.plant_care.domain.models.care_profile import CareProfile
from garden_care.modules.plant_care.domain.repositories.profile_cache_repository import ProfileCacheRepository
from garden_care.modules.plant_care.infrastructure.database.models import CareProfileCacheModel
from garden_care.shared.core.exceptions import NotFoundError, RepositoryError
from garden_care.shared.infrastructure.database.dialects import conflict_aware_insert
from garden_care.shared.utils.helpers import generate_uuid
from garden_care.shared.utils.logging import get_logger

logger = get_logger(__name__)

TABLE_NAME = CareProfileCacheModel.__tablename__


class ProfileCacheRepositoryImpl(ProfileCacheRepository):
    """
    SQLAlchemy implementation of the ProfileCacheRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_key(self, cache_key: str) -> Optional[CacheEntry]:
        try:
            start = time.perf_counter()
            async with self._session.begin_nested():
                result = await self._session.execute(
                    select(CareProfileCacheModel).where(CareProfileCacheModel.cache_key == cache_key)
                )
                model = result.scalar_one_or_none()
            logger.performance.log_database_query(
                query_type="SELECT",
                table=TABLE_NAME,
                duration_ms=(time.perf_counter() - start) * 1000,
            )
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error reading cache entry {cache_key}: {str(e)}")
            raise RepositoryError(
                f"Failed to read cache entry: {str(e)}",
                operation="get_by_key",
                entity=TABLE_NAME,
            ) from e

    async def create(
        self,
        cache_key: str,
        care_profile: CareProfile,
        plant_name: Optional[str] = None
    ) -> CacheEntry:
        """
        Insert the profile under cache_key, overwriting the stored profile on conflict.

        The hit counter of an existing entry is kept.
        """
        payload = care_profile.model_dump(mode="json")

        try:
            start = time.perf_counter()
            stmt = conflict_aware_insert(self._session, CareProfileCacheModel).values(
                id=generate_uuid(),
                cache_key=cache_key,
                plant_name=plant_name,
                care_profile=payload,
                hit_count=0,
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=["cache_key"],
                set_={
                    "care_profile": stmt.excluded.care_profile,
                    "plant_name": stmt.excluded.plant_name,
                },
            )
            async with self._session.begin_nested():
                await self._session.execute(stmt)
                result = await self._session.execute(
                    select(CareProfileCacheModel)
                    .where(CareProfileCacheModel.cache_key == cache_key)
                    .execution_options(populate_existing=True)
                )
                model = result.scalar_one()

            logger.performance.log_database_query(
                query_type="UPSERT",
                table=TABLE_NAME,
                duration_ms=(time.perf_counter() - start) * 1000,
                rows_affected=1,
            )
            logger.info(f"Stored care profile cache entry {model.id}", cache_key=cache_key)
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error storing cache entry {cache_key}: {str(e)}")
            raise RepositoryError(
                f"Failed to store cache entry: {str(e)}",
                operation="create",
                entity=TABLE_NAME,
            ) from e

    async def increment_hit_count(self, entry_id: str) -> int:
        try:
            async with self._session.begin_nested():
                model = await self._session.get(CareProfileCacheModel, entry_id)
                if model is None:
                    raise NotFoundError(
                        f"Cache entry not found: {entry_id}",
                        resource_type="care_profile_cache",
                        resource_id=entry_id,
                    )
                model.hit_count = (model.hit_count or 0) + 1
            return model.hit_count

        except SQLAlchemyError as e:
            logger.error(f"Database error incrementing hit count for {entry_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to increment hit count: {str(e)}",
                operation="increment_hit_count",
                entity=TABLE_NAME,
            ) from e

    def _model_to_domain(self, model: CareProfileCacheModel) -> CacheEntry:
        return CacheEntry(
            entry_id=model.id,
            cache_key=model.cache_key,
            plant_name=model.plant_name,
            care_profile=CareProfile.model_validate(model.care_profile),
            hit_count=model.hit_count or 0,
            created_at=model.created_at,
        )
