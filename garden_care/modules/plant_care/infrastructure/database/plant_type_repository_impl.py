# 📄 File: garden_care/modules/plant_care/infrastructure/database/plant_type_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Finds and saves the canonical plant types (like "Rose / Climbing Rose") and the care guide
# they share, making sure the same type is never saved twice.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PlantTypeRepository. get_or_create uses
# INSERT .. ON CONFLICT DO NOTHING followed by a fetch; upsert_profile uses
# INSERT .. ON CONFLICT DO UPDATE. Both rely on the (top_level, middle_level) unique constraint.
# Profile storage and lookups callers treat as best-effort run in a SAVEPOINT.
#
# 🔗 Dependencies:
# - garden_care.modules.plant_care.domain.repositories.plant_type_repository (interface)
# - garden_care.modules.plant_care.infrastructure.database.models (PlantTypeModel)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - TypeIdentityResolver, PlantRegistrationService, ProfileGenerationOrchestrator
# - garden_care.modules.plant_care.dependencies (wiring)

import logging
from typing import List, Optional

from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from garden_care.modules.plant_care.domain.models.care_profile import CareProfile
from garden_care.modules.plant_care.domain.models.plant_type import PlantType, PlantTypeIdentity
from garden_care.modules.plant_care.domain.repositories.plant_type_repository import PlantTypeRepository
from garden_care.modules.plant_care.infrastructure.database.models import PlantTypeModel
from garden_care.shared.core.exceptions import RepositoryError
from garden_care.shared.infrastructure.database.dialects import conflict_aware_insert
from garden_care.shared.utils.helpers import deduplicate_list, generate_uuid, utc_now
from garden_care.shared.utils.validators import validate_model

logger = logging.getLogger(__name__)

IDENTITY_COLUMNS = ["top_level", "middle_level"]


class PlantTypeRepositoryImpl(PlantTypeRepository):
    """
    SQLAlchemy implementation of the PlantTypeRepository interface.

    Both levels are stripped before any lookup or write so that
    " Rose " and "Rose" address the same record.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_identity(self, top_level: str, middle_level: str) -> Optional[PlantType]:
        identity = validate_model(PlantTypeIdentity, {"top_level": top_level, "middle_level": middle_level})
        try:
            async with self._session.begin_nested():
                model = await self._fetch(identity)
            return self._model_to_domain(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error getting plant type {identity.top_level}/{identity.middle_level}: {str(e)}")
            raise RepositoryError(
                f"Failed to get plant type: {str(e)}",
                operation="get_by_identity",
                entity="plant_types",
            ) from e

    async def get_by_id(self, plant_type_id: str) -> Optional[PlantType]:
        try:
            model = await self._session.get(PlantTypeModel, plant_type_id)
            return self._model_to_domain(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error getting plant type by ID {plant_type_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to get plant type: {str(e)}",
                operation="get_by_id",
                entity="plant_types",
            ) from e

    async def get_or_create(
        self,
        top_level: str,
        middle_level: str,
        growth_habit: Optional[List[str]] = None
    ) -> PlantType:
        identity = validate_model(PlantTypeIdentity, {"top_level": top_level, "middle_level": middle_level})
        now = utc_now()

        try:
            stmt = conflict_aware_insert(self._session, PlantTypeModel).values(
                id=generate_uuid(),
                top_level=identity.top_level,
                middle_level=identity.middle_level,
                growth_habit=self._clean_habit(growth_habit),
                care_profile=None,
                created_at=now,
                updated_at=now,
            )
            await self._session.execute(stmt.on_conflict_do_nothing(index_elements=IDENTITY_COLUMNS))

            model = await self._fetch(identity, refresh=True)
            logger.info(f"Resolved plant type {model.id} for {identity.top_level}/{identity.middle_level}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during plant type get_or_create: {str(e)}")
            raise RepositoryError(
                f"Failed to create plant type: {str(e)}",
                operation="get_or_create",
                entity="plant_types",
                constraint="uq_plant_types_identity",
            ) from e

    async def upsert_profile(
        self,
        top_level: str,
        middle_level: str,
        care_profile: CareProfile,
        growth_habit: Optional[List[str]] = None
    ) -> PlantType:
        identity = validate_model(PlantTypeIdentity, {"top_level": top_level, "middle_level": middle_level})
        payload = care_profile.model_dump(mode="json")
        now = utc_now()

        try:
            stmt = conflict_aware_insert(self._session, PlantTypeModel).values(
                id=generate_uuid(),
                top_level=identity.top_level,
                middle_level=identity.middle_level,
                growth_habit=self._clean_habit(growth_habit),
                care_profile=payload,
                created_at=now,
                updated_at=now,
            )
            update_values = {
                "care_profile": stmt.excluded.care_profile,
                "updated_at": stmt.excluded.updated_at,
            }
            if growth_habit:
                update_values["growth_habit"] = stmt.excluded.growth_habit

            async with self._session.begin_nested():
                await self._session.execute(
                    stmt.on_conflict_do_update(index_elements=IDENTITY_COLUMNS, set_=update_values)
                )
                model = await self._fetch(identity, refresh=True)
            logger.info(f"Stored care profile on plant type {model.id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during plant type profile upsert: {str(e)}")
            raise RepositoryError(
                f"Failed to store plant type profile: {str(e)}",
                operation="upsert_profile",
                entity="plant_types",
            ) from e

    async def _fetch(self, identity: PlantTypeIdentity, refresh: bool = False) -> Optional[PlantTypeModel]:
        query = select(PlantTypeModel).where(
            and_(
                PlantTypeModel.top_level == identity.top_level,
                PlantTypeModel.middle_level == identity.middle_level,
            )
        )
        if refresh:
            query = query.execution_options(populate_existing=True)
        result = await self._session.execute(query)
        return result.scalar_one_or_none()

    @staticmethod
    def _clean_habit(growth_habit: Optional[List[str]]) -> List[str]:
        return deduplicate_list(tag.strip() for tag in (growth_habit or []) if tag and tag.strip())

    def _model_to_domain(self, model: PlantTypeModel) -> PlantType:
        return PlantType(
            plant_type_id=model.id,
            top_level=model.top_level,
            middle_level=model.middle_level,
            growth_habit=model.growth_habit or [],
            care_profile=CareProfile.model_validate(model.care_profile) if model.care_profile else None,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
