# 📄 File: garden_care/modules/plant_care/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves a gardener's individual plants and lists the ones that belong to a given plant type.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PlantRepository with domain <-> model mapping.
#
# 🔗 Dependencies:
# - garden_care.modules.plant_care.domain.repositories.plant_repository (interface)
# - garden_care.modules.plant_care.infrastructure.database.models (PlantModel)
#
# 🔄 Connected Modules / Calls From:
# - TypeIdentityResolver, PlantRegistrationService

import logging
from typing import List, Optional

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from garden_care.modules.plant_care.domain.models.plant import Plant
from garden_care.modules.plant_care.domain.repositories.plant_repository import PlantRepository
from garden_care.modules.plant_care.infrastructure.database.models import PlantModel
from garden_care.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class PlantRepositoryImpl(PlantRepository):
    """SQLAlchemy implementation of the PlantRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, plant: Plant) -> Plant:
        try:
            model = self._domain_to_model(plant)
            self._session.add(model)
            await self._session.flush()

            logger.info(f"Created plant {model.id} for owner {plant.owner_id}")
            return self._model_to_domain(model)

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Plant creation failed for owner {plant.owner_id}: {str(e)}")
            raise RepositoryError(
                f"Plant could not be stored: {str(e)}",
                operation="create",
                entity="plants",
                constraint="fk_plants_plant_type_id_plant_types",
            ) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during plant creation: {str(e)}")
            raise RepositoryError(
                f"Failed to create plant: {str(e)}",
                operation="create",
                entity="plants",
            ) from e

    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        try:
            model = await self._session.get(PlantModel, plant_id)
            return self._model_to_domain(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error getting plant by ID {plant_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to get plant: {str(e)}",
                operation="get_by_id",
                entity="plants",
            ) from e

    async def list_linked(self, owner_id: str, plant_type_id: str) -> List[Plant]:
        try:
            result = await self._session.execute(
                select(PlantModel)
                .where(
                    and_(
                        PlantModel.owner_id == owner_id,
                        PlantModel.plant_type_id == plant_type_id,
                    )
                )
                .order_by(PlantModel.created_at.asc(), PlantModel.id.asc())
            )
            return [self._model_to_domain(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Database error listing plants for type {plant_type_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to list plants: {str(e)}",
                operation="list_linked",
                entity="plants",
            ) from e

    def _domain_to_model(self, plant: Plant) -> PlantModel:
        return PlantModel(
            id=plant.plant_id,
            owner_id=plant.owner_id,
            name=plant.name,
            cultivar_name=plant.cultivar_name,
            plant_type_id=plant.plant_type_id,
            planted_in=plant.planted_in,
            area=plant.area,
            growth_stage=plant.growth_stage,
            created_at=plant.created_at,
        )

    def _model_to_domain(self, model: PlantModel) -> Plant:
        return Plant(
            plant_id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            cultivar_name=model.cultivar_name,
            plant_type_id=model.plant_type_id,
            planted_in=model.planted_in,
            area=model.area,
            growth_stage=model.growth_stage,
            created_at=model.created_at,
        )
