# 📄 File: garden_care/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) so each unit of work gets its
# own clean session, and changes are either saved together or undone together.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session factory with transactional context management (commit on success,
# rollback on error, always close).
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - garden_care/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - garden_care/modules/plant_care/dependencies.py (service wiring)
# - tests (fixtures)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from garden_care.shared.infrastructure.database.connection import (
    DatabaseConnectionManager,
    get_database_engine,
)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self, connection_manager: DatabaseConnectionManager):
        self._connection_manager = connection_manager
        self._session_factory: Optional[async_sessionmaker] = None

    def initialize(self) -> None:
        """Initialize the session factory with the database engine."""
        engine = get_database_engine(self._connection_manager)
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=True,
        )
        logger.info("Database session factory initialized successfully")

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Yields:
            AsyncSession: Database session

        Raises:
            RuntimeError: If the session manager is not initialized
        """
        if self._session_factory is None:
            raise RuntimeError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            logger.debug("Database session created")
            yield session

            # Commit the transaction if no exceptions occurred
            await session.commit()
            logger.debug("Database transaction committed successfully")

        except Exception as e:
            await session.rollback()
            logger.error(f"Error occurred, transaction rolled back: {e}")
            raise

        finally:
            await session.close()
            logger.debug("Database session closed")
