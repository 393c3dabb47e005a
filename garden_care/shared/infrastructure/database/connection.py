# 📄 File: garden_care/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to the database that remembers care profiles, plant types and plants,
# making sure we can talk to it and that its tables exist.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine management: declarative Base with a constraint naming convention,
# engine construction from settings (pool options only for server databases, explicit BEGIN on
# SQLite so SAVEPOINTs work), table creation, health checks and disposal.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - garden_care/shared/config/settings.py (database configuration)
# - aiosqlite / asyncpg (async drivers, chosen by DATABASE_URL)
#
# 🔄 Connected Modules / Calls From:
# - garden_care/shared/infrastructure/database/session.py (session management)
# - garden_care/modules/plant_care/infrastructure/database/models.py (Base)

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import MetaData, event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from garden_care.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models of the garden care core.
    """
    metadata = metadata


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """
    Let SQLAlchemy emit BEGIN itself so SAVEPOINTs nest inside the session transaction.

    The sqlite3 driver otherwise defers BEGIN until the first DML statement.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


class DatabaseConnectionManager:
    """
    Manages the async database engine: creation, schema setup,
    health monitoring and disposal.
    """

    def __init__(self, settings: Optional[Settings] = None, database_url: Optional[str] = None):
        self._settings = settings or get_settings()
        self._database_url = database_url or self._settings.DATABASE_URL
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build SQLAlchemy engine parameters from settings."""
        params: Dict[str, Any] = {
            "url": self._database_url,
            "echo": self._settings.DB_ECHO,
        }
        if not self._database_url.startswith("sqlite"):
            params.update({
                "pool_pre_ping": True,  # Validate connections before use
                "pool_recycle": 3600,   # Recycle connections every hour
                "pool_size": self._settings.DB_POOL_SIZE,
                "max_overflow": self._settings.DB_MAX_OVERFLOW,
                "pool_timeout": 30,
            })
        return params

    async def initialize(self) -> None:
        """Initialize the database engine."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        try:
            logger.info("Initializing database engine...")
            self._engine = create_async_engine(**self._build_connection_params())
            if self._engine.dialect.name == "sqlite":
                _enable_sqlite_savepoints(self._engine)
            logger.info(f"Database engine initialized ({self._engine.dialect.name})")
        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            raise

    async def create_tables(self) -> None:
        """Create every table registered on Base.metadata (idempotent)."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        # Model modules must be imported so their tables are registered
        from garden_care.modules.plant_care.infrastructure.database import models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def health_check(self) -> dict:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(self._health_check_query)
                result.scalar()

            logger.debug("Database health check passed")
            return {
                "status": "healthy",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return {
                "status": "unhealthy",
                "error": str(e),
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        try:
            logger.info("Closing database engine...")
            await self._engine.dispose()
            self._engine = None
            logger.info("Database engine closed successfully")
        except Exception as e:
            logger.error(f"Error closing database engine: {e}")
            raise

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


def get_database_engine(manager: DatabaseConnectionManager) -> AsyncEngine:
    """
    Get the engine of an initialized connection manager.

    Raises:
        RuntimeError: If the manager is not initialized
    """
    if not manager.is_initialized:
        raise RuntimeError("Database not initialized. Call initialize() first.")

    return manager.engine
