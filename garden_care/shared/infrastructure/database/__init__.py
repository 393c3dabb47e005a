"""
Database infrastructure: async engine management and session handling.
"""

from .connection import Base, DatabaseConnectionManager, get_database_engine
from .session import DatabaseSessionManager

__all__ = [
    "Base",
    "DatabaseConnectionManager",
    "DatabaseSessionManager",
    "get_database_engine",
]
