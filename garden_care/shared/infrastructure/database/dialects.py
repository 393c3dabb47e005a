# 📄 File: garden_care/shared/infrastructure/database/dialects.py
#
# 🧭 Purpose (Layman Explanation):
# Picks the right "insert, or deal with the row that already exists" statement for the database
# in use, so saving never creates duplicates even when two requests race.
#
# 🧪 Purpose (Technical Summary):
# Returns the dialect-specific INSERT construct (PostgreSQL / SQLite) exposing
# on_conflict_do_update / on_conflict_do_nothing for atomic upserts.
#
# 🔗 Dependencies:
# - sqlalchemy.dialects.postgresql / sqlalchemy.dialects.sqlite
#
# 🔄 Connected Modules / Calls From:
# - Plant care SQL repositories (profile cache, plant types)

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from garden_care.shared.core.exceptions import RepositoryError

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def conflict_aware_insert(session: AsyncSession, model):
    """
    Build an INSERT for model that supports ON CONFLICT clauses.

    Raises:
        RepositoryError: If the bound database dialect has no ON CONFLICT support here
    """
    dialect_name = session.get_bind().dialect.name
    insert_fn = _INSERT_BY_DIALECT.get(dialect_name)
    if insert_fn is None:
        raise RepositoryError(
            f"Upsert not supported for database dialect '{dialect_name}'",
            operation="upsert",
            entity=getattr(model, "__tablename__", None),
        )
    return insert_fn(model)
