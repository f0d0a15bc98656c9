"""Database engine, schema, and migrations via SQLAlchemy Core and Alembic."""

from skillroster.infrastructure.database.engine import (
    create_db_engine,
    default_db_url,
    init_database,
)
from skillroster.infrastructure.database.schema import (
    metadata,
    profile_skills,
    profiles,
    skills,
)

__all__ = [
    "create_db_engine",
    "default_db_url",
    "init_database",
    "metadata",
    "profile_skills",
    "profiles",
    "skills",
]
