"""SQLAlchemy Core table definitions for the skillroster database.

Case-insensitive skill uniqueness is enforced by a unique index on
``lower(name)`` so the database, not the application, arbitrates
concurrent inserts of the same skill.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
    func,
    literal,
)
from sqlalchemy.sql.elements import ColumnElement

metadata = MetaData()

profiles = Table(
    "profiles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("role", Text, nullable=False, default="employee", server_default="employee"),
    Column("team_size", Integer),  # managers only
    Column("created_at", Text, nullable=False),
)

skills = Table(
    "skills",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("created_at", Text, nullable=False),
)

profile_skills = Table(
    "profile_skills",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "profile_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "skill_id",
        Integer,
        ForeignKey("skills.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("created_at", Text, nullable=False),
    UniqueConstraint("profile_id", "skill_id", name="uq_profile_skills_pair"),
)

# ---------------------------------------------------------------------------
# Indexes
# ---------------------------------------------------------------------------

Index("ux_skills_name_lower", func.lower(skills.c.name), unique=True)
Index("ix_profiles_created_at", profiles.c.created_at)
Index("ix_profile_skills_skill", profile_skills.c.skill_id)


def skill_name_matches(name: str) -> ColumnElement[bool]:
    """Case-insensitive match of ``skills.name`` against *name*.

    Both sides go through the database's ``lower()``, the function the
    unique index is built on, so a lookup finds exactly the rows the
    index treats as equal.
    """
    return func.lower(skills.c.name) == func.lower(literal(name.strip()))
