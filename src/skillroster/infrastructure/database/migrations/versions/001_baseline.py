"""Baseline schema: profiles, skills, profile_skills.

Revision ID: 001_baseline
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False, server_default="employee"),
        sa.Column("team_size", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.Text(), nullable=False),
    )
    op.create_index("ix_profiles_created_at", "profiles", ["created_at"])

    op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("created_at", sa.Text(), nullable=False),
    )
    op.create_index(
        "ux_skills_name_lower",
        "skills",
        [sa.text("lower(name)")],
        unique=True,
    )

    op.create_table(
        "profile_skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "profile_id",
            sa.Integer(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "skill_id",
            sa.Integer(),
            sa.ForeignKey("skills.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("created_at", sa.Text(), nullable=False),
        sa.UniqueConstraint("profile_id", "skill_id", name="uq_profile_skills_pair"),
    )
    op.create_index("ix_profile_skills_skill", "profile_skills", ["skill_id"])


def downgrade() -> None:
    op.drop_index("ix_profile_skills_skill", table_name="profile_skills")
    op.drop_table("profile_skills")
    op.drop_index("ux_skills_name_lower", table_name="skills")
    op.drop_table("skills")
    op.drop_index("ix_profiles_created_at", table_name="profiles")
    op.drop_table("profiles")
