"""Read-oriented repository for profiles, their skills, and the skill list."""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from sqlalchemy import Connection, func, select

from skillroster.infrastructure.database.schema import (
    profile_skills,
    profiles,
    skill_name_matches,
    skills,
)


class ProfileRepository:
    """Encapsulates SQL for read-side profile and skill queries.

    Bound to a connection so the same queries serve both plain reads and
    reads inside an open unit of work.
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def get_profile(self, profile_id: int) -> dict[str, Any] | None:
        """Fetch one profile row with its skill names, or None."""
        stmt = select(profiles).where(profiles.c.id == profile_id)
        row = self._conn.execute(stmt).mappings().first()
        if row is None:
            return None
        record = dict(row)
        record["skills"] = self.skill_names_by_profile([profile_id]).get(profile_id, [])
        return record

    def list_profiles(self) -> list[dict[str, Any]]:
        """All profiles, newest first, each with its skill names."""
        stmt = select(profiles).order_by(profiles.c.created_at.desc(), profiles.c.id.desc())
        return self._with_skills(stmt)

    def search_by_skill(self, skill_name: str) -> list[dict[str, Any]]:
        """Profiles holding a skill whose lowercased name equals the query's."""
        holders = (
            select(profile_skills.c.profile_id)
            .join(skills, skills.c.id == profile_skills.c.skill_id)
            .where(skill_name_matches(skill_name))
        )
        stmt = (
            select(profiles)
            .where(profiles.c.id.in_(holders))
            .order_by(profiles.c.created_at.desc(), profiles.c.id.desc())
        )
        return self._with_skills(stmt)

    def skill_names_by_profile(self, profile_ids: list[int]) -> dict[int, list[str]]:
        """Map each profile id to its skill names in association order."""
        if not profile_ids:
            return {}
        stmt = (
            select(profile_skills.c.profile_id, skills.c.name)
            .join(skills, skills.c.id == profile_skills.c.skill_id)
            .where(profile_skills.c.profile_id.in_(profile_ids))
            .order_by(profile_skills.c.profile_id, profile_skills.c.id)
        )
        names: dict[int, list[str]] = defaultdict(list)
        for row in self._conn.execute(stmt):
            names[int(row.profile_id)].append(str(row.name))
        return dict(names)

    def list_skills(self) -> list[dict[str, Any]]:
        """All skills ordered by name (case-insensitive)."""
        stmt = select(skills).order_by(func.lower(skills.c.name), skills.c.id)
        return [dict(row) for row in self._conn.execute(stmt).mappings().all()]

    def _with_skills(self, stmt: Any) -> list[dict[str, Any]]:
        rows = [dict(row) for row in self._conn.execute(stmt).mappings().all()]
        names = self.skill_names_by_profile([int(row["id"]) for row in rows])
        for row in rows:
            row["skills"] = names.get(int(row["id"]), [])
        return rows
