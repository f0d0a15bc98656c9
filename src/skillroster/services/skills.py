"""Skill vocabulary — name resolution, creation, and guarded deletion.

:class:`SkillRegistry` works on an open :class:`RosterTransaction` so the
statements it issues belong to the caller's unit of work. Resolution is
one lookup (and at most one insert) per name, sequentially; the latency
of a resolve grows linearly with the number of names.

No application lock guards the lookup-then-insert sequence. Two units of
work resolving the same unseen name may both insert; the unique index on
``lower(name)`` lets exactly one of them commit and the other fails with
an ``IntegrityError`` that rolls its whole unit back.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import delete, func, insert, select

from skillroster.domain.skills import clean_skill_name, clean_skill_names
from skillroster.infrastructure.database.schema import (
    profile_skills,
    skill_name_matches,
    skills,
)
from skillroster.infrastructure.repositories import ProfileRepository
from skillroster.services._helpers import now_iso
from skillroster.services.base import BaseService
from skillroster.services.errors import Conflict, NotFound, ValidationFailure
from skillroster.services.result import ServiceResult
from skillroster.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from skillroster.infrastructure.store import RosterTransaction

logger = structlog.get_logger(__name__)


class SkillRegistry:
    """Resolves skill names to ids inside one unit of work."""

    def __init__(self, txn: RosterTransaction) -> None:
        self._conn = txn.conn

    def find_id(self, name: str) -> int | None:
        """Case-insensitive lookup of an existing skill id."""
        row = self._conn.execute(
            select(skills.c.id).where(skill_name_matches(name))
        ).first()
        return int(row.id) if row is not None else None

    def resolve(self, names: Sequence[str | None]) -> list[int]:
        """Map each non-blank name to a skill id, creating missing skills.

        The input is not de-duplicated: a name given twice (in any casing)
        yields its id twice.
        """
        ids: list[int] = []
        for name in clean_skill_names(names):
            skill_id = self.find_id(name)
            if skill_id is None:
                skill_id = self._insert(name)
                logger.debug("skill.created", skill_id=skill_id, name=name, implicit=True)
            ids.append(skill_id)
        return ids

    def create(self, name: str) -> dict[str, Any]:
        """Insert one new skill and return its row.

        A skill that already exists under any casing is a conflict.
        """
        if self.find_id(name) is not None:
            raise Conflict("Skill already exists", detail={"name": name})
        skill_id = self._insert(name)
        return self.get(skill_id)

    def get(self, skill_id: int) -> dict[str, Any]:
        row = self._conn.execute(select(skills).where(skills.c.id == skill_id)).mappings().first()
        if row is None:
            raise NotFound("Skill not found", detail={"id": skill_id})
        return dict(row)

    def usage_count(self, skill_id: int) -> int:
        """Number of profiles currently holding the skill."""
        stmt = (
            select(func.count())
            .select_from(profile_skills)
            .where(profile_skills.c.skill_id == skill_id)
        )
        return int(self._conn.execute(stmt).scalar_one() or 0)

    def delete(self, skill_id: int) -> dict[str, Any]:
        """Delete an unreferenced skill and return the deleted row."""
        row = self.get(skill_id)
        if self.usage_count(skill_id) > 0:
            raise Conflict(
                "Cannot delete skill because it is currently assigned to one or more profiles",
                detail={"id": skill_id},
            )
        self._conn.execute(delete(skills).where(skills.c.id == skill_id))
        return row

    def _insert(self, name: str) -> int:
        result = self._conn.execute(insert(skills).values(name=name, created_at=now_iso()))
        return int(result.inserted_primary_key[0])


class SkillService(BaseService):
    """Skill vocabulary operations exposed to callers."""

    @traced
    def list_skills(self) -> ServiceResult:
        """All skills ordered by name."""
        op = "list_skills"

        def work() -> ServiceResult:
            with self._roster.reading() as txn:
                items = ProfileRepository(txn.conn).list_skills()
            return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

        return self._run(op, work)

    @traced
    def create_skill(self, name: str | None) -> ServiceResult:
        """Explicitly add a skill to the vocabulary."""
        op = "create_skill"

        def work() -> ServiceResult:
            cleaned = clean_skill_name(name)
            if cleaned is None:
                raise ValidationFailure("Skill name is required")

            with self._roster.transaction() as txn:
                row = SkillRegistry(txn).create(cleaned)

            logger.info("skill.created", skill_id=row["id"], name=row["name"])
            return ServiceResult(ok=True, op=op, data=row)

        return self._run(op, work)

    @traced
    def delete_skill(self, skill_id: int) -> ServiceResult:
        """Delete a skill no profile holds."""
        op = "delete_skill"

        def work() -> ServiceResult:
            with self._roster.transaction() as txn:
                row = SkillRegistry(txn).delete(skill_id)

            logger.info("skill.deleted", skill_id=skill_id, name=row["name"])
            return ServiceResult(
                ok=True,
                op=op,
                data={"message": "Skill deleted successfully", "deleted": row},
            )

        return self._run(op, work)

    @traced
    def resolve_skills(self, names: Sequence[str | None]) -> ServiceResult:
        """Resolve names to ids in a unit of work of their own."""
        op = "resolve_skills"

        def work() -> ServiceResult:
            with self._roster.transaction() as txn, trace_span("resolve") as span:
                ids = SkillRegistry(txn).resolve(names)
                if span:
                    span.annotate("names", len(ids))
            return ServiceResult(ok=True, op=op, data={"ids": ids})

        return self._run(op, work)
