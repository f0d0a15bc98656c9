"""Profile ↔ skill associations, maintained as one atomic unit.

:class:`AssociationManager` is bound to an open :class:`RosterTransaction`
and hands that same transaction to :class:`SkillRegistry`, so inserting the
profile, resolving (and possibly creating) skills, and linking them all
commit or roll back together.

Repeated names in one request (``["css", "CSS"]``) follow the configured
:class:`DuplicatePolicy`: ``merge`` links each skill once, in first-seen
order; ``reject`` raises :class:`Conflict` after resolution, which rolls
back every row written by the unit, skills created on the way included.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select

from skillroster.domain.skills import clean_skill_names, find_duplicate_keys, unique_ids
from skillroster.domain.types import DuplicatePolicy, Role
from skillroster.infrastructure.database.schema import profile_skills, profiles
from skillroster.infrastructure.repositories import ProfileRepository
from skillroster.services._helpers import now_iso
from skillroster.services.errors import Conflict, NotFound
from skillroster.services.skills import SkillRegistry
from skillroster.services.telemetry import trace_span

if TYPE_CHECKING:
    from skillroster.infrastructure.store import RosterTransaction


class AssociationManager:
    """Writes and reads a profile together with its skill set."""

    def __init__(
        self,
        txn: RosterTransaction,
        *,
        duplicates: DuplicatePolicy = DuplicatePolicy.MERGE,
    ) -> None:
        self._txn = txn
        self._duplicates = duplicates
        self._registry = SkillRegistry(txn)
        self._repo = ProfileRepository(txn.conn)

    def create_with_skills(
        self,
        name: str,
        skill_names: Sequence[str | None],
        *,
        role: Role = Role.EMPLOYEE,
        team_size: int | None = None,
    ) -> dict[str, Any]:
        """Insert a profile, resolve its skills, and link them."""
        with trace_span("persist_profile"):
            result = self._txn.conn.execute(
                insert(profiles).values(
                    name=name,
                    role=str(role),
                    team_size=team_size,
                    created_at=now_iso(),
                )
            )
            profile_id = int(result.inserted_primary_key[0])

        self._attach(profile_id, skill_names)
        return self._read(profile_id)

    def replace_skills(
        self,
        profile_id: int,
        skill_names: Sequence[str | None],
    ) -> dict[str, Any]:
        """Swap the profile's whole skill set for *skill_names*."""
        exists = self._txn.conn.execute(
            select(profiles.c.id).where(profiles.c.id == profile_id)
        ).first()
        if exists is None:
            raise NotFound("Profile not found", detail={"id": profile_id})

        with trace_span("unlink"):
            self._txn.conn.execute(
                delete(profile_skills).where(profile_skills.c.profile_id == profile_id)
            )

        self._attach(profile_id, skill_names)
        return self._read(profile_id)

    def read_with_skills(self, profile_id: int) -> dict[str, Any] | None:
        """The profile and its skill names (possibly empty), or None."""
        return self._repo.get_profile(profile_id)

    def list_all(self) -> list[dict[str, Any]]:
        """Every profile paired with its skill names, newest first."""
        return self._repo.list_profiles()

    def search_by_skill(self, skill_name: str) -> list[dict[str, Any]]:
        """Profiles holding the skill, matched case-insensitively."""
        return self._repo.search_by_skill(skill_name)

    def link(self, profile_id: int, skill_ids: Sequence[int]) -> int:
        """Insert one association per id. Returns the number inserted."""
        created = now_iso()
        for skill_id in skill_ids:
            self._txn.conn.execute(
                insert(profile_skills).values(
                    profile_id=profile_id,
                    skill_id=skill_id,
                    created_at=created,
                )
            )
        return len(skill_ids)

    def _attach(self, profile_id: int, skill_names: Sequence[str | None]) -> None:
        with trace_span("resolve") as span:
            ids = self._registry.resolve(skill_names)
            if span:
                span.annotate("names", len(ids))

        if len(unique_ids(ids)) != len(ids):
            if self._duplicates is DuplicatePolicy.REJECT:
                repeated = find_duplicate_keys(clean_skill_names(skill_names))
                raise Conflict(
                    "Duplicate skills in request",
                    detail={"duplicates": repeated},
                )
            ids = unique_ids(ids)

        with trace_span("link"):
            self.link(profile_id, ids)

    def _read(self, profile_id: int) -> dict[str, Any]:
        record = self._repo.get_profile(profile_id)
        if record is None:
            raise NotFound("Profile not found", detail={"id": profile_id})
        return record
