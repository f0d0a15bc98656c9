"""ProfileService — profile lifecycle composed with skills and role variants.

Pipeline for mutations: VALIDATE → (TRANSACTION: PERSIST → RESOLVE → LINK
→ READ) → DECORATE → RESPOND. Validation happens before any storage call;
the decorated record is built from the state the transaction committed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import delete, select

from skillroster.domain.roles import create_variant
from skillroster.domain.types import Role, parse_role
from skillroster.infrastructure.database.schema import profiles
from skillroster.services.associations import AssociationManager
from skillroster.services.base import BaseService
from skillroster.services.errors import NotFound, ValidationFailure
from skillroster.services.result import ServiceResult
from skillroster.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from skillroster.infrastructure.store import RosterTransaction

logger = structlog.get_logger(__name__)


def decorate(record: dict[str, Any], *, query: str | None = None) -> dict[str, Any]:
    """Merge role-dependent fields into a profile record.

    With *query*, also adds ``has_skill`` for that skill name, compared
    case-insensitively so it agrees with the search that produced the row.
    """
    variant = create_variant(
        record.get("role"),
        record["name"],
        record.get("skills", []),
        record.get("team_size"),
    )
    decorated = {**record, **variant.describe()}
    if query is not None:
        decorated["has_skill"] = variant.has_skill(query, ignore_case=True)
    return decorated


class ProfileService(BaseService):
    """Create, list, search, edit, and delete profiles."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def create_profile(
        self,
        name: str | None,
        *,
        role: str | None = None,
        skills: Sequence[str | None] | None = None,
        team_size: int | None = None,
    ) -> ServiceResult:
        """Create a profile with its skills in one unit of work."""
        op = "create_profile"
        warnings: list[str] = []

        def work() -> ServiceResult:
            # ── VALIDATE ──────────────────────────────────────────
            with trace_span("validate"):
                clean_name = (name or "").strip()
                if not clean_name:
                    raise ValidationFailure("Name is required")
                resolved_role = self._resolve_role(role, warnings)
                stored_team_size = self._validate_team_size(resolved_role, team_size, warnings)

            # ── PERSIST → RESOLVE → LINK ──────────────────────────
            with self._roster.transaction() as txn:
                record = self._associations(txn).create_with_skills(
                    clean_name,
                    list(skills or []),
                    role=resolved_role,
                    team_size=stored_team_size,
                )

            logger.info(
                "profile.created",
                profile_id=record["id"],
                role=record["role"],
                skills=len(record["skills"]),
            )

            # ── RESPOND ───────────────────────────────────────────
            with trace_span("decorate"):
                data = decorate(record)
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

        return self._run(op, work)

    @traced
    def list_profiles(self) -> ServiceResult:
        """Every profile, newest first, decorated."""
        op = "list_profiles"

        def work() -> ServiceResult:
            with self._roster.reading() as txn:
                rows = self._associations(txn).list_all()
            items = [decorate(row) for row in rows]
            return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

        return self._run(op, work)

    @traced
    def get_profile(self, profile_id: int) -> ServiceResult:
        """One profile with its skills, decorated."""
        op = "get_profile"

        def work() -> ServiceResult:
            with self._roster.reading() as txn:
                record = self._associations(txn).read_with_skills(profile_id)
            if record is None:
                raise NotFound("Profile not found", detail={"id": profile_id})
            return ServiceResult(ok=True, op=op, data=decorate(record))

        return self._run(op, work)

    @traced
    def replace_skills(
        self,
        profile_id: int,
        skills: Sequence[str | None] | None = None,
    ) -> ServiceResult:
        """Replace the profile's whole skill set; unchanged on failure."""
        op = "replace_skills"

        def work() -> ServiceResult:
            with self._roster.transaction() as txn:
                record = self._associations(txn).replace_skills(profile_id, list(skills or []))

            logger.info(
                "profile.skills_replaced",
                profile_id=profile_id,
                skills=len(record["skills"]),
            )
            return ServiceResult(ok=True, op=op, data=decorate(record))

        return self._run(op, work)

    @traced
    def search_profiles(self, skill: str | None) -> ServiceResult:
        """Profiles holding *skill* (case-insensitive), each with ``has_skill``."""
        op = "search_profiles"

        def work() -> ServiceResult:
            query = (skill or "").strip()
            if not query:
                return ServiceResult(ok=True, op=op, data={"items": [], "count": 0})

            with self._roster.reading() as txn:
                rows = self._associations(txn).search_by_skill(query)
            items = [decorate(row, query=query) for row in rows]
            return ServiceResult(
                ok=True,
                op=op,
                data={"query": query, "items": items, "count": len(items)},
            )

        return self._run(op, work)

    @traced
    def delete_profile(self, profile_id: int) -> ServiceResult:
        """Delete a profile; its associations go with it."""
        op = "delete_profile"

        def work() -> ServiceResult:
            with self._roster.transaction() as txn:
                row = (
                    txn.conn.execute(select(profiles).where(profiles.c.id == profile_id))
                    .mappings()
                    .first()
                )
                if row is None:
                    raise NotFound("Profile not found", detail={"id": profile_id})
                txn.conn.execute(delete(profiles).where(profiles.c.id == profile_id))

            logger.info("profile.deleted", profile_id=profile_id)
            return ServiceResult(
                ok=True,
                op=op,
                data={"message": "Profile deleted", "deleted": dict(row)},
            )

        return self._run(op, work)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _associations(self, txn: RosterTransaction) -> AssociationManager:
        return AssociationManager(txn, duplicates=self._roster.settings.skills.duplicates)

    def _resolve_role(self, role: str | None, warnings: list[str]) -> Role:
        if not role or not role.strip():
            return parse_role(self._roster.settings.roles.default)
        resolved = parse_role(role)
        if resolved != role.strip().lower():
            warnings.append(f"Unknown role '{role}', stored as '{resolved}'")
        return resolved

    @staticmethod
    def _validate_team_size(
        role: Role,
        team_size: int | None,
        warnings: list[str],
    ) -> int | None:
        if team_size is None:
            return None
        if isinstance(team_size, bool) or not isinstance(team_size, int) or team_size < 0:
            raise ValidationFailure(
                "Team size must be a non-negative integer",
                detail={"team_size": team_size},
            )
        if role is not Role.MANAGER:
            warnings.append(f"Team size ignored for role '{role}'")
            return None
        return team_size
