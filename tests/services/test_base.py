"""Tests for BaseService and failure classification."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError, OperationalError

from skillroster.infrastructure.store import Roster
from skillroster.services.base import BaseService
from skillroster.services.errors import (
    Conflict,
    NotFound,
    ValidationFailure,
    classify_storage_error,
)
from skillroster.services.profiles import ProfileService
from skillroster.services.result import (
    CONFLICT,
    INTERNAL,
    NOT_FOUND,
    VALIDATION_FAILED,
    ServiceResult,
)
from skillroster.services.skills import SkillService
from skillroster.services.upgrade import MigrationService


class TestBaseService:
    def test_roster_stored(self, roster: Roster) -> None:
        assert BaseService(roster)._roster is roster

    def test_subclasses(self) -> None:
        for cls in (ProfileService, SkillService, MigrationService):
            assert issubclass(cls, BaseService)

    def test_run_passes_result_through(self, roster: Roster) -> None:
        ok = ServiceResult(ok=True, op="x")
        assert BaseService(roster)._run("x", lambda: ok) is ok

    def test_run_converts_service_failure(self, roster: Roster) -> None:
        def work() -> ServiceResult:
            raise NotFound("Profile not found", detail={"id": 9})

        result = BaseService(roster)._run("get_profile", work)
        assert result.ok is False
        assert result.op == "get_profile"
        assert result.error is not None
        assert result.error.code == NOT_FOUND
        assert result.error.detail == {"id": 9}

    def test_run_classifies_storage_error(self, roster: Roster) -> None:
        def work() -> ServiceResult:
            raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

        result = BaseService(roster)._run("create_skill", work)
        assert result.error is not None
        assert result.error.code == CONFLICT


class TestFailures:
    def test_codes(self) -> None:
        assert ValidationFailure("x").code == VALIDATION_FAILED
        assert NotFound("x").code == NOT_FOUND
        assert Conflict("x").code == CONFLICT

    def test_to_error(self) -> None:
        error = Conflict("Skill already exists", detail={"name": "Go"}).to_error()
        assert error.message == "Skill already exists"
        assert error.detail == {"name": "Go"}


class TestClassifyStorageError:
    def test_integrity_is_conflict(self) -> None:
        error = classify_storage_error(IntegrityError("INSERT", {}, Exception("dup")))
        assert error.code == CONFLICT
        assert error.message == "Request conflicts with existing data"
        assert error.detail["reason"] == "dup"

    def test_other_is_internal(self) -> None:
        error = classify_storage_error(OperationalError("SELECT", {}, Exception("locked")))
        assert error.code == INTERNAL
