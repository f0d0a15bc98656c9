"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from skillroster.output.console import style_for_role
from skillroster.output.renderers import render_quiet, render_result
from skillroster.services.result import ServiceError, ServiceResult


def _profile(**overrides: object) -> dict[str, object]:
    return {
        "id": 1,
        "name": "Grace",
        "role": "manager",
        "role_type": "manager",
        "team_size": 4,
        "skills": ["COBOL"],
        "summary": "Grace is a manager leading 4 team members with skills in: COBOL.",
        **overrides,
    }


class TestRenderResult:
    def test_profile_fields(self) -> None:
        out = render_result(ServiceResult(ok=True, op="create_profile", data=_profile()))
        assert "create_profile" in out
        assert "team_size: 4" in out
        assert "skills: COBOL" in out

    def test_profile_list_table(self) -> None:
        data = {"items": [_profile(), _profile(id=2, name="Ada")], "count": 2}
        out = render_result(ServiceResult(ok=True, op="list_profiles", data=data))
        assert "count: 2" in out
        assert "Grace" in out
        assert "Ada" in out

    def test_search_shows_match_column(self) -> None:
        data = {"query": "cobol", "items": [_profile(has_skill=True)], "count": 1}
        out = render_result(ServiceResult(ok=True, op="search_profiles", data=data))
        assert "query: cobol" in out
        assert "yes" in out

    def test_skill_list(self) -> None:
        data = {"items": [{"id": 5, "name": "Go", "created_at": "2026"}], "count": 1}
        out = render_result(ServiceResult(ok=True, op="list_skills", data=data))
        assert "Go" in out

    def test_deleted(self) -> None:
        data = {"message": "Profile deleted", "deleted": {"id": 1, "name": "Grace"}}
        out = render_result(ServiceResult(ok=True, op="delete_profile", data=data))
        assert "Profile deleted" in out
        assert "Grace" in out

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="delete_skill",
            error=ServiceError(code="CONFLICT", message="in use", detail={"id": 5}),
        )
        out = render_result(result, verbose=True)
        assert out.startswith("ERROR")
        assert "code: CONFLICT (409)" in out
        assert "id: 5" in out

    def test_upgrade_check_lists_pending(self) -> None:
        data = {
            "pending_count": 1,
            "pending": [{"revision": "001_baseline", "description": "Baseline schema"}],
            "current": None,
            "head": "001_baseline",
        }
        out = render_result(ServiceResult(ok=True, op="upgrade", data=data))
        assert "schema: untracked -> 001_baseline" in out
        assert "Baseline schema" in out
        assert "pending: 1" in out

    def test_upgrade_check_nothing_pending(self) -> None:
        data = {
            "pending_count": 0,
            "pending": [],
            "current": "001_baseline",
            "head": "001_baseline",
        }
        out = render_result(ServiceResult(ok=True, op="upgrade", data=data))
        assert "pending: none, schema is current" in out

    def test_upgrade_applied(self) -> None:
        data = {
            "applied_count": 0,
            "current": "001_baseline",
            "message": "Database is already up to date",
        }
        out = render_result(ServiceResult(ok=True, op="upgrade", data=data))
        assert "revision: 001_baseline" in out
        assert "applied: 0" in out
        assert "already up to date" in out

    def test_verbose_telemetry(self) -> None:
        meta = {"telemetry": {"name": "create", "duration_ms": 1.5, "children": []}}
        result = ServiceResult(ok=True, op="create_skill", data={"id": 1}, meta=meta)
        assert "create" in render_result(result, verbose=True).split("meta:")[1]


class TestRenderQuiet:
    def test_item_ids(self) -> None:
        data = {"items": [{"id": 3}, {"id": 1}]}
        assert render_quiet(ServiceResult(ok=True, op="list_profiles", data=data)) == "3\n1"

    def test_single_id(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="create_skill", data={"id": 9})) == "9"

    def test_no_id(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="upgrade", data={})) == "OK: upgrade"

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False, op="get_profile", error=ServiceError(code="NOT_FOUND", message="gone")
        )
        assert render_quiet(result).startswith("ERROR: get_profile")


class TestRoleStyle:
    def test_known_and_unknown(self) -> None:
        assert style_for_role("admin") == "roster.role.admin"
        assert style_for_role("pirate") == ""
