"""Tests for output mode selection."""

from __future__ import annotations

import json

from skillroster.output.formatters import OutputSettings, format_result
from skillroster.services.result import ServiceError, ServiceResult

PROFILE = ServiceResult(
    ok=True,
    op="get_profile",
    data={
        "id": 3,
        "name": "Ada",
        "role": "employee",
        "role_type": "employee",
        "skills": ["Python", "SQL"],
        "summary": "Ada is an employee skilled in: Python, SQL.",
    },
)


class TestFormatResult:
    def test_default_is_rich_text(self) -> None:
        out = format_result(PROFILE)
        assert out.startswith("OK")
        assert "Ada is an employee skilled in: Python, SQL." in out

    def test_json(self) -> None:
        out = format_result(PROFILE, settings=OutputSettings(json_output=True))
        parsed = json.loads(out)
        assert parsed["data"]["skills"] == ["Python", "SQL"]

    def test_json_wins_over_quiet(self) -> None:
        out = format_result(PROFILE, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["op"] == "get_profile"

    def test_quiet(self) -> None:
        assert format_result(PROFILE, settings=OutputSettings(quiet=True)) == "3"

    def test_error_json(self) -> None:
        result = ServiceResult(
            ok=False,
            op="get_profile",
            error=ServiceError(code="NOT_FOUND", message="Profile not found"),
        )
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "NOT_FOUND"
