"""Tests for the skill command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from skillroster.cli import cli


@pytest.mark.usefixtures("_isolated_root")
class TestSkillCommands:
    def test_create_and_list(self, cli_runner: CliRunner) -> None:
        for name in ("rust", "Ansible"):
            assert cli_runner.invoke(cli, ["skill", "create", name]).exit_code == 0
        result = cli_runner.invoke(cli, ["--json", "skill", "list"])
        assert result.exit_code == 0
        names = [s["name"] for s in json.loads(result.stdout)["data"]["items"]]
        assert names == ["Ansible", "rust"]

    def test_create_duplicate(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["skill", "create", "Go"])
        result = cli_runner.invoke(cli, ["--json", "skill", "create", "GO"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "CONFLICT"

    def test_delete(self, cli_runner: CliRunner) -> None:
        created = cli_runner.invoke(cli, ["-q", "skill", "create", "Perl"])
        skill_id = created.stdout.strip()
        result = cli_runner.invoke(cli, ["skill", "delete", skill_id])
        assert result.exit_code == 0
        assert "Skill deleted successfully" in result.output

    def test_delete_in_use(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["profile", "create", "Ada", "--skill", "Go"])
        listed = json.loads(cli_runner.invoke(cli, ["--json", "skill", "list"]).stdout)
        skill_id = str(listed["data"]["items"][0]["id"])
        result = cli_runner.invoke(cli, ["skill", "delete", skill_id])
        assert result.exit_code == 1
        assert "currently assigned" in result.stderr

    def test_non_integer_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["skill", "delete", "abc"])
        assert result.exit_code == 2
