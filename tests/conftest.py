"""Shared pytest fixtures and test helpers for skillroster tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from skillroster.config.settings import RosterSettings
from skillroster.infrastructure.database.engine import init_database
from skillroster.infrastructure.store import Roster
from skillroster.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_process_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep env overrides, telemetry, and log handlers from leaking between tests."""
    for var in ("SKILLROSTER_CONFIG", "SKILLROSTER_ROLES__DEFAULT", "SKILLROSTER_SKILLS__DUPLICATES"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def roster(tmp_path: Path) -> Generator[Roster]:
    """Fully initialized roster on a temp directory."""
    r = Roster(RosterSettings.from_cli(root=tmp_path))
    try:
        yield r
    finally:
        r.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated roster.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers (used across service test modules)
# ---------------------------------------------------------------------------


def create_profile(roster: Roster, name: str, **kwargs: Any) -> dict[str, Any]:
    """Create a profile via ProfileService, asserting success."""
    from skillroster.services.profiles import ProfileService

    result = ProfileService(roster).create_profile(name, **kwargs)
    assert result.ok, result.error
    return result.data


def create_skill(roster: Roster, name: str) -> dict[str, Any]:
    """Create a skill via SkillService, asserting success."""
    from skillroster.services.skills import SkillService

    result = SkillService(roster).create_skill(name)
    assert result.ok, result.error
    return result.data


def roster_with(tmp_path: Path, **overrides: Any) -> Roster:
    """Build a roster whose settings carry the given section overrides."""
    return Roster(RosterSettings.from_cli(root=tmp_path, **overrides))
