"""Tests for Roster — engine ownership and units of work."""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import func, insert, select

from skillroster.config.settings import RosterSettings
from skillroster.infrastructure.database.schema import skills
from skillroster.infrastructure.store import Roster, RosterTransaction

TS = "2026-01-01T00:00:00+00:00"


def _count(roster: Roster) -> int:
    with roster.reading() as txn:
        return int(txn.conn.execute(select(func.count()).select_from(skills)).scalar_one())


class TestRoster:
    def test_properties(self, roster: Roster, tmp_path: Path) -> None:
        assert roster.root == tmp_path
        assert roster.db_url.endswith("skillroster.db")
        assert roster.settings.root == tmp_path

    def test_configured_url(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'elsewhere.db'}"
        r = Roster(RosterSettings.from_cli(root=tmp_path, database={"url": url}))
        try:
            assert r.db_url == url
            assert (tmp_path / "elsewhere.db").is_file()
        finally:
            r.close()


class TestTransaction:
    def test_commits(self, roster: Roster) -> None:
        with roster.transaction() as txn:
            assert isinstance(txn, RosterTransaction)
            txn.conn.execute(insert(skills).values(name="Go", created_at=TS))
        assert _count(roster) == 1

    def test_rolls_back_on_error(self, roster: Roster) -> None:
        with pytest.raises(ValueError), roster.transaction() as txn:
            txn.conn.execute(insert(skills).values(name="Go", created_at=TS))
            raise ValueError("abort")
        assert _count(roster) == 0

    def test_reading_does_not_commit(self, roster: Roster) -> None:
        with roster.reading() as txn:
            txn.conn.execute(insert(skills).values(name="Go", created_at=TS))
        assert _count(roster) == 0
