"""Tests for table definitions and constraints."""

from __future__ import annotations

import pytest
from sqlalchemy import Connection, insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from skillroster.infrastructure.database.schema import metadata, profile_skills, profiles, skills

TS = "2026-01-01T00:00:00+00:00"


def _profile(conn: Connection, name: str = "Ada") -> int:
    return int(
        conn.execute(insert(profiles).values(name=name, created_at=TS)).inserted_primary_key[0]
    )


def _skill(conn: Connection, name: str) -> int:
    return int(
        conn.execute(insert(skills).values(name=name, created_at=TS)).inserted_primary_key[0]
    )


class TestTables:
    def test_all_tables_registered(self) -> None:
        assert set(metadata.tables) == {"profiles", "skills", "profile_skills"}

    def test_role_defaults_to_employee(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            pid = _profile(conn)
            row = conn.execute(profiles.select().where(profiles.c.id == pid)).first()
        assert row is not None
        assert row.role == "employee"
        assert row.team_size is None


class TestConstraints:
    def test_skill_name_unique_ignoring_case(self, db_engine: Engine) -> None:
        with pytest.raises(IntegrityError), db_engine.begin() as conn:
            _skill(conn, "Python")
            _skill(conn, "PYTHON")

    def test_pair_unique(self, db_engine: Engine) -> None:
        with pytest.raises(IntegrityError), db_engine.begin() as conn:
            pid = _profile(conn)
            sid = _skill(conn, "Go")
            for _ in range(2):
                conn.execute(
                    insert(profile_skills).values(profile_id=pid, skill_id=sid, created_at=TS)
                )

    def test_skill_delete_restricted(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            pid = _profile(conn)
            sid = _skill(conn, "Go")
            conn.execute(insert(profile_skills).values(profile_id=pid, skill_id=sid, created_at=TS))
        with pytest.raises(IntegrityError), db_engine.begin() as conn:
            conn.execute(skills.delete().where(skills.c.id == sid))

    def test_profile_delete_cascades(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            pid = _profile(conn)
            sid = _skill(conn, "Go")
            conn.execute(insert(profile_skills).values(profile_id=pid, skill_id=sid, created_at=TS))
            conn.execute(profiles.delete().where(profiles.c.id == pid))
            assert conn.execute(profile_skills.select()).first() is None

    def test_unknown_profile_rejected(self, db_engine: Engine) -> None:
        with pytest.raises(IntegrityError), db_engine.begin() as conn:
            sid = _skill(conn, "Go")
            conn.execute(insert(profile_skills).values(profile_id=99, skill_id=sid, created_at=TS))
