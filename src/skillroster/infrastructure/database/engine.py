"""Database engine setup.

SQLite is the default persistence layer (WAL mode, foreign keys on),
stored at ``{root}/.skillroster/skillroster.db``. Any other SQLAlchemy
URL (e.g. PostgreSQL) can be configured instead; the engine's connection
pool hands one connection to each unit of work.

SQLAlchemy Core (not ORM) is used: every operation is a short, explicit
sequence of statements inside one transaction.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url

from skillroster.infrastructure.database.schema import metadata

DATA_DIRNAME = ".skillroster"
DB_FILENAME = "skillroster.db"


def default_db_url(root: Path) -> str:
    """SQLite URL for the database file under *root*."""
    return f"sqlite:///{root / DATA_DIRNAME / DB_FILENAME}"


def create_db_engine(url: str, *, echo: bool = False, **engine_kwargs: Any) -> Engine:
    """Create an engine; SQLite connections get WAL mode and foreign keys."""
    engine = create_engine(url, echo=echo, **engine_kwargs)

    if make_url(url).get_backend_name() == "sqlite":

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_database(root: Path, url: str | None = None, *, echo: bool = False) -> Engine:
    """Initialize the skillroster database and return its engine.

    Without *url*, creates ``{root}/.skillroster/`` and uses the SQLite
    file inside it. Creates all tables from :data:`schema.metadata`.

    Idempotent — safe to call on an existing database.
    """
    if url is None:
        (root / DATA_DIRNAME).mkdir(parents=True, exist_ok=True)
        url = default_db_url(root)

    engine = create_db_engine(url, echo=echo)
    metadata.create_all(engine)
    return engine
