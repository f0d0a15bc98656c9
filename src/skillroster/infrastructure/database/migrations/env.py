"""Alembic environment for skillroster: runs revisions against ``sqlalchemy.url``."""

from __future__ import annotations

from alembic import context
from sqlalchemy import pool

from skillroster.infrastructure.database.engine import create_db_engine
from skillroster.infrastructure.database.schema import metadata


def _url() -> str:
    url = context.config.get_main_option("sqlalchemy.url")
    if not url:
        msg = "sqlalchemy.url must be set on the Alembic config"
        raise RuntimeError(msg)
    return url


def run_offline() -> None:
    """Emit the migration SQL instead of executing it."""
    context.configure(
        url=_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    """Execute migrations on a fresh, unpooled connection.

    The engine comes from :func:`create_db_engine`, so SQLite migrations
    run with the same pragmas as the application.
    """
    engine = create_db_engine(_url(), poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(connection=connection, target_metadata=metadata)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
