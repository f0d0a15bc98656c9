"""Roster — the storage collaborator shared by every service.

The Roster owns the SQLAlchemy engine (and therefore the connection pool).
:meth:`Roster.transaction` is the single way to run a mutating unit of
work: one pooled connection, ``BEGIN`` → statements → ``COMMIT``, with a
rollback on any exception and the connection released on every exit path.

The yielded :class:`RosterTransaction` must be passed explicitly to every
helper that touches the database during that unit of work, so all of its
statements share one atomic unit.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from skillroster.infrastructure.database.engine import default_db_url, init_database

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from skillroster.config.settings import RosterSettings

logger = logging.getLogger(__name__)


@dataclass
class RosterTransaction:
    """Active unit of work bound to one pooled connection."""

    conn: Connection


class Roster:
    """Repository entry point encapsulating database access.

    Constructed once at CLI startup from :class:`RosterSettings` and stored
    on the click context. Services receive the Roster via their
    :class:`BaseService` constructor.
    """

    def __init__(self, settings: RosterSettings) -> None:
        self._settings = settings
        self._db_url = settings.database.url or default_db_url(settings.root)
        self._engine: Engine = init_database(
            self.root,
            settings.database.url,
            echo=settings.database.echo,
        )

    @property
    def root(self) -> Path:
        """The directory holding ``skillroster.toml`` and ``.skillroster/``."""
        return self._settings.root

    @property
    def db_url(self) -> str:
        """The resolved database URL."""
        return self._db_url

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def settings(self) -> RosterSettings:
        """The resolved settings for this roster."""
        return self._settings

    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        self._engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[RosterTransaction]:
        """All-or-nothing unit of work on one pooled connection.

        Commits when the block exits normally. Any exception rolls the
        whole unit back before it propagates; the connection goes back
        to the pool either way.

        Usage::

            with roster.transaction() as txn:
                txn.conn.execute(insert(profiles).values(...))
                AssociationManager(txn).link(profile_id, skill_ids)
        """
        with self._engine.begin() as conn:
            try:
                yield RosterTransaction(conn=conn)
            except BaseException:
                logger.debug("Rolling back unit of work", exc_info=True)
                raise

    @contextmanager
    def reading(self) -> Iterator[RosterTransaction]:
        """Pooled connection for read-only work; nothing is committed."""
        with self._engine.connect() as conn:
            yield RosterTransaction(conn=conn)
