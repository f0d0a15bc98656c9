"""Command: bring the roster database schema to the latest revision."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from skillroster.commands._base import RosterCommand

if TYPE_CHECKING:
    from skillroster.commands._context import AppContext

_EXAMPLES = """\
  # Apply every unapplied revision
  skillroster upgrade

  # List unapplied revisions, oldest first, and change nothing
  skillroster upgrade --check
  skillroster --json upgrade --check"""


@click.command(cls=RosterCommand, examples=_EXAMPLES)
@click.option(
    "--check",
    is_flag=True,
    help="List unapplied schema revisions and exit without migrating.",
)
@click.pass_obj
def upgrade(app: AppContext, check: bool) -> None:
    """Migrate the roster database schema.

    Tables created before revisions were tracked are stamped at the latest
    revision instead of migrated. With --check the exit status is 0 whether
    or not revisions are pending; read ``pending_count`` from --json output.
    """
    from skillroster.services.upgrade import MigrationService

    service = MigrationService(app.roster)
    app.emit(service.check_pending() if check else service.apply())
