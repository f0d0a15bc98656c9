"""Command: roster initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from skillroster.commands._base import RosterCommand

if TYPE_CHECKING:
    from skillroster.commands._context import AppContext


@click.command(
    "init",
    cls=RosterCommand,
    examples="""\
  skillroster init
  skillroster --root /srv/roster init
  skillroster --json init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the roster database and a default skillroster.toml."""
    from skillroster.services.upgrade import MigrationService

    app.emit(MigrationService(app.roster).init_roster())
