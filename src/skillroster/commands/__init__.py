"""Subcommand modules for skillroster.

Provides register_commands() which uses deferred imports to keep
``skillroster --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from skillroster.commands.profile import profile
    from skillroster.commands.skill import skill

    cli.add_command(profile)
    cli.add_command(skill)

    # --- Standalone commands ---
    from skillroster.commands.init_cmd import init_cmd
    from skillroster.commands.upgrade import upgrade

    cli.add_command(init_cmd)
    cli.add_command(upgrade)
