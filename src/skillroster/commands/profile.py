"""Command group: profile lifecycle, skill replacement, and search."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from skillroster.commands._base import RosterGroup
from skillroster.services.profiles import ProfileService

if TYPE_CHECKING:
    from skillroster.commands._context import AppContext

_PROFILE_EXAMPLES = """\
  skillroster profile create "Ada Lovelace" --skill python --skill sql
  skillroster profile create "Grace Hopper" --role manager --team-size 12
  skillroster profile list
  skillroster profile show 3
  skillroster profile skills 3 --skill go --skill rust
  skillroster profile search python
  skillroster --json profile delete 3"""


@click.group(cls=RosterGroup, examples=_PROFILE_EXAMPLES)
@click.pass_obj
def profile(app: AppContext) -> None:
    """Create, edit, search, and delete profiles."""


@profile.command(
    examples="""\
  skillroster profile create "Ada Lovelace"
  skillroster profile create "Ada Lovelace" --skill python --skill SQL
  skillroster profile create "Root" --role admin
  skillroster profile create "Grace Hopper" --role manager --team-size 12
  skillroster -q profile create "Linus" --skill c"""
)
@click.argument("name")
@click.option("--role", default=None, help="employee, admin, or manager (unknown → employee).")
@click.option("--skill", "skills", multiple=True, help="Skill name (repeatable).")
@click.option("--team-size", type=int, default=None, help="Team size (managers only).")
@click.pass_obj
def create(
    app: AppContext,
    name: str,
    role: str | None,
    skills: tuple[str, ...],
    team_size: int | None,
) -> None:
    """Create a profile together with its skills."""
    svc = ProfileService(app.roster)
    app.emit(svc.create_profile(name, role=role, skills=list(skills), team_size=team_size))


@profile.command(
    "list",
    examples="""\
  skillroster profile list
  skillroster --json profile list
  skillroster -q profile list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every profile, newest first."""
    app.emit(ProfileService(app.roster).list_profiles())


@profile.command(
    examples="""\
  skillroster profile show 3
  skillroster --json profile show 3"""
)
@click.argument("profile_id", type=int)
@click.pass_obj
def show(app: AppContext, profile_id: int) -> None:
    """Show one profile with its skills."""
    app.emit(ProfileService(app.roster).get_profile(profile_id))


@profile.command(
    examples="""\
  skillroster profile skills 3 --skill go --skill rust
  skillroster profile skills 3"""
)
@click.argument("profile_id", type=int)
@click.option("--skill", "skills", multiple=True, help="Skill name (repeatable).")
@click.pass_obj
def skills(app: AppContext, profile_id: int, skills: tuple[str, ...]) -> None:
    """Replace a profile's whole skill set (no --skill clears it)."""
    app.emit(ProfileService(app.roster).replace_skills(profile_id, list(skills)))


@profile.command(
    examples="""\
  skillroster profile search python
  skillroster --json profile search "Machine Learning\""""
)
@click.argument("skill_name")
@click.pass_obj
def search(app: AppContext, skill_name: str) -> None:
    """Find profiles holding a skill (case-insensitive)."""
    app.emit(ProfileService(app.roster).search_profiles(skill_name))


@profile.command(
    examples="""\
  skillroster profile delete 3
  skillroster --json profile delete 3"""
)
@click.argument("profile_id", type=int)
@click.pass_obj
def delete(app: AppContext, profile_id: int) -> None:
    """Delete a profile and its skill associations."""
    app.emit(ProfileService(app.roster).delete_profile(profile_id))
