"""Command group: the skill vocabulary."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from skillroster.commands._base import RosterGroup
from skillroster.services.skills import SkillService

if TYPE_CHECKING:
    from skillroster.commands._context import AppContext

_SKILL_EXAMPLES = """\
  skillroster skill list
  skillroster skill create kubernetes
  skillroster skill delete 7"""


@click.group(cls=RosterGroup, examples=_SKILL_EXAMPLES)
@click.pass_obj
def skill(app: AppContext) -> None:
    """List, add, and remove skills."""


@skill.command(
    "list",
    examples="""\
  skillroster skill list
  skillroster --json skill list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every skill, ordered by name."""
    app.emit(SkillService(app.roster).list_skills())


@skill.command(
    examples="""\
  skillroster skill create kubernetes
  skillroster -q skill create "Data Modeling\""""
)
@click.argument("name")
@click.pass_obj
def create(app: AppContext, name: str) -> None:
    """Add a skill to the vocabulary."""
    app.emit(SkillService(app.roster).create_skill(name))


@skill.command(
    examples="""\
  skillroster skill delete 7
  skillroster --json skill delete 7"""
)
@click.argument("skill_id", type=int)
@click.pass_obj
def delete(app: AppContext, skill_id: int) -> None:
    """Delete a skill that no profile holds."""
    app.emit(SkillService(app.roster).delete_skill(skill_id))
