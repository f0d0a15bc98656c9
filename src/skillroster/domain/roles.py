"""Role variants — role-dependent behavior computed over profile data.

A variant is a short-lived view over ``{name, skills, role, extra}`` built
for one response and discarded after serialization. The closed set of
variants lives in :data:`ROLE_REGISTRY`; :func:`create_variant` is the only
construction path callers should use.

Every variant shares the capability interface ``role``, ``summary()``,
``has_skill()`` and ``describe()``. Extra capabilities are only reachable
after narrowing to the concrete variant (``AdminVariant.can_manage_users``,
``ManagerVariant.team_size`` / ``set_team_size``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from skillroster.domain.skills import skill_key
from skillroster.domain.types import Role, parse_role


@dataclass
class RoleVariant(ABC):
    """Shared capability interface over a profile's name and skill names."""

    name: str
    skills: tuple[str, ...] = ()

    @property
    @abstractmethod
    def role(self) -> Role:
        """The role this variant represents."""
        ...

    @abstractmethod
    def summary(self) -> str:
        """One-sentence, role-specific description of the profile."""
        ...

    def has_skill(self, skill: str, *, ignore_case: bool = False) -> bool:
        """Membership test against the held skill names.

        Exact comparison by default: the caller must pass the stored casing.
        """
        if ignore_case:
            wanted = skill_key(skill)
            return any(skill_key(held) == wanted for held in self.skills)
        return skill in self.skills

    def describe(self) -> dict[str, Any]:
        """Role-dependent fields merged into a decorated profile record."""
        return {"summary": self.summary(), "role_type": str(self.role)}

    def _joined_skills(self) -> str:
        return ", ".join(self.skills)


@dataclass
class EmployeeVariant(RoleVariant):
    """Default variant for employees and unrecognized roles."""

    @property
    def role(self) -> Role:
        return Role.EMPLOYEE

    def summary(self) -> str:
        if not self.skills:
            return f"{self.name} is an employee looking to develop new skills."
        return f"{self.name} is an employee skilled in: {self._joined_skills()}."


@dataclass
class AdminVariant(RoleVariant):
    """Administrator variant; can manage users."""

    @property
    def role(self) -> Role:
        return Role.ADMIN

    def summary(self) -> str:
        return (
            f"{self.name} is an administrator with management responsibilities "
            f"and expertise in: {self._joined_skills()}."
        )

    def can_manage_users(self) -> bool:
        return True

    def describe(self) -> dict[str, Any]:
        return {**super().describe(), "can_manage_users": self.can_manage_users()}


@dataclass
class ManagerVariant(RoleVariant):
    """Manager variant carrying a non-negative team size."""

    team_size: int = 0

    @property
    def role(self) -> Role:
        return Role.MANAGER

    def set_team_size(self, size: int) -> None:
        """Set the team size. Negative values are ignored."""
        if size >= 0:
            self.team_size = size

    def summary(self) -> str:
        return (
            f"{self.name} is a manager leading {self.team_size} team members "
            f"with skills in: {self._joined_skills()}."
        )

    def describe(self) -> dict[str, Any]:
        return {**super().describe(), "team_size": self.team_size}


ROLE_REGISTRY: dict[Role, type[RoleVariant]] = {
    Role.EMPLOYEE: EmployeeVariant,
    Role.ADMIN: AdminVariant,
    Role.MANAGER: ManagerVariant,
}


def create_variant(
    role: str | None,
    name: str,
    skills: Sequence[str] | None = None,
    extra: Any = None,
) -> RoleVariant:
    """Build the variant for *role* (case-insensitive; unknown → employee).

    *extra* is the role-specific value: the team size for managers,
    ignored for every other role. A missing or negative team size
    leaves the manager at 0.

    Examples:
        >>> create_variant("employee", "Bob", []).summary()
        'Bob is an employee looking to develop new skills.'
        >>> create_variant("MANAGER", "Carol", ["SQL"]).team_size
        0
    """
    resolved = parse_role(role)
    variant_cls = ROLE_REGISTRY[resolved]
    variant = variant_cls(name=name, skills=tuple(skills or ()))
    if isinstance(variant, ManagerVariant) and extra is not None:
        variant.set_team_size(int(extra))
    return variant
