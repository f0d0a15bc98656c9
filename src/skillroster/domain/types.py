"""Profile roles and the skill duplicate policy."""

from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Roles a profile can hold."""

    EMPLOYEE = "employee"
    ADMIN = "admin"
    MANAGER = "manager"


class DuplicatePolicy(StrEnum):
    """What to do when one request names the same skill twice (any casing)."""

    MERGE = "merge"
    REJECT = "reject"


def parse_role(value: str | None) -> Role:
    """Map a raw role string onto :class:`Role`, case-insensitively.

    Absent or unrecognized values fall back to ``Role.EMPLOYEE``.

    Examples:
        >>> parse_role("Manager")
        <Role.MANAGER: 'manager'>
        >>> parse_role("intern")
        <Role.EMPLOYEE: 'employee'>
    """
    if not value:
        return Role.EMPLOYEE
    try:
        return Role(value.strip().lower())
    except ValueError:
        return Role.EMPLOYEE
