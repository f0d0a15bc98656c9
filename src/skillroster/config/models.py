"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, skillroster.toml only contains
overrides. A fresh roster needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from skillroster.domain.types import DuplicatePolicy, Role

# --- skillroster.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section.

    ``url`` accepts any SQLAlchemy URL; None means the SQLite file under
    ``{root}/.skillroster/``.
    """

    model_config = {"frozen": True}

    url: str | None = None
    echo: bool = False


class SkillsConfig(BaseModel):
    """[skills] section."""

    model_config = {"frozen": True}

    duplicates: DuplicatePolicy = DuplicatePolicy.MERGE


class RolesConfig(BaseModel):
    """[roles] section."""

    model_config = {"frozen": True}

    default: Role = Role.EMPLOYEE


class RosterConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    skills: SkillsConfig = Field(default_factory=SkillsConfig)
    roles: RolesConfig = Field(default_factory=RolesConfig)
