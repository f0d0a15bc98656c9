"""RosterSettings — CLI flags, environment, and skillroster.toml merged.

Priority chain (highest to lowest):
  1. Init kwargs   — flags passed by the root CLI group
  2. Env vars      — ``SKILLROSTER_*``, ``__`` between nested keys
                     (``SKILLROSTER_SKILLS__DUPLICATES=reject``)
  3. TOML file     — ``skillroster.toml`` found by walk-up, or ``--config``
  4. Code defaults — the section models in :mod:`skillroster.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from skillroster.config.discovery import find_config
from skillroster.config.models import DatabaseConfig, RolesConfig, SkillsConfig

# TOML file chosen by from_cli(), visible only while the model is built.
_toml_file: ContextVar[Path | None] = ContextVar("skillroster_toml_file", default=None)


class RosterSettings(BaseSettings):
    """Resolved settings shared by the CLI, services, and storage.

    Attributes:
        root: Directory holding ``.skillroster/``; the config file's parent
            when one was found, else the working directory.
        config_path: The TOML file that was read, if any.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="SKILLROSTER_",
        env_nested_delimiter="__",
    )

    # --- Resolved paths (derived from the config location, not read from TOML) ---
    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- Output flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    skills: SkillsConfig = Field(default_factory=SkillsConfig)
    roles: RolesConfig = Field(default_factory=RolesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> RosterSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored. Without
        one, ``skillroster.toml`` is searched upward from *root* (or the
        working directory). Invalid TOML is reported as a
        :class:`click.ClickException`.
        """
        toml_file: Path | None
        if config_path:
            candidate = Path(config_path)
            toml_file = candidate if candidate.is_file() else None
        else:
            toml_file = find_config(root)

        if root is None:
            root = toml_file.parent if toml_file is not None else Path.cwd()

        token = _toml_file.set(toml_file)
        try:
            return cls(root=root, config_path=toml_file, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_file}: {exc}") from exc
        finally:
            _toml_file.reset(token)
