"""Locating and reading ``skillroster.toml``.

The file is looked up the way git finds ``.git/``: in the starting
directory, then each parent in turn. ``SKILLROSTER_CONFIG`` names a file
directly and takes precedence over the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from skillroster.config.models import RosterConfig

CONFIG_FILENAME = "skillroster.toml"
CONFIG_ENV_VAR = "SKILLROSTER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A ``SKILLROSTER_CONFIG`` that points at a missing file means "no
    config"; the walk-up search is skipped in that case too.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> RosterConfig:
    """Parse and validate a config file into :class:`RosterConfig`.

    Without *path* the file is discovered from *cwd*; when there is none,
    every section keeps its defaults.
    """
    path = path or find_config(cwd)
    if path is None:
        return RosterConfig()
    with path.open("rb") as fh:
        return RosterConfig.model_validate(tomllib.load(fh))
