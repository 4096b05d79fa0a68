"""Locate the rutctl.toml that applies to a working directory.

An explicit path (``--config`` or ``RUTCTL_CONFIG``) wins and must exist.
Without one, the nearest rutctl.toml at or above the start directory is
used, and having none at all is not an error.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "rutctl.toml"
CONFIG_ENV_VAR = "RUTCTL_CONFIG"


class ConfigNotFoundError(FileNotFoundError):
    """An explicitly requested config file does not exist."""

    def __init__(self, path: Path, origin: str) -> None:
        self.path = path
        self.origin = origin
        super().__init__(f"Config file from {origin} not found: {path}")


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(start: Path | None = None, explicit: str | None = None) -> Path | None:
    """Return the config file to read, or None when there is none.

    Raises:
        ConfigNotFoundError: *explicit* or ``RUTCTL_CONFIG`` names a missing file.
    """
    if explicit:
        requested, origin = Path(explicit), "--config"
    elif os.environ.get(CONFIG_ENV_VAR):
        requested, origin = Path(os.environ[CONFIG_ENV_VAR]), CONFIG_ENV_VAR
    else:
        return _walk_up((start or Path.cwd()).resolve())

    if not requested.is_file():
        raise ConfigNotFoundError(requested, origin)
    return requested
