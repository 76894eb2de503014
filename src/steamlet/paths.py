from __future__ import annotations
import os
from pathlib import Path

from platformdirs import user_data_dir

from .errors import EnvironmentFailure


DATA_DIR_NAME = "steamlet" # Subdirectory of the local app-data dir
DATA_FILE_NAME = "steamlet.json" # Alias store

DATA_DIR_ENV = "STEAMLET_DATA_DIR" # Overrides the platform data dir


def data_dir(override: str | os.PathLike | None = None) -> Path:
    """Resolve the directory holding the alias store."""
    if override:
        return Path(override).expanduser()

    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env).expanduser()

    try:
        # Local (non-roaming) data dir, e.g. ~/.local/share/steamlet
        return Path(user_data_dir(DATA_DIR_NAME, appauthor=False, roaming=False))
    except Exception as e:
        raise EnvironmentFailure("Could not resolve the local data directory") from e


def data_file(directory: Path) -> Path:
    return directory / DATA_FILE_NAME
