from __future__ import annotations

import logging
import os
import subprocess

import click

from ..errors import EnvironmentFailure

log = logging.getLogger(__name__)


STEAM_EXE = "steam" # Native install, expected on PATH
FLATPAK_EXE = "flatpak"
STEAM_FLATPAK_ID = "com.valvesoftware.Steam"

SEPARATOR = "-" * 49


def deep_link(game_id: int) -> str:
    return f"steam://run/{game_id}"


def is_flatpak_installed() -> bool:
    """Check whether `flatpak list` mentions the Steam package."""
    try:
        result = subprocess.run(
            [FLATPAK_EXE, "list"],
            capture_output=True,
            text=True,
            encoding="utf-8",
        )
    except OSError as e:
        raise EnvironmentFailure(f"'{FLATPAK_EXE} list' failed to start") from e
    except UnicodeDecodeError as e:
        raise EnvironmentFailure(f"'{FLATPAK_EXE} list' did not print valid text") from e

    found = STEAM_FLATPAK_ID in result.stdout
    log.debug("Flatpak probe (exit %s): %s installed=%s", result.returncode, STEAM_FLATPAK_ID, found)
    return found


def build_command(game_id: int, flatpak: bool) -> list[str]:
    if flatpak:
        return [FLATPAK_EXE, "run", STEAM_FLATPAK_ID, deep_link(game_id)]
    return [STEAM_EXE, deep_link(game_id)]


def _spawn(cmd: list[str]) -> subprocess.Popen:
    kwargs: dict = {"stdin": subprocess.DEVNULL}
    if os.name == "posix":
        # Detach so Steam outlives us and never gets our terminal signals
        kwargs["start_new_session"] = True
    try:
        return subprocess.Popen(cmd, **kwargs)
    except OSError as e:
        raise EnvironmentFailure(f"'{cmd[0]}' command failed to start") from e


def launch_game(game_id: int) -> subprocess.Popen:
    """Hand the id to Steam, preferring the flatpak build. Does not wait."""
    click.echo(SEPARATOR)
    cmd = build_command(game_id, is_flatpak_installed())
    log.info("Launch: %s", cmd)
    return _spawn(cmd)
