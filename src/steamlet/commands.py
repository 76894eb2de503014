# Command orchestration: everything the CLI does once arguments are parsed.

from __future__ import annotations

import math
from pathlib import Path
from typing import Sequence

import click

from .core.models import Alias, normalize_alias, parse_game_id
from .services import alias_store
from .services.game_launcher import launch_game

TAB_SIZE = 4.0
NUM_TABS = 4


def play(game: str, use_id: bool = False, data_dir: Path | None = None) -> None:
    if use_id:
        try:
            game_id = parse_game_id(game)
        except ValueError:
            click.echo("Steam ID must be a number")
            return
        click.echo(f"Starting application with ID '{game_id}'")
        launch_game(game_id)
        return

    alias = normalize_alias(game)
    store = alias_store.open_store(data_dir)
    game_id = alias_store.lookup(store, alias)
    if game_id is None:
        click.echo(f"Could not find alias '{alias}'")
        return

    click.echo(f"Starting {alias} ({game_id})")
    launch_game(game_id)


def set_alias(alias: str, game_id: int, data_dir: Path | None = None) -> None:
    store = alias_store.open_store(data_dir)
    click.echo(alias_store.set_alias(store, alias, game_id))


def remove(aliases: Sequence[str], data_dir: Path | None = None) -> None:
    store = alias_store.open_store(data_dir)
    for message in alias_store.remove_aliases(store, aliases):
        click.echo(message)


def _columns(alias: str) -> int:
    # UTF-8 byte length, rounded half up; round() would give 4 for 18 bytes
    return math.floor(len(alias.encode("utf-8")) / TAB_SIZE + 0.5)


def format_entry(entry: Alias) -> str:
    tabs = "\t" * NUM_TABS
    # Long aliases would push the id past the column, so it gets its own line
    if _columns(entry.alias) > NUM_TABS:
        return f"{entry.alias}\n{tabs}{entry.game_id}"
    return f"{entry.alias}{tabs}{entry.game_id}"


def list_all(data_dir: Path | None = None) -> None:
    store = alias_store.open_store(data_dir)
    click.echo(f"Path: {store.path}\n")
    for entry in alias_store.list_aliases(store):
        click.echo(format_entry(entry))
