from __future__ import annotations
import logging
from pathlib import Path

import click

from . import commands
from .core.models import MAX_GAME_ID
from .errors import EnvironmentFailure
from .logging_setup import setup_logging
from .paths import DATA_DIR_ENV

log = logging.getLogger(__name__)

EXAMPLES = """\b
Examples:
  Play a Steam game using the Steam game ID:
    steamlet play -i 227300

  Add an alias with an associated ID:
    steamlet add ets2 227300

  Play a Steam game with an alias:
    steamlet play ets2

  You can also use spaces in your aliases with double-quotes:
    steamlet add "euro truck simulator 2" 227300

  Remove alias(es):
    steamlet remove ets2 "euro truck simulator 2" [...]
"""


class AliasedGroup(click.Group):
    """click.Group that also answers to a few alternate command names."""

    ALIASES = {"add": "set", "rm": "remove"}

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, self.ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        # Report the canonical name, not the alias the user typed
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except EnvironmentFailure as e:
            cause = f": {e.__cause__}" if e.__cause__ else ""
            log.debug("%s%s", e, cause, exc_info=True)
            raise click.ClickException(f"{e}{cause}") from e


@click.group(cls=AliasedGroup, epilog=EXAMPLES)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding steamlet.json (default: local app data).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, data_dir: Path | None) -> None:
    """Run Steam games on the commandline intuitively via aliases or IDs"""
    setup_logging(verbose)
    ctx.obj = data_dir


@cli.command()
@click.option("-i", "--id", "use_id", is_flag=True, default=False, help="Use a game ID instead of an alias.")
@click.argument("game")
@click.pass_obj
def play(data_dir: Path | None, use_id: bool, game: str) -> None:
    """Plays a Steam game via an alias or by a Steam game ID (with -i)"""
    commands.play(game, use_id=use_id, data_dir=data_dir)


@cli.command(name="set")
@click.argument("alias")
@click.argument("steam_id", type=click.IntRange(0, MAX_GAME_ID))
@click.pass_obj
def set_(data_dir: Path | None, alias: str, steam_id: int) -> None:
    """Adds or sets an alias to an associated Steam game ID (also: add)"""
    commands.set_alias(alias, steam_id, data_dir=data_dir)


@cli.command()
@click.argument("aliases", nargs=-1, required=True)
@click.pass_obj
def remove(data_dir: Path | None, aliases: tuple[str, ...]) -> None:
    """Removes one or more aliases (also: rm)"""
    commands.remove(aliases, data_dir=data_dir)


@cli.command(name="list")
@click.pass_obj
def list_(data_dir: Path | None) -> None:
    """Lists all aliases and their associated Steam game IDs"""
    commands.list_all(data_dir=data_dir)


def run() -> None:
    cli(prog_name="steamlet")
