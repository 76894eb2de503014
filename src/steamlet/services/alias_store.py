from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from ..core.models import Alias, is_game_id, normalize_alias
from ..errors import EnvironmentFailure
from ..paths import DATA_FILE_NAME, data_dir, data_file

log = logging.getLogger(__name__)


@dataclass
class AliasStore:
    path: Path
    aliases: dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.aliases)


def open_store(directory: Path | None = None) -> AliasStore:
    """
    Load the alias store, creating the data dir and an empty file on first use.
    Unreadable or malformed content is treated as an empty store so a bad file
    never blocks the next write.
    """
    root = directory if directory is not None else data_dir()
    path = data_file(root)

    if not root.exists():
        try:
            root.mkdir(parents=True, exist_ok=True)
            path.open("x", encoding="utf-8").close()
        except OSError as e:
            raise EnvironmentFailure(f"Could not create {path}") from e
        log.info("Created alias store at %s", path)
        return AliasStore(path=path)

    try:
        if not path.exists():
            path.open("x", encoding="utf-8").close()
        # r+ so a file we could read but never rewrite fails here
        with path.open("r+", encoding="utf-8") as f:
            raw = f.read()
    except UnicodeDecodeError:
        log.warning("Alias store %s is not valid UTF-8; starting empty", path)
        return AliasStore(path=path)
    except OSError as e:
        raise EnvironmentFailure(f"Could not open {path}") from e

    return AliasStore(path=path, aliases=_parse(raw, path))


def _parse(raw: str, path: Path) -> dict[str, int]:
    try:
        payload: Any = json.loads(raw)
    except ValueError:
        log.warning("Alias store %s is not valid JSON; starting empty", path)
        return {}

    if not isinstance(payload, dict):
        log.warning("Alias store %s is not a JSON object; starting empty", path)
        return {}

    for key, value in payload.items():
        if not is_game_id(value):
            log.warning("Alias store %s has a bad id for %r; starting empty", path, key)
            return {}

    return dict(payload)


def lookup(store: AliasStore, alias: str) -> int | None:
    return store.aliases.get(normalize_alias(alias))


def list_aliases(store: AliasStore) -> list[Alias]:
    return [Alias(alias=k, game_id=v) for k, v in sorted(store.aliases.items())]


def persist(store: AliasStore, message: str) -> str:
    """Rewrite the whole file. Returns the message to show the user."""
    try:
        text = json.dumps(store.aliases, indent=2, sort_keys=True)
        # "w" truncates and starts at offset 0
        with store.path.open("w", encoding="utf-8") as f:
            f.write(text)
    except (OSError, TypeError, ValueError) as e:
        log.warning("Failed writing %s: %s", store.path, e)
        log.debug("Write failure detail", exc_info=True)
        return f"Error while writing to {DATA_FILE_NAME}"

    log.debug("Wrote %d aliases to %s", len(store), store.path)
    return message


def set_alias(store: AliasStore, alias: str, game_id: int) -> str:
    key = normalize_alias(alias)
    if not key:
        return "Alias must not be empty"

    # Last write wins
    store.aliases[key] = game_id
    return persist(store, f"Alias '{key}' successfully set to {game_id}; total aliases = {len(store)}")


def remove_aliases(store: AliasStore, aliases: Iterable[str]) -> list[str]:
    """
    Remove every alias that exists; report each missing one as it is found,
    then one summary line. The file is only rewritten if something was removed.
    """
    messages: list[str] = []
    found: list[str] = []

    # dict.fromkeys keeps first-seen order while dropping repeats
    for key in dict.fromkeys(normalize_alias(a) for a in aliases):
        if key in store.aliases:
            found.append(key)
        else:
            messages.append(f"Alias '{key}' not found")

    if not found:
        messages.append(f"Nothing to be removed; total aliases = {len(store)}")
        return messages

    for key in found:
        del store.aliases[key]

    listed = ", ".join(found)
    messages.append(persist(store, f"Aliases '{listed}' successfully removed; total aliases = {len(store)}"))
    return messages
