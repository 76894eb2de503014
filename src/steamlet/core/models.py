from __future__ import annotations
from dataclasses import dataclass

MAX_GAME_ID = 2**32 - 1 # Steam app ids are unsigned 32-bit


@dataclass(frozen=True)
class Alias:
    alias: str
    game_id: int


def normalize_alias(alias: str) -> str:
    return alias.strip().lower()


def is_game_id(value: object) -> bool:
    # bool is an int subclass; json never gives us one for a number anyway
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_GAME_ID


def parse_game_id(text: str) -> int:
    """Parse a Steam app id, raising ValueError for anything but a u32."""
    # One leading '+' is allowed, whitespace is not
    digits = text[1:] if text.startswith("+") else text
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"Not a Steam ID: {text!r}")
    value = int(digits)
    if value > MAX_GAME_ID:
        raise ValueError(f"Steam ID out of range: {value}")
    return value
