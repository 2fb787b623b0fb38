"""Tiles, their letters and their positions on a game board."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

ZERO_LETTER = "\x00"


def new_letter(ch: str) -> str:
    """Return ``ch`` if it is a single uppercase letter from A to Z."""
    if not isinstance(ch, str) or len(ch) != 1 or not "A" <= ch <= "Z":
        raise ValueError(f"letter must be uppercase and between A and Z: {ch!r}")
    return ch


def new_tile(tile_id: int, ch: str) -> Tile:
    """Create a tile, raising ValueError if the letter is not in the A-Z range."""
    return Tile(id=tile_id, ch=new_letter(ch))


def letter_to_json(ch: str) -> str:
    """Encode a letter as a JSON string."""
    return json.dumps(ch)


def letter_from_json(value: str | bytes) -> str:
    """Decode a letter from JSON text holding a one-character string."""
    decoded = json.loads(value)
    return _letter_from_value(decoded)


def _letter_from_value(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"letter must be a string, got {value!r}")
    if len(value) != 1:
        raise ValueError("letter longer than 1 character: " + value)
    return new_letter(value)


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{key!r} must be an integer, got {value!r}")
    return value


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object, got {data!r}")
    return data


@dataclass(frozen=True)
class Tile:
    """A piece in the game."""

    id: int = 0
    ch: str = ZERO_LETTER

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "ch": self.ch}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Tile:
        data = _require_mapping(data, "tile")
        tile_id = _int_field(data, "id")
        ch = _letter_from_value(data["ch"]) if "ch" in data else ZERO_LETTER
        return cls(id=tile_id, ch=ch)


@dataclass(frozen=True)
class Position:
    """A tile and its location: x is the column, y is the row."""

    tile: Tile = field(default_factory=Tile)
    x: int = 0
    y: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"t": self.tile.to_dict(), "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Position:
        data = _require_mapping(data, "tile position")
        raw_tile = data.get("t")
        tile = Tile() if raw_tile is None else Tile.from_dict(raw_tile)
        return cls(tile=tile, x=_int_field(data, "x"), y=_int_field(data, "y"))