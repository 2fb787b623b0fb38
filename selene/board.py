"""A player's board: unused tiles and tiles placed on a grid."""

from __future__ import annotations

import json
from collections import defaultdict
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Mapping

from selene.tile import Position, Tile

MIN_COLS = 10
MIN_ROWS = 10


def _config_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"board config {key!r} must be an integer, got {value!r}")
    return value


@dataclass
class BoardConfig:
    """The dimensions of a board."""

    num_rows: int = 0
    num_cols: int = 0

    def validate(self) -> None:
        """Raise ValueError if the board has too few rows or columns."""
        if self.num_rows < MIN_ROWS:
            raise ValueError(f"not enough rows on board, must be >= {MIN_ROWS}")
        if self.num_cols < MIN_COLS:
            raise ValueError(f"not enough columns on board, must be >= {MIN_COLS}")

    def new_board(self, unused_tiles: Iterable[Tile]) -> Board:
        """Create a board of this size holding the tiles as unused tiles."""
        try:
            self.validate()
        except ValueError as err:
            raise ValueError(f"creating board: validation: {err}") from err
        tiles = list(unused_tiles)
        return Board(
            unused_tiles={t.id: t for t in tiles},
            unused_tile_ids=[t.id for t in tiles],
            config=replace(self),
        )


@dataclass
class ResizeResult:
    """The outcome of a board resize."""

    info: str = ""
    tiles: list[Tile] = field(default_factory=list)
    tile_positions: list[Position] = field(default_factory=list)


def _split_words(positions: list[Position], ord_: Callable[[Position], int]) -> list[str]:
    words: list[str] = []
    current: list[str] = []
    previous: Position | None = None
    for position in positions:
        if previous is not None and ord_(previous) < ord_(position) - 1:
            if len(current) > 1:
                words.append("".join(current))
            current = []
        current.append(position.tile.ch)
        previous = position
    if len(current) > 1:
        words.append("".join(current))
    return words


@dataclass
class Board:
    """The tiles of one player in a game."""

    unused_tiles: dict[int, Tile] = field(default_factory=dict)
    unused_tile_ids: list[int] = field(default_factory=list)
    used_tiles: dict[int, Position] = field(default_factory=dict)
    used_tile_locs: dict[int, dict[int, Tile]] = field(default_factory=dict)
    config: BoardConfig = field(default_factory=BoardConfig)

    def _has_tile(self, tile: Tile) -> bool:
        return tile.id in self.unused_tiles or tile.id in self.used_tiles

    def _sorted_unused_tiles(self) -> list[Tile]:
        return [self.unused_tiles.get(tile_id, Tile()) for tile_id in self.unused_tile_ids]

    def _sorted_used_tiles(self) -> list[Position]:
        return sorted(self.used_tiles.values(), key=lambda p: (p.x, p.y))

    def add_tile(self, tile: Tile) -> None:
        """Add a tile to the unused tiles; raise ValueError if the board has it."""
        if self._has_tile(tile):
            raise ValueError(f"player already has tile with id {tile.id}")
        self.unused_tiles[tile.id] = tile
        self.unused_tile_ids.append(tile.id)

    def remove_tile(self, tile: Tile) -> None:
        """Remove a tile; raise ValueError if the board does not have it."""
        if not self._has_tile(tile):
            raise ValueError(f"player does not have tile with id {tile.id}")
        if tile.id in self.unused_tiles:
            self._remove_unused_tile(tile)
        else:
            self._remove_used_tile(tile)

    def _remove_unused_tile(self, tile: Tile) -> None:
        self.unused_tiles.pop(tile.id, None)
        if tile.id in self.unused_tile_ids:
            self.unused_tile_ids.remove(tile.id)

    def _clear_location(self, x: int, y: int) -> None:
        column = self.used_tile_locs.get(x)
        if column is None:
            return
        column.pop(y, None)
        if not column:
            del self.used_tile_locs[x]

    def _remove_used_tile(self, tile: Tile) -> None:
        position = self.used_tiles.pop(tile.id)
        self._clear_location(position.x, position.y)

    def move_tiles(self, tile_positions: Mapping[int, Position]) -> None:
        """Move tiles to the positions; raise ValueError and change nothing if they cannot move."""
        if not self.can_move_tiles(tile_positions):
            raise ValueError(
                "cannot move tiles that the player does not have "
                "or cannot move tiles to the same spot as others"
            )
        for position in tile_positions.values():
            tile_id = position.tile.id
            if tile_id in self.unused_tiles:
                self._remove_unused_tile(position.tile)
            else:
                old = self.used_tiles[tile_id]
                occupant = self.used_tile_locs.get(old.x, {}).get(old.y)
                if occupant is not None and occupant.id == tile_id:
                    self._clear_location(old.x, old.y)
            self.used_tile_locs.setdefault(position.x, {})[position.y] = position.tile
            self.used_tiles[tile_id] = position

    def can_move_tiles(self, tile_positions: Mapping[int, Position]) -> bool:
        """Tell whether the tiles can move on the board without overlapping other tiles."""
        moved_ids: set[int] = set()
        moved_positions: set[tuple[int, int]] = set()
        for position in tile_positions.values():
            if (
                position.x < 0
                or position.y < 0
                or position.x >= self.config.num_cols
                or position.y >= self.config.num_rows
                or not self._has_tile(position.tile)
            ):
                return False
            moved_ids.add(position.tile.id)
            location = (position.x, position.y)
            if location in moved_positions:
                return False
            moved_positions.add(location)
        return all(
            tile_id in moved_ids or (position.x, position.y) not in moved_positions
            for tile_id, position in self.used_tiles.items()
        )

    def can_be_finished(self) -> bool:
        """Tell whether every tile is used and the used tiles form one group."""
        return not self.unused_tiles and self._has_single_used_group()

    def _has_single_used_group(self) -> bool:
        start = next(
            ((x, y, t) for x, column in self.used_tile_locs.items() for y, t in column.items()),
            None,
        )
        seen: set[int] = set()
        stack = [start] if start is not None else []
        while stack:
            x, y, tile = stack.pop()
            if tile.id in seen:
                continue
            seen.add(tile.id)
            for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                neighbour = self.used_tile_locs.get(x + dx, {}).get(y + dy)
                if neighbour is not None and neighbour.id not in seen:
                    stack.append((x + dx, y + dy, neighbour))
        return len(seen) == len(self.used_tiles)

    def used_tile_words(self) -> list[str]:
        """All horizontal words, row by row, then all vertical words, column by column."""
        rows: dict[int, list[Tile]] = defaultdict(list)
        columns: dict[int, list[Tile]] = defaultdict(list)
        for x, column in self.used_tile_locs.items():
            columns[x]
            for y, tile in column.items():
                columns[x].append(tile)
                rows[y].append(tile)
        horizontal = self._words(rows, lambda p: p.x)
        vertical = self._words(columns, lambda p: p.y)
        return horizontal + vertical

    def _words(
        self, groups: Mapping[int, list[Tile]], ord_: Callable[[Position], int]
    ) -> list[str]:
        words: list[str] = []
        for key in sorted(groups):
            positions = sorted(
                (self.used_tiles.get(t.id, Position()) for t in groups[key]), key=ord_
            )
            words.extend(_split_words(positions, ord_))
        return words

    def resize(self, config: BoardConfig) -> ResizeResult:
        """Use the new size, moving tiles that no longer fit back to the unused tiles."""
        kept: list[Position] = []
        moved: list[Tile] = []
        for position in list(self.used_tiles.values()):
            if config.num_cols <= position.x or config.num_rows <= position.y:
                self.remove_tile(position.tile)
                self.add_tile(position.tile)
                moved.append(position.tile)
            else:
                kept.append(position)
        self.config = replace(config)
        kept.sort(key=lambda p: (-p.y, p.x))
        result = ResizeResult(
            tiles=[self.unused_tiles[tile_id] for tile_id in self.unused_tile_ids],
            tile_positions=kept,
        )
        if moved:
            result.info = (
                f"moving {len(moved)} tile(s) to the unused area of the narrower/shorter board"
            )
        return result

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        unused = self._sorted_unused_tiles()
        if unused:
            data["tiles"] = [t.to_dict() for t in unused]
        used = self._sorted_used_tiles()
        if used:
            data["tilePositions"] = [p.to_dict() for p in used]
        if self.config.num_rows != 0 or self.config.num_cols != 0:
            data["config"] = {"r": self.config.num_rows, "c": self.config.num_cols}
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Board:
        if not isinstance(data, Mapping):
            raise ValueError(f"board must be an object, got {data!r}")
        raw_tiles = data.get("tiles") or []
        raw_positions = data.get("tilePositions") or []
        if not isinstance(raw_tiles, list):
            raise ValueError(f"board tiles must be an array, got {raw_tiles!r}")
        if not isinstance(raw_positions, list):
            raise ValueError(f"board tile positions must be an array, got {raw_positions!r}")
        board = from_tiles(
            [Tile.from_dict(t) for t in raw_tiles],
            [Position.from_dict(p) for p in raw_positions],
        )
        raw_config = data.get("config")
        if raw_config is not None:
            if not isinstance(raw_config, Mapping):
                raise ValueError(f"board config must be an object, got {raw_config!r}")
            board.config = BoardConfig(
                num_rows=_config_int(raw_config, "r"),
                num_cols=_config_int(raw_config, "c"),
            )
        return board

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str | bytes) -> Board:
        return cls.from_dict(json.loads(text))


def from_tiles(tiles: Iterable[Tile], tile_positions: Iterable[Position]) -> Board:
    """Create a board with the tiles unused and the tile positions used."""
    board = Board()
    for tile in tiles:
        board.unused_tiles[tile.id] = tile
        board.unused_tile_ids.append(tile.id)
    for position in tile_positions:
        board.used_tiles[position.tile.id] = position
        board.used_tile_locs.setdefault(position.x, {})[position.y] = position.tile
    return board