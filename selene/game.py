"""Game configuration, status and summary information."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

from selene.board import Board


class Status(enum.IntEnum):
    """The state of a game."""

    NOT_STARTED = 1
    IN_PROGRESS = 2
    FINISHED = 3
    DELETED = 4

    @classmethod
    def _missing_(cls, value: object) -> Status | None:
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        pseudo = int.__new__(cls, value)
        pseudo._name_ = None
        pseudo._value_ = value
        return pseudo

    @property
    def label(self) -> str:
        """The display value of the status."""
        return _STATUS_LABELS.get(int(self), "?")

    def __str__(self) -> str:
        return self.label


_STATUS_LABELS = {
    Status.NOT_STARTED: "Not Started",
    Status.IN_PROGRESS: "In Progress",
    Status.FINISHED: "Finished",
}

_BASE_RULES = (
    "Create or join a game from the Lobby after refreshing the games list.",
    "Any player can join a game that is not started, but active games can only be joined by players who started in them.",
    "After all players have joined the game, click the Start button to start the game.",
    "Arrange unused tiles in the game area form vertical and horizontal English words.",
    "Click the Snag button to get a new tile if all tiles are used in words. This also gives other players a new tile.",
    "Click the Swap button and then a tile to exchange it for three others.",
    "Click the Finish button to run the scoring function when there are no tiles left to use.  The scoring function determines if all of the player's tiles are used and form a continuous block of English words.  If successful, the player wins. Otherwise, the player's potential winning score is decremented and play continues.",
)


def _bool_field(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{key!r} must be a boolean, got {value!r}")
    return value


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{key!r} must be an integer, got {value!r}")
    return value


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object, got {data!r}")
    return data


@dataclass
class GameConfig:
    """Options for checking player words on a snag or game finish request."""

    check_on_snag: bool = False
    penalize: bool = False
    prohibit_duplicates: bool = False
    min_length: int = 0

    def rules(self) -> list[str]:
        """The rules of the game, with extra rules for customized options."""
        rules = list(_BASE_RULES)
        if self.check_on_snag:
            rules.append("Words are checked to be valid when a player tries to snag a new letter.")
        if self.penalize:
            rules.append(
                "If a player tries to snag unsuccessfully, "
                "the amount potential of win points is decremented"
            )
        if self.min_length > 2:
            rules.append(f"All words must be at least {self.min_length} letters long")
        if self.prohibit_duplicates:
            rules.append("Duplicate words are prohibited.")
        return rules

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.check_on_snag:
            data["checkOnSnag"] = True
        if self.penalize:
            data["penalize"] = True
        if self.prohibit_duplicates:
            data["prohibitDuplicates"] = True
        if self.min_length:
            data["minLength"] = self.min_length
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameConfig:
        data = _require_mapping(data, "game config")
        return cls(
            check_on_snag=_bool_field(data, "checkOnSnag"),
            penalize=_bool_field(data, "penalize"),
            prohibit_duplicates=_bool_field(data, "prohibitDuplicates"),
            min_length=_int_field(data, "minLength"),
        )


@dataclass
class Info:
    """Information about a game."""

    id: int = 0
    status: Status = Status(0)
    board: Board | None = None
    tiles_left: int = 0
    players: list[str] = field(default_factory=list)
    created_at: int = 0
    config: GameConfig | None = None
    final_boards: dict[str, Board] = field(default_factory=dict)
    capacity: int = 0

    def can_join(self, player_name: str) -> bool:
        """Tell whether the player can join: a former player, or a new one when there is room."""
        return player_name in self.players or (
            self.status == Status.NOT_STARTED and len(self.players) < self.capacity
        )

    def capacity_ratio(self) -> str:
        """The number of players over the capacity, such as "1/4"."""
        return f"{len(self.players)}/{self.capacity}"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        if self.status:
            data["status"] = int(self.status)
        if self.board is not None:
            data["board"] = self.board.to_dict()
        if self.tiles_left:
            data["tilesLeft"] = self.tiles_left
        if self.players:
            data["players"] = list(self.players)
        if self.created_at:
            data["createdAt"] = self.created_at
        if self.config is not None:
            data["config"] = self.config.to_dict()
        if self.final_boards:
            data["finalBoards"] = {
                name: self.final_boards[name].to_dict() for name in sorted(self.final_boards)
            }
        if self.capacity:
            data["capacity"] = self.capacity
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Info:
        data = _require_mapping(data, "game info")
        players = data.get("players") or []
        if not isinstance(players, list) or not all(isinstance(p, str) for p in players):
            raise ValueError(f"players must be an array of strings, got {players!r}")
        raw_board = data.get("board")
        raw_config = data.get("config")
        raw_final = _require_mapping(data.get("finalBoards") or {}, "final boards")
        return cls(
            id=_int_field(data, "id"),
            status=Status(_int_field(data, "status")),
            board=None if raw_board is None else Board.from_dict(raw_board),
            tiles_left=_int_field(data, "tilesLeft"),
            players=list(players),
            created_at=_int_field(data, "createdAt"),
            config=None if raw_config is None else GameConfig.from_dict(raw_config),
            final_boards={name: Board.from_dict(b) for name, b in raw_final.items()},
            capacity=_int_field(data, "capacity"),
        )