"""Messages passed between the user interface and the server."""

from __future__ import annotations

import enum
import json
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

from selene.game import Info


class MessageType(enum.IntEnum):
    """The purpose of a message."""

    CREATE_GAME = 1
    JOIN_GAME = 2
    LEAVE_GAME = 3
    DELETE_GAME = 4
    GAME_CHAT = 5
    REFRESH_GAME_BOARD = 6
    CHANGE_GAME_STATUS = 7
    CHANGE_GAME_TILES = 8
    SNAG_GAME_TILE = 9
    SWAP_GAME_TILE = 10
    MOVE_GAME_TILE = 11
    GAME_INFOS = 12
    SOCKET_WARNING = 13
    SOCKET_ERROR = 14
    SOCKET_HTTP_PING = 15
    SOCKET_ADD = 16
    SOCKET_CLOSE = 17
    PLAYER_REMOVE = 18


def _message_type(value: Any) -> MessageType | int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"message type must be an integer, got {value!r}")
    try:
        return MessageType(value)
    except ValueError:
        return value


@dataclass
class Message:
    """Information to or from a socket for a game or the lobby.

    The player name and address are internal and never serialized.
    """

    type: MessageType | int = 0
    info: str = ""
    game: Info | None = None
    games: list[Info] = field(default_factory=list)
    player_name: str = ""
    addr: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": int(self.type)}
        if self.info:
            data["info"] = self.info
        if self.game is not None:
            data["game"] = self.game.to_dict()
        if self.games:
            data["games"] = [g.to_dict() for g in self.games]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Message:
        if not isinstance(data, Mapping):
            raise ValueError(f"message must be an object, got {data!r}")
        info = data.get("info", "")
        if not isinstance(info, str):
            raise ValueError(f"message info must be a string, got {info!r}")
        raw_game = data.get("game")
        raw_games = data.get("games") or []
        if not isinstance(raw_games, list):
            raise ValueError(f"message games must be an array, got {raw_games!r}")
        return cls(
            type=_message_type(data.get("type", 0)),
            info=info,
            game=None if raw_game is None else Info.from_dict(raw_game),
            games=[Info.from_dict(g) for g in raw_games],
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str | bytes) -> Message:
        return cls.from_dict(json.loads(text))


class _Outbox(Protocol):
    def put(self, item: Message) -> Any: ...


def send(message: Message, out: _Outbox, debug: bool, log: logging.Logger) -> None:
    """Put the message on the outbox.

    When debugging, a line is logged before and after sending to help find deadlocks.
    """
    if not debug:
        out.put(message)
        return
    message_id = random.randrange(1 << 63)
    log.info("[id: %d] sending message: %r", message_id, message)
    try:
        out.put(message)
    finally:
        log.info("[id: %d] message sent", message_id)