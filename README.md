# selene

Building blocks for a multiplayer word-tile puzzle game. Each player arranges
lettered tiles on a board into connected horizontal and vertical words. A player
wins by using every tile in one connected block of words.

## Modules

- `selene.tile`: `Tile` and `Position` dataclasses. `new_letter` and `new_tile`
  accept only uppercase letters `A` to `Z` and raise `ValueError` otherwise.
  `letter_to_json` and `letter_from_json` convert one letter to and from JSON.
  Tiles and positions convert to and from dicts with `to_dict` and `from_dict`.
- `selene.board`: `BoardConfig` sets the number of rows and columns. Both must be
  at least 10 for `validate` and `new_board`. `Board` can `add_tile`,
  `remove_tile`, `move_tiles` and check `can_move_tiles`. `can_be_finished`
  tells whether every tile is used in one group. `used_tile_words` lists the
  words, horizontal ones first. `resize` returns a `ResizeResult` and moves
  tiles that no longer fit back to the unused tiles. The board converts to and
  from JSON with `to_json` and `from_json`. `from_tiles` builds a board from
  unused tiles and used positions.
- `selene.word`: `new_validator` reads whitespace-separated lower case words from
  a file object. It raises `ValueError` on any word that is not lower case.
  `Validator.validate` checks a word in any case.
- `selene.game`: `Status`. `GameConfig`, whose `rules()` lists the game rules
  with extra rules for each option that is set. `Info` has `can_join` and
  `capacity_ratio`.
- `selene.message`: `MessageType` and `Message`, which convert to and from JSON.
  The player name and address are never serialized. `send(message, out, debug, log)`
  puts a message on anything with a `put` method, such as `queue.Queue`. When
  `debug` is true it logs a line before and after.
- `selene.user`: `User.validate` checks the username and password. The username
  must be 1 to 32 bytes of lower case letters. The password must be at least
  8 bytes. `NoDatabaseBackend.read` returns a copy of the user. Its other
  methods raise `NoDatabaseError`. `IncorrectLoginError` signals an unknown
  login.
- `selene.sql`: `QueryFunction`, `ExecFunction` and `RawQuery` build SQL with
  `$1, $2, ...` placeholders. `Database` wraps a DB-API 2.0 connection.
  - `setup` runs files as raw queries.
  - `query` returns the first row or raises `NoRowsError`.
  - `exec` runs queries in one transaction and requires every `ExecFunction`
    to change exactly one row.
  - `DatabaseConfig.query_period` is a time limit in seconds.
- `selene.postgres`: `PostgresUserBackend` creates, reads, updates and deletes
  users by calling the SQL functions `user_create`, `user_read`,
  `user_update_password`, `user_update_points_increment` and `user_delete`.
- `selene.password`: `PasswordHandler` hashes and checks passwords with bcrypt.
  The default cost is 10.
- `selene.embed`: `unembed(root)` reads the `embed` directory under `root` into
  an `EmbeddedData` object:
  - files: `version.txt`, `words.txt`, `tls-cert.pem`, `tls-key.pem`;
  - directories: `static`, `template`, `sql`.

  `EmbeddedData.sql_files` opens the user SQL setup files in order.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import io

from selene.board import BoardConfig
from selene.password import PasswordHandler
from selene.tile import Position, new_tile
from selene.word import new_validator

tiles = [new_tile(1, "C"), new_tile(2, "A"), new_tile(3, "T")]
board = BoardConfig(num_rows=10, num_cols=10).new_board(tiles)
board.move_tiles({t.id: Position(tile=t, x=x, y=0) for x, t in enumerate(tiles)})

validator = new_validator(io.StringIO("cat dog"))
print(board.used_tile_words())                                      # ['CAT']
print(all(validator.validate(w) for w in board.used_tile_words()))  # True
print(board.can_be_finished())                                      # True
print(board.to_json())

password = "password"
handler = PasswordHandler()
hashed = handler.hash(password)
print(handler.is_correct(hashed, password))                         # True
```

## What this package does not do

It has no command to run and no web server, and it does not handle sockets or
lobbies. It does not run games between players: it provides the board, tile,
word, game-info and message types that such a server would use.

User storage works in two ways:

- `NoDatabaseBackend`, which stores nothing;
- `PostgresUserBackend` over `selene.sql.Database`, on a DB-API connection
  that you supply.

No database driver is bundled, and the package does not ship the SQL that
defines the `user_*` functions.