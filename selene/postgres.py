"""A user backend that calls database functions on a Postgres server."""

from __future__ import annotations

from typing import IO, Any, AnyStr, Iterable, Mapping, Protocol

from selene.sql import ExecFunction, NoRowsError, QueryFunction
from selene.user import IncorrectLoginError, User


class _Database(Protocol):
    def setup(self, files: Iterable[IO[AnyStr]]) -> None: ...

    def query(self, query: Any) -> tuple[Any, ...]: ...

    def exec(self, *args: Any) -> None: ...


class PostgresUserBackend:
    """Creates, reads, updates and deletes users through SQL functions."""

    def __init__(self, database: _Database) -> None:
        self.database = database

    def _exec(self, action: str, *queries: Any) -> None:
        try:
            self.database.exec(*queries)
        except Exception as err:
            raise RuntimeError(f"{action}: {err}") from err

    def create(self, user: User) -> None:
        """Add the username/password pair."""
        self._exec("creating user", ExecFunction("user_create", (user.username, user.password)))

    def read(self, user: User) -> User:
        """Read the user with the username; raise IncorrectLoginError if there is none."""
        query = QueryFunction("user_read", ["username", "password", "points"], (user.username,))
        try:
            username, password, points = self.database.query(query)
        except NoRowsError as err:
            raise IncorrectLoginError() from err
        except Exception as err:
            raise RuntimeError(f"querying user: {err}") from err
        return User(username=username, password=password, points=points)

    def update_password(self, user: User) -> None:
        """Update the password of the user identified by the username."""
        self._exec(
            "updating user password",
            ExecFunction("user_update_password", (user.username, user.password)),
        )

    def update_points_increment(self, username_points: Mapping[str, int]) -> None:
        """Increment the points of every user, in username order."""
        queries = [
            ExecFunction("user_update_points_increment", (username, username_points[username]))
            for username in sorted(username_points)
        ]
        self._exec("incrementing user points", *queries)

    def delete(self, user: User) -> None:
        """Remove the user."""
        self._exec("deleting user", ExecFunction("user_delete", (user.username,)))