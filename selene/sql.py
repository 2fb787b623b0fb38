"""Queries and a transactional wrapper around a DB-API 2.0 connection."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import IO, Any, AnyStr, Iterable, Protocol, Sequence


@dataclass(frozen=True)
class DatabaseConfig:
    """How the database should run.

    ``query_period`` is the number of seconds any database action may take.
    """

    query_period: float


class NoRowsError(LookupError):
    """Raised when a query that should return a row returns none."""

    def __init__(self, message: str = "no rows in result set") -> None:
        super().__init__(message)


class _Query(Protocol):
    def cmd(self) -> str: ...

    def args(self) -> tuple[Any, ...]: ...


def _placeholders(count: int) -> str:
    return ", ".join(f"${i}" for i in range(1, count + 1))


@dataclass(frozen=True)
class QueryFunction:
    """A query that reads columns from a database function."""

    name: str
    cols: Sequence[str]
    arguments: Sequence[Any] = ()

    def cmd(self) -> str:
        """The SQL that calls the function with numbered placeholders."""
        columns = ", ".join(self.cols)
        return f"SELECT {columns} FROM {self.name}({_placeholders(len(self.arguments))})"

    def args(self) -> tuple[Any, ...]:
        return tuple(self.arguments)


@dataclass(frozen=True)
class ExecFunction:
    """A query that changes data by calling a database function."""

    name: str
    arguments: Sequence[Any] = ()

    def cmd(self) -> str:
        """The SQL that calls the function with numbered placeholders."""
        return f"SELECT {self.name}({_placeholders(len(self.arguments))})"

    def args(self) -> tuple[Any, ...]:
        return tuple(self.arguments)


@dataclass(frozen=True)
class RawQuery:
    """Raw SQL without arguments."""

    text: str

    def cmd(self) -> str:
        return self.text

    def args(self) -> tuple[Any, ...]:
        """Raw SQL carries no arguments, so the sequence is always empty."""
        return tuple()


def _check_deadline(deadline: float) -> None:
    if time.monotonic() >= deadline:
        raise TimeoutError("database operation timed out")


@dataclass
class Database:
    """A SQL database reached through a DB-API 2.0 connection."""

    connection: Any
    config: DatabaseConfig

    def _deadline(self) -> float:
        return time.monotonic() + self.config.query_period

    def setup(self, files: Iterable[IO[AnyStr]]) -> None:
        """Run the contents of each file as a raw query, all in one transaction."""
        deadline = self._deadline()
        _check_deadline(deadline)
        queries = []
        for index, file in enumerate(files):
            try:
                content = file.read()
            except Exception as err:
                raise RuntimeError(f"reading sql setup query {index}: {err}") from err
            if isinstance(content, bytes):
                content = content.decode("utf-8")
            queries.append(RawQuery(content))
        try:
            self.exec(*queries)
        except TimeoutError:
            raise
        except Exception as err:
            raise RuntimeError(f"running setup queries: {err}") from err

    def query(self, query: _Query) -> tuple[Any, ...]:
        """Return the first row of the query; raise NoRowsError if there is none."""
        deadline = self._deadline()
        _check_deadline(deadline)
        cursor = self.connection.cursor()
        try:
            try:
                _execute(cursor, query)
                row = cursor.fetchone()
            except Exception as err:
                raise RuntimeError(f"querying into destination arguments: {err}") from err
            if row is None:
                raise NoRowsError()
            return tuple(row)
        finally:
            cursor.close()

    def exec(self, *args: _Query) -> None:
        """Run the queries in a transaction.

        Each ExecFunction must change exactly one row; otherwise the
        transaction is rolled back and RuntimeError is raised.
        """
        deadline = self._deadline()
        _check_deadline(deadline)
        try:
            cursor = self.connection.cursor()
        except Exception as err:
            raise RuntimeError(f"beginning transaction: {err}") from err
        try:
            for index, query in enumerate(args):
                try:
                    _check_deadline(deadline)
                    _execute(cursor, query)
                    if isinstance(query, ExecFunction) and cursor.rowcount != 1:
                        raise RuntimeError(
                            f"wanted to update 1 row, but updated {cursor.rowcount} "
                            f"when calling {query.name}"
                        )
                except Exception as err:
                    failure = RuntimeError(f"executing query {index}: {err}")
                    try:
                        self.connection.rollback()
                    except Exception as rollback_err:
                        raise RuntimeError(
                            f"rolling back transaction due to {failure}: {rollback_err}"
                        ) from rollback_err
                    raise failure from err
            try:
                self.connection.commit()
            except Exception as err:
                raise RuntimeError(f"committing transaction: {err}") from err
        finally:
            cursor.close()


def _execute(cursor: Any, query: _Query) -> None:
    arguments = query.args()
    if isinstance(query, RawQuery):
        cursor.execute(query.cmd())
    else:
        cursor.execute(query.cmd(), arguments)