"""Users and a user backend for running without a database."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, NoReturn

MAX_USERNAME_LENGTH = 32
MIN_PASSWORD_LENGTH = 8


class IncorrectLoginError(Exception):
    """Raised when a username and password do not identify a user."""

    def __init__(self, message: str = "incorrect username/password") -> None:
        super().__init__(message)


class NoDatabaseError(RuntimeError):
    """Raised when a change is requested but no database stores users."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"no database to {action}")


@dataclass
class User:
    """The account information of a player."""

    username: str = ""
    password: str = ""
    points: int = 0

    def validate(self) -> None:
        """Raise ValueError if the username or password is not valid."""
        _validate_username(self.username)
        _validate_password(self.password)


def _validate_username(username: str) -> None:
    size = len(username.encode("utf-8"))
    if size < 1:
        raise ValueError("username required")
    if size > MAX_USERNAME_LENGTH:
        raise ValueError("username must be less than 32 characters long")
    if not all(ch.islower() for ch in username):
        raise ValueError("username must be made of only lowercase letters")


def _validate_password(password: str) -> None:
    if len(password.encode("utf-8")) < MIN_PASSWORD_LENGTH:
        raise ValueError("password must be at least 8 characters long")


class NoDatabaseBackend:
    """A user backend with no storage: reads echo the user, changes fail."""

    @staticmethod
    def _refuse(action: str) -> NoReturn:
        error = NoDatabaseError(action)
        raise error

    def create(self, user: User) -> None:
        """Refuse to store the user, since there is no database."""
        self._refuse("create user")

    def read(self, user: User) -> User:
        """Return a copy of the user as given."""
        return replace(user)

    def update_password(self, user: User) -> None:
        """Refuse to change the password, since there is no database."""
        self._refuse("update user password")

    def update_points_increment(self, username_points: Mapping[str, int]) -> None:
        """Refuse to change points, since there is no database."""
        self._refuse("increment user points")

    def delete(self, user: User) -> None:
        """Refuse to delete the user, since there is no database."""
        self._refuse("delete user")