"""Hashing and checking stored passwords with bcrypt."""

from __future__ import annotations

from dataclasses import dataclass

import bcrypt

DEFAULT_COST = 10


@dataclass(frozen=True)
class PasswordHandler:
    """Hashes passwords and checks them against hashes."""

    cost: int = DEFAULT_COST

    def hash(self, password: str) -> bytes:
        """Compute a salted hash of the password."""
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self.cost))

    def is_correct(self, hashed_password: bytes, password: str) -> bool:
        """Tell whether the password matches the hash.

        Raises ValueError if the hash is malformed.
        """
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password)