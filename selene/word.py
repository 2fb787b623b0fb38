"""Checking words against a dictionary of lower case words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, AnyStr


@dataclass(frozen=True)
class Validator:
    """A set of valid lower case words."""

    words: frozenset[str] = field(default_factory=frozenset)

    def validate(self, word: str) -> bool:
        """Tell whether the word, converted to lower case, is valid."""
        return word.lower() in self.words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.validate(word)

    def __len__(self) -> int:
        return len(self.words)


def new_validator(reader: IO[AnyStr] | None) -> Validator:
    """Read whitespace separated lower case words from the reader.

    Raises ValueError if there is no reader or a word is not all lower case.
    Errors from reading are passed on.
    """
    if reader is None:
        raise ValueError("reader required to initialize word validator from")
    content = reader.read()
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    words = frozenset(content.split())
    for word in words:
        if not all(ch.islower() for ch in word):
            raise ValueError("wanted only lower case words, got " + word)
    return Validator(words)