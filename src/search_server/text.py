"""Tokenization, character validation and the stop word set."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from search_server.errors import InvalidCharactersError

# Any codepoint below the space character is a control character.
_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f]")


def tokenize(text: str) -> list[str]:
    """Splits text on ASCII spaces, dropping empty runs."""
    return [word for word in text.split(" ") if word]


def is_valid_word(text: str) -> bool:
    """True if ``text`` contains no control characters."""
    return _CONTROL_CHARACTERS.search(text) is None


class StopWords:
    """
    Immutable set of terms ignored during indexing and query parsing.

    Args:
        words: Either a space separated string of stop words or an iterable of
            individual words. Empty words are dropped.

    Raises:
        InvalidCharactersError: If any stop word contains a control character.
    """

    def __init__(self, words: str | Iterable[str] = ()):
        if isinstance(words, str):
            words = tokenize(words)
        unique = frozenset(word for word in words if word)
        invalid = sorted(word for word in unique if not is_valid_word(word))
        if invalid:
            raise InvalidCharactersError(f"Some of stop words are invalid: {invalid!r}")
        self._words = unique

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWords({sorted(self._words)!r})"

    def filter(self, words: Iterable[str]) -> list[str]:
        """Returns ``words`` with stop words removed, order preserved."""
        return [word for word in words if word not in self._words]
