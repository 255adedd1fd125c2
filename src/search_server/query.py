"""
Query parsing.

A raw query is a space separated list of words. A word prefixed with ``-`` is a
minus word: documents containing it are excluded from results. Every other
word is a plus word and contributes to relevance. Stop words are dropped from
both sets.

The same word may land in both sets (``"cat -cat"``); exclusion runs after
scoring, so such documents are excluded.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from search_server.errors import DoubleMinusError, EmptyQueryWordError, InvalidCharactersError
from search_server.text import StopWords, is_valid_word, tokenize


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    plus_words: frozenset[str] = field(default_factory=frozenset)
    minus_words: frozenset[str] = field(default_factory=frozenset)


class QueryParser:
    def __init__(self, stop_words: StopWords):
        self.stop_words = stop_words

    def parse_query_word(self, text: str) -> QueryWord:
        """
        Classifies a single query token.

        Raises:
            EmptyQueryWordError: For an empty token or a bare ``-``.
            DoubleMinusError: For a token starting with ``--``.
            InvalidCharactersError: If the word contains a control character.
        """
        if not text:
            raise EmptyQueryWordError("Query word is empty")
        is_minus = text.startswith("-")
        word = text[1:] if is_minus else text
        if not word:
            raise EmptyQueryWordError("Empty minus word")
        if word.startswith("-"):
            raise DoubleMinusError(f"Double minus in query word {text!r}")
        if not is_valid_word(word):
            raise InvalidCharactersError(f"Query word {word!r} contains invalid characters")
        return QueryWord(data=word, is_minus=is_minus, is_stop=word in self.stop_words)

    def parse(self, raw_query: str) -> Query:
        plus_words: set[str] = set()
        minus_words: set[str] = set()
        for token in tokenize(raw_query):
            query_word = self.parse_query_word(token)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                minus_words.add(query_word.data)
            else:
                plus_words.add(query_word.data)
        return Query(plus_words=frozenset(plus_words), minus_words=frozenset(minus_words))
