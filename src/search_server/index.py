"""
Inverted index over ingested documents.

The index owns two containers and is the only thing allowed to mutate them:

- postings: term -> {document_id: term frequency}
- documents: document_id -> DocumentData (rating, status)

plus the insertion-ordered list of document ids. Term frequency of a term in a
document is its occurrence count divided by the number of non stop words in the
document, so the frequencies of one document sum to 1.0.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

import numpy as np

from search_server.document import DocumentData, DocumentStatus, compute_average_rating
from search_server.errors import (
    DocumentIndexError,
    DuplicateDocumentIdError,
    InvalidCharactersError,
    InvalidDocumentIdError,
)
from search_server.text import StopWords, is_valid_word, tokenize

_EMPTY_POSTINGS: Mapping[int, float] = MappingProxyType({})


class InvertedIndex:
    """
    Term -> document -> frequency mapping with per-document metadata.

    Args:
        stop_words: Terms that are never indexed.
    """

    def __init__(self, stop_words: StopWords | None = None):
        self.stop_words = stop_words if stop_words is not None else StopWords()
        self._postings: dict[str, dict[int, float]] = {}
        self._documents: dict[int, DocumentData] = {}
        self._document_ids: list[int] = []

    def __len__(self) -> int:
        return len(self._document_ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._document_ids)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def document_count(self) -> int:
        return len(self._document_ids)

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        """
        Indexes a document.

        All validation happens before the first mutation, so a failed call
        leaves the index untouched.

        Raises:
            InvalidDocumentIdError: If ``document_id`` is negative.
            DuplicateDocumentIdError: If ``document_id`` was already added.
            InvalidCharactersError: If ``text`` contains a control character.
        """
        if document_id < 0:
            raise InvalidDocumentIdError(f"Document id {document_id} is negative")
        if document_id in self._documents:
            raise DuplicateDocumentIdError(f"Document id {document_id} already exists")
        if not is_valid_word(text):
            raise InvalidCharactersError(f"Document {document_id} contains invalid characters")

        words = self.stop_words.filter(tokenize(text))
        frequencies = self._term_frequencies(words)
        rating = compute_average_rating(ratings)

        for term, frequency in frequencies.items():
            self._postings.setdefault(term, {})[document_id] = frequency
        self._documents[document_id] = DocumentData(rating=rating, status=status)
        self._document_ids.append(document_id)

    @staticmethod
    def _term_frequencies(words: list[str]) -> dict[str, float]:
        if not words:
            return {}
        total = len(words)
        return {term: count / total for term, count in Counter(words).items()}

    def document_id_at(self, position: int) -> int:
        """Returns the id added at insertion-order ``position``."""
        if not 0 <= position < len(self._document_ids):
            raise DocumentIndexError(
                f"Position {position} is out of range [0, {len(self._document_ids)})"
            )
        return self._document_ids[position]

    def document(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentIndexError(f"Document id {document_id} is not indexed") from None

    def postings(self, term: str) -> Mapping[int, float]:
        """Read-only ``{document_id: term frequency}`` for ``term``."""
        postings = self._postings.get(term)
        return MappingProxyType(postings) if postings is not None else _EMPTY_POSTINGS

    def has_term(self, term: str) -> bool:
        return term in self._postings

    def document_frequency(self, term: str) -> int:
        """Number of documents containing ``term``."""
        return len(self._postings.get(term, ()))

    def inverse_document_frequency(self, term: str) -> float:
        """
        Classic IDF:
            idf(t) = ln(N / df(t))
        Terms absent from the index have an IDF of 0.
        """
        df = self.document_frequency(term)
        if df == 0:
            return 0.0
        return float(np.log(self.document_count() / df))

    def word_frequencies(self, document_id: int) -> dict[str, float]:
        """Term frequencies of one document; empty for unknown ids."""
        return {
            term: postings[document_id]
            for term, postings in self._postings.items()
            if document_id in postings
        }
