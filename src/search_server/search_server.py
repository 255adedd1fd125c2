"""
Search server: TF-IDF ranking over an inverted index with plus/minus words.

Usage:
    from search_server import DocumentStatus, SearchServer

    server = SearchServer("and in at")
    server.add_document(1, "curly cat curly tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.find_top_documents("curly -dog")
    server.find_top_documents("cat", DocumentStatus.BANNED)
    server.find_top_documents("cat", lambda document_id, status, rating: rating > 3)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import cmp_to_key

from search_server.config import SearchServerConfig
from search_server.document import Document, DocumentStatus
from search_server.index import InvertedIndex
from search_server.query import Query, QueryParser
from search_server.text import StopWords

# =============================================================================
# Document predicates
# =============================================================================

# (document_id, status, rating) -> keep document?
DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting only documents with exactly ``status``."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status is status

    return predicate


# =============================================================================
# Search server
# =============================================================================


class SearchServer:
    """
    In-memory document search engine.

    Args:
        stop_words: Space separated string or iterable of stop words. Overrides
            ``config.stop_words`` when given.
        config: Result cap, tie tolerance and default stop words.

    Not safe for concurrent mutation; callers sharing an instance across
    threads must serialise ``add_document`` against queries.
    """

    def __init__(
        self,
        stop_words: str | Iterable[str] | None = None,
        config: SearchServerConfig | None = None,
    ):
        self.config = config if config is not None else SearchServerConfig()
        self.stop_words = StopWords(self.config.stop_words if stop_words is None else stop_words)
        self.index = InvertedIndex(self.stop_words)
        self.query_parser = QueryParser(self.stop_words)

    def __len__(self) -> int:
        return self.index.document_count()

    def __iter__(self) -> Iterator[int]:
        return iter(self.index)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        self.index.add_document(document_id, document, status, ratings)

    def document_count(self) -> int:
        return self.index.document_count()

    def document_id_at(self, position: int) -> int:
        return self.index.document_id_at(position)

    def word_frequencies(self, document_id: int) -> dict[str, float]:
        return self.index.word_frequencies(document_id)

    def find_top_documents(
        self,
        raw_query: str,
        document_predicate: DocumentStatus | DocumentPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """
        Ranks documents matching ``raw_query``.

        Args:
            raw_query: Space separated plus words and ``-``prefixed minus words.
            document_predicate: Either a status that documents must have, or a
                callable ``(document_id, status, rating) -> bool``.

        Returns:
            At most ``config.max_result_document_count`` documents ordered by
            relevance descending, near-equal relevances ordered by rating.
        """
        if isinstance(document_predicate, DocumentStatus):
            document_predicate = status_predicate(document_predicate)
        query = self.query_parser.parse(raw_query)
        documents = self._find_all_documents(query, document_predicate)
        documents = self._sort_documents(documents)
        return documents[: self.config.max_result_document_count]

    def _find_all_documents(
        self, query: Query, document_predicate: DocumentPredicate
    ) -> list[Document]:
        document_to_relevance: dict[int, float] = {}
        for word in query.plus_words:
            if not self.index.has_term(word):
                continue
            idf = self.index.inverse_document_frequency(word)
            for document_id, term_frequency in self.index.postings(word).items():
                data = self.index.document(document_id)
                if document_predicate(document_id, data.status, data.rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0) + term_frequency * idf
                    )

        for word in query.minus_words:
            for document_id in self.index.postings(word):
                document_to_relevance.pop(document_id, None)

        return [
            Document(document_id, relevance, self.index.document(document_id).rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def _sort_documents(self, documents: list[Document]) -> list[Document]:
        epsilon = self.config.relevance_epsilon

        def compare(lhs: Document, rhs: Document) -> int:
            if abs(lhs.relevance - rhs.relevance) < epsilon:
                return rhs.rating - lhs.rating
            return -1 if lhs.relevance > rhs.relevance else 1

        return sorted(documents, key=cmp_to_key(compare))

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """
        Reports which plus words of ``raw_query`` occur in a document.

        Returns:
            (matched plus words in sorted order, document status). The list is
            empty if any minus word occurs in the document.

        Raises:
            DocumentIndexError: If ``document_id`` is not indexed.
        """
        query = self.query_parser.parse(raw_query)
        status = self.index.document(document_id).status

        if any(document_id in self.index.postings(word) for word in query.minus_words):
            return [], status

        matched_words = [
            word for word in sorted(query.plus_words) if document_id in self.index.postings(word)
        ]
        return matched_words, status
