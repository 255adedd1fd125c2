"""
Error taxonomy for the search server.

Every failure raised by the core carries an ``ErrorKind`` tag so callers can
branch on the kind instead of on message text:

    try:
        server.add_document(1, text, DocumentStatus.ACTUAL, [1, 2])
    except SearchServerError as e:
        if e.kind is ErrorKind.DUPLICATE_DOCUMENT_ID:
            ...
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_DOCUMENT_ID = "invalid document id"
    DUPLICATE_DOCUMENT_ID = "duplicate document id"
    INVALID_CHARACTERS = "invalid characters"
    EMPTY_QUERY_WORD = "empty query word"
    DOUBLE_MINUS = "double minus"
    INDEX_OUT_OF_RANGE = "index out of range"


class SearchServerError(Exception):
    """Base class for every error raised by the search server."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDocumentIdError(SearchServerError, ValueError):
    kind = ErrorKind.INVALID_DOCUMENT_ID


class DuplicateDocumentIdError(SearchServerError, ValueError):
    kind = ErrorKind.DUPLICATE_DOCUMENT_ID


class InvalidCharactersError(SearchServerError, ValueError):
    kind = ErrorKind.INVALID_CHARACTERS


class EmptyQueryWordError(SearchServerError, ValueError):
    kind = ErrorKind.EMPTY_QUERY_WORD


class DoubleMinusError(SearchServerError, ValueError):
    kind = ErrorKind.DOUBLE_MINUS


class DocumentIndexError(SearchServerError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE


__all__ = [
    "ErrorKind",
    "SearchServerError",
    "InvalidDocumentIdError",
    "DuplicateDocumentIdError",
    "InvalidCharactersError",
    "EmptyQueryWordError",
    "DoubleMinusError",
    "DocumentIndexError",
]
