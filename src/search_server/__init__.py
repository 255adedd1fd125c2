from search_server.config import SearchServerConfig
from search_server.document import Document, DocumentData, DocumentStatus
from search_server.errors import (
    DocumentIndexError,
    DoubleMinusError,
    DuplicateDocumentIdError,
    EmptyQueryWordError,
    ErrorKind,
    InvalidCharactersError,
    InvalidDocumentIdError,
    SearchServerError,
)
from search_server.index import InvertedIndex
from search_server.paginator import Page, Paginator, paginate
from search_server.query import Query, QueryParser
from search_server.request_queue import RequestQueue
from search_server.search_server import DocumentPredicate, SearchServer, status_predicate
from search_server.text import StopWords, is_valid_word, tokenize

__all__ = [
    "Document",
    "DocumentData",
    "DocumentIndexError",
    "DocumentPredicate",
    "DocumentStatus",
    "DoubleMinusError",
    "DuplicateDocumentIdError",
    "EmptyQueryWordError",
    "ErrorKind",
    "InvalidCharactersError",
    "InvalidDocumentIdError",
    "InvertedIndex",
    "Page",
    "Paginator",
    "Query",
    "QueryParser",
    "RequestQueue",
    "SearchServer",
    "SearchServerConfig",
    "SearchServerError",
    "StopWords",
    "is_valid_word",
    "paginate",
    "status_predicate",
    "tokenize",
]
