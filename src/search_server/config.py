"""
Per-instance configuration for the search server.

Defaults can be overridden from the environment:
    SEARCH_SERVER_MAX_RESULTS=10         # results returned per query
    SEARCH_SERVER_EPSILON=1e-6           # relevance tie tolerance
    SEARCH_SERVER_STOP_WORDS="and in at" # space separated
    SEARCH_SERVER_REQUEST_WINDOW=1440    # requests tracked by RequestQueue
"""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

# =============================================================================
# Defaults
# =============================================================================

# Default number of results returned by find_top_documents
MAX_RESULT_DOCUMENT_COUNT = 5

# Relevances closer than this are treated as equal and ordered by rating
RELEVANCE_EPSILON = 1e-6

# Minutes in a day: RequestQueue keeps one day of per-minute requests
REQUEST_WINDOW = 1440


@dataclass(frozen=True)
class SearchServerConfig:
    max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT
    relevance_epsilon: float = RELEVANCE_EPSILON
    stop_words: str | Iterable[str] = ()
    request_window: int = REQUEST_WINDOW

    def __post_init__(self):
        if not isinstance(self.stop_words, str):
            object.__setattr__(self, "stop_words", tuple(self.stop_words))
        if self.max_result_document_count <= 0:
            raise ValueError("max_result_document_count must be positive.")
        if not math.isfinite(self.relevance_epsilon) or self.relevance_epsilon <= 0:
            raise ValueError("relevance_epsilon must be a positive finite number.")
        if self.request_window <= 0:
            raise ValueError("request_window must be positive.")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SearchServerConfig":
        environ = os.environ if environ is None else environ
        return cls(
            max_result_document_count=int(
                environ.get("SEARCH_SERVER_MAX_RESULTS", MAX_RESULT_DOCUMENT_COUNT)
            ),
            relevance_epsilon=float(environ.get("SEARCH_SERVER_EPSILON", RELEVANCE_EPSILON)),
            stop_words=environ.get("SEARCH_SERVER_STOP_WORDS", ""),
            request_window=int(environ.get("SEARCH_SERVER_REQUEST_WINDOW", REQUEST_WINDOW)),
        )
