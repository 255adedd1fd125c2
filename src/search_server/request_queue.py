"""
Sliding window of recent search requests.

Each call to ``add_find_request`` is one request (one per minute in the
original setting, hence a default window of a day). Once the window is full
the oldest request is evicted before the new one is recorded.
"""

from __future__ import annotations

from collections import deque

from search_server.document import Document, DocumentStatus
from search_server.search_server import DocumentPredicate, SearchServer


class RequestQueue:
    def __init__(self, search_server: SearchServer, window: int | None = None):
        self.search_server = search_server
        self.window = window if window is not None else search_server.config.request_window
        if self.window <= 0:
            raise ValueError("window must be positive.")
        self._requests: deque[int] = deque()
        self._no_result_requests = 0

    def add_find_request(
        self,
        raw_query: str,
        document_predicate: DocumentStatus | DocumentPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        results = self.search_server.find_top_documents(raw_query, document_predicate)
        self._add_request(len(results))
        return results

    def _add_request(self, result_count: int) -> None:
        while len(self._requests) >= self.window:
            if self._requests.popleft() == 0:
                self._no_result_requests -= 1
        self._requests.append(result_count)
        if result_count == 0:
            self._no_result_requests += 1

    def get_no_result_requests(self) -> int:
        return self._no_result_requests

    def __len__(self) -> int:
        return len(self._requests)
