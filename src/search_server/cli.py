"""
Demonstration of the search server.

Indexes a handful of sample documents, replays a day of requests through a
RequestQueue, then prints the results of one query page by page.

Run with:
    search-server
    search-server --query "curly -dog" --page-size 1 --verbose
    SEARCH_SERVER_MAX_RESULTS=3 python -m search_server.cli
"""

from __future__ import annotations

import argparse
import logging

from search_server.config import SearchServerConfig
from search_server.document import DocumentStatus
from search_server.errors import SearchServerError
from search_server.paginator import paginate
from search_server.request_queue import RequestQueue
from search_server.search_server import SearchServer

logger = logging.getLogger(__name__)

DEFAULT_STOP_WORDS = "and in at"

SAMPLE_DOCUMENTS = [
    (1, "curly cat curly tail", DocumentStatus.ACTUAL, [7, 2, 7]),
    (2, "curly dog and fancy collar", DocumentStatus.ACTUAL, [1, 2, 3]),
    (3, "big cat fancy collar ", DocumentStatus.ACTUAL, [1, 2, 8]),
    (4, "big dog sparrow Eugene", DocumentStatus.ACTUAL, [1, 3, 2]),
    (5, "big dog sparrow Vasiliy", DocumentStatus.ACTUAL, [1, 1, 1]),
]

PAGE_BREAK = "Page break"


def build_server(config: SearchServerConfig) -> SearchServer:
    stop_words = config.stop_words or DEFAULT_STOP_WORDS
    server = SearchServer(stop_words, config=config)
    for document_id, text, status, ratings in SAMPLE_DOCUMENTS:
        try:
            server.add_document(document_id, text, status, ratings)
        except SearchServerError as e:
            logger.error("Failed to add document %d: %s (%s)", document_id, e, e.kind.value)
    logger.debug("Indexed %d documents", server.document_count())
    return server


def replay_requests(server: SearchServer) -> RequestQueue:
    request_queue = RequestQueue(server)
    for _ in range(request_queue.window - 1):
        request_queue.add_find_request("empty request")
    # Still window - 1 empty requests; each request below evicts the oldest one.
    request_queue.add_find_request("curly dog")
    request_queue.add_find_request("big collar")
    request_queue.add_find_request("sparrow")
    return request_queue


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search server demonstration.")
    parser.add_argument("--query", type=str, default="big dog", help="Query to paginate.")
    parser.add_argument("--page-size", type=int, default=2, help="Documents per page (default: 2).")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SearchServerConfig.from_env()
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    server = build_server(config)
    request_queue = replay_requests(server)
    print(f"Total empty requests: {request_queue.get_no_result_requests()}")

    try:
        search_results = server.find_top_documents(args.query)
    except SearchServerError as e:
        logger.error("Query %r rejected: %s (%s)", args.query, e, e.kind.value)
        return 1

    try:
        pages = paginate(search_results, args.page_size)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    logger.debug("Query %r returned %d documents in %d pages", args.query, len(search_results), len(pages))
    for page in pages:
        print(page)
        print(PAGE_BREAK)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
