import math

import pytest

from search_server.config import SearchServerConfig
from search_server.document import Document, DocumentStatus
from search_server.errors import (
    DocumentIndexError,
    DoubleMinusError,
    DuplicateDocumentIdError,
    EmptyQueryWordError,
    ErrorKind,
    InvalidCharactersError,
)
from search_server.search_server import SearchServer, status_predicate

EPSILON = 1e-6


@pytest.fixture
def server():
    server = SearchServer("and in at")
    server.add_document(1, "curly cat curly tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "curly dog and fancy collar", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(3, "big cat fancy collar ", DocumentStatus.ACTUAL, [1, 2, 8])
    server.add_document(4, "big dog sparrow Eugene", DocumentStatus.ACTUAL, [1, 3, 2])
    server.add_document(5, "big dog sparrow Vasiliy", DocumentStatus.ACTUAL, [1, 1, 1])
    return server


def assert_sorted(documents):
    for lhs, rhs in zip(documents, documents[1:]):
        assert lhs.relevance > rhs.relevance + EPSILON or (
            abs(lhs.relevance - rhs.relevance) <= EPSILON and lhs.rating >= rhs.rating
        )


class TestConstruction:
    def test_stop_words_from_iterable(self):
        server = SearchServer(["and", "", "in"])
        server.add_document(1, "cat and dog", DocumentStatus.ACTUAL, [])
        assert server.word_frequencies(1) == {"cat": 0.5, "dog": 0.5}

    def test_invalid_stop_words(self):
        with pytest.raises(InvalidCharactersError):
            SearchServer("and i\x12n")

    def test_stop_words_from_config(self):
        server = SearchServer(config=SearchServerConfig(stop_words="cat"))
        server.add_document(1, "cat dog", DocumentStatus.ACTUAL, [])
        assert server.find_top_documents("cat") == []

    def test_independent_instances(self):
        first = SearchServer("cat")
        second = SearchServer()
        first.add_document(1, "cat dog", DocumentStatus.ACTUAL, [])
        second.add_document(1, "cat dog", DocumentStatus.ACTUAL, [])
        assert first.word_frequencies(1) == {"dog": 1.0}
        assert second.word_frequencies(1) == {"cat": 0.5, "dog": 0.5}


class TestDocuments:
    def test_document_count(self, server):
        assert server.document_count() == 5
        assert len(server) == 5

    def test_duplicate_leaves_count_unchanged(self, server):
        with pytest.raises(DuplicateDocumentIdError):
            server.add_document(3, "new text", DocumentStatus.ACTUAL, [])
        assert server.document_count() == 5

    def test_iteration_order(self, server):
        assert list(server) == [1, 2, 3, 4, 5]
        assert server.document_id_at(4) == 5

    def test_document_id_at_out_of_range(self, server):
        with pytest.raises(DocumentIndexError):
            server.document_id_at(5)

    def test_word_frequencies_unknown_document(self, server):
        assert server.word_frequencies(100) == {}


class TestFindTopDocuments:
    def test_big_dog(self, server):
        results = server.find_top_documents("big dog")
        assert [document.document_id for document in results] == [4, 5, 3, 2]
        idf = math.log(5 / 3)
        assert results[0].relevance == pytest.approx(0.5 * idf)
        assert results[0].rating == 2
        assert results[1].rating == 1
        assert_sorted(results)

    def test_tie_broken_by_rating(self, server):
        """Documents 2 and 3 score equally for "big dog"; 3 has the higher rating."""
        results = server.find_top_documents("big dog")
        assert results[2].document_id == 3
        assert results[2].rating == 3
        assert results[3].document_id == 2
        assert results[3].rating == 2
        assert results[2].relevance == pytest.approx(results[3].relevance)

    def test_relevance(self, server):
        results = server.find_top_documents("curly dog")
        assert [document.document_id for document in results] == [1, 2, 4, 5]
        assert results[0].relevance == pytest.approx(0.5 * math.log(5 / 2))
        assert results[1].relevance == pytest.approx(
            0.25 * math.log(5 / 2) + 0.25 * math.log(5 / 3)
        )

    def test_minus_word_excludes(self, server):
        results = server.find_top_documents("curly big -dog")
        assert [document.document_id for document in results] == [1, 3]

    def test_minus_dominates_multiple_plus_matches(self, server):
        results = server.find_top_documents("big dog sparrow -Eugene")
        assert 4 not in [document.document_id for document in results]
        assert 5 in [document.document_id for document in results]

    def test_minus_word_excludes_matching_document(self, server):
        assert server.match_document("dog", 2) == (["dog"], DocumentStatus.ACTUAL)
        ids = [document.document_id for document in server.find_top_documents("dog collar")]
        assert 2 in ids
        ids = [document.document_id for document in server.find_top_documents("dog collar -dog")]
        assert 2 not in ids
        assert 3 in ids
        assert server.match_document("dog collar -dog", 2) == ([], DocumentStatus.ACTUAL)
        assert server.match_document("dog collar -dog", 3) == (["collar"], DocumentStatus.ACTUAL)

    def test_same_word_plus_and_minus_is_excluded(self, server):
        results = server.find_top_documents("cat -cat")
        assert results == []

    def test_unknown_words(self, server):
        assert server.find_top_documents("empty request") == []
        assert server.find_top_documents("cat -ghost")[0].document_id == 1

    def test_stop_words_ignored(self, server):
        assert server.find_top_documents("and") == []
        assert [d.document_id for d in server.find_top_documents("collar -and")] == [3, 2]

    def test_at_most_five_results(self):
        server = SearchServer()
        for document_id in range(10):
            server.add_document(document_id, f"cat word{document_id}", DocumentStatus.ACTUAL, [document_id])
        server.add_document(10, "dog", DocumentStatus.ACTUAL, [])
        results = server.find_top_documents("cat")
        assert len(results) == 5
        assert [document.rating for document in results] == [9, 8, 7, 6, 5]

    def test_max_results_from_config(self, server):
        server.config = SearchServerConfig(max_result_document_count=2)
        assert len(server.find_top_documents("big dog")) == 2

    def test_default_status_is_actual(self):
        server = SearchServer()
        server.add_document(1, "cat", DocumentStatus.ACTUAL, [])
        server.add_document(2, "cat dog", DocumentStatus.BANNED, [])
        assert [document.document_id for document in server.find_top_documents("cat")] == [1]

    @pytest.mark.parametrize(
        "status,expected",
        [
            (DocumentStatus.ACTUAL, [1]),
            (DocumentStatus.BANNED, [2]),
            (DocumentStatus.IRRELEVANT, [3]),
            (DocumentStatus.REMOVED, []),
        ],
    )
    def test_status_filter(self, status, expected):
        server = SearchServer()
        server.add_document(1, "cat", DocumentStatus.ACTUAL, [])
        server.add_document(2, "cat", DocumentStatus.BANNED, [])
        server.add_document(3, "cat", DocumentStatus.IRRELEVANT, [])
        server.add_document(4, "dog", DocumentStatus.REMOVED, [])
        results = server.find_top_documents("cat", status)
        assert [document.document_id for document in results] == expected

    def test_predicate(self, server):
        results = server.find_top_documents(
            "big dog curly cat", lambda document_id, status, rating: document_id % 2 == 0
        )
        assert results
        assert all(document.document_id % 2 == 0 for document in results)
        assert_sorted(results)

    def test_predicate_sees_rating(self, server):
        seen = []

        def predicate(document_id, status, rating):
            seen.append((document_id, status, rating))
            return rating >= 3

        results = server.find_top_documents("cat", predicate)
        assert sorted(seen) == [(1, DocumentStatus.ACTUAL, 5), (3, DocumentStatus.ACTUAL, 3)]
        assert [document.document_id for document in results] == [1, 3]

    def test_status_predicate(self):
        predicate = status_predicate(DocumentStatus.BANNED)
        assert predicate(1, DocumentStatus.BANNED, 0)
        assert not predicate(1, DocumentStatus.ACTUAL, 0)

    @pytest.mark.parametrize(
        "raw_query,error",
        [
            ("big --dog", DoubleMinusError),
            ("big -", EmptyQueryWordError),
            ("big d\x01og", InvalidCharactersError),
        ],
    )
    def test_malformed_query(self, server, raw_query, error):
        with pytest.raises(error):
            server.find_top_documents(raw_query)

    def test_document_without_terms_never_found(self):
        server = SearchServer("and")
        server.add_document(1, "and and", DocumentStatus.ACTUAL, [])
        server.add_document(2, "cat", DocumentStatus.ACTUAL, [])
        assert [document.document_id for document in server.find_top_documents("cat and")] == [2]

    def test_word_in_every_document_scores_zero(self):
        server = SearchServer()
        server.add_document(1, "cat", DocumentStatus.ACTUAL, [1])
        server.add_document(2, "cat dog", DocumentStatus.ACTUAL, [2])
        results = server.find_top_documents("cat")
        assert [document.document_id for document in results] == [2, 1]
        assert all(document.relevance == 0.0 for document in results)


class TestMatchDocument:
    def test_matched_words_sorted(self, server):
        words, status = server.match_document("sparrow big Eugene cat", 4)
        assert words == ["Eugene", "big", "sparrow"]
        assert status is DocumentStatus.ACTUAL

    def test_minus_word_clears_matches(self, server):
        words, status = server.match_document("big sparrow -Eugene", 4)
        assert words == []
        assert status is DocumentStatus.ACTUAL

    def test_minus_word_absent_from_document(self, server):
        words, _ = server.match_document("big sparrow -Eugene", 5)
        assert words == ["big", "sparrow"]

    def test_no_match(self, server):
        assert server.match_document("ghost", 1) == ([], DocumentStatus.ACTUAL)

    def test_reports_status(self):
        server = SearchServer()
        server.add_document(9, "cat", DocumentStatus.REMOVED, [])
        assert server.match_document("cat", 9) == (["cat"], DocumentStatus.REMOVED)

    def test_unknown_document(self, server):
        with pytest.raises(DocumentIndexError) as exc_info:
            server.match_document("cat", 42)
        assert exc_info.value.kind is ErrorKind.INDEX_OUT_OF_RANGE

    def test_malformed_query(self, server):
        with pytest.raises(DoubleMinusError):
            server.match_document("--cat", 1)


class TestDocumentStr:
    def test_format(self):
        assert str(Document(4, 0.5, 2)) == "{ document_id = 4, relevance = 0.5, rating = 2 }"

    def test_six_significant_digits(self, server):
        top = server.find_top_documents("big dog")[0]
        assert str(top) == "{ document_id = 4, relevance = 0.255413, rating = 2 }"
