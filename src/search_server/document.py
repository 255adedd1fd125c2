from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


@dataclass(frozen=True)
class DocumentData:
    """Stored metadata of an indexed document."""

    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class Document:
    """
    A single scored search result.

    Attributes:
        document_id: Id the document was added under.
        relevance: TF-IDF relevance for the query that produced it.
        rating: Average rating stored at ingestion time.
    """

    document_id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.document_id}, "
            f"relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Integer average of ``ratings`` truncated toward zero, 0 when empty."""
    if not ratings:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient
