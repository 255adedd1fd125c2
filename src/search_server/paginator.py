from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class Page(Generic[T]):
    """A contiguous, read-only slice of a paginated sequence."""

    def __init__(self, items: Sequence[T], start: int, stop: int):
        self._items = items
        self._start = start
        self._stop = stop

    def __len__(self) -> int:
        return self._stop - self._start

    def __iter__(self) -> Iterator[T]:
        for position in range(self._start, self._stop):
            yield self._items[position]

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self):
            raise IndexError("page index out of range")
        return self._items[self._start + index]

    def __str__(self) -> str:
        return "".join(str(item) for item in self)


class Paginator(Generic[T]):
    """
    Splits an already ordered sequence into pages of ``page_size`` items.

    The last page may be shorter. Iterating again restarts from the first page.
    """

    def __init__(self, items: Sequence[T], page_size: int):
        if page_size <= 0:
            raise ValueError("page_size must be positive.")
        self.items = items
        self.page_size = page_size

    def __len__(self) -> int:
        return math.ceil(len(self.items) / self.page_size)

    def __iter__(self) -> Iterator[Page[T]]:
        for start in range(0, len(self.items), self.page_size):
            yield Page(self.items, start, min(start + self.page_size, len(self.items)))


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(items, page_size)
