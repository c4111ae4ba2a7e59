"""
Table Paginator

Fixed-size page slicing for the report table.
"""

import math
from typing import Generic, Sequence, TypeVar


DEFAULT_PAGE_SIZE = 20

T = TypeVar("T")


class Paginator(Generic[T]):
    """
    Slices an already-filtered sequence into pages.

    Page indexes are zero-based. ``page`` does not check bounds: an index
    outside ``[0, page_count)`` returns an empty list, like a list slice.
    Callers clamp with ``clamp``, ``next_index`` and ``previous_index``.
    """

    def __init__(self, items: Sequence[T], page_size: int = DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self._items = items
        self.page_size = page_size

    @property
    def total(self) -> int:
        return len(self._items)

    @property
    def page_count(self) -> int:
        return math.ceil(self.total / self.page_size)

    def page(self, index: int) -> list[T]:
        if index < 0:
            return []
        start = index * self.page_size
        return list(self._items[start:start + self.page_size])

    def clamp(self, index: int) -> int:
        """Nearest valid index; 0 when there are no pages."""
        if self.page_count == 0:
            return 0
        return max(0, min(index, self.page_count - 1))

    def next_index(self, index: int) -> int:
        return self.clamp(index + 1)

    def previous_index(self, index: int) -> int:
        return self.clamp(index - 1)
