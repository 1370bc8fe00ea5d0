"""A page of needs that still knows where it sits in the full result set."""

from collections.abc import Sequence
from typing import Iterable, List, Optional, Tuple

PAGINATION_PARAMS = ("pages", "total", "per_page", "current_page")


class PaginatedList(Sequence):
    """Read-only sequence of needs plus the pagination values from the API."""

    def __init__(self, needs: Iterable, pages: Optional[int] = None,
                 total: Optional[int] = None, current_page: Optional[int] = None,
                 per_page: Optional[int] = None):
        self._needs = tuple(needs)
        self._pages = pages
        self._total = total
        self._per_page = per_page
        self._current_page = current_page

    @property
    def pages(self) -> Optional[int]:
        return self._pages

    @property
    def total(self) -> Optional[int]:
        return self._total

    @property
    def per_page(self) -> Optional[int]:
        return self._per_page

    @property
    def current_page(self) -> Optional[int]:
        return self._current_page

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self._needs[index])
        return self._needs[index]

    def __len__(self) -> int:
        return len(self._needs)

    def __eq__(self, other) -> bool:
        if isinstance(other, PaginatedList):
            return (self._needs, self.pagination()) == (other._needs, other.pagination())
        if isinstance(other, (list, tuple)):
            return list(self._needs) == list(other)
        return NotImplemented

    __hash__ = None

    def pagination(self) -> dict:
        return {name: getattr(self, name) for name in PAGINATION_PARAMS}

    def to_options(self) -> List[Tuple]:
        """``(benefit, content_id)`` pairs for a select input."""
        return [(need.benefit, need.content_id) for need in self._needs]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {list(self._needs)!r}, {self.pagination()}>"
