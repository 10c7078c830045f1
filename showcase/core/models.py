from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


ITEMS_PER_PAGE = 10


@dataclass(frozen=True)
class RepositoryRecord:
    """Repository metadata as returned by the data source."""

    name: str
    url: str = ""
    description: Optional[str] = None
    language: Optional[str] = None
    updated_at: Optional[datetime] = None


class SortMode(Enum):
    """Orderings offered by the sort toggle, in cycle order."""

    RECENT_FIRST = "recent"
    OLDEST_FIRST = "oldest"
    ALPHABETICAL = "alphabetical"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]

    def next(self) -> "SortMode":
        modes = list(SortMode)
        return modes[(modes.index(self) + 1) % len(modes)]


_SORT_LABELS = {
    SortMode.RECENT_FIRST: "Showing: Recent",
    SortMode.OLDEST_FIRST: "Showing: Oldest",
    SortMode.ALPHABETICAL: "Showing: A–Z",
}


@dataclass
class ViewState:
    """User-controlled inputs of the derived view."""

    search_term: str = ""
    selected_language: Optional[str] = None
    sort_mode: SortMode = SortMode.RECENT_FIRST
    current_page: int = 1
    language_picker_open: bool = False


@dataclass
class PageResult:
    """One page of an ordered list plus the pagination metadata."""

    items: List[RepositoryRecord] = field(default_factory=list)
    total_pages: int = 1
    current_page: int = 1
    total_items: int = 0
    items_per_page: int = ITEMS_PER_PAGE

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def first_index(self) -> int:
        # 1-based position of the first item on the page, 0 when empty.
        if self.total_items == 0:
            return 0
        return (self.current_page - 1) * self.items_per_page + 1

    @property
    def last_index(self) -> int:
        return min(self.current_page * self.items_per_page, self.total_items)
