from __future__ import annotations

from math import ceil
from typing import Sequence

from .models import ITEMS_PER_PAGE, PageResult, RepositoryRecord


def paginate(
    items: Sequence[RepositoryRecord],
    page: int,
    page_size: int = ITEMS_PER_PAGE,
) -> PageResult:
    """Slice ``items`` into the requested page.

    The page number is clamped into ``[1, total_pages]`` and the clamped
    value is reported back. An empty list is one page with no items.
    """

    if page_size < 1:
        raise ValueError("page_size must be a positive integer")

    total_items = len(items)
    total_pages = max(1, ceil(total_items / page_size))
    current_page = max(1, min(page, total_pages))

    start = (current_page - 1) * page_size
    end = start + page_size
    return PageResult(
        items=list(items[start:end]),
        total_pages=total_pages,
        current_page=current_page,
        total_items=total_items,
        items_per_page=page_size,
    )
