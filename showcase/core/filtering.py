from __future__ import annotations

from typing import Iterable, List, Optional

from .models import RepositoryRecord


def filter_repositories(
    records: Iterable[RepositoryRecord],
    search_term: str = "",
    selected_language: Optional[str] = None,
    excluded_name: Optional[str] = None,
) -> List[RepositoryRecord]:
    """Narrow records by name substring and (optionally) exact language.

    The excluded repository is dropped before anything else. Input order is
    preserved.
    """

    term = (search_term or "").lower()
    result: List[RepositoryRecord] = []
    for record in records:
        if excluded_name is not None and record.name == excluded_name:
            continue
        if term not in record.name.lower():
            continue
        if selected_language and record.language != selected_language:
            continue
        result.append(record)
    return result
