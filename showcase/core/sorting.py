from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Tuple

from .models import RepositoryRecord, SortMode

# Records without a usable timestamp count as the oldest.
_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _updated_key(record: RepositoryRecord) -> datetime:
    value = record.updated_at
    if value is None:
        return _OLDEST
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _name_key(record: RepositoryRecord) -> Tuple[str, str]:
    # casefold first so "alpha" < "Beta", like a locale compare
    return (record.name.casefold(), record.name)


def sort_repositories(records: Iterable[RepositoryRecord], sort_mode: SortMode) -> List[RepositoryRecord]:
    """Return a new list ordered by ``sort_mode``; the input is left untouched."""

    if sort_mode is SortMode.RECENT_FIRST:
        return sorted(records, key=_updated_key, reverse=True)
    if sort_mode is SortMode.OLDEST_FIRST:
        return sorted(records, key=_updated_key)
    if sort_mode is SortMode.ALPHABETICAL:
        return sorted(records, key=_name_key)
    return list(records)
