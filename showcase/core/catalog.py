from __future__ import annotations

from typing import Iterable, List, Optional

from .models import RepositoryRecord


def build_language_catalog(
    records: Iterable[RepositoryRecord],
    excluded_name: Optional[str] = None,
) -> List[str]:
    """Distinct languages present in ``records``, sorted ascending.

    The excluded repository and records without a language are skipped.
    """

    languages = {
        record.language
        for record in records
        if record.name != excluded_name and record.language
    }
    return sorted(languages)
