from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence

from showcase.core.models import RepositoryRecord


class StaticRepositorySource:
    """Data source over an in-memory list, for demos and tests."""

    def __init__(self, records: Optional[Sequence[RepositoryRecord]] = None) -> None:
        self._records = list(records) if records is not None else load_sample_repositories()
        self.fetch_count = 0

    def fetch(self) -> List[RepositoryRecord]:
        self.fetch_count += 1
        return list(self._records)


def load_sample_repositories(count: int = 24) -> List[RepositoryRecord]:
    """提供示例仓库数据，便于在离线环境下预览页面。"""
    base = datetime(2025, 10, 1, tzinfo=timezone.utc)
    languages = ["Python", "TypeScript", "Go", "Rust", None]
    sample: Iterable[RepositoryRecord] = (
        RepositoryRecord(
            name=f"sample-project-{idx:02d}",
            url=f"https://github.com/example/sample-project-{idx:02d}",
            description=None if idx % 5 == 0 else f"Sample project number {idx}.",
            language=languages[idx % len(languages)],
            updated_at=base - timedelta(days=idx * 3),
        )
        for idx in range(1, count + 1)
    )
    return list(sample)
