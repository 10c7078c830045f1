from __future__ import annotations

import threading
from typing import Dict, List, Optional, Tuple

from fastapi import FastAPI, Query
from pydantic import BaseModel

from ..config.languages import load_language_table
from ..config.settings import get_settings
from ..core.catalog import build_language_catalog
from ..core.controller import RepositorySource, derive_page
from ..core.models import RepositoryRecord, SortMode, ViewState
from ..logging_config import setup_logging
from ..render.view import build_count, build_entry
from ..sessions import make_source
from ..store import load_repositories


app = FastAPI(title="Repository Showcase API")


# ---------------------------------------------------------------------------
# Infrastructure wiring
# ---------------------------------------------------------------------------


_settings = get_settings()
_languages = load_language_table(_settings.languages_file)
_source: RepositorySource = make_source(_settings)

_records: Optional[Tuple[RepositoryRecord, ...]] = None
_catalog: List[str] = []
_records_lock = threading.Lock()


def _get_records() -> Tuple[RepositoryRecord, ...]:
    """Fetch the record list on first use; later calls reuse it."""

    global _records, _catalog
    with _records_lock:
        if _records is None:
            _records = tuple(load_repositories(_source))
            _catalog = build_language_catalog(_records, _settings.excluded_repository)
        return _records


def configure_source(source: RepositorySource) -> None:
    """Swap the data source and forget the cached records."""

    global _source, _records, _catalog
    with _records_lock:
        _source = source
        _records = None
        _catalog = []


class RepositoryResponse(BaseModel):
    name: str
    url: str
    description: str
    language: str
    color: str
    updated: str


class RepositoryPageResponse(BaseModel):
    items: List[RepositoryResponse]
    page: int
    total_pages: int
    total: int
    has_prev: bool
    has_next: bool
    count_text: str


class LanguageResponse(BaseModel):
    language: str
    color: str
    icon: Optional[str] = None


@app.get("/health")
async def health() -> Dict[str, str]:
    """Simple health check endpoint."""

    return {"status": "ok"}


# 首次请求会同步抓取仓库列表，以下接口用普通 def，交给线程池执行
@app.get("/languages", response_model=List[LanguageResponse])
def list_languages() -> List[LanguageResponse]:
    """Distinct languages of the catalog, ascending."""

    _get_records()
    return [
        LanguageResponse(
            language=lang,
            color=_languages.color_for(lang),
            icon=_languages.icon_for(lang),
        )
        for lang in _catalog
    ]


@app.get("/repos", response_model=RepositoryPageResponse)
def list_repos(
    q: str = "",
    language: Optional[str] = None,
    sort: SortMode = SortMode.RECENT_FIRST,
    page: int = Query(1, ge=1),
) -> RepositoryPageResponse:
    """One page of the derived view for the given query.

    Pages past the end are clamped to the last page; the response reports
    the page actually returned.
    """

    state = ViewState(
        search_term=q,
        selected_language=language or None,
        sort_mode=sort,
        current_page=page,
    )
    result = derive_page(_get_records(), state, _settings.excluded_repository)
    entries = [build_entry(r, _languages, _settings.date_format) for r in result.items]
    return RepositoryPageResponse(
        items=[
            RepositoryResponse(
                name=e.name,
                url=e.url,
                description=e.description,
                language=e.language_label,
                color=e.color,
                updated=e.updated_label,
            )
            for e in entries
        ],
        page=result.current_page,
        total_pages=result.total_pages,
        total=result.total_items,
        has_prev=result.has_prev,
        has_next=result.has_next,
        count_text=build_count(result).text,
    )


if __name__ == "__main__":
    import uvicorn

    setup_logging(_settings.log_level)
    uvicorn.run(app, host="0.0.0.0", port=8000)
