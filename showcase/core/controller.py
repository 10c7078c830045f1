from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import List, Optional, Protocol, Sequence, Tuple

from ..config.languages import LanguageTable
from ..config.settings import Settings
from ..render.renderer import Renderer
from ..render.view import RenderedView, build_view
from ..store import RepositoryFetchError
from .catalog import build_language_catalog
from .filtering import filter_repositories
from .models import ITEMS_PER_PAGE, PageResult, RepositoryRecord, ViewState
from .pagination import paginate
from .sorting import sort_repositories

logger = logging.getLogger(__name__)

SCROLL_ANCHOR = "repositories"
# Values of the language selector meaning "no language filter".
ALL_LANGUAGES_VALUES = ("", "all")


class RepositorySource(Protocol):
    def fetch(self) -> List[RepositoryRecord]:
        ...


class RepositoryListController:
    """Owns the fetched repositories and keeps the rendered list in sync.

    The record list is loaded once by :meth:`initialize` and never changes
    afterwards. Every user event mutates :class:`ViewState` and re-runs the
    filter -> sort -> paginate pipeline synchronously before rendering.
    """

    def __init__(
        self,
        source: RepositorySource,
        renderer: Renderer,
        settings: Settings,
        languages: LanguageTable,
    ) -> None:
        self._source = source
        self._renderer = renderer
        self._settings = settings
        self._languages = languages

        self._state = ViewState()
        self._records: Tuple[RepositoryRecord, ...] = ()
        self._catalog: List[str] = []
        self._page = PageResult()
        self._initialized = False
        self._load_failed = False
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        """A copy of the current view state."""

        with self._lock:
            return replace(self._state)

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def records(self) -> Tuple[RepositoryRecord, ...]:
        return self._records

    @property
    def catalog(self) -> List[str]:
        return list(self._catalog)

    @property
    def page(self) -> PageResult:
        return self._page

    @property
    def total_count(self) -> int:
        return self._page.total_items

    @property
    def total_pages(self) -> int:
        return self._page.total_pages

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def load_failed(self) -> bool:
        return self._load_failed

    def view(self) -> RenderedView:
        with self._lock:
            return self._build_view()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Fetch the records once, build the catalog and render the first view."""

        with self._lock:
            if self._initialized:
                return
            self._renderer.render_loading()

            try:
                records = self._source.fetch()
            except RepositoryFetchError as e:
                logger.error("Failed to fetch repositories: %s", e)
                records = []
                self._load_failed = True

            self._records = tuple(records)
            self._catalog = build_language_catalog(self._records, self._settings.excluded_repository)
            self._initialized = True
            logger.info(
                "Repository list ready: %d records, %d languages",
                len(self._records),
                len(self._catalog),
            )
            self._refresh()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def set_search_term(self, term: Optional[str]) -> None:
        with self._lock:
            self._state.search_term = term or ""
            self._state.current_page = 1
            self._refresh()

    def select_language(self, language: Optional[str]) -> None:
        with self._lock:
            value = (language or "").strip()
            self._state.selected_language = None if value.lower() in ALL_LANGUAGES_VALUES else value
            self._state.current_page = 1
            self._state.language_picker_open = False
            self._refresh()

    def toggle_language_picker(self) -> None:
        with self._lock:
            self._state.language_picker_open = not self._state.language_picker_open
            self._render()

    def close_language_picker(self) -> None:
        """Outside-click dismissal of the language popup."""

        with self._lock:
            if not self._state.language_picker_open:
                return
            self._state.language_picker_open = False
            self._render()

    def toggle_sort(self) -> None:
        with self._lock:
            self._state.sort_mode = self._state.sort_mode.next()
            self._state.current_page = 1
            self._refresh()

    def go_to_page(self, page: int) -> bool:
        """Navigate to ``page``; out-of-range or same-page targets are ignored."""

        with self._lock:
            if not 1 <= page <= self._page.total_pages or page == self._state.current_page:
                logger.debug("Ignoring navigation to page %s", page)
                return False
            self._state.current_page = page
            self._refresh()
            self._renderer.scroll_to(SCROLL_ANCHOR)
            return True

    def previous_page(self) -> bool:
        with self._lock:
            return self.go_to_page(self._state.current_page - 1)

    def next_page(self) -> bool:
        with self._lock:
            return self.go_to_page(self._state.current_page + 1)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _derive(self) -> PageResult:
        page = derive_page(self._records, self._state, self._settings.excluded_repository)
        self._state.current_page = page.current_page
        return page

    def _refresh(self) -> None:
        if not self._initialized:
            return
        self._page = self._derive()
        self._render()

    def _render(self) -> None:
        if not self._initialized:
            return
        self._renderer.render(self._build_view())

    def _build_view(self) -> RenderedView:
        return build_view(
            self._page,
            self._state,
            self._catalog if self._initialized else [],
            self._languages,
            self._settings.date_format,
            status="ready" if self._initialized else "loading",
        )


def derive_page(
    records: Sequence[RepositoryRecord],
    state: ViewState,
    excluded_name: Optional[str],
    page_size: int = ITEMS_PER_PAGE,
) -> PageResult:
    """Stateless filter -> sort -> paginate over ``records`` for ``state``."""

    filtered = filter_repositories(records, state.search_term, state.selected_language, excluded_name)
    ordered = sort_repositories(filtered, state.sort_mode)
    return paginate(ordered, state.current_page, page_size)
