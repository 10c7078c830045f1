"""View model handed to the rendering back end.

Everything the page shows is computed here from a :class:`PageResult` and
the current :class:`ViewState`; back ends only have to lay it out.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..config.languages import FALLBACK_LABEL, LanguageTable
from ..core.models import PageResult, RepositoryRecord, ViewState

DESCRIPTION_PLACEHOLDER = "No description available"
ALL_LANGUAGES_LABEL = "All languages"
SORT_ICON = "🗂️"
# 徽章背景 = 语言颜色 + 12% 透明度
BADGE_ALPHA_SUFFIX = "20"


@dataclass
class RepositoryEntry:
    name: str
    url: str
    description: str
    language_label: str
    color: str
    badge_background: str
    updated_label: str


@dataclass
class CountMessage:
    start: int
    end: int
    total: int

    @property
    def text(self) -> str:
        return f"Showing {self.start}–{self.end} of {self.total}"


@dataclass
class PageLink:
    page: int
    label: str
    active: bool = False
    disabled: bool = False


@dataclass
class Pager:
    previous: Optional[PageLink] = None
    pages: List[PageLink] = field(default_factory=list)
    next: Optional[PageLink] = None

    @property
    def visible(self) -> bool:
        return bool(self.pages)


@dataclass
class LanguageOption:
    value: str  # "" for all languages
    label: str
    color: str
    icon: Optional[str] = None
    selected: bool = False


@dataclass
class LanguagePicker:
    label: str
    icon: Optional[str]
    open: bool
    options: List[LanguageOption] = field(default_factory=list)


@dataclass
class RenderedView:
    status: str
    search_term: str
    sort_mode: str
    sort_label: str
    entries: List[RepositoryEntry]
    count: CountMessage
    pager: Pager
    language_picker: LanguagePicker
    current_page: int = 1
    total_pages: int = 1

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["count"]["text"] = self.count.text
        data["pager"]["visible"] = self.pager.visible
        return data


def format_updated(record: RepositoryRecord, date_format: str) -> str:
    """Last-updated line for ``record``.

    The date is rendered with the configured ``date_format``
    (``SHOWCASE_DATE_FORMAT``, ``%d/%m/%Y`` by default), not with the
    viewer's locale, since the server does not know it.
    """

    if record.updated_at is None:
        return f"Updated on: {FALLBACK_LABEL}"
    return f"Updated on: {record.updated_at.strftime(date_format)}"


def build_entry(record: RepositoryRecord, languages: LanguageTable, date_format: str) -> RepositoryEntry:
    color = languages.color_for(record.language)
    return RepositoryEntry(
        name=record.name,
        url=record.url,
        description=record.description or DESCRIPTION_PLACEHOLDER,
        language_label=record.language or FALLBACK_LABEL,
        color=color,
        badge_background=f"{color}{BADGE_ALPHA_SUFFIX}",
        updated_label=format_updated(record, date_format),
    )


def build_count(page: PageResult) -> CountMessage:
    return CountMessage(start=page.first_index, end=page.last_index, total=page.total_items)


def build_pager(page: PageResult) -> Pager:
    """Pager controls; nothing at all when there is a single page."""

    if page.total_pages <= 1:
        return Pager()
    current = page.current_page
    return Pager(
        previous=PageLink(page=current - 1, label="«", disabled=not page.has_prev),
        pages=[
            PageLink(page=n, label=str(n), active=(n == current))
            for n in range(1, page.total_pages + 1)
        ],
        next=PageLink(page=current + 1, label="»", disabled=not page.has_next),
    )


def build_language_picker(
    catalog: Sequence[str], state: ViewState, languages: LanguageTable
) -> LanguagePicker:
    selected = state.selected_language
    options = [
        LanguageOption(
            value="",
            label=ALL_LANGUAGES_LABEL,
            color=languages.fallback_color,
            selected=not selected,
        )
    ]
    options.extend(
        LanguageOption(
            value=lang,
            label=lang,
            color=languages.color_for(lang),
            icon=languages.icon_for(lang),
            selected=(lang == selected),
        )
        for lang in catalog
    )
    return LanguagePicker(
        label=selected or ALL_LANGUAGES_LABEL,
        icon=languages.icon_for(selected),
        open=state.language_picker_open,
        options=options,
    )


def build_view(
    page: PageResult,
    state: ViewState,
    catalog: Sequence[str],
    languages: LanguageTable,
    date_format: str,
    status: str = "ready",
) -> RenderedView:
    return RenderedView(
        status=status,
        search_term=state.search_term,
        sort_mode=state.sort_mode.value,
        sort_label=f"{SORT_ICON} {state.sort_mode.label}",
        entries=[build_entry(r, languages, date_format) for r in page.items],
        count=build_count(page),
        pager=build_pager(page),
        language_picker=build_language_picker(catalog, state, languages),
        current_page=page.current_page,
        total_pages=page.total_pages,
    )
