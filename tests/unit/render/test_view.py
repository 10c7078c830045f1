"""Unit tests for the rendered view model."""
from dataclasses import replace

from conftest import make_record

from showcase.config.languages import FALLBACK_COLOR, LanguageTable
from showcase.core.models import PageResult, SortMode, ViewState
from showcase.core.pagination import paginate
from showcase.render.renderer import ViewModelRenderer
from showcase.render.view import (
    ALL_LANGUAGES_LABEL,
    DESCRIPTION_PLACEHOLDER,
    build_entry,
    build_language_picker,
    build_pager,
    build_view,
)


class TestBuildEntry:
    """Tests for build_entry."""

    def test_known_language(self):
        """Color, badge background and date come from the record."""
        entry = build_entry(make_record("api", days=0, language="Python"), LanguageTable(), "%d/%m/%Y")
        assert entry.name == "api"
        assert entry.url == "https://github.com/example/api"
        assert entry.color == "#3572A5"
        assert entry.badge_background == "#3572A520"
        assert entry.language_label == "Python"
        assert entry.updated_label == "Updated on: 01/01/2025"

    def test_missing_fields_use_fallbacks(self):
        """No description, language or date never renders empty."""
        record = replace(make_record("bare", description=None, language=None), updated_at=None)
        entry = build_entry(record, LanguageTable(), "%Y-%m-%d")
        assert entry.description == DESCRIPTION_PLACEHOLDER
        assert entry.language_label == "N/A"
        assert entry.color == FALLBACK_COLOR
        assert entry.updated_label == "Updated on: N/A"

    def test_unmapped_language_gets_neutral_color(self):
        """Languages missing from the table keep their label but use the neutral color."""
        entry = build_entry(make_record("x", language="Zig"), LanguageTable(), "%Y")
        assert entry.language_label == "Zig"
        assert entry.color == FALLBACK_COLOR


class TestBuildPager:
    """Tests for build_pager."""

    def test_hidden_for_single_page(self):
        """One page renders no pager at all."""
        pager = build_pager(PageResult(total_pages=1))
        assert pager.visible is False
        assert pager.previous is None and pager.next is None

    def test_first_page(self):
        """Previous disabled, page 1 active, next enabled."""
        pager = build_pager(PageResult(total_pages=3, current_page=1, total_items=25))
        assert pager.previous.disabled is True
        assert [p.page for p in pager.pages] == [1, 2, 3]
        assert [p.active for p in pager.pages] == [True, False, False]
        assert pager.next.disabled is False
        assert pager.next.page == 2

    def test_last_page(self):
        """Next disabled on the last page."""
        pager = build_pager(PageResult(total_pages=3, current_page=3, total_items=25))
        assert pager.previous.disabled is False
        assert pager.previous.page == 2
        assert pager.next.disabled is True
        assert pager.pages[2].active is True


class TestLanguagePicker:
    """Tests for build_language_picker."""

    def test_options_start_with_all_languages(self):
        """The catalog follows the 'all' option, with icons."""
        picker = build_language_picker(["Go", "Rust"], ViewState(), LanguageTable())
        assert [o.label for o in picker.options] == [ALL_LANGUAGES_LABEL, "Go", "Rust"]
        assert picker.options[0].selected is True
        assert picker.options[1].icon.endswith("go-original.svg")
        assert picker.options[2].icon is None
        assert picker.label == ALL_LANGUAGES_LABEL
        assert picker.icon is None

    def test_selected_language_label_and_icon(self):
        """The button shows the chosen language and its icon."""
        state = ViewState(selected_language="Go", language_picker_open=True)
        picker = build_language_picker(["Go", "Rust"], state, LanguageTable())
        assert picker.label == "Go"
        assert picker.icon.endswith("go-original.svg")
        assert picker.open is True
        assert [o.selected for o in picker.options] == [False, True, False]


class TestBuildView:
    """Tests for build_view and its serialization."""

    def test_count_and_sort_label(self):
        """Count text uses the clamped page; label follows the mode."""
        records = [make_record(f"r{i}") for i in range(12)]
        page = paginate(records, 5, 10)
        view = build_view(page, ViewState(sort_mode=SortMode.ALPHABETICAL), [], LanguageTable(), "%Y")
        assert view.count.text == "Showing 11–12 of 12"
        assert view.sort_label == "🗂️ Showing: A–Z"
        assert view.current_page == 2

    def test_to_dict_includes_derived_fields(self):
        """Serialized view carries count text and pager visibility."""
        view = build_view(paginate([], 1, 10), ViewState(), [], LanguageTable(), "%Y")
        data = view.to_dict()
        assert data["count"]["text"] == "Showing 0–0 of 0"
        assert data["pager"]["visible"] is False
        assert data["sort_mode"] == "recent"
        assert data["entries"] == []


class TestViewModelRenderer:
    """Tests for ViewModelRenderer."""

    def test_scroll_anchor_is_one_shot(self):
        """take_scroll_anchor clears the pending anchor."""
        renderer = ViewModelRenderer()
        renderer.scroll_to("repositories")
        assert renderer.take_scroll_anchor() == "repositories"
        assert renderer.take_scroll_anchor() is None
