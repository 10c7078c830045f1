"""Unit tests for the language catalog builder."""
from conftest import EXCLUDED, make_record

from showcase.core.catalog import build_language_catalog


class TestBuildLanguageCatalog:
    """Tests for build_language_catalog."""

    def test_distinct_and_sorted(self):
        """Duplicates collapse and the result is ascending."""
        records = [
            make_record("a", language="Rust"),
            make_record("b", language="Go"),
            make_record("c", language="Rust"),
            make_record("d", language="C++"),
        ]
        assert build_language_catalog(records, EXCLUDED) == ["C++", "Go", "Rust"]

    def test_skips_missing_languages(self):
        """None and empty languages are not offered."""
        records = [
            make_record("a", language=None),
            make_record("b", language=""),
            make_record("c", language="Go"),
        ]
        assert build_language_catalog(records, EXCLUDED) == ["Go"]

    def test_excluded_repository_does_not_contribute(self):
        """A language only the excluded repo uses is left out."""
        records = [
            make_record("a", language="Go"),
            make_record(EXCLUDED, language="Haskell"),
        ]
        assert build_language_catalog(records, EXCLUDED) == ["Go"]

    def test_empty_input(self):
        """No records, no languages."""
        assert build_language_catalog([], EXCLUDED) == []
