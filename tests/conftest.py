from datetime import datetime, timedelta, timezone

import pytest

from showcase.config.languages import LanguageTable
from showcase.config.settings import Settings
from showcase.core.controller import RepositoryListController
from showcase.core.models import RepositoryRecord
from showcase.render.renderer import ViewModelRenderer

EXCLUDED = "SoaresCRF"
BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_record(name, days=0, language="Python", description="desc", url=None):
    """Record updated ``days`` days after BASE_TIME."""
    return RepositoryRecord(
        name=name,
        url=url or f"https://github.com/example/{name}",
        description=description,
        language=language,
        updated_at=BASE_TIME + timedelta(days=days),
    )


@pytest.fixture
def settings():
    return Settings(
        repositories_url="http://repos.test/repositories",
        excluded_repository=EXCLUDED,
        fetch_timeout=1.0,
        date_format="%Y-%m-%d",
        max_sessions=4,
        secret_key="test-secret",
        languages_file=None,
        use_sample_data=False,
        log_level="WARNING",
    )


@pytest.fixture
def languages():
    return LanguageTable()


@pytest.fixture
def twelve_records():
    """12 visible repos plus the excluded one, newest is repo-11."""
    records = [make_record(f"repo-{i:02d}", days=i) for i in range(12)]
    records.append(make_record(EXCLUDED, days=100))
    return records


@pytest.fixture
def make_controller(settings, languages):
    """Build an initialized controller over a static record list."""
    from data import StaticRepositorySource

    def _make(records, initialize=True):
        controller = RepositoryListController(
            StaticRepositorySource(records), ViewModelRenderer(), settings, languages
        )
        if initialize:
            controller.initialize()
        return controller

    return _make
