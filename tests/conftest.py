"""Global pytest fixtures.

Centralizes:
 - Project root path insertion (so individual tests don't repeat sys.path hacks)
 - Fake HTTP sessions standing in for remote JSON sources
 - Isolated SQLite stores per test
"""

import sys
from pathlib import Path

import pytest

# Ensure project root (containing dashboard/ and main.py) is on sys.path once
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dashboard.core.config import Settings  # noqa: E402
from dashboard.database.manager import DatabaseManager  # noqa: E402
from tests.fakes import FakeHTTP  # noqa: E402


# -------------------- HTTP Fakes -------------------- #

@pytest.fixture
def fake_http():
    def _build(routes: dict) -> FakeHTTP:
        return FakeHTTP(routes)

    return _build


# -------------------- Store Fixtures -------------------- #

@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'dashboard.db'}"


@pytest.fixture
def db_manager(database_url):
    manager = DatabaseManager(database_url)
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def settings(database_url):
    return Settings(
        _env_file=None,
        database_url=database_url,
        data_sources=[],
        enable_metrics=False,
    )
