# ABOUTME: Shared pytest fixtures for musicdb tests.
# ABOUTME: Provides a fake clock for scheduler tests and a temporary track catalog.

from pathlib import Path

import pytest

from musicdb.db.catalog import TrackCatalog
from musicdb.db.connection import open_catalog
from tests.fixtures.fakes import FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def catalog(tmp_path: Path):
    """Provide a TrackCatalog backed by a temporary database."""
    conn = open_catalog(tmp_path / "tracks.db")
    yield TrackCatalog(conn)
    conn.close()
