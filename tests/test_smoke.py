"""
Smoke Tests - Quick sanity checks with live API

These tests make REAL API calls to verify basic functionality.
Run them manually to ensure the client works end-to-end.

Usage:
    # Run smoke tests explicitly
    pytest -m smoke -v

    # Skip smoke tests (default)
    pytest tests/

Requirements:
- Valid FRED_API_KEY in .env file
- Active internet connection
"""

import os
from datetime import date

import pytest
from dotenv import load_dotenv

from fred_xml import FredClient
from fred_xml.config import reset_app_config
from fred_xml.errors import TransportError
from fred_xml.models.requests import (
    CategoryParameters,
    ObservationParameters,
    ReleaseTablesParameters,
    SeriesParameters,
    TagsParameters,
)
from fred_xml.types import TagGroupId


# Mark all tests in this file as smoke tests (disabled by default)
pytestmark = pytest.mark.smoke


@pytest.fixture(scope="module")
def client():
    """One live client for all smoke tests."""
    load_dotenv()
    if not os.getenv("FRED_API_KEY"):
        pytest.skip("FRED_API_KEY not found in .env file")

    reset_app_config()
    with FredClient() as live_client:
        yield live_client


class TestFredClientSmoke:
    """Smoke tests for FredClient with live API."""

    def test_get_category(self, client):
        category = client.get_category(CategoryParameters(id=125))

        assert category.id == 125
        assert category.name == 'Trade Balance'

    def test_get_series(self, client):
        series = client.get_series(SeriesParameters(id='GNPCA'))

        assert series.id == 'GNPCA'
        assert series.last_updated_at.tzinfo is not None

    def test_get_series_observations(self, client):
        observations = client.get_series_observations(
            ObservationParameters(
                id='GNPCA',
                observation_start=date(2000, 1, 1),
                observation_end=date(2005, 1, 1)
            )
        )

        assert len(observations) == 6
        assert [o.date.year for o in observations] == list(range(2000, 2006))

    def test_get_geography_tags(self, client):
        tags = client.get_tags(TagsParameters(group_id=TagGroupId.GEOGRAPHY, limit=5))

        assert 0 < len(tags) <= 5
        assert all(t.group is TagGroupId.GEOGRAPHY for t in tags)

    def test_get_release_tables(self, client):
        elements = client.get_release_tables(ReleaseTablesParameters(id=53, element_id=12886))

        assert elements
        assert all(e.release_id == 53 for e in elements)

    def test_unknown_series_reports_api_message(self, client):
        with pytest.raises(TransportError) as exc_info:
            client.get_series(SeriesParameters(id='NO_SUCH_SERIES_XYZ'))

        assert exc_info.value.status_code == 400
        assert exc_info.value.api_message
