"""
Unit tests for FredClient (api/client.py).

The transport is replaced by FakeTransport from conftest.py, so every test
checks the full path: parameters -> query -> transport -> parser -> records.
"""

from datetime import date
from unittest.mock import patch

import pytest


class TestClientConstruction:
    """Test suite for FredClient configuration."""

    def test_missing_api_key_raises(self):
        from fred_xml.api.client import FredClient
        from fred_xml.errors import ConfigurationError

        with pytest.raises(ConfigurationError, match="FRED_API_KEY"):
            FredClient()

    def test_configuration_error_is_value_error(self):
        from fred_xml.errors import ConfigurationError

        assert issubclass(ConfigurationError, ValueError)

    def test_api_key_from_environment(self, monkeypatch):
        from fred_xml.api.client import FredClient

        monkeypatch.setenv('FRED_API_KEY', 'env-key')
        monkeypatch.setenv('FRED_REQUEST_TIMEOUT', '3')

        with patch('fred_xml.api.client.HttpTransport') as transport_cls:
            FredClient()

        transport_cls.assert_called_once_with(
            api_key='env-key',
            base_url='https://api.stlouisfed.org/fred/',
            timeout=3.0
        )

    def test_arguments_override_config(self, monkeypatch):
        from fred_xml.api.client import FredClient

        monkeypatch.setenv('FRED_API_KEY', 'env-key')

        with patch('fred_xml.api.client.HttpTransport') as transport_cls:
            FredClient(api_key='arg-key', base_url='http://localhost/fred/', timeout=1.0)

        transport_cls.assert_called_once_with(
            api_key='arg-key',
            base_url='http://localhost/fred/',
            timeout=1.0
        )

    def test_owned_transport_closed(self):
        from fred_xml.api.client import FredClient

        with patch('fred_xml.api.client.HttpTransport') as transport_cls:
            with FredClient(api_key='key'):
                pass

        transport_cls.return_value.close.assert_called_once()

    def test_injected_transport_left_open(self, fake_transport):
        from fred_xml.api.client import FredClient

        with FredClient(transport=fake_transport):
            pass

        assert fake_transport.closed is False


class TestCategoryEndpoints:
    """Test suite for category endpoints."""

    def test_get_category_end_to_end(self, category_xml, make_transport):
        """Category 125 through a mocked transport."""
        from fred_xml.api.client import FredClient
        from fred_xml.models.records import Category
        from fred_xml.models.requests import CategoryParameters

        transport = make_transport({'category': category_xml})
        client = FredClient(transport=transport)

        category = client.get_category(CategoryParameters(id=125))

        assert category == Category(id=125, parent_id=13, name='Trade Balance')
        assert transport.calls == [('category', {'category_id': '125'})]

    def test_get_category_defaults_to_root(self, make_transport):
        from fred_xml.api.client import FredClient

        transport = make_transport({
            'category': '<categories><category id="0" name="Categories" parent_id="0"/></categories>'
        })

        category = FredClient(transport=transport).get_category()

        assert category.id == 0
        assert transport.calls[0][1] == {'category_id': '0'}

    def test_get_category_children(self, categories_xml, make_transport):
        from fred_xml.api.client import FredClient
        from fred_xml.models.requests import CategoryParameters

        transport = make_transport({'category/children': categories_xml})

        children = FredClient(transport=transport).get_category_children(CategoryParameters(id=13))

        assert [c.name for c in children] == ['Exports', 'Imports', 'Income Payments & Receipts']

    def test_exclusion_without_tags_fails_before_transport(self, make_transport):
        from fred_xml.api.client import FredClient
        from fred_xml.models.requests import CategorySeriesParameters
        from fred_xml.errors import InvalidParameter

        transport = make_transport()
        client = FredClient(transport=transport)

        with pytest.raises(InvalidParameter):
            client.get_category_series(
                CategorySeriesParameters(id=125, exclude_tags=['discontinued'])
            )

        assert transport.calls == []

    def test_wrong_parameter_type_rejected(self, make_transport):
        """A release struct sent to a category endpoint is a caller error."""
        from fred_xml.api.client import FredClient
        from fred_xml.models.requests import ReleaseTagParameters

        transport = make_transport()

        with pytest.raises(TypeError, match="CategoryTagParameters"):
            FredClient(transport=transport).get_category_tags(ReleaseTagParameters(id=86))

        assert transport.calls == []


class TestOtherEndpoints:
    """Test suite for release, series, source and tag endpoints."""

    def test_get_series(self, series_xml, make_transport):
        from fred_xml.api.client import FredClient
        from fred_xml.models.requests import SeriesParameters

        transport = make_transport({'series': series_xml})

        series = FredClient(transport=transport).get_series(SeriesParameters(id='GNPCA'))

        assert series.title == 'Real Gross National Product'
        assert transport.calls == [('series', {'series_id': 'GNPCA'})]

    def test_get_series_observations(self, observations_xml, make_transport):
        from fred_xml.api.client import FredClient
        from fred_xml.models.requests import ObservationParameters

        transport = make_transport({'series/observations': observations_xml})

        observations = FredClient(transport=transport).get_series_observations(
            ObservationParameters(id='GNPCA', observation_start=date(1929, 1, 1))
        )

        assert len(observations) == 3
        assert observations[1].is_missing
        assert transport.calls[0][1]['observation_start'] == '1929-01-01'

    def test_get_release_tables_filters_elements(self, release_tables_xml, make_transport):
        from fred_xml.api.client import FredClient
        from fred_xml.models.requests import ReleaseTablesParameters

        transport = make_transport({'release/tables': release_tables_xml})

        elements = FredClient(transport=transport).get_release_tables(
            ReleaseTablesParameters(id=53, element_id=12886)
        )

        assert [e.element_id for e in elements] == [12887, 12890]
        assert [e.element_id for e in elements[0].walk()] == [12887, 12888, 12889]

    def test_get_release_dates(self, release_dates_xml, make_transport):
        from fred_xml.api.client import FredClient
        from fred_xml.models.requests import ReleaseDatesParameters

        transport = make_transport({'release/dates': release_dates_xml})

        dates = FredClient(transport=transport).get_release_dates(ReleaseDatesParameters(id=82))

        assert dates[0].date == date(1997, 2, 10)
        assert transport.calls[0][1]['include_release_dates_with_no_data'] == 'false'

    def test_get_series_vintage_dates(self, make_transport):
        from fred_xml.api.client import FredClient
        from fred_xml.models.requests import VintageDateParameters

        transport = make_transport({
            'series/vintagedates': '<vintage_dates><vintage_date>1958-12-21</vintage_date></vintage_dates>'
        })

        vintage_dates = FredClient(transport=transport).get_series_vintage_dates(
            VintageDateParameters(id='GNPCA')
        )

        assert vintage_dates[0].date == date(1958, 12, 21)

    def test_get_tags(self, tags_xml, make_transport):
        from fred_xml.api.client import FredClient

        transport = make_transport({'tags': tags_xml})

        tags = FredClient(transport=transport).get_tags()

        assert [t.name for t in tags] == ['nation', 'usa']

    def test_get_source(self, make_transport):
        from fred_xml.api.client import FredClient
        from fred_xml.models.requests import SourceParameters

        transport = make_transport({
            'source': (
                '<sources><source id="1" realtime_start="2013-08-14" realtime_end="2013-08-14"'
                ' name="Board of Governors of the Federal Reserve System"'
                ' link="http://www.federalreserve.gov/"/></sources>'
            )
        })

        source = FredClient(transport=transport).get_source(SourceParameters(id=1))

        assert source.link == 'http://www.federalreserve.gov/'
        assert transport.calls == [('source', {'source_id': '1'})]

    @pytest.mark.parametrize("method,params_factory,path,model_tag", [
        ('get_category_related', lambda m: m.CategoryParameters(id=32073), 'category/related', 'category'),
        ('get_category_series', lambda m: m.CategorySeriesParameters(id=125), 'category/series', 'series'),
        ('get_category_tags', lambda m: m.CategoryTagParameters(id=125), 'category/tags', 'tag'),
        ('get_category_related_tags', lambda m: m.CategoryRelatedTagParameters(id=125, tags=['services']), 'category/related_tags', 'tag'),
        ('get_releases', lambda m: m.ReleasesParameters(), 'releases', 'release'),
        ('get_releases_dates', lambda m: m.ReleasesDatesParameters(), 'releases/dates', 'release_date'),
        ('get_release', lambda m: m.ReleaseParameters(id=53), 'release', 'release'),
        ('get_release_series', lambda m: m.ReleaseSeriesParameters(id=51), 'release/series', 'series'),
        ('get_release_sources', lambda m: m.ReleaseParameters(id=51), 'release/sources', 'source'),
        ('get_release_tags', lambda m: m.ReleaseTagParameters(id=86), 'release/tags', 'tag'),
        ('get_release_related_tags', lambda m: m.ReleaseRelatedTagParameters(id=86, tags=['sa']), 'release/related_tags', 'tag'),
        ('get_series_categories', lambda m: m.SeriesParameters(id='EXJPUS'), 'series/categories', 'category'),
        ('get_series_release', lambda m: m.SeriesParameters(id='IRA'), 'series/release', 'release'),
        ('search_series', lambda m: m.SeriesSearchParameters(search_text='gdp'), 'series/search', 'series'),
        ('search_series_tags', lambda m: m.SeriesSearchTagsParameters(series_search_text='gdp'), 'series/search/tags', 'tag'),
        ('search_series_related_tags', lambda m: m.SeriesSearchRelatedTagsParameters(series_search_text='gdp', tags=['usa']), 'series/search/related_tags', 'tag'),
        ('get_series_tags', lambda m: m.SeriesTagsParameters(id='STLFSI'), 'series/tags', 'tag'),
        ('get_series_updates', lambda m: m.SeriesUpdatesParameters(), 'series/updates', 'series'),
        ('get_sources', lambda m: m.SourcesParameters(), 'sources', 'source'),
        ('get_source_releases', lambda m: m.SourceReleasesParameters(id=1), 'source/releases', 'release'),
        ('get_related_tags', lambda m: m.RelatedTagsParameters(tags=['usa']), 'related_tags', 'tag'),
        ('get_tags_series', lambda m: m.TagsSeriesParameters(tags=['usa']), 'tags/series', 'series'),
    ])
    def test_endpoint_paths(self, method, params_factory, path, model_tag, make_transport):
        """Every endpoint hits its path; an empty wrapper yields no records or an error."""
        import fred_xml.models.requests as requests_module
        from fred_xml.api.client import FredClient
        from fred_xml.errors import MalformedResponse

        transport = make_transport({path: '<root/>'})
        client = FredClient(transport=transport)

        try:
            result = getattr(client, method)(params_factory(requests_module))
        except MalformedResponse as e:
            # Single-record endpoints have nothing to return
            assert f'<{model_tag}>' in str(e)
        else:
            assert result == []

        assert [call[0] for call in transport.calls] == [path]
