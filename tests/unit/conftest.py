"""
Pytest configuration for unit tests.

Provides a fake transport and canned FRED XML payloads so that no unit test
touches the network or needs an API key.
"""

from typing import Dict, List, Tuple

import pytest

from fred_xml.config import reset_app_config


class FakeTransport:
    """
    In-memory stand-in for HttpTransport.

    Returns the payload registered for a path and records every call.
    """

    def __init__(self, responses: Dict[str, str] = None):
        self.responses = dict(responses or {})
        self.calls: List[Tuple[str, Dict[str, str]]] = []
        self.closed = False

    def get(self, path: str, query: Dict[str, str]) -> str:
        self.calls.append((path, dict(query)))
        return self.responses[path]

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True, scope="function")
def isolate_app_config(monkeypatch, tmp_path):
    """
    Keep FRED_* variables of the developer's shell or .env out of unit tests.

    The config singleton is dropped before and after each test.
    """
    for name in ('FRED_API_KEY', 'FRED_BASE_URL', 'FRED_REQUEST_TIMEOUT'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_app_config()
    yield
    reset_app_config()


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def category_xml():
    return '<category id="125" parent_id="13" name="Trade Balance"/>'


@pytest.fixture
def categories_xml():
    return (
        '<?xml version="1.0" encoding="utf-8" ?>\n'
        '<categories>\n'
        '  <category id="16" name="Exports" parent_id="13"/>\n'
        '  <category id="17" name="Imports" parent_id="13"/>\n'
        '  <category id="3000" name="Income Payments &amp; Receipts" parent_id="13"/>\n'
        '</categories>'
    )


@pytest.fixture
def series_xml():
    return (
        '<?xml version="1.0" encoding="utf-8" ?>\n'
        '<seriess realtime_start="2013-08-14" realtime_end="2013-08-14">\n'
        '  <series id="GNPCA" realtime_start="2013-08-14" realtime_end="2013-08-14"'
        ' title="Real Gross National Product" observation_start="1929-01-01"'
        ' observation_end="2012-01-01" frequency="Annual" frequency_short="A"'
        ' units="Billions of Chained 2009 Dollars" units_short="Bil. of Chn. 2009 $"'
        ' seasonal_adjustment="Not Seasonally Adjusted" seasonal_adjustment_short="NSA"'
        ' last_updated="2013-07-31 09:26:16-05" popularity="39"'
        ' notes="BEA Account Code: A001RX1"/>\n'
        '</seriess>'
    )


@pytest.fixture
def observations_xml():
    return (
        '<?xml version="1.0" encoding="utf-8" ?>\n'
        '<observations realtime_start="2013-08-14" realtime_end="2013-08-14"'
        ' observation_start="1776-07-04" observation_end="9999-12-31" units="lin"'
        ' output_type="1" file_type="xml" order_by="observation_date"'
        ' sort_order="asc" count="3" offset="0" limit="100000">\n'
        '  <observation realtime_start="2013-08-14" realtime_end="2013-08-14"'
        ' date="1929-01-01" value="1065.9"/>\n'
        '  <observation realtime_start="2013-08-14" realtime_end="2013-08-14"'
        ' date="1930-01-01" value="."/>\n'
        '  <observation realtime_start="2013-08-14" realtime_end="2013-08-14"'
        ' date="1931-01-01" value="904.8"/>\n'
        '</observations>'
    )


@pytest.fixture
def tags_xml():
    return (
        '<?xml version="1.0" encoding="utf-8" ?>\n'
        '<tags realtime_start="2013-08-14" realtime_end="2013-08-14"'
        ' order_by="series_count" sort_order="desc" count="2" offset="0" limit="1000">\n'
        '  <tag name="nation" group_id="geot" notes="Country Level"'
        ' created="2012-02-27 10:18:19-06" popularity="100" series_count="105200"/>\n'
        '  <tag name="usa" group_id="geo" notes="United States of America"'
        ' created="2012-02-27 10:18:19-06" popularity="100" series_count="127000"/>\n'
        '</tags>'
    )


@pytest.fixture
def release_dates_xml():
    return (
        '<?xml version="1.0" encoding="utf-8" ?>\n'
        '<release_dates realtime_start="2013-01-01" realtime_end="9999-12-31">\n'
        '  <release_date release_id="82">1997-02-10</release_date>\n'
        '  <release_date release_id="82">1998-02-10</release_date>\n'
        '</release_dates>'
    )


@pytest.fixture
def release_tables_xml():
    return (
        '<?xml version="1.0" encoding="utf-8" ?>\n'
        '<release_tables name="Personal consumption expenditures" element_id="12886" release_id="53">\n'
        '  <!-- housekeeping -->\n'
        '  <element element_id="12887" release_id="53" series_id="DGDSRL1A225NBEA"'
        ' parent_id="12886" line="3" type="series" name="Goods" level="1">\n'
        '    <children>\n'
        '      <element element_id="12888" release_id="53" series_id="DDURRL1A225NBEA"'
        ' parent_id="12887" line="4" type="series" name="Durable goods" level="2">\n'
        '        <children/>\n'
        '      </element>\n'
        '      <element element_id="12889" release_id="53" series_id="DNDGRL1A225NBEA"'
        ' parent_id="12887" line="5" type="series" name="Nondurable goods" level="2">\n'
        '        <children/>\n'
        '      </element>\n'
        '    </children>\n'
        '  </element>\n'
        '  <note>Table footnote</note>\n'
        '  <element element_id="12890" release_id="53" series_id="DSERRL1A225NBEA"'
        ' parent_id="12886" line="6" type="series" name="Services" level="1"/>\n'
        '</release_tables>'
    )


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances with canned responses per path."""
    return FakeTransport
