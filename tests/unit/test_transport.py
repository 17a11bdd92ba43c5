"""
Unit tests for HttpTransport (services/transport.py).

requests.Session is replaced by a Mock; no network access.
"""

from unittest.mock import Mock

import pytest
import requests


API_KEY = 'abcdefghijklmnopqrstuvwxyz123456'


def _response(status_code=200, text='<categories/>'):
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.content = text.encode('utf-8')
    return response


@pytest.fixture
def session():
    mock_session = Mock(spec=requests.Session)
    mock_session.get.return_value = _response()
    return mock_session


@pytest.fixture
def transport(session):
    from fred_xml.services.transport import HttpTransport
    return HttpTransport(api_key=API_KEY, session=session)


class TestHttpTransport:
    """Test suite for HttpTransport.get()."""

    def test_get_joins_path_and_appends_key(self, transport, session):
        body = transport.get('category/children', {'category_id': '13'})

        assert body == '<categories/>'
        session.get.assert_called_once_with(
            'https://api.stlouisfed.org/fred/category/children',
            params={'category_id': '13', 'api_key': API_KEY},
            timeout=None
        )

    def test_query_is_not_mutated(self, transport):
        query = {'series_id': 'GNPCA'}

        transport.get('series', query)

        assert query == {'series_id': 'GNPCA'}

    def test_custom_base_url_and_timeout(self, session):
        from fred_xml.services.transport import HttpTransport

        transport = HttpTransport(
            api_key=API_KEY,
            base_url='http://localhost:8080/fred',
            timeout=2.5,
            session=session
        )
        transport.get('/series', {})

        args, kwargs = session.get.call_args
        assert args[0] == 'http://localhost:8080/fred/series'
        assert kwargs['timeout'] == 2.5

    def test_http_error_carries_api_message(self, transport, session):
        session.get.return_value = _response(
            400,
            '<?xml version="1.0" encoding="utf-8" ?>\n'
            '<error code="400" message="Bad Request.  The value for variable api_key is not registered."/>'
        )

        from fred_xml.errors import TransportError

        with pytest.raises(TransportError) as exc_info:
            transport.get('category', {'category_id': '125'})

        error = exc_info.value
        assert error.status_code == 400
        assert 'not registered' in error.api_message
        assert 'not registered' in str(error)
        assert API_KEY not in error.url
        assert API_KEY not in str(error)
        assert 'category_id=125' in error.url

    def test_http_error_without_xml_body(self, transport, session):
        session.get.return_value = _response(503, 'Service Unavailable')

        from fred_xml.errors import TransportError

        with pytest.raises(TransportError) as exc_info:
            transport.get('series', {'series_id': 'GNPCA'})

        assert exc_info.value.status_code == 503
        assert exc_info.value.api_message is None

    @pytest.mark.parametrize("exception", [
        requests.exceptions.Timeout('timed out'),
        requests.exceptions.ConnectionError('refused'),
        requests.exceptions.RequestException('boom'),
    ])
    def test_request_failures_become_transport_errors(self, transport, session, exception):
        from fred_xml.errors import TransportError

        session.get.side_effect = exception

        with pytest.raises(TransportError) as exc_info:
            transport.get('series', {'series_id': 'GNPCA'})

        assert exc_info.value.status_code is None
        assert exc_info.value.__cause__ is exception
        assert API_KEY not in str(exc_info.value)

    def test_api_key_not_logged(self, transport, caplog):
        import logging

        with caplog.at_level(logging.DEBUG, logger='fred_xml.services.transport'):
            transport.get('series', {'series_id': 'GNPCA'})

        assert caplog.records
        assert API_KEY not in caplog.text

    def test_context_manager_closes_session(self, session):
        from fred_xml.services.transport import HttpTransport

        with HttpTransport(api_key=API_KEY, session=session):
            pass

        session.close.assert_called_once()


class TestHelpers:
    """Test suite for module-level helpers."""

    def test_mask_api_key(self):
        from fred_xml.services.transport import mask_api_key

        url = f'https://api.stlouisfed.org/fred/series?series_id=GNPCA&api_key={API_KEY}'

        assert API_KEY not in mask_api_key(url, API_KEY)
        assert mask_api_key(url, None) == url

    @pytest.mark.parametrize("body,expected", [
        ('<error code="400" message="Bad Request."/>', 'Bad Request.'),
        ('<categories/>', None),
        ('Service Unavailable', None),
        ('', None),
    ])
    def test_parse_error_message(self, body, expected):
        from fred_xml.services.transport import parse_error_message

        assert parse_error_message(body) == expected
