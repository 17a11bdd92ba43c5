"""
HTTP transport for the FRED web service.

Wraps a requests.Session: joins the base URL with an endpoint path, appends
the API key to the query and returns the raw XML body. Every failure is
reported as TransportError; the API key never appears in logs or error
messages.
"""

import logging
from typing import Dict, Optional
from urllib.parse import urlencode, urljoin

import requests
from lxml import etree

from fred_xml.config import DEFAULT_BASE_URL
from fred_xml.errors import TransportError


logger = logging.getLogger(__name__)

MASK = '********'


def mask_api_key(url: str, api_key: Optional[str]) -> str:
    """Replace every occurrence of the API key in url."""
    if not api_key:
        return url
    return url.replace(api_key, MASK)


def parse_error_message(body: str) -> Optional[str]:
    """
    Extract the message of a FRED error document.

    FRED reports failures as <error code="400" message="Bad Request. ..."/>.

    Returns:
        The message attribute, or None if body is not such a document
    """
    if not body or not body.strip():
        return None
    try:
        root = etree.fromstring(
            body.encode('utf-8'),
            etree.XMLParser(resolve_entities=False, no_network=True)
        )
    except etree.XMLSyntaxError:
        return None
    if etree.QName(root).localname.lower() != 'error':
        return None
    return root.get('message')


class HttpTransport:
    """
    Blocking HTTP transport over a requests.Session.

    Usage:
        >>> transport = HttpTransport(api_key='abcdefghijklmnopqrstuvwxyz123456')
        >>> xml = transport.get('category', {'category_id': '125'})
        >>> transport.close()

    Context Manager:
        >>> with HttpTransport(api_key=key) as transport:
        ...     xml = transport.get('series', {'series_id': 'GNPCA'})
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Args:
            api_key: FRED API key, appended to every request
            base_url: Base URL that endpoint paths are joined to
            timeout: Timeout in seconds per request (None: no timeout)
            session: Session to use; a new one is created if None
        """
        self.api_key = api_key
        self.base_url = base_url if base_url.endswith('/') else base_url + '/'
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def url_for(self, path: str) -> str:
        return urljoin(self.base_url, path.lstrip('/'))

    def get(self, path: str, query: Dict[str, str]) -> str:
        """
        Send a GET request and return the response body.

        Args:
            path: Endpoint path relative to the base URL (e.g. 'category/children')
            query: Query parameters without the API key

        Returns:
            Response body as text

        Raises:
            TransportError: On connection failure, timeout or non-2xx status
        """
        url = self.url_for(path)
        params = dict(query)
        params['api_key'] = self.api_key
        masked_url = mask_api_key(f"{url}?{urlencode(params)}", self.api_key)

        logger.debug(f"GET {masked_url}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise TransportError(
                f"Request timed out after {self.timeout}s: {masked_url}",
                url=masked_url
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(
                f"Connection failed: {masked_url}",
                url=masked_url
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Request failed: {masked_url}: {mask_api_key(str(e), self.api_key)}",
                url=masked_url
            ) from e

        logger.debug(
            f"Response {response.status_code} from {masked_url} "
            f"({len(response.content)} bytes)"
        )

        if not 200 <= response.status_code < 300:
            api_message = parse_error_message(response.text)
            message = f"HTTP {response.status_code} for {masked_url}"
            if api_message:
                message += f": {api_message}"
            raise TransportError(
                message,
                url=masked_url,
                status_code=response.status_code,
                api_message=api_message
            )

        return response.text

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
