"""
High-level client for the FRED web service.

FredClient is the single entry point: one method per endpoint, each taking
the endpoint's parameter model and returning typed records. Every call
builds the query (so invalid parameter combinations fail before any network
access), fetches the XML through the transport and parses it.
"""

import logging
from typing import List, Optional, Type, TypeVar

from fred_xml.config import get_app_config
from fred_xml.errors import ConfigurationError
from fred_xml.models.records import (
    Category,
    Element,
    Observation,
    Release,
    ReleaseDate,
    Series,
    Source,
    Tag,
    VintageDate,
    XmlRecord,
)
from fred_xml.models.requests import (
    CategoryParameters,
    CategoryRelatedTagParameters,
    CategorySeriesParameters,
    CategoryTagParameters,
    ObservationParameters,
    RelatedTagsParameters,
    ReleaseDatesParameters,
    ReleaseParameters,
    ReleaseRelatedTagParameters,
    ReleaseSeriesParameters,
    ReleasesDatesParameters,
    ReleasesParameters,
    ReleaseTablesParameters,
    ReleaseTagParameters,
    SeriesParameters,
    SeriesSearchParameters,
    SeriesSearchRelatedTagsParameters,
    SeriesSearchTagsParameters,
    SeriesTagsParameters,
    SeriesUpdatesParameters,
    SourceParameters,
    SourceReleasesParameters,
    SourcesParameters,
    TagsParameters,
    TagsSeriesParameters,
    VintageDateParameters,
)
from fred_xml.parsers.xml_parser import parse_list, parse_single
from fred_xml.query import QueryParameters, build_query
from fred_xml.services.transport import HttpTransport


logger = logging.getLogger(__name__)

R = TypeVar('R', bound=XmlRecord)


def _expect(parameters, expected: type):
    # Sibling parameter models share fields but target different id keys
    if type(parameters) is not expected:
        raise TypeError(
            f"Expected {expected.__name__}, got {type(parameters).__name__}"
        )
    return parameters


class FredClient:
    """
    Typed client for the FRED REST API.

    Usage:
        >>> client = FredClient()  # FRED_API_KEY from environment / .env
        >>> category = client.get_category(CategoryParameters(id=125))
        >>> category.name
        'Trade Balance'
        >>> client.close()

    Context Manager:
        >>> with FredClient(api_key=key) as client:
        ...     observations = client.get_series_observations(
        ...         ObservationParameters(id='GNPCA')
        ...     )

    Environment Variables (via config facade):
        - FRED_API_KEY: API key (required unless api_key or transport is given)
        - FRED_BASE_URL: API base URL
        - FRED_REQUEST_TIMEOUT: Timeout in seconds per request
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport=None
    ):
        """
        Initialize the client.

        Parameters take precedence over config values. A client given a
        transport does not own it and leaves it open on close().

        Args:
            api_key: FRED API key (overrides FRED_API_KEY)
            base_url: API base URL (overrides FRED_BASE_URL)
            timeout: Request timeout in seconds (overrides FRED_REQUEST_TIMEOUT)
            transport: Object with get(path, query) -> str, used instead of HTTP

        Raises:
            ConfigurationError: If no transport is given and no API key is configured
        """
        if transport is not None:
            self._transport = transport
            self._owns_transport = False
            return

        config = get_app_config()

        resolved_key = api_key or config.fred_api_key
        if not resolved_key:
            raise ConfigurationError(
                "FRED API key is not configured. "
                "Pass api_key or set FRED_API_KEY in the environment or .env file."
            )

        self._transport = HttpTransport(
            api_key=resolved_key,
            base_url=base_url or config.fred_base_url,
            timeout=timeout if timeout is not None else config.fred_request_timeout
        )
        self._owns_transport = True

    # === Internals ===

    def _fetch(self, path: str, parameters: QueryParameters) -> str:
        query = build_query(parameters)
        logger.debug(f"Fetching {path} with {len(query)} parameter(s)")
        return self._transport.get(path, query)

    def _fetch_one(self, path: str, parameters: QueryParameters, model: Type[R]) -> R:
        return parse_single(self._fetch(path, parameters), model)

    def _fetch_list(
        self,
        path: str,
        parameters: QueryParameters,
        model: Type[R],
        element_filter: Optional[str] = None
    ) -> List[R]:
        return parse_list(self._fetch(path, parameters), model, element_filter)

    # === Categories ===

    def get_category(self, parameters: Optional[CategoryParameters] = None) -> Category:
        """Get a category (the root category if no parameters are given)."""
        parameters = _expect(parameters or CategoryParameters(), CategoryParameters)
        return self._fetch_one('category', parameters, Category)

    def get_category_children(
        self,
        parameters: Optional[CategoryParameters] = None
    ) -> List[Category]:
        """Get the child categories of a category."""
        parameters = _expect(parameters or CategoryParameters(), CategoryParameters)
        return self._fetch_list('category/children', parameters, Category)

    def get_category_related(
        self,
        parameters: Optional[CategoryParameters] = None
    ) -> List[Category]:
        """Get the related categories of a category."""
        parameters = _expect(parameters or CategoryParameters(), CategoryParameters)
        return self._fetch_list('category/related', parameters, Category)

    def get_category_series(self, parameters: CategorySeriesParameters) -> List[Series]:
        """Get the series in a category."""
        parameters = _expect(parameters, CategorySeriesParameters)
        return self._fetch_list('category/series', parameters, Series)

    def get_category_tags(self, parameters: CategoryTagParameters) -> List[Tag]:
        """Get the tags of the series in a category."""
        parameters = _expect(parameters, CategoryTagParameters)
        return self._fetch_list('category/tags', parameters, Tag)

    def get_category_related_tags(
        self,
        parameters: CategoryRelatedTagParameters
    ) -> List[Tag]:
        """Get tags related to the given tags within a category."""
        parameters = _expect(parameters, CategoryRelatedTagParameters)
        return self._fetch_list('category/related_tags', parameters, Tag)

    # === Releases ===

    def get_releases(self, parameters: Optional[ReleasesParameters] = None) -> List[Release]:
        """Get all releases of economic data."""
        parameters = _expect(parameters or ReleasesParameters(), ReleasesParameters)
        return self._fetch_list('releases', parameters, Release)

    def get_releases_dates(
        self,
        parameters: Optional[ReleasesDatesParameters] = None
    ) -> List[ReleaseDate]:
        """Get release dates for all releases."""
        parameters = _expect(parameters or ReleasesDatesParameters(), ReleasesDatesParameters)
        return self._fetch_list('releases/dates', parameters, ReleaseDate)

    def get_release(self, parameters: ReleaseParameters) -> Release:
        parameters = _expect(parameters, ReleaseParameters)
        return self._fetch_one('release', parameters, Release)

    def get_release_dates(self, parameters: ReleaseDatesParameters) -> List[ReleaseDate]:
        parameters = _expect(parameters, ReleaseDatesParameters)
        return self._fetch_list('release/dates', parameters, ReleaseDate)

    def get_release_series(self, parameters: ReleaseSeriesParameters) -> List[Series]:
        parameters = _expect(parameters, ReleaseSeriesParameters)
        return self._fetch_list('release/series', parameters, Series)

    def get_release_sources(self, parameters: ReleaseParameters) -> List[Source]:
        parameters = _expect(parameters, ReleaseParameters)
        return self._fetch_list('release/sources', parameters, Source)

    def get_release_tags(self, parameters: ReleaseTagParameters) -> List[Tag]:
        parameters = _expect(parameters, ReleaseTagParameters)
        return self._fetch_list('release/tags', parameters, Tag)

    def get_release_related_tags(self, parameters: ReleaseRelatedTagParameters) -> List[Tag]:
        parameters = _expect(parameters, ReleaseRelatedTagParameters)
        return self._fetch_list('release/related_tags', parameters, Tag)

    def get_release_tables(self, parameters: ReleaseTablesParameters) -> List[Element]:
        """
        Get the release table elements of a release.

        Only top-level <element> children of the response are returned; each
        element carries its subtree in children.
        """
        parameters = _expect(parameters, ReleaseTablesParameters)
        return self._fetch_list('release/tables', parameters, Element, element_filter='element')

    # === Series ===

    def get_series(self, parameters: SeriesParameters) -> Series:
        parameters = _expect(parameters, SeriesParameters)
        return self._fetch_one('series', parameters, Series)

    def get_series_categories(self, parameters: SeriesParameters) -> List[Category]:
        parameters = _expect(parameters, SeriesParameters)
        return self._fetch_list('series/categories', parameters, Category)

    def get_series_observations(self, parameters: ObservationParameters) -> List[Observation]:
        """
        Get the observations (data values) of a series.

        Missing values ('.') are returned with value=None.
        """
        parameters = _expect(parameters, ObservationParameters)
        return self._fetch_list('series/observations', parameters, Observation)

    def get_series_release(self, parameters: SeriesParameters) -> Release:
        parameters = _expect(parameters, SeriesParameters)
        return self._fetch_one('series/release', parameters, Release)

    def search_series(self, parameters: SeriesSearchParameters) -> List[Series]:
        parameters = _expect(parameters, SeriesSearchParameters)
        return self._fetch_list('series/search', parameters, Series)

    def search_series_tags(self, parameters: SeriesSearchTagsParameters) -> List[Tag]:
        parameters = _expect(parameters, SeriesSearchTagsParameters)
        return self._fetch_list('series/search/tags', parameters, Tag)

    def search_series_related_tags(
        self,
        parameters: SeriesSearchRelatedTagsParameters
    ) -> List[Tag]:
        parameters = _expect(parameters, SeriesSearchRelatedTagsParameters)
        return self._fetch_list('series/search/related_tags', parameters, Tag)

    def get_series_tags(self, parameters: SeriesTagsParameters) -> List[Tag]:
        parameters = _expect(parameters, SeriesTagsParameters)
        return self._fetch_list('series/tags', parameters, Tag)

    def get_series_updates(
        self,
        parameters: Optional[SeriesUpdatesParameters] = None
    ) -> List[Series]:
        """Get series sorted by when they were last updated."""
        parameters = _expect(parameters or SeriesUpdatesParameters(), SeriesUpdatesParameters)
        return self._fetch_list('series/updates', parameters, Series)

    def get_series_vintage_dates(self, parameters: VintageDateParameters) -> List[VintageDate]:
        parameters = _expect(parameters, VintageDateParameters)
        return self._fetch_list('series/vintagedates', parameters, VintageDate)

    # === Sources ===

    def get_sources(self, parameters: Optional[SourcesParameters] = None) -> List[Source]:
        parameters = _expect(parameters or SourcesParameters(), SourcesParameters)
        return self._fetch_list('sources', parameters, Source)

    def get_source(self, parameters: SourceParameters) -> Source:
        parameters = _expect(parameters, SourceParameters)
        return self._fetch_one('source', parameters, Source)

    def get_source_releases(self, parameters: SourceReleasesParameters) -> List[Release]:
        parameters = _expect(parameters, SourceReleasesParameters)
        return self._fetch_list('source/releases', parameters, Release)

    # === Tags ===

    def get_tags(self, parameters: Optional[TagsParameters] = None) -> List[Tag]:
        parameters = _expect(parameters or TagsParameters(), TagsParameters)
        return self._fetch_list('tags', parameters, Tag)

    def get_related_tags(self, parameters: RelatedTagsParameters) -> List[Tag]:
        parameters = _expect(parameters, RelatedTagsParameters)
        return self._fetch_list('related_tags', parameters, Tag)

    def get_tags_series(self, parameters: TagsSeriesParameters) -> List[Series]:
        parameters = _expect(parameters, TagsSeriesParameters)
        return self._fetch_list('tags/series', parameters, Series)

    # === Lifecycle ===

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - closes the transport it owns."""
        self.close()
        return False  # Don't suppress exceptions
