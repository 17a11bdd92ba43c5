"""
Pydantic models for FRED requests and responses.

requests: one frozen parameter model per endpoint family
records: one frozen record model per XML element type
"""

from fred_xml.models.records import (
    XmlRecord,
    Category,
    Series,
    Release,
    ReleaseDate,
    Source,
    Tag,
    Observation,
    VintageDate,
    Element,
)
from fred_xml.models.requests import (
    CategoryParameters,
    CategorySeriesParameters,
    CategoryTagParameters,
    CategoryRelatedTagParameters,
    ReleasesParameters,
    ReleasesDatesParameters,
    ReleaseParameters,
    ReleaseDatesParameters,
    ReleaseSeriesParameters,
    ReleaseTagParameters,
    ReleaseRelatedTagParameters,
    ReleaseTablesParameters,
    SeriesParameters,
    ObservationParameters,
    SeriesSearchParameters,
    SeriesSearchTagsParameters,
    SeriesSearchRelatedTagsParameters,
    SeriesTagsParameters,
    SeriesUpdatesParameters,
    VintageDateParameters,
    SourcesParameters,
    SourceParameters,
    SourceReleasesParameters,
    TagsParameters,
    RelatedTagsParameters,
    TagsSeriesParameters,
)

__all__ = [
    # Records
    'XmlRecord',
    'Category',
    'Series',
    'Release',
    'ReleaseDate',
    'Source',
    'Tag',
    'Observation',
    'VintageDate',
    'Element',
    # Parameters
    'CategoryParameters',
    'CategorySeriesParameters',
    'CategoryTagParameters',
    'CategoryRelatedTagParameters',
    'ReleasesParameters',
    'ReleasesDatesParameters',
    'ReleaseParameters',
    'ReleaseDatesParameters',
    'ReleaseSeriesParameters',
    'ReleaseTagParameters',
    'ReleaseRelatedTagParameters',
    'ReleaseTablesParameters',
    'SeriesParameters',
    'ObservationParameters',
    'SeriesSearchParameters',
    'SeriesSearchTagsParameters',
    'SeriesSearchRelatedTagsParameters',
    'SeriesTagsParameters',
    'SeriesUpdatesParameters',
    'VintageDateParameters',
    'SourcesParameters',
    'SourceParameters',
    'SourceReleasesParameters',
    'TagsParameters',
    'RelatedTagsParameters',
    'TagsSeriesParameters',
]
