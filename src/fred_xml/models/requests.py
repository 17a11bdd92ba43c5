"""
Request parameter models for FRED endpoints.

One frozen Pydantic model per endpoint family. Defaults match the API's
documented defaults; optional dates default to None and are then left out of
the query entirely, so the server (never the client) picks "today" or the
earliest/latest available date.

Single-field problems (negative ids, limits out of range, malformed tag
names) raise ValidationError on construction. Invalid combinations of fields
(exclude_tags without tags, half a filter pair) raise InvalidParameter from
to_query(), before any request is sent.
"""

from datetime import date, datetime
from typing import ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fred_xml.query import QueryBuilder, check_range, require_tags_for_exclusion
from fred_xml.errors import InvalidParameter
from fred_xml.types import (
    ReleaseDateOrderBy,
    ReleaseOrderBy,
    SeriesFilterValue,
    SeriesFilterVariable,
    SeriesObservationAggregationMethod,
    SeriesObservationFrequency,
    SeriesObservationOutputType,
    SeriesObservationUnit,
    SeriesOrderBy,
    SeriesSearchOrderBy,
    SeriesSearchType,
    SortOrder,
    SourceOrderBy,
    TagGroupId,
    TagOrderBy,
)
from fred_xml.validators import validate_series_id, validate_tag_names


DEFAULT_LIMIT = 1000
OBSERVATIONS_LIMIT = 100000
RELEASE_DATES_LIMIT = 10000
VINTAGE_DATES_LIMIT = 10000


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')


class RealtimeParameters(_FrozenModel):
    """
    Base for every endpoint that accepts a real-time period.

    Attributes:
        realtime_start: Start of the real-time period (server default if None)
        realtime_end: End of the real-time period (server default if None)
    """

    realtime_start: Optional[date] = Field(
        default=None,
        description="Start of the real-time period, omitted when None"
    )

    realtime_end: Optional[date] = Field(
        default=None,
        description="End of the real-time period, omitted when None"
    )


class _SeriesIdMixin(_FrozenModel):
    id: str = Field(
        ...,
        description="Series id, sent as-is",
        examples=["GNPCA"]
    )

    @field_validator('id')
    @classmethod
    def validate_id(cls, v: str) -> str:
        return validate_series_id(v)


class _TagListMixin(_FrozenModel):
    tags: Optional[List[str]] = Field(
        default=None,
        description="Tag names that results must match all of"
    )

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return validate_tag_names(v)


class _ExcludeTagListMixin(_FrozenModel):
    exclude_tags: Optional[List[str]] = Field(
        default=None,
        description="Tag names that results must match none of (requires tags)"
    )

    @field_validator('exclude_tags')
    @classmethod
    def validate_exclude_tags(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return validate_tag_names(v)


# === Categories ===

class CategoryParameters(RealtimeParameters):
    """
    Parameters for category, category/children and category/related.

    Example:
        >>> CategoryParameters(id=125).to_query()
        {'category_id': '125'}
    """

    id: int = Field(
        default=0,
        ge=0,
        description="Category id, 0 is the root category",
        examples=[125]
    )

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add('category_id', self.id)
            .add_realtime(self)
            .build()
        )


class _SeriesListParameters(RealtimeParameters, _TagListMixin, _ExcludeTagListMixin):
    """Shared fields of category/series and release/series."""

    id_key: ClassVar[str] = ''

    id: int = Field(..., ge=0, description="Category or release id")
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: SeriesOrderBy = SeriesOrderBy.SERIES_ID
    sort_order: SortOrder = SortOrder.ASCENDING
    filter_variable: SeriesFilterVariable = SeriesFilterVariable.NONE
    filter_value: Optional[str] = None

    def to_query(self) -> Dict[str, str]:
        require_tags_for_exclusion(self.tags, self.exclude_tags)
        return (
            QueryBuilder()
            .add(self.id_key, self.id)
            .add_paging(self)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .add_filter(self.filter_variable, self.filter_value)
            .add_tags('tag_names', self.tags)
            .add_tags('exclude_tag_names', self.exclude_tags)
            .build()
        )


class CategorySeriesParameters(_SeriesListParameters):
    """
    Parameters for category/series.

    Example:
        >>> CategorySeriesParameters(
        ...     id=125,
        ...     filter_variable=SeriesFilterVariable.FREQUENCY,
        ...     filter_value='Monthly'
        ... ).to_query()['filter_value']
        'Monthly'
    """

    id_key: ClassVar[str] = 'category_id'


class _TagListParameters(RealtimeParameters, _TagListMixin):
    """Shared fields of category/tags and release/tags."""

    id_key: ClassVar[str] = ''

    id: int = Field(..., ge=0, description="Category or release id")
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: TagOrderBy = TagOrderBy.SERIES_COUNT
    sort_order: SortOrder = SortOrder.ASCENDING
    search_text: Optional[str] = None
    group_id: TagGroupId = TagGroupId.NONE

    def _builder(self) -> QueryBuilder:
        return (
            QueryBuilder()
            .add(self.id_key, self.id)
            .add_paging(self)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .add_optional('search_text', self.search_text)
            .add_enum('tag_group_id', self.group_id)
        )

    def to_query(self) -> Dict[str, str]:
        return self._builder().add_tags('tag_names', self.tags).build()


class _RelatedTagListParameters(_TagListParameters, _ExcludeTagListMixin):
    """
    Shared fields of category/related_tags and release/related_tags.

    tags is required: related tags are the tags assigned to series that
    match all of the given tags.
    """

    def to_query(self) -> Dict[str, str]:
        return (
            self._builder()
            .add_required_tags('tag_names', self.tags)
            .add_tags('exclude_tag_names', self.exclude_tags)
            .build()
        )


class CategoryTagParameters(_TagListParameters):
    """Parameters for category/tags."""

    id_key: ClassVar[str] = 'category_id'


class CategoryRelatedTagParameters(_RelatedTagListParameters):
    """Parameters for category/related_tags."""

    id_key: ClassVar[str] = 'category_id'


# === Releases ===

class ReleasesParameters(RealtimeParameters):
    """Parameters for releases."""

    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: ReleaseOrderBy = ReleaseOrderBy.RELEASE_ID
    sort_order: SortOrder = SortOrder.ASCENDING

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add_paging(self)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .build()
        )


class ReleasesDatesParameters(RealtimeParameters):
    """Parameters for releases/dates (release dates of all releases)."""

    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: ReleaseDateOrderBy = ReleaseDateOrderBy.RELEASE_DATE
    sort_order: SortOrder = SortOrder.ASCENDING
    include_release_dates_with_no_data: bool = False

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add_paging(self)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add('include_release_dates_with_no_data', self.include_release_dates_with_no_data)
            .add_realtime(self)
            .build()
        )


class ReleaseParameters(RealtimeParameters):
    """Parameters for release and release/sources."""

    id: int = Field(..., ge=0, description="Release id", examples=[53])

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add('release_id', self.id)
            .add_realtime(self)
            .build()
        )


class ReleaseDatesParameters(RealtimeParameters):
    """Parameters for release/dates (release dates of one release)."""

    id: int = Field(..., ge=0, description="Release id", examples=[82])
    limit: int = Field(default=RELEASE_DATES_LIMIT, ge=1, le=RELEASE_DATES_LIMIT)
    offset: int = Field(default=0, ge=0)
    sort_order: SortOrder = SortOrder.ASCENDING
    include_release_dates_with_no_data: bool = False

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add('release_id', self.id)
            .add_paging(self)
            .add_enum('sort_order', self.sort_order)
            .add('include_release_dates_with_no_data', self.include_release_dates_with_no_data)
            .add_realtime(self)
            .build()
        )


class ReleaseSeriesParameters(_SeriesListParameters):
    """Parameters for release/series (id is the release id)."""

    id_key: ClassVar[str] = 'release_id'


class ReleaseTagParameters(_TagListParameters):
    """Parameters for release/tags."""

    id_key: ClassVar[str] = 'release_id'


class ReleaseRelatedTagParameters(_RelatedTagListParameters):
    """Parameters for release/related_tags."""

    id_key: ClassVar[str] = 'release_id'


class ReleaseTablesParameters(_FrozenModel):
    """
    Parameters for release/tables.

    This endpoint has no real-time period.
    """

    id: int = Field(..., ge=0, description="Release id", examples=[53])
    element_id: Optional[int] = Field(
        default=None,
        ge=0,
        description="Root element of the returned tree (whole release if None)"
    )
    include_observation_values: bool = False
    observation_date: Optional[date] = None

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add('release_id', self.id)
            .add('include_observation_values', self.include_observation_values)
            .add_optional('element_id', self.element_id)
            .add_date('observation_date', self.observation_date)
            .build()
        )


# === Series ===

class SeriesParameters(RealtimeParameters, _SeriesIdMixin):
    """Parameters for series, series/categories and series/release."""

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add('series_id', self.id)
            .add_realtime(self)
            .build()
        )


class ObservationParameters(RealtimeParameters, _SeriesIdMixin):
    """
    Parameters for series/observations.

    Example:
        >>> ObservationParameters(
        ...     id='GNPCA',
        ...     observation_start=date(2000, 1, 1),
        ...     vintage_dates=[date(2020, 1, 1), date(2021, 1, 1)]
        ... ).to_query()['vintage_dates']
        '2020-01-01,2021-01-01'
    """

    limit: int = Field(default=OBSERVATIONS_LIMIT, ge=1, le=OBSERVATIONS_LIMIT)
    offset: int = Field(default=0, ge=0)
    sort_order: SortOrder = SortOrder.ASCENDING
    observation_start: Optional[date] = None
    observation_end: Optional[date] = None
    units: SeriesObservationUnit = SeriesObservationUnit.LEVELS
    frequency: SeriesObservationFrequency = SeriesObservationFrequency.NONE
    aggregation_method: SeriesObservationAggregationMethod = SeriesObservationAggregationMethod.AVERAGE
    output_type: SeriesObservationOutputType = SeriesObservationOutputType.REAL_TIME_PERIOD
    vintage_dates: Optional[List[date]] = None

    def to_query(self) -> Dict[str, str]:
        check_range(
            'observation_start', self.observation_start,
            'observation_end', self.observation_end
        )
        return (
            QueryBuilder()
            .add('series_id', self.id)
            .add_paging(self)
            .add_enum('sort_order', self.sort_order)
            .add_enum('units', self.units)
            .add_enum('aggregation_method', self.aggregation_method)
            .add_enum('output_type', self.output_type)
            .add_realtime(self)
            .add_date('observation_start', self.observation_start)
            .add_date('observation_end', self.observation_end)
            .add_enum('frequency', self.frequency)
            .add_dates('vintage_dates', self.vintage_dates)
            .build()
        )


class SeriesSearchParameters(RealtimeParameters, _TagListMixin, _ExcludeTagListMixin):
    """
    Parameters for series/search.

    order_by defaults to NONE, which leaves ordering to the server
    (search rank for full-text searches).
    """

    search_text: str = Field(..., min_length=1, examples=["monetary service index"])
    search_type: SeriesSearchType = SeriesSearchType.FULL_TEXT
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: SeriesSearchOrderBy = SeriesSearchOrderBy.NONE
    sort_order: SortOrder = SortOrder.ASCENDING
    filter_variable: SeriesFilterVariable = SeriesFilterVariable.NONE
    filter_value: Optional[str] = None

    def to_query(self) -> Dict[str, str]:
        require_tags_for_exclusion(self.tags, self.exclude_tags)
        return (
            QueryBuilder()
            .add('search_text', self.search_text)
            .add_enum('search_type', self.search_type)
            .add_paging(self)
            .add_enum('sort_order', self.sort_order)
            .add_enum('order_by', self.order_by)
            .add_realtime(self)
            .add_filter(self.filter_variable, self.filter_value)
            .add_tags('tag_names', self.tags)
            .add_tags('exclude_tag_names', self.exclude_tags)
            .build()
        )


class SeriesSearchTagsParameters(RealtimeParameters, _TagListMixin):
    """Parameters for series/search/tags."""

    series_search_text: str = Field(..., min_length=1, examples=["monetary service index"])
    tag_search_text: Optional[str] = None
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: TagOrderBy = TagOrderBy.SERIES_COUNT
    sort_order: SortOrder = SortOrder.ASCENDING
    group_id: TagGroupId = TagGroupId.NONE

    def _builder(self) -> QueryBuilder:
        return (
            QueryBuilder()
            .add('series_search_text', self.series_search_text)
            .add_paging(self)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .add_optional('tag_search_text', self.tag_search_text)
            .add_enum('tag_group_id', self.group_id)
        )

    def to_query(self) -> Dict[str, str]:
        return self._builder().add_tags('tag_names', self.tags).build()


class SeriesSearchRelatedTagsParameters(SeriesSearchTagsParameters, _ExcludeTagListMixin):
    """Parameters for series/search/related_tags (tags is required)."""

    def to_query(self) -> Dict[str, str]:
        return (
            self._builder()
            .add_required_tags('tag_names', self.tags)
            .add_tags('exclude_tag_names', self.exclude_tags)
            .build()
        )


class SeriesTagsParameters(RealtimeParameters, _SeriesIdMixin):
    """Parameters for series/tags."""

    order_by: TagOrderBy = TagOrderBy.SERIES_COUNT
    sort_order: SortOrder = SortOrder.ASCENDING

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add('series_id', self.id)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .build()
        )


class SeriesUpdatesParameters(RealtimeParameters):
    """
    Parameters for series/updates.

    start_time and end_time bound the update window and are sent as
    YYYYMMDDHHmm; the API requires both or neither.
    """

    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    filter_value: SeriesFilterValue = SeriesFilterValue.ALL
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    def to_query(self) -> Dict[str, str]:
        if (self.start_time is None) != (self.end_time is None):
            raise InvalidParameter("start_time and end_time must be supplied together")
        if self.start_time is not None and (
            (self.start_time.tzinfo is None) != (self.end_time.tzinfo is None)
        ):
            raise InvalidParameter(
                "start_time and end_time must both be naive or both be timezone-aware"
            )
        if self.start_time is not None and self.start_time > self.end_time:
            raise InvalidParameter(
                f"start_time ({self.start_time}) must not be after end_time ({self.end_time})"
            )
        return (
            QueryBuilder()
            .add_paging(self)
            .add_enum('filter_value', self.filter_value)
            .add_realtime(self)
            .add_time('start_time', self.start_time)
            .add_time('end_time', self.end_time)
            .build()
        )


class VintageDateParameters(RealtimeParameters, _SeriesIdMixin):
    """Parameters for series/vintagedates."""

    limit: int = Field(default=VINTAGE_DATES_LIMIT, ge=1, le=VINTAGE_DATES_LIMIT)
    offset: int = Field(default=0, ge=0)
    sort_order: SortOrder = SortOrder.ASCENDING

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add('series_id', self.id)
            .add_paging(self)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .build()
        )


# === Sources ===

class SourcesParameters(RealtimeParameters):
    """Parameters for sources."""

    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: SourceOrderBy = SourceOrderBy.SOURCE_ID
    sort_order: SortOrder = SortOrder.ASCENDING

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add_paging(self)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .build()
        )


class SourceParameters(RealtimeParameters):
    """Parameters for source."""

    id: int = Field(..., ge=0, description="Source id", examples=[1])

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add('source_id', self.id)
            .add_realtime(self)
            .build()
        )


class SourceReleasesParameters(RealtimeParameters):
    """Parameters for source/releases."""

    id: int = Field(..., ge=0, description="Source id", examples=[1])
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: ReleaseOrderBy = ReleaseOrderBy.RELEASE_ID
    sort_order: SortOrder = SortOrder.ASCENDING

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add('source_id', self.id)
            .add_paging(self)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .build()
        )


# === Tags ===

class TagsParameters(RealtimeParameters, _TagListMixin):
    """Parameters for tags."""

    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: TagOrderBy = TagOrderBy.SERIES_COUNT
    sort_order: SortOrder = SortOrder.ASCENDING
    search_text: Optional[str] = None
    group_id: TagGroupId = TagGroupId.NONE

    def _builder(self) -> QueryBuilder:
        return (
            QueryBuilder()
            .add_paging(self)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .add_optional('search_text', self.search_text)
            .add_enum('tag_group_id', self.group_id)
        )

    def to_query(self) -> Dict[str, str]:
        return self._builder().add_tags('tag_names', self.tags).build()


class RelatedTagsParameters(TagsParameters, _ExcludeTagListMixin):
    """Parameters for related_tags (tags is required)."""

    def to_query(self) -> Dict[str, str]:
        return (
            self._builder()
            .add_required_tags('tag_names', self.tags)
            .add_tags('exclude_tag_names', self.exclude_tags)
            .build()
        )


class TagsSeriesParameters(RealtimeParameters, _TagListMixin, _ExcludeTagListMixin):
    """Parameters for tags/series (series matching all of the given tags)."""

    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT)
    offset: int = Field(default=0, ge=0)
    order_by: SeriesOrderBy = SeriesOrderBy.SERIES_ID
    sort_order: SortOrder = SortOrder.ASCENDING

    def to_query(self) -> Dict[str, str]:
        return (
            QueryBuilder()
            .add_required_tags('tag_names', self.tags)
            .add_paging(self)
            .add_enum('order_by', self.order_by)
            .add_enum('sort_order', self.sort_order)
            .add_realtime(self)
            .add_tags('exclude_tag_names', self.exclude_tags)
            .build()
        )
