"""
FRED enum vocabulary and its wire-string mapping.

Every enum member the API understands is listed once in WIRE_CODES, a static
table from member to the token FRED expects on the wire (e.g.
SortOrder.DESCENDING -> 'desc'). encode() and decode() are exact inverses over
that table, and WireCodes offers discovery helpers on top of it.

Members named NONE are sentinels: they mean "do not send this parameter" and
have no wire token of their own.
"""

from enum import Enum
from typing import Dict, Type, TypeVar

from fred_xml.errors import UnknownEnumValue


E = TypeVar('E', bound=Enum)


class SortOrder(Enum):
    ASCENDING = 'ascending'
    DESCENDING = 'descending'


class SeriesOrderBy(Enum):
    SERIES_ID = 'series_id'
    TITLE = 'title'
    UNITS = 'units'
    FREQUENCY = 'frequency'
    SEASONAL_ADJUSTMENT = 'seasonal_adjustment'
    REALTIME_START = 'realtime_start'
    REALTIME_END = 'realtime_end'
    LAST_UPDATED = 'last_updated'
    OBSERVATION_START = 'observation_start'
    OBSERVATION_END = 'observation_end'
    POPULARITY = 'popularity'
    GROUP_POPULARITY = 'group_popularity'


class SeriesSearchOrderBy(Enum):
    NONE = 'none'
    SEARCH_RANK = 'search_rank'
    SERIES_ID = 'series_id'
    TITLE = 'title'
    UNITS = 'units'
    FREQUENCY = 'frequency'
    SEASONAL_ADJUSTMENT = 'seasonal_adjustment'
    REALTIME_START = 'realtime_start'
    REALTIME_END = 'realtime_end'
    LAST_UPDATED = 'last_updated'
    OBSERVATION_START = 'observation_start'
    OBSERVATION_END = 'observation_end'
    POPULARITY = 'popularity'
    GROUP_POPULARITY = 'group_popularity'


class SeriesSearchType(Enum):
    FULL_TEXT = 'full_text'
    SERIES_ID = 'series_id'


class SeriesFilterVariable(Enum):
    NONE = 'none'
    UNITS = 'units'
    FREQUENCY = 'frequency'
    SEASONAL_ADJUSTMENT = 'seasonal_adjustment'


class SeriesFilterValue(Enum):
    """Geographic filter for series/updates."""
    MACRO = 'macro'
    REGIONAL = 'regional'
    ALL = 'all'


class ReleaseOrderBy(Enum):
    RELEASE_ID = 'release_id'
    NAME = 'name'
    PRESS_RELEASE = 'press_release'
    REALTIME_START = 'realtime_start'
    REALTIME_END = 'realtime_end'


class ReleaseDateOrderBy(Enum):
    RELEASE_ID = 'release_id'
    RELEASE_NAME = 'release_name'
    RELEASE_DATE = 'release_date'


class SourceOrderBy(Enum):
    SOURCE_ID = 'source_id'
    NAME = 'name'
    REALTIME_START = 'realtime_start'
    REALTIME_END = 'realtime_end'


class TagOrderBy(Enum):
    SERIES_COUNT = 'series_count'
    POPULARITY = 'popularity'
    CREATED = 'created'
    NAME = 'name'
    GROUP_ID = 'group_id'


class TagGroupId(Enum):
    NONE = 'none'
    FREQUENCY = 'frequency'
    GENERAL = 'general'
    GEOGRAPHY = 'geography'
    GEOGRAPHY_TYPE = 'geography_type'
    RELEASE = 'release'
    SEASONAL_ADJUSTMENT = 'seasonal_adjustment'
    SOURCE = 'source'
    CONCEPT = 'concept'


class SeriesObservationUnit(Enum):
    """Data value transformation applied by the server."""
    LEVELS = 'levels'
    CHANGE = 'change'
    CHANGE_FROM_YEAR_AGO = 'change_from_year_ago'
    PERCENT_CHANGE = 'percent_change'
    PERCENT_CHANGE_FROM_YEAR_AGO = 'percent_change_from_year_ago'
    COMPOUNDED_ANNUAL_RATE_OF_CHANGE = 'compounded_annual_rate_of_change'
    CONTINUOUSLY_COMPOUNDED_RATE_OF_CHANGE = 'continuously_compounded_rate_of_change'
    CONTINUOUSLY_COMPOUNDED_ANNUAL_RATE_OF_CHANGE = 'continuously_compounded_annual_rate_of_change'
    NATURAL_LOG = 'natural_log'


class SeriesObservationFrequency(Enum):
    """Lower frequency to aggregate observations to."""
    NONE = 'none'
    DAILY = 'daily'
    WEEKLY = 'weekly'
    BIWEEKLY = 'biweekly'
    MONTHLY = 'monthly'
    QUARTERLY = 'quarterly'
    SEMIANNUAL = 'semiannual'
    ANNUAL = 'annual'
    WEEKLY_ENDING_FRIDAY = 'weekly_ending_friday'
    WEEKLY_ENDING_THURSDAY = 'weekly_ending_thursday'
    WEEKLY_ENDING_WEDNESDAY = 'weekly_ending_wednesday'
    WEEKLY_ENDING_TUESDAY = 'weekly_ending_tuesday'
    WEEKLY_ENDING_MONDAY = 'weekly_ending_monday'
    WEEKLY_ENDING_SUNDAY = 'weekly_ending_sunday'
    WEEKLY_ENDING_SATURDAY = 'weekly_ending_saturday'
    BIWEEKLY_ENDING_WEDNESDAY = 'biweekly_ending_wednesday'
    BIWEEKLY_ENDING_MONDAY = 'biweekly_ending_monday'


class SeriesObservationAggregationMethod(Enum):
    AVERAGE = 'average'
    SUM = 'sum'
    END_OF_PERIOD = 'end_of_period'


class SeriesObservationOutputType(Enum):
    REAL_TIME_PERIOD = 'real_time_period'
    VINTAGE_DATE_ALL_OBSERVATIONS = 'vintage_date_all_observations'
    VINTAGE_DATE_NEW_AND_REVISED_ONLY = 'vintage_date_new_and_revised_only'
    INITIAL_RELEASE_ONLY = 'initial_release_only'


ALL_ENUMS = (
    SortOrder,
    SeriesOrderBy,
    SeriesSearchOrderBy,
    SeriesSearchType,
    SeriesFilterVariable,
    SeriesFilterValue,
    ReleaseOrderBy,
    ReleaseDateOrderBy,
    SourceOrderBy,
    TagOrderBy,
    TagGroupId,
    SeriesObservationUnit,
    SeriesObservationFrequency,
    SeriesObservationAggregationMethod,
    SeriesObservationOutputType,
)


# Sentinels (NONE members) are intentionally absent.
WIRE_CODES: Dict[Enum, str] = {
    SortOrder.ASCENDING: 'asc',
    SortOrder.DESCENDING: 'desc',

    SeriesOrderBy.SERIES_ID: 'series_id',
    SeriesOrderBy.TITLE: 'title',
    SeriesOrderBy.UNITS: 'units',
    SeriesOrderBy.FREQUENCY: 'frequency',
    SeriesOrderBy.SEASONAL_ADJUSTMENT: 'seasonal_adjustment',
    SeriesOrderBy.REALTIME_START: 'realtime_start',
    SeriesOrderBy.REALTIME_END: 'realtime_end',
    SeriesOrderBy.LAST_UPDATED: 'last_updated',
    SeriesOrderBy.OBSERVATION_START: 'observation_start',
    SeriesOrderBy.OBSERVATION_END: 'observation_end',
    SeriesOrderBy.POPULARITY: 'popularity',
    SeriesOrderBy.GROUP_POPULARITY: 'group_popularity',

    SeriesSearchOrderBy.SEARCH_RANK: 'search_rank',
    SeriesSearchOrderBy.SERIES_ID: 'series_id',
    SeriesSearchOrderBy.TITLE: 'title',
    SeriesSearchOrderBy.UNITS: 'units',
    SeriesSearchOrderBy.FREQUENCY: 'frequency',
    SeriesSearchOrderBy.SEASONAL_ADJUSTMENT: 'seasonal_adjustment',
    SeriesSearchOrderBy.REALTIME_START: 'realtime_start',
    SeriesSearchOrderBy.REALTIME_END: 'realtime_end',
    SeriesSearchOrderBy.LAST_UPDATED: 'last_updated',
    SeriesSearchOrderBy.OBSERVATION_START: 'observation_start',
    SeriesSearchOrderBy.OBSERVATION_END: 'observation_end',
    SeriesSearchOrderBy.POPULARITY: 'popularity',
    SeriesSearchOrderBy.GROUP_POPULARITY: 'group_popularity',

    SeriesSearchType.FULL_TEXT: 'full_text',
    SeriesSearchType.SERIES_ID: 'series_id',

    SeriesFilterVariable.UNITS: 'units',
    SeriesFilterVariable.FREQUENCY: 'frequency',
    SeriesFilterVariable.SEASONAL_ADJUSTMENT: 'seasonal_adjustment',

    SeriesFilterValue.MACRO: 'macro',
    SeriesFilterValue.REGIONAL: 'regional',
    SeriesFilterValue.ALL: 'all',

    ReleaseOrderBy.RELEASE_ID: 'release_id',
    ReleaseOrderBy.NAME: 'name',
    ReleaseOrderBy.PRESS_RELEASE: 'press_release',
    ReleaseOrderBy.REALTIME_START: 'realtime_start',
    ReleaseOrderBy.REALTIME_END: 'realtime_end',

    ReleaseDateOrderBy.RELEASE_ID: 'release_id',
    ReleaseDateOrderBy.RELEASE_NAME: 'release_name',
    ReleaseDateOrderBy.RELEASE_DATE: 'release_date',

    SourceOrderBy.SOURCE_ID: 'source_id',
    SourceOrderBy.NAME: 'name',
    SourceOrderBy.REALTIME_START: 'realtime_start',
    SourceOrderBy.REALTIME_END: 'realtime_end',

    TagOrderBy.SERIES_COUNT: 'series_count',
    TagOrderBy.POPULARITY: 'popularity',
    TagOrderBy.CREATED: 'created',
    TagOrderBy.NAME: 'name',
    TagOrderBy.GROUP_ID: 'group_id',

    TagGroupId.FREQUENCY: 'freq',
    TagGroupId.GENERAL: 'gen',
    TagGroupId.GEOGRAPHY: 'geo',
    TagGroupId.GEOGRAPHY_TYPE: 'geot',
    TagGroupId.RELEASE: 'rls',
    TagGroupId.SEASONAL_ADJUSTMENT: 'seas',
    TagGroupId.SOURCE: 'src',
    TagGroupId.CONCEPT: 'cc',

    SeriesObservationUnit.LEVELS: 'lin',
    SeriesObservationUnit.CHANGE: 'chg',
    SeriesObservationUnit.CHANGE_FROM_YEAR_AGO: 'ch1',
    SeriesObservationUnit.PERCENT_CHANGE: 'pch',
    SeriesObservationUnit.PERCENT_CHANGE_FROM_YEAR_AGO: 'pc1',
    SeriesObservationUnit.COMPOUNDED_ANNUAL_RATE_OF_CHANGE: 'pca',
    SeriesObservationUnit.CONTINUOUSLY_COMPOUNDED_RATE_OF_CHANGE: 'cch',
    SeriesObservationUnit.CONTINUOUSLY_COMPOUNDED_ANNUAL_RATE_OF_CHANGE: 'cca',
    SeriesObservationUnit.NATURAL_LOG: 'log',

    SeriesObservationFrequency.DAILY: 'd',
    SeriesObservationFrequency.WEEKLY: 'w',
    SeriesObservationFrequency.BIWEEKLY: 'bw',
    SeriesObservationFrequency.MONTHLY: 'm',
    SeriesObservationFrequency.QUARTERLY: 'q',
    SeriesObservationFrequency.SEMIANNUAL: 'sa',
    SeriesObservationFrequency.ANNUAL: 'a',
    SeriesObservationFrequency.WEEKLY_ENDING_FRIDAY: 'wef',
    SeriesObservationFrequency.WEEKLY_ENDING_THURSDAY: 'weth',
    SeriesObservationFrequency.WEEKLY_ENDING_WEDNESDAY: 'wew',
    SeriesObservationFrequency.WEEKLY_ENDING_TUESDAY: 'wetu',
    SeriesObservationFrequency.WEEKLY_ENDING_MONDAY: 'wem',
    SeriesObservationFrequency.WEEKLY_ENDING_SUNDAY: 'wesu',
    SeriesObservationFrequency.WEEKLY_ENDING_SATURDAY: 'wesa',
    SeriesObservationFrequency.BIWEEKLY_ENDING_WEDNESDAY: 'bwew',
    SeriesObservationFrequency.BIWEEKLY_ENDING_MONDAY: 'bwem',

    SeriesObservationAggregationMethod.AVERAGE: 'avg',
    SeriesObservationAggregationMethod.SUM: 'sum',
    SeriesObservationAggregationMethod.END_OF_PERIOD: 'eop',

    SeriesObservationOutputType.REAL_TIME_PERIOD: '1',
    SeriesObservationOutputType.VINTAGE_DATE_ALL_OBSERVATIONS: '2',
    SeriesObservationOutputType.VINTAGE_DATE_NEW_AND_REVISED_ONLY: '3',
    SeriesObservationOutputType.INITIAL_RELEASE_ONLY: '4',
}


def is_sentinel(value: Enum) -> bool:
    """True for NONE members, which suppress a parameter entirely."""
    return value.name == 'NONE'


def encode(value: Enum) -> str:
    """
    Encode an enum member to its FRED wire token.

    Falls back to the member's symbolic name when the table has no entry.

    Example:
        >>> encode(SortOrder.DESCENDING)
        'desc'
        >>> encode(TagGroupId.NONE)
        'NONE'
    """
    return WIRE_CODES.get(value, value.name)


def decode(enum_type: Type[E], wire: str) -> E:
    """
    Decode a FRED wire token back to a member of enum_type.

    Matching is case-insensitive against encode() of every member.

    Args:
        enum_type: Target enum class (e.g., TagGroupId)
        wire: Wire token as received from the server (e.g., 'geot')

    Returns:
        The matching enum member

    Raises:
        UnknownEnumValue: If no member encodes to the given token

    Example:
        >>> decode(TagGroupId, 'GEOT')
        <TagGroupId.GEOGRAPHY_TYPE: 'geography_type'>
    """
    if wire is not None:
        needle = wire.casefold()
        for member in enum_type:
            if encode(member).casefold() == needle:
                return member
    raise UnknownEnumValue(enum_type, wire)


def decode_response(enum_type: Type[E], wire: str) -> E:
    """
    Decode a wire token received from the server.

    Like decode(), but NONE sentinels never match: they only exist to omit
    request parameters, so a server value of 'none' is unknown.

    Raises:
        UnknownEnumValue: If no non-sentinel member encodes to the token
    """
    member = decode(enum_type, wire)
    if is_sentinel(member):
        raise UnknownEnumValue(enum_type, wire)
    return member


class WireCodes:
    """
    Helper class for discovering the wire vocabulary of FRED enums.

    All methods read the static WIRE_CODES table and return copies, so
    callers cannot alter the mapping by accident.

    Example:
        >>> WireCodes.list_available(SortOrder)
        {'ASCENDING': 'asc', 'DESCENDING': 'desc'}

        >>> WireCodes.is_valid(TagGroupId, 'geo')
        True
    """

    @staticmethod
    def list_available(enum_type: Type[Enum]) -> Dict[str, str]:
        """
        List member names and wire tokens of an enum, sentinels excluded.

        Args:
            enum_type: Enum class to describe

        Returns:
            Dictionary mapping member names to wire tokens
        """
        return {
            member.name: encode(member)
            for member in enum_type
            if not is_sentinel(member)
        }

    @staticmethod
    def get_description(value: Enum) -> str:
        """Wire token for a single member (same as encode())."""
        return encode(value)

    @staticmethod
    def is_valid(enum_type: Type[Enum], wire: str) -> bool:
        """
        Check whether a wire token belongs to an enum's vocabulary.

        Example:
            >>> WireCodes.is_valid(SortOrder, 'DESC')
            True
            >>> WireCodes.is_valid(SortOrder, 'down')
            False
        """
        try:
            decode(enum_type, wire)
        except UnknownEnumValue:
            return False
        return True
