"""
Query building for FRED requests.

Turns parameter models into the flat, ordered key/value mapping sent as the
query string. The builder is pure: it never reads the clock, never injects
defaults the caller did not ask for, and never adds the API key (the
transport owns that). Identical parameters always produce identical queries.

Wire formats:
- calendar dates: YYYY-MM-DD
- the series/updates time window: YYYYMMDDHHmm
- booleans: lowercase 'true' / 'false'
- tag name lists: joined with ';'
- vintage date lists: joined with ','
"""

from datetime import date, datetime
from enum import Enum
from typing import Dict, Iterable, List, Optional, Protocol

from fred_xml.errors import InvalidParameter
from fred_xml.types import encode, is_sentinel


def format_date(value: date) -> str:
    """Format a calendar date as YYYY-MM-DD."""
    return value.strftime('%Y-%m-%d')


def format_time(value: datetime) -> str:
    """Format a point in time as YYYYMMDDHHmm (zero-padded, no separators)."""
    return value.strftime('%Y%m%d%H%M')


def format_bool(value: bool) -> str:
    return 'true' if value else 'false'


def join_semicolon(values: List[str]) -> str:
    """
    Join tag names with ';'.

    Raises:
        InvalidParameter: If the list is empty (it would yield an empty token)

    Example:
        >>> join_semicolon(['a', 'b', 'c'])
        'a;b;c'
    """
    if not values:
        raise InvalidParameter("Cannot join an empty list of tag names")
    return ';'.join(values)


def join_comma_dates(values: List[date]) -> str:
    """
    Join calendar dates with ',' using the YYYY-MM-DD format.

    Raises:
        InvalidParameter: If the list is empty

    Example:
        >>> join_comma_dates([date(2020, 1, 1), date(2021, 6, 30)])
        '2020-01-01,2021-06-30'
    """
    if not values:
        raise InvalidParameter("Cannot join an empty list of dates")
    return ','.join(format_date(v) for v in values)


class QueryBuilder:
    """
    Accumulates query parameters in insertion order.

    Each add_* method returns the builder so calls can be chained; build()
    returns a fresh dict.

    Example:
        >>> query = (
        ...     QueryBuilder()
        ...     .add('category_id', 125)
        ...     .add_enum('sort_order', SortOrder.DESCENDING)
        ...     .add_tags('tag_names', ['usa', 'gdp'])
        ...     .build()
        ... )
        >>> query
        {'category_id': '125', 'sort_order': 'desc', 'tag_names': 'usa;gdp'}
    """

    def __init__(self):
        self._items: Dict[str, str] = {}

    def add(self, key: str, value) -> 'QueryBuilder':
        """Add a required value; ints and strings are sent as their str()."""
        if value is None:
            raise InvalidParameter(f"Parameter '{key}' is required")
        if isinstance(value, bool):
            self._items[key] = format_bool(value)
        elif isinstance(value, Enum):
            self._items[key] = encode(value)
        else:
            self._items[key] = str(value)
        return self

    def add_optional(self, key: str, value) -> 'QueryBuilder':
        """Add a value only when it is neither None nor an empty string."""
        if value is None or value == '':
            return self
        return self.add(key, value)

    def add_enum(self, key: str, value: Enum) -> 'QueryBuilder':
        """Add an enum through its wire token; NONE sentinels are skipped."""
        if is_sentinel(value):
            return self
        self._items[key] = encode(value)
        return self

    def add_date(self, key: str, value: Optional[date]) -> 'QueryBuilder':
        if value is not None:
            self._items[key] = format_date(value)
        return self

    def add_time(self, key: str, value: Optional[datetime]) -> 'QueryBuilder':
        if value is not None:
            self._items[key] = format_time(value)
        return self

    def add_tags(self, key: str, tags: Optional[List[str]]) -> 'QueryBuilder':
        """Add an optional tag list; None and [] are skipped."""
        if tags:
            self._items[key] = join_semicolon(tags)
        return self

    def add_required_tags(self, key: str, tags: Optional[List[str]]) -> 'QueryBuilder':
        if not tags:
            raise InvalidParameter(f"Parameter '{key}' requires at least one tag name")
        self._items[key] = join_semicolon(tags)
        return self

    def add_dates(self, key: str, dates: Optional[List[date]]) -> 'QueryBuilder':
        if dates:
            self._items[key] = join_comma_dates(dates)
        return self

    def add_filter(
        self,
        variable: Enum,
        value: Optional[str]
    ) -> 'QueryBuilder':
        """
        Add the filter_variable / filter_value pair.

        Both are sent together or not at all.

        Raises:
            InvalidParameter: If only one half of the pair is set
        """
        has_variable = not is_sentinel(variable)
        has_value = bool(value)

        if has_variable != has_value:
            raise InvalidParameter(
                "filter_variable and filter_value must be supplied together "
                f"(got filter_variable={variable.name}, filter_value={value!r})"
            )

        if has_variable:
            self._items['filter_variable'] = encode(variable)
            self._items['filter_value'] = value
        return self

    def add_realtime(self, parameters: 'HasRealtime') -> 'QueryBuilder':
        """Add realtime_start / realtime_end when the caller supplied them."""
        check_range(
            'realtime_start', parameters.realtime_start,
            'realtime_end', parameters.realtime_end
        )
        self.add_date('realtime_start', parameters.realtime_start)
        self.add_date('realtime_end', parameters.realtime_end)
        return self

    def add_paging(self, parameters: 'HasPaging') -> 'QueryBuilder':
        self.add('limit', parameters.limit)
        self.add('offset', parameters.offset)
        return self

    def build(self) -> Dict[str, str]:
        return dict(self._items)


class HasRealtime(Protocol):
    realtime_start: Optional[date]
    realtime_end: Optional[date]


class HasPaging(Protocol):
    limit: int
    offset: int


class QueryParameters(Protocol):
    def to_query(self) -> Dict[str, str]:
        ...


def check_range(
    start_key: str,
    start: Optional[date],
    end_key: str,
    end: Optional[date]
) -> None:
    """
    Reject a date range whose start lies after its end.

    Raises:
        InvalidParameter: If both bounds are set and start > end
    """
    if start is not None and end is not None and start > end:
        raise InvalidParameter(
            f"{start_key} ({start}) must not be after {end_key} ({end})"
        )


def require_tags_for_exclusion(
    tags: Optional[Iterable[str]],
    exclude_tags: Optional[Iterable[str]]
) -> None:
    """
    Reject exclude_tag_names without tag_names.

    Raises:
        InvalidParameter: If exclude_tags is non-empty while tags is empty
    """
    if exclude_tags and not tags:
        raise InvalidParameter(
            "exclude_tags requires tags to be set as well"
        )


def build_query(parameters: QueryParameters) -> Dict[str, str]:
    """
    Build the ordered query mapping for a parameter model.

    Args:
        parameters: Any parameter model from fred_xml.models.requests

    Returns:
        Ordered dict of query keys to wire strings (API key not included)

    Raises:
        InvalidParameter: If the parameter combination is invalid
    """
    return parameters.to_query()
