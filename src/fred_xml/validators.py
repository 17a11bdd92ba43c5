"""
Reusable field validators and wire value parsers.

The validate_* functions are designed for Pydantic @field_validator use on
the parameter models; they raise ValueError, which Pydantic reports as a
ValidationError on construction. The parse_* functions convert raw FRED wire
strings into Python values while records are deserialized.
"""

import math
import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional


MISSING_VALUE = '.'

_TIMESTAMP_PATTERN = re.compile(
    r'^(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})'
    r'(?P<sign>[+-])(?P<hours>\d{2})(?::?(?P<minutes>\d{2}))?$'
)


def validate_series_id(series_id: str) -> str:
    """
    Validate a FRED series id.

    Series ids are opaque upper-case tokens such as 'GNPCA' or 'DGS10'; they
    are sent as-is, so the only requirement is a non-blank value without
    surrounding whitespace.

    Raises:
        ValueError: If the id is blank or padded with whitespace

    Example:
        >>> validate_series_id('GNPCA')
        'GNPCA'
        >>> validate_series_id(' ')  # Raises ValueError
    """
    if not series_id or not series_id.strip():
        raise ValueError("Series id must not be blank. Example: 'GNPCA'")
    if series_id != series_id.strip():
        raise ValueError(
            f"Series id must not contain surrounding whitespace, got: '{series_id}'"
        )
    return series_id


def validate_tag_names(tags: Optional[List[str]]) -> Optional[List[str]]:
    """
    Validate a list of FRED tag names.

    Tag names are joined with ';' on the wire, so a name containing ';'
    would silently split into two tags. Blank names would produce empty
    tokens. None and the empty list mean "no tags" and pass through.

    Raises:
        ValueError: Listing every offending tag name

    Example:
        >>> validate_tag_names(['usa', 'gdp'])
        ['usa', 'gdp']
        >>> validate_tag_names(['usa;gdp'])  # Raises ValueError
    """
    if not tags:
        return tags

    invalid = [t for t in tags if not t or not t.strip() or ';' in t]
    if invalid:
        raise ValueError(
            f"Invalid tag names: {invalid}\n"
            f"Tag names must be non-blank and must not contain ';'."
        )

    return tags


def parse_fred_timestamp(value: str) -> datetime:
    """
    Parse a FRED timestamp such as '2013-07-31 09:26:16-05'.

    FRED writes the UTC offset as bare hours ('-05'); '-0500' and '-05:00'
    are accepted too. The result is timezone-aware.

    Raises:
        ValueError: If the string does not follow the timestamp format

    Example:
        >>> parse_fred_timestamp('2013-07-31 09:26:16-05').isoformat()
        '2013-07-31T09:26:16-05:00'
    """
    match = _TIMESTAMP_PATTERN.match(value.strip()) if value else None
    if match is None:
        raise ValueError(
            f"Timestamp must look like 'YYYY-MM-DD HH:MM:SS-HH', got: '{value}'"
        )

    offset = timedelta(
        hours=int(match.group('hours')),
        minutes=int(match.group('minutes') or 0)
    )
    if match.group('sign') == '-':
        offset = -offset

    stamp = datetime.strptime(match.group('stamp'), '%Y-%m-%d %H:%M:%S')
    return stamp.replace(tzinfo=timezone(offset))


def parse_observation_value(value: Optional[str]) -> Optional[float]:
    """
    Parse an observation value, mapping FRED's '.' sentinel to None.

    Raises:
        ValueError: If the value is neither the sentinel nor a number

    Example:
        >>> parse_observation_value('1.5')
        1.5
        >>> parse_observation_value('.') is None
        True
    """
    if value is None:
        raise ValueError("Observation value is required")
    text = value.strip()
    if text == MISSING_VALUE:
        return None
    try:
        result = float(text)
    except ValueError as e:
        raise ValueError(f"Observation value is not numeric: '{value}'") from e
    if not math.isfinite(result):
        raise ValueError(f"Observation value is not a finite number: '{value}'")
    return result


def parse_wire_bool(value: str) -> bool:
    """
    Parse a FRED boolean literal.

    Only 'true' and 'false' (any case) are accepted; pydantic's lax
    coercion of 'yes', 'on', '1' and the like is bypassed.

    Raises:
        ValueError: For any other value

    Example:
        >>> parse_wire_bool('TRUE')
        True
    """
    text = value.strip().lower()
    if text == 'true':
        return True
    if text == 'false':
        return False
    raise ValueError(f"Boolean must be 'true' or 'false', got: '{value}'")
