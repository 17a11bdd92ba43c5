"""
Domain records deserialized from FRED XML responses.

Design Pattern: one frozen Pydantic model per XML element type.
- Field names are the wire names (snake_case), so attributes map 1:1
- Unknown attributes are ignored
- Derived values (timestamps, tag group) are parsed eagerly, so a malformed
  wire value fails during deserialization instead of on first access

Each record declares how it is found in XML; fred_xml.parsers.xml_parser
reads:
- xml_tag: element name of the record
- xml_text_field: field filled from the element's text content
- nested_types(): container element name -> record type of its children
"""

from datetime import date, datetime
from typing import Any, ClassVar, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fred_xml.types import TagGroupId, decode_response
from fred_xml.validators import parse_fred_timestamp, parse_observation_value, parse_wire_bool


class XmlRecord(BaseModel):
    """Base class for records built from a single XML element."""

    xml_tag: ClassVar[str] = ''
    xml_text_field: ClassVar[Optional[str]] = None

    model_config = ConfigDict(frozen=True, extra='ignore')

    @classmethod
    def nested_types(cls) -> Dict[str, Type['XmlRecord']]:
        """Container element names whose children are parsed as records."""
        return {}


class Category(XmlRecord):
    """
    A node of the FRED category tree.

    The hierarchy is only referenced through parent_id; the API returns flat
    lists of children on demand and no tree is built locally.

    Example:
        >>> Category(id=125, parent_id=13, name='Trade Balance')
        Category(id=125, parent_id=13, name='Trade Balance', notes=None)
    """

    xml_tag: ClassVar[str] = 'category'

    id: int
    parent_id: int
    name: str
    notes: Optional[str] = None


class Series(XmlRecord):
    """
    An economic data series.

    last_updated keeps the raw wire string ('2013-07-31 09:26:16-05');
    last_updated_at is the parsed, timezone-aware timestamp.
    """

    xml_tag: ClassVar[str] = 'series'

    id: str = Field(..., description="Series id, e.g. 'GNPCA'")
    realtime_start: date
    realtime_end: date
    title: str
    observation_start: date
    observation_end: date
    frequency: str
    frequency_short: str
    units: str
    units_short: str
    seasonal_adjustment: str
    seasonal_adjustment_short: str
    last_updated: str
    last_updated_at: datetime
    popularity: int
    group_popularity: Optional[int] = None
    notes: Optional[str] = None

    @model_validator(mode='before')
    @classmethod
    def parse_last_updated(cls, data: Any) -> Any:
        if isinstance(data, dict) and 'last_updated_at' not in data:
            raw = data.get('last_updated')
            if raw is not None:
                data = dict(data)
                data['last_updated_at'] = parse_fred_timestamp(raw)
        return data


class Release(XmlRecord):
    """A release of economic data (e.g. 'Gross Domestic Product')."""

    xml_tag: ClassVar[str] = 'release'

    id: int
    realtime_start: date
    realtime_end: date
    name: str
    press_release: bool
    link: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('press_release', mode='before')
    @classmethod
    def parse_press_release(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_wire_bool(v)
        return v


class ReleaseDate(XmlRecord):
    """
    A date on which a release was (or will be) published.

    The date itself is the element's text:
    <release_date release_id="9" release_name="Advance Retail Sales">2024-01-17</release_date>
    """

    xml_tag: ClassVar[str] = 'release_date'
    xml_text_field: ClassVar[Optional[str]] = 'date'

    release_id: int
    release_name: Optional[str] = None
    date: date


class Source(XmlRecord):
    """A source of economic data (e.g. 'Board of Governors')."""

    xml_tag: ClassVar[str] = 'source'

    id: int
    realtime_start: date
    realtime_end: date
    name: str
    link: Optional[str] = None
    notes: Optional[str] = None


class Tag(XmlRecord):
    """
    A FRED tag attached to series.

    group_id keeps the raw wire code ('geot'); group is the decoded
    TagGroupId. An unknown group code raises UnknownEnumValue.
    """

    xml_tag: ClassVar[str] = 'tag'

    name: str
    group_id: str
    group: TagGroupId
    notes: Optional[str] = None
    created: str
    created_at: datetime
    popularity: int
    series_count: int

    @model_validator(mode='before')
    @classmethod
    def parse_derived_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if 'group' not in data and data.get('group_id') is not None:
            data['group'] = decode_response(TagGroupId, data['group_id'])
        if 'created_at' not in data and data.get('created') is not None:
            data['created_at'] = parse_fred_timestamp(data['created'])
        return data


class Observation(XmlRecord):
    """
    A single observation of a series.

    FRED marks missing values with '.'; they are exposed as value=None.
    """

    xml_tag: ClassVar[str] = 'observation'

    realtime_start: date
    realtime_end: date
    value: Optional[float]
    date: date

    @field_validator('value', mode='before')
    @classmethod
    def parse_value(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_observation_value(v)
        return v

    @property
    def is_missing(self) -> bool:
        return self.value is None


class VintageDate(XmlRecord):
    """A date on which a series was revised: <vintage_date>1958-12-21</vintage_date>"""

    xml_tag: ClassVar[str] = 'vintage_date'
    xml_text_field: ClassVar[Optional[str]] = 'date'

    date: date


class Element(XmlRecord):
    """
    A line of a release table.

    Elements form a tree: each element exclusively owns its children, which
    are listed in a nested <children> container. There is no back-reference
    besides the parent_id value.
    """

    xml_tag: ClassVar[str] = 'element'

    element_id: int
    release_id: int
    series_id: Optional[str] = None
    parent_id: Optional[int] = None
    line: Optional[str] = None
    type: str
    name: str
    level: int
    children: List['Element'] = Field(default_factory=list)

    def walk(self):
        """Yield this element and all descendants, depth-first, in order."""
        yield self
        for child in self.children:
            yield from child.walk()

    @classmethod
    def nested_types(cls) -> Dict[str, Type[XmlRecord]]:
        return {'children': Element}


Element.model_rebuild()
