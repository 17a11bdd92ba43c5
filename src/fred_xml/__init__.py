"""
fred-xml: typed client for the FRED economic data web service.

Main package exports for user-facing API.
"""

from fred_xml.api import FredClient
from fred_xml.errors import (
    FredError,
    TransportError,
    MalformedResponse,
    UnknownEnumValue,
    InvalidParameter,
    ConfigurationError,
)
from fred_xml.models import (
    Category,
    Series,
    Release,
    ReleaseDate,
    Source,
    Tag,
    Observation,
    VintageDate,
    Element,
    CategoryParameters,
    ObservationParameters,
    SeriesParameters,
    SeriesSearchParameters,
)

__all__ = [
    'FredClient',
    # Errors
    'FredError',
    'TransportError',
    'MalformedResponse',
    'UnknownEnumValue',
    'InvalidParameter',
    'ConfigurationError',
    # Records
    'Category',
    'Series',
    'Release',
    'ReleaseDate',
    'Source',
    'Tag',
    'Observation',
    'VintageDate',
    'Element',
    # Most used parameters (all live in fred_xml.models)
    'CategoryParameters',
    'ObservationParameters',
    'SeriesParameters',
    'SeriesSearchParameters',
]
