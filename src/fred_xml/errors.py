"""
Exception hierarchy for fred-xml.

Every failure raised by the client derives from FredError so callers can
catch the whole family at once, while the subclasses keep the failure kinds
apart:

- TransportError: the HTTP round trip failed (network, timeout, non-2xx)
- MalformedResponse: the payload is not XML or lacks a required value
- UnknownEnumValue: the server sent a wire code outside the known vocabulary
- InvalidParameter: the caller combined parameters the API rejects
- ConfigurationError: no API key could be resolved
"""

from typing import Optional


class FredError(Exception):
    """Base class for all fred-xml errors."""


class TransportError(FredError):
    """
    HTTP request failed before a usable response was received.

    Attributes:
        url: Requested URL with the API key masked
        status_code: HTTP status code, or None for connection failures
        api_message: Error message reported by FRED in its XML error body
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        api_message: Optional[str] = None
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.api_message = api_message


class MalformedResponse(FredError):
    """Response XML could not be parsed or mapped onto a record."""


class UnknownEnumValue(FredError):
    """
    Wire string does not match any member of the target enum.

    Not a ValueError on purpose: pydantic converts ValueError raised inside
    validators into ValidationError, and this failure must reach the caller
    under its own type.
    """

    def __init__(self, enum_type: type, wire: str):
        super().__init__(
            f"No {enum_type.__name__} member matches wire value '{wire}'"
        )
        self.enum_type = enum_type
        self.wire = wire


class InvalidParameter(FredError, ValueError):
    """Parameter combination is invalid and was rejected before any request."""


class ConfigurationError(FredError, ValueError):
    """Client could not be configured (e.g. FRED_API_KEY is missing)."""
