"""
Transport layer for fred-xml.

- HttpTransport: blocking HTTP GET against the FRED web service (requests)
"""

from fred_xml.services.transport import HttpTransport, mask_api_key, parse_error_message

__all__ = [
    'HttpTransport',
    'mask_api_key',
    'parse_error_message'
]
