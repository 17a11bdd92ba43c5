"""
User-facing API of fred-xml.

FredClient exposes one method per FRED endpoint.
"""

from fred_xml.api.client import FredClient

__all__ = [
    'FredClient'
]
