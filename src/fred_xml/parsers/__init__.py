"""
XML parsing for FRED responses.

- Records live in attributes, leaf child elements or node text
- Single-record responses are wrapped in a plural root element
- List responses may mix record elements with other nodes (element_filter)
"""

from .xml_parser import (
    load_xml,
    deserialize_element,
    parse_children,
    parse_single,
    parse_list
)

__all__ = [
    'load_xml',
    'deserialize_element',
    'parse_children',
    'parse_single',
    'parse_list',
]
