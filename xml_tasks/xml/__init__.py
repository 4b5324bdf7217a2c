"""
XML Processing Utilities
========================

Parsing and serialization helpers shared by all tasks.
"""

from xml_tasks.xml.utils import (
    build_parser,
    parse_xml_text,
    node_to_string,
    normalize_newlines,
)

__all__ = [
    "build_parser",
    "parse_xml_text",
    "node_to_string",
    "normalize_newlines",
]
