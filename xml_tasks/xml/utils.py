"""
XML Utility Functions
=====================

Parsing and serialization helpers shared by the query, transform and
validation tasks. All functions work with lxml trees.
"""

from typing import Any
import logging

from lxml import etree

logger = logging.getLogger(__name__)


def build_parser(preserve_whitespace: bool = True) -> etree.XMLParser:
    """
    Create a fresh parser for in-memory XML text.

    The parser never validates against a DTD or schema, so documents that
    violate their schema still build. The encoding is fixed to UTF-8 because
    the text handed to it is always re-encoded as UTF-8, whatever the XML
    declaration says.

    Args:
        preserve_whitespace: Keep whitespace-only text nodes

    Returns:
        New lxml XMLParser
    """
    return etree.XMLParser(
        encoding="utf-8",
        remove_blank_text=not preserve_whitespace,
        dtd_validation=False,
        load_dtd=False,
        no_network=True,
    )


def parse_xml_text(xml: str, preserve_whitespace: bool = True) -> etree._ElementTree:
    """
    Parse XML text into an lxml ElementTree.

    Args:
        xml: XML document as text (an encoding declaration is allowed)
        preserve_whitespace: Keep whitespace-only text nodes

    Returns:
        Parsed document

    Raises:
        etree.XMLSyntaxError: If the text is not well-formed XML
    """
    parser = build_parser(preserve_whitespace=preserve_whitespace)
    root = etree.fromstring(xml.encode("utf-8"), parser)
    return root.getroottree()


def node_to_string(node: Any) -> str:
    """
    Serialize an element (or tree) to text without its tail.

    Args:
        node: lxml Element or ElementTree

    Returns:
        Serialized XML
    """
    if isinstance(node, etree._ElementTree):
        node = node.getroot()
    return etree.tostring(node, encoding="unicode", with_tail=False)


def normalize_newlines(text: str, newline: str) -> str:
    """Replace every LF in text with the given newline sequence."""
    if newline == "\n":
        return text
    return text.replace("\n", newline)
