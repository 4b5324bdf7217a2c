"""
JSON to XML Conversion
======================

Convert a JSON object into an XML document wrapped in a named root element.

The mapping is the fixed xmltodict one: object keys become elements, keys
starting with '@' become attributes, '#text' becomes text content, arrays
repeat their element, scalars become text and null becomes an empty element.

Names that are not valid XML names are encoded character by character as
_xHHHH_ (for example "1st item" becomes "_x0031_st_x0020_item"). An array
nested directly in another array becomes one element of the same name whose
children repeat that name.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

import xmltodict

logger = logging.getLogger(__name__)

TEXT_KEY = "#text"
ATTRIBUTE_PREFIX = "@"

_NAME_START_RANGES = (
    (0x3A, 0x3A), (0x41, 0x5A), (0x5F, 0x5F), (0x61, 0x7A),
    (0xC0, 0xD6), (0xD8, 0xF6), (0xF8, 0x2FF), (0x370, 0x37D),
    (0x37F, 0x1FFF), (0x200C, 0x200D), (0x2070, 0x218F), (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF), (0xF900, 0xFDCF), (0xFDF0, 0xFFFD), (0x10000, 0xEFFFF),
)
_NAME_EXTRA_RANGES = (
    (0x2D, 0x2E), (0x30, 0x39), (0xB7, 0xB7), (0x300, 0x36F), (0x203F, 0x2040),
)
# an underscore that would read back as an escape is escaped itself
_ESCAPE_LOOKALIKE = re.compile(r"_x(?:[0-9A-Fa-f]{4}|[0-9A-Fa-f]{8})_")


@dataclass
class JsonToXmlInput:
    """JSON text and the name of the XML root element that wraps it."""
    json: str
    xml_root_element_name: str


def _in_ranges(code: int, ranges) -> bool:
    return any(low <= code <= high for low, high in ranges)


def _is_name_start_char(char: str) -> bool:
    return _in_ranges(ord(char), _NAME_START_RANGES)


def _is_name_char(char: str) -> bool:
    return _is_name_start_char(char) or _in_ranges(ord(char), _NAME_EXTRA_RANGES)


def encode_name(name: str) -> str:
    """
    Encode a string as a valid XML name.

    Every character that may not appear at its position is replaced by
    _xHHHH_ with its code point in upper-case hex (eight digits outside the
    Basic Multilingual Plane). Valid names come back unchanged.

    Raises:
        ValueError: If the name is empty
    """
    if not name:
        raise ValueError("An empty string cannot be used as an XML name")

    encoded = []
    for position, char in enumerate(name):
        valid = _is_name_start_char(char) if position == 0 else _is_name_char(char)
        if char == "_" and _ESCAPE_LOOKALIKE.match(name, position):
            valid = False
        if valid:
            encoded.append(char)
        elif ord(char) > 0xFFFF:
            encoded.append(f"_x{ord(char):08X}_")
        else:
            encoded.append(f"_x{ord(char):04X}_")
    return "".join(encoded)


def _encode_key(key: str) -> str:
    if key == TEXT_KEY:
        return key
    if key.startswith(ATTRIBUTE_PREFIX):
        return ATTRIBUTE_PREFIX + encode_name(key[len(ATTRIBUTE_PREFIX):])
    return encode_name(key)


def _prepare(value: Any, name: str) -> Any:
    """Encode object keys and expand nested arrays for the element called name."""
    if isinstance(value, dict):
        prepared = {}
        for key, member in value.items():
            encoded = _encode_key(key)
            prepared[encoded] = _prepare(member, encoded)
        return prepared
    if isinstance(value, list):
        return [
            {name: _prepare(item, name)} if isinstance(item, list) else _prepare(item, name)
            for item in value
        ]
    return value


def convert_json_to_xml(convert_input: JsonToXmlInput) -> str:
    """
    Convert JSON string to XML string.

    Args:
        convert_input: JSON object text and root element name

    Returns:
        XML text of the root element, without an XML declaration

    Raises:
        json.JSONDecodeError: If the JSON is malformed
        ValueError: If the top-level JSON value is not an object, or a name is empty
    """
    data = json.loads(convert_input.json)
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a JSON object at the top level, got {type(data).__name__}: "
            f"only an object maps onto the '{convert_input.xml_root_element_name}' root element"
        )

    root = encode_name(convert_input.xml_root_element_name)
    logger.info(f"Converting JSON to XML with root element '{root}'")
    return xmltodict.unparse(
        {root: _prepare(data, root)},
        full_document=False,
        short_empty_elements=True,
    )
