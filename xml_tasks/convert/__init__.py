"""
Conversion Tasks
================

Components:
- convert_json_to_xml: Convert JSON text into XML under a named root element
- encode_name: Encode arbitrary JSON keys as valid XML names
- JsonToXmlInput: Call input
"""

from xml_tasks.convert.json_xml import (
    JsonToXmlInput,
    convert_json_to_xml,
    encode_name,
)

__all__ = [
    "JsonToXmlInput",
    "convert_json_to_xml",
    "encode_name",
]
