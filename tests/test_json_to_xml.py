"""
Tests for the JSON to XML conversion task.

Run with: pytest tests/test_json_to_xml.py -v
"""

import json

import pytest
from lxml import etree

from xml_tasks import JsonToXmlInput, convert_json_to_xml
from xml_tasks.convert import encode_name


def convert(payload, root="root"):
    return convert_json_to_xml(JsonToXmlInput(json=payload, xml_root_element_name=root))


class TestConvertJsonToXml:
    """Tests for convert_json_to_xml."""

    def test_simple_object(self):
        assert convert('{"a":"b"}') == "<root><a>b</a></root>"

    def test_no_xml_declaration(self):
        assert not convert('{"a":"b"}').startswith("<?xml")

    def test_nested_objects(self):
        output = convert('{"order": {"id": 7, "customer": {"name": "ACME"}}}', root="message")
        root = etree.fromstring(output)
        assert root.tag == "message"
        assert root.findtext("order/id") == "7"
        assert root.findtext("order/customer/name") == "ACME"

    def test_arrays_repeat_elements(self):
        output = convert('{"item": [1, 2, 3]}')
        root = etree.fromstring(output)
        assert [item.text for item in root.findall("item")] == ["1", "2", "3"]

    def test_attributes_and_text(self):
        output = convert('{"price": {"@currency": "EUR", "#text": "9.99"}}')
        price = etree.fromstring(output).find("price")
        assert price.get("currency") == "EUR"
        assert price.text == "9.99"

    def test_booleans_and_null(self):
        root = etree.fromstring(convert('{"active": true, "deleted": false, "note": null}'))
        assert root.findtext("active") == "true"
        assert root.findtext("deleted") == "false"
        note = root.find("note")
        assert note is not None
        assert note.text is None
        assert len(note) == 0

    def test_scalar_fields_round_trip(self):
        payload = {"name": "Ada", "age": 36, "score": 9.5, "admin": False}
        root = etree.fromstring(convert(json.dumps(payload)))
        recovered = {child.tag: child.text for child in root}
        assert recovered == {"name": "Ada", "age": "36", "score": "9.5", "admin": "false"}

    @pytest.mark.parametrize("payload", ['"hello"', "42", "true", "null"])
    def test_top_level_scalar_is_rejected(self, payload):
        with pytest.raises(ValueError, match="JSON object"):
            convert(payload)

    def test_top_level_array_is_rejected(self):
        with pytest.raises(ValueError, match="root"):
            convert("[1, 2]")

    def test_malformed_json_propagates(self):
        with pytest.raises(json.JSONDecodeError):
            convert('{"a": ')


class TestNameEncoding:
    """Tests for names that are not valid XML names."""

    @pytest.mark.parametrize("name, expected", [
        ("order", "order"),
        ("a b", "a_x0020_b"),
        ("1a", "_x0031_a"),
        ("-x", "_x002D_x"),
        ("x-1.2", "x-1.2"),
        ("$id", "_x0024_id"),
        ("_x0041_", "_x005F_x0041_"),
        ("hyvä", "hyvä"),
    ])
    def test_encode_name(self, name, expected):
        assert encode_name(name) == expected

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValueError):
            encode_name("")

    def test_invalid_keys_produce_well_formed_xml(self):
        output = convert('{"1a": 1, "a b": {"@x y": "v"}}')
        root = etree.fromstring(output)
        assert root.findtext("_x0031_a") == "1"
        assert root.find("a_x0020_b").get("x_x0020_y") == "v"

    def test_root_name_is_encoded(self):
        root = etree.fromstring(convert('{"a": 1}', root="my root"))
        assert root.tag == "my_x0020_root"


class TestNestedArrays:
    """Tests for arrays nested directly in arrays."""

    def test_inner_array_becomes_wrapping_element(self):
        root = etree.fromstring(convert('{"row": [[1, 2], [3]]}'))
        rows = root.findall("row")
        assert len(rows) == 2
        assert [cell.text for cell in rows[0].findall("row")] == ["1", "2"]
        assert [cell.text for cell in rows[1].findall("row")] == ["3"]

    def test_mixed_array(self):
        root = etree.fromstring(convert('{"v": [1, [2], {"k": 3}]}'))
        values = root.findall("v")
        assert values[0].text == "1"
        assert values[1].findtext("v") == "2"
        assert values[2].findtext("k") == "3"
