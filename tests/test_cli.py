"""
Tests for the xml-tasks command line.

Run with: pytest tests/test_cli.py -v
"""

import json

import pytest

from xml_tasks.cli import EXIT_ERROR, EXIT_INVALID, EXIT_OK, main


@pytest.fixture
def write(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


class TestQueryCommands:
    """Tests for the xpath and xpath-single commands."""

    def test_xpath_prints_json(self, write, books_xml, capsys):
        xml = write("books.xml", books_xml)
        assert main(["xpath", xml, "//book/@id"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == ["b1", "b2"]

    def test_xpath_single(self, write, books_xml, capsys):
        xml = write("books.xml", books_xml)
        assert main(["xpath-single", xml, "//title"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {"title": "Dune"}

    def test_namespaces(self, write, namespaced_xml, capsys):
        xml = write("invoice.xml", namespaced_xml)
        code = main([
            "xpath", xml, "sum(//inv:line/amount)",
            "--ns", "inv=urn:example:invoice",
            "--ns", "=urn:example:default",
        ])
        assert code == EXIT_OK
        assert json.loads(capsys.readouterr().out) == [42]

    def test_throw_on_empty(self, write, books_xml, capsys):
        xml = write("books.xml", books_xml)
        assert main(["xpath", xml, "//magazine", "--throw-on-empty"]) == EXIT_ERROR
        assert "//magazine" in capsys.readouterr().err

    def test_config_defaults(self, write, books_xml, capsys):
        xml = write("books.xml", books_xml)
        config = write("config.json", json.dumps({"query": {"throw_error_on_empty_results": True}}))
        assert main(["--config", config, "xpath", xml, "//magazine"]) == EXIT_ERROR

    def test_invalid_config_is_reported(self, write, books_xml, capsys):
        xml = write("books.xml", books_xml)
        config = write("config.json", json.dumps({"query": {"xpath_version": "4.0"}}))
        assert main(["--config", config, "xpath", xml, "//book"]) == EXIT_ERROR
        assert "xpath_version" in capsys.readouterr().err


class TestOtherCommands:
    """Tests for transform, validate and json-to-xml."""

    def test_transform_to_file(self, write, tmp_path, identity_xslt):
        xml = write("in.xml", "<a><b>1</b></a>")
        xslt = write("identity.xsl", identity_xslt)
        output = tmp_path / "out" / "result.xml"
        assert main(["transform", xml, xslt, "-o", str(output)]) == EXIT_OK
        assert "<a><b>1</b></a>" in output.read_text(encoding="utf-8")

    def test_validate_valid(self, write, valid_order, order_xsd, capsys):
        xml = write("order.xml", valid_order)
        xsd = write("order.xsd", order_xsd)
        assert main(["validate", xml, xsd]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {"is_valid": True, "error": None}

    def test_validate_invalid(self, write, invalid_order, order_xsd, capsys):
        xml = write("order.xml", invalid_order)
        xsd = write("order.xsd", order_xsd)
        assert main(["validate", xml, xsd]) == EXIT_INVALID
        assert json.loads(capsys.readouterr().out)["is_valid"] is False

    def test_validate_strict(self, write, invalid_order, order_xsd):
        xml = write("order.xml", invalid_order)
        xsd = write("order.xsd", order_xsd)
        assert main(["validate", xml, xsd, "--strict"]) == EXIT_ERROR

    def test_json_to_xml(self, write, capsys):
        payload = write("data.json", '{"a": "b"}')
        assert main(["json-to-xml", payload, "--root", "root"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "<root><a>b</a></root>"

    def test_bad_parameter_syntax(self, write, identity_xslt):
        xml = write("in.xml", "<a/>")
        xslt = write("identity.xsl", identity_xslt)
        with pytest.raises(SystemExit):
            main(["transform", xml, xslt, "-p", "novalue"])
