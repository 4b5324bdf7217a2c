#!/usr/bin/env python3
"""
XML Tasks command line

Runs a single XML task over payload files and writes the result to stdout.
Query and validation results are printed as JSON.

Usage:
    xml-tasks xpath <xml_file> <expression> [--ns prefix=uri] [--xpath-version 3.0]
    xml-tasks xpath-single <xml_file> <expression> [--throw-on-empty]
    xml-tasks transform <xml_file> <xslt_file> [-p name=value] [-o output]
    xml-tasks validate <xml_file> <xsd_file> [<xsd_file> ...] [--strict]
    xml-tasks json-to-xml <json_file> --root <element>
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Tuple

from xml_tasks import __version__
from xml_tasks.config import TasksConfig, get_default_config, load_config
from xml_tasks.convert import JsonToXmlInput, convert_json_to_xml
from xml_tasks.query import (
    QueryInput,
    XmlNamespace,
    XPathVersion,
    xpath_query,
    xpath_query_single,
)
from xml_tasks.transform import TransformInput, XsltParameter, transform
from xml_tasks.validation import ValidationInput, validate

logger = logging.getLogger("xml_tasks.cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def split_pair(value: str) -> Tuple[str, str]:
    """Split a 'name=value' command line argument."""
    if "=" not in value:
        raise argparse.ArgumentTypeError(f"expected name=value, got {value!r}")
    name, _, rest = value.partition("=")
    return name, rest


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_output(text: str, output: Optional[Path]) -> None:
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the line endings chosen by the task
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        logger.info(f"Output written to: {output}")
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xml-tasks",
        description="XPath, XSLT, XSD and JSON-to-XML tasks over in-memory documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s xpath books.xml "//book/title" --ns bk=urn:books
  %(prog)s transform books.xml to-html.xsl -p title=Catalog -o books.html
  %(prog)s validate books.xml books.xsd --strict
  %(prog)s json-to-xml order.json --root order
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="JSON or YAML configuration file with default task options"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: from config, INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("xpath", "Evaluate an XPath expression and print every result item"),
        ("xpath-single", "Evaluate an XPath expression and print the first result item"),
    ):
        query = subparsers.add_parser(name, help=help_text)
        query.add_argument("xml_file", type=Path, help="XML document")
        query.add_argument("expression", help="XPath expression")
        query.add_argument(
            "--ns",
            action="append",
            type=split_pair,
            default=[],
            metavar="PREFIX=URI",
            help="Declare a namespace prefix (empty prefix sets the default namespace)"
        )
        query.add_argument(
            "--xpath-version",
            choices=[v.value for v in XPathVersion],
            default=None,
            help="XPath language version (default: from config, 3.0)"
        )
        query.add_argument(
            "--throw-on-empty",
            action="store_true",
            default=None,
            help="Fail when the expression matches nothing"
        )

    xslt = subparsers.add_parser("transform", help="Run an XSLT stylesheet over a document")
    xslt.add_argument("xml_file", type=Path, help="XML document")
    xslt.add_argument("xslt_file", type=Path, help="XSLT stylesheet")
    xslt.add_argument(
        "-p", "--param",
        action="append",
        type=split_pair,
        default=[],
        metavar="NAME=VALUE",
        help="Top-level stylesheet parameter (string value)"
    )
    xslt.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: stdout)")

    xsd = subparsers.add_parser("validate", help="Validate a document against XSD schemas")
    xsd.add_argument("xml_file", type=Path, help="XML document")
    xsd.add_argument("xsd_files", type=Path, nargs="+", help="XSD schema documents")
    xsd.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on the first validation error"
    )
    xsd.add_argument(
        "--xsd-version",
        choices=["1.0", "1.1"],
        default=None,
        help="XSD language version (default: from config, 1.0)"
    )

    convert = subparsers.add_parser("json-to-xml", help="Convert a JSON document to XML")
    convert.add_argument("json_file", type=Path, help="JSON document")
    convert.add_argument("--root", required=True, help="Name of the XML root element")
    convert.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: stdout)")

    return parser


def run_query(args: argparse.Namespace, config: TasksConfig) -> int:
    options = config.query_options()
    options.xml_namespaces.extend(XmlNamespace(prefix, uri) for prefix, uri in args.ns)
    if args.xpath_version:
        options.xpath_version = XPathVersion(args.xpath_version)
    if args.throw_on_empty is not None:
        options.throw_error_on_empty_results = args.throw_on_empty

    query_input = QueryInput(xml=read_text(args.xml_file), xpath_query=args.expression)
    if args.command == "xpath-single":
        result = xpath_query_single(query_input, options)
    else:
        result = xpath_query(query_input, options)

    print(json.dumps(result.to_json(), indent=2, ensure_ascii=False))
    return EXIT_OK


def run_transform(args: argparse.Namespace, config: TasksConfig) -> int:
    transform_input = TransformInput(
        xml=read_text(args.xml_file),
        xslt=read_text(args.xslt_file),
        xslt_parameters=[XsltParameter(name, value) for name, value in args.param],
    )
    write_output(transform(transform_input, config.transform_options()), args.output)
    return EXIT_OK


def run_validate(args: argparse.Namespace, config: TasksConfig) -> int:
    options = config.validation_options()
    if args.strict is not None:
        options.throw_on_validation_errors = args.strict
    if args.xsd_version:
        options.xsd_version = args.xsd_version

    validation_input = ValidationInput(
        xml=read_text(args.xml_file),
        xsd_schemas=[read_text(path) for path in args.xsd_files],
    )
    result = validate(validation_input, options)
    print(json.dumps(asdict(result), indent=2, ensure_ascii=False))
    return EXIT_OK if result.is_valid else EXIT_INVALID


def run_json_to_xml(args: argparse.Namespace, config: TasksConfig) -> int:
    convert_input = JsonToXmlInput(json=read_text(args.json_file), xml_root_element_name=args.root)
    write_output(convert_json_to_xml(convert_input), args.output)
    return EXIT_OK


COMMANDS = {
    "xpath": run_query,
    "xpath-single": run_query,
    "transform": run_transform,
    "validate": run_validate,
    "json-to-xml": run_json_to_xml,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_default_config()
        setup_logging(args.log_level or config.log_level)
        return COMMANDS[args.command](args, config)
    except Exception as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"✗ Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
