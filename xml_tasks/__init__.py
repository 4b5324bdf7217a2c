"""
XML Tasks
=========

Stateless XML utility tasks for workflow automation hosts:

- XPath querying (XPath 1.0, 2.0 and 3.0)
- XSLT transformation
- XML Schema (XSD 1.0 / 1.1) validation
- JSON to XML conversion

Architecture
------------

    xml_tasks/
    ├── xml/           - Parsing and serialization helpers
    ├── query/         - XPath query tasks and typed results
    ├── transform/     - XSLT transformation task
    ├── validation/    - XSD validation task
    ├── convert/       - JSON to XML conversion task
    ├── config/        - Default options from JSON/YAML files
    └── cli.py         - Command line host

Usage
-----

Each task takes plain input/option records and returns a plain result:

    from xml_tasks import QueryInput, QueryOptions, xpath_query

    results = xpath_query(
        QueryInput(xml="<a><b>1</b></a>", xpath_query="//b"),
        QueryOptions(),
    )
    results.to_json()   # [{'b': '1'}]

Every call builds its own parser, compiled expression, stylesheet or schema
and discards it afterwards; nothing is shared between calls.
"""

__version__ = "1.0.0"

from xml_tasks.exceptions import (
    XmlTasksError,
    NoMatchingNodesError,
    UnsupportedXmlInputError,
    XmlSchemaValidationError,
)

from xml_tasks.query import (
    ItemKind,
    QueryInput,
    QueryItem,
    QueryOptions,
    QueryResults,
    QuerySingleResult,
    XmlNamespace,
    XPathVersion,
    xpath_query,
    xpath_query_single,
)

from xml_tasks.transform import (
    TransformInput,
    TransformOptions,
    XsltParameter,
    transform,
)

from xml_tasks.validation import (
    ValidateResult,
    ValidationInput,
    ValidationOptions,
    validate,
)

from xml_tasks.convert import (
    JsonToXmlInput,
    convert_json_to_xml,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "XmlTasksError",
    "NoMatchingNodesError",
    "UnsupportedXmlInputError",
    "XmlSchemaValidationError",
    # Query
    "ItemKind",
    "QueryInput",
    "QueryItem",
    "QueryOptions",
    "QueryResults",
    "QuerySingleResult",
    "XmlNamespace",
    "XPathVersion",
    "xpath_query",
    "xpath_query_single",
    # Transform
    "TransformInput",
    "TransformOptions",
    "XsltParameter",
    "transform",
    # Validation
    "ValidateResult",
    "ValidationInput",
    "ValidationOptions",
    "validate",
    # Conversion
    "JsonToXmlInput",
    "convert_json_to_xml",
]
