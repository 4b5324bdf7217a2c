"""
XPath Query Tasks
=================

Evaluate XPath 1.0, 2.0 or 3.0 expressions against an in-memory XML document.

The document is built with lxml and the expression is compiled and evaluated
by elementpath. Every call builds its own parser, compiled expression and
document; nothing is cached between calls.
"""

import logging
from typing import Any, Dict, List, Type

import elementpath
from elementpath import DocumentNode, ElementNode, XPath1Parser, XPath2Parser
from elementpath.xpath30 import XPath30Parser

from xml_tasks.exceptions import NoMatchingNodesError
from xml_tasks.query.models import (
    QueryInput,
    QueryItem,
    QueryOptions,
    QueryResults,
    QuerySingleResult,
    XPathVersion,
)
from xml_tasks.xml.utils import parse_xml_text

logger = logging.getLogger(__name__)

PARSERS: Dict[XPathVersion, Type[XPath1Parser]] = {
    XPathVersion.V1: XPath1Parser,
    XPathVersion.V2: XPath2Parser,
    XPathVersion.V3: XPath30Parser,
}


def xpath_query(query_input: QueryInput, options: QueryOptions) -> QueryResults:
    """
    Query XML with XPath and return all results.

    Args:
        query_input: XML text and XPath expression
        options: Namespaces, XPath version and empty-result policy

    Returns:
        QueryResults with one item per item of the evaluated sequence

    Raises:
        NoMatchingNodesError: If nothing matched and throw_error_on_empty_results is set
        ValueError: If the XPath version is not one of 1.0, 2.0, 3.0
    """
    values = _evaluate(query_input, options)

    if options.throw_error_on_empty_results and not values:
        raise NoMatchingNodesError(query_input.xpath_query)

    logger.info(f"XPath query returned {len(values)} item(s)")
    return QueryResults([QueryItem.from_value(value) for value in values])


def xpath_query_single(query_input: QueryInput, options: QueryOptions) -> QuerySingleResult:
    """
    Query XML with XPath and return the first result only.

    Args:
        query_input: XML text and XPath expression
        options: Namespaces, XPath version and empty-result policy

    Returns:
        QuerySingleResult holding the first item, or None

    Raises:
        NoMatchingNodesError: If nothing matched and throw_error_on_empty_results is set
        ValueError: If the XPath version is not one of 1.0, 2.0, 3.0
    """
    values = _evaluate(query_input, options)

    if not values:
        if options.throw_error_on_empty_results:
            raise NoMatchingNodesError(query_input.xpath_query)
        logger.info("XPath query returned no item")
        return QuerySingleResult(None)

    return QuerySingleResult(QueryItem.from_value(values[0]))


def _evaluate(query_input: QueryInput, options: QueryOptions) -> List[Any]:
    """Compile the expression, build the document and evaluate once."""
    version = XPathVersion(options.xpath_version)
    namespaces = options.namespace_map()
    logger.info(f"Evaluating XPath {version.value} expression: {query_input.xpath_query}")
    logger.debug(f"Declared namespaces: {namespaces}")

    parser = PARSERS[version](namespaces=namespaces)
    if "" in namespaces:
        # XPath1Parser ignores the '' binding for unprefixed name tests
        parser.default_namespace = namespaces[""]
    root_token = parser.parse(query_input.xpath_query)

    document = parse_xml_text(query_input.xml)
    context = elementpath.XPathContext(document)

    return [_unwrap(item) for item in root_token.select(context)]


def _unwrap(item: Any) -> Any:
    """
    Map an evaluated item to the value kept in the result.

    Elements and documents become their lxml objects. Attribute, text,
    comment, processing-instruction and namespace nodes stay XPath nodes so
    they are still reported as nodes; atomic values pass through.
    """
    if isinstance(item, ElementNode):
        return item.obj
    if isinstance(item, DocumentNode) and not item.is_extended:
        return item.obj
    return item
