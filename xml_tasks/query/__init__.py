"""
XPath Query Tasks
=================

Components:
- xpath_query: Evaluate an expression and return every item
- xpath_query_single: Evaluate an expression and return the first item
- QueryInput / QueryOptions: Call inputs
- QueryResults / QuerySingleResult / QueryItem: Typed results with JSON conversion
"""

from xml_tasks.query.models import (
    ItemKind,
    QueryInput,
    QueryItem,
    QueryOptions,
    QueryResults,
    QuerySingleResult,
    XmlNamespace,
    XPathVersion,
)

from xml_tasks.query.xpath import (
    xpath_query,
    xpath_query_single,
)

__all__ = [
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
]
