"""
Query Models
============

Input, option and result records for the XPath query tasks.

Result items keep the dynamic type of the evaluated XPath item and carry an
on-demand conversion to a JSON-compatible value.
"""

import copy
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union

import elementpath
import xmltodict
from lxml import etree

from xml_tasks.xml.utils import node_to_string


class XPathVersion(Enum):
    """XPath language versions understood by the query tasks."""

    V1 = "1.0"
    V2 = "2.0"
    V3 = "3.0"


class ItemKind(Enum):
    """Kind discriminator for a single XPath result item."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NODE = "node"


@dataclass
class XmlNamespace:
    """
    Namespace binding declared before an expression is compiled.

    An empty prefix declares the default element namespace, so unprefixed
    steps match elements in that namespace.
    """
    prefix: str
    uri: str


@dataclass
class QueryInput:
    """XML document text and the XPath expression to evaluate against it."""
    xml: str
    xpath_query: str


@dataclass
class QueryOptions:
    """
    Options for the XPath query tasks.

    Attributes:
        xml_namespaces: Prefix bindings, later duplicates override earlier ones
        xpath_version: Language version used to compile the expression
        throw_error_on_empty_results: Raise instead of returning nothing
    """
    xml_namespaces: List[XmlNamespace] = field(default_factory=list)
    xpath_version: Union[XPathVersion, str] = XPathVersion.V3
    throw_error_on_empty_results: bool = False

    def namespace_map(self) -> Dict[str, str]:
        """Return the bindings as a prefix -> URI dict (last binding wins)."""
        return {ns.prefix or "": ns.uri for ns in self.xml_namespaces}


def _is_node(value: Any) -> bool:
    return isinstance(value, (etree._Element, etree._ElementTree, elementpath.XPathNode))


def item_kind(value: Any) -> ItemKind:
    """Classify a raw value returned by the XPath engine."""
    # bool first: it is an int subclass
    if isinstance(value, bool):
        return ItemKind.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return ItemKind.NUMBER
    if _is_node(value):
        return ItemKind.NODE
    return ItemKind.STRING


@dataclass
class QueryItem:
    """One item of an XPath result sequence."""
    kind: ItemKind
    value: Any

    @classmethod
    def from_value(cls, value: Any) -> 'QueryItem':
        return cls(kind=item_kind(value), value=value)

    @property
    def text(self) -> str:
        """String value of the item."""
        value = self.value
        if self.kind is ItemKind.BOOLEAN:
            return "true" if value else "false"
        if self.kind is not ItemKind.NODE:
            return str(value)
        if isinstance(value, etree._ElementTree):
            value = value.getroot()
        if isinstance(value, etree._Element):
            if not isinstance(value.tag, str):
                # comments and processing instructions
                return value.text or ""
            return "".join(value.itertext())
        return str(getattr(value, "string_value", value))

    def to_json(self) -> Any:
        """
        Convert the item to a JSON-compatible value.

        Elements convert through their XML serialization using the xmltodict
        conventions ('@name' for attributes, '#text' for mixed text, lists for
        repeated children). Namespace declarations inherited from ancestors
        are kept only where the element or its descendants use them. Every
        other node converts to its string value.
        """
        if self.kind is ItemKind.BOOLEAN:
            return bool(self.value)
        if self.kind is ItemKind.NUMBER:
            if isinstance(self.value, Decimal):
                return int(self.value) if self.value == self.value.to_integral_value() else float(self.value)
            return self.value
        if self.kind is ItemKind.STRING:
            return str(self.value)

        element = self.value
        if isinstance(element, etree._ElementTree):
            element = element.getroot()
        if isinstance(element, etree._Element) and isinstance(element.tag, str):
            # detached copy, the source document is left untouched
            element = copy.deepcopy(element)
            etree.cleanup_namespaces(element)
            return xmltodict.parse(node_to_string(element))
        return self.text


@dataclass
class QueryResults:
    """Ordered result sequence of an XPath query."""
    data: List[QueryItem] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[QueryItem]:
        return iter(self.data)

    def __getitem__(self, index: int) -> QueryItem:
        return self.data[index]

    def to_json(self, index: Optional[int] = None) -> Any:
        """
        Convert results to JSON-compatible values.

        Args:
            index: Convert only the item at this position

        Returns:
            List of converted items, or a single converted item
        """
        if index is not None:
            return self.data[index].to_json()
        return [item.to_json() for item in self.data]


@dataclass
class QuerySingleResult:
    """At most one XPath result item."""
    data: Optional[QueryItem] = None

    def to_json(self) -> Any:
        if self.data is None:
            return None
        return self.data.to_json()
