"""
Task Exceptions
===============

Errors raised by the XML tasks themselves. Errors coming from the underlying
engines (lxml, elementpath, xmlschema, json) are never wrapped and reach the
caller unchanged.
"""

from typing import Optional


class XmlTasksError(Exception):
    """Base class for all errors raised by xml_tasks."""


class NoMatchingNodesError(XmlTasksError, LookupError):
    """Raised when a query returns nothing and empty results are not allowed."""

    def __init__(self, xpath_query: str):
        self.xpath_query = xpath_query
        super().__init__(f"Could not find any nodes with XPath: {xpath_query}")


class UnsupportedXmlInputError(XmlTasksError, TypeError):
    """Raised when validation input is neither XML text nor a parsed tree."""

    def __init__(self, received: object):
        self.received_type = type(received).__name__
        super().__init__(
            "The input data was not recognized as XML. "
            "Supported formats are XML string and lxml ElementTree/Element "
            f"(got {self.received_type})."
        )


class XmlSchemaValidationError(XmlTasksError, ValueError):
    """Raised on the first schema violation when validation runs in strict mode."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
