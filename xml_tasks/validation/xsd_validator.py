"""
XSD Validator
=============

Validate XML documents against one or more XML Schema Definitions using
xmlschema. A validator instance is built for a single call and discarded.
"""

import logging
from typing import Dict, List, Type

import xmlschema
from lxml import etree

from xml_tasks.exceptions import UnsupportedXmlInputError, XmlSchemaValidationError
from xml_tasks.validation.base import (
    ValidateResult,
    ValidationInput,
    ValidationOptions,
    XmlSource,
)
from xml_tasks.xml.utils import parse_xml_text

logger = logging.getLogger(__name__)

SCHEMA_CLASSES: Dict[str, Type[xmlschema.XMLSchemaBase]] = {
    "1.0": xmlschema.XMLSchema10,
    "1.1": xmlschema.XMLSchema11,
}


def describe_error(error: xmlschema.XMLSchemaValidationError) -> str:
    """Build a one-line message from an xmlschema validation error."""
    message = error.reason or error.message
    if error.path:
        message = f"{message} (path: {error.path})"
    return message


class XSDValidator:
    """
    Validator for a combined set of XSD schemas.

    Example:
        validator = XSDValidator([xsd_text], ValidationOptions())
        result = validator.validate_tree(tree)
        if not result.is_valid:
            print(result.summary())
    """

    def __init__(self, xsd_schemas: List[str], options: ValidationOptions):
        """
        Build the schema set.

        Args:
            xsd_schemas: XSD documents as text
            options: Validation policy and XSD version

        Raises:
            ValueError: If no schema is given or the XSD version is unknown
            xmlschema.XMLSchemaParseError: If a schema is malformed
        """
        if not xsd_schemas:
            raise ValueError("At least one XSD schema is required for validation")

        try:
            schema_class = SCHEMA_CLASSES[options.xsd_version]
        except KeyError:
            raise ValueError(
                f"Unsupported XSD version: {options.xsd_version!r} "
                f"(expected one of {', '.join(SCHEMA_CLASSES)})"
            ) from None

        self._options = options
        # the first source is the main schema, the rest join its global maps
        schema = schema_class(xsd_schemas[0], build=False)
        for source in xsd_schemas[1:]:
            schema.add_schema(source, build=False)
        schema.build()
        self._schema = schema
        logger.debug(
            f"Built XSD {options.xsd_version} schema set from {len(xsd_schemas)} document(s)"
        )

    def validate_tree(self, document: XmlSource) -> ValidateResult:
        """
        Validate a parsed document.

        Every reported problem goes through the same handler: in strict mode
        the first one raises, otherwise the result keeps the last message.

        Args:
            document: lxml ElementTree or Element

        Returns:
            ValidateResult with validation outcome

        Raises:
            XmlSchemaValidationError: On the first violation in strict mode
        """
        result = ValidateResult()

        for error in self._schema.iter_errors(document):
            message = describe_error(error)
            if self._options.throw_on_validation_errors:
                logger.error(f"XSD validation failed: {message}")
                raise XmlSchemaValidationError(message, path=error.path) from error
            logger.debug(f"XSD validation error: {message}")
            result.record(message)

        logger.info(result.summary())
        return result


def validate(validation_input: ValidationInput, options: ValidationOptions) -> ValidateResult:
    """
    Validate XML against XML Schema Definitions.

    Args:
        validation_input: XML (text or lxml tree) and XSD schema texts
        options: Fail-fast policy and XSD version

    Returns:
        ValidateResult { is_valid, error }

    Raises:
        UnsupportedXmlInputError: If validation_input.xml is neither text nor an lxml tree
        XmlSchemaValidationError: On the first violation in strict mode
    """
    xml = validation_input.xml
    if isinstance(xml, str):
        document = parse_xml_text(xml)
    elif isinstance(xml, (etree._ElementTree, etree._Element)):
        document = xml
    else:
        raise UnsupportedXmlInputError(xml)

    validator = XSDValidator(validation_input.xsd_schemas, options)
    return validator.validate_tree(document)
