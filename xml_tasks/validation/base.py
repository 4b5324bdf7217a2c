"""
Validation Records
==================

Input, option and result records for the schema validation task.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from lxml import etree

XmlSource = Union[str, etree._ElementTree, etree._Element]


@dataclass
class ValidationInput:
    """
    XML document and the schemas to validate it against.

    Attributes:
        xml: XML text, or an already parsed lxml ElementTree/Element
            (never modified by validation)
        xsd_schemas: XSD documents as text, combined into one schema set
    """
    xml: XmlSource
    xsd_schemas: List[str] = field(default_factory=list)


@dataclass
class ValidationOptions:
    """
    Options for the validation task.

    Attributes:
        throw_on_validation_errors: Raise on the first violation instead of
            returning an invalid result
        xsd_version: XSD language version, "1.0" or "1.1"
    """
    throw_on_validation_errors: bool = False
    xsd_version: str = "1.0"


@dataclass
class ValidateResult:
    """
    Outcome of a validation run.

    Only the last reported message is kept in error; the full list of
    violations is not collected.
    """
    is_valid: bool = True
    error: Optional[str] = None

    def record(self, message: str) -> None:
        self.is_valid = False
        self.error = message

    def summary(self) -> str:
        if self.is_valid:
            return "Validation PASSED - No errors found"
        return f"Validation FAILED - {self.error}"
