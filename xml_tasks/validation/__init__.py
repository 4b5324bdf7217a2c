"""
Validation Tasks
================

Components:
- validate: Validate XML text or a parsed tree against XSD schemas
- XSDValidator: Schema set built for a single validation call
- ValidationInput / ValidationOptions / ValidateResult: Call records
"""

from xml_tasks.validation.base import (
    ValidateResult,
    ValidationInput,
    ValidationOptions,
)

from xml_tasks.validation.xsd_validator import (
    XSDValidator,
    describe_error,
    validate,
)

__all__ = [
    "ValidateResult",
    "ValidationInput",
    "ValidationOptions",
    "XSDValidator",
    "describe_error",
    "validate",
]
