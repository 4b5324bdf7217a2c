"""
Transformation Tasks
====================

Components:
- transform: Run an XSLT 1.0, 2.0 or 3.0 stylesheet over an XML document
- compile_stylesheet: Compile XSLT text
- TransformInput / XsltParameter / TransformOptions: Call inputs
"""

from xml_tasks.transform.xslt import (
    TransformInput,
    TransformOptions,
    XsltParameter,
    build_parameters,
    compile_stylesheet,
    transform,
)

__all__ = [
    "TransformInput",
    "TransformOptions",
    "XsltParameter",
    "build_parameters",
    "compile_stylesheet",
    "transform",
]
