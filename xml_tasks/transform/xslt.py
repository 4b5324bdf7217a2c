"""
XSLT Transform Task
===================

Compile an XSLT stylesheet, bind top-level parameters and run it against an
XML document, returning the serialized output as text.

Stylesheets run on Saxon (saxonche), so XSLT 1.0, 2.0 and 3.0 are all
supported. Both documents are checked for well-formedness with lxml first;
Saxon then gets a fresh processor per call.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from lxml import etree
from saxonche import PySaxonApiError, PySaxonProcessor

from xml_tasks.xml.utils import normalize_newlines, parse_xml_text

logger = logging.getLogger(__name__)


@dataclass
class XsltParameter:
    """Top-level stylesheet parameter passed as a string value."""
    name: str
    value: str


@dataclass
class TransformInput:
    """XML document, XSLT stylesheet and parameter bindings."""
    xml: str
    xslt: str
    xslt_parameters: List[XsltParameter] = field(default_factory=list)


@dataclass
class TransformOptions:
    """
    Output options for the transform task.

    Attributes:
        newline: Line ending written in place of every LF in the output;
            defaults to the line ending of the host platform
    """
    newline: str = field(default_factory=lambda: os.linesep)


def _document_text(xml: str) -> str:
    """Parse with whitespace preserved and serialize without the XML declaration."""
    document = parse_xml_text(xml, preserve_whitespace=True)
    return etree.tostring(document, encoding="unicode")


def compile_stylesheet(proc: PySaxonProcessor, xslt: str):
    """
    Compile an XSLT stylesheet from a string.

    Args:
        proc: Saxon processor owning the compiled stylesheet
        xslt: XSLT content as string

    Returns:
        Compiled Saxon XSLT executable

    Raises:
        etree.XMLSyntaxError: If the stylesheet is not well-formed XML
        PySaxonApiError: If the stylesheet is not valid XSLT
    """
    xslt30_processor = proc.new_xslt30_processor()
    return xslt30_processor.compile_stylesheet(stylesheet_text=_document_text(xslt))


def build_parameters(proc: PySaxonProcessor, parameters: Optional[List[XsltParameter]]) -> Dict:
    """Wrap parameter values as xs:string values, later names override earlier ones."""
    return {
        param.name: proc.make_string_value(str(param.value))
        for param in parameters or []
    }


def transform(transform_input: TransformInput, options: Optional[TransformOptions] = None) -> str:
    """
    Create an XSLT transformation.

    The source document is parsed with whitespace preserved. Line feeds in the
    serialized result are replaced with options.newline.

    Args:
        transform_input: XML, XSLT and parameters
        options: Output options (host platform line ending by default)

    Returns:
        Serialized transformation result

    Raises:
        etree.XMLSyntaxError: If the document or the stylesheet is malformed XML
        PySaxonApiError: If the stylesheet cannot be compiled or the transformation fails
    """
    options = options or TransformOptions()
    source_text = _document_text(transform_input.xml)

    with PySaxonProcessor(license=False) as proc:
        executable = compile_stylesheet(proc, transform_input.xslt)
        source = proc.parse_xml(xml_text=source_text)

        params = build_parameters(proc, transform_input.xslt_parameters)
        for name, value in params.items():
            executable.set_parameter(name, value)

        logger.info(f"Applying XSLT transformation with {len(params)} parameter(s)...")
        try:
            output = executable.transform_to_string(xdm_node=source)
        except PySaxonApiError as e:
            logger.error(f"XSLT transformation failed: {e}")
            raise

    logger.info("XSLT transformation completed successfully")
    return normalize_newlines(output or "", options.newline)
