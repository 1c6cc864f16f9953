"""
XML package for xmlshape.

The package is organized into several modules:
- base: Input normalization (text, mappings, elements, builders)
- query: CSS translation and XPath evaluation
- builder: The fluent XmlBuilder
- structure: XmlStructure, the structural matcher

Most common functionality is available from the package directly.
"""

from .base import (
    to_xml,
    parse_xml_string,
    dict_to_element,
    dict_to_document,
    empty_document,
)

from .builder import XmlBuilder

from .query import (
    css_to_xpath,
    compile_xpath,
    evaluate_xpath,
)

from .structure import XmlStructure

__all__ = [
    # Base module exports
    'to_xml',
    'parse_xml_string',
    'dict_to_element',
    'dict_to_document',
    'empty_document',

    # Builder exports
    'XmlBuilder',

    # Query exports
    'css_to_xpath',
    'compile_xpath',
    'evaluate_xpath',

    # Structure exports
    'XmlStructure',
]
