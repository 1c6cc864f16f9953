"""
xmlshape

Build XML documents fluently and check them for XPath matches, selectors
and contained tag structure.
"""

import logging

from .core.exceptions import (
    XmlShapeError, ConfigError, ParseError, BuilderError, InvalidOperation,
    NoParent, AncestorNotFound, SerializationFailed, MatchError,
    MalformedLocator, ElementNotFound, EmptySchema
)
from .core.logging_utils import configure_logging
from .core.settings import settings, SettingsContext
from .core.xml.base import to_xml
from .core.xml.builder import XmlBuilder
from .core.xml.structure import XmlStructure

__version__ = "0.1.0"

# Library logging stays silent unless the application configures it
logging.getLogger("xmlshape").addHandler(logging.NullHandler())

__all__ = [
    'XmlBuilder', 'XmlStructure', 'to_xml',
    'configure_logging', 'settings', 'SettingsContext',
    'XmlShapeError', 'ConfigError', 'ParseError', 'BuilderError',
    'InvalidOperation', 'NoParent', 'AncestorNotFound', 'SerializationFailed',
    'MatchError', 'MalformedLocator', 'ElementNotFound', 'EmptySchema',
]
