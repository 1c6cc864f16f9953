"""
Core functionality for xmlshape.
"""

from .exceptions import (
    XmlShapeError, ConfigError, ParseError, BuilderError, InvalidOperation,
    NoParent, AncestorNotFound, SerializationFailed, MatchError,
    MalformedLocator, ElementNotFound, EmptySchema
)
from .logging_utils import configure_logging, logger
from .settings import Settings, SettingsContext, settings, get_setting
from .xml import (
    XmlBuilder, XmlStructure, to_xml, parse_xml_string, dict_to_element,
    css_to_xpath, evaluate_xpath
)

__all__ = [
    'XmlShapeError', 'ConfigError', 'ParseError', 'BuilderError',
    'InvalidOperation', 'NoParent', 'AncestorNotFound', 'SerializationFailed',
    'MatchError', 'MalformedLocator', 'ElementNotFound', 'EmptySchema',
    'configure_logging', 'logger',
    'Settings', 'SettingsContext', 'settings', 'get_setting',
    'XmlBuilder', 'XmlStructure', 'to_xml', 'parse_xml_string',
    'dict_to_element', 'css_to_xpath', 'evaluate_xpath',
]
