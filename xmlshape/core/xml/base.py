"""
Core XML utilities for xmlshape.

This module turns the inputs accepted by the builder and the matcher
(text, mappings, elements, documents and builders) into lxml documents.
"""

import copy
import logging
import re
from typing import Dict, Any, Optional, Union

from lxml import etree

from ..exceptions import ParseError
from ..settings import get_setting

# Initialize logger
logger = logging.getLogger("xmlshape")

_XML_DECLARATION = re.compile(r'^\s*<\?xml\s[^>]*\?>')

XmlSource = Union[None, str, bytes, Dict[str, Any], etree._Element, etree._ElementTree, "XmlBuilder"]


def empty_document() -> etree._ElementTree:
    """Return a document without a root element."""
    return etree.ElementTree()


def create_parser() -> etree.XMLParser:
    """
    Create a parser for untrusted text input.

    Entity resolution and network access are disabled to prevent XXE.
    """
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_blank_text=get_setting("remove_blank_text"),
    )


def parse_xml_string(xml_string: Union[str, bytes]) -> etree._ElementTree:
    """
    Parse XML from a string or bytes.

    Args:
        xml_string: XML source as string or bytes

    Returns:
        The parsed document

    Raises:
        ParseError: If XML parsing fails
    """
    if isinstance(xml_string, str):
        # Text is already decoded; a declared encoding no longer applies
        xml_string = _XML_DECLARATION.sub('', xml_string, count=1)

    if not xml_string.strip():
        return empty_document()

    try:
        root = etree.fromstring(xml_string, create_parser())
    except etree.XMLSyntaxError as e:
        error_msg = f"XML parsing failed: {e}"
        logger.error(error_msg)
        raise ParseError(error_msg) from e

    return root.getroottree()


def dict_to_element(
    tag: str,
    data: Any,
    parent: Optional[etree._Element] = None
) -> etree._Element:
    """
    Convert a mapping to an XML element.

    Keys starting with '@' become attributes and '#text' becomes the element
    text. Other keys become child elements: a mapping value nests, a list
    value repeats the tag once per item, a scalar value becomes the child's
    text and None leaves the child empty.

    Args:
        tag: Tag name for the element
        data: Mapping, scalar or None describing the element
        parent: Optional parent element

    Returns:
        XML element
    """
    try:
        if parent is not None:
            element = etree.SubElement(parent, tag)
        else:
            element = etree.Element(tag)
    except ValueError as e:
        raise ParseError(f"Invalid tag name {tag!r}: {e}") from e

    if data is None:
        return element

    if not isinstance(data, dict):
        _set_content(element, None, data)
        return element

    for key, value in data.items():
        key = str(key)
        if key.startswith('@'):
            _set_content(element, key[1:], value)
        elif key == '#text':
            _set_content(element, None, value)
        elif isinstance(value, list):
            for item in value:
                dict_to_element(key, item, element)
        else:
            dict_to_element(key, value, element)

    return element


def _set_content(element: etree._Element, attribute: Optional[str], value: Any):
    """Set an attribute, or the text when attribute is None."""
    try:
        if attribute is None:
            element.text = str(value)
        else:
            element.set(attribute, str(value))
    except ValueError as e:
        raise ParseError(f"Invalid content for <{element.tag}>: {e}") from e


def dict_to_document(data: Dict[str, Any]) -> etree._ElementTree:
    """
    Convert a mapping with a single top-level key to a document.

    Raises:
        ParseError: If the mapping describes more than one root element
    """
    if not data:
        return empty_document()

    if len(data) > 1:
        raise ParseError(
            f"A document needs exactly one root element, got {', '.join(map(str, data))}"
        )

    tag, value = next(iter(data.items()))
    if isinstance(value, list):
        raise ParseError(f"A document needs exactly one root element, got a list of '{tag}'")

    return etree.ElementTree(dict_to_element(tag, value))


def to_xml(source: XmlSource) -> etree._ElementTree:
    """
    Normalize any supported input into an lxml document.

    Args:
        source: None, XML text, a mapping, an element, a document or an XmlBuilder

    Returns:
        The document; documents and builders are returned without copying

    Raises:
        ParseError: If the input cannot be converted
    """
    from .builder import XmlBuilder

    if source is None:
        return empty_document()

    if isinstance(source, etree._ElementTree):
        return source

    if isinstance(source, XmlBuilder):
        return source.get_tree()

    if isinstance(source, etree._Element):
        if source.getparent() is None:
            return source.getroottree()
        # Detach a copy so searches stay inside the subtree
        return etree.ElementTree(copy.deepcopy(source))

    if isinstance(source, dict):
        return dict_to_document(source)

    if isinstance(source, (str, bytes)):
        return parse_xml_string(source)

    raise ParseError(f"Unsupported XML input of type {type(source).__name__}")
