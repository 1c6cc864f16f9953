"""
XML builder for xmlshape.

This module provides a fluent builder that grows an XML document through
chained calls instead of literal markup:

    xml = (XmlBuilder()
           .child("users")
           .child("user").attr("id", "1")
           .child("name").val("davert")
           .parents("users")
           .child("user").attr("id", "2"))
"""

import logging
from typing import Optional, Union

from lxml import etree

from ..exceptions import (
    InvalidOperation, NoParent, AncestorNotFound, SerializationFailed
)
from ..settings import get_setting

# Initialize logger
logger = logging.getLogger("xmlshape")

Cursor = Union[etree._ElementTree, etree._Element]


class XmlBuilder:
    """
    Builder for creating XML documents.

    The builder keeps a cursor. It starts on the document itself; child()
    appends an element under the cursor and moves onto it, while parent()
    and parents() move it back up. Nodes are only ever appended, so the
    cursor always points into the builder's own document.
    """

    def __init__(self):
        self._tree = etree.ElementTree()
        self._current: Cursor = self._tree

    @property
    def current(self) -> Cursor:
        """The node under the cursor: the document or one of its elements."""
        return self._current

    @property
    def root(self) -> Optional[etree._Element]:
        """The document root element, or None before the first child()."""
        return self._tree.getroot()

    def _at_document(self) -> bool:
        return self._current is self._tree

    def child(self, tag: str) -> 'XmlBuilder':
        """
        Append an element under the cursor and move the cursor onto it.

        Args:
            tag: Element tag name; siblings may share a tag

        Returns:
            Self for chaining

        Raises:
            InvalidOperation: If the tag is not a valid XML name, or the
                cursor is on a document that already has a root element
        """
        try:
            if self._at_document():
                if self._tree.getroot() is not None:
                    raise InvalidOperation(
                        f"Cannot add <{tag}>: the document already has a root element"
                    )
                element = etree.Element(tag)
                self._tree._setroot(element)
            else:
                element = etree.SubElement(self._current, tag)
        except ValueError as e:
            raise InvalidOperation(f"Invalid tag name {tag!r}: {e}") from e

        self._current = element
        return self

    def val(self, value: str) -> 'XmlBuilder':
        """
        Set the text of the current element, replacing any previous text.

        Args:
            value: Element text

        Returns:
            Self for chaining

        Raises:
            InvalidOperation: If the cursor is on the document
        """
        if self._at_document():
            raise InvalidOperation('Current node is not an element')

        try:
            self._current.text = str(value)
        except ValueError as e:
            raise InvalidOperation(f"Invalid text value: {e}") from e
        return self

    def attr(self, name: str, value: str) -> 'XmlBuilder':
        """
        Set an attribute of the current element.

        Args:
            name: Attribute name
            value: Attribute value

        Returns:
            Self for chaining

        Raises:
            InvalidOperation: If the cursor is on the document or lxml
                rejects the attribute
        """
        if self._at_document():
            raise InvalidOperation('Current node is not an element')

        try:
            self._current.set(name, str(value))
        except ValueError as e:
            raise InvalidOperation(f"Invalid attribute {name!r}: {e}") from e
        return self

    def parent(self) -> 'XmlBuilder':
        """
        Move the cursor to the parent node.

        The parent of the root element is the document.

        Returns:
            Self for chaining

        Raises:
            NoParent: If the cursor is already on the document
        """
        if self._at_document():
            raise NoParent()

        parent = self._current.getparent()
        self._current = parent if parent is not None else self._tree
        return self

    def parents(self, tag: str) -> 'XmlBuilder':
        """
        Move the cursor to the nearest ancestor with the given tag.

        The current element itself is not considered. The cursor does not
        move if no ancestor matches.

        Args:
            tag: Ancestor tag name

        Returns:
            Self for chaining

        Raises:
            AncestorNotFound: If the document is reached without a match
        """
        node = self._current
        while isinstance(node, etree._Element):
            node = node.getparent()
            if node is not None and node.tag == tag:
                self._current = node
                return self

        logger.debug(f"No ancestor <{tag}> above the cursor")
        raise AncestorNotFound(tag)

    def serialize(self) -> str:
        """
        Serialize the whole document, not just the cursor's subtree.

        Encoding, XML declaration and pretty printing follow the
        'encoding', 'xml_declaration' and 'pretty_print' settings.

        Returns:
            XML string

        Raises:
            SerializationFailed: If lxml cannot serialize the document
        """
        encoding = get_setting("encoding")
        xml_declaration = get_setting("xml_declaration")

        if self._tree.getroot() is None:
            return f"<?xml version='1.0' encoding='{encoding}'?>\n" if xml_declaration else ""

        try:
            xml_bytes = etree.tostring(
                self._tree,
                xml_declaration=xml_declaration,
                encoding=encoding,
                pretty_print=get_setting("pretty_print")
            )
            return xml_bytes.decode(encoding)
        except (etree.SerialisationError, LookupError, ValueError) as e:
            logger.error(f"Failed to convert document to string: {e}")
            raise SerializationFailed(f"Failed to convert document to string: {e}") from e

    def get_tree(self) -> etree._ElementTree:
        """Return the document being built."""
        return self._tree

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        if self._at_document():
            position = "document"
        else:
            position = self._current.tag
        return f"<XmlBuilder at {position}>"
