"""
XML structure matching for xmlshape.

XmlStructure answers questions about a fixed target document: whether an
XPath expression selects anything, which element a CSS or XPath selector
points to, and whether the document contains the tag structure of a
schema document.
"""

import logging
from typing import Iterator

from lxml import etree

from ..exceptions import ElementNotFound, EmptySchema
from .base import XmlSource, to_xml
from .query import evaluate_xpath, try_css, try_xpath

# Initialize logger
logger = logging.getLogger("xmlshape")


def element_children(node: etree._Element) -> Iterator[etree._Element]:
    """Iterate over child elements, skipping comments and processing instructions."""
    return (child for child in node if isinstance(child.tag, str))


class XmlStructure:
    """
    Structural queries over a target XML document.

    The target is normalized once at construction and never modified.
    """

    def __init__(self, xml: XmlSource):
        """
        Initialize with a target document.

        Args:
            xml: Anything to_xml() accepts: text, a mapping, an element,
                a document or an XmlBuilder

        Raises:
            ParseError: If the input cannot be converted
        """
        self.xml = to_xml(xml)

    def matches_xpath(self, xpath: str) -> bool:
        """
        Check whether an XPath expression selects anything.

        Node-sets are true when non-empty; boolean, number and string
        results use their XPath truth value, so NaN is false. The root
        element is the context node: use absolute paths (``/users/user``)
        rather than paths relative to the document (``users/user``).
        On an empty document nothing is evaluated and the result is False,
        even for expressions such as ``not(//x)``.

        Args:
            xpath: XPath expression

        Returns:
            True if the expression matches

        Raises:
            MalformedLocator: If the expression is not valid XPath
        """
        result = evaluate_xpath(self.xml, xpath)
        if isinstance(result, list):
            return len(result) > 0
        if isinstance(result, float):
            return result == result and result != 0
        return bool(result)

    def match_element(self, css_or_xpath: str) -> etree._Element:
        """
        Find the first element matched by a CSS selector or XPath expression.

        The selector is tried as CSS first; if that is not valid CSS or
        matches nothing it is evaluated as raw XPath.

        Args:
            css_or_xpath: CSS selector or XPath expression

        Returns:
            The first matching element in document order; attribute,
            text and comment results are skipped

        Raises:
            ElementNotFound: If neither interpretation matches an element
        """
        element = try_css(self.xml, css_or_xpath)
        if element is not None:
            return element

        element = try_xpath(self.xml, css_or_xpath)
        if element is not None:
            return element

        raise ElementNotFound(css_or_xpath)

    def match_xml_structure(self, xml: XmlSource) -> bool:
        """
        Check whether the target contains the tag structure of a schema.

        Every element in the target with the schema root's tag is a
        candidate. A candidate matches when each schema child is satisfied
        by some child of the candidate with the same tag, recursively.
        Sibling order, extra target nodes, text and attributes are ignored.

        Args:
            xml: Schema document, in any form to_xml() accepts

        Returns:
            True if some candidate contains the schema structure

        Raises:
            EmptySchema: If the schema has no root element
            ElementNotFound: If no target element has the schema root's tag
        """
        schema = to_xml(xml).getroot()
        if schema is None:
            raise EmptySchema()

        target_root = self.xml.getroot()
        candidates = [] if target_root is None else list(target_root.iter(schema.tag))
        if not candidates:
            raise ElementNotFound(schema.tag, "Element")

        for node in candidates:
            if self._match_node(schema, node):
                logger.debug(f"Structure <{schema.tag}> matched at {self.xml.getpath(node)}")
                return True

        logger.debug(f"Structure <{schema.tag}> not matched by {len(candidates)} candidate(s)")
        return False

    def _match_node(self, schema: etree._Element, xml: etree._Element) -> bool:
        """Containment match of schema's children against xml's children."""
        for schema_child in element_children(schema):
            matched = False
            for xml_child in element_children(xml):
                if schema_child.tag == xml_child.tag:
                    matched = self._match_node(schema_child, xml_child)
                    if matched:
                        break
            if not matched:
                return False
        return True
