"""
XML query utilities for xmlshape.

This module translates CSS selectors to XPath and evaluates XPath
expressions against lxml documents, mapping lxml errors to xmlshape errors.
"""

import logging
from functools import lru_cache
from typing import Any, List, Union

from cssselect import GenericTranslator, SelectorError
from lxml import etree

from ..exceptions import MalformedLocator

# Initialize logger
logger = logging.getLogger("xmlshape")

_translator = GenericTranslator()

XPathResult = Union[List[Any], bool, float, str]


@lru_cache(maxsize=256)
def css_to_xpath(selector: str, prefix: str = "descendant-or-self::") -> str:
    """
    Translate a CSS selector into an XPath expression.

    Args:
        selector: CSS selector, e.g. ``div.item > span``
        prefix: Axis prepended to every translated selector

    Returns:
        Equivalent XPath expression

    Raises:
        cssselect.SelectorError: If the selector is invalid or unsupported
    """
    return _translator.css_to_xpath(selector, prefix=prefix)


@lru_cache(maxsize=256)
def compile_xpath(expression: str) -> etree.XPath:
    """
    Compile an XPath expression.

    Args:
        expression: XPath expression

    Returns:
        Compiled, reusable XPath evaluator

    Raises:
        MalformedLocator: If the expression is not valid XPath
    """
    try:
        return etree.XPath(expression)
    except etree.XPathError as e:
        logger.debug(f"Invalid XPath '{expression}': {e}")
        raise MalformedLocator(expression, str(e)) from e


def evaluate_xpath(tree: etree._ElementTree, expression: str) -> XPathResult:
    """
    Evaluate an XPath expression against a document.

    The root element is the context node, so both absolute and
    ``descendant-or-self::`` expressions search the whole document, while
    relative paths start below the root (``user``, not ``users/user``).
    A document without a root element yields an empty node-set whatever
    the expression, once it has compiled.

    Args:
        tree: Document to query
        expression: XPath expression

    Returns:
        The raw lxml result (node-set list, boolean, number or string)

    Raises:
        MalformedLocator: If the expression is invalid or fails to evaluate
    """
    xpath = compile_xpath(expression)

    root = tree.getroot()
    if root is None:
        return []

    try:
        return xpath(root)
    except etree.XPathError as e:
        logger.debug(f"Error evaluating XPath '{expression}': {e}")
        raise MalformedLocator(expression, str(e)) from e


def first_element(result: XPathResult):
    """
    Return the first element of a node-set result, or None.

    Attribute values, text and comments are skipped: only elements count as
    matches.
    """
    if not isinstance(result, list):
        return None
    for item in result:
        if isinstance(item, etree._Element) and isinstance(item.tag, str):
            return item
    return None


def try_css(tree: etree._ElementTree, selector: str):
    """
    Evaluate a selector as CSS.

    Returns:
        The first matching element, or None if the selector is not valid CSS
        or matches nothing
    """
    try:
        expression = css_to_xpath(selector)
    except SelectorError as e:
        logger.debug(f"'{selector}' is not a CSS selector: {e}")
        return None
    return try_xpath(tree, expression)


def try_xpath(tree: etree._ElementTree, expression: str):
    """
    Evaluate a selector as raw XPath.

    Returns:
        The first matching element, or None if the expression is not valid
        XPath or matches nothing
    """
    try:
        return first_element(evaluate_xpath(tree, expression))
    except MalformedLocator:
        return None
