"""
Tests for the XML query helpers.
"""

import pytest
from cssselect import SelectorError
from lxml import etree

from xmlshape.core import MalformedLocator
from xmlshape.core.xml import css_to_xpath, compile_xpath, evaluate_xpath, to_xml
from xmlshape.core.xml.query import first_element, try_css, try_xpath


class TestCssToXpath:
    """Tests for CSS translation."""

    def test_translates(self):
        """Tag selectors are searched from the context node down."""
        assert css_to_xpath("item") == "descendant-or-self::item"

    def test_prefix(self):
        """The axis prefix can be changed."""
        assert css_to_xpath("item", prefix="descendant::") == "descendant::item"

    def test_class_selector(self):
        """Class selectors test the class attribute."""
        assert "@class" in css_to_xpath("div.item")

    def test_invalid(self):
        """Invalid CSS raises the translator's error."""
        with pytest.raises(SelectorError):
            css_to_xpath("//item[1]")


class TestXpathEvaluation:
    """Tests for XPath compilation and evaluation."""

    def test_compile_cached(self):
        """Compiled expressions are reused."""
        assert compile_xpath("//a") is compile_xpath("//a")

    def test_compile_invalid(self):
        """Syntax errors raise MalformedLocator."""
        with pytest.raises(MalformedLocator):
            compile_xpath("//a[")

    def test_evaluate_node_set(self, sample_xml_string):
        """Node-sets come back as lists in document order."""
        result = evaluate_xpath(to_xml(sample_xml_string), "//name")

        assert [node.text for node in result] == ["davert", "jon"]

    def test_evaluate_relative_to_root(self, sample_xml_string):
        """Relative expressions start at the root element."""
        result = evaluate_xpath(to_xml(sample_xml_string), "user/name")

        assert len(result) == 2

    def test_evaluate_scalar(self, sample_xml_string):
        """Non node-set results are returned unchanged."""
        assert evaluate_xpath(to_xml(sample_xml_string), "count(//user)") == 2.0

    def test_evaluate_empty_document(self):
        """An empty document yields an empty node-set."""
        assert evaluate_xpath(to_xml(None), "//a") == []


class TestSelectorHelpers:
    """Tests for the first-match helpers."""

    def test_first_element_skips_non_elements(self):
        """Only elements count as matches."""
        element = etree.Element("a")

        assert first_element(["text", element]) is element
        assert first_element(True) is None
        assert first_element([]) is None

    def test_try_css(self, html_xml_string):
        """CSS selectors return the first match."""
        assert try_css(to_xml(html_xml_string), "#one").get("class") == "item first"

    def test_try_css_invalid(self, html_xml_string):
        """Invalid CSS returns None."""
        assert try_css(to_xml(html_xml_string), "//item") is None

    def test_try_xpath_invalid(self, html_xml_string):
        """Invalid XPath returns None."""
        assert try_xpath(to_xml(html_xml_string), "//item[") is None
