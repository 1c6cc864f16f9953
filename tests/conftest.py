"""
Test configuration and fixtures for xmlshape tests.

This module provides pytest fixtures for unit tests.
"""

import os
import sys
import pytest
from lxml import etree

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from xmlshape import XmlBuilder, settings


@pytest.fixture(autouse=True)
def reset_settings():
    """Keep setting changes from leaking between tests."""
    settings.reset()
    yield
    settings.reset()

@pytest.fixture
def sample_xml_string():
    """Return a sample XML document string."""
    return """
    <users>
      <user id="1">
        <name>davert</name>
        <email>davert@example.com</email>
        <groups>
          <group>admin</group>
        </groups>
      </user>
      <user id="2">
        <name>jon</name>
        <!-- no email yet -->
      </user>
    </users>
    """

@pytest.fixture
def sample_xml_tree(sample_xml_string):
    """Return a parsed XML tree from the sample string."""
    return etree.ElementTree(etree.fromstring(sample_xml_string.encode('utf-8')))

@pytest.fixture
def html_xml_string():
    """Return an XHTML-like document for selector tests."""
    return """
    <html>
      <body>
        <div class="header"><span>title</span></div>
        <div class="item first" id="one"><item>1</item></div>
        <div class="item"><item>2</item></div>
      </body>
    </html>
    """

@pytest.fixture
def users_builder():
    """Return a builder holding a small users document."""
    return (XmlBuilder()
            .child("users")
            .child("user").attr("id", "1")
            .child("name").val("davert")
            .parents("users")
            .child("user").attr("id", "2")
            .child("name").val("jon"))
