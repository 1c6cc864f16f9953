"""
Exception classes for xmlshape.

This module defines custom exceptions used throughout the xmlshape library.
"""

class XmlShapeError(Exception):
    """
    Base exception class for all xmlshape errors.

    All custom exceptions in the library should inherit from this class.
    """
    pass

class ConfigError(XmlShapeError):
    """Exception raised when a setting is unknown or cannot be loaded."""
    pass

class ParseError(XmlShapeError):
    """Exception raised when an input cannot be turned into an XML document."""
    pass

class BuilderError(XmlShapeError):
    """Base class for errors raised while building a document."""
    pass

class InvalidOperation(BuilderError):
    """Exception raised when the cursor position does not allow an operation."""
    pass

class NoParent(BuilderError):
    """Exception raised when moving above the document."""

    def __init__(self, message="Element has no parent"):
        super().__init__(message)

class AncestorNotFound(BuilderError):
    """Exception raised when no ancestor has the requested tag."""

    def __init__(self, tag):
        """
        Initialize an AncestorNotFound error.

        Args:
            tag: Tag name that was searched for
        """
        super().__init__(f"Parent {tag} not found in XML")
        self.tag = tag

class SerializationFailed(BuilderError):
    """Exception raised when a document cannot be converted to a string."""
    pass

class MatchError(XmlShapeError):
    """Base class for errors raised by structure matching."""
    pass

class MalformedLocator(MatchError):
    """Exception raised when an XPath expression is not valid."""

    def __init__(self, locator, reason=None):
        message = f"Malformed locator: {locator}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.locator = locator

class ElementNotFound(MatchError):
    """Exception raised when a selector or tag matches nothing."""

    def __init__(self, locator, kind="Element"):
        """
        Initialize an ElementNotFound error.

        Args:
            locator: Selector, XPath or tag name that was searched for
            kind: What the locator describes, used in the message
        """
        super().__init__(f"{kind} '{locator}' was not found")
        self.locator = locator

class EmptySchema(MatchError):
    """Exception raised when a schema document has no root element."""

    def __init__(self, message="XML is empty"):
        super().__init__(message)
