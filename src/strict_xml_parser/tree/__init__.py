"""Tree building engine for strict XML parsing.

Key Components:
    XMLTreeBuilder: Stack-driven document builder
    XMLDocument: Declaration data plus the root element
    XMLNode: Element or text node with attributes, value and children
    ParseResult: Document or error, with performance metrics
"""

from .builder import (
    TEXT_NODE_NAME,
    ParseResult,
    XMLDocument,
    XMLNode,
    XMLTreeBuilder,
)
from .render import describe_document, describe_node

__all__ = [
    "TEXT_NODE_NAME",
    "ParseResult",
    "XMLDocument",
    "XMLNode",
    "XMLTreeBuilder",
    "describe_document",
    "describe_node",
]
