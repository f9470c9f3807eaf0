"""Core tree building implementation for strict XML parsing.

This module implements the document builder: a single left-to-right scan that
recognises tag boundaries, classifies them (comment, CDATA, opening, closing or
self-closing tag) and maintains an explicit stack of open elements. Nesting
depth is therefore limited by memory rather than by the interpreter's
recursion limit.

The first violation found aborts the scan with a ``ParseViolation``; there is
no recovery and no partial tree.
"""

import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, cast

from strict_xml_parser.character import Cursor, is_xml_blank
from strict_xml_parser.shared import (
    ErrorKind,
    ParserConfig,
    ParseViolation,
    PerformanceMetrics,
    XMLParseError,
    get_logger,
)
from strict_xml_parser.tokenization import (
    EscapeContext,
    parse_attributes,
    parse_prolog,
    unescape,
    validate_tag_name,
)
from strict_xml_parser.tree.render import describe_document

TEXT_NODE_NAME = "#text"

COMMENT_OPENER = "!--"
COMMENT_TERMINATOR = "-->"
CDATA_OPENER = "![CDATA["
CDATA_TERMINATOR = "]]>"

# Text up to the next "<" and the start of the tag that follows it. A bare tag
# token stops before XML whitespace, ">", a "/>" pair or the end of input.
_TAG_HEAD = re.compile(r"([^<]*?)<(!--|!\[CDATA\[|[^> \t\r\n]*?(?=[ \t\r\n]|/?>|\Z))")
# Tag interior up to the first ">", with an optional self-closing "/".
_TAG_TAIL = re.compile(r"(.*?)(/?)>", re.DOTALL)


@dataclass
class XMLNode:
    """Element or text node of a parsed document.

    Text nodes are named ``#text`` and carry their content in ``value``. An
    element whose only child was a text node is collapsed: the text moves to
    the element's ``value`` and it has no children.
    """

    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    value: str = ""
    children: List["XMLNode"] = field(default_factory=list)

    @property
    def is_text(self) -> bool:
        return self.name == TEXT_NODE_NAME

    def iter(self) -> Iterator["XMLNode"]:
        """Iterate over this node and all descendants in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def iter_elements(self) -> Iterator["XMLNode"]:
        """Iterate over this node and descendant elements, skipping text."""
        return (node for node in self.iter() if not node.is_text)

    def inner_text(self) -> str:
        """Concatenated text of this node and its descendants.

        Comments never reach the tree and CDATA content is already part of the
        text, so this is the character content of the element.
        """
        return "".join(node.value for node in self.iter())

    def find(self, name: str) -> Optional["XMLNode"]:
        """Find first descendant element with matching name."""
        return next(
            (node for node in self.iter_elements() if node is not self and node.name == name),
            None,
        )

    def find_all(self, name: str) -> List["XMLNode"]:
        """Find all descendant elements with matching name."""
        return [
            node for node in self.iter_elements() if node is not self and node.name == name
        ]

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self.attributes.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert node to dictionary representation."""
        result = self._shallow_dict()
        stack = [(self, result)]
        while stack:
            node, node_dict = stack.pop()
            if node.children:
                node_dict["children"] = []
                for child in node.children:
                    child_dict = child._shallow_dict()
                    node_dict["children"].append(child_dict)
                    stack.append((child, child_dict))
        return result

    def _shallow_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name}
        if self.attributes:
            result["attributes"] = dict(self.attributes)
        if self.value:
            result["value"] = self.value
        return result


@dataclass
class XMLDocument:
    """Parsed XML document: declaration data plus the root element."""

    version: str = "1.0"
    attributes: Dict[str, str] = field(default_factory=dict)
    root: Optional[XMLNode] = None

    @property
    def encoding(self) -> Optional[str]:
        """Encoding named by the declaration, if any (informational only)."""
        return self.attributes.get("encoding")

    def iter_elements(self) -> Iterator[XMLNode]:
        """Iterate over all elements in document order."""
        if self.root is None:
            return iter(())
        return self.root.iter_elements()

    def find(self, name: str) -> Optional[XMLNode]:
        """Find first element with matching name, the root included."""
        return next((node for node in self.iter_elements() if node.name == name), None)

    def find_all(self, name: str) -> List[XMLNode]:
        """Find all elements with matching name, the root included."""
        return [node for node in self.iter_elements() if node.name == name]

    def inner_text(self) -> str:
        return self.root.inner_text() if self.root is not None else ""

    def description(self) -> str:
        """Indented, human-readable outline of the document."""
        return describe_document(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert document to dictionary representation."""
        result: Dict[str, Any] = {
            "version": self.version,
            "attributes": dict(self.attributes),
        }
        result["root"] = self.root.to_dict() if self.root is not None else None
        return result


@dataclass
class ParseResult:
    """Outcome of a parse: either a document or exactly one error."""

    document: Optional[XMLDocument] = None
    error: Optional[XMLParseError] = None
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate that exactly one outcome is present."""
        if (self.document is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of document or error")

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> XMLDocument:
        """Return the document or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return cast(XMLDocument, self.document)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "success": self.success,
            "performance": self.performance.to_dict(),
        }
        if self.document is not None:
            result["document"] = self.document.to_dict()
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


class XMLTreeBuilder:
    """Builds a document tree from a complete XML string.

    A builder keeps per-call state and is meant to be used by one thread at a
    time; ``XMLParser`` creates a fresh one for every parse.
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize tree builder.

        Args:
            config: Parser configuration (defaults to ``ParserConfig()``)
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "xml_tree_builder")

        self._stack: List[XMLNode] = []
        self._pending_text: List[str] = []
        self.metrics = PerformanceMetrics()

    def build(self, text: str) -> XMLDocument:
        """Parse ``text`` into an XMLDocument.

        Raises:
            ParseViolation: At the first well-formedness violation
        """
        start_time = time.time()
        self._reset_state()
        self.metrics.characters_processed = len(text)

        cursor = Cursor(text)
        prolog = parse_prolog(cursor)

        container = XMLNode(name="")
        self._stack.append(container)

        self._scan_elements(cursor)

        if not is_xml_blank(cursor.remaining):
            raise ParseViolation(ErrorKind.TRAILING_ILLEGAL_CONTENT, cursor.position)

        if len(self._stack) > 1 and self.config.require_balanced_tags:
            raise ParseViolation(
                ErrorKind.MISSING_CLOSING_TAG, len(text), f'"{self._stack[-1].name}"'
            )

        root = next((node for node in container.children if not node.is_text), None)
        if root is None and self.config.require_root_element:
            raise ParseViolation(ErrorKind.MISSING_ROOT_ELEMENT, len(text))

        self.metrics.processing_time_ms = (time.time() - start_time) * 1000
        self.logger.debug(
            "Tree building completed",
            extra={
                "elements_created": self.metrics.elements_created,
                "max_depth": self.metrics.max_depth,
                "unclosed_elements": len(self._stack) - 1,
            }
        )

        return XMLDocument(version=prolog.version, attributes=prolog.attributes, root=root)

    def _reset_state(self) -> None:
        """Reset internal state for a new build."""
        self._stack = []
        self._pending_text = []
        self.metrics = PerformanceMetrics()

    @property
    def _current(self) -> XMLNode:
        return self._stack[-1]

    def _scan_elements(self, cursor: Cursor) -> None:
        """Consume tags until no further tag boundary is found."""
        while not cursor.at_end:
            m = cursor.match(_TAG_HEAD)
            if m is None:
                break

            self._pending_text.append(unescape(m.group(1), EscapeContext.TEXT, m.start(1)))

            token, token_offset = m.group(2), m.start(2)
            if token == COMMENT_OPENER:
                self._skip_comment(cursor, token_offset)
            elif token == CDATA_OPENER:
                self._read_cdata(cursor, token_offset)
            else:
                self._process_tag(cursor, token, token_offset)

    def _skip_comment(self, cursor: Cursor, opener_offset: int) -> None:
        """Skip a comment body; "--" may only appear as part of "-->"."""
        dashes = cursor.find("--")
        if dashes < 0:
            raise ParseViolation(ErrorKind.MISSING_COMMENT_TERMINATOR, opener_offset)
        if not cursor.text.startswith(COMMENT_TERMINATOR, dashes):
            raise ParseViolation(ErrorKind.ILLEGAL_COMMENT_DASHES, dashes)
        cursor.advance_to(dashes + len(COMMENT_TERMINATOR))

    def _read_cdata(self, cursor: Cursor, opener_offset: int) -> None:
        """Append CDATA content verbatim to the pending text."""
        end = cursor.find(CDATA_TERMINATOR)
        if end < 0:
            raise ParseViolation(ErrorKind.MISSING_CDATA_TERMINATOR, opener_offset)
        self._pending_text.append(cursor.text[cursor.position:end])
        cursor.advance_to(end + len(CDATA_TERMINATOR))

    def _process_tag(self, cursor: Cursor, token: str, token_offset: int) -> None:
        """Handle an opening, closing or self-closing tag."""
        if not token:
            raise ParseViolation(ErrorKind.NO_NAME_TAG, token_offset)

        is_closing = token.startswith("/")
        name = token[1:] if is_closing else token
        validate_tag_name(name, token_offset + (1 if is_closing else 0))

        tail = cursor.match(_TAG_TAIL)
        if tail is None:
            raise ParseViolation(ErrorKind.MISSING_CLOSE_BRACKET, token_offset, f'"{token}"')
        attributes = parse_attributes(tail.group(1), tail.start(1))

        self._flush_text()

        if is_closing:
            if tail.group(2):
                raise ParseViolation(
                    ErrorKind.CLOSING_TAG_SELF_CLOSED, tail.start(2), f'"{token}"'
                )
            self._close_element(name, attributes, token_offset)
        elif tail.group(2):
            self._current.children.append(XMLNode(name=name, attributes=attributes))
            self._count_element(len(self._stack))
        else:
            node = XMLNode(name=name, attributes=attributes)
            self._current.children.append(node)
            self._stack.append(node)
            self._count_element(len(self._stack) - 1)

    def _close_element(self, name: str, attributes: Dict[str, str], offset: int) -> None:
        if attributes:
            raise ParseViolation(ErrorKind.CLOSING_TAG_HAS_ATTRIBUTES, offset, f'"/{name}"')
        if len(self._stack) == 1:
            raise ParseViolation(ErrorKind.MISSING_OPENING_TAG, offset, f'"/{name}"')

        current = self._current
        if current.name != name:
            raise ParseViolation(
                ErrorKind.MISSING_CLOSING_TAG, offset, f'"{current.name}" (found "/{name}")'
            )

        if len(current.children) == 1 and current.children[0].is_text:
            current.value = current.children[0].value
            current.children.clear()
        self._stack.pop()

    def _flush_text(self) -> None:
        """Attach pending text to the current node unless it is all whitespace."""
        if not self._pending_text:
            return
        text = "".join(self._pending_text)
        self._pending_text.clear()
        if not is_xml_blank(text):
            self._current.children.append(XMLNode(name=TEXT_NODE_NAME, value=text))
            self.metrics.text_nodes_created += 1

    def _count_element(self, depth: int) -> None:
        self.metrics.elements_created += 1
        self.metrics.max_depth = max(self.metrics.max_depth, depth)
