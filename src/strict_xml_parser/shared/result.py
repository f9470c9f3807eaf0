"""Error taxonomy and result objects for strict XML parsing.

Every well-formedness violation the parser can detect has an ``ErrorKind``.
Parsing components raise ``ParseViolation`` carrying the kind and the absolute
offset of the offending input; the API boundary converts it into the public
``XMLParseError`` once the offset has been located as a line and column.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of parse failures, valued by their cause phrase."""

    MISSING_DECLARATION = "No XML declaration"
    UNSUPPORTED_VERSION = "Unsupported XML version"
    ILLEGAL_ATTRIBUTES = "Illegal attributes"
    ILLEGAL_TAG_NAME = "Illegal character in the tag name"
    NO_NAME_TAG = "Found a no name tag"
    MISSING_CLOSE_BRACKET = 'Missing ">" for the tag'
    MISSING_OPENING_TAG = "Missing an opening tag for the tag"
    MISSING_CLOSING_TAG = "Missing a closing tag for the tag"
    CLOSING_TAG_HAS_ATTRIBUTES = "Closing tag can not have attributes"
    CLOSING_TAG_SELF_CLOSED = 'Closing tag can not end with "/>"'
    MISSING_COMMENT_TERMINATOR = "Missing an end of the comment section"
    ILLEGAL_COMMENT_DASHES = "Two dashes in the middle of a comment are not allowed"
    MISSING_CDATA_TERMINATOR = "Missing an end of the CDATA section"
    UNESCAPED_CHARACTER = "Found an unescaped character"
    UNDEFINED_ENTITY = "Found an undefined entity"
    TRAILING_ILLEGAL_CONTENT = "Illegal format"
    MISSING_ROOT_ELEMENT = "No root element"

    @property
    def phrase(self) -> str:
        """Human-readable cause phrase for this kind."""
        return self.value


@dataclass(frozen=True)
class SourcePosition:
    """1-based line/column location of an absolute offset in the input."""

    line: int
    column: int
    offset: int

    def __post_init__(self) -> None:
        """Validate position values."""
        if self.line < 1:
            raise ValueError("Line number must be >= 1")
        if self.column < 1:
            raise ValueError("Column number must be >= 1")
        if self.offset < 0:
            raise ValueError("Offset must be >= 0")

    def __str__(self) -> str:
        return f"on line {self.line} at column {self.column}"


class ParseViolation(Exception):
    """Raised inside the parsing layers at the first violated rule.

    Only the absolute offset is known here; the line and column are computed
    by the caller that owns the whole input.
    """

    def __init__(self, kind: ErrorKind, offset: int, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.offset = offset
        self.detail = detail
        super().__init__(self.cause)

    @property
    def cause(self) -> str:
        """Cause phrase, followed by the detail when there is one."""
        if self.detail:
            return f"{self.kind.phrase} {self.detail}"
        return self.kind.phrase


class XMLParseError(Exception):
    """Public parse failure: ``<cause phrase>: on line <L> at column <C>``."""

    def __init__(
        self,
        kind: ErrorKind,
        position: SourcePosition,
        detail: Optional[str] = None
    ) -> None:
        self.kind = kind
        self.position = position
        self.detail = detail
        super().__init__(self.message)

    @property
    def offset(self) -> int:
        return self.position.offset

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def cause(self) -> str:
        if self.detail:
            return f"{self.kind.phrase} {self.detail}"
        return self.kind.phrase

    @property
    def message(self) -> str:
        return f"{self.cause}: {self.position}"

    def to_dict(self) -> dict:
        """Convert the error to a JSON-friendly dictionary."""
        return {
            "kind": self.kind.name,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "offset": self.offset,
        }


@dataclass
class PerformanceMetrics:
    """Performance metrics for a single parse operation."""

    processing_time_ms: float = 0.0
    characters_processed: int = 0
    elements_created: int = 0
    text_nodes_created: int = 0
    max_depth: int = 0

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms

    def to_dict(self) -> dict:
        return {
            "processing_time_ms": self.processing_time_ms,
            "characters_processed": self.characters_processed,
            "elements_created": self.elements_created,
            "text_nodes_created": self.text_nodes_created,
            "max_depth": self.max_depth,
            "characters_per_second": self.characters_per_second,
        }
