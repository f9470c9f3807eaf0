"""Core parser API for strict XML parsing.

This module provides the public entry points: module-level ``parse`` and
``parse_file`` functions for one-off use and the ``XMLParser`` class for
configured, reusable parsing. Parse failures surface as ``XMLParseError``
carrying the error kind and the 1-based line/column of the offending input.
"""

import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

from strict_xml_parser.character import locate
from strict_xml_parser.shared import (
    ParserConfig,
    ParseViolation,
    PerformanceMetrics,
    XMLParseError,
    get_logger,
)
from strict_xml_parser.tree import ParseResult, XMLDocument, XMLTreeBuilder

PathType = Union[str, Path]

# Constants for API operations
PREVIEW_LENGTH = 100  # Max length for content preview in logs
MS_PER_SECOND = 1000  # Milliseconds per second conversion
DEFAULT_ENCODING = "utf-8"


def _to_public_error(text: str, violation: ParseViolation) -> XMLParseError:
    """Locate a violation's offset and wrap it as the public error."""
    return XMLParseError(violation.kind, locate(text, violation.offset), violation.detail)


def _preview(text: str) -> str:
    return text[:PREVIEW_LENGTH] + "..." if len(text) > PREVIEW_LENGTH else text


class XMLParser:
    """Configured XML parser that can be reused across documents and threads.

    Each parse runs on its own builder, cursor and element stack; the parser
    itself only holds the immutable configuration and usage statistics.

    Attributes:
        config: Parser configuration
        correlation_id: Correlation ID for request tracking

    Examples:
        Basic usage with default configuration:
        >>> parser = XMLParser()
        >>> doc = parser.parse('<?xml version="1.0"?><root><item>value</item></root>')
        >>> doc.root.find('item').value
        'value'

        Error handling without exceptions:
        >>> result = parser.try_parse('<root/>')
        >>> result.success
        False
        >>> result.error.kind.name
        'MISSING_DECLARATION'
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize XML parser.

        Args:
            config: Parser configuration (defaults to ``ParserConfig()``)
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "xml_parser")

        self._lock = threading.Lock()
        self._parse_count = 0
        self._successful_parses = 0
        self._total_processing_time = 0.0

    def parse(self, text: str) -> XMLDocument:
        """Parse a complete XML document held in a string.

        Args:
            text: The whole document

        Returns:
            XMLDocument with the declaration attributes and the root element

        Raises:
            XMLParseError: At the first well-formedness violation
            TypeError: If ``text`` is not a string
        """
        return self.try_parse(text).unwrap()

    def parse_file(self, file_path: PathType, encoding: str = DEFAULT_ENCODING) -> XMLDocument:
        """Read a file as text and parse it.

        The encoding is taken as given; no detection is attempted.

        Raises:
            XMLParseError: At the first well-formedness violation
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid in ``encoding``
        """
        path_obj = Path(file_path)
        self.logger.info(
            "Starting file parse operation",
            extra={"file_path": str(path_obj), "encoding": encoding}
        )
        content = path_obj.read_text(encoding=encoding)
        return self.parse(content)

    def try_parse(self, text: str) -> ParseResult:
        """Parse without raising for XML errors.

        Returns:
            ParseResult holding either the document or the error, plus metrics
        """
        if not isinstance(text, str):
            raise TypeError(f"XML input must be str, not {type(text).__name__}")

        start_time = time.time()
        self.logger.info(
            "Starting parse operation",
            extra={"content_length": len(text), "preview": _preview(text)}
        )

        builder = XMLTreeBuilder(config=self.config, correlation_id=self.correlation_id)
        try:
            document = builder.build(text)
        except ParseViolation as violation:
            error = _to_public_error(text, violation)
            result = ParseResult(error=error, correlation_id=self.correlation_id)
            self.logger.info(
                "Parse operation failed",
                extra={
                    "error_kind": error.kind.name,
                    "line": error.line,
                    "column": error.column,
                }
            )
        else:
            result = ParseResult(document=document, correlation_id=self.correlation_id)

        processing_time = (time.time() - start_time) * MS_PER_SECOND
        if self.config.enable_metrics:
            result.performance = builder.metrics
            result.performance.characters_processed = len(text)
            result.performance.processing_time_ms = processing_time
        else:
            result.performance = PerformanceMetrics()

        self._record(result.success, processing_time)

        if result.success:
            self.logger.info(
                "Parse operation completed",
                extra={
                    "elements_created": result.performance.elements_created,
                    "processing_time_ms": processing_time,
                }
            )
        return result

    def _record(self, success: bool, processing_time: float) -> None:
        with self._lock:
            self._parse_count += 1
            self._total_processing_time += processing_time
            if success:
                self._successful_parses += 1

    @property
    def statistics(self) -> Dict[str, Any]:
        """Get parser usage statistics."""
        with self._lock:
            return {
                "total_parses": self._parse_count,
                "successful_parses": self._successful_parses,
                "success_rate": (
                    self._successful_parses / self._parse_count
                    if self._parse_count > 0 else 0.0
                ),
                "total_processing_time_ms": self._total_processing_time,
                "average_processing_time_ms": (
                    self._total_processing_time / self._parse_count
                    if self._parse_count > 0 else 0.0
                ),
                "correlation_id": self.correlation_id,
            }

    def reset_statistics(self) -> None:
        """Reset parser usage statistics."""
        with self._lock:
            self._parse_count = 0
            self._successful_parses = 0
            self._total_processing_time = 0.0

        self.logger.info("Parser statistics reset")


def parse(text: str, config: Optional[ParserConfig] = None) -> XMLDocument:
    """Parse a complete XML document held in a string.

    Args:
        text: The whole document, starting with ``<?xml version="1.0"...?>``
        config: Optional parser configuration

    Returns:
        XMLDocument whose root is the first top-level element

    Raises:
        XMLParseError: At the first well-formedness violation

    Examples:
        >>> doc = parse('<?xml version="1.0"?><a>&lt;&gt;</a>')
        >>> doc.root.value
        '<>'
        >>> parse('<?xml version="1.0"?><a>&</a>')
        Traceback (most recent call last):
        ...
        strict_xml_parser.shared.result.XMLParseError: Found an undefined entity: on line 1 at column 25
    """
    return XMLParser(config=config).parse(text)


def parse_file(
    file_path: PathType,
    encoding: str = DEFAULT_ENCODING,
    config: Optional[ParserConfig] = None
) -> XMLDocument:
    """Read ``file_path`` as text in ``encoding`` and parse it.

    Raises:
        XMLParseError: At the first well-formedness violation
        OSError: If the file cannot be read
    """
    return XMLParser(config=config).parse_file(file_path, encoding=encoding)
