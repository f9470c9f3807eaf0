"""Strict XML Parser.

An in-memory XML parser that builds a tree from a complete document and
rejects the first well-formedness violation with a message naming its cause
and the line and column where it was found.

Progressive API Disclosure:
- Level 1: Simple functions - parse(), parse_file()
- Level 2: Configured parser - XMLParser class with ParserConfig
"""

__version__ = "0.1.0"
__author__ = "Strict XML Parser Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Advanced configuration
from .api import XMLParser, parse, parse_file

# Configuration and error types
from .shared.config import ParserConfig
from .shared.result import ErrorKind, SourcePosition, XMLParseError

# Core result objects for all API levels
from .tree.builder import ParseResult, XMLDocument, XMLNode

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "parse_file",

    # Level 2: Advanced parser class
    "XMLParser",
    "ParserConfig",

    # Result objects and data structures
    "ParseResult",
    "XMLDocument",
    "XMLNode",

    # Errors
    "ErrorKind",
    "SourcePosition",
    "XMLParseError",
]
