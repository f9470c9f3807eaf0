"""Public parsing API for strict XML parsing."""

from .parser import XMLParser, parse, parse_file

__all__ = [
    "XMLParser",
    "parse",
    "parse_file",
]
