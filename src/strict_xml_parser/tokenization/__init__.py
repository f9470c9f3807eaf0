"""Lexical layer for strict XML parsing.

Key Components:
    validate_tag_name: Structural tag name check
    unescape / EscapeContext: Context-dependent entity validation and unescaping
    parse_attributes: Tag interior to attribute mapping
    parse_prolog / Prolog: Mandatory XML declaration
"""

from .attributes import parse_attributes
from .entities import EscapeContext, quote_context, unescape
from .names import validate_tag_name
from .prolog import SUPPORTED_VERSION, Prolog, parse_prolog

__all__ = [
    "EscapeContext",
    "Prolog",
    "SUPPORTED_VERSION",
    "parse_attributes",
    "parse_prolog",
    "quote_context",
    "unescape",
    "validate_tag_name",
]
