"""Character layer for strict XML parsing.

Key Components:
    Cursor: Anchored matcher over the complete input
    is_xml_blank: Whitespace test limited to space, tab, CR and LF
    locate: Offset to line/column conversion for diagnostics
"""

from .cursor import XML_WHITESPACE, Cursor, is_xml_blank
from .position import locate

__all__ = [
    "XML_WHITESPACE",
    "Cursor",
    "is_xml_blank",
    "locate",
]
