"""Attribute list parsing.

Turns the raw interior of a tag (everything between the tag name and the
closing ``>``) into a name/value mapping, e.g.::

    ' key1="value1" key2=\'value2\''  ->  {"key1": "value1", "key2": "value2"}
"""

import re
from typing import Dict

from strict_xml_parser.character import Cursor
from strict_xml_parser.shared.result import ErrorKind, ParseViolation
from strict_xml_parser.tokenization.entities import quote_context, unescape

# One XML-whitespace-led name="value" or name='value' pair; the value is the
# shortest run up to the matching quote.
_ATTRIBUTE = re.compile(r"[ \t\r\n]+([^=]+)=([\"'])(.*?)\2", re.DOTALL)
_NON_SPACE = re.compile(r"[^ \t\r\n]")


def parse_attributes(raw: str, offset: int = 0) -> Dict[str, str]:
    """Parse an attribute list.

    A repeated name keeps the value of its last occurrence.

    Args:
        raw: Tag interior, starting right after the tag name
        offset: Absolute offset of ``raw`` in the input, used for errors

    Returns:
        Mapping from attribute name to unescaped value, in document order

    Raises:
        ParseViolation: ``ILLEGAL_ATTRIBUTES`` at the first character that is
            neither part of an attribute nor whitespace; ``UNESCAPED_CHARACTER``
            or ``UNDEFINED_ENTITY`` for an ill-escaped value
    """
    attributes: Dict[str, str] = {}
    cursor = Cursor(raw)

    while True:
        m = cursor.match(_ATTRIBUTE)
        if m is None:
            break
        name, quote, value = m.group(1), m.group(2), m.group(3)
        attributes[name] = unescape(value, quote_context(quote), offset + m.start(3))

    leftover = _NON_SPACE.search(raw, cursor.position)
    if leftover is not None:
        raise ParseViolation(ErrorKind.ILLEGAL_ATTRIBUTES, offset + leftover.start())

    return attributes
