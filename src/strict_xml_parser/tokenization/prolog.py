"""XML declaration parsing."""

import re
from dataclasses import dataclass, field
from typing import Dict

from strict_xml_parser.character import Cursor
from strict_xml_parser.shared.result import ErrorKind, ParseViolation
from strict_xml_parser.tokenization.attributes import parse_attributes

SUPPORTED_VERSION = "1.0"

_DECLARATION = re.compile(r"<\?xml[ \t\r\n]+version=\"([^\n]+?)\"(.*?)\?>", re.DOTALL)


@dataclass
class Prolog:
    """Parsed ``<?xml version="1.0" ...?>`` declaration."""

    version: str
    attributes: Dict[str, str] = field(default_factory=dict)


def parse_prolog(cursor: Cursor) -> Prolog:
    """Consume the mandatory declaration at the very start of the input.

    Nothing, not even whitespace, may precede the declaration. The cursor is
    left right after ``?>``.

    Raises:
        ParseViolation: ``MISSING_DECLARATION`` when the input does not start
            with a declaration, ``UNSUPPORTED_VERSION`` for any version other
            than 1.0, or an attribute error for the remaining pseudo-attributes
    """
    if cursor.position != 0:
        raise ParseViolation(ErrorKind.MISSING_DECLARATION, cursor.position)

    m = cursor.match(_DECLARATION)
    if m is None:
        raise ParseViolation(ErrorKind.MISSING_DECLARATION, 0)

    version = m.group(1)
    if version != SUPPORTED_VERSION:
        raise ParseViolation(ErrorKind.UNSUPPORTED_VERSION, m.start(1), f'"{version}"')

    return Prolog(version=version, attributes=parse_attributes(m.group(2), m.start(2)))
