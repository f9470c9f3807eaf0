"""Positional cursor over a complete input string.

All matching is anchored at the current offset: the parser never skips input
implicitly, and a failed match leaves the cursor exactly where it was.
"""

import re
from typing import Optional

# XML whitespace is limited to these four characters; other Unicode spaces
# such as U+00A0 are content.
XML_WHITESPACE = " \t\r\n"


def is_xml_blank(text: str) -> bool:
    """True if ``text`` is empty or consists only of XML whitespace."""
    return not text.strip(XML_WHITESPACE)


class Cursor:
    """Immutable view of the whole input plus a current offset."""

    __slots__ = ("text", "position")

    def __init__(self, text: str, position: int = 0) -> None:
        if not 0 <= position <= len(text):
            raise ValueError("Cursor position out of range")
        self.text = text
        self.position = position

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    @property
    def remaining(self) -> str:
        """Unconsumed input from the current offset."""
        return self.text[self.position:]

    def match(self, pattern: re.Pattern) -> Optional[re.Match]:
        """Match ``pattern`` anchored at the current offset.

        On success the cursor advances past the whole match and the match is
        returned; on failure ``None`` is returned and nothing is consumed.
        Group offsets of the returned match are absolute.
        """
        m = pattern.match(self.text, self.position)
        if m is not None:
            self.position = m.end()
        return m

    def find(self, literal: str) -> int:
        """Absolute index of the next ``literal`` at or after the offset, or -1."""
        return self.text.find(literal, self.position)

    def advance_to(self, offset: int) -> None:
        """Move forward to ``offset``; the cursor never moves backwards."""
        if offset < self.position or offset > len(self.text):
            raise ValueError(f"Cannot advance cursor from {self.position} to {offset}")
        self.position = offset

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, length={len(self.text)})"
