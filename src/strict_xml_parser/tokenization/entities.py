"""Entity validation and unescaping for text and attribute values.

Escaping rules depend on where the content appears:

- text content may not contain a raw ``<``; raw ``>``, ``'`` and ``"`` are
  tolerated because documents in the wild rarely escape them,
- double-quoted attribute values may not contain raw ``<``, ``'`` or ``"``,
- single-quoted attribute values may not contain raw ``<`` or ``'``.

Every ``&`` must start one of the five predefined entities or a numeric
character reference. Only the predefined entities are substituted: numeric
references are checked for shape and then kept verbatim.
"""

import re
from enum import Enum, auto
from typing import Dict, Tuple

from strict_xml_parser.shared.result import ErrorKind, ParseViolation


class EscapeContext(Enum):
    """Where a run of escaped content was found."""

    TEXT = auto()
    ATTR_DOUBLE_QUOTED = auto()
    ATTR_SINGLE_QUOTED = auto()


_ILLEGAL_RAW_CHAR: Dict[EscapeContext, "re.Pattern[str]"] = {
    EscapeContext.TEXT: re.compile(r"<"),
    EscapeContext.ATTR_DOUBLE_QUOTED: re.compile(r"[<'\"]"),
    EscapeContext.ATTR_SINGLE_QUOTED: re.compile(r"[<']"),
}

# An "&" that does not start a known entity or a numeric reference.
# Hexadecimal references take exactly four digits.
_UNDEFINED_ENTITY = re.compile(
    r"&(?!lt;|gt;|apos;|quot;|amp;|#[0-9]+;|#x[0-9a-fA-F]{4};)"
)

# Substitution order matters: "&amp;" goes last so "&amp;lt;" yields "&lt;".
_PREDEFINED_ENTITIES: Tuple[Tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&apos;", "'"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)


def quote_context(quote: str) -> EscapeContext:
    """Escape context for an attribute value delimited by ``quote``."""
    if quote == '"':
        return EscapeContext.ATTR_DOUBLE_QUOTED
    if quote == "'":
        return EscapeContext.ATTR_SINGLE_QUOTED
    raise ValueError(f"Not an attribute quote: {quote!r}")


def unescape(raw: str, context: EscapeContext, offset: int = 0) -> str:
    """Validate ``raw`` for ``context`` and substitute predefined entities.

    Args:
        raw: Escaped content exactly as it appears in the input
        context: Escape context the content was found in
        offset: Absolute offset of ``raw`` in the input, used for errors

    Returns:
        The unescaped string; numeric character references are left as is

    Raises:
        ParseViolation: ``UNESCAPED_CHARACTER`` at the first forbidden raw
            character, else ``UNDEFINED_ENTITY`` at the first bad ``&``
    """
    m = _ILLEGAL_RAW_CHAR[context].search(raw)
    if m is not None:
        raise ParseViolation(
            ErrorKind.UNESCAPED_CHARACTER, offset + m.start(), f'"{m.group()}"'
        )

    m = _UNDEFINED_ENTITY.search(raw)
    if m is not None:
        raise ParseViolation(ErrorKind.UNDEFINED_ENTITY, offset + m.start())

    if "&" not in raw:
        return raw

    for entity, replacement in _PREDEFINED_ENTITIES:
        raw = raw.replace(entity, replacement)
    return raw
