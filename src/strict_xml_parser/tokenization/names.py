"""Tag name validation."""

import re

from strict_xml_parser.shared.result import ErrorKind, ParseViolation

# Characters that can never appear in a tag name.
_ILLEGAL_NAME_CHAR = re.compile(r"[<>'\"&]")


def validate_tag_name(name: str, offset: int = 0) -> None:
    """Reject structurally illegal tag names.

    Only emptiness and the markup characters ``< > ' " &`` are checked; there
    are no Unicode name-start or name-character rules.

    Args:
        name: Candidate tag name, without the leading ``/`` of a closing tag
        offset: Absolute offset of ``name`` in the input

    Raises:
        ParseViolation: ``NO_NAME_TAG`` for an empty name, ``ILLEGAL_TAG_NAME``
            at the first illegal character otherwise
    """
    if not name:
        raise ParseViolation(ErrorKind.NO_NAME_TAG, offset)

    m = _ILLEGAL_NAME_CHAR.search(name)
    if m is not None:
        raise ParseViolation(ErrorKind.ILLEGAL_TAG_NAME, offset + m.start(), f'"{name}"')
