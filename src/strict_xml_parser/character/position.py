"""Conversion of absolute offsets into line/column positions."""

from strict_xml_parser.shared.result import SourcePosition


def locate(text: str, offset: int) -> SourcePosition:
    """Locate ``offset`` within ``text`` as a 1-based line and column.

    The line is one more than the number of newlines before ``offset``; the
    column counts from the character following the last of those newlines, or
    from the start of the document when there is none.

    Args:
        text: The complete input the offset refers to
        offset: Absolute offset, clamped to ``[0, len(text)]``

    Returns:
        SourcePosition for the offset
    """
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return SourcePosition(line=line, column=offset - line_start + 1, offset=offset)
