"""Tests for attribute list parsing."""

import pytest

from strict_xml_parser.shared.result import ErrorKind, ParseViolation
from strict_xml_parser.tokenization import parse_attributes


class TestParseAttributes:
    """Test well-formed attribute lists."""

    def test_empty_interior(self):
        """Test a tag without attributes."""
        assert parse_attributes("") == {}
        assert parse_attributes("   \n ") == {}

    def test_mixed_quotes(self):
        """Test single and double quoted values."""
        attributes = parse_attributes(" key1=\"value1\" key2='value2'")

        assert attributes == {"key1": "value1", "key2": "value2"}
        assert list(attributes) == ["key1", "key2"]

    def test_duplicate_name_last_wins(self):
        """Test that a repeated attribute keeps its last value."""
        assert parse_attributes(' a="1" a="2"') == {"a": "2"}

    def test_values_are_unescaped(self):
        """Test entity substitution in values."""
        assert parse_attributes(" v='\"&apos;test\"'") == {"v": "\"'test\""}

    def test_multiline_value(self):
        """Test that values may span lines."""
        assert parse_attributes(' text="line1\nline2"') == {"text": "line1\nline2"}

    def test_empty_value(self):
        """Test an attribute with an empty value."""
        assert parse_attributes(' flag=""') == {"flag": ""}


class TestParseAttributesErrors:
    """Test rejection of malformed attribute lists."""

    @pytest.mark.parametrize("raw,position", [
        (" a", 1),
        (' a="1" b', 7),
        (' a="1"b="2"', 6),
        (" a=1", 1),
        (' a="1', 1),
        (' a="1"\u00a0b="2"', 6),
    ])
    def test_illegal_attributes(self, raw, position):
        """Test that leftover content is reported at its first character."""
        with pytest.raises(ParseViolation) as exc_info:
            parse_attributes(raw, offset=100)

        assert exc_info.value.kind == ErrorKind.ILLEGAL_ATTRIBUTES
        assert exc_info.value.offset == 100 + position

    def test_value_errors_keep_their_kind(self):
        """Test that a bad entity in a value is not reported as illegal attributes."""
        with pytest.raises(ParseViolation) as exc_info:
            parse_attributes(' a="x&y"', offset=10)

        assert exc_info.value.kind == ErrorKind.UNDEFINED_ENTITY
        assert exc_info.value.offset == 10 + 5

    def test_unescaped_quote_in_value(self):
        """Test a raw apostrophe inside a double-quoted value."""
        with pytest.raises(ParseViolation) as exc_info:
            parse_attributes(' a="it\'s"')

        assert exc_info.value.kind == ErrorKind.UNESCAPED_CHARACTER
