"""Tests for tag name validation."""

import pytest

from strict_xml_parser.shared.result import ErrorKind, ParseViolation
from strict_xml_parser.tokenization import validate_tag_name


class TestValidateTagName:
    """Test the structural tag name check."""

    @pytest.mark.parametrize("name", ["a", "node", "ns:item", "x-1.y_2", "ünïcødé", "9lives"])
    def test_accepted_names(self, name):
        """Test names that contain no markup characters."""
        validate_tag_name(name)

    def test_empty_name(self):
        """Test that an empty name is a no-name tag."""
        with pytest.raises(ParseViolation) as exc_info:
            validate_tag_name("", offset=7)

        assert exc_info.value.kind == ErrorKind.NO_NAME_TAG
        assert exc_info.value.offset == 7

    @pytest.mark.parametrize("name,position", [
        ("a<b", 1),
        ("a>", 1),
        ("'a", 0),
        ('ab"', 2),
        ("a&b", 1),
    ])
    def test_illegal_characters(self, name, position):
        """Test that markup characters are reported where they occur."""
        with pytest.raises(ParseViolation) as exc_info:
            validate_tag_name(name, offset=3)

        assert exc_info.value.kind == ErrorKind.ILLEGAL_TAG_NAME
        assert exc_info.value.offset == 3 + position
        assert exc_info.value.detail == f'"{name}"'
