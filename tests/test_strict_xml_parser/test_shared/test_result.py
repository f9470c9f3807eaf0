"""Tests for the error taxonomy and result objects."""

import pytest

from strict_xml_parser.shared.result import (
    ErrorKind,
    ParseViolation,
    PerformanceMetrics,
    SourcePosition,
    XMLParseError,
)


class TestErrorKind:
    """Test the closed set of error kinds."""

    def test_phrases_are_unique(self):
        """Test that every kind has its own cause phrase."""
        phrases = [kind.phrase for kind in ErrorKind]

        assert len(phrases) == len(set(phrases))

    @pytest.mark.parametrize("kind,phrase", [
        (ErrorKind.MISSING_DECLARATION, "No XML declaration"),
        (ErrorKind.UNDEFINED_ENTITY, "Found an undefined entity"),
        (ErrorKind.TRAILING_ILLEGAL_CONTENT, "Illegal format"),
        (ErrorKind.MISSING_CLOSE_BRACKET, 'Missing ">" for the tag'),
    ])
    def test_phrase(self, kind, phrase):
        """Test selected cause phrases."""
        assert kind.phrase == phrase


class TestSourcePosition:
    """Test SourcePosition validation and rendering."""

    def test_str(self):
        """Test the human-readable location."""
        assert str(SourcePosition(line=3, column=7, offset=20)) == "on line 3 at column 7"

    @pytest.mark.parametrize("line,column,offset", [(0, 1, 0), (1, 0, 0), (1, 1, -1)])
    def test_invalid_values(self, line, column, offset):
        """Test that out-of-range values are rejected."""
        with pytest.raises(ValueError):
            SourcePosition(line=line, column=column, offset=offset)


class TestParseViolation:
    """Test the internal violation exception."""

    def test_cause_without_detail(self):
        """Test the cause of a violation without detail."""
        violation = ParseViolation(ErrorKind.NO_NAME_TAG, 5)

        assert violation.cause == "Found a no name tag"
        assert violation.offset == 5
        assert str(violation) == "Found a no name tag"

    def test_cause_with_detail(self):
        """Test that the detail follows the phrase."""
        violation = ParseViolation(ErrorKind.ILLEGAL_TAG_NAME, 2, '"a&b"')

        assert violation.cause == 'Illegal character in the tag name "a&b"'


class TestXMLParseError:
    """Test the public parse error."""

    def test_message_format(self):
        """Test the '<cause>: on line L at column C' message."""
        error = XMLParseError(
            ErrorKind.UNDEFINED_ENTITY, SourcePosition(line=2, column=4, offset=30)
        )

        assert error.message == "Found an undefined entity: on line 2 at column 4"
        assert str(error) == error.message
        assert error.line == 2
        assert error.column == 4
        assert error.offset == 30

    def test_message_with_detail(self):
        """Test that detail is part of the cause."""
        error = XMLParseError(
            ErrorKind.MISSING_CLOSING_TAG,
            SourcePosition(line=1, column=26, offset=25),
            '"a" (found "/b")',
        )

        assert error.message == (
            'Missing a closing tag for the tag "a" (found "/b"): on line 1 at column 26'
        )

    def test_to_dict(self):
        """Test dictionary conversion."""
        error = XMLParseError(ErrorKind.NO_NAME_TAG, SourcePosition(1, 2, 1))

        assert error.to_dict() == {
            "kind": "NO_NAME_TAG",
            "message": "Found a no name tag: on line 1 at column 2",
            "line": 1,
            "column": 2,
            "offset": 1,
        }

    def test_is_raisable(self):
        """Test that the error can be raised and caught as an Exception."""
        with pytest.raises(XMLParseError, match="on line 1 at column 1"):
            raise XMLParseError(ErrorKind.MISSING_DECLARATION, SourcePosition(1, 1, 0))


class TestPerformanceMetrics:
    """Test performance metrics calculations."""

    def test_characters_per_second(self):
        """Test throughput calculation."""
        metrics = PerformanceMetrics(processing_time_ms=500.0, characters_processed=1000)

        assert metrics.characters_per_second == 2000.0

    def test_characters_per_second_zero_time(self):
        """Test throughput with no measured time."""
        assert PerformanceMetrics().characters_per_second == 0.0

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = PerformanceMetrics(elements_created=3, max_depth=2).to_dict()

        assert data["elements_created"] == 3
        assert data["max_depth"] == 2
        assert "characters_per_second" in data
