"""Tests for correlation-aware logging."""

import logging

from strict_xml_parser.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test CorrelationLogger behaviour."""

    def test_component_defaults_to_last_name_part(self):
        """Test the default component name."""
        logger = get_logger("strict_xml_parser.tree.builder")

        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "builder"

    def test_records_carry_correlation_fields(self, caplog):
        """Test that records include the correlation ID and component."""
        logger = get_logger("strict_xml_parser.test", "req-42", "unit")

        with caplog.at_level(logging.DEBUG, logger="strict_xml_parser.test"):
            logger.debug("hello", extra={"elements": 3})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.correlation_id == "req-42"
        assert record.component == "unit"
        assert record.elements == 3

    def test_info_level(self, caplog):
        """Test that info messages are emitted at INFO."""
        logger = get_logger("strict_xml_parser.test")

        with caplog.at_level(logging.INFO, logger="strict_xml_parser.test"):
            logger.info("parsed")

        assert caplog.records[-1].levelno == logging.INFO
        assert caplog.records[-1].correlation_id is None
