"""Tests for the parser configuration object."""

import json

import pytest

from strict_xml_parser.shared.config import (
    VALID_LOGGING_LEVELS,
    ConfigError,
    ConfigValidationError,
    ParserConfig,
)


class TestParserConfigDefaults:
    """Test suite for default ParserConfig values."""

    def test_default_configuration(self):
        """Test default configuration values."""
        config = ParserConfig()

        assert config.require_root_element is False
        assert config.require_balanced_tags is False
        assert config.enable_metrics is True
        assert config.logging_level == "WARNING"
        assert config.correlation_id is None
        assert config.name is None
        assert config.description is None

    def test_config_is_frozen(self):
        """Test that configuration instances cannot be mutated."""
        config = ParserConfig()

        with pytest.raises(AttributeError):
            config.require_root_element = True


class TestParserConfigValidation:
    """Test suite for ParserConfig validation."""

    def test_invalid_logging_level(self):
        """Test that unknown logging levels are rejected with suggestions."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ParserConfig(logging_level="LOUD")

        assert exc_info.value.field_name == "logging_level"
        assert exc_info.value.suggestions == VALID_LOGGING_LEVELS

    @pytest.mark.parametrize(
        "field_name", ["require_root_element", "require_balanced_tags", "enable_metrics"]
    )
    def test_flags_must_be_bool(self, field_name):
        """Test that policy flags only accept booleans."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ParserConfig(**{field_name: "yes"})

        assert exc_info.value.field_name == field_name

    def test_validation_error_is_config_error(self):
        """Test the exception hierarchy."""
        assert issubclass(ConfigValidationError, ConfigError)


class TestParserConfigOverride:
    """Test suite for configuration overrides."""

    def test_override_returns_new_instance(self):
        """Test that override leaves the receiver unchanged."""
        config = ParserConfig()
        strict = config.override(require_root_element=True)

        assert strict.require_root_element is True
        assert config.require_root_element is False

    def test_override_unknown_field(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ParserConfig().override(recover_errors=True)

        assert exc_info.value.field_name == "recover_errors"
        assert "require_root_element" in exc_info.value.suggestions

    def test_override_is_validated(self):
        """Test that overridden values go through validation."""
        with pytest.raises(ConfigValidationError):
            ParserConfig().override(logging_level="verbose")


class TestParserConfigSerialization:
    """Test suite for dictionary and JSON conversion."""

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = ParserConfig(correlation_id="abc").to_dict()

        assert data["correlation_id"] == "abc"
        assert data["require_balanced_tags"] is False

    def test_json_round_trip(self):
        """Test that a configuration survives JSON conversion."""
        config = ParserConfig.strict().override(correlation_id="req-1")

        restored = ParserConfig.from_json(config.to_json())

        assert restored == config

    def test_from_dict_ignores_unknown_keys(self):
        """Test that extra keys in stored configuration are ignored."""
        config = ParserConfig.from_dict({"require_root_element": True, "legacy": 1})

        assert config.require_root_element is True

    def test_from_json_invalid_json(self):
        """Test that malformed JSON is reported as a validation error."""
        with pytest.raises(ConfigValidationError):
            ParserConfig.from_json("{not json")

    def test_from_json_requires_object(self):
        """Test that JSON arrays are rejected."""
        with pytest.raises(ConfigValidationError):
            ParserConfig.from_json(json.dumps([1, 2]))


class TestParserConfigPresets:
    """Test suite for preset factories."""

    def test_permissive_preset(self):
        """Test the permissive preset keeps the default policies."""
        config = ParserConfig.permissive()

        assert config.name == "permissive"
        assert config.require_root_element is False
        assert config.require_balanced_tags is False

    def test_strict_preset(self):
        """Test the strict preset enables both policies."""
        config = ParserConfig.strict()

        assert config.name == "strict"
        assert config.require_root_element is True
        assert config.require_balanced_tags is True
