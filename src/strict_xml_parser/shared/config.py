"""Configuration objects for strict XML parsing.

The parser enforces a fixed set of well-formedness rules; configuration only
decides the handful of policies the rules leave open (documents without a root
element, elements left open at end of input) and the ambient concerns of a
parse call such as logging and metrics.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional

VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ParserConfig:
    """Immutable configuration for a strict XML parser.

    Thread-safe due to frozen dataclass implementation, so a single instance
    can be shared by parsers running on several threads.

    Attributes:
        require_root_element: Fail with ``MISSING_ROOT_ELEMENT`` when the input
            has no top-level element instead of returning a rootless document.
        require_balanced_tags: Fail with ``MISSING_CLOSING_TAG`` when elements
            are still open at the end of input instead of tolerating them.
        enable_metrics: Collect ``PerformanceMetrics`` for every parse.
        logging_level: Level the CLI configures logging with.
        correlation_id: Optional correlation ID attached to every log record.
    """

    require_root_element: bool = False
    require_balanced_tags: bool = False
    enable_metrics: bool = True
    logging_level: str = "WARNING"
    correlation_id: Optional[str] = None

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the configuration."""
        for flag in ("require_root_element", "require_balanced_tags", "enable_metrics"):
            if not isinstance(getattr(self, flag), bool):
                raise ConfigValidationError(f"{flag} must be a bool", field_name=flag)
        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {VALID_LOGGING_LEVELS}",
                field_name="logging_level",
                suggestions=VALID_LOGGING_LEVELS,
            )

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ParserConfig()
            >>> config.override(require_root_element=True).require_root_element
            True
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def permissive(cls) -> "ParserConfig":
        """Preset accepting rootless documents and unclosed trailing elements."""
        return cls(
            name="permissive",
            description="Tolerates documents without a root and unclosed elements",
        )

    @classmethod
    def strict(cls) -> "ParserConfig":
        """Preset rejecting rootless documents and unclosed elements."""
        return cls(
            require_root_element=True,
            require_balanced_tags=True,
            name="strict",
            description="Requires exactly one closed root element",
        )
