"""Shared utilities for strict XML parsing.

This module provides the configuration object, the error taxonomy, result
types and logging helpers used across all processing layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ParserConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    ErrorKind,
    ParseViolation,
    PerformanceMetrics,
    SourcePosition,
    XMLParseError,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ParserConfig",
    "CorrelationLogger",
    "get_logger",
    "ErrorKind",
    "ParseViolation",
    "PerformanceMetrics",
    "SourcePosition",
    "XMLParseError",
]
