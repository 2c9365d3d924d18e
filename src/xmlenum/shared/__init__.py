"""Shared utilities for tag-shape enumeration.

This module provides configuration objects, the error taxonomy, run metrics
and logging helpers used across the tokenizer, tree and CLI layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ShapeConfig,
)
from .errors import (
    InputOpenError,
    ParseError,
    UsageError,
    XmlEnumError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import AggregationMetrics

__all__ = [
    "AggregationMetrics",
    "ConfigError",
    "ConfigValidationError",
    "ShapeConfig",
    "InputOpenError",
    "ParseError",
    "UsageError",
    "XmlEnumError",
    "CorrelationLogger",
    "get_logger",
]
