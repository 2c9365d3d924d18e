"""Configuration for tag-shape enumeration.

This module provides the configuration object shared by the tokenizer
adapter, the aggregator and the renderer.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional


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
class ShapeConfig:
    """Settings for one enumeration run."""

    # Spaces added per nesting level when rendering
    indent_step: int = 4

    # Lift libxml2's nesting and text-size caps
    huge_tree: bool = True

    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate shape configuration."""
        if isinstance(self.indent_step, bool) or not isinstance(self.indent_step, int):
            raise ConfigValidationError(
                "indent_step must be an integer", field_name="indent_step"
            )
        if self.indent_step < 1:
            raise ConfigValidationError(
                "indent_step must be >= 1",
                field_name="indent_step",
                suggestions=["Use the default step of 4 spaces"],
            )
        if not isinstance(self.huge_tree, bool):
            raise ConfigValidationError(
                "huge_tree must be a boolean", field_name="huge_tree"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShapeConfig":
        """Create configuration from a plain dictionary.

        Unknown keys are rejected so that typos in configuration files are
        reported instead of silently ignored.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                suggestions=[f"Valid keys: {', '.join(sorted(known))}"],
            )
        return cls(**data)

    @classmethod
    def from_file(cls, config_path: Path) -> "ShapeConfig":
        """Load configuration from a JSON file."""
        try:
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Could not load config file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Config file {config_path} must contain a JSON object"
            )
        return cls.from_dict(data)

    def override(self, **kwargs: Any) -> "ShapeConfig":
        """Create a new configuration with the given fields replaced.

        ``None`` values are skipped so unset command-line options keep the
        current value.
        """
        changes = {key: value for key, value in kwargs.items() if value is not None}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return asdict(self)
