"""Toolkit configuration.

Settings shared by the batch commands: output precision, interchange
collection name and the layer names used to tag classified entities.
Configuration can be loaded from and saved to JSON.

Example JSON:
{
    "precision": 4,
    "angle_precision": 6,
    "processed_layer": "ELEV_OK",
    "failed_layer": "ELEV_FAILED"
}
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

from .core.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class ToolkitConfig:
    """Configuration for levelforge commands."""

    precision: int = 4
    angle_precision: int = 6
    collection_name: str = "slopes-input"
    processed_layer: str = "ELEV_OK"
    failed_layer: str = "ELEV_FAILED"
    self_intersection_layer: str = "SELF_INTERSECT"

    def validate(self) -> "ToolkitConfig":
        """Check value ranges.

        Raises:
            ConfigurationError: On negative precision or empty names
        """
        for name in ("precision", "angle_precision"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigurationError(f"{name} must be a non-negative integer, got {value!r}")

        for name in (
            "collection_name",
            "processed_layer",
            "failed_layer",
            "self_intersection_layer",
        ):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"{name} must be a non-empty string, got {value!r}")

        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, path: Union[str, Path]) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_json())
        logger.info("Configuration saved to %s", path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ToolkitConfig":
        """Create configuration from dictionary, ignoring unknown keys.

        Raises:
            ConfigurationError: If a known key holds an invalid value
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown config keys: %s", ", ".join(unknown))

        config = cls(**{k: v for k, v in data.items() if k in known})
        return config.validate()

    @classmethod
    def from_json(cls, json_str: str) -> "ToolkitConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ToolkitConfig":
        """Load configuration from JSON file.

        Raises:
            FileNotFoundError: If file doesn't exist
            ConfigurationError: If the content is not a valid configuration
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            config = cls.from_json(f.read())
        logger.info("Configuration loaded from %s", path)
        return config


__all__ = [
    'ToolkitConfig',
]
