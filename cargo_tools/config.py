#!/usr/bin/env python3
"""
Service configuration.

Config is an immutable name/version pair. Emptiness is not rejected at
construction time; call validate_config() where it matters.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

DEFAULT_NAME = "cargo-tools-test"
DEFAULT_VERSION = "0.1.0"


class ValidationError(ValueError):
    """Raised when a Config field that must be non-empty is empty."""


@dataclass(frozen=True)
class Config:
    """Core configuration for a service instance."""

    name: str
    version: str

    @classmethod
    def default(cls) -> "Config":
        return cls(name=DEFAULT_NAME, version=DEFAULT_VERSION)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """
        Build a Config from a mapping with ``name`` and ``version`` keys.

        Raises:
            ValueError: If a key is missing or is not a string
        """
        try:
            name = data['name']
            version = data['version']
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid config, missing field: {e}") from e

        if not isinstance(name, str) or not isinstance(version, str):
            raise ValueError("Config name and version must be strings")

        return cls(name=name, version=version)


def create_default_config() -> Config:
    return Config.default()


def validate_config(config: Config) -> None:
    """
    Check that both config fields are non-empty. The name is checked first.

    Raises:
        ValidationError: On the first empty field
    """
    if not config.name:
        raise ValidationError("Config name cannot be empty")
    if not config.version:
        raise ValidationError("Config version cannot be empty")
