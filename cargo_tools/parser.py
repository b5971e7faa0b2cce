#!/usr/bin/env python3
"""
Parsing utilities for configuration and data files.

Provides functionality to extract a Config from the [package] table of a
Cargo.toml file, and to decode configs and data points stored as JSON.
"""

import json
from typing import List, Optional

from .config import Config
from .data import DataPoint


class CargoTomlParser:
    """Parser for Cargo.toml files to extract package identity."""

    @staticmethod
    def _string_value(raw: str) -> Optional[str]:
        raw = raw.strip()
        for quote in ('"', "'"):
            if raw.startswith(quote):
                end = raw.find(quote, 1)
                if end == -1:
                    return None
                return raw[1:end]
        return None

    @staticmethod
    def _table_name(header: str) -> Optional[str]:
        header = header.split('#', 1)[0].strip()
        # Array tables such as [[bin]] never hold the package identity
        if header.startswith('[[') or not header.endswith(']'):
            return None
        return header[1:-1].strip()

    @staticmethod
    def parse_package(content: str) -> Optional[Config]:
        """
        Parse Cargo.toml content and return the package name and version as a Config.

        Args:
            content: String content of the Cargo.toml file

        Returns:
            Config built from [package], or None if name or version is missing
        """
        name = None
        version = None
        in_package = False

        for line in content.splitlines():
            line = line.strip()
            if not line or line.startswith('#'):
                continue

            if line.startswith('['):
                in_package = CargoTomlParser._table_name(line) == 'package'
                continue

            if not in_package or '=' not in line:
                continue

            key, raw = line.split('=', 1)
            key = key.strip()
            # Inherited fields such as `version.workspace = true` have dotted keys
            if key == 'name':
                name = CargoTomlParser._string_value(raw)
            elif key == 'version':
                version = CargoTomlParser._string_value(raw)

        if name is None or version is None:
            return None
        return Config(name=name, version=version)


def parse_config_json(content: str) -> Config:
    """
    Decode a JSON object with ``name`` and ``version`` into a Config.

    Raises:
        ValueError: On malformed JSON or a wrong shape
    """
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("Config JSON must be an object")
    return Config.from_dict(data)


def parse_data_points_json(content: str) -> List[DataPoint]:
    """
    Decode a JSON array of ``{"id", "value", "label"}`` objects.

    Raises:
        ValueError: On malformed JSON or a wrong shape
    """
    data = json.loads(content)
    if not isinstance(data, list):
        raise ValueError("Data points JSON must be an array")
    return [DataPoint.from_dict(item) for item in data]
