#!/usr/bin/env python3
"""
CoreService binds a Config to the text formatting operation shared by every
front-end.
"""

from .config import Config


class CoreService:
    """Core service for shared functionality."""

    def __init__(self, config: Config):
        self._config = config

    @property
    def config(self) -> Config:
        return self._config

    def get_config(self) -> Config:
        return self._config

    def process_data(self, data: str) -> str:
        """Tag ``data`` with the config name: ``[<name>] Processed: <data>``."""
        return f"[{self._config.name}] Processed: {data}"
