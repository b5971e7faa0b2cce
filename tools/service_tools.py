#!/usr/bin/env python3
"""
MCP tools for CoreService and Config operations.

This module provides MCP tool wrappers around the core service functionality.
"""

from typing import Any, Dict, Optional

from fastmcp import FastMCP, Context

from cargo_tools import settings
from cargo_tools.config import Config
from cargo_tools.core import load_config_impl, process_data_impl, validate_config_impl
from cargo_tools.logger import setup_logging

logger = setup_logging(settings.LOGS_DIR, settings.LOG_LEVEL)


def _resolve_config(name: Optional[str], version: Optional[str]) -> Config:
    default = Config.default()
    return Config(
        name=default.name if name is None else name,
        version=default.version if version is None else version,
    )


def register_service_tools(mcp: FastMCP):
    """Register CoreService and Config related MCP tools."""

    @mcp.tool
    async def process_data(text: str, ctx: Context, name: Optional[str] = None, version: Optional[str] = None) -> str:
        """
        Format text as "[<name>] Processed: <text>".

        Args:
            text: Input text to process
            name: Service name; defaults to the built-in config name
            version: Service version; defaults to the built-in config version

        Returns:
            The processed string
        """
        return await process_data_impl(text, _resolve_config(name, version), logger, ctx)

    @mcp.tool
    async def get_config() -> Dict[str, str]:
        """Return the default service configuration."""
        return Config.default().to_dict()

    @mcp.tool
    async def validate_config(name: str, version: str, ctx: Context) -> Dict[str, Any]:
        """
        Check that a config has a non-empty name and version.

        Args:
            name: Service name
            version: Service version

        Returns:
            {"valid": bool, "error": message or null}
        """
        return await validate_config_impl(Config(name=name, version=version), logger, ctx)

    @mcp.tool
    async def read_cargo_toml(file_path: str, ctx: Context) -> Dict[str, str]:
        """
        Read the [package] name and version from a Cargo.toml (or a JSON config file).

        Args:
            file_path: Path to the file

        Returns:
            {"name": ..., "version": ...}, or an empty dict if it could not be read
        """
        config = await load_config_impl(file_path, logger, ctx)
        if config is None:
            return {}
        return config.to_dict()
