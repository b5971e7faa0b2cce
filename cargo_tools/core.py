#!/usr/bin/env python3
"""
Core business logic for the cargo tools front-ends.

These functions wrap the pure utilities with file loading, structured logging
and optional FastMCP context feedback. They hold no MCP registration code, so
the CLI and the server share them.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import aiofiles
from fastmcp import Context

from .config import Config, ValidationError, validate_config
from .data import DataPoint
from .parser import CargoTomlParser, parse_config_json, parse_data_points_json
from .service import CoreService


async def _read_text(path: Path) -> str:
    async with aiofiles.open(path, 'r', encoding='utf-8') as f:
        return await f.read()


async def load_config_impl(file_path: str, logger, ctx: Optional[Context] = None) -> Optional[Config]:
    """
    Load a Config from a Cargo.toml or a JSON file.

    Args:
        file_path: Path to a Cargo.toml or *.json file
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        The loaded Config, or None if the file is missing, unsupported or invalid
    """
    if ctx:
        await ctx.info(f"Reading config file: {file_path}")
    logger.info("Attempting to read config file", extra={'extra_data': {'path': file_path}})

    path = Path(file_path).expanduser().resolve()

    if not path.exists():
        if ctx:
            await ctx.error(f"Config file not found: {path}")
        logger.error("Config file not found", extra={'extra_data': {'resolved_path': str(path)}})
        return None

    if path.name != "Cargo.toml" and path.suffix != ".json":
        if ctx:
            await ctx.error(f"Config file must be Cargo.toml or *.json, got: {path.name}")
        logger.error("Unsupported config file", extra={'extra_data': {'path': str(path), 'filename': path.name}})
        return None

    try:
        content = await _read_text(path)

        if path.name == "Cargo.toml":
            config = CargoTomlParser.parse_package(content)
            if config is None:
                if ctx:
                    await ctx.error("Cargo.toml has no [package] name and version")
                logger.error("No package identity in Cargo.toml", extra={'extra_data': {'path': str(path)}})
                return None
        else:
            config = parse_config_json(content)

    except (OSError, ValueError) as e:
        if ctx:
            await ctx.error(f"Error reading config: {str(e)}")
        logger.error("Failed to read or parse config file", exc_info=True, extra={'extra_data': {'path': file_path}})
        return None

    if ctx:
        await ctx.info(f"Loaded config {config.name} v{config.version}")
    logger.info(
        "Successfully loaded config",
        extra={'extra_data': {'path': file_path, 'name': config.name, 'version': config.version}}
    )
    return config


async def load_data_points_impl(file_path: str, logger, ctx: Optional[Context] = None) -> List[DataPoint]:
    """
    Load data points from a JSON array file.

    Args:
        file_path: Path to the JSON file
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        The decoded data points, or an empty list on any failure
    """
    logger.info("Attempting to read data points", extra={'extra_data': {'path': file_path}})
    path = Path(file_path).expanduser().resolve()

    if not path.exists():
        if ctx:
            await ctx.error(f"Data file not found: {path}")
        logger.error("Data file not found", extra={'extra_data': {'resolved_path': str(path)}})
        return []

    try:
        points = parse_data_points_json(await _read_text(path))
    except (OSError, ValueError) as e:
        if ctx:
            await ctx.error(f"Error reading data points: {str(e)}")
        logger.error("Failed to read or parse data points", exc_info=True, extra={'extra_data': {'path': file_path}})
        return []

    if ctx:
        await ctx.info(f"Loaded {len(points)} data points")
    logger.info("Loaded data points", extra={'extra_data': {'path': file_path, 'count': len(points)}})
    return points


async def process_data_impl(text: str, config: Config, logger, ctx: Optional[Context] = None) -> str:
    """
    Run CoreService.process_data for ``config``.

    Args:
        text: Input text
        config: Config the service is bound to
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        The formatted string
    """
    service = CoreService(config)
    result = service.process_data(text)
    if ctx:
        await ctx.debug(f"Processed {len(text)} characters")
    logger.info(
        "Processed data",
        extra={'extra_data': {'service': config.name, 'input_length': len(text)}}
    )
    return result


async def validate_config_impl(config: Config, logger, ctx: Optional[Context] = None) -> Dict[str, Any]:
    """
    Validate ``config`` and report the outcome as data.

    Returns:
        {"valid": True, "error": None} or {"valid": False, "error": <message>}
    """
    try:
        validate_config(config)
    except ValidationError as e:
        if ctx:
            await ctx.warning(f"Invalid config: {e}")
        logger.warning("Config validation failed", extra={'extra_data': {'config': config.to_dict(), 'error': str(e)}})
        return {"valid": False, "error": str(e)}

    logger.info("Config validated", extra={'extra_data': {'config': config.to_dict()}})
    return {"valid": True, "error": None}
