#!/usr/bin/env python3
"""
Command-line front-ends.

cli-main formats one free-text input; cli-tool runs one of a fixed set of
actions. Both print the CoreService result to stdout.

Usage:
    cli-main "some input" [-v] [--config Cargo.toml]
    cli-tool {check,validate,format} [--config Cargo.toml]
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from . import settings
from .config import Config, ValidationError, validate_config
from .core import load_config_impl
from .logger import setup_logging
from .service import CoreService

VERSION = "0.1.0"

ACTIONS = {
    "check": "checking...",
    "validate": "validating...",
    "format": "formatting...",
}


def _add_config_argument(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Cargo.toml or JSON file to take the service name and version from",
    )


def _build_service(config_path: Optional[str], logger) -> CoreService:
    """
    Resolve the config for a CLI run and wrap it in a CoreService.

    Raises:
        ValidationError: If the config cannot be loaded or has empty fields
    """
    if config_path:
        config = asyncio.run(load_config_impl(config_path, logger))
        if config is None:
            raise ValidationError(f"Could not load config from {config_path}")
    else:
        config = Config.default()
    validate_config(config)
    return CoreService(config)


def parse_main_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cli-main", description="Main CLI application")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("input", help="Input data to process")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    _add_config_argument(parser)
    return parser.parse_args(argv)


def parse_tool_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cli-tool", description="CLI tool binary")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("action", choices=list(ACTIONS), help="Action to perform")
    _add_config_argument(parser)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_main_args(argv)
    logger = setup_logging(settings.LOGS_DIR, settings.LOG_LEVEL)

    try:
        service = _build_service(args.config, logger)
    except ValidationError as e:
        logger.error("Invalid configuration", extra={'extra_data': {'error': str(e)}})
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Processing input: {args.input}")

    print(service.process_data(args.input))
    logger.info("cli-main finished", extra={'extra_data': {'service': service.get_config().name}})
    return 0


def tool_main(argv: Optional[List[str]] = None) -> int:
    args = parse_tool_args(argv)
    logger = setup_logging(settings.LOGS_DIR, settings.LOG_LEVEL)

    try:
        service = _build_service(args.config, logger)
    except ValidationError as e:
        logger.error("Invalid configuration", extra={'extra_data': {'error': str(e)}})
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(service.process_data(ACTIONS[args.action]))
    logger.info("cli-tool finished", extra={'extra_data': {'action': args.action}})
    return 0


if __name__ == "__main__":
    sys.exit(main())
