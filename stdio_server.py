#!/usr/bin/env python3
"""
FastMCP server exposing the cargo tools utilities.

This server provides tools to:
1. Format text through CoreService and validate service configs
2. Read a service config from a Cargo.toml or JSON file
3. Run the string utilities
4. Aggregate and filter data points

Usage:
    python stdio_server.py [stdio|sse|http]
"""

import sys

from fastmcp import FastMCP

from cargo_tools import settings
from cargo_tools.logger import setup_logging
from tools.data_tools import register_data_tools
from tools.service_tools import register_service_tools
from tools.string_tools import register_string_tools

mcp = FastMCP(settings.SERVER_NAME)

logger = setup_logging(settings.LOGS_DIR, settings.LOG_LEVEL)

register_service_tools(mcp)
register_string_tools(mcp)
register_data_tools(mcp)


def main():
    transport = sys.argv[1].lower() if len(sys.argv) > 1 else "stdio"
    logger.info("Cargo Tools Server starting up", extra={'extra_data': {'transport': transport}})

    if transport == "sse":
        logger.info(f"Running with SSE transport on http://{settings.SERVER_HOST}:{settings.SERVER_PORT}")
        mcp.run(transport="sse", host=settings.SERVER_HOST, port=settings.SERVER_PORT)
    elif transport == "http":
        logger.info(f"Running with HTTP transport on http://{settings.SERVER_HOST}:{settings.SERVER_PORT}/mcp")
        mcp.run(transport="http", host=settings.SERVER_HOST, port=settings.SERVER_PORT, path="/mcp")
    else:
        if transport != "stdio":
            print("Usage: python stdio_server.py [stdio|sse|http]", file=sys.stderr)
            print("Default: stdio", file=sys.stderr)
        logger.info("Running with STDIO transport")
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
