#!/usr/bin/env python3
"""
Runtime settings shared by the CLI and the MCP server.

Values are read from the environment once, at import time.
"""

import os
from pathlib import Path

LOGS_DIR = Path(os.environ.get("CARGO_TOOLS_LOGS_DIR", "./logs"))
LOG_LEVEL = os.environ.get("CARGO_TOOLS_LOG_LEVEL", "INFO").upper()

SERVER_NAME = "Cargo Tools Server"
SERVER_HOST = os.environ.get("CARGO_TOOLS_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("CARGO_TOOLS_PORT", "8604"))
