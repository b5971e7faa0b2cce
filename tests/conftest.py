"""Pytest configuration.

Puts the project root on ``sys.path`` so ``cargo_tools``, ``tools`` and
``stdio_server`` import from a checkout, and sends log files to a scratch
directory instead of ./logs.
"""

import os
import sys
import tempfile

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Must be set before cargo_tools.settings is first imported
os.environ.setdefault("CARGO_TOOLS_LOGS_DIR", tempfile.mkdtemp(prefix="cargo-tools-logs-"))
