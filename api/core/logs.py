"""
Logging setup.

Modules log through `logging.getLogger(__name__)`; this configures the root
logger once per process.
"""

from __future__ import annotations

import logging
import os
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_configured = False


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def configure_logging() -> None:
    global _configured
    if _configured:
        return None
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    level = logging.getLevelName(log_level())
    # Unknown names come back as "Level X" strings.
    root.setLevel(level if isinstance(level, int) else logging.INFO)
    root.addHandler(handler)
    _configured = True
