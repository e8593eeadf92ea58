"""Unified logging setup.

Provides:
- Console logging on stderr (stdout carries the MCP stdio protocol)
- Structured JSON-lines file logging when APP_LOG_DIR is configured
- Config-derived log level
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

CONSOLE_FORMAT = "%(asctime)s - FSBOX - %(name)s - %(levelname)s - %(message)s"

_EXCLUDED_RECORD_KEYS = {
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename", "module", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread", "threadName", "processName", "process",
    "exc_info", "exc_text", "stack_info", "getMessage", "taskName",
}


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "process_id": os.getpid(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for k, v in record.__dict__.items():
            if k not in _EXCLUDED_RECORD_KEYS:
                entry[f"extra_{k}"] = v
        return json.dumps(entry, default=str)


def _get_log_level(level_name: Optional[str] = None) -> int:
    if level_name is None:
        try:
            from fsbox.modules.config import config_manager  # local import to avoid circular

            level_name = config_manager.app_settings.log_level
        except Exception:  # noqa: BLE001
            level_name = os.getenv("LOG_LEVEL", "INFO")
    level = getattr(logging, level_name.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level_name: Optional[str] = None, log_file: Optional[Path] = None) -> int:
    """Replace root handlers with a stderr console handler and optional JSON file handler.

    Returns the effective log level.
    """
    from fsbox.modules.config import config_manager

    level = _get_log_level(level_name)
    settings = config_manager.app_settings
    if log_file is None:
        log_file = config_manager.log_file

    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console.setLevel(logging.DEBUG if settings.debug_mode else level)
    root.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        file_handler.setLevel(level)
        root.addHandler(file_handler)

    root.setLevel(logging.DEBUG if settings.debug_mode else level)

    # Keep protocol-level chatter out of the log unless debugging
    if not settings.debug_mode:
        for noisy in ("mcp", "fastmcp", "httpx", "uvicorn.access"):
            logging.getLogger(noisy).setLevel(max(level, logging.WARNING))

    return level
