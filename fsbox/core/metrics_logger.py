"""
Metrics logging utility for tracking tool activity without capturing file data.

This module provides a centralized way to log tool metrics that:
- Use the [METRIC] prefix for easy filtering
- Only log metadata (tool names, outcomes, counts, timings)
- NEVER log file content or caller-supplied paths

Usage:
    from fsbox.core.metrics_logger import log_metric

    log_metric("tool_call", tool="createFile", outcome="ok", elapsed_ms=1.2)
    log_metric("root_changed")
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def log_metric(event_type: str, **kwargs: Any) -> None:
    """
    Log a metric event for tool activity tracking.

    This function respects the FEATURE_METRICS_LOGGING_ENABLED setting.
    When disabled, no metrics are logged.

    Args:
        event_type: Type of event (e.g., "tool_call", "root_changed")
        **kwargs: Additional metadata to log (only non-sensitive data)
    """
    # Import here to avoid circular dependencies
    from fsbox.core.log_sanitizer import sanitize_for_logging
    from fsbox.modules.config import config_manager

    if not config_manager.app_settings.feature_metrics_logging_enabled:
        return

    parts = [f"[METRIC] {event_type}"]

    if kwargs:
        metadata_parts = [
            f"{key}={sanitize_for_logging(value)}"
            for key, value in kwargs.items()
        ]
        parts.append(" ".join(metadata_parts))

    logger.info(" ".join(parts))
