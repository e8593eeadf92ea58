"""
Centralized configuration management using Pydantic models.

This module provides a unified configuration system that:
- Uses pydantic-settings for type validation and environment variable loading
- Supports both .env files and direct environment variables
- Caches settings and allows them to be reloaded after the environment changes
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_BASE_DIR = "./uploads"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Server settings loaded from environment variables."""

    # Sandbox settings
    base_dir: str = Field(
        default=DEFAULT_BASE_DIR,
        description="Initial root directory that every tool path is resolved against",
        validation_alias="MCP_FILESYSTEM_BASE_DIR",
    )

    # Diagnostics
    debug_mode: bool = False

    # Logging settings
    log_level: str = "INFO"  # Override default logging level (DEBUG, INFO, WARNING, ERROR)
    app_log_dir: Optional[str] = Field(default=None, validation_alias="APP_LOG_DIR")
    feature_metrics_logging_enabled: bool = Field(
        False,
        description="Enable metrics logging for tool calls (tool name, outcome, timing only)",
        validation_alias=AliasChoices("FEATURE_METRICS_LOGGING_ENABLED"),
    )

    @field_validator("base_dir")
    @classmethod
    def validate_base_dir(cls, v: str) -> str:
        """Fall back to the default root when the variable is set but empty."""
        if not v or not v.strip():
            return DEFAULT_BASE_DIR
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "INFO").upper()
        if level not in LOG_LEVELS:
            logger.warning(f"Unknown LOG_LEVEL '{v}', falling back to INFO")
            return "INFO"
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "env_prefix": "",
    }


class ConfigManager:
    """Centralized configuration manager with proper error handling."""

    def __init__(self):
        self._app_settings: Optional[AppSettings] = None

    @property
    def app_settings(self) -> AppSettings:
        """Get application settings (cached)."""
        if self._app_settings is None:
            try:
                self._app_settings = AppSettings()
                logger.info("Application settings loaded successfully")
            except Exception as e:
                logger.error(f"Failed to load application settings: {e}", exc_info=True)
                # Ignore the environment and fall back to defaults
                self._app_settings = AppSettings.model_construct()
        return self._app_settings

    @property
    def log_file(self) -> Optional[Path]:
        """JSON-lines log file path, or None when file logging is disabled."""
        if not self.app_settings.app_log_dir:
            return None
        return Path(self.app_settings.app_log_dir) / "fsbox.jsonl"

    def reload_configs(self) -> None:
        """Drop cached settings so the next access re-reads the environment."""
        self._app_settings = None
        logger.info("Configuration cache cleared, will reload on next access")

    def validate_config(self) -> Dict[str, bool]:
        """Validate all configurations and return status."""
        status = {}

        try:
            settings = self.app_settings
            status["app_settings"] = True
        except Exception as e:
            logger.error(f"App settings validation failed: {e}", exc_info=True)
            status["app_settings"] = False
            return status

        base_dir = Path(settings.base_dir)
        status["base_dir"] = not base_dir.exists() or base_dir.is_dir()
        if not status["base_dir"]:
            logger.warning(f"Configured base directory is not a directory: {base_dir}")

        return status


# Global configuration manager instance
config_manager = ConfigManager()
