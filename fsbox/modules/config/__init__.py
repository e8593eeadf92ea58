"""Configuration module."""

from .config_manager import AppSettings, ConfigManager, config_manager

__all__ = [
    "AppSettings",
    "ConfigManager",
    "config_manager",
]
