"""Configuration management for bsptree.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TreeConfig: Tree construction settings (tolerance, split guard)
- SceneConfig: Scene generation settings
- LoggingConfig: Logging settings
- BSPSettings: Main application settings
"""

from bsptree.config.settings import (
    BSPSettings,
    LoggingConfig,
    SceneConfig,
    TreeConfig,
    get_default_settings,
)

__all__ = [
    "BSPSettings",
    "LoggingConfig",
    "SceneConfig",
    "TreeConfig",
    "get_default_settings",
]
