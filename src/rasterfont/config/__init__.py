"""Configuration management for rasterfont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RasterConfig: Glyph rasterization settings
- LoggingConfig: Logging settings
- RasterFontSettings: Main application settings
"""

from rasterfont.config.settings import (
    LoggingConfig,
    RasterConfig,
    RasterFontSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "RasterConfig",
    "RasterFontSettings",
    "get_default_settings",
]
