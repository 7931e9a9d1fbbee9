"""Configuration management for tracksvg.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TrackConfig: Turn radius and outline styles
- CanvasConfig: Padding and canvas size
- ValidationConfig: Waypoint loop checks
- LogLevel: Accepted logging level names
- LoggingConfig: Logging settings
- TrackSvgSettings: Main application settings
"""

from tracksvg.config.settings import (
    CanvasConfig,
    LoggingConfig,
    LogLevel,
    TrackConfig,
    TrackSvgSettings,
    ValidationConfig,
)

__all__ = [
    "CanvasConfig",
    "LoggingConfig",
    "LogLevel",
    "TrackConfig",
    "TrackSvgSettings",
    "ValidationConfig",
]
