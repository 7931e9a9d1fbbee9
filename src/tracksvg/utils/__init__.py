"""Utility functions for tracksvg.

This module provides utility functions including:

- Logging setup and configuration
- Rendering statistics
"""

from tracksvg.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
