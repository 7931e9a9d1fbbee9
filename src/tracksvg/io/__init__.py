"""Waypoint input and SVG output for tracksvg.

This module handles reading waypoints and writing rendered tracks. It keeps
file formats out of the geometry core.

Key responsibilities:
- Parse CSV waypoint files, skipping malformed records
- Collect waypoints interactively
- Serialize rendered tracks as SVG

Key classes:
- WaypointReader: Load waypoint loops from CSV
- SvgWriter: Save rendered tracks as SVG
"""

from tracksvg.io.reader import (
    WaypointReader,
    parse_fields,
    parse_point,
    prompt_waypoints,
)
from tracksvg.io.writer import SvgWriter

__all__ = [
    "SvgWriter",
    "WaypointReader",
    "parse_fields",
    "parse_point",
    "prompt_waypoints",
]
