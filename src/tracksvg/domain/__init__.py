"""Domain models for tracksvg.

This module contains the core domain models representing waypoints, waypoint
loops and the drawable primitives of a rendered track. All models are:

- Immutable (frozen dataclasses, tuple-backed loops)
- Independent of SVG serialization details

Key classes:
- Point: A 2D point
- Direction: Axis-aligned direction of a segment
- WaypointLoop: A closed loop of waypoints with wrapped indexing
- StrokeStyle: Stroke attributes passed through the geometry layer
- LinePrimitive / CurvePrimitive: Outline pieces
- TrackDrawing: Ordered primitives of a rendered track
"""

from tracksvg.domain.point import Direction, Point, WaypointLoop
from tracksvg.domain.primitives import (
    CurvePrimitive,
    LinePrimitive,
    Primitive,
    StrokeStyle,
    TrackDrawing,
)

__all__: list[str] = [
    # Enums
    "Direction",
    # Core types
    "Point",
    "WaypointLoop",
    "StrokeStyle",
    "LinePrimitive",
    "CurvePrimitive",
    "Primitive",
    "TrackDrawing",
]
