"""Core algorithms for tracksvg.

This module contains the track-outline geometry engine and the pipeline
around it:

- Segment geometry (direction classification, length trimming)
- Outline construction (trimmed lines plus corner arcs around the loop)
- Track rendering (outer edge, surface and centerline outlines)
- Coordinate normalization (y flip, padding translation)

The geometry functions are pure and stateless.

Key functions:
- classify_direction: Axis-aligned direction of a segment
- offset_segment: Trim a segment at both ends along its axis
- build_outline: One outline around a closed loop
- normalize: Map raw waypoints onto the canvas

Key classes:
- TrackRenderer: Composes the three outlines into a drawing
- TrackProcessor: Read, normalize, render and write pipeline
"""

from tracksvg.core.geometry import classify_direction, direction_step, offset_segment
from tracksvg.core.normalize import (
    find_min_values,
    fit_canvas,
    invert_y,
    normalize,
    translate,
)
from tracksvg.core.outline import build_outline
from tracksvg.core.processor import TrackProcessor
from tracksvg.core.renderer import MIN_LOOP_POINTS, TrackRenderer

__all__ = [
    "MIN_LOOP_POINTS",
    # Pipeline classes
    "TrackProcessor",
    # Renderer classes
    "TrackRenderer",
    # Functions
    "build_outline",
    "classify_direction",
    "direction_step",
    "find_min_values",
    "fit_canvas",
    "invert_y",
    "normalize",
    "offset_segment",
    "translate",
]
