"""Outline construction around a closed waypoint loop.

An outline is one pass around the loop that emits, for every waypoint, the
trimmed straight segment leaving it and the quadratic arc rounding the
following corner. The arc's control point is the untrimmed waypoint, so the
curve hugs the original corner.
"""

from tracksvg.core.geometry import offset_segment
from tracksvg.domain import (
    CurvePrimitive,
    LinePrimitive,
    Primitive,
    StrokeStyle,
    WaypointLoop,
)
from tracksvg.exceptions import EmptyLoopError


def build_outline(
    loop: WaypointLoop, radius: float, style: StrokeStyle
) -> list[Primitive]:
    """Build the primitives of one outline around the loop.

    For each index i (wrapping modulo the loop length):
    1. Trim segment (i, i+1) by radius and emit it as a line.
    2. Emit an arc from the end of that line, controlled by waypoint i+1,
       to the start of trimmed segment (i+1, i+2).

    Exactly len(loop) lines and len(loop) curves are emitted, alternating,
    in traversal order. Loops with fewer than three points produce
    overlapping output; rejecting them is up to the caller.

    Args:
        loop: Closed waypoint loop
        radius: Corner radius (trim distance at each segment end)
        style: Style attached to every emitted primitive

    Returns:
        List of alternating LinePrimitive and CurvePrimitive

    Raises:
        EmptyLoopError: If the loop has no points
    """
    if len(loop) == 0:
        raise EmptyLoopError()

    primitives: list[Primitive] = []
    for i in range(len(loop)):
        line_start, line_end = offset_segment(loop.wrapped(i), loop.wrapped(i + 1), radius)
        primitives.append(LinePrimitive(line_start, line_end, style))

        corner = loop.wrapped(i + 1)
        arc_end, _ = offset_segment(corner, loop.wrapped(i + 2), radius)
        primitives.append(CurvePrimitive(line_end, corner, arc_end, style))

    return primitives
