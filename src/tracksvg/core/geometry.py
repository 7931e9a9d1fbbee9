"""Geometric operations on axis-aligned track segments.

This module provides the segment-level building blocks of the outline
builder:
- Direction classification of a segment between two waypoints
- Trimming a segment by a distance at both ends along its own axis

All functions are pure and stateless. Coordinates are compared exactly, so
waypoints are expected to be pre-quantized (e.g. integer valued).
"""

from tracksvg.domain import Direction, Point

# Unit step along the segment axis for each direction (canvas y grows down).
_DIRECTION_STEPS: dict[Direction, tuple[float, float]] = {
    Direction.UP: (0.0, -1.0),
    Direction.DOWN: (0.0, 1.0),
    Direction.LEFT: (-1.0, 0.0),
    Direction.RIGHT: (1.0, 0.0),
    Direction.UNKNOWN: (0.0, 0.0),
}


def classify_direction(p1: Point, p2: Point) -> Direction:
    """Classify the direction of the segment from p1 to p2.

    Args:
        p1: Segment start
        p2: Segment end

    Returns:
        The axis-aligned direction, or Direction.UNKNOWN for diagonal
        segments and coincident points.

    Examples:
        >>> classify_direction(Point(0, 0), Point(10, 0))
        <Direction.RIGHT: 4>
        >>> classify_direction(Point(0, 10), Point(0, 0))
        <Direction.UP: 1>
        >>> classify_direction(Point(0, 0), Point(10, 10))
        <Direction.UNKNOWN: 5>
    """
    if p1.x < p2.x and p1.y == p2.y:
        return Direction.RIGHT
    if p1.x > p2.x and p1.y == p2.y:
        return Direction.LEFT
    if p1.x == p2.x and p1.y < p2.y:
        return Direction.DOWN
    if p1.x == p2.x and p1.y > p2.y:
        return Direction.UP
    return Direction.UNKNOWN


def direction_step(direction: Direction, distance: float) -> tuple[float, float]:
    """Return the (dx, dy) step of length distance along direction.

    UNKNOWN maps to a zero step.
    """
    ux, uy = _DIRECTION_STEPS[direction]
    return (ux * distance, uy * distance)


def offset_segment(p1: Point, p2: Point, distance: float) -> tuple[Point, Point]:
    """Trim a segment by distance at both ends, along its own axis.

    The start is moved forward from p1 and the end is moved back from p2, so
    the result is the original segment shortened by 2 * distance. This is a
    length trim, not a sideways offset: the trimmed ends meet a corner arc of
    the same radius. Diagonal or zero-length segments are returned untrimmed.

    Args:
        p1: Segment start
        p2: Segment end
        distance: Non-negative trim distance in canvas units

    Returns:
        Tuple of (line_start, line_end)

    Examples:
        >>> offset_segment(Point(0, 0), Point(100, 0), 10)
        (Point(x=10.0, y=0.0), Point(x=90.0, y=0.0))
    """
    step = direction_step(classify_direction(p1, p2), distance)
    return p1 + step, p2 - step
