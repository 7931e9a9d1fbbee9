"""Coordinate normalization for waypoint input.

Waypoints usually arrive in a Cartesian convention (y grows upwards) with an
arbitrary origin. SVG uses a top-left origin with y growing downwards, so the
loop is mirrored on the x axis and then shifted until the smallest
coordinate on each axis sits exactly at the padding margin.
"""

import math
from collections.abc import Iterable

from tracksvg.domain import Point, WaypointLoop
from tracksvg.exceptions import EmptyLoopError


def invert_y(points: Iterable[Point]) -> list[Point]:
    """Negate the y coordinate of every point."""
    return [Point(p.x, -p.y) for p in points]


def find_min_values(points: Iterable[Point]) -> tuple[float, float]:
    """Find the smallest x and y coordinates.

    Args:
        points: Points to scan

    Returns:
        Tuple of (min_x, min_y)

    Raises:
        EmptyLoopError: If there are no points
    """
    points = list(points)
    if not points:
        raise EmptyLoopError("point list")

    min_x = min(p.x for p in points)
    min_y = min(p.y for p in points)
    return (min_x, min_y)


def translate(points: Iterable[Point], dx: float, dy: float) -> list[Point]:
    """Shift every point by (dx, dy)."""
    return [p + (dx, dy) for p in points]


def normalize(points: Iterable[Point], padding: float) -> WaypointLoop:
    """Map waypoints onto the canvas coordinate system.

    Args:
        points: Raw waypoints in Cartesian convention
        padding: Margin for the smallest x and y after translation

    Returns:
        New WaypointLoop with y inverted and minima equal to padding

    Raises:
        EmptyLoopError: If there are no points

    Examples:
        >>> normalize([Point(0, 0), Point(10, 0), Point(10, 10)], 5).points
        (Point(x=5, y=15), Point(x=15, y=15), Point(x=15, y=5))
    """
    inverted = invert_y(points)
    min_x, min_y = find_min_values(inverted)
    return WaypointLoop(translate(inverted, -min_x + padding, -min_y + padding))


def fit_canvas(loop: WaypointLoop, padding: float) -> tuple[int, int]:
    """Canvas size that holds a normalized loop with padding on every side.

    Args:
        loop: Normalized loop (minima already at padding)
        padding: Margin to keep beyond the largest coordinates

    Returns:
        Tuple of (width, height), rounded up to whole units
    """
    _, _, max_x, max_y = loop.bounding_box()
    return (math.ceil(max_x + padding), math.ceil(max_y + padding))
