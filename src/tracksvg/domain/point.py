"""Core geometric types for waypoint representation.

This module defines the fundamental types used throughout tracksvg:
- Point: An immutable 2D point
- Direction: Axis-aligned direction of a segment between two points
- WaypointLoop: A closed, read-only sequence of points
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from tracksvg.exceptions import EmptyLoopError


class Direction(Enum):
    """Direction of a segment on the canvas.

    Canvas convention: y grows downwards, so DOWN means increasing y.
    UNKNOWN covers diagonal segments and coincident points.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UNKNOWN = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in canvas units
        y: Y coordinate in canvas units
    """

    x: float
    y: float

    def __add__(self, other: Union["Point", tuple[float, float]]) -> "Point":
        dx, dy = _components(other)
        return Point(self.x + dx, self.y + dy)

    def __sub__(self, other: Union["Point", tuple[float, float]]) -> "Point":
        dx, dy = _components(other)
        return Point(self.x - dx, self.y - dy)


def _components(value: Union[Point, tuple[float, float]]) -> tuple[float, float]:
    if isinstance(value, Point):
        return value.x, value.y
    dx, dy = value
    return dx, dy


class WaypointLoop:
    """A closed loop of waypoints describing a track centerline.

    The loop is circular: index arithmetic wraps modulo its length, so the
    segment after the last waypoint leads back to the first one. Points are
    stored in a tuple and never mutated; transformations return new loops.

    Example:
        loop = WaypointLoop([Point(0, 0), Point(10, 0), Point(10, 10)])
        loop.wrapped(4)  # Point(10, 0)
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point]) -> None:
        """Initialize the loop.

        Args:
            points: Waypoints in traversal order

        Raises:
            EmptyLoopError: If no points are given
        """
        self._points: tuple[Point, ...] = tuple(points)
        if not self._points:
            raise EmptyLoopError()

    @property
    def points(self) -> tuple[Point, ...]:
        """Waypoints in traversal order."""
        return self._points

    def wrapped(self, index: int) -> Point:
        """Return the waypoint at index, wrapping around the loop."""
        return self._points[index % len(self._points)]

    def segments(self) -> Iterator[tuple[Point, Point]]:
        """Yield every segment of the loop, including last to first."""
        for i in range(len(self._points)):
            yield self.wrapped(i), self.wrapped(i + 1)

    def non_rectilinear_segments(self) -> list[int]:
        """Return indices of segments that are neither horizontal nor vertical.

        Segment i runs from waypoint i to waypoint i + 1 (wrapping). A segment
        whose endpoints coincide is also reported.
        """
        bad: list[int] = []
        for i, (p1, p2) in enumerate(self.segments()):
            if (p1.x == p2.x) == (p1.y == p2.y):
                bad.append(i)
        return bad

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the loop.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        xs = [p.x for p in self._points]
        ys = [p.y for p in self._points]
        return (min(xs), min(ys), max(xs), max(ys))

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WaypointLoop):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"WaypointLoop({list(self._points)!r})"
