"""Tests for domain models to verify they work correctly."""

import pytest

from tracksvg.domain import (
    CurvePrimitive,
    Direction,
    LinePrimitive,
    Point,
    StrokeStyle,
    TrackDrawing,
    WaypointLoop,
)
from tracksvg.exceptions import EmptyLoopError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_arithmetic(self) -> None:
        """Adding and subtracting steps and points returns new points."""
        p = Point(10, 20)
        assert p + (5, -5) == Point(15, 15)
        assert p - (5, -5) == Point(5, 25)
        assert p - Point(10, 20) == Point(0, 0)
        assert p == Point(10, 20)

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1, 2), Point(1.0, 2.0), Point(2, 1)}) == 2


class TestWaypointLoop:
    """Tests for WaypointLoop class."""

    def test_loop_creation(self) -> None:
        """Test basic loop creation."""
        loop = WaypointLoop([Point(0, 0), Point(100, 0), Point(100, 100)])
        assert len(loop) == 3
        assert loop[1] == Point(100, 0)
        assert list(loop) == [Point(0, 0), Point(100, 0), Point(100, 100)]

    def test_empty_loop_rejected(self) -> None:
        """An empty loop cannot be constructed."""
        with pytest.raises(EmptyLoopError):
            WaypointLoop([])

    def test_wrapped_index(self) -> None:
        """Indices past the end wrap back to the start."""
        loop = WaypointLoop([Point(0, 0), Point(10, 0), Point(10, 10)])
        assert loop.wrapped(3) == Point(0, 0)
        assert loop.wrapped(4) == Point(10, 0)
        assert loop.wrapped(-1) == Point(10, 10)

    def test_segments_close_the_loop(self) -> None:
        """The last segment runs from the last point back to the first."""
        loop = WaypointLoop([Point(0, 0), Point(10, 0), Point(10, 10)])
        segments = list(loop.segments())
        assert len(segments) == 3
        assert segments[-1] == (Point(10, 10), Point(0, 0))

    def test_non_rectilinear_segments(self) -> None:
        """Diagonal and zero-length segments are reported by index."""
        loop = WaypointLoop([Point(0, 0), Point(10, 0), Point(10, 0), Point(10, 10)])
        # 1: zero length, 3: (10,10) -> (0,0) diagonal
        assert loop.non_rectilinear_segments() == [1, 3]

    def test_rectilinear_square(self) -> None:
        """A square has no offending segments."""
        loop = WaypointLoop([Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        assert loop.non_rectilinear_segments() == []

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        loop = WaypointLoop([Point(10, 20), Point(100, 30), Point(50, 150)])
        assert loop.bounding_box() == (10, 20, 100, 150)

    def test_loop_is_read_only(self) -> None:
        """Points are exposed as a tuple."""
        source = [Point(0, 0), Point(10, 0), Point(10, 10)]
        loop = WaypointLoop(source)
        source.append(Point(0, 10))
        assert len(loop) == 3
        assert isinstance(loop.points, tuple)

    def test_loop_equality(self) -> None:
        """Loops with the same points compare equal."""
        a = WaypointLoop([Point(0, 0), Point(1, 0)])
        b = WaypointLoop([Point(0, 0), Point(1, 0)])
        assert a == b
        assert hash(a) == hash(b)


class TestPrimitives:
    """Tests for drawable primitives."""

    def test_direction_members(self) -> None:
        """All four axis directions plus UNKNOWN exist."""
        assert {d.name for d in Direction} == {"UP", "DOWN", "LEFT", "RIGHT", "UNKNOWN"}

    def test_line_length(self) -> None:
        """Line length is the Euclidean distance between endpoints."""
        style = StrokeStyle("black", 5)
        assert LinePrimitive(Point(10, 0), Point(90, 0), style).length() == 80
        assert LinePrimitive(Point(0, 0), Point(3, 4), style).length() == 5

    def test_drawing_partitions(self) -> None:
        """A drawing splits its primitives into lines and curves in order."""
        style = StrokeStyle("black", 1)
        line = LinePrimitive(Point(0, 0), Point(1, 0), style)
        curve = CurvePrimitive(Point(1, 0), Point(2, 0), Point(2, 1), style)
        drawing = TrackDrawing(primitives=(line, curve, line))

        assert len(drawing) == 3
        assert drawing.lines == [line, line]
        assert drawing.curves == [curve]
