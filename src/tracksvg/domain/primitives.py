"""Drawable primitives produced by the outline builder.

This module defines the output types of the geometry core:
- StrokeStyle: Rendering attributes carried through the geometry layer
- LinePrimitive: A straight, trimmed piece of an outline
- CurvePrimitive: A quadratic corner arc bridging two lines
- TrackDrawing: The ordered primitives of a rendered track
"""

from dataclasses import dataclass, field
from typing import Union

from tracksvg.domain.point import Point


@dataclass(frozen=True, slots=True)
class StrokeStyle:
    """Stroke attributes for one outline.

    The geometry core passes styles through without looking at them; only
    the SVG writer interprets the fields.

    Attributes:
        color: Stroke colour (any SVG colour value)
        width: Stroke width in canvas units
        dasharray: Optional SVG dash pattern, e.g. "0.5,2"
    """

    color: str
    width: float
    dasharray: str | None = None


@dataclass(frozen=True, slots=True)
class LinePrimitive:
    """A straight line between two points.

    Attributes:
        start: First endpoint
        end: Second endpoint
        style: Stroke style for the line
    """

    start: Point
    end: Point
    style: StrokeStyle

    def length(self) -> float:
        """Euclidean length of the line."""
        return ((self.end.x - self.start.x) ** 2 + (self.end.y - self.start.y) ** 2) ** 0.5


@dataclass(frozen=True, slots=True)
class CurvePrimitive:
    """A quadratic Bezier arc rounding one corner of an outline.

    Attributes:
        start: Arc start (end of the preceding trimmed line)
        control: Control point, always the original waypoint at the corner
        end: Arc end (start of the following trimmed line)
        style: Stroke style for the arc
    """

    start: Point
    control: Point
    end: Point
    style: StrokeStyle


Primitive = Union[LinePrimitive, CurvePrimitive]


@dataclass(frozen=True)
class TrackDrawing:
    """The rendered track: primitives in drawing order.

    Earlier primitives are painted first, so later outlines layer on top.

    Attributes:
        primitives: Lines and curves in emission order
    """

    primitives: tuple[Primitive, ...] = field(default_factory=tuple)

    @property
    def lines(self) -> list[LinePrimitive]:
        """All line primitives, in order."""
        return [p for p in self.primitives if isinstance(p, LinePrimitive)]

    @property
    def curves(self) -> list[CurvePrimitive]:
        """All curve primitives, in order."""
        return [p for p in self.primitives if isinstance(p, CurvePrimitive)]

    def __len__(self) -> int:
        return len(self.primitives)
