"""SVG writer for rendered tracks.

This module provides the SvgWriter class for serializing a TrackDrawing into
an SVG 1.1 document.
"""

from pathlib import Path

from tracksvg.domain import CurvePrimitive, LinePrimitive, StrokeStyle, TrackDrawing
from tracksvg.exceptions import OutputWriteError

SVG_HEADER = (
    '<?xml version="1.0" standalone="no"?>\n'
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"\n'
    '  "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
    '<svg width="{width}" height="{height}" version="1.1"\n'
    '     xmlns="http://www.w3.org/2000/svg">\n'
)
SVG_FOOTER = "</svg>\n"


def format_number(value: float) -> str:
    """Format a coordinate with up to six significant digits."""
    return f"{value:g}"


def style_attributes(style: StrokeStyle) -> str:
    """Render a stroke style as SVG attributes.

    Examples:
        >>> style_attributes(StrokeStyle("red", 0.5, "0.5,2"))
        'stroke="red" stroke-dasharray="0.5,2" stroke-width="0.5"'
    """
    parts = [f'stroke="{style.color}"']
    if style.dasharray:
        parts.append(f'stroke-dasharray="{style.dasharray}"')
    parts.append(f'stroke-width="{format_number(style.width)}"')
    return " ".join(parts)


def line_element(line: LinePrimitive) -> str:
    """Serialize a line primitive as an SVG <line> element."""
    f = format_number
    return (
        f'<line x1="{f(line.start.x)}" y1="{f(line.start.y)}" '
        f'x2="{f(line.end.x)}" y2="{f(line.end.y)}" '
        f"{style_attributes(line.style)} />\n"
    )


def curve_element(curve: CurvePrimitive) -> str:
    """Serialize a curve primitive as an SVG <path> with a relative quadratic.

    The control point and end point of the "q" command are offsets from the
    curve start.
    """
    f = format_number
    start = curve.start
    control = curve.control - start
    end = curve.end - start
    return (
        f'<path d="M {f(start.x)} {f(start.y)} q '
        f'{f(control.x)} {f(control.y)} {f(end.x)} {f(end.y)}" '
        f'fill="none" {style_attributes(curve.style)} />\n'
    )


class SvgWriter:
    """Writes rendered tracks as SVG documents.

    Example:
        writer = SvgWriter(width=500, height=500)
        writer.write(drawing, Path("output.svg"))
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize the SVG writer.

        Args:
            width: Canvas width
            height: Canvas height
        """
        self.width = width
        self.height = height

    def to_svg(self, drawing: TrackDrawing) -> str:
        """Serialize a drawing to SVG markup.

        Args:
            drawing: Rendered track

        Returns:
            Complete SVG document
        """
        parts = [SVG_HEADER.format(width=self.width, height=self.height)]
        for primitive in drawing.primitives:
            if isinstance(primitive, LinePrimitive):
                parts.append(line_element(primitive))
            else:
                parts.append(curve_element(primitive))
        parts.append(SVG_FOOTER)
        return "".join(parts)

    def write(self, drawing: TrackDrawing, output_path: Path) -> None:
        """Write a drawing to an SVG file.

        Args:
            drawing: Rendered track
            output_path: Destination file

        Raises:
            OutputWriteError: If the file cannot be written
        """
        try:
            output_path.write_text(self.to_svg(drawing), encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), str(e)) from e
