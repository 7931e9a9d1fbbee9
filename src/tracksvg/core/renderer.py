"""Track rendering: composing outlines into one drawing."""

from tracksvg.config import TrackConfig
from tracksvg.core.outline import build_outline
from tracksvg.domain import Primitive, TrackDrawing, WaypointLoop
from tracksvg.exceptions import LoopTooShortError

MIN_LOOP_POINTS = 3


class TrackRenderer:
    """Renders a waypoint loop as outer edge, track surface and centerline.

    The three outlines are drawn in that order so the surface covers the
    middle of the wider outer stroke and the centerline sits on top.

    Example:
        renderer = TrackRenderer(TrackConfig(turn_radius=10))
        drawing = renderer.render(loop)
    """

    def __init__(self, config: TrackConfig, min_points: int = MIN_LOOP_POINTS) -> None:
        """Initialize the renderer.

        Args:
            config: Turn radius and outline styles
            min_points: Smallest loop accepted by render()
        """
        self.config = config
        self.min_points = min_points

    def render(self, loop: WaypointLoop) -> TrackDrawing:
        """Render all outlines of the loop.

        Args:
            loop: Normalized waypoint loop

        Returns:
            TrackDrawing with outer, inner and centerline primitives

        Raises:
            LoopTooShortError: If the loop has fewer than min_points waypoints
        """
        if len(loop) < self.min_points:
            raise LoopTooShortError(len(loop), self.min_points)

        primitives: list[Primitive] = []
        for radius, style in self.config.outlines():
            primitives.extend(build_outline(loop, radius, style))

        return TrackDrawing(primitives=tuple(primitives))
