"""Exception hierarchy for tracksvg."""


class TrackSvgError(Exception):
    """Base exception for all tracksvg errors."""

    pass


class WaypointError(TrackSvgError):
    """Errors related to waypoint input or waypoint loops."""

    pass


class WaypointLoadError(WaypointError):
    """Error loading a waypoint file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load waypoints '{path}': {reason}")


class EmptyLoopError(WaypointError):
    """A waypoint loop has no points."""

    def __init__(self, source: str = "waypoint loop") -> None:
        self.source = source
        super().__init__(f"No waypoints in {source}")


class LoopTooShortError(WaypointError):
    """A waypoint loop has too few points to form a closed track."""

    def __init__(self, point_count: int, minimum: int) -> None:
        self.point_count = point_count
        self.minimum = minimum
        super().__init__(
            f"Waypoint loop needs at least {minimum} points, got {point_count}"
        )


class NonRectilinearError(WaypointError):
    """A waypoint loop contains segments that are not horizontal or vertical."""

    def __init__(self, segment_indices: list[int]) -> None:
        self.segment_indices = segment_indices
        indices = ", ".join(str(i) for i in segment_indices)
        super().__init__(f"Segments are not axis-aligned: {indices}")


class RenderError(TrackSvgError):
    """Errors related to rendering or writing output."""

    pass


class OutputWriteError(RenderError):
    """Error writing the rendered document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
