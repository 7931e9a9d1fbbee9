"""Pipeline orchestration for rendering a track file.

This module coordinates the full workflow: read waypoints, normalize them
onto the canvas, check the loop, render the outlines and write the SVG.

Key components:
- TrackProcessor: Main orchestrator class
"""

import time
from collections.abc import Iterable
from pathlib import Path

from tracksvg.config import TrackSvgSettings
from tracksvg.core.normalize import fit_canvas, normalize
from tracksvg.core.renderer import TrackRenderer
from tracksvg.domain import Point, TrackDrawing, WaypointLoop
from tracksvg.exceptions import NonRectilinearError
from tracksvg.io import SvgWriter, WaypointReader
from tracksvg.utils import RenderLogger, RenderStats, configure_logging


class TrackProcessor:
    """Orchestrates rendering of a waypoint loop to SVG.

    Manages the complete workflow:
    1. Load waypoints (file or caller-supplied)
    2. Normalize coordinates (flip y, translate to padding)
    3. Report or reject non-axis-aligned segments
    4. Render outer edge, surface and centerline
    5. Save the SVG document

    Example:
        settings = TrackSvgSettings()
        processor = TrackProcessor(settings)
        stats = processor.process(
            input_path=Path("points.csv"),
            output_path=Path("output.svg"),
        )
    """

    def __init__(self, config: TrackSvgSettings) -> None:
        """Initialize track processor with configuration.

        Args:
            config: Settings for track styles, canvas, validation and logging
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level.value,
            file_level=config.logging.file_log_level.value,
            quiet=config.logging.quiet,
        )
        self.renderer = TrackRenderer(
            config.track, min_points=config.validation.min_points
        )
        self.last_loop: WaypointLoop | None = None

    def process(self, input_path: Path, output_path: Path) -> RenderStats:
        """Render a CSV waypoint file to SVG.

        Args:
            input_path: CSV file with one "x,y" waypoint per line
            output_path: Destination SVG file

        Returns:
            RenderStats with counts, canvas size and timing

        Raises:
            WaypointLoadError: If the input file cannot be read
            EmptyLoopError: If the file holds no valid waypoints
            LoopTooShortError: If the loop has too few waypoints
            NonRectilinearError: If strict validation is on and a segment is diagonal
            OutputWriteError: If the SVG cannot be written
        """
        start_time = time.time()
        render_logger = RenderLogger(self.logger)

        self.logger.info(
            "Starting track rendering",
            input=str(input_path),
            output=str(output_path),
        )

        reader = WaypointReader(input_path)
        raw = reader.read()
        render_logger.log_points_loaded(str(input_path), len(raw), reader.skipped)

        return self._run(raw, output_path, render_logger, start_time)

    def process_loop(self, points: Iterable[Point], output_path: Path) -> RenderStats:
        """Render waypoints supplied by the caller (e.g. typed interactively).

        Args:
            points: Raw waypoints in Cartesian convention
            output_path: Destination SVG file

        Returns:
            RenderStats with counts, canvas size and timing
        """
        start_time = time.time()
        render_logger = RenderLogger(self.logger)

        raw = WaypointLoop(points)
        render_logger.log_points_loaded("input", len(raw), [])

        return self._run(raw, output_path, render_logger, start_time)

    def render(self, raw: WaypointLoop) -> tuple[WaypointLoop, TrackDrawing]:
        """Normalize and render a loop without writing it.

        Returns:
            Tuple of (normalized loop, drawing)
        """
        loop = normalize(raw, self.config.canvas.padding)
        return loop, self.renderer.render(loop)

    def canvas_size(self, loop: WaypointLoop) -> tuple[int, int]:
        """Canvas size for a normalized loop under the current settings."""
        canvas = self.config.canvas
        if canvas.auto_size:
            return fit_canvas(loop, canvas.padding)
        return (canvas.width, canvas.height)

    def _run(
        self,
        raw: WaypointLoop,
        output_path: Path,
        render_logger: RenderLogger,
        start_time: float,
    ) -> RenderStats:
        loop = normalize(raw, self.config.canvas.padding)
        self.last_loop = loop
        render_logger.log_normalized(self.config.canvas.padding, loop.bounding_box())

        bad_segments = loop.non_rectilinear_segments()
        if bad_segments:
            render_logger.log_non_rectilinear(bad_segments)
            if self.config.validation.strict:
                raise NonRectilinearError(bad_segments)

        drawing = self.renderer.render(loop)
        render_logger.log_rendered(len(drawing.lines), len(drawing.curves))

        width, height = self.canvas_size(loop)
        SvgWriter(width, height).write(drawing, output_path)
        render_logger.log_written(output_path, (width, height))

        stats = render_logger.stats
        stats.start_time = start_time
        stats.end_time = time.time()
        return stats
