"""Logging utilities for tracksvg."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_TAG = "_tracksvg_handler"


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    points_read: int = 0
    skipped_records: int = 0
    skipped_lines: list[tuple[int, str]] = field(default_factory=list)
    non_rectilinear: list[int] = field(default_factory=list)
    line_count: int = 0
    curve_count: int = 0
    canvas_size: tuple[int, int] = (0, 0)
    output_path: Path | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Handlers from an earlier call may point at closed streams
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("tracksvg")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking pipeline stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_points_loaded(
        self, source: str, count: int, skipped: list[tuple[int, str]]
    ) -> None:
        """Log waypoints read from input."""
        self._logger.info(
            "Waypoints loaded", source=source, points=count, skipped=len(skipped)
        )
        self._stats.points_read = count
        self._stats.skipped_records = len(skipped)
        self._stats.skipped_lines = list(skipped)

    def log_normalized(self, padding: float, bbox: tuple[float, float, float, float]) -> None:
        """Log the normalized bounding box."""
        self._logger.debug(
            "Waypoints normalized",
            padding=padding,
            min_x=bbox[0],
            min_y=bbox[1],
            max_x=bbox[2],
            max_y=bbox[3],
        )

    def log_non_rectilinear(self, segment_indices: list[int]) -> None:
        """Log segments that will be drawn untrimmed."""
        for idx in segment_indices:
            self._logger.warning("Segment is not axis-aligned", segment=idx)
        self._stats.non_rectilinear = list(segment_indices)

    def log_rendered(self, line_count: int, curve_count: int) -> None:
        """Log primitive counts of the rendered track."""
        self._logger.info("Track rendered", lines=line_count, curves=curve_count)
        self._stats.line_count = line_count
        self._stats.curve_count = curve_count

    def log_written(self, output_path: Path, canvas_size: tuple[int, int]) -> None:
        """Log the written output file."""
        self._logger.info(
            "SVG written",
            output=str(output_path),
            width=canvas_size[0],
            height=canvas_size[1],
        )
        self._stats.output_path = output_path
        self._stats.canvas_size = canvas_size

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
