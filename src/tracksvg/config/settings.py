"""Configuration settings for tracksvg."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from tracksvg.domain import StrokeStyle


class TrackConfig(BaseModel):
    """Configuration for track geometry and outline styles.

    The outer edge is drawn as a dark stroke slightly wider than the light
    track surface drawn over it, which leaves a thin border on both sides.
    """

    turn_radius: float = Field(
        default=10.0,
        ge=0.0,
        description="Distance trimmed from each segment end before the corner arc",
    )
    track_width: float = Field(
        default=4.0,
        gt=0.0,
        description="Width of the track surface stroke",
    )
    line_thickness: float = Field(
        default=1.0,
        ge=0.0,
        description="Extra width of the outer edge stroke over the surface",
    )
    centerline_thickness: float = Field(
        default=0.5,
        gt=0.0,
        description="Width of the centerline stroke",
    )
    centerline_dash: str = Field(
        default="0.5,2",
        description="SVG dash pattern for the centerline",
    )
    outside_color: str = Field(default="black", description="Outer edge colour")
    inside_color: str = Field(default="white", description="Track surface colour")
    centerline_color: str = Field(default="red", description="Centerline colour")

    @property
    def outside_style(self) -> StrokeStyle:
        """Style of the outer boundary."""
        return StrokeStyle(
            color=self.outside_color,
            width=self.track_width + self.line_thickness,
        )

    @property
    def inside_style(self) -> StrokeStyle:
        """Style of the inner boundary (track surface)."""
        return StrokeStyle(color=self.inside_color, width=self.track_width)

    @property
    def centerline_style(self) -> StrokeStyle:
        """Style of the dashed centerline."""
        return StrokeStyle(
            color=self.centerline_color,
            width=self.centerline_thickness,
            dasharray=self.centerline_dash,
        )

    def outlines(self) -> list[tuple[float, StrokeStyle]]:
        """Radius and style of each outline, in drawing order."""
        return [
            (self.turn_radius, self.outside_style),
            (self.turn_radius, self.inside_style),
            (self.turn_radius, self.centerline_style),
        ]


class CanvasConfig(BaseModel):
    """Configuration for coordinate normalization and canvas size."""

    padding: float = Field(
        default=25.0,
        ge=0.0,
        description="Margin between the canvas edge and the nearest waypoint",
    )
    width: int = Field(default=500, gt=0, description="Canvas width")
    height: int = Field(default=500, gt=0, description="Canvas height")
    auto_size: bool = Field(
        default=False,
        description="Size the canvas to the track plus padding instead of width/height",
    )


class ValidationConfig(BaseModel):
    """Configuration for waypoint validation."""

    min_points: int = Field(
        default=3,
        ge=3,
        description="Minimum number of waypoints in a track loop",
    )
    strict: bool = Field(
        default=False,
        description="Reject loops with diagonal or zero-length segments",
    )


class LogLevel(str, Enum):
    """Logging level names accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console log output except errors",
    )


class TrackSvgSettings(BaseModel):
    """Main application settings."""

    track: TrackConfig = Field(default_factory=TrackConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
