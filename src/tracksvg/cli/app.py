"""CLI application entry point for tracksvg.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from tracksvg import __version__
from tracksvg.cli.output import (
    console,
    print_error,
    print_header,
    print_points,
    print_step,
    print_success,
    print_warning,
)
from tracksvg.config import (
    CanvasConfig,
    LoggingConfig,
    LogLevel,
    TrackConfig,
    TrackSvgSettings,
    ValidationConfig,
)
from tracksvg.core import TrackProcessor
from tracksvg.exceptions import (
    NonRectilinearError,
    OutputWriteError,
    TrackSvgError,
    WaypointLoadError,
)
from tracksvg.io import prompt_waypoints

# Create the Typer app
app = typer.Typer(
    name="tracksvg",
    help="Render a closed loop of axis-aligned waypoints as an SVG racetrack.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]tracksvg[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    input_csv: Annotated[
        Path,
        typer.Argument(
            help="CSV file with one 'x,y' waypoint per line",
        ),
    ] = Path("points.csv"),
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path",
        ),
    ] = Path("output.svg"),
    radius: Annotated[
        float,
        typer.Option(
            "--radius",
            "-r",
            help="Corner radius (trim distance at each segment end)",
            min=0.0,
        ),
    ] = 10.0,
    padding: Annotated[
        float,
        typer.Option(
            "--padding",
            "-p",
            help="Margin between the canvas edge and the track",
            min=0.0,
        ),
    ] = 25.0,
    width: Annotated[
        int,
        typer.Option(
            "--width",
            help="Canvas width",
            min=1,
        ),
    ] = 500,
    height: Annotated[
        int,
        typer.Option(
            "--height",
            help="Canvas height",
            min=1,
        ),
    ] = 500,
    auto_size: Annotated[
        bool,
        typer.Option(
            "--auto-size",
            help="Fit the canvas to the track instead of --width/--height",
        ),
    ] = False,
    interactive: Annotated[
        bool,
        typer.Option(
            "--interactive",
            "-i",
            help="Type the waypoints instead of reading a CSV file",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on segments that are not horizontal or vertical",
        ),
    ] = False,
    show_points: Annotated[
        bool,
        typer.Option(
            "--show-points",
            help="List the normalized waypoints",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "ERROR",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render waypoints as a track with rounded corners and a dashed centerline.

    Waypoints are flipped to SVG orientation and shifted so the track sits
    PADDING units from the top-left corner of the canvas.

    Example:
        tracksvg points.csv -o track.svg
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        console_level = LogLevel(log_level.upper())
    except ValueError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    if not interactive and not input_csv.is_file():
        print_error(
            f"Input file not found: {input_csv}",
            details=f"The file '{input_csv}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = TrackSvgSettings(
        track=TrackConfig(turn_radius=radius),
        canvas=CanvasConfig(
            padding=padding,
            width=width,
            height=height,
            auto_size=auto_size,
        ),
        validation=ValidationConfig(strict=strict),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=LogLevel.INFO if verbose else console_level,
            quiet=quiet,
        ),
    )

    try:
        processor = TrackProcessor(settings)

        if interactive:
            count = typer.prompt("Enter the number of points", type=int)
            loop = prompt_waypoints(count, typer.prompt)
            if not quiet:
                print_step("Rendering")
            stats = processor.process_loop(loop, output)
        else:
            if not quiet:
                print_step(f"Reading {input_csv}")
            stats = processor.process(input_csv, output)

        if not quiet:
            for line_no, text in stats.skipped_lines:
                print_warning(f"Skipped line {line_no}: {escape(text)}")
            for idx in stats.non_rectilinear:
                print_warning(f"Segment {idx} is not axis-aligned; drawn untrimmed")
            if show_points and processor.last_loop is not None:
                print_points(processor.last_loop)
            print_success(
                output_path=str(output),
                total_time_s=stats.duration_seconds,
                points=stats.points_read,
                lines=stats.line_count,
                curves=stats.curve_count,
                canvas_size=stats.canvas_size,
                skipped=stats.skipped_records,
            )

    except WaypointLoadError as e:
        print_error(f"Could not load waypoints: {e.reason}")
        raise typer.Exit(code=1)
    except NonRectilinearError as e:
        print_error(str(e), details="Run without --strict to draw them untrimmed.")
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write SVG: {e.reason}")
        raise typer.Exit(code=1)
    except TrackSvgError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
