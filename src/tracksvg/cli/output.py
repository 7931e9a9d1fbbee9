"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from tracksvg.domain import WaypointLoop

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]tracksvg[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_points(loop: WaypointLoop) -> None:
    """Print the normalized waypoints as a table.

    Args:
        loop: Waypoint loop to list
    """
    table = Table(title="Waypoints", show_edge=False)
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for i, point in enumerate(loop):
        table.add_row(str(i), f"{point.x:g}", f"{point.y:g}")
    console.print(table)


def print_warning(message: str) -> None:
    """Print a warning line.

    Args:
        message: Warning text
    """
    console.print(f"  [yellow]{SYM_WARN} {message}[/yellow]")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    points: int,
    lines: int,
    curves: int,
    canvas_size: tuple[int, int],
    skipped: int = 0,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        points: Number of waypoints rendered
        lines: Number of line elements written
        curves: Number of curve elements written
        canvas_size: Canvas (width, height)
        skipped: Number of malformed input records skipped
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({canvas_size[0]}×{canvas_size[1]})")
    console.print(line)

    skipped_style = "yellow" if skipped > 0 else "green"
    console.print(
        f"  {points} waypoints {SYM_DOT} {lines} lines {SYM_DOT} {curves} curves {SYM_DOT} "
        f"[{skipped_style}]{skipped} skipped[/{skipped_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
