"""Waypoint readers for CSV files and interactive input.

This module provides the WaypointReader class for loading waypoint files and
prompt_waypoints() for building a loop from typed input.
"""

import csv
import math
from collections.abc import Callable, Sequence
from pathlib import Path

import structlog

from tracksvg.domain import Point, WaypointLoop
from tracksvg.exceptions import EmptyLoopError, WaypointLoadError

logger = structlog.get_logger("tracksvg.io")


def parse_fields(fields: Sequence[str]) -> Point | None:
    """Build a Point from the first two fields of a record.

    Fields beyond the second are ignored. Surrounding whitespace is allowed.

    Returns:
        Point, or None if the record does not start with two finite numbers
    """
    if len(fields) < 2:
        return None
    try:
        x = float(fields[0])
        y = float(fields[1])
    except ValueError:
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return Point(x, y)


def parse_point(text: str) -> Point | None:
    """Parse a typed "x y" or "x,y" entry into a Point."""
    return parse_fields(text.replace(",", " ").split())


class WaypointReader:
    """Loads a waypoint loop from a CSV file.

    Each line holds one waypoint as comma separated "x,y"; further columns
    are ignored. Blank lines are ignored. Lines without two finite numbers in
    the first two columns (headers, "1 2", "1;2", "nan,0") are skipped with a
    warning; the skipped records are kept in `skipped` for reporting.

    Example:
        reader = WaypointReader(Path("points.csv"))
        loop = reader.read()
        print(len(loop), reader.skipped)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the waypoint reader.

        Args:
            path: Path to the CSV file
        """
        self._path = path
        self.skipped: list[tuple[int, str]] = []

    @property
    def path(self) -> Path:
        """Path of the waypoint file."""
        return self._path

    def read(self) -> WaypointLoop:
        """Read all waypoints from the file.

        Returns:
            WaypointLoop with points in file order

        Raises:
            WaypointLoadError: If the file is missing or unreadable
            EmptyLoopError: If no line holds a valid waypoint
        """
        if not self._path.exists():
            raise WaypointLoadError(str(self._path), "file not found")

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise WaypointLoadError(str(self._path), str(e)) from e

        self.skipped = []
        points: list[Point] = []
        lines = text.splitlines()
        reader = csv.reader(lines)
        for row in reader:
            line_no = reader.line_num
            line = lines[line_no - 1]
            if not line.strip():
                continue
            point = parse_fields(row)
            if point is None:
                self.skipped.append((line_no, line))
                logger.warning("Skipping malformed waypoint", line=line_no, text=line)
                continue
            points.append(point)

        if not points:
            raise EmptyLoopError(str(self._path))

        logger.debug(
            "Waypoints read",
            path=str(self._path),
            points=len(points),
            skipped=len(self.skipped),
        )
        return WaypointLoop(points)


def prompt_waypoints(count: int, prompt: Callable[[str], str]) -> WaypointLoop:
    """Build a waypoint loop from interactive input.

    Asks for each point in turn; an entry that does not parse is asked for
    again.

    Args:
        count: Number of waypoints to ask for
        prompt: Callable that shows a message and returns the typed text

    Returns:
        WaypointLoop with the entered points

    Raises:
        EmptyLoopError: If count is less than 1
    """
    if count < 1:
        raise EmptyLoopError("interactive input")

    points: list[Point] = []
    while len(points) < count:
        text = prompt(f"Enter coordinates for point {len(points) + 1} (x y)")
        point = parse_point(text)
        if point is None:
            logger.warning("Invalid waypoint entry", text=text)
            continue
        points.append(point)

    return WaypointLoop(points)
