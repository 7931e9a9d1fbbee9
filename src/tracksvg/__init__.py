"""tracksvg - Render rectilinear racetrack waypoints as SVG.

tracksvg reads a closed loop of axis-aligned waypoints (a track centerline)
and draws it as a track with rounded corners: a dark outer edge, a light
inner surface and a dashed centerline.

Example:
    $ tracksvg points.csv -o track.svg

This will normalize the waypoints onto a padded canvas and write track.svg.
"""

__version__ = "0.1.0"
__author__ = "tracksvg contributors"

__all__ = ["__author__", "__version__"]
