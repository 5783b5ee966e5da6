"""Plotting of unconnected points."""

from collections.abc import Iterable
from math import floor, isfinite

from .cells import Color, draw_cell
from .surface import TerminalSurface

__all__ = ["DEFAULT_POINT_COLOR", "map_points"]

DEFAULT_POINT_COLOR = Color(100, 100, 255)


def _floor(value: float) -> float:
    # Non-finite values are left for the cell address to saturate.
    return floor(value) if isfinite(value) else value


def map_points(
    surface: TerminalSurface,
    coords: Iterable[tuple[float, float]],
    color: Color = DEFAULT_POINT_COLOR,
) -> None:
    """Paint one square pixel per point, in order.

    Each point ``(x, y)`` lands on square pixel ``(floor(x + 1), floor(y + 1))``,
    keeping a one-pixel margin from the top-left corner. Coordinates outside
    the addressable range, infinities included, saturate; NaN lands on 0.
    Nothing is drawn between points.
    """
    for x, y in coords:
        draw_cell(surface, _floor(x + 1.0), _floor(y + 1.0), color)
