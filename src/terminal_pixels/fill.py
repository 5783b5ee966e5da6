"""Row, column, and screen fills.

Every fill asks the surface for its size once, before painting anything. If the
size is unavailable a warning is logged and nothing is painted.
"""

from collections.abc import Callable

import numpy as np

from .cells import Color, draw_cell, draw_real_cell, square_pixel_cells
from .surface import TerminalSurface, query_dimensions

__all__ = [
    "ColorSource",
    "random_colors",
    "fill_row",
    "fill_real_column",
    "fill_column",
    "fill_screen",
    "random_row",
    "random_screen",
]

ColorSource = Callable[[], Color]
"""A zero-argument callable producing the next color to paint."""


def random_colors(rng: np.random.Generator | None = None) -> ColorSource:
    """Return a color source sampling each channel uniformly from 0-255.

    Parameters
    ----------
    rng : np.random.Generator | None, default: None
        Random generator to draw from. A fresh, unseeded generator is used if
        not given.
    """
    if rng is None:
        rng = np.random.default_rng()

    def next_color() -> Color:
        r, g, b = rng.integers(0, 256, size=3).tolist()
        return Color(r, g, b)

    return next_color


def _paint_row(
    surface: TerminalSurface, width: int, y: int, colors: ColorSource
) -> None:
    for x in range(width // 2):
        draw_cell(surface, x, y, colors())


def _paint_real_column(
    surface: TerminalSurface, height: int, x: int, color: Color
) -> None:
    for y in range(height):
        draw_real_cell(surface, x, y, color)


def fill_row(surface: TerminalSurface, y: int, color: Color) -> None:
    """Fill row ``y`` with square pixels of ``color``."""
    if dimensions := query_dimensions(surface):
        _paint_row(surface, dimensions[0], y, lambda: color)


def fill_real_column(surface: TerminalSurface, x: int, color: Color) -> None:
    """Fill real column ``x`` with ``color``, top to bottom."""
    if dimensions := query_dimensions(surface):
        _paint_real_column(surface, dimensions[1], x, color)


def fill_column(surface: TerminalSurface, x: int, color: Color) -> None:
    """Fill the two real columns of square-pixel column ``x`` with ``color``."""
    if dimensions := query_dimensions(surface):
        for col, _ in square_pixel_cells(x, 0):
            _paint_real_column(surface, dimensions[1], col, color)


def fill_screen(surface: TerminalSurface, color: Color) -> None:
    """Fill every row of the surface with ``color``."""
    if dimensions := query_dimensions(surface):
        width, height = dimensions
        for y in range(height):
            _paint_row(surface, width, y, lambda: color)


def random_row(
    surface: TerminalSurface, y: int, colors: ColorSource | None = None
) -> None:
    """Fill row ``y`` with square pixels, each a new color from ``colors``.

    Parameters
    ----------
    surface : TerminalSurface
        Surface to paint.
    y : int
        Row to fill.
    colors : ColorSource | None, default: None
        Source of colors. Defaults to `random_colors()`.
    """
    if colors is None:
        colors = random_colors()
    if dimensions := query_dimensions(surface):
        _paint_row(surface, dimensions[0], y, colors)


def random_screen(surface: TerminalSurface, colors: ColorSource | None = None) -> None:
    """Fill the whole surface with square pixels, each a new color from ``colors``."""
    if colors is None:
        colors = random_colors()
    if dimensions := query_dimensions(surface):
        width, height = dimensions
        for y in range(height):
            _paint_row(surface, width, y, colors)
