"""Square-pixel drawing for your terminal."""

import curses
import platform
import sys

from .cells import (
    U16_MAX,
    CellAddress,
    Color,
    draw_cell,
    draw_real_cell,
    square_pixel_cells,
)
from .centering import center_offset, center_offset_x, center_offset_y, center_points
from .fill import (
    fill_column,
    fill_real_column,
    fill_row,
    fill_screen,
    random_colors,
    random_row,
    random_screen,
)
from .path import (
    DEFAULT_PROFILE,
    StepProfile,
    draw_path,
    rasterize_segment,
    segment_points,
)
from .points import DEFAULT_POINT_COLOR, map_points
from .projection import Camera, map_points_3d
from .surface import AnsiSurface, BufferSurface, CursesSurface, TerminalSurface

__version__ = "0.1.0"

__all__ = [
    "U16_MAX",
    "CellAddress",
    "Color",
    "draw_cell",
    "draw_real_cell",
    "square_pixel_cells",
    "center_offset",
    "center_offset_x",
    "center_offset_y",
    "center_points",
    "fill_column",
    "fill_real_column",
    "fill_row",
    "fill_screen",
    "random_colors",
    "random_row",
    "random_screen",
    "DEFAULT_PROFILE",
    "StepProfile",
    "draw_path",
    "rasterize_segment",
    "segment_points",
    "DEFAULT_POINT_COLOR",
    "map_points",
    "Camera",
    "map_points_3d",
    "AnsiSurface",
    "BufferSurface",
    "CursesSurface",
    "TerminalSurface",
]


# Patching windows-curses's wrapper on 3.12 due to a bug.
# More info: https://github.com/zephyrproject-rtos/windows-curses/issues/50
if (
    platform.system() == "Windows"
    and sys.version_info.major == 3
    and sys.version_info.minor >= 12
):

    def _wrapper(func, *args, **kwargs):
        import _curses

        stdscr = None
        try:
            stdscr = _curses.initscr()
            for key, value in _curses.__dict__.items():
                if key.startswith("ACS_") or key in ("LINES", "COLS"):
                    setattr(curses, key, value)

            curses.noecho()
            curses.cbreak()

            try:
                curses.start_color()
            except _curses.error:
                pass

            stdscr.keypad(True)
            return func(stdscr, *args, **kwargs)
        finally:
            if stdscr is not None:
                stdscr.keypad(False)
                curses.echo()
                curses.nocbreak()
                curses.endwin()

    curses.wrapper = _wrapper
