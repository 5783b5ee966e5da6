"""Surfaces that cells are painted onto.

The drawing functions never touch the terminal directly; they are handed a
`TerminalSurface` and only call its methods. Three surfaces are provided:

- `AnsiSurface` writes cursor-movement and 24-bit background escape sequences.
- `CursesSurface` paints into a curses window using the nearest xterm-256 color.
- `BufferSurface` paints into a numpy array, useful off-screen and in tests.
"""

import curses
import logging
import os
import sys
from collections.abc import Callable
from platform import uname
from typing import TYPE_CHECKING, Protocol, TextIO, TypeVar

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from .cells import Color

__all__ = [
    "TerminalSurface",
    "AnsiSurface",
    "CursesSurface",
    "BufferSurface",
    "xterm_palette",
    "nearest_xterm",
    "query_dimensions",
]

logger = logging.getLogger(__name__)

_IS_WINDOWS: bool = uname().system == "Windows"

_CUBE_VALUES = (0, 95, 135, 175, 215, 255)
_ANSI_RGB = (
    (0, 0, 0),
    (128, 0, 0),
    (0, 128, 0),
    (128, 128, 0),
    (0, 0, 128),
    (128, 0, 128),
    (0, 128, 128),
    (192, 192, 192),
    (128, 128, 128),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (0, 0, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)

T = TypeVar("T")


class TerminalSurface(Protocol):
    """Anything cells can be painted onto."""

    def get_dimensions(self) -> tuple[int, int] | None:
        """Return ``(width, height)`` in real cells, or ``None`` if unknown."""

    def set_cell(self, col: int, row: int, color: "Color") -> None:
        """Paint the background of one real cell."""

    def clear(self) -> None:
        """Clear the whole surface."""

    def hide_cursor(self) -> None:
        """Hide the cursor."""

    def show_cursor(self) -> None:
        """Show the cursor."""


def xterm_palette() -> NDArray[np.int64]:
    """Return the RGB values of the 256 xterm colors as a ``(256, 3)`` array."""
    palette = np.zeros((256, 3), dtype=np.int64)
    palette[:16] = _ANSI_RGB
    cube = np.array(_CUBE_VALUES)
    index = np.arange(216)
    palette[16:232, 0] = cube[index // 36]
    palette[16:232, 1] = cube[index // 6 % 6]
    palette[16:232, 2] = cube[index % 6]
    palette[232:] = (8 + 10 * np.arange(24))[:, None]
    return palette


_XTERM_PALETTE = xterm_palette()


def nearest_xterm(color: "Color", ncolors: int = 256) -> int:
    """Return the index of the palette entry closest to ``color``.

    Parameters
    ----------
    color : Color
        Color to approximate.
    ncolors : int, default: 256
        Number of palette entries the terminal supports; only the first
        ``ncolors`` entries are considered.

    Returns
    -------
    int
        An xterm color index.
    """
    palette = _XTERM_PALETTE[: max(1, min(ncolors, 256))]
    distances = ((palette - np.asarray(color)) ** 2).sum(axis=1)
    return int(distances.argmin())


class AnsiSurface:
    """A surface writing ANSI escape sequences to a text stream.

    Parameters
    ----------
    stream : TextIO, default: sys.stdout
        Stream escape sequences are written to. Its file descriptor is also
        used to query the terminal size.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = sys.stdout if stream is None else stream

    def get_dimensions(self) -> tuple[int, int] | None:
        try:
            width, height = os.get_terminal_size(self.stream.fileno())
        except (AttributeError, OSError, ValueError):
            return None
        return width, height

    def set_cell(self, col: int, row: int, color: "Color") -> None:
        r, g, b = color
        # Escape sequence rows and columns are 1-based.
        self.stream.write(f"\x1b[{row + 1};{col + 1}H\x1b[48;2;{r};{g};{b}m \x1b[0m")
        self.stream.flush()

    def clear(self) -> None:
        self.stream.write("\x1b[2J\x1b[H")
        self.stream.flush()

    def hide_cursor(self) -> None:
        self.stream.write("\x1b[?25l")
        self.stream.flush()

    def show_cursor(self) -> None:
        self.stream.write("\x1b[?25h")
        self.stream.flush()


class CursesSurface:
    """A surface painting into a curses window.

    Colors are approximated with the nearest of the terminal's palette colors.
    A color pair is allocated the first time each palette index is used. Painted
    cells only show up on the terminal once `refresh` is called.

    Parameters
    ----------
    screen : curses.window
        The window to paint into.
    """

    def __init__(self, screen) -> None:
        self.screen = screen
        self._pairs: dict[int, int] = {}
        self._ncolors = 0
        self._npairs = 0
        if curses.has_colors():
            curses.start_color()
            self._ncolors = curses.COLORS
            self._npairs = curses.COLOR_PAIRS

    @classmethod
    def run(cls, func: Callable[["CursesSurface"], T]) -> T:
        """Call ``func`` with a surface on a fully initialized curses screen."""
        return curses.wrapper(lambda screen: func(cls(screen)))

    def _pair_for(self, color: "Color") -> int:
        if not self._ncolors:
            return 0
        index = nearest_xterm(color, self._ncolors)
        if index not in self._pairs:
            pair = len(self._pairs) + 1
            if pair >= self._npairs:
                return 0
            curses.init_pair(pair, index, index)
            self._pairs[index] = pair
        return self._pairs[index]

    def get_dimensions(self) -> tuple[int, int] | None:
        try:
            if _IS_WINDOWS:
                height, width = self.screen.getmaxyx()
            else:
                width, height = os.get_terminal_size()
                curses.resizeterm(height, width)
        except (OSError, curses.error):
            return None
        return width, height

    def set_cell(self, col: int, row: int, color: "Color") -> None:
        attr = curses.color_pair(self._pair_for(color))
        try:
            self.screen.addstr(row, col, " ", attr)
        except curses.error:
            # Off-screen writes and the lower-right corner are clipped.
            pass

    def refresh(self) -> None:
        """Show everything painted so far."""
        self.screen.refresh()

    def clear(self) -> None:
        self.screen.clear()
        self.screen.refresh()

    def hide_cursor(self) -> None:
        curses.curs_set(0)

    def show_cursor(self) -> None:
        curses.curs_set(1)


class BufferSurface:
    """An off-screen surface backed by a numpy array.

    Parameters
    ----------
    width : int
        Width in real cells.
    height : int
        Height in real cells.
    available : bool, default: True
        Whether dimensions are reported. Set to False to emulate a stream that
        isn't attached to a terminal.

    Attributes
    ----------
    buffer : NDArray[np.uint8]
        A ``(height, width, 3)`` array of cell colors.
    painted : NDArray[np.bool_]
        A ``(height, width)`` mask of cells painted since the last clear.
    cursor_visible : bool
        Whether the cursor is shown.
    """

    def __init__(self, width: int, height: int, available: bool = True) -> None:
        self.available = available
        self.cursor_visible = True
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Resize the surface, discarding its contents."""
        self.width = width
        self.height = height
        self.buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self.painted = np.zeros((height, width), dtype=bool)

    def get_dimensions(self) -> tuple[int, int] | None:
        if not self.available:
            return None
        return self.width, self.height

    def set_cell(self, col: int, row: int, color: "Color") -> None:
        if 0 <= col < self.width and 0 <= row < self.height:
            self.buffer[row, col] = color
            self.painted[row, col] = True

    def color_at(self, col: int, row: int) -> tuple[int, int, int] | None:
        """Color of a cell, or None if the cell hasn't been painted."""
        if not self.painted[row, col]:
            return None
        r, g, b = self.buffer[row, col].tolist()
        return r, g, b

    def clear(self) -> None:
        self.buffer[:] = 0
        self.painted[:] = False

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.cursor_visible = True

    def to_ansi(self) -> str:
        """Render the buffer as lines of ANSI-colored spaces."""
        lines = []
        for row, mask in zip(self.buffer, self.painted):
            cells = []
            for (r, g, b), painted in zip(row.tolist(), mask.tolist()):
                cells.append(f"\x1b[48;2;{r};{g};{b}m \x1b[0m" if painted else " ")
            lines.append("".join(cells))
        return "\n".join(lines)


def query_dimensions(surface: TerminalSurface) -> tuple[int, int] | None:
    """Ask ``surface`` for its size, logging a warning if it can't tell."""
    dimensions = surface.get_dimensions()
    if dimensions is None:
        logger.warning("Unable to get terminal size")
    return dimensions
