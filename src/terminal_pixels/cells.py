"""Square-pixel cell addressing.

Notes
-----
A terminal character cell is roughly twice as tall as it is wide. A "square
pixel" is approximated by painting two horizontally adjacent real cells; the
square pixel at column ``x`` covers real columns ``2x - 1`` and ``2x``.
"""

from math import isnan
from typing import NamedTuple

from .surface import TerminalSurface

__all__ = [
    "U16_MAX",
    "Color",
    "CellAddress",
    "saturate_u16",
    "square_pixel_cells",
    "draw_real_cell",
    "draw_cell",
]

U16_MAX: int = 0xFFFF
"""Largest addressable column or row."""


class Color(NamedTuple):
    """A 24-bit RGB color."""

    r: int
    """Red channel, 0-255."""
    g: int
    """Green channel, 0-255."""
    b: int
    """Blue channel, 0-255."""

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Parse a ``#RRGGBB`` or ``RRGGBB`` string.

        Raises
        ------
        ValueError
            If the string isn't six hex digits.
        """
        value = hex_str.strip().lstrip("#")
        if len(value) != 6:
            raise ValueError(f"expected six hex digits, got {hex_str!r}")
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


class CellAddress(NamedTuple):
    """A real terminal cell."""

    col: int
    row: int


def saturate_u16(value: float) -> int:
    """Truncate ``value`` toward zero and clamp it into ``[0, U16_MAX]``.

    Infinities clamp like any other out-of-range value and NaN becomes 0.
    """
    if isnan(value) or value < 0:
        return 0
    if value > U16_MAX:
        return U16_MAX
    return int(value)


def square_pixel_cells(x: int, y: int) -> tuple[CellAddress, CellAddress]:
    """Return the two real cells making up the square pixel at ``(x, y)``.

    Parameters
    ----------
    x : int
        Square-pixel column.
    y : int
        Row, used unchanged.

    Returns
    -------
    tuple[CellAddress, CellAddress]
        The cells at columns ``max(2x - 1, 0)`` and ``2x``. Doubling saturates
        at ``U16_MAX``.

    Examples
    --------
    >>> square_pixel_cells(1, 1)
    (CellAddress(col=1, row=1), CellAddress(col=2, row=1))
    >>> square_pixel_cells(0, 5)
    (CellAddress(col=0, row=5), CellAddress(col=0, row=5))
    """
    doubled = min(saturate_u16(x) * 2, U16_MAX)
    first = doubled - 1 if doubled > 0 else 0
    return CellAddress(first, y), CellAddress(doubled, y)


def draw_real_cell(surface: TerminalSurface, x: float, y: float, color: Color) -> None:
    """Paint a single real cell."""
    surface.set_cell(saturate_u16(x), saturate_u16(y), color)


def draw_cell(surface: TerminalSurface, x: float, y: float, color: Color) -> None:
    """Paint the square pixel at ``(x, y)``."""
    for col, row in square_pixel_cells(saturate_u16(x), saturate_u16(y)):
        surface.set_cell(col, row, color)
