"""Offsets that center a set of coordinates on the surface.

Horizontal offsets are taken from a quarter of the surface's width rather than
half of it since drawing happens in square pixels, each two real cells wide.

Integer coordinates are centered with integer (truncating) division; as soon as
a float is involved real division is used instead.
"""

from collections.abc import Iterable, Sequence
from numbers import Integral
from typing import Literal, TypeVar

from .surface import TerminalSurface, query_dimensions

__all__ = ["center_offset", "center_offset_x", "center_offset_y", "center_points"]

N = TypeVar("N", int, float)

_DIVISORS = {"x": 4, "y": 2}


def _offset(
    dimensions: tuple[int, int], base: N, coords: Sequence[N], axis: Literal["x", "y"]
) -> N:
    extent = max(coords) - min(coords) if coords else 0
    screen = dimensions[0] if axis == "x" else dimensions[1]
    divisor = _DIVISORS[axis]
    if isinstance(base, Integral) and all(isinstance(c, Integral) for c in coords):
        return base + screen // divisor - extent // 2
    return base + screen / divisor - extent / 2


def center_offset(
    surface: TerminalSurface, base: N, coords: Iterable[N], axis: Literal["x", "y"]
) -> N:
    """Shift ``base`` so that ``coords`` would be centered along ``axis``.

    Parameters
    ----------
    surface : TerminalSurface
        Surface whose size is centered on. Queried on every call.
    base : int | float
        Value to offset.
    coords : Iterable[int | float]
        Coordinates whose range is centered. An empty collection has range 0.
    axis : {"x", "y"}
        Axis to center along.

    Returns
    -------
    int | float
        ``base + width / 4 - range / 2`` for ``"x"`` and
        ``base + height / 2 - range / 2`` for ``"y"``, or ``base`` unchanged if the
        surface's size is unavailable.
    """
    if axis not in _DIVISORS:
        raise ValueError(f"axis must be 'x' or 'y', got {axis!r}")
    dimensions = query_dimensions(surface)
    if dimensions is None:
        return base
    return _offset(dimensions, base, list(coords), axis)


def center_offset_x(surface: TerminalSurface, base: N, coords: Iterable[N]) -> N:
    """Horizontal `center_offset`."""
    return center_offset(surface, base, coords, "x")


def center_offset_y(surface: TerminalSurface, base: N, coords: Iterable[N]) -> N:
    """Vertical `center_offset`."""
    return center_offset(surface, base, coords, "y")


def center_points(
    surface: TerminalSurface, points: Iterable[tuple[float, float]]
) -> list[tuple[float, float]]:
    """Translate ``points`` so their bounding box sits in the middle of the surface.

    Points are returned unchanged if the surface's size is unavailable.
    """
    points = list(points)
    dimensions = query_dimensions(surface)
    if dimensions is None or not points:
        return points

    xs = [float(x) for x, _ in points]
    ys = [float(y) for _, y in points]
    dx = _offset(dimensions, -min(xs), xs, "x")
    dy = _offset(dimensions, -min(ys), ys, "y")
    return [(x + dx, y + dy) for x, y in zip(xs, ys)]
