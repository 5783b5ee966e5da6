"""Straight-line path rasterization.

A segment is approximated by stepping a point from one endpoint toward the
other and painting the square pixel under it at every step. The number of
steps grows linearly with the segment's length.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import hypot, isfinite

from .cells import Color, draw_cell, saturate_u16
from .surface import TerminalSurface

__all__ = [
    "Point",
    "Segment",
    "StepProfile",
    "DEFAULT_PROFILE",
    "segment_points",
    "rasterize_segment",
    "draw_path",
]

Point = tuple[float, float]
Segment = tuple[Point, Point]


@dataclass(frozen=True)
class StepProfile:
    """How many steps are taken along a segment of a given length.

    ``min_steps`` steps are taken for a segment ``min_distance`` long and
    ``max_steps`` for one ``max_distance`` long. Other lengths are linearly
    extrapolated without clamping, so segments shorter than ``min_distance``
    get fewer than ``min_steps`` steps and may get none at all.

    Parameters
    ----------
    min_steps : int, default: 1000
        Steps taken along a segment of length ``min_distance``.
    max_steps : int, default: 100000
        Steps taken along a segment of length ``max_distance``.
    min_distance : float, default: 10.0
        Lower length of the calibration band.
    max_distance : float, default: 100.0
        Upper length of the calibration band.
    """

    min_steps: int = 1000
    """Steps taken along a segment of length `min_distance`."""
    max_steps: int = 100000
    """Steps taken along a segment of length `max_distance`."""
    min_distance: float = 10.0
    """Lower length of the calibration band."""
    max_distance: float = 100.0
    """Upper length of the calibration band."""

    def __post_init__(self) -> None:
        if self.max_distance == self.min_distance:
            raise ValueError("min_distance and max_distance must differ")

    def steps_for(self, distance: float) -> int:
        """Number of steps for a segment of length ``distance``. May be negative.

        A non-finite step count (from an infinite or NaN ``distance``) is 0.
        """
        t = (distance - self.min_distance) / (self.max_distance - self.min_distance)
        steps = self.min_steps + t * (self.max_steps - self.min_steps)
        if not isfinite(steps):
            return 0
        return round(steps)


DEFAULT_PROFILE = StepProfile()


def segment_points(
    start: Point, end: Point, profile: StepProfile = DEFAULT_PROFILE
) -> Iterator[Point]:
    """Yield the points visited walking from ``start`` to ``end``.

    The start point is yielded first, followed by one point per step. Each is
    the previous point plus a fixed increment; accumulated floating-point error
    isn't corrected. A zero-length segment, one with no steps, or one whose
    length isn't finite yields only the start point.
    """
    ax, ay = start
    bx, by = end
    yield ax, ay

    distance = hypot(bx - ax, by - ay)
    if distance == 0:
        return
    steps = profile.steps_for(distance)
    if steps <= 0:
        return

    step_size = distance / steps
    dx = (bx - ax) / distance * step_size
    dy = (by - ay) / distance * step_size

    x, y = ax, ay
    for _ in range(steps):
        x += dx
        y += dy
        yield x, y


def rasterize_segment(
    start: Point, end: Point, profile: StepProfile = DEFAULT_PROFILE
) -> Iterator[tuple[int, int]]:
    """Yield the square pixels painted for the points of `segment_points`."""
    for x, y in segment_points(start, end, profile):
        yield saturate_u16(x), saturate_u16(y)


def draw_path(
    surface: TerminalSurface,
    segments: Iterable[Segment],
    color: Color,
    profile: StepProfile = DEFAULT_PROFILE,
) -> None:
    """Draw each segment in order with square pixels of ``color``.

    Parameters
    ----------
    surface : TerminalSurface
        Surface to paint.
    segments : Iterable[Segment]
        Pairs of endpoints. Coordinates should already be non-negative;
        negative ones saturate to 0.
    color : Color
        Color of the path.
    profile : StepProfile, default: DEFAULT_PROFILE
        Determines the number of steps per segment.

    Notes
    -----
    Long segments visit the same cell many times. Every visit is painted.
    """
    for start, end in segments:
        for x, y in segment_points(start, end, profile):
            draw_cell(surface, x, y, color)
