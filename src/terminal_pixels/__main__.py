"""Draw from the command line.

Examples
--------
Fill the screen white, then draw a red diagonal::

    python -m terminal_pixels --clear fill screen ffffff
    python -m terminal_pixels path ff0000 0 0 40 20

Paint random colors for two seconds using curses::

    python -m terminal_pixels --surface curses --hold 2 random
"""

import argparse
import logging
import sys
import time
from collections.abc import Callable, Sequence

import numpy as np

from .cells import Color
from .centering import center_points
from .fill import (
    fill_column,
    fill_real_column,
    fill_row,
    fill_screen,
    random_colors,
    random_row,
    random_screen,
)
from .path import draw_path
from .points import DEFAULT_POINT_COLOR, map_points
from .surface import AnsiSurface, CursesSurface, TerminalSurface

logger = logging.getLogger("terminal_pixels")


def _color(text: str) -> Color:
    try:
        return Color.from_hex(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _pairs(values: Sequence[float], size: int, name: str) -> list[tuple]:
    if len(values) % size:
        raise argparse.ArgumentTypeError(
            f"{name} needs a multiple of {size} numbers, got {len(values)}"
        )
    return [tuple(values[i : i + size]) for i in range(0, len(values), size)]


def build_parser() -> argparse.ArgumentParser:
    """Return the command line parser."""
    parser = argparse.ArgumentParser(
        prog="terminal-pixels", description="Draw square pixels in the terminal."
    )
    parser.add_argument(
        "--surface",
        choices=("ansi", "curses"),
        default="ansi",
        help="how to draw (default: ansi)",
    )
    parser.add_argument(
        "--hold",
        type=float,
        default=0.0,
        metavar="SECONDS",
        help="seconds to wait after drawing",
    )
    parser.add_argument(
        "--clear", action="store_true", help="clear the screen before drawing"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    fill = commands.add_parser("fill", help="fill a row, column, or the screen")
    targets = fill.add_subparsers(dest="target", required=True)
    row = targets.add_parser("row", help="fill a row of square pixels")
    row.add_argument("y", type=int)
    row.add_argument("color", type=_color)
    column = targets.add_parser("column", help="fill a column")
    column.add_argument("x", type=int)
    column.add_argument("color", type=_color)
    column.add_argument(
        "--real", action="store_true", help="fill one real column, not a square one"
    )
    screen = targets.add_parser("screen", help="fill the whole screen")
    screen.add_argument("color", type=_color)

    path = commands.add_parser("path", help="draw line segments")
    path.add_argument("color", type=_color)
    path.add_argument(
        "coords", type=float, nargs="+", metavar="AX AY BX BY", help="segment endpoints"
    )

    points = commands.add_parser("points", help="plot unconnected points")
    points.add_argument("coords", type=float, nargs="+", metavar="X Y")
    points.add_argument("--color", type=_color, default=DEFAULT_POINT_COLOR)
    points.add_argument(
        "--center", action="store_true", help="center the points on the screen"
    )

    rand = commands.add_parser("random", help="fill with random colors")
    rand.add_argument("--row", type=int, help="only fill this row")
    rand.add_argument("--seed", type=int, help="seed for reproducible colors")

    commands.add_parser("clear", help="clear the screen")
    return parser


def _drawing(args: argparse.Namespace) -> Callable[[TerminalSurface], None]:
    """Return a function performing the requested drawing on a surface."""
    if args.command == "fill":
        if args.target == "row":
            return lambda surface: fill_row(surface, args.y, args.color)
        if args.target == "column":
            fill = fill_real_column if args.real else fill_column
            return lambda surface: fill(surface, args.x, args.color)
        return lambda surface: fill_screen(surface, args.color)

    if args.command == "path":
        segments = [((ax, ay), (bx, by)) for ax, ay, bx, by in args.segments]
        return lambda surface: draw_path(surface, segments, args.color)

    if args.command == "points":

        def plot(surface: TerminalSurface) -> None:
            coords = args.points
            if args.center:
                coords = center_points(surface, coords)
            map_points(surface, coords, args.color)

        return plot

    if args.command == "random":
        colors = random_colors(np.random.default_rng(args.seed))
        if args.row is not None:
            return lambda surface: random_row(surface, args.row, colors)
        return lambda surface: random_screen(surface, colors)

    return lambda surface: surface.clear()


def _run(
    surface: TerminalSurface,
    draw: Callable[[TerminalSurface], None],
    args: argparse.Namespace,
) -> None:
    if args.clear:
        surface.clear()
    surface.hide_cursor()
    try:
        draw(surface)
        if isinstance(surface, CursesSurface):
            surface.refresh()
        if args.hold > 0:
            time.sleep(args.hold)
    finally:
        surface.show_cursor()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``terminal-pixels`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "path":
            args.segments = _pairs(args.coords, 4, "path")
        elif args.command == "points":
            args.points = _pairs(args.coords, 2, "points")
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    draw = _drawing(args)
    logger.debug("drawing %s on %s surface", args.command, args.surface)
    if args.surface == "curses":
        CursesSurface.run(lambda surface: _run(surface, draw, args))
    else:
        _run(AnsiSurface(), draw, args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
