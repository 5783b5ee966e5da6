import curses
import io

import pytest

from terminal_pixels import __main__ as cli
from terminal_pixels import surface as surface_module
from terminal_pixels.cells import Color
from terminal_pixels.surface import AnsiSurface


@pytest.fixture
def stdout(monkeypatch, surface):
    """Route the ansi surface to a recording surface."""
    monkeypatch.setattr(cli, "AnsiSurface", lambda: surface)
    return surface


def test_fill_row(stdout):
    stdout.dimensions = (4, 2)
    assert cli.main(["fill", "row", "1", "ff0000"]) == 0
    red = Color(255, 0, 0)
    assert stdout.cells == [(0, 1, red), (0, 1, red), (1, 1, red), (2, 1, red)]
    assert stdout.calls[0] == "hide_cursor"
    assert stdout.calls[-1] == "show_cursor"


def test_fill_real_column(stdout):
    stdout.dimensions = (4, 2)
    cli.main(["fill", "column", "3", "00ff00", "--real"])
    assert [(col, row) for col, row, _ in stdout.cells] == [(3, 0), (3, 1)]


def test_clear_flag(stdout):
    cli.main(["--clear", "fill", "screen", "ffffff"])
    assert stdout.calls[0] == "clear"


def test_path(stdout):
    cli.main(["path", "0000ff", "2", "3", "2", "3"])
    blue = Color(0, 0, 255)
    assert stdout.cells == [(3, 3, blue), (4, 3, blue)]


def test_points(stdout):
    cli.main(["points", "0", "0", "1.5", "2.5", "--color", "#010203"])
    assert [(col, row) for col, row, _ in stdout.cells] == [
        (1, 1),
        (2, 1),
        (3, 3),
        (4, 3),
    ]


def test_random_seeded_is_reproducible(stdout):
    stdout.dimensions = (6, 2)
    cli.main(["random", "--seed", "3"])
    first = list(stdout.cells)
    stdout.cells.clear()
    cli.main(["random", "--seed", "3"])
    assert stdout.cells == first
    assert len(first) == 2 * 3 * 2


def test_random_row(stdout):
    stdout.dimensions = (6, 4)
    cli.main(["random", "--row", "2"])
    assert {row for _, row, _ in stdout.cells} == {2}


@pytest.mark.parametrize(
    "argv",
    [
        ["path", "ff0000", "1", "2", "3"],
        ["points", "1"],
        ["fill", "screen", "red"],
        [],
    ],
)
def test_bad_arguments(stdout, argv):
    with pytest.raises(SystemExit):
        cli.main(argv)
    assert stdout.cells == []


def test_ansi_surface_is_default(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr(cli, "AnsiSurface", lambda: AnsiSurface(stream))
    cli.main(["path", "ffffff", "0", "0", "0", "0"])
    assert "\x1b[48;2;255;255;255m" in stream.getvalue()


class Window:
    def __init__(self):
        self.writes = []
        self.refreshes = 0

    def addstr(self, row, col, text, attr=0):
        self.writes.append((row, col))

    def refresh(self):
        self.refreshes += 1

    def getmaxyx(self):
        return 2, 4


def test_curses_surface_refreshes_once(monkeypatch):
    window = Window()
    monkeypatch.setattr(curses, "wrapper", lambda func: func(window))
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    monkeypatch.setattr(curses, "color_pair", lambda pair: 0)
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(surface_module, "_IS_WINDOWS", True)
    cli.main(["--surface", "curses", "fill", "row", "0", "ff0000"])
    assert window.writes == [(0, 0), (0, 0), (0, 1), (0, 2)]
    assert window.refreshes == 1
