import pytest


class RecordingSurface:
    """A surface remembering every call made to it."""

    def __init__(self, dimensions=(80, 24)):
        self.dimensions = dimensions
        self.cells = []
        self.calls = []

    def get_dimensions(self):
        self.calls.append("get_dimensions")
        return self.dimensions

    def set_cell(self, col, row, color):
        self.cells.append((col, row, color))

    def clear(self):
        self.calls.append("clear")

    def hide_cursor(self):
        self.calls.append("hide_cursor")

    def show_cursor(self):
        self.calls.append("show_cursor")


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def unavailable():
    return RecordingSurface(dimensions=None)
