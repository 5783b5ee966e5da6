import pytest

from terminal_pixels.cells import (
    U16_MAX,
    CellAddress,
    Color,
    draw_cell,
    draw_real_cell,
    saturate_u16,
    square_pixel_cells,
)

RED = Color(255, 0, 0)


def test_square_pixel_examples():
    assert square_pixel_cells(1, 1) == ((1, 1), (2, 1))
    assert square_pixel_cells(0, 5) == ((0, 5), (0, 5))


@pytest.mark.parametrize("x", [0, 1, 2, 17, 1000, U16_MAX // 2])
def test_square_pixel_is_two_adjacent_cells_in_row(x):
    first, second = square_pixel_cells(x, 3)
    assert first.row == second.row == 3
    assert second.col == 2 * x
    assert first.col == max(2 * x - 1, 0)


def test_doubling_saturates():
    first, second = square_pixel_cells(U16_MAX, 0)
    assert second == CellAddress(U16_MAX, 0)
    assert first == CellAddress(U16_MAX - 1, 0)


def test_saturate_u16():
    assert saturate_u16(3.9) == 3
    assert saturate_u16(-0.5) == 0
    assert saturate_u16(-12) == 0
    assert saturate_u16(1e9) == U16_MAX


def test_draw_cell_paints_both_cells(surface):
    draw_cell(surface, 3, 2, RED)
    assert surface.cells == [(5, 2, RED), (6, 2, RED)]


def test_draw_real_cell_truncates(surface):
    draw_real_cell(surface, 4.7, 1.2, RED)
    assert surface.cells == [(4, 1, RED)]


def test_color_from_hex():
    assert Color.from_hex("#FF8000") == Color(255, 128, 0)
    assert Color.from_hex("00ff00") == Color(0, 255, 0)
    with pytest.raises(ValueError):
        Color.from_hex("fff")
    with pytest.raises(ValueError):
        Color.from_hex("gggggg")


def test_saturate_u16_non_finite():
    assert saturate_u16(float("nan")) == 0
    assert saturate_u16(float("inf")) == U16_MAX
    assert saturate_u16(float("-inf")) == 0


def test_draw_cell_non_finite(surface):
    draw_cell(surface, float("nan"), float("inf"), RED)
    assert surface.cells == [(0, U16_MAX, RED), (0, U16_MAX, RED)]
