import pytest

from heartbox.screen import Glyph, GridScreen, Style


def test_put_and_get_cell():
    screen = GridScreen(4, 6)
    screen.put(1, 2, Glyph.DIAMOND, Style.HEART)
    assert screen.get_cell(1, 2) == (Glyph.DIAMOND.value, Style.HEART)
    assert screen.find(Glyph.DIAMOND) == [(1, 2)]


@pytest.mark.parametrize("y, x", [(-1, 0), (0, -1), (4, 0), (0, 6)])
def test_put_and_get_reject_cells_off_grid(y, x):
    screen = GridScreen(4, 6)
    with pytest.raises(IndexError):
        screen.put(y, x, Glyph.BLANK)
    with pytest.raises(IndexError):
        screen.get_cell(y, x)


def test_write_text_clips_at_right_edge():
    screen = GridScreen(4, 6)
    screen.write_text(2, 3, "Q to quit")
    assert screen.row_text(2) == "   Q t"
    screen.write_text(3, 6, "ignored")
    assert screen.row_text(3) == "      "


@pytest.mark.parametrize("y, x", [(0, -1), (0, -6), (-1, 0), (4, 0)])
def test_write_text_rejects_negative_start_and_bad_rows(y, x):
    screen = GridScreen(4, 6)
    with pytest.raises(IndexError):
        screen.write_text(y, x, "Q")
    assert all(screen.row_text(row) == "      " for row in range(4))
