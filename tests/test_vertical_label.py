import pytest

from sigwidgets.vertical_label import VerticalLabel


def test_size_hint_is_transposed():
    label = VerticalLabel("Gain", 40, 12)
    assert label.size_hint() == (12, 40)
    assert label.minimum_size_hint() == (12, 40)


def test_text_rect_has_horizontal_text_size():
    label = VerticalLabel("Gain", 40, 12)
    _, _, w, h = label.text_rect(30, 90)
    assert (w, h) == (40, 12)


def test_text_rect_at_origin_when_widget_fits_exactly():
    label = VerticalLabel("Gain", 40, 12)
    x, y, _, _ = label.text_rect(12, 40)
    assert (x, y) == (0, 0)


def test_taller_widget_moves_text_left_in_rotated_frame():
    label = VerticalLabel("Gain", 40, 12)
    small_x = label.text_rect(12, 40)[0]
    tall_x = label.text_rect(12, 80)[0]
    assert tall_x < small_x


def test_negative_sizes_raise():
    with pytest.raises(ValueError):
        VerticalLabel("x", -1, 3)
    with pytest.raises(ValueError):
        VerticalLabel("x", 1, 3).text_rect(-5, 3)