import pytest

from sigwidgets.lcd import (
    LCD,
    MAX_DEFAULT,
    MAX_DIGITS,
    MIN_DEFAULT,
    Key,
    LCDGeometry,
    Segment,
    compute_geometry,
    segment_mask,
)


def test_segment_mask_one_and_eight():
    assert segment_mask("1") == Segment.TOP_RIGHT | Segment.BOTTOM_RIGHT
    assert segment_mask("8") == Segment.ALL_H | Segment.ALL_V
    assert segment_mask("-") == Segment.MIDDLE
    assert segment_mask(" ") == Segment.NONE


def test_segment_mask_zero_lacks_only_middle():
    assert segment_mask("0") | Segment.MIDDLE == segment_mask("8")
    assert not segment_mask("0") & Segment.MIDDLE


@pytest.mark.parametrize("symbol", list("0123456789"))
def test_digit_masks_within_seven_bits(symbol):
    mask = segment_mask(symbol)
    assert mask & ~Segment.ALL == 0
    assert mask != Segment.NONE


def test_segment_mask_unknown_symbol():
    with pytest.raises(ValueError):
        segment_mask("x")


def test_compute_geometry_invariants():
    geo = compute_geometry(300, 100, 1.0, 0.2, 0.9)
    assert isinstance(geo, LCDGeometry)
    assert geo.seg_box_length == pytest.approx(0.5 * 100 * 1.0)
    assert geo.seg_box_thickness == pytest.approx(geo.seg_box_length * 0.2)
    assert geo.seg_length == pytest.approx(geo.seg_box_length * 0.9)
    assert geo.seg_thickness == pytest.approx(geo.seg_box_thickness * 0.9)
    assert 2 * geo.margin + 2 * geo.seg_box_length + geo.seg_box_thickness == pytest.approx(100)
    assert geo.glyph_width == int(geo.seg_box_length + 2 * geo.seg_box_thickness)


def test_default_limits_and_clamping():
    lcd = LCD()
    assert lcd.value == 0
    assert lcd.set_value(10**15) is True
    assert lcd.value == MAX_DEFAULT
    lcd.set_value(-(10**15))
    assert lcd.value == MIN_DEFAULT


def test_set_value_reports_no_change():
    lcd = LCD(42)
    assert lcd.set_value(42) is False
    assert lcd.value == 42


def test_set_maximum_never_below_minimum():
    lcd = LCD(5, minimum=0, maximum=10)
    lcd.set_maximum(-3)
    assert lcd.maximum == lcd.minimum


def test_set_minimum_never_above_maximum_and_keeps_value():
    lcd = LCD(5, minimum=0, maximum=10)
    lcd.set_minimum(50)
    assert lcd.minimum == lcd.maximum
    assert lcd.value == 5
    lcd.set_value(5)
    assert lcd.value == lcd.maximum


def test_select_digit_clamps():
    lcd = LCD()
    assert lcd.select_digit(-5) == -1
    assert lcd.select_digit(100) == MAX_DIGITS - 1
    assert lcd.select_digit(3) == 3


def test_scroll_digit_adds_power_of_ten():
    lcd = LCD(123)
    assert lcd.scroll_digit(1, 1) is True
    assert lcd.value == 123 + 10
    assert lcd.selected == 1
    lcd.scroll_digit(2, -1)
    assert lcd.value == 123 + 10 - 100


def test_scroll_digit_on_negative_value():
    lcd = LCD(-50)
    lcd.scroll_digit(0, 1)
    assert lcd.value == -50 + 1


def test_scroll_digit_ignored_when_locked():
    lcd = LCD(7)
    lcd.toggle_lock()
    assert lcd.scroll_digit(0, 1) is False
    assert lcd.value == 7


def test_type_digit_replaces_and_moves_right():
    lcd = LCD(0)
    lcd.select_digit(2)
    assert lcd.press_key("7") is True
    assert lcd.value == 7 * 10**2
    assert lcd.selected == 1


def test_type_digit_on_negative_value():
    lcd = LCD(-45)
    lcd.select_digit(0)
    lcd.press_key(Key.DIGIT_3)
    assert lcd.value == -43


def test_type_digit_without_selection_does_nothing():
    lcd = LCD(9)
    lcd.press_key("1")
    assert lcd.value == 9


def test_plus_and_minus_keys():
    lcd = LCD(-12)
    lcd.press_key(Key.PLUS)
    assert lcd.value == 12
    lcd.press_key(Key.MINUS)
    assert lcd.value == -12


def test_lock_key_blocks_sign_change():
    lcd = LCD(12)
    lcd.press_key("L")
    assert lcd.locked is True
    lcd.press_key(Key.MINUS)
    assert lcd.value == 12


def test_arrow_keys_move_selection_and_scroll():
    lcd = LCD(100)
    lcd.press_key(Key.LEFT)
    lcd.press_key(Key.LEFT)
    assert lcd.selected == 1
    lcd.press_key(Key.UP)
    assert lcd.value == 100 + 10
    lcd.press_key(Key.RIGHT)
    lcd.press_key(Key.DOWN)
    assert lcd.value == 100 + 10 - 1


def test_unknown_key_not_handled():
    lcd = LCD(3)
    assert lcd.press_key("q") is False
    assert lcd.reverse_video is False


def test_displayed_symbols():
    assert LCD(-5).displayed_symbols() == "-5"
    assert LCD(0).displayed_symbols() == "0"
    lcd = LCD(5)
    lcd.select_digit(3)
    symbols = lcd.displayed_symbols()
    assert len(symbols) == 4
    assert symbols.strip() == "5"
    assert all(segment_mask(s) is not None for s in symbols)


def test_digit_at():
    assert LCD.digit_at(100 - 20 * 2.5, 100, 20) == 2
    assert LCD.digit_at(99, 100, 20) == 0


def test_digit_at_rejects_zero_glyph():
    with pytest.raises(ValueError):
        LCD.digit_at(10, 100, 0)