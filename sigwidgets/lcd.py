"""Seven-segment numeric display model: digit editing, limits and layout."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

MAX_DIGITS = 11
MAX_DEFAULT = 99_999_999_999
MIN_DEFAULT = -99_999_999_999
BLINKING_INTERVAL_MS = 250
DEFAULT_BACKGROUND_COLOR = (0x90, 0xB1, 0x56)
DEFAULT_FOREGROUND_COLOR = (0, 0, 0)
DEFAULT_ZOOM = 0.707
DEFAULT_THICKNESS = 0.2
DEFAULT_SEG_SCALE = 0.9


class Segment(enum.IntFlag):
    """The seven segments of a glyph, as bits."""

    NONE = 0
    TOP = 1
    MIDDLE = 2
    BOTTOM = 4
    TOP_LEFT = 8
    BOTTOM_LEFT = 16
    TOP_RIGHT = 32
    BOTTOM_RIGHT = 64

    ALL_H = TOP | MIDDLE | BOTTOM
    ALL_V = TOP_LEFT | BOTTOM_LEFT | TOP_RIGHT | BOTTOM_RIGHT
    ALL = ALL_H | ALL_V


_S = Segment

_SYMBOL_MASKS = {
    "0": _S.ALL & ~_S.MIDDLE,
    "1": _S.TOP_RIGHT | _S.BOTTOM_RIGHT,
    "2": _S.ALL & ~_S.TOP_LEFT & ~_S.BOTTOM_RIGHT,
    "3": _S.ALL & ~_S.TOP_LEFT & ~_S.BOTTOM_LEFT,
    "4": _S.TOP_RIGHT | _S.BOTTOM_RIGHT | _S.TOP_LEFT | _S.MIDDLE,
    "5": _S.ALL & ~_S.TOP_RIGHT & ~_S.BOTTOM_LEFT,
    "6": _S.ALL & ~_S.TOP_RIGHT,
    "7": _S.TOP_LEFT | _S.TOP | _S.TOP_RIGHT | _S.BOTTOM_RIGHT,
    "8": _S.ALL_H | _S.ALL_V,
    "9": _S.ALL & ~_S.BOTTOM_LEFT,
    "-": _S.MIDDLE,
    " ": _S.NONE,
}


class Key(enum.Enum):
    """Keys understood by the display."""

    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    PLUS = "+"
    MINUS = "-"
    LOCK = "l"
    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"

    @property
    def digit(self) -> int | None:
        return int(self.value) if self.value.isdigit() else None


@dataclass(frozen=True)
class LCDGeometry:
    """Sizes derived from the widget area and the segment style."""

    width: int
    height: int
    seg_box_length: float
    seg_box_thickness: float
    seg_length: float
    seg_thickness: float
    margin: float
    glyph_width: int


def segment_mask(symbol: str) -> Segment:
    """Return the lit segments for a digit, '-' or ' '."""
    try:
        return _SYMBOL_MASKS[symbol]
    except KeyError:
        raise ValueError(f"no glyph for symbol {symbol!r}") from None


def compute_geometry(
    width: int,
    height: int,
    zoom: float = DEFAULT_ZOOM,
    thickness: float = DEFAULT_THICKNESS,
    seg_scale: float = DEFAULT_SEG_SCALE,
) -> LCDGeometry:
    """Compute segment and glyph sizes for a display of the given size."""
    box_length = 0.5 * height * zoom
    box_thickness = box_length * thickness
    return LCDGeometry(
        width=width,
        height=height,
        seg_box_length=box_length,
        seg_box_thickness=box_thickness,
        seg_length=box_length * seg_scale,
        seg_thickness=box_thickness * seg_scale,
        margin=0.5 * (height - 2 * box_length - box_thickness),
        glyph_width=int(box_length + 2 * box_thickness),
    )


class LCD:
    """An integer display edited digit by digit, with bounds and a lock."""

    def __init__(
        self,
        value: int = 0,
        minimum: int = MIN_DEFAULT,
        maximum: int = MAX_DEFAULT,
    ) -> None:
        self.maximum = maximum
        self.minimum = min(minimum, maximum)
        self.value = 0
        self.locked = False
        self.selected = -1
        self.reverse_video = False
        self.zoom = DEFAULT_ZOOM
        self.thickness = DEFAULT_THICKNESS
        self.seg_scale = DEFAULT_SEG_SCALE
        self.set_value(value)

    def set_value(self, value: int) -> bool:
        """Set the value, clamped to the limits. Return whether it changed."""
        value = max(self.minimum, min(int(value), self.maximum))
        if value != self.value:
            self.value = value
            return True
        return False

    def set_minimum(self, minimum: int) -> None:
        """Set the lower limit, never above the upper one.

        The current value is left as it is; the next set_value clamps it.
        """
        self.minimum = min(minimum, self.maximum)

    def set_maximum(self, maximum: int) -> None:
        """Set the upper limit, never below the lower one.

        The current value is left as it is; the next set_value clamps it.
        """
        self.maximum = max(maximum, self.minimum)

    def select_digit(self, digit: int) -> int:
        """Select a digit position (0 is the units), clamped; return it."""
        if digit < 0:
            self.selected = -1
        elif digit >= MAX_DIGITS:
            self.selected = MAX_DIGITS - 1
        else:
            self.selected = digit
        return self.selected

    def scroll_digit(self, digit: int, delta: int) -> bool:
        """Select a digit and add delta to it. Return whether the value changed."""
        if digit >= MAX_DIGITS:
            return False
        self.select_digit(digit)
        if self.selected < 0 or self.locked:
            return False
        return self.set_value(self.value + delta * 10 ** self.selected)

    def toggle_lock(self) -> bool:
        """Flip the lock and return the new state."""
        self.locked = not self.locked
        return self.locked

    def press_key(self, key: Union[Key, str]) -> bool:
        """Handle a key press. Return whether the key was recognised."""
        if not isinstance(key, Key):
            try:
                key = Key(str(key).lower())
            except ValueError:
                return False

        if key is Key.RIGHT:
            self.select_digit(self.selected - 1)
        elif key is Key.LEFT:
            self.select_digit(self.selected + 1)
        elif key is Key.UP:
            self.scroll_digit(self.selected, 1)
        elif key is Key.DOWN:
            self.scroll_digit(self.selected, -1)
        elif key is Key.PLUS:
            if not self.locked:
                self.set_value(abs(self.value))
        elif key is Key.MINUS:
            if not self.locked:
                self.set_value(-self.value)
        elif key is Key.LOCK:
            self.toggle_lock()
        else:
            self._type_digit(key.digit)

        self.reverse_video = True
        return True

    def _type_digit(self, digit: int) -> None:
        if self.selected == -1 or self.locked:
            return
        negative = self.value < 0
        magnitude = abs(self.value)
        mult = 10 ** self.selected
        magnitude -= ((magnitude // mult) % 10) * mult
        magnitude += digit * mult
        self.set_value(-magnitude if negative else magnitude)
        self.select_digit(self.selected - 1)

    def displayed_symbols(self) -> str:
        """The symbols shown, left to right, for a focused display.

        A selected position beyond the last digit shows as a blank cell,
        and a minus sign is placed left of everything else.
        """
        text = str(abs(self.value))
        if self.selected >= len(text):
            text = " " * (self.selected + 1 - len(text)) + text
        if self.value < 0:
            text = "-" + text
        return text

    @staticmethod
    def digit_at(x: float, width: int, glyph_width: int) -> int:
        """Digit position under horizontal coordinate x (0 is rightmost)."""
        if glyph_width <= 0:
            raise ValueError("glyph width must be positive")
        return int((width - x) / glyph_width)