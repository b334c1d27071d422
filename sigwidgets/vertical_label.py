"""Label drawn rotated by 270 degrees, reading bottom to top."""

from __future__ import annotations

from typing import Tuple

Size = Tuple[int, int]
Rect = Tuple[int, int, int, int]


def _half(value: int) -> int:
    return int(value / 2)


class VerticalLabel:
    """A text label whose size hints are those of a horizontal one, transposed."""

    def __init__(self, text: str = "", text_width: int = 0, text_height: int = 0) -> None:
        if text_width < 0 or text_height < 0:
            raise ValueError("text size cannot be negative")
        self.text = text
        self.text_width = text_width
        self.text_height = text_height

    def size_hint(self) -> Size:
        """Preferred (width, height): the horizontal text size transposed."""
        return self.text_height, self.text_width

    def minimum_size_hint(self) -> Size:
        """Smallest (width, height): the horizontal text size transposed."""
        return self.text_height, self.text_width

    def text_rect(self, width: int, height: int) -> Rect:
        """Rectangle (x, y, w, h) the text is centred in, in rotated coordinates.

        The painter is translated down by the preferred height and rotated
        by 270 degrees before drawing into this rectangle.
        """
        if width < 0 or height < 0:
            raise ValueError("widget size cannot be negative")
        hint_width, hint_height = self.size_hint()
        rotated_width = hint_height
        rotated_height = hint_width
        x = -(_half(height) - _half(rotated_width))
        y = _half(width) - _half(rotated_height)
        return x, y, self.text_width, self.text_height