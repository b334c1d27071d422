"""Two-state indicator light model."""

from __future__ import annotations

import enum


class LEDColor(enum.Enum):
    """Available light colours."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"


class LED:
    """An indicator that is on or off, in one of a few colours."""

    def __init__(self, color: LEDColor = LEDColor.RED, on: bool = False) -> None:
        self.color = LEDColor(color)
        self.on = bool(on)

    def set_color(self, color: LEDColor) -> bool:
        """Change the colour. Return whether it changed."""
        color = LEDColor(color)
        if color is self.color:
            return False
        self.color = color
        return True

    def set_on(self, on: bool) -> bool:
        """Switch the light. Return whether the state changed."""
        on = bool(on)
        if on == self.on:
            return False
        self.on = on
        return True

    def icon_name(self) -> str:
        """Name of the image that shows the current state."""
        state = "on" if self.on else "off"
        return f"led_{state}_{self.color.value}.svg"