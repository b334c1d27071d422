"""Scientific-notation spin box model: limits, mantissa/exponent split, text."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional

_EPSILON = sys.float_info.epsilon

DEFAULT_VALUE = 0.5
DEFAULT_MINIMUM = -1.0
DEFAULT_MAXIMUM = 1.0
DEFAULT_DECIMALS = 3


def _bound(low: float, value: float, high: float) -> float:
    """Clamp value to [low, high]; a NaN value ends up at the lower bound."""
    if math.isnan(value):
        return low
    return max(low, min(value, high))


def _floor_log10(value: float) -> float:
    if math.isnan(value):
        return math.nan
    if value == 0:
        return -math.inf
    if math.isinf(value):
        return math.inf
    return float(math.floor(math.log10(value)))


@dataclass(frozen=True)
class Representation:
    """How the current value is split and written out."""

    mantissa: float
    exponent: int
    have_exponent: bool
    significant: int
    mantissa_text: str
    scientific_text: str
    units_text: str
    spin_minimum: float
    spin_maximum: float
    spin_decimals: int
    spin_step: float


class SciSpinBox:
    """A bounded real value shown as mantissa × 10^exponent with units."""

    def __init__(
        self,
        value: float = DEFAULT_VALUE,
        minimum: float = DEFAULT_MINIMUM,
        maximum: float = DEFAULT_MAXIMUM,
    ) -> None:
        self._minimum = float(min(minimum, maximum))
        self._maximum = float(maximum)
        self._value = _bound(self._minimum, float(value), self._maximum)
        self._force_sign = False
        self._units = ""
        self._decimals = DEFAULT_DECIMALS
        self.input_error = False
        self._exponent = 0
        self._refresh()

    # Read-only views ---------------------------------------------------

    @property
    def value(self) -> float:
        return self._value

    @property
    def minimum(self) -> float:
        return self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    @property
    def force_sign(self) -> bool:
        return self._force_sign

    @property
    def units(self) -> str:
        return self._units

    @property
    def decimals(self) -> int:
        return self._decimals

    # Setters -----------------------------------------------------------

    def set_value(self, value: float) -> bool:
        """Set the value, clamped to the limits. Return whether it changed."""
        value = _bound(self._minimum, float(value), self._maximum)
        if abs(value - self._value) > _EPSILON:
            self._value = value
            self._refresh()
            return True
        return False

    def set_minimum(self, minimum: float) -> bool:
        """Set the lower limit, never above the upper one. Return whether it changed."""
        minimum = min(float(minimum), self._maximum)
        if abs(minimum - self._minimum) > _EPSILON:
            self._minimum = minimum
            if self._value < self._minimum:
                self.set_value(self._minimum)
            return True
        return False

    def set_maximum(self, maximum: float) -> bool:
        """Set the upper limit, never below the lower one. Return whether it changed."""
        maximum = max(float(maximum), self._minimum)
        if abs(maximum - self._maximum) > _EPSILON:
            self._maximum = maximum
            if self._value > self._maximum:
                self.set_value(self._maximum)
            return True
        return False

    def set_force_sign(self, force: bool) -> bool:
        """Always show a sign in front of the number."""
        force = bool(force)
        if force != self._force_sign:
            self._force_sign = force
            self._refresh()
            return True
        return False

    def set_units(self, units: str) -> bool:
        """Set the units shown after the number."""
        if units != self._units:
            self._units = units
            self._refresh()
            return True
        return False

    def set_decimals(self, decimals: int) -> bool:
        """Set the minimum number of decimals shown."""
        if decimals < 0:
            raise ValueError("decimals cannot be negative")
        if decimals != self._decimals:
            self._decimals = decimals
            self._refresh()
            return True
        return False

    # Representation ----------------------------------------------------

    def significant(self) -> int:
        """Decimals needed to tell apart values across the current range."""
        abs_min = abs(self._minimum)
        span = self._maximum - self._minimum

        if span < _EPSILON:
            return self._decimals
        if abs_min < 10:
            return self._decimals

        min_digits = int(_floor_log10(abs_min)) - int(_floor_log10(span))
        return max(min_digits, self._decimals)

    def _split(self) -> int:
        exponent = _floor_log10(abs(self._value))
        if math.isfinite(exponent):
            result = int(exponent)
            if 0 <= result < 3:
                result = 0
            return result
        return 0

    def _refresh(self) -> None:
        if math.isfinite(self._value):
            self._exponent = self._split()

    def representation(self) -> Optional[Representation]:
        """The texts and spin settings for the current value, or None if not finite."""
        if not math.isfinite(self._value):
            return None

        exponent = self._split()
        magnitude = 10.0 ** exponent
        mantissa = self._value / magnitude
        sig = self.significant()
        width = sig + 2
        sign = "+" if self._force_sign else ""

        return Representation(
            mantissa=mantissa,
            exponent=exponent,
            have_exponent=exponent != 0,
            significant=sig,
            mantissa_text=f"%{sign}{width}.{sig}f" % mantissa,
            scientific_text=f"%{sign}{width}.{sig}e" % self._value,
            units_text=" " + self._units,
            spin_minimum=self._minimum / magnitude,
            spin_maximum=self._maximum / magnitude,
            spin_decimals=sig,
            spin_step=0.1 if sig > 1 else 1.0,
        )

    # Editing -----------------------------------------------------------

    def enter_scientific(self, text: str) -> bool:
        """Take a typed number. Return False and flag an error if it does not parse.

        Empty input keeps the current value.
        """
        if text == "":
            self.input_error = False
            self._refresh()
            return True

        try:
            if "_" in text:
                raise ValueError(text)
            value = float(text)
        except ValueError:
            self.input_error = True
            return False

        self.input_error = False
        self.set_value(value)
        return True

    def set_mantissa(self, mantissa: float) -> float:
        """Set the value from a mantissa under the shown exponent; return the value."""
        self._value = _bound(
            self._minimum, float(mantissa) * 10.0 ** self._exponent, self._maximum
        )
        return self._value