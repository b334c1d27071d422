"""Symbol histogram model: binning of decision values and axis layout."""

from __future__ import annotations

import cmath
import enum
import math
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .helpers import DEGREE_SIGN, format_quantity

DEFAULT_HISTORY_SIZE = 256
DEFAULT_ORDER_HINT = 2
LABEL_PRECISION = 3

DEFAULT_BACKGROUND_COLOR = (0, 0, 0)
DEFAULT_FOREGROUND_COLOR = (255, 255, 0)
DEFAULT_AXES_COLOR = (128, 128, 128)
DEFAULT_TEXT_COLOR = (255, 255, 255)
DEFAULT_INTERVAL_COLOR = (128, 128, 128, 128)

_EPSILON = sys.float_info.epsilon


class DecisionMode(enum.Enum):
    """Which property of a complex sample the decision is made on."""

    ARGUMENT = "argument"
    MODULUS = "modulus"


@dataclass
class DecisionRange:
    """The decision interval the histogram bins are spread over."""

    mode: DecisionMode = DecisionMode.ARGUMENT
    minimum: float = -math.pi
    maximum: float = math.pi
    bits: int = 1

    @property
    def intervals(self) -> int:
        """Number of decision intervals, two to the power of bits."""
        return 1 << self.bits

    def detect(self, sample: complex) -> float:
        """Map a complex sample to the quantity the decision is made on."""
        if self.mode is DecisionMode.ARGUMENT:
            return cmath.phase(sample)
        return abs(sample)


class Histogram:
    """Counts of decision values over a fixed number of bins."""

    def __init__(self, size: int = DEFAULT_HISTORY_SIZE) -> None:
        if size < 0:
            raise ValueError("histogram size cannot be negative")
        self.history: List[int] = [0] * size
        self.model: List[float] = []
        self.peak = 0
        self.decider: Optional[DecisionRange] = None

        self.update_decider = True
        self.draw_threshold = True
        self._bits = DEFAULT_ORDER_HINT

        self._data_range_override = 0.0
        self._display_range_override = 0.0
        self._units_override = ""

        self.background = DEFAULT_BACKGROUND_COLOR
        self.foreground = DEFAULT_FOREGROUND_COLOR
        self.axes = DEFAULT_AXES_COLOR
        self.text = DEFAULT_TEXT_COLOR
        self.interval = DEFAULT_INTERVAL_COLOR

    # Configuration -----------------------------------------------------

    @property
    def order_hint(self) -> int:
        """Bits per symbol used to widen selections."""
        return self._bits

    @order_hint.setter
    def order_hint(self, bits: int) -> None:
        if bits != self._bits:
            self._bits = bits
            self.reset()

    def resize(self, size: int) -> None:
        """Change the number of bins, clearing all counts."""
        if size < 0:
            raise ValueError("histogram size cannot be negative")
        self.history = [0] * size
        self.reset()

    def set_decider(self, decider: DecisionRange) -> None:
        """Attach a decision range; its bits become the order hint."""
        self.decider = decider
        self.order_hint = decider.bits

    def override_data_range(self, value: float) -> None:
        """Force the data range; zero or less restores the default."""
        self._data_range_override = value

    def override_display_range(self, value: float) -> None:
        """Force the display range; zero or less restores the default."""
        self._display_range_override = value

    def override_units(self, units: str) -> None:
        """Force the axis units; an empty string restores the default."""
        self._units_override = units

    def _is_argument(self) -> bool:
        return (
            self.decider is not None
            and self.decider.mode is DecisionMode.ARGUMENT
        )

    def data_range(self) -> float:
        """Span of the raw data: 2π for phases, 1 otherwise."""
        if self._data_range_override > 0:
            return self._data_range_override
        if self._is_argument():
            return 2 * math.pi
        return 1.0

    def display_range(self) -> float:
        """Span shown on the axis: 360 for phases, 1 otherwise."""
        if self._display_range_override > 0:
            return self._display_range_override
        if self._is_argument():
            return 360.0
        return 1.0

    def units(self) -> str:
        """Units of the horizontal axis labels."""
        if self._units_override:
            return self._units_override
        if self._is_argument():
            return DEGREE_SIGN
        return ""

    # Axis layout -------------------------------------------------------

    def division_length(self) -> Optional[float]:
        """Spacing between vertical grid lines, in display units.

        None when no decider is attached or its range is empty.
        """
        if self.decider is None:
            return None

        display = self.display_range()
        span = (self.decider.maximum - self.decider.minimum)
        span *= display / self.data_range()
        if not span > 0 or not math.isfinite(span):
            return None

        degrees = abs(display - 360) < _EPSILON
        if degrees:
            if span >= 180:
                return 45.0
            if span >= 90:
                return 15.0

        div = 10.0 ** math.floor(math.log10(span))
        if span / div < 5:
            div /= 2
            if span / div < 5:
                div /= 2.5
                if span / div < 5:
                    div /= 4
        return div

    def axis_labels(self) -> List[Tuple[float, str]]:
        """Grid line positions (0 to 1 across the plot) with their labels."""
        div = self.division_length()
        if div is None:
            return []

        data = self.data_range()
        display = self.display_range()
        start = self.decider.minimum / data * display
        end = self.decider.maximum / data * display
        span = end - start
        units = self.units()

        labels = []
        axis = math.floor(start / div)
        while axis * div <= end:
            position = (axis * div - start) / span
            if position >= 0:
                labels.append(
                    (
                        position,
                        format_quantity(
                            axis * div, LABEL_PRECISION, units, units == DEGREE_SIGN
                        ),
                    )
                )
            axis += 1
        return labels

    # Data --------------------------------------------------------------

    def _add(self, values: Iterable[float]) -> bool:
        low = self.decider.minimum
        delta = self.decider.maximum - low
        size = len(self.history)
        if delta == 0 or size == 0:
            return False

        changed = False
        for value in values:
            scaled = size * (value - low) / delta
            if not math.isfinite(scaled):
                continue
            index = int(scaled)
            if 0 <= index < size:
                self.history[index] += 1
                if self.history[index] > self.peak:
                    self.peak = self.history[index]
                changed = True
        return changed

    def feed(self, samples: Sequence[float]) -> bool:
        """Count real decision values. Return whether any bin changed."""
        if self.decider is None or len(samples) == 0:
            return False
        return self._add(float(sample) for sample in samples)

    def feed_complex(self, samples: Sequence[complex]) -> bool:
        """Count complex samples by phase or modulus, per the decider."""
        if self.decider is None or len(samples) == 0:
            return False
        detect = self.decider.detect
        return self._add(detect(complex(sample)) for sample in samples)

    def normalized(self) -> List[float]:
        """Bin counts scaled so that the tallest bin is 1."""
        peak = self.peak or 1
        return [count / peak for count in self.history]

    def reset(self) -> None:
        """Clear all counts."""
        self.history = [0] * len(self.history)
        self.peak = 0

    def set_snr_model(self, model: Sequence[float]) -> bool:
        """Store a reference curve if it matches the bin count."""
        if len(model) != len(self.history):
            return False
        self.model = [float(value) for value in model]
        return True

    def reset_decider(self) -> bool:
        """Restore the decider to the full data range.

        Return whether a decider is attached. Limits only change when
        update_decider is set.
        """
        if self.decider is None:
            return False
        if self.update_decider:
            span = self.data_range()
            if self.decider.mode is DecisionMode.MODULUS:
                self.decider.minimum = 0.0
                self.decider.maximum = span
            else:
                self.decider.minimum = -0.5 * span
                self.decider.maximum = 0.5 * span
            self.reset()
        return True

    def select(self, start: float, end: float) -> Optional[Tuple[float, float]]:
        """Narrow the decider to a selection given as fractions of the plot.

        The selection is widened by half an interval on each side before
        it is applied. Returns the selected limits in data units, or None
        without a decider.
        """
        if start > end:
            start, end = end, start

        add = (end - start) / (2 * (1 << self._bits))
        start -= add
        end += add

        if self.decider is None:
            return None

        low = self.decider.minimum
        span = self.decider.maximum - low

        if self.update_decider:
            self.decider.minimum = low + start * span
            self.decider.maximum = low + end * span
            self.reset()

        return low + (start + add) * span, low + (end - add) * span