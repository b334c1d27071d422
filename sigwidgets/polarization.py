"""Polarization ellipse view model built from pairs of Jones vector samples."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .phaseview import SHRINK, SampleRing

DEFAULT_HISTORY_SIZE = 256
DEFAULT_BACKGROUND_COLOR = (0, 0, 0)
DEFAULT_FOREGROUND_COLOR = (255, 255, 255)
DEFAULT_TEXT_COLOR = (255, 255, 255)
DEFAULT_AXES_COLOR = (128, 128, 128)

PointF = Tuple[float, float]


@dataclass(frozen=True)
class Ellipse:
    """The polarization ellipse of one sample pair, in screen coordinates.

    The ellipse is the image of a circle of diameter 1 under the linear map
    whose columns are the real and imaginary parts of the two Jones
    components, translated to the view centre.
    """

    center: PointF
    jx: complex
    jy: complex
    alpha: int

    @property
    def matrix(self) -> Tuple[float, float, float, float, float, float]:
        """Affine map as (m11, m12, m21, m22, dx, dy)."""
        return (
            self.jx.real,
            self.jy.real,
            self.jx.imag,
            self.jy.imag,
            self.center[0],
            self.center[1],
        )

    def point_at(self, angle: float) -> PointF:
        """Screen position of the ellipse point at a parametric angle."""
        u = 0.5 * math.cos(angle)
        v = 0.5 * math.sin(angle)
        return (
            self.center[0] + self.jx.real * u + self.jx.imag * v,
            self.center[1] + self.jy.real * u + self.jy.imag * v,
        )


class PolarizationView:
    """Draws the polarization ellipses of horizontal/vertical sample pairs."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("view size cannot be negative")
        self.width = width
        self.height = height
        self.h_history = SampleRing(history_size)
        self.v_history = SampleRing(history_size)
        self.zoom = 1.0
        self.gain = 1.0
        self.channel_phase = 1 + 0j
        self.background = DEFAULT_BACKGROUND_COLOR
        self.foreground = DEFAULT_FOREGROUND_COLOR
        self.text = DEFAULT_TEXT_COLOR
        self.axes = DEFAULT_AXES_COLOR

    @property
    def center(self) -> Tuple[int, int]:
        """Screen position of the origin."""
        return self.width // 2, self.height // 2

    @property
    def max_radius(self) -> float:
        """Scale applied to unit-amplitude samples."""
        return SHRINK * min(self.width, self.height) * self.zoom

    def set_history_size(self, length: int) -> None:
        """Change how many sample pairs are kept, discarding the current ones."""
        self.h_history.resize(length)
        self.v_history.resize(length)

    def feed(
        self, h_samples: Sequence[complex], v_samples: Sequence[complex]
    ) -> None:
        """Add pairs of horizontal and vertical samples."""
        if len(h_samples) != len(v_samples):
            raise ValueError("horizontal and vertical samples differ in length")
        self.h_history.feed(h_samples)
        self.v_history.feed(v_samples)

    def set_channel_phase(self, phase: float) -> None:
        """Set the phase correction applied to the vertical channel."""
        self.channel_phase = cmath.exp(-1j * phase)

    def height_for_width(self, width: int) -> int:
        """Preferred height for a given width: the view prefers to be square."""
        width = int(width)
        if width < 0:
            raise ValueError("width cannot be negative")
        return width

    def ellipses(self) -> List[Ellipse]:
        """One ellipse per stored sample pair, oldest first."""
        size = self.v_history.size
        amount = len(self.v_history)
        skip = size - amount
        scale = self.max_radius * self.gain
        cx, cy = self.center

        result = []
        pairs = zip(self.h_history.samples(), self.v_history.samples())
        for p, (h, v) in enumerate(pairs, start=1):
            age = (p + skip) / size
            result.append(
                Ellipse(
                    center=(float(cx), float(cy)),
                    jx=scale * h,
                    jy=scale * v * self.channel_phase,
                    alpha=int(255 * age ** 4),
                )
            )
        return result